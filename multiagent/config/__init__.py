"""Config package exports."""

from .schema import AppConfig, GameConfig, SearchConfig, load_config

__all__ = [
    "AppConfig",
    "GameConfig",
    "SearchConfig",
    "load_config",
]
