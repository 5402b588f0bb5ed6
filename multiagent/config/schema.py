"""Configuration schema for search runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import yaml

from multiagent.registry import list_games, list_searches
from multiagent.search import AgentRole


@dataclass
class GameConfig:
    id: str = "tictactoe"
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SearchConfig:
    algorithm: str = "minimax"
    depth: Optional[int] = None
    # agent name -> role name ("maximizer", "minimizer", "random")
    roles: Dict[str, str] = field(default_factory=dict)

    def classifier(self) -> Callable[[Any], AgentRole]:
        roles = {name: AgentRole.from_name(role) for name, role in self.roles.items()}

        def classify(agent: Any) -> AgentRole:
            key = getattr(agent, "name", str(agent))
            if key not in roles:
                raise ValueError(f"No role configured for agent {key!r}")
            return roles[key]

        return classify


@dataclass
class AppConfig:
    game: GameConfig = field(default_factory=GameConfig)
    search: SearchConfig = field(default_factory=SearchConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        game_data = data.get("game", {})
        game_id = str(game_data.get("id", "tictactoe"))
        if game_id not in list_games():
            raise ValueError(
                f"Unknown game '{game_id}', expected one of {list(list_games())}"
            )
        game = GameConfig(
            id=game_id,
            params=dict(game_data.get("params", {})),
        )

        search_data = data.get("search", {})
        algorithm = str(search_data.get("algorithm", "minimax"))
        if algorithm not in list_searches():
            raise ValueError(
                f"Unknown search algorithm '{algorithm}', expected one of {list(list_searches())}"
            )

        depth = search_data.get("depth")
        if depth is not None:
            depth = int(depth)
            if depth < 0:
                raise ValueError(f"search.depth must be >= 0, got {depth}")

        roles = {str(agent): str(role) for agent, role in search_data.get("roles", {}).items()}
        for role in roles.values():
            AgentRole.from_name(role)
        if algorithm == "minimax" and any(
            AgentRole.from_name(role) is AgentRole.RANDOM for role in roles.values()
        ):
            raise ValueError("minimax does not support random agents, use expectimax")

        search = SearchConfig(algorithm=algorithm, depth=depth, roles=roles)
        return cls(game=game, search=search)


def load_config(path: Union[str, Path]) -> AppConfig:
    """Load AppConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)
