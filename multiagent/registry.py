"""Central registries for games and search algorithms."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Tuple


GameFactory = Callable[..., Any]
SearchFn = Callable[..., Any]

_GAME_REGISTRY: Dict[str, Tuple[GameFactory, Dict[str, Any]]] = {}
_SEARCH_REGISTRY: Dict[str, SearchFn] = {}


def register_game(game_id: str, entry_point: GameFactory, **default_kwargs: Any) -> None:
    """Register a factory returning the initial state of a game."""
    if game_id in _GAME_REGISTRY:
        raise ValueError(f"Game id '{game_id}' is already registered.")
    _GAME_REGISTRY[game_id] = (entry_point, dict(default_kwargs))


def make_game(game_id: str, **overrides: Any) -> Any:
    """Build the initial state of a registered game using optional parameter overrides."""
    if game_id not in _GAME_REGISTRY:
        raise KeyError(f"Game id '{game_id}' is not registered.")

    entry_point, defaults = _GAME_REGISTRY[game_id]
    params = {**defaults, **overrides}
    return entry_point(**params)


def list_games() -> Iterable[str]:
    """Return iterable of registered game identifiers."""
    return tuple(_GAME_REGISTRY.keys())


def register_search(search_id: str, fn: SearchFn) -> None:
    """Register a search algorithm with the ``(state, depth, eval_fn, agent_role_fn)`` signature."""
    if search_id in _SEARCH_REGISTRY:
        raise ValueError(f"Search id '{search_id}' is already registered.")
    _SEARCH_REGISTRY[search_id] = fn


def get_search(search_id: str) -> SearchFn:
    """Retrieve a registered search algorithm."""
    if search_id not in _SEARCH_REGISTRY:
        raise KeyError(f"Search id '{search_id}' is not registered.")
    return _SEARCH_REGISTRY[search_id]


def list_searches() -> Iterable[str]:
    """Return iterable of registered search identifiers."""
    return tuple(_SEARCH_REGISTRY.keys())
