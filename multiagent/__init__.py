"""Generic game-tree search: minimax with alpha-beta pruning and expectimax."""

from .games import GameState, enumerate_actions
from .search import (
    AgentRole,
    SearchResult,
    SearchStats,
    expectimax,
    minimax,
    role_map,
)

__all__ = [
    "AgentRole",
    "GameState",
    "SearchResult",
    "SearchStats",
    "enumerate_actions",
    "expectimax",
    "minimax",
    "role_map",
]
