"""Search algorithms (minimax, expectimax) and agent roles."""

from .roles import AgentRole, role_map
from .result import SearchResult, SearchStats
from .minimax import minimax
from .expectimax import expectimax
from ..registry import list_searches, register_search

if "minimax" not in list_searches():
    register_search("minimax", minimax)
if "expectimax" not in list_searches():
    register_search("expectimax", expectimax)

__all__ = [
    "AgentRole",
    "role_map",
    "SearchResult",
    "SearchStats",
    "minimax",
    "expectimax",
]
