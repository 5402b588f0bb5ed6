"""Game-state abstraction and bundled games."""

from .actions import enumerate_actions
from .game_state import GameState
from .tictactoe import Player, Position, TicTacToeState
from ..registry import list_games, register_game

if "tictactoe" not in list_games():
    register_game("tictactoe", TicTacToeState.initial)

__all__ = [
    "GameState",
    "enumerate_actions",
    "Player",
    "Position",
    "TicTacToeState",
]
