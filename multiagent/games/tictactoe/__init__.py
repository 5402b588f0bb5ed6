"""Tic-tac-toe rules and evaluation."""

from .state import Player, Position, TicTacToeState
from .utils import BOARD_SIZE, is_board_full, line_winner
from .eval import winner_evaluator

__all__ = [
    "Player",
    "Position",
    "TicTacToeState",
    "BOARD_SIZE",
    "is_board_full",
    "line_winner",
    "winner_evaluator",
]
