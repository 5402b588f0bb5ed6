"""Tic-tac-toe evaluation functions for search algorithms."""

from __future__ import annotations

from typing import Callable

from .state import Player, TicTacToeState


def winner_evaluator(player: Player) -> Callable[[TicTacToeState], float]:
    """
    Evaluation function scoring states from ``player``'s point of view.

    +1 when ``player`` has three in a line, -1 when the opponent has,
    0 for draws and unfinished positions.
    """

    def evaluate(state: TicTacToeState) -> float:
        winner = state.winner()
        if winner is None:
            return 0.0
        return 1.0 if winner == player else -1.0

    return evaluate
