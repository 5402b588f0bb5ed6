"""Shared utilities for tic-tac-toe game logic."""

from __future__ import annotations

from typing import Optional

import numpy as np

BOARD_SIZE = 3


def line_winner(board: np.ndarray) -> Optional[int]:
    """
    Token (1 or -1) owning a full row, column or diagonal, else ``None``.

    Args:
        board: ``(3, 3)`` array with 0 for empty cells and +-1 for claims.
    """
    lines = [
        *board.sum(axis=1),
        *board.sum(axis=0),
        np.trace(board),
        np.trace(np.fliplr(board)),
    ]
    for total in lines:
        if total == BOARD_SIZE:
            return 1
        if total == -BOARD_SIZE:
            return -1
    return None


def is_board_full(board: np.ndarray) -> bool:
    return bool(np.all(board != 0))
