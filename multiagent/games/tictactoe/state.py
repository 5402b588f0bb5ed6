"""Tic-tac-toe rules on immutable states, for search algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from ..game_state import GameState
from .utils import BOARD_SIZE, is_board_full, line_winner


class Player(Enum):
    X = 1
    O = -1

    def other(self) -> "Player":
        return Player(-self.value)


class Position(Enum):
    """The nine cells, row-major. Values are the flattened board index."""

    TOP_LEFT = 0
    TOP_CENTER = 1
    TOP_RIGHT = 2
    CENTER_LEFT = 3
    CENTER = 4
    CENTER_RIGHT = 5
    BOTTOM_LEFT = 6
    BOTTOM_CENTER = 7
    BOTTOM_RIGHT = 8

    @property
    def coords(self) -> Tuple[int, int]:
        return divmod(self.value, BOARD_SIZE)


_SYMBOLS = {0: " ", 1: "X", -1: "O"}


@dataclass(frozen=True, eq=False)
class TicTacToeState(GameState[Position, Player]):
    """
    Board plus the player to move (``None`` once someone won or the grid is full).

    Board cells: 0 empty, 1 for X, -1 for O. The array is read-only.
    """

    board: np.ndarray
    active_player: Optional[Player]

    action_type = Position

    @classmethod
    def initial(cls) -> "TicTacToeState":
        board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        board.flags.writeable = False
        return cls(board=board, active_player=Player.X)

    @classmethod
    def from_string(cls, layout: str) -> "TicTacToeState":
        """
        Build a state from nine characters ``X``, ``O`` or ``.`` (row-major).

        Whitespace is ignored. The player to move is derived from the counts.
        """
        cells = [ch for ch in layout if not ch.isspace()]
        if len(cells) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"Expected 9 cells, got {len(cells)}")
        tokens = {"X": 1, "O": -1, ".": 0}
        try:
            flat = [tokens[ch.upper()] for ch in cells]
        except KeyError as exc:
            raise ValueError(f"Unknown cell symbol: {exc.args[0]!r}") from None
        board = np.array(flat, dtype=np.int8).reshape(BOARD_SIZE, BOARD_SIZE)
        board.flags.writeable = False
        x_count = int(np.sum(board == 1))
        o_count = int(np.sum(board == -1))
        if x_count - o_count not in (0, 1):
            raise ValueError("X moves first, so X must have as many claims as O or one more")
        if line_winner(board) is not None or is_board_full(board):
            active = None
        else:
            active = Player.X if x_count == o_count else Player.O
        return cls(board=board, active_player=active)

    def cell(self, position: Position) -> Optional[Player]:
        token = int(self.board[position.coords])
        return Player(token) if token else None

    def winner(self) -> Optional[Player]:
        token = line_winner(self.board)
        return Player(token) if token is not None else None

    def next_agent(self) -> Optional[Player]:
        return self.active_player

    def successor(self, action: Position) -> Optional["TicTacToeState"]:
        if self.active_player is None or not isinstance(action, Position):
            return None
        if self.cell(action) is not None:
            return None

        board = self.board.copy()
        board[action.coords] = self.active_player.value
        board.flags.writeable = False

        if line_winner(board) is not None or is_board_full(board):
            next_player = None
        else:
            next_player = self.active_player.other()
        return TicTacToeState(board=board, active_player=next_player)

    def render(self) -> str:
        rows = [
            " | ".join(_SYMBOLS[int(token)] for token in row)
            for row in self.board
        ]
        return "\n--+---+--\n".join(rows)

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TicTacToeState):
            return NotImplemented
        return self.active_player == other.active_player and np.array_equal(
            self.board, other.board
        )

    def __hash__(self) -> int:
        return hash((self.board.tobytes(), self.active_player))
