"""
utils.py - Constants, enumerations and helpers for the Connect Four game

This module provides the board dimensions, the cell marks, game results and
line directions shared by the board engine, the heuristic opponent and the
interfaces.
"""

from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of discs in a row to win


class Mark(Enum):
    """Contents of a single cell: empty or owned by one of the two players."""
    EMPTY = 0
    A = 1    # First player
    B = 2    # Second player

    def other(self) -> 'Mark':
        """Get the opposing mark."""
        if self == Mark.A:
            return Mark.B
        elif self == Mark.B:
            return Mark.A
        return Mark.EMPTY

    @property
    def symbol(self) -> str:
        return MARK_SYMBOLS[self]

    def __str__(self):
        return self.symbol


MARK_SYMBOLS = {
    Mark.EMPTY: ".",
    Mark.A: "X",
    Mark.B: "O",
}


class GameResult(Enum):
    """Enumeration representing the outcome of a round."""
    IN_PROGRESS = auto()
    A_WINS = auto()
    B_WINS = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the round has reached a terminal state."""
        return self != GameResult.IN_PROGRESS

    def winner(self) -> Optional[Mark]:
        """Get the winning mark, or None for a draw or an unfinished round."""
        if self == GameResult.A_WINS:
            return Mark.A
        if self == GameResult.B_WINS:
            return Mark.B
        return None

    @staticmethod
    def win_for(mark: Mark) -> 'GameResult':
        if mark == Mark.A:
            return GameResult.A_WINS
        if mark == Mark.B:
            return GameResult.B_WINS
        raise ValueError(f"No win result for mark {mark!r}")


class Direction(Enum):
    """Enumeration representing line orientations for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # Diagonal from top-left to bottom-right
    DIAGONAL_UP = auto()  # Diagonal from bottom-left to top-right


# Direction vectors (row, col) for each direction
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1)
}


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def iter_windows() -> Iterator[List[Tuple[int, int]]]:
    """
    Yield every line of CONNECT_N cells that fits on the board.

    Windows are produced orientation by orientation in the order of
    DIRECTION_VECTORS, each scanned row-major over its starting cells.
    """
    span = CONNECT_N - 1
    for dr, dc in DIRECTION_VECTORS.values():
        for row in range(ROWS):
            for col in range(COLS):
                if not is_valid_position(row + dr * span, col + dc * span):
                    continue
                yield [(row + dr * i, col + dc * i) for i in range(CONNECT_N)]


# The set of windows never changes, so compute it once
WINDOWS = tuple(tuple(window) for window in iter_windows())


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the board as ASCII art.

    Args:
        grid: The game grid (ROWS x COLS of mark values)

    Returns:
        ASCII representation of the board with column numbers underneath
    """
    lines = []
    for row in range(ROWS):
        lines.append(" ".join(Mark(int(grid[row, col])).symbol for col in range(COLS)))
    lines.append(" ".join(str(col) for col in range(COLS)))
    return "\n".join(lines)
