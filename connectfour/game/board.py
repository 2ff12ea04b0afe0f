"""
board.py - Board representation and core game mechanics for Connect Four

This module implements the Board class which owns the grid, places and rolls
back discs, and answers the full/win/status queries. It knows nothing about
players or turn order; callers decide whose mark goes where and when a round
is over.
"""

import operator
from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.utils import (ROWS, COLS, WINDOWS, Mark, GameResult,
                               is_valid_position, render_board_ascii)
from connectfour.game.errors import (InvalidColumnError, ColumnFullError,
                                     InvalidPositionError, NothingToUndoError)


class Move(NamedTuple):
    """Where a disc landed; enough to undo the placement exactly."""
    column: int
    row: int


def _as_index(value, error):
    if isinstance(value, (bool, np.bool_)):
        raise error
    try:
        return operator.index(value)
    except TypeError:
        raise error from None


class Board:
    """
    Represents a Connect Four game board.

    Row 0 is the top of the grid and row ROWS-1 the bottom, so discs fill
    each column from the highest row index downwards.
    """

    def __init__(self):
        """Initialize an empty Connect Four board."""
        self.reset()

    def reset(self):
        """Reset the board to an empty state."""
        debug.debug("Resetting board", "board")
        self.grid = np.full((ROWS, COLS), Mark.EMPTY.value, dtype=np.int8)

    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.

        Returns:
            A new Board instance with the same grid
        """
        debug.trace("Creating board copy", "board")
        new_board = Board()
        new_board.grid = self.grid.copy()
        return new_board

    @property
    def rows(self) -> int:
        return ROWS

    @property
    def cols(self) -> int:
        return COLS

    def cell(self, row: int, column: int) -> Mark:
        """Get the mark at a position."""
        if not is_valid_position(row, column):
            raise InvalidPositionError(row, column)
        return Mark(int(self.grid[row, column]))

    def place_disc(self, column: int, mark: Mark) -> Move:
        """
        Drop a disc into a column.

        Args:
            column: The column to place a disc (0-indexed)
            mark: The mark to place (Mark.A or Mark.B)

        Returns:
            The Move describing where the disc landed

        Raises:
            InvalidColumnError: if column is outside [0, COLS)
            ColumnFullError: if the column has no empty cell
        """
        if mark not in (Mark.A, Mark.B):
            raise ValueError(f"Cannot place {mark!r}")

        column = _as_index(column, InvalidColumnError(column))
        if not 0 <= column < COLS:
            debug.debug(f"Rejected move: column {column} out of bounds", "board")
            raise InvalidColumnError(column)

        # Find the lowest empty row in the column
        for row in range(ROWS - 1, -1, -1):
            if self.grid[row, column] == Mark.EMPTY.value:
                self.grid[row, column] = mark.value
                debug.trace(f"Placed {mark.name} at ({row}, {column})", "board")
                return Move(column, row)

        debug.debug(f"Rejected move: column {column} is full", "board")
        raise ColumnFullError(column)

    def undo_place(self, row: int, column: int) -> None:
        """
        Clear an occupied cell, rolling back a placement.

        Gravity is not re-validated: undoing anything other than the top disc
        of a column leaves a floating disc behind.

        Raises:
            InvalidPositionError: if (row, column) is outside the board
            NothingToUndoError: if the cell is already empty
        """
        row = _as_index(row, InvalidPositionError(row, column))
        column = _as_index(column, InvalidPositionError(row, column))
        if not is_valid_position(row, column):
            raise InvalidPositionError(row, column)

        if self.grid[row, column] == Mark.EMPTY.value:
            debug.warning(f"Nothing to undo at ({row}, {column})", "board")
            raise NothingToUndoError(row, column)

        debug.trace(f"Undoing disc at ({row}, {column})", "board")
        self.grid[row, column] = Mark.EMPTY.value

    def check_win(self, mark: Mark) -> bool:
        """
        Check whether any line of four cells on the board is all `mark`.

        Every window in all four orientations is examined; the result does
        not depend on which move was made last.
        """
        return bool(self.get_winning_line(mark))

    def get_winning_line(self, mark: Mark) -> List[Tuple[int, int]]:
        """
        Get the positions of a winning line for a mark.

        Returns:
            List of (row, col) positions of the first qualifying line in
            scan order (horizontal, vertical, down-right, up-right), or an
            empty list if there is none
        """
        if mark == Mark.EMPTY:
            return []

        value = mark.value
        grid = self.grid
        for window in WINDOWS:
            if all(grid[r, c] == value for r, c in window):
                return list(window)
        return []

    def is_full(self) -> bool:
        """Check whether every column is filled to the top."""
        return bool(np.all(self.grid[0] != Mark.EMPTY.value))

    def available_columns(self) -> List[int]:
        """
        Get the columns that can still take a disc.

        Returns:
            Ascending list of column indices whose top cell is empty
        """
        return [col for col in range(COLS) if self.grid[0, col] == Mark.EMPTY.value]

    def result(self, last_mark: Optional[Mark] = None) -> GameResult:
        """
        Get the status of the board after a move.

        Args:
            last_mark: The mark of the player who just moved. When omitted
                both marks are checked, A first.

        Returns:
            A win for the mark holding a line of four, DRAW when the board
            is full, IN_PROGRESS otherwise
        """
        marks = [last_mark] if last_mark is not None else [Mark.A, Mark.B]
        for mark in marks:
            if self.check_win(mark):
                return GameResult.win_for(mark)

        if self.is_full():
            return GameResult.DRAW

        return GameResult.IN_PROGRESS

    def count(self, mark: Mark) -> int:
        """Number of cells holding a mark."""
        return int(np.count_nonzero(self.grid == mark.value))

    def get_state(self) -> np.ndarray:
        """
        Get a snapshot of the grid.

        Returns:
            Read-only copy of the grid (ROWS x COLS of mark values)
        """
        snapshot = self.grid.copy()
        snapshot.flags.writeable = False
        return snapshot

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    __hash__ = None
