"""
errors.py - Exceptions raised by the Connect Four game engine

A failed operation never changes the board, so every error here can be
handled by the caller without restoring any state.
"""


class ConnectFourError(Exception):
    """Base class for all game errors."""


class MoveError(ConnectFourError, ValueError):
    """A placement was rejected; the caller may ask for another column."""


class InvalidColumnError(MoveError):
    def __init__(self, column):
        super().__init__(f"Column {column} is out of range")
        self.column = column


class ColumnFullError(MoveError):
    def __init__(self, column):
        super().__init__(f"Column {column} is full")
        self.column = column


class InvalidPositionError(MoveError):
    def __init__(self, row, column):
        super().__init__(f"Position ({row}, {column}) is outside the board")
        self.row = row
        self.column = column


class NothingToUndoError(ConnectFourError):
    """Rollback was requested on an empty cell (a caller ordering bug)."""

    def __init__(self, row, column):
        super().__init__(f"Nothing to undo at ({row}, {column})")
        self.row = row
        self.column = column


class GameOverError(ConnectFourError):
    """A move was attempted after the round reached a terminal result."""


class NoAvailableMovesError(ConnectFourError):
    """A move was requested from a board with no open column."""
