"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board engine, its errors, the participants and
round management. Only the board and errors are imported here; players and
rules depend on the AI package, which itself depends on the board.
"""

from connectfour.game.board import Board, Move
from connectfour.game.errors import (ConnectFourError, MoveError, InvalidColumnError,
                                     ColumnFullError, InvalidPositionError,
                                     NothingToUndoError, GameOverError,
                                     NoAvailableMovesError)

__all__ = ['Board', 'Move', 'ConnectFourError', 'MoveError', 'InvalidColumnError',
           'ColumnFullError', 'InvalidPositionError', 'NothingToUndoError',
           'GameOverError', 'NoAvailableMovesError']
