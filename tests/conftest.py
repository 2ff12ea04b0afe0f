import numpy as np
import pytest

from connectfour.debug import debug, DebugLevel
from connectfour.utils import ROWS, COLS, Mark
from connectfour.game.board import Board

SYMBOL_VALUES = {".": Mark.EMPTY.value, "X": Mark.A.value, "O": Mark.B.value}

# Full board with no line of four anywhere (22 X, 20 O)
DRAWN_ROWS = [
    "XOXOXOX",
    "XOXOXOX",
    "OXOXOXO",
    "OXOXOXO",
    "XOXOXOX",
    "XOXOXOX",
]


def board_from_rows(rows):
    """Build a board from ROWS strings, top row first, using '.', 'X' and 'O'."""
    assert len(rows) == ROWS
    board = Board()
    board.grid = np.array([[SYMBOL_VALUES[ch] for ch in row] for row in rows], dtype=np.int8)
    assert board.grid.shape == (ROWS, COLS)
    return board


@pytest.fixture
def make_board():
    return board_from_rows


@pytest.fixture
def drawn_rows():
    return list(DRAWN_ROWS)


@pytest.fixture(autouse=True)
def quiet_logging():
    debug.configure(level=DebugLevel.WARNING, components=[])
    yield
