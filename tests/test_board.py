import random

import numpy as np
import pytest

from connectfour.utils import ROWS, COLS, Mark, GameResult
from connectfour.game.board import Board, Move
from connectfour.game.errors import (InvalidColumnError, ColumnFullError,
                                     InvalidPositionError, NothingToUndoError, MoveError)


def assert_gravity(board):
    for col in range(COLS):
        column = [board.cell(row, col) for row in range(ROWS)]
        occupied = [mark != Mark.EMPTY for mark in column]
        # Once a disc is seen going down, everything below it is occupied
        first = occupied.index(True) if True in occupied else ROWS
        assert all(occupied[first:]), f"floating disc in column {col}"


def test_new_board_is_empty():
    board = Board()
    assert board.grid.shape == (ROWS, COLS)
    assert board.count(Mark.EMPTY) == ROWS * COLS
    assert board.available_columns() == list(range(COLS))
    assert not board.is_full()
    assert board.result() == GameResult.IN_PROGRESS


def test_column_fills_bottom_up():
    board = Board()
    rows = [board.place_disc(0, Mark.A).row for _ in range(4)]
    assert rows == [5, 4, 3, 2]
    assert board.check_win(Mark.A)
    assert not board.check_win(Mark.B)
    assert board.result(Mark.A) == GameResult.A_WINS


def test_place_disc_returns_move():
    board = Board()
    assert board.place_disc(3, Mark.B) == Move(column=3, row=ROWS - 1)
    assert board.cell(ROWS - 1, 3) == Mark.B


@pytest.mark.parametrize("column", [-1, COLS, 100])
def test_out_of_range_column_rejected(column):
    board = Board()
    before = board.copy()
    with pytest.raises(InvalidColumnError):
        board.place_disc(column, Mark.A)
    assert board == before


def test_non_integer_column_rejected():
    with pytest.raises(InvalidColumnError):
        Board().place_disc("3", Mark.A)


def test_numpy_integer_column_accepted():
    board = Board()
    assert board.place_disc(np.int64(2), Mark.A) == Move(2, ROWS - 1)


def test_full_column_rejected():
    board = Board()
    for i in range(ROWS):
        board.place_disc(4, Mark.A if i % 2 == 0 else Mark.B)
    before = board.copy()
    with pytest.raises(ColumnFullError):
        board.place_disc(4, Mark.A)
    assert board == before
    assert 4 not in board.available_columns()


def test_move_errors_are_value_errors():
    assert issubclass(InvalidColumnError, MoveError)
    assert issubclass(ColumnFullError, ValueError)


def test_cannot_place_empty_mark():
    with pytest.raises(ValueError):
        Board().place_disc(0, Mark.EMPTY)


def test_no_turn_check():
    board = Board()
    board.place_disc(0, Mark.A)
    board.place_disc(1, Mark.A)
    assert board.count(Mark.A) == 2


def test_placement_accepted_after_win():
    board = Board()
    for _ in range(4):
        board.place_disc(0, Mark.A)
    board.place_disc(1, Mark.B)
    assert board.cell(ROWS - 1, 1) == Mark.B


def test_undo_restores_board(make_board):
    board = make_board([
        ".......",
        ".......",
        "..X....",
        "..O.X..",
        ".XOOXO.",
        "OXXOOXX",
    ])
    for col in board.available_columns():
        before = board.copy()
        move = board.place_disc(col, Mark.B)
        board.undo_place(move.row, move.column)
        assert board == before


def test_undo_empty_cell_raises():
    board = Board()
    with pytest.raises(NothingToUndoError):
        board.undo_place(ROWS - 1, 0)
    assert board == Board()


def test_undo_out_of_bounds_raises():
    with pytest.raises(InvalidPositionError):
        Board().undo_place(ROWS, 0)


def test_gravity_holds_through_random_play():
    rng = random.Random(7)
    board = Board()
    mark = Mark.A
    while board.available_columns():
        board.place_disc(rng.choice(board.available_columns()), mark)
        mark = mark.other()
        assert_gravity(board)
    assert board.is_full()


def test_gravity_holds_with_top_undo():
    rng = random.Random(3)
    board = Board()
    moves = []
    for _ in range(20):
        moves.append(board.place_disc(rng.choice(board.available_columns()), Mark.A))
    for move in reversed(moves[10:]):
        board.undo_place(move.row, move.column)
        assert_gravity(board)
    assert board.count(Mark.A) == 10


def test_is_full_requires_every_top_cell(make_board, drawn_rows):
    assert make_board(drawn_rows).is_full()

    rows = list(drawn_rows)
    rows[0] = rows[0][:6] + "."
    board = make_board(rows)
    assert board.count(Mark.EMPTY) == 1
    assert not board.is_full()
    assert board.available_columns() == [6]


def test_full_board_without_line_is_draw(make_board, drawn_rows):
    board = make_board(drawn_rows)
    assert not board.check_win(Mark.A)
    assert not board.check_win(Mark.B)
    assert board.result() == GameResult.DRAW
    assert board.available_columns() == []


def test_copy_is_independent():
    board = Board()
    board.place_disc(0, Mark.A)
    clone = board.copy()
    clone.place_disc(0, Mark.B)
    assert board.count(Mark.B) == 0
    assert clone != board


def test_state_snapshot_is_read_only():
    board = Board()
    board.place_disc(2, Mark.A)
    state = board.get_state()
    assert state[ROWS - 1, 2] == Mark.A.value
    with pytest.raises(ValueError):
        state[0, 0] = Mark.B.value
    assert board.grid.flags.writeable


def test_render():
    board = Board()
    board.place_disc(0, Mark.A)
    board.place_disc(1, Mark.B)
    lines = board.render().splitlines()
    assert len(lines) == ROWS + 1
    assert lines[0] == ". . . . . . ."
    assert lines[ROWS - 1] == "X O . . . . ."
    assert lines[-1] == "0 1 2 3 4 5 6"
    assert str(board) == board.render()


@pytest.mark.parametrize("column", [True, False, np.bool_(True)])
def test_boolean_column_rejected(column):
    board = Board()
    with pytest.raises(InvalidColumnError):
        board.place_disc(column, Mark.A)
    assert board == Board()
