"""
heuristic.py - One-move heuristic opponent for Connect Four

The opponent looks exactly one move ahead:

1. Take an immediate win if one exists
2. Otherwise block the opponent's immediate win
3. Otherwise play a uniformly random open column

Candidate moves are tried on the board itself and rolled back straight after
the check, so the board is unchanged when a column is returned.
"""

import random
from typing import List, Optional

from connectfour.debug import debug
from connectfour.utils import Mark
from connectfour.game.board import Board
from connectfour.game.errors import NoAvailableMovesError


def _wins_at(board: Board, column: int, mark: Mark) -> bool:
    """Place `mark` in `column`, check for a win, and undo the placement."""
    move = board.place_disc(column, mark)
    try:
        return board.check_win(mark)
    finally:
        board.undo_place(move.row, move.column)


def find_winning_columns(board: Board, mark: Mark) -> List[int]:
    """
    Find every column where `mark` would win immediately.

    Returns:
        Ascending list of column indices
    """
    return [col for col in board.available_columns() if _wins_at(board, col, mark)]


def first_winning_column(board: Board, mark: Mark) -> Optional[int]:
    """Get the lowest column where `mark` wins immediately, or None."""
    for column in board.available_columns():
        if _wins_at(board, column, mark):
            return column
    return None


def choose_column(board: Board, mark: Mark, opponent: Mark, rng=None) -> int:
    """
    Pick a column for `mark` using win, then block, then random.

    Args:
        board: The current board (left unchanged on return)
        mark: The mark the heuristic plays
        opponent: The opposing mark, used for the block check
        rng: Source of randomness with a `choice` method
            (random.Random or numpy.random.Generator)

    Returns:
        Column index to play

    Raises:
        NoAvailableMovesError: if the board has no open column
    """
    if Mark.EMPTY in (mark, opponent) or mark == opponent:
        raise ValueError(f"Invalid marks: playing {mark!r} against {opponent!r}")

    available = board.available_columns()
    if not available:
        raise NoAvailableMovesError("No open column to choose from")

    column = first_winning_column(board, mark)
    if column is not None:
        debug.debug(f"{mark.name} takes winning column {column}", "ai")
        return column

    column = first_winning_column(board, opponent)
    if column is not None:
        debug.debug(f"{mark.name} blocks {opponent.name} at column {column}", "ai")
        return column

    if rng is None:
        rng = random
    column = int(rng.choice(available))
    debug.debug(f"{mark.name} plays random column {column} from {available}", "ai")
    return column


class HeuristicPlayer:
    """
    A Connect Four player that uses the win/block/random heuristic.

    Holds no game data beyond its mark and its random number generator.
    """

    def __init__(self, mark: Mark, rng=None, seed: Optional[int] = None):
        """
        Initialize the heuristic player.

        Args:
            mark: The mark this player places
            rng: Random source to use; a new random.Random(seed) when omitted
            seed: Seed for the default random source
        """
        if mark == Mark.EMPTY:
            raise ValueError("Heuristic player needs a player mark")
        self.mark = mark
        self.rng = rng if rng is not None else random.Random(seed)

    def get_move(self, board: Board, opponent: Optional[Mark] = None) -> int:
        """
        Get the column to play.

        Args:
            board: The current game board
            opponent: The opposing mark (defaults to the other player's mark)
        """
        if opponent is None:
            opponent = self.mark.other()
        debug.start_timer("heuristic_move")
        column = choose_column(board, self.mark, opponent, self.rng)
        debug.end_timer("heuristic_move", "ai")
        return column
