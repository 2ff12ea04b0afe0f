"""
players.py - Participants in a Connect Four round

A participant is either a human, identified by a name and fed moves from
outside, or the heuristic opponent, which chooses its own moves. The round
orchestrator asks `is_automatic` instead of inspecting types.
"""

import re
from enum import Enum, auto
from typing import Optional

from connectfour.utils import Mark
from connectfour.game.board import Board
from connectfour.ai.heuristic import HeuristicPlayer

HEURISTIC_NAME = "AI Bot"
MAX_NAME_LENGTH = 20
_NAME_PATTERN = re.compile(r"^[A-Za-z0-9\s]+$")


def is_valid_name(name: str) -> bool:
    """Names are 1-20 characters of letters, digits and spaces."""
    name = name.strip()
    return 0 < len(name) <= MAX_NAME_LENGTH and bool(_NAME_PATTERN.match(name))


class PlayerKind(Enum):
    HUMAN = auto()
    HEURISTIC = auto()


class Participant:
    """One side of a round: a mark plus whatever the kind of player needs."""

    def __init__(self, kind: PlayerKind, mark: Mark, name: str,
                 selector: Optional[HeuristicPlayer] = None):
        if mark == Mark.EMPTY:
            raise ValueError("A participant needs a player mark")
        self.kind = kind
        self.mark = mark
        self.name = name
        self._selector = selector

    @classmethod
    def human(cls, name: str, mark: Mark) -> 'Participant':
        if not is_valid_name(name):
            raise ValueError(f"Invalid player name: {name!r}")
        return cls(PlayerKind.HUMAN, mark, name.strip())

    @classmethod
    def heuristic(cls, mark: Mark, rng=None, seed: Optional[int] = None) -> 'Participant':
        return cls(PlayerKind.HEURISTIC, mark, HEURISTIC_NAME,
                   HeuristicPlayer(mark, rng=rng, seed=seed))

    @property
    def is_automatic(self) -> bool:
        """True when the participant picks its own columns."""
        return self._selector is not None

    def choose_column(self, board: Board, opponent: Mark) -> int:
        if self._selector is None:
            raise TypeError(f"{self.name} does not choose moves automatically")
        return self._selector.get_move(board, opponent)

    def __repr__(self) -> str:
        return f"Participant({self.kind.name}, {self.mark.name}, {self.name!r})"
