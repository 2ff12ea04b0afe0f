import pytest

from connectfour.utils import Mark
from connectfour.game.board import Board
from connectfour.game.players import Participant, PlayerKind, is_valid_name, HEURISTIC_NAME


@pytest.mark.parametrize("name", ["Alice", "Bob 2", "  padded  ", "a" * 20])
def test_valid_names(name):
    assert is_valid_name(name)


@pytest.mark.parametrize("name", ["", "   ", "a" * 21, "Zoë", "bob!", "semi;colon"])
def test_invalid_names(name):
    assert not is_valid_name(name)


def test_human_participant():
    player = Participant.human("  Alice ", Mark.A)
    assert player.kind == PlayerKind.HUMAN
    assert player.name == "Alice"
    assert player.mark == Mark.A
    assert not player.is_automatic
    with pytest.raises(TypeError):
        player.choose_column(Board(), Mark.B)


def test_human_participant_rejects_bad_name():
    with pytest.raises(ValueError):
        Participant.human("bad!name", Mark.A)


def test_heuristic_participant():
    player = Participant.heuristic(Mark.B, seed=1)
    assert player.kind == PlayerKind.HEURISTIC
    assert player.name == HEURISTIC_NAME
    assert player.is_automatic
    board = Board()
    assert player.choose_column(board, Mark.A) in range(7)
    assert board == Board()


def test_participant_needs_player_mark():
    with pytest.raises(ValueError):
        Participant.heuristic(Mark.EMPTY)
