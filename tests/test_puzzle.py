import pytest

from klotski_core.board import Board
from klotski_core.pieces import Piece
from klotski_core.puzzle import Puzzle
from klotski_core.presets import HAKOIRI, PRESETS, SHOGI

B = Board(width=3, height=2)


def test_overlapping_pieces_rejected():
    with pytest.raises(ValueError):
        Puzzle("bad", B, (Piece("A", 1, 1, 0b1), Piece("B", 1, 2, 0b11)), 0, 0b100)


def test_goal_mask_must_fit_goal_piece():
    with pytest.raises(ValueError):
        Puzzle("bad", B, (Piece("A", 1, 1, 0b1),), 0, 0b110)
    with pytest.raises(ValueError):
        Puzzle("bad", B, (Piece("A", 1, 1, 0b1),), 0, 1 << 6)


def test_goal_piece_index_checked():
    with pytest.raises(ValueError):
        Puzzle("bad", B, (Piece("A", 1, 1, 0b1),), 1, 0b10)


def test_presets():
    assert set(PRESETS) == {"hakoiri", "shogi"}
    assert HAKOIRI.occupied == SHOGI.occupied == 18
    assert len(SHOGI.pieces) == 10
    assert HAKOIRI.slot_of("B") == HAKOIRI.goal_piece
    assert not SHOGI.is_goal(SHOGI.initial())
    with pytest.raises(KeyError):
        HAKOIRI.slot_of("Z")


def test_group_cannot_be_goal_piece():
    with pytest.raises(ValueError):
        Puzzle("bad", B, (Piece("S", 1, 1, 0b11, count=2),), 0, 0b110)
