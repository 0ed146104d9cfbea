"""Compiled-in puzzle definitions.

HAKOIRI is the reference puzzle (Hakoiri Musume, the Japanese Klotski):

    V B B V
    V B B V
    V H H V
    V S S V
    S . . S

B (2x2) has to reach the bottom centre. The four 2x1 pieces (V) and the four
1x1 pieces (S) are interchangeable, so each kind is one grouped slot.
"""
from typing import Dict, Iterator

from .board import Board
from .pieces import Piece
from .puzzle import Puzzle
from .state import BoardState

BOARD_4X5 = Board(width=4, height=5)

HAKOIRI = Puzzle(
    name="hakoiri",
    board=BOARD_4X5,
    pieces=(
        Piece("S", 1, 1, 0b1001_0110_0000_0000_0000, count=4),
        Piece("V", 2, 1, 0b0000_1001_1001_1001_1001, count=4),
        Piece("H", 1, 2, 0b0000_0000_0110_0000_0000),
        Piece("B", 2, 2, 0b0000_0000_0000_0110_0110),
    ),
    goal_piece=3,
    goal_mask=0b0110_0110_0000_0000_0000,
)

# Every piece keeps its own identity here, which makes the reachable state
# space much larger than HAKOIRI's.
#
#   a . . b
#   E c d F
#   E I I F
#   G K K H
#   G K K H
SHOGI = Puzzle(
    name="shogi",
    board=BOARD_4X5,
    pieces=(
        Piece("a", 1, 1, 0b0000_0000_0000_0000_0001),
        Piece("b", 1, 1, 0b0000_0000_0000_0000_1000),
        Piece("c", 1, 1, 0b0000_0000_0000_0010_0000),
        Piece("d", 1, 1, 0b0000_0000_0000_0100_0000),
        Piece("E", 2, 1, 0b0000_0000_0001_0001_0000),
        Piece("F", 2, 1, 0b0000_0000_1000_1000_0000),
        Piece("G", 2, 1, 0b0001_0001_0000_0000_0000),
        Piece("H", 2, 1, 0b1000_1000_0000_0000_0000),
        Piece("I", 1, 2, 0b0000_0000_0110_0000_0000),
        Piece("K", 2, 2, 0b0110_0110_0000_0000_0000),
    ),
    goal_piece=9,
    goal_mask=0b0000_0000_0000_0110_0110,
)

PRESETS: Dict[str, Puzzle] = {p.name: p for p in (HAKOIRI, SHOGI)}


# ---- the reference puzzle as plain functions
def initial() -> BoardState:
    return HAKOIRI.initial()


def successors(state: BoardState) -> Iterator[BoardState]:
    return HAKOIRI.successors(state)


def is_goal(state: BoardState) -> bool:
    return HAKOIRI.is_goal(state)
