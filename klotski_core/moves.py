from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Tuple

from .board import popcount
from .pieces import decompose
from .state import BoardState

if TYPE_CHECKING:
    from .puzzle import Puzzle


# (direction, edge that blocks it, row step, column step); order is fixed
DIRECTIONS: Tuple[Tuple[str, str, int, int], ...] = (
    ("right", "right_edge", 0, 1),
    ("up", "top_edge", -1, 0),
    ("left", "left_edge", 0, -1),
    ("down", "bottom_edge", 1, 0),
)


def shift(mask: int, offset: int) -> int:
    return mask << offset if offset >= 0 else mask >> -offset


@dataclass(frozen=True)
class Move:
    slot: int
    piece: str
    direction: str


def _candidates(puzzle: Puzzle, state: BoardState) -> Iterator[Tuple[Move, BoardState]]:
    """Every one-cell slide that stays on the board, overlaps not yet filtered."""
    board = puzzle.board
    for slot, piece in enumerate(puzzle.pieces):
        mask = state.masks[slot]
        members = decompose(mask, puzzle.shapes[slot]) if piece.is_group else (mask,)
        for member in members:
            rest = mask ^ member
            for direction, edge, dr, dc in DIRECTIONS:
                if member & getattr(board, edge) != 0:
                    continue
                moved = rest | shift(member, dr * board.width + dc)
                yield Move(slot, piece.name, direction), state.replace(slot, moved)


def successors_with_moves(puzzle: Puzzle, state: BoardState) -> Iterator[Tuple[Move, BoardState]]:
    """Generates (move, next state) for all legal single-cell slides.

    Algorithm:
      1) for each piece (each member of a group) and direction, skip the move
         if the piece touches that edge of the board,
      2) shift the piece and put it into a copy of the state,
      3) drop the copy if the union of all masks lost cells: the moved piece
         landed on another one.
    """
    occupied = puzzle.occupied
    for move, nxt in _candidates(puzzle, state):
        if popcount(nxt.occupancy()) == occupied:
            yield move, nxt


def successors(puzzle: Puzzle, state: BoardState) -> Iterator[BoardState]:
    for _, nxt in successors_with_moves(puzzle, state):
        yield nxt


def is_single_move(puzzle: Puzzle, a: BoardState, b: BoardState) -> bool:
    return any(nxt == b for nxt in successors(puzzle, a))


def describe_move(puzzle: Puzzle, before: BoardState, after: BoardState) -> Move:
    for move, nxt in successors_with_moves(puzzle, before):
        if nxt == after:
            return move
    raise ValueError("states are not one legal move apart")


def describe_path(puzzle: Puzzle, path: List[BoardState]) -> List[Move]:
    return [describe_move(puzzle, a, b) for a, b in zip(path, path[1:])]
