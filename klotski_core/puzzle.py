from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, Tuple

from .board import Board, popcount
from .pieces import Piece, check_piece
from .state import BoardState
from . import moves


@dataclass(frozen=True)
class Puzzle:
    """
    A fixed sliding-block puzzle: board, pieces in slot order, win condition.

    The puzzle wins when pieces[goal_piece] occupies exactly goal_mask.
    """

    name: str
    board: Board
    pieces: Tuple[Piece, ...]
    goal_piece: int
    goal_mask: int
    occupied: int = field(init=False, repr=False, compare=False)
    shapes: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.pieces:
            raise ValueError(f"puzzle {self.name!r} has no pieces")
        union = 0
        total = 0
        for piece in self.pieces:
            check_piece(piece, self.board)
            if union & piece.mask:
                raise ValueError(f"piece {piece.name!r} overlaps another piece")
            union |= piece.mask
            total += piece.cells
        if not 0 <= self.goal_piece < len(self.pieces):
            raise ValueError(f"goal piece index {self.goal_piece} out of range")
        target = self.pieces[self.goal_piece]
        if target.is_group:
            raise ValueError(f"goal piece {target.name!r} cannot be a group")
        if not self.board.contains(self.goal_mask) or popcount(self.goal_mask) != target.cells:
            raise ValueError(f"goal mask {self.goal_mask:#x} does not fit piece {target.name!r}")
        object.__setattr__(self, "occupied", total)
        object.__setattr__(self, "shapes", tuple(p.shape_mask(self.board) for p in self.pieces))

    # ---- the three operations the search needs
    def initial(self) -> BoardState:
        return BoardState(tuple(p.mask for p in self.pieces))

    def successors(self, state: BoardState) -> Iterator[BoardState]:
        return moves.successors(self, state)

    def is_goal(self, state: BoardState) -> bool:
        return state.masks[self.goal_piece] == self.goal_mask

    # ---- lookups
    def slot_of(self, name: str) -> int:
        for i, p in enumerate(self.pieces):
            if p.name == name:
                return i
        raise KeyError(name)
