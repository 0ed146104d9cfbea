from dataclasses import dataclass
from typing import Iterable, List

from .board import Board, lowest_bit, popcount

__all__ = [
    "Piece",
    "decompose",
    "recompose",
    "check_piece",
]


@dataclass(frozen=True, slots=True)
class Piece:
    """
    A rigid rectangular piece (or a group of identical ones).

    mask holds the cells occupied in the initial layout. With count > 1 the
    record stands for several physically identical pieces stored as one
    union mask; positions that only swap them are the same configuration.
    """

    name: str
    rows: int
    cols: int
    mask: int
    count: int = 1

    @property
    def cells(self) -> int:
        return self.rows * self.cols * self.count

    @property
    def is_group(self) -> bool:
        return self.count > 1

    def shape_mask(self, board: Board) -> int:
        """Shape anchored at cell 0."""
        return board.rect_mask(self.rows, self.cols)

    def members(self, mask: int, board: Board) -> List[int]:
        return decompose(mask, self.shape_mask(board))


def decompose(mask: int, shape: int) -> List[int]:
    """Splits a union of disjoint same-shape rectangles into member masks.

    Bit scan: the lowest set bit of what is left is always the top-left cell
    of some member, so the member is the shape shifted there.
    """
    members: List[int] = []
    rest = mask
    while rest:
        member = shape << lowest_bit(rest)
        if rest & member != member:
            raise ValueError(f"mask {mask:#x} is not a union of shape {shape:#x}")
        members.append(member)
        rest &= ~member
    return members


def recompose(members: Iterable[int]) -> int:
    mask = 0
    for m in members:
        mask |= m
    return mask


def check_piece(piece: Piece, board: Board) -> None:
    """Raises ValueError if the piece does not fit its declared shape."""
    if piece.rows < 1 or piece.cols < 1 or piece.count < 1:
        raise ValueError(f"piece {piece.name!r}: bad shape {piece.rows}x{piece.cols} x{piece.count}")
    if not board.contains(piece.mask):
        raise ValueError(f"piece {piece.name!r} has cells outside the board")
    if popcount(piece.mask) != piece.cells:
        raise ValueError(f"piece {piece.name!r}: expected {piece.cells} cells, got {popcount(piece.mask)}")
    members = piece.members(piece.mask, board)
    if len(members) != piece.count:
        raise ValueError(f"piece {piece.name!r}: expected {piece.count} members, got {len(members)}")
    for m in members:
        # a shape shifted past the right edge wraps into the next row
        r, c = board.idx_to_rc(lowest_bit(m))
        if c + piece.cols > board.width or r + piece.rows > board.height:
            raise ValueError(f"piece {piece.name!r} wraps around the board edge")
