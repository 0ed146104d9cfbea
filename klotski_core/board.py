from dataclasses import dataclass, field
from typing import Iterable, Tuple

# Bit helpers
__all__ = [
    "Board",
    "bit",
    "has_bit",
    "popcount",
    "iter_bits",
    "lowest_bit",
]

def bit(idx: int) -> int:
    return 1 << idx

def has_bit(mask: int, idx: int) -> bool:
    return (mask >> idx) & 1 == 1

def popcount(mask: int) -> int:
    return bin(mask).count("1")

def lowest_bit(mask: int) -> int:
    """Index of the lowest set bit (mask must be non-zero)."""
    return (mask & -mask).bit_length() - 1


def iter_bits(mask: int) -> Iterable[int]:
    """Iterates over the indices of set bits."""
    idx = 0
    m = mask
    while m:
        if m & 1:
            yield idx
        m >>= 1
        idx += 1


@dataclass(frozen=True, slots=True)
class Board:
    """
    Geometry of the rectangular grid.

    Cell indexing: idx = r*width + c, bit idx of a mask is that cell.
    The edge masks mark the cells on each border; a piece touching an edge
    cannot slide any further in that direction.
    """

    width: int
    height: int
    full_mask: int = field(init=False, repr=False, compare=False)
    left_edge: int = field(init=False, repr=False, compare=False)
    right_edge: int = field(init=False, repr=False, compare=False)
    top_edge: int = field(init=False, repr=False, compare=False)
    bottom_edge: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"bad board size {self.width}x{self.height}")
        left = sum(bit(r * self.width) for r in range(self.height))
        top = (1 << self.width) - 1
        object.__setattr__(self, "full_mask", (1 << self.size) - 1)
        object.__setattr__(self, "left_edge", left)
        object.__setattr__(self, "right_edge", left << (self.width - 1))
        object.__setattr__(self, "top_edge", top)
        object.__setattr__(self, "bottom_edge", top << (self.width * (self.height - 1)))

    @property
    def size(self) -> int:
        return self.width * self.height

    def idx_to_rc(self, idx: int) -> Tuple[int, int]:
        return (idx // self.width, idx % self.width)

    def rc_to_idx(self, r: int, c: int) -> int:
        return r * self.width + c

    def rect_mask(self, rows: int, cols: int, row: int = 0, col: int = 0) -> int:
        """Mask of a rows x cols rectangle with its top-left cell at (row, col)."""
        if row < 0 or col < 0 or row + rows > self.height or col + cols > self.width:
            raise ValueError(f"{rows}x{cols} rectangle at ({row}, {col}) leaves the board")
        mask = 0
        for r in range(row, row + rows):
            for c in range(col, col + cols):
                mask |= bit(self.rc_to_idx(r, c))
        return mask

    def contains(self, mask: int) -> bool:
        return mask & ~self.full_mask == 0
