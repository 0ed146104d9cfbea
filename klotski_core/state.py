from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class BoardState:
    """
    Immutable configuration of all pieces.

    masks[i] is the bitmask of the cells held by piece slot i; slot order
    follows Puzzle.pieces. Equality and hashing are structural on the tuple.
    """

    masks: Tuple[int, ...]

    def occupancy(self) -> int:
        occ = 0
        for m in self.masks:
            occ |= m
        return occ

    def replace(self, slot: int, mask: int) -> "BoardState":
        masks = list(self.masks)
        masks[slot] = mask
        return BoardState(tuple(masks))

    def __len__(self) -> int:
        return len(self.masks)
