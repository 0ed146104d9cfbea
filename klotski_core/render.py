import numpy as np

from .board import iter_bits
from .puzzle import Puzzle
from .state import BoardState

TOK_EMPTY = "."


def render_ascii(puzzle: Puzzle, state: BoardState) -> str:
    """ASCII visualization of the state: piece labels, '.' for empty cells."""
    board = puzzle.board
    grid = np.full((board.height, board.width), TOK_EMPTY, dtype="<U1")
    for piece, mask in zip(puzzle.pieces, state.masks):
        for idx in iter_bits(mask):
            r, c = board.idx_to_rc(idx)
            grid[r, c] = piece.name[0]
    return "\n".join("".join(row) for row in grid)


def render_path(puzzle: Puzzle, path, moves=None) -> str:
    """All states of a path, one block per step, headed by the move taken."""
    blocks = []
    for i, state in enumerate(path):
        head = f"-- step {i} --"
        if moves is not None and i > 0:
            mv = moves[i - 1]
            head = f"-- step {i}: {mv.piece} {mv.direction} --"
        blocks.append(f"{head}\n{render_ascii(puzzle, state)}")
    return "\n\n".join(blocks)
