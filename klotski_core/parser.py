from typing import Dict, List, Tuple

import yaml

from .board import Board, bit, popcount
from .pieces import Piece
from .puzzle import Puzzle

TOK_EMPTY = "."


def _grid_lines(layout: str) -> List[str]:
    lines = [line.strip() for line in layout.splitlines() if line.strip() != ""]
    if not lines:
        raise ValueError("Empty layout")
    width = len(lines[0])
    if any(len(line) != width for line in lines):
        raise ValueError("Layout rows must all have the same length")
    return lines


def _bounding_box(board: Board, mask: int) -> Tuple[int, int, int, int]:
    rows = [board.idx_to_rc(i)[0] for i in range(board.size) if (mask >> i) & 1]
    cols = [board.idx_to_rc(i)[1] for i in range(board.size) if (mask >> i) & 1]
    return min(rows), min(cols), max(rows) - min(rows) + 1, max(cols) - min(cols) + 1


def parse_layout_str(text: str) -> Puzzle:
    """Parses a YAML puzzle description into Puzzle.

    Keys:
      name:   puzzle name (optional)
      layout: grid, one character per cell; letters are pieces, '.' is empty
      groups: {label: [rows, cols]} for labels that stand for several
              identical pieces of that shape (optional)
      goal:   {piece: label, row: r, col: c}, top-left cell of the target

    Pieces take slots in order of first appearance (row-major).
    """
    doc = yaml.safe_load(text)
    if not isinstance(doc, dict) or "layout" not in doc or "goal" not in doc:
        raise ValueError("Puzzle description needs 'layout' and 'goal'")

    lines = _grid_lines(str(doc["layout"]))
    board = Board(width=len(lines[0]), height=len(lines))
    groups: Dict[str, List[int]] = doc.get("groups") or {}

    masks: Dict[str, int] = {}
    for r, line in enumerate(lines):
        for c, ch in enumerate(line):
            if ch == TOK_EMPTY:
                continue
            masks[ch] = masks.get(ch, 0) | bit(board.rc_to_idx(r, c))

    pieces: List[Piece] = []
    for label, mask in masks.items():
        if label in groups:
            rows, cols = (int(v) for v in groups[label])
            if popcount(mask) % (rows * cols) != 0:
                raise ValueError(f"group {label!r} does not split into {rows}x{cols} pieces")
            pieces.append(Piece(label, rows, cols, mask, count=popcount(mask) // (rows * cols)))
        else:
            row, col, rows, cols = _bounding_box(board, mask)
            if board.rect_mask(rows, cols, row, col) != mask:
                raise ValueError(f"piece {label!r} is not a filled rectangle")
            pieces.append(Piece(label, rows, cols, mask))

    goal = doc["goal"]
    if not isinstance(goal, dict) or not {"piece", "row", "col"} <= set(goal):
        raise ValueError("goal needs 'piece', 'row' and 'col'")
    label = str(goal["piece"])
    if label not in masks:
        raise ValueError(f"unknown goal piece {label!r}")
    slot = list(masks).index(label)
    target = pieces[slot]
    if target.is_group:
        raise ValueError(f"goal piece {label!r} cannot be a group")
    goal_mask = board.rect_mask(target.rows, target.cols, int(goal["row"]), int(goal["col"]))

    return Puzzle(
        name=str(doc.get("name", "custom")),
        board=board,
        pieces=tuple(pieces),
        goal_piece=slot,
        goal_mask=goal_mask,
    )


def parse_layout_file(path: str) -> Puzzle:
    with open(path, "r", encoding="utf-8") as f:
        return parse_layout_str(f.read())
