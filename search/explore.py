from __future__ import annotations
from typing import Callable, List, Optional

from klotski_core.puzzle import Puzzle
from klotski_core.state import BoardState
from .visited import VisitedTable


def enumerate_states(
    puzzle: Puzzle,
    on_discover: Optional[Callable[[BoardState], None]] = None,
) -> VisitedTable:
    """Discovers every configuration reachable from the initial one.

    Depth-first with an explicit stack and no goal test; ids and parents are
    assigned on first discovery exactly as the solver does.
    """
    root = puzzle.initial()
    visited = VisitedTable(root)
    stack: List[BoardState] = [root]
    while stack:
        cur = stack.pop()
        cur_id, _ = visited.record(cur)
        for nxt in puzzle.successors(cur):
            if nxt in visited:
                continue
            visited.add(nxt, cur_id)
            if on_discover is not None:
                on_discover(nxt)
            stack.append(nxt)
    return visited


def depth_profile(puzzle: Puzzle) -> List[int]:
    """Number of reachable states at each move distance from the initial one."""
    root = puzzle.initial()
    seen = {root}
    layer = [root]
    counts: List[int] = []
    while layer:
        counts.append(len(layer))
        nxt_layer: List[BoardState] = []
        for cur in layer:
            for nxt in puzzle.successors(cur):
                if nxt not in seen:
                    seen.add(nxt)
                    nxt_layer.append(nxt)
        layer = nxt_layer
    return counts
