from __future__ import annotations
from collections import deque
from enum import Enum
from typing import Deque, List, Optional
import logging

from klotski_core.presets import HAKOIRI
from klotski_core.puzzle import Puzzle
from klotski_core.state import BoardState
from .errors import NoSolutionError
from .visited import VisitedTable

LOGGER = logging.getLogger(__name__)


class Status(Enum):
    IDLE = "idle"
    TRAVERSING = "traversing"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class Solver:
    """Breadth-first shortest-path search over one puzzle.

    Every state enters the visited table and the FIFO frontier the first
    time it is generated; the goal test is applied to each such fresh state,
    so the first goal found is one with the fewest moves.
    """
    def __init__(self, puzzle: Puzzle = HAKOIRI) -> None:
        self.puzzle = puzzle
        root = puzzle.initial()
        self.visited = VisitedTable(root)
        self.frontier: Deque[BoardState] = deque([root])
        self.status = Status.IDLE
        self.expanded = 0
        self._goal: Optional[BoardState] = None

    def solve(self) -> BoardState:
        if self.status is Status.SOLVED:
            return self._goal  # type: ignore[return-value]
        if self.status is Status.EXHAUSTED:
            raise NoSolutionError(f"no solution for puzzle {self.puzzle.name!r}")

        self.status = Status.TRAVERSING
        puzzle = self.puzzle
        visited = self.visited
        LOGGER.debug("solving %s", puzzle.name)

        root = visited.state(0)
        if puzzle.is_goal(root):
            return self._finish(root)

        while self.frontier:
            cur = self.frontier.popleft()
            self.expanded += 1
            cur_id, _ = visited.record(cur)
            for nxt in puzzle.successors(cur):
                if nxt in visited:
                    continue
                visited.add(nxt, cur_id)
                if puzzle.is_goal(nxt):
                    return self._finish(nxt)
                self.frontier.append(nxt)

        self.status = Status.EXHAUSTED
        LOGGER.debug("exhausted %s after %d states", puzzle.name, len(visited))
        raise NoSolutionError(
            f"no solution for puzzle {puzzle.name!r} ({len(visited)} states explored)"
        )

    def _finish(self, goal: BoardState) -> BoardState:
        self.status = Status.SOLVED
        self._goal = goal
        LOGGER.debug("solved %s: %d states, %d expanded", self.puzzle.name, len(self.visited), self.expanded)
        return goal

    def restore(self, goal: BoardState) -> List[BoardState]:
        """Path from the initial state to goal, both included."""
        return self.visited.path_to(goal)


def solve_path(puzzle: Puzzle = HAKOIRI) -> List[BoardState]:
    solver = Solver(puzzle)
    return solver.restore(solver.solve())
