from __future__ import annotations
import argparse
import logging
import sys
import time

from klotski_core.parser import parse_layout_file
from klotski_core.presets import PRESETS
from klotski_core.moves import describe_path
from klotski_core.render import render_path
from search.bfs import Solver
from search.errors import NoSolutionError


def main():
    p = argparse.ArgumentParser(description="Shortest solution of a sliding-block puzzle")
    p.add_argument("--puzzle", type=str, default="hakoiri", choices=sorted(PRESETS), help="built-in puzzle")
    p.add_argument("--layout", type=str, default=None, help="YAML puzzle description (overrides --puzzle)")
    p.add_argument("--quiet", action="store_true", help="print only the summary")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = p.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    puzzle = parse_layout_file(args.layout) if args.layout else PRESETS[args.puzzle]

    t0 = time.time()
    solver = Solver(puzzle)
    try:
        goal = solver.solve()
    except NoSolutionError as e:
        print("No solution:", e)
        sys.exit(1)
    path = solver.restore(goal)
    runtime = time.time() - t0

    print("Result:", {
        "puzzle": puzzle.name,
        "success": True,
        "nodes": solver.expanded,
        "states": len(solver.visited),
        "runtime": round(runtime, 3),
        "solution_len": len(path) - 1,
    })
    if not args.quiet:
        print()
        print(render_path(puzzle, path, describe_path(puzzle, path)))

if __name__ == "__main__":
    main()
