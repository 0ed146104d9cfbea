from __future__ import annotations
import argparse

from tqdm import tqdm

from klotski_core.parser import parse_layout_file
from klotski_core.presets import PRESETS
from search.explore import enumerate_states


"""
Count every configuration reachable from the initial layout.

Usage:
  python -m scripts.count_states --puzzle hakoiri
"""

def main():
    p = argparse.ArgumentParser()
    p.add_argument("--puzzle", type=str, default="hakoiri", choices=sorted(PRESETS))
    p.add_argument("--layout", type=str, default=None, help="YAML puzzle description (overrides --puzzle)")
    args = p.parse_args()

    puzzle = parse_layout_file(args.layout) if args.layout else PRESETS[args.puzzle]

    with tqdm(desc="Enumerating states", unit="state") as bar:
        visited = enumerate_states(puzzle, on_discover=lambda _: bar.update(1))

    goals = sum(1 for s in visited if puzzle.is_goal(s))
    print("puzzle:", puzzle.name)
    print(" states:", len(visited))
    print(" goal states:", goals)

if __name__ == "__main__":
    main()
