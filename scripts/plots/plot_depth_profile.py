from __future__ import annotations

"""
Plot how many configurations sit at each move distance from the start.

Run:
  python -m scripts.plots.plot_depth_profile --puzzle hakoiri --out results/plots/hakoiri_depths.png
"""

import argparse
import os

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from klotski_core.parser import parse_layout_file
from klotski_core.presets import PRESETS
from search.explore import depth_profile


def _savefig(path: str) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    plt.tight_layout()
    plt.savefig(path, dpi=180)
    plt.close()


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--puzzle", type=str, default="hakoiri", choices=sorted(PRESETS))
    p.add_argument("--layout", type=str, default=None, help="YAML puzzle description (overrides --puzzle)")
    p.add_argument("--out", type=str, default="results/plots/depth_profile.png")
    args = p.parse_args()

    puzzle = parse_layout_file(args.layout) if args.layout else PRESETS[args.puzzle]
    counts = np.asarray(depth_profile(puzzle))

    plt.figure(figsize=(9, 4))
    plt.bar(np.arange(len(counts)), counts, width=1.0)
    plt.xlabel("moves from start")
    plt.ylabel("states")
    plt.title(f"{puzzle.name}: {int(counts.sum())} states, max depth {len(counts) - 1}")
    _savefig(args.out)
    print("saved:", args.out)

if __name__ == "__main__":
    main()
