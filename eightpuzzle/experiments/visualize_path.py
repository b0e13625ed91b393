#!/usr/bin/env python3
import argparse, os, sys
from pathlib import Path
from typing import List

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from eightpuzzle.domains.puzzle8 import GOAL_STRING, MOVE_NAMES, N, PuzzleState
from eightpuzzle.errors import ValidationError
from eightpuzzle.search.engine import a_star, uniform_cost


def draw_board(state: PuzzleState, out_path: Path, title: str = ""):
    plt.figure(figsize=(3, 3))
    ax = plt.gca()
    ax.set_xlim(0, N); ax.set_ylim(0, N)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(N + 1):
        ax.plot([0, N], [i, i], linewidth=1, color="black")
        ax.plot([i, i], [0, N], linewidth=1, color="black")
    # tiles
    for idx, ch in enumerate(state.tiles):
        if ch == "0": continue
        r, c = divmod(idx, N)
        ax.text(c + 0.5, r + 0.55, ch, ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title, fontsize=10)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=120)
    plt.close()


def save_frames(start: PuzzleState, path: str, outdir: Path) -> List[Path]:
    frames = []
    s = start
    out = outdir / "step_000.png"
    draw_board(s, out, "start")
    frames.append(out)
    for i, m in enumerate(path, start=1):
        s = s.apply_move(m)
        out = outdir / f"step_{i:03d}.png"
        draw_board(s, out, f"{i}: {MOVE_NAMES[m]}")
        frames.append(out)
    return frames


def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("initial")
    p.add_argument("--goal", default=GOAL_STRING)
    p.add_argument("--algo", choices=["uc", "astar"], default="astar")
    p.add_argument("--heuristic", choices=["misplaced", "manhattan"], default="manhattan")
    p.add_argument("--outdir", default="results/frames")
    args = p.parse_args(argv)

    try:
        start = PuzzleState.from_string(args.initial)
        goal = PuzzleState.from_string(args.goal)
    except ValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    res = uniform_cost(start, goal) if args.algo == "uc" else a_star(start, goal, args.heuristic)
    if not res.solved:
        print("No path (search exhausted). Check the parity of the start against the goal.")
        return 1

    frames = save_frames(start, res.path, Path(args.outdir))
    print(f"Saved {len(frames)} frames to {args.outdir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
