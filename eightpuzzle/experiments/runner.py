from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List

from eightpuzzle.domains.puzzle8 import GOAL, PuzzleState, make_unsolvable, scramble
from eightpuzzle.search.engine import SearchResult, a_star, uniform_cost

HEADER = [
    "algorithm", "heuristic", "depth", "seed", "state",
    "path_length", "expanded", "max_queue", "time_ms",
    "termination", "solvable",
]


@dataclass
class Instance:
    seed: int
    depth: int
    state: PuzzleState


def make_instances(depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        for _ in range(per_depth):
            out.append(Instance(seed=seed, depth=d, state=scramble(d, seed)))
            seed += 1
    return out


def run_instance(state: PuzzleState, algos: List[str], heuristics: List[str]) -> Iterator[SearchResult]:
    if "uc" in algos:
        yield uniform_cost(state, GOAL)
    if "astar" in algos:
        for h in heuristics:
            yield a_star(state, GOAL, h)


def result_row(res: SearchResult, inst: Instance, state: PuzzleState, solvable: int) -> list:
    row = res.as_row()
    return [
        row["algorithm"], row["heuristic"], inst.depth, inst.seed, state.tiles,
        row["path_length"], row["expanded"], row["max_queue"], row["time_ms"],
        row["termination"], solvable,
    ]


def main(argv=None):
    ap = argparse.ArgumentParser(description="UCS / A* 8-puzzle benchmark runner")
    ap.add_argument("--algo", choices=["uc", "astar", "all"], default="all")
    ap.add_argument("--heuristic", choices=["misplaced", "manhattan", "both"], default="both")
    ap.add_argument("--depths", type=int, nargs="+", default=[4, 8, 12, 16])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also run a parity-flipped variant of every instance (slow: exhausts 181440 states)")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    args = ap.parse_args(argv)

    algos = ["uc", "astar"] if args.algo == "all" else [args.algo]
    heuristics = ["misplaced", "manhattan"] if args.heuristic == "both" else [args.heuristic]

    insts = make_instances(args.depths, args.per_depth, args.seed)
    args.out.parent.mkdir(parents=True, exist_ok=True)

    with args.out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            for r in run_instance(inst.state, algos, heuristics):
                w.writerow(result_row(r, inst, inst.state, 1))
            if args.include_unsolvable:
                u = make_unsolvable(inst.state)
                for r in run_instance(u, algos, heuristics):
                    w.writerow(result_row(r, inst, u, 0))

    print(f"Wrote {args.out} ({len(insts)} instances)")


if __name__ == "__main__":
    main()
