#!/usr/bin/env python3
import argparse, logging, sys

from eightpuzzle.api import solve_astar, solve_uc, new_stats_buffer, PATH_LENGTH, EXPANSIONS, MAX_QUEUE_LENGTH, ELAPSED_MS
from eightpuzzle.domains.puzzle8 import GOAL_STRING, MOVE_NAMES, PuzzleState, is_solvable, pretty
from eightpuzzle.errors import ValidationError
from eightpuzzle.heuristics.registry import heuristic_id


def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one 8-puzzle instance with UCS or A*.")
    p.add_argument("initial", help="Start state, 9 digits row-major, 0 = blank (e.g. 208135467)")
    p.add_argument("--goal", default=GOAL_STRING)
    p.add_argument("--algo", choices=["uc", "astar"], default="astar")
    p.add_argument("--heuristic", choices=["misplaced", "manhattan"], default="manhattan")
    p.add_argument("--show", action="store_true", help="Print the board after every move")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    stats = new_stats_buffer()
    try:
        if not is_solvable(args.initial, args.goal):
            print("warning: inversion parity differs from the goal, search will exhaust", file=sys.stderr)
        if args.algo == "uc":
            path = solve_uc(args.initial, args.goal, stats)
        else:
            path = solve_astar(args.initial, args.goal, stats, heuristic_id(args.heuristic))
    except ValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    solved = bool(path) or args.initial == args.goal
    print(f"path: {path or '-'}" if solved else "no solution")
    print(f"length={stats[PATH_LENGTH]} expanded={stats[EXPANSIONS]} "
          f"max_queue={stats[MAX_QUEUE_LENGTH]} time_ms={stats[ELAPSED_MS]}")

    if args.show and solved:
        s = PuzzleState.from_string(args.initial)
        print(pretty(s))
        for i, m in enumerate(path, start=1):
            s = s.apply_move(m)
            print(f"\n{i}. {MOVE_NAMES[m]}")
            print(pretty(s))
    return 0


if __name__ == "__main__":
    sys.exit(main())
