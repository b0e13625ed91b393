from __future__ import annotations
from typing import Callable, Dict, Tuple

from eightpuzzle.domains.puzzle8 import N, PuzzleState


def goal_positions(goal: PuzzleState) -> Dict[str, Tuple[int, int]]:
    return {tile: divmod(idx, N) for idx, tile in enumerate(goal.tiles) if tile != "0"}


def _distance(s: PuzzleState, pos: Dict[str, Tuple[int, int]]) -> int:
    dist = 0
    for idx, tile in enumerate(s.tiles):
        if tile == "0":
            continue
        r, c = divmod(idx, N)
        gr, gc = pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist


def manhattan(s: PuzzleState, goal: PuzzleState) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    return _distance(s, goal_positions(goal))


def make_manhattan(goal: PuzzleState) -> Callable[[PuzzleState], int]:
    # goal positions are looked up once per run, not once per node
    pos = goal_positions(goal)

    def h(s: PuzzleState) -> int:
        return _distance(s, pos)
    return h
