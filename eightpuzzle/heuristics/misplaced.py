from __future__ import annotations
from typing import Callable

from eightpuzzle.domains.puzzle8 import PuzzleState


def misplaced_tiles(s: PuzzleState, goal: PuzzleState) -> int:
    """Number of non-blank tiles not on their goal square."""
    return sum(1 for a, b in zip(s.tiles, goal.tiles) if a != "0" and a != b)


def make_misplaced(goal: PuzzleState) -> Callable[[PuzzleState], int]:
    g = goal.tiles

    def h(s: PuzzleState) -> int:
        return sum(1 for a, b in zip(s.tiles, g) if a != "0" and a != b)
    return h
