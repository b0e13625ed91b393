"""Call surface for host applications.

Both solve functions take the start and goal as 9-character digit strings and
return the move string (letters U, D, L, R; empty when there is no solution or
the start is already the goal). Statistics are written into a caller-owned
buffer laid out as ``[pathLength, expansions, maxQueueLength, elapsedMillis]``.
The returned string belongs to the caller; nothing needs to be freed.
"""
from __future__ import annotations
from collections import abc
from typing import MutableSequence, Optional, Union

import numpy as np

from eightpuzzle.domains.puzzle8 import PuzzleState
from eightpuzzle.errors import ValidationError
from eightpuzzle.heuristics.registry import MANHATTAN_DISTANCE, heuristic_id
from eightpuzzle.search.engine import SearchResult, a_star, uniform_cost

STATS_LEN = 4
PATH_LENGTH, EXPANSIONS, MAX_QUEUE_LENGTH, ELAPSED_MS = range(STATS_LEN)

StatsBuffer = Union[MutableSequence[int], np.ndarray]


def new_stats_buffer() -> np.ndarray:
    """Four 32-bit integers, zeroed."""
    return np.zeros(STATS_LEN, dtype=np.int32)


def _check_buffer(stats_out: Optional[StatsBuffer]) -> None:
    if stats_out is None:
        return
    writable = (isinstance(stats_out, abc.MutableSequence)
                or (isinstance(stats_out, np.ndarray) and stats_out.ndim == 1 and stats_out.flags.writeable))
    if not writable:
        raise ValidationError(f"stats buffer must be a writable sequence, got {type(stats_out).__name__}")
    n = len(stats_out)
    if n < STATS_LEN:
        raise ValidationError(f"stats buffer needs room for {STATS_LEN} integers, got {n}")


def _write_stats(stats_out: Optional[StatsBuffer], res: SearchResult) -> None:
    if stats_out is None:
        return
    for i, v in enumerate(res.stats.as_list()):
        stats_out[i] = v


def solve_uc(initial_state: str, goal_state: str,
             stats_out: Optional[StatsBuffer] = None) -> str:
    start = PuzzleState.from_string(initial_state)
    goal = PuzzleState.from_string(goal_state)
    _check_buffer(stats_out)
    res = uniform_cost(start, goal)
    _write_stats(stats_out, res)
    return res.path


def solve_astar(initial_state: str, goal_state: str,
                stats_out: Optional[StatsBuffer] = None,
                heuristic: int = MANHATTAN_DISTANCE) -> str:
    """heuristic: 0 = misplaced tiles, 1 = Manhattan distance."""
    start = PuzzleState.from_string(initial_state)
    goal = PuzzleState.from_string(goal_state)
    hid = heuristic_id(heuristic)
    _check_buffer(stats_out)
    res = a_star(start, goal, hid)
    _write_stats(stats_out, res)
    return res.path


def release_path(path: str) -> None:
    """No-op kept for hosts written against the allocate/release contract."""
    if not isinstance(path, str):
        raise TypeError(f"expected a path string returned by a solve call, got {type(path).__name__}")
