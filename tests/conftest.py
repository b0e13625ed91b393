"""Shared fixtures for the 8-puzzle search tests."""
from collections import deque

import pytest

from eightpuzzle.domains.puzzle8 import GOAL, PuzzleState, successors
from eightpuzzle.search.engine import a_star, uniform_cost

SAMPLE = "208135467"
# goal with tiles 1 and 2 swapped: odd inversion parity
UNSOLVABLE = "213456780"
# 9!/2 states share the parity class of any start
HALF_STATE_SPACE = 181440


def bfs_distance(start: str, goal: str = GOAL.tiles) -> int:
    """Independent breadth-first distance, used as ground truth."""
    s0 = PuzzleState.from_string(start)
    dist = {s0.tiles: 0}
    q = deque([s0])
    while q:
        s = q.popleft()
        if s.tiles == goal:
            return dist[s.tiles]
        for _, s2 in successors(s):
            if s2.tiles not in dist:
                dist[s2.tiles] = dist[s.tiles] + 1
                q.append(s2)
    return -1


@pytest.fixture
def goal():
    return GOAL


@pytest.fixture
def sample():
    return PuzzleState.from_string(SAMPLE)


@pytest.fixture(scope="session")
def sample_results():
    return {
        "uc": uniform_cost(SAMPLE, GOAL),
        "misplaced": a_star(SAMPLE, GOAL, 0),
        "manhattan": a_star(SAMPLE, GOAL, 1),
    }


@pytest.fixture(scope="session")
def unsolvable_results():
    # each of these exhausts half the state space, so run them once
    return {
        "uc": uniform_cost(UNSOLVABLE, GOAL),
        "misplaced": a_star(UNSOLVABLE, GOAL, "misplaced"),
        "manhattan": a_star(UNSOLVABLE, GOAL, "manhattan"),
    }
