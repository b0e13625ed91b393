import numpy as np
import pytest

from eightpuzzle.domains.puzzle8 import GOAL, PuzzleState, scramble
from eightpuzzle.errors import ValidationError
from eightpuzzle.heuristics.manhattan import make_manhattan, manhattan
from eightpuzzle.heuristics.misplaced import make_misplaced, misplaced_tiles
from eightpuzzle.heuristics.registry import (
    MANHATTAN_DISTANCE, MISPLACED_TILES, heuristic_id, heuristic_name, make_heuristic,
)

S = PuzzleState.from_string


@pytest.mark.parametrize("state, misplaced, manh", [
    ("123456780", 0, 0),
    ("123456708", 1, 1),
    ("123405786", 2, 2),
    ("208135467", 8, 13),
])
def test_known_values_standard_goal(state, misplaced, manh):
    assert misplaced_tiles(S(state), GOAL) == misplaced
    assert manhattan(S(state), GOAL) == manh
    assert make_misplaced(GOAL)(S(state)) == misplaced
    assert make_manhattan(GOAL)(S(state)) == manh


def test_custom_goal():
    goal = S("012345678")
    assert misplaced_tiles(S("102345678"), goal) == 1
    assert manhattan(S("102345678"), goal) == 1
    assert manhattan(goal, goal) == 0


def test_blank_contributes_nothing():
    # only the blank and tile 8 differ; tile 8 is one step away
    s = S("123456708")
    assert misplaced_tiles(s, GOAL) == 1


@pytest.mark.parametrize("seed", range(20))
def test_manhattan_dominates_misplaced(seed):
    s = scramble(18, seed)
    assert manhattan(s, GOAL) >= misplaced_tiles(s, GOAL)


@pytest.mark.parametrize("key, expected", [
    (0, MISPLACED_TILES),
    (1, MANHATTAN_DISTANCE),
    ("misplaced", 0),
    ("Manhattan", 1),
    (np.int32(1), 1),
])
def test_heuristic_id(key, expected):
    assert heuristic_id(key) == expected


@pytest.mark.parametrize("key", [2, -1, True, 1.0, "euclid", None])
def test_unknown_heuristic_rejected(key):
    with pytest.raises(ValidationError):
        heuristic_id(key)


def test_make_heuristic_by_name_and_id():
    s = S("208135467")
    assert make_heuristic(0, GOAL)(s) == 8
    assert make_heuristic("manhattan", GOAL)(s) == 13
    assert heuristic_name(1) == "manhattan"
