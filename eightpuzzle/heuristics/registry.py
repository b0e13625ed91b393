from __future__ import annotations
from typing import Callable, Dict, Tuple, Union
import operator

from eightpuzzle.domains.puzzle8 import PuzzleState
from eightpuzzle.errors import ValidationError
from eightpuzzle.heuristics.manhattan import make_manhattan
from eightpuzzle.heuristics.misplaced import make_misplaced

Heuristic = Callable[[PuzzleState], int]

MISPLACED_TILES = 0
MANHATTAN_DISTANCE = 1

HEURISTICS: Dict[int, Tuple[str, Callable[[PuzzleState], Heuristic]]] = {
    MISPLACED_TILES: ("misplaced", make_misplaced),
    MANHATTAN_DISTANCE: ("manhattan", make_manhattan),
}
_BY_NAME = {name: hid for hid, (name, _) in HEURISTICS.items()}


def heuristic_id(key: Union[int, str]) -> int:
    """Accept a numeric id (0, 1) or a name ("misplaced", "manhattan")."""
    if isinstance(key, str):
        k = key.strip().lower()
        if k in _BY_NAME:
            return _BY_NAME[k]
        raise ValidationError(f"unknown heuristic {key!r}; expected one of {sorted(_BY_NAME)}")
    try:
        hid = operator.index(key)  # also accepts numpy integers
    except TypeError:
        hid = None
    if isinstance(key, bool) or hid not in HEURISTICS:
        raise ValidationError(f"unknown heuristic id {key!r}; expected one of {sorted(HEURISTICS)}")
    return hid


def heuristic_name(key: Union[int, str]) -> str:
    return HEURISTICS[heuristic_id(key)][0]


def make_heuristic(key: Union[int, str], goal: PuzzleState) -> Heuristic:
    _, factory = HEURISTICS[heuristic_id(key)]
    return factory(goal)
