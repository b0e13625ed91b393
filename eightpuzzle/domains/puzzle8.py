from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union
import random

from eightpuzzle.errors import ValidationError

N = 3
SIZE = N * N
GOAL_STRING = "123456780"
_DIGITS = frozenset("012345678")

# Move labels: the direction the blank slides.
UP, DOWN, LEFT, RIGHT = "U", "D", "L", "R"
MOVE_ORDER: Tuple[str, ...] = (UP, DOWN, LEFT, RIGHT)
_DELTA: Dict[str, int] = {UP: -N, DOWN: N, LEFT: -1, RIGHT: 1}
MOVE_NAMES: Dict[str, str] = {UP: "Up", DOWN: "Down", LEFT: "Left", RIGHT: "Right"}


def _legal_for(i: int) -> Tuple[str, ...]:
    r, c = divmod(i, N)
    moves = []
    if r > 0:       moves.append(UP)
    if r < N - 1:   moves.append(DOWN)
    if c > 0:       moves.append(LEFT)
    if c < N - 1:   moves.append(RIGHT)
    return tuple(moves)

# Precomputed legal moves for each blank index, already in U, D, L, R order
_LEGAL: Dict[int, Tuple[str, ...]] = {i: _legal_for(i) for i in range(SIZE)}


def check_encoding(s) -> str:
    """Raise ValidationError unless s is a 9-char permutation of '0'..'8'."""
    if not isinstance(s, str):
        raise ValidationError(f"puzzle state must be a string, got {type(s).__name__}")
    if len(s) != SIZE:
        raise ValidationError(f"puzzle state must have {SIZE} characters, got {len(s)}: {s!r}")
    bad = sorted(set(s) - _DIGITS)
    if bad:
        raise ValidationError(f"puzzle state may only contain digits 0-8, found {''.join(bad)!r} in {s!r}")
    if len(set(s)) != SIZE:
        raise ValidationError(f"puzzle state must use each digit 0-8 exactly once: {s!r}")
    return s


@dataclass(frozen=True)
class PuzzleState:
    """Immutable 3x3 board, row-major, '0' is the blank."""
    tiles: str
    blank: int = field(compare=False)

    def __post_init__(self):
        check_encoding(self.tiles)
        if self.blank != self.tiles.index("0"):
            raise ValidationError(f"blank index {self.blank!r} does not match the blank in {self.tiles!r}")

    @classmethod
    def from_string(cls, s: str) -> "PuzzleState":
        check_encoding(s)
        return cls(s, s.index("0"))

    @classmethod
    def _unchecked(cls, tiles: str, blank: int) -> "PuzzleState":
        # for states derived from an already valid one by a swap
        s = object.__new__(cls)
        object.__setattr__(s, "tiles", tiles)
        object.__setattr__(s, "blank", blank)
        return s

    def __str__(self) -> str:
        return self.tiles

    def blank_index(self) -> int:
        return self.blank

    def is_goal(self, goal: "PuzzleState") -> bool:
        return self.tiles == goal.tiles

    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        t = self.tiles
        return tuple(tuple(int(ch) for ch in t[r * N:(r + 1) * N]) for r in range(N))

    def apply_move(self, m: str) -> "PuzzleState":
        if m not in _LEGAL[self.blank]:
            raise ValueError(f"move {m!r} is not legal with the blank at index {self.blank}")
        return self._slide(self.blank + _DELTA[m])

    def _slide(self, j: int) -> "PuzzleState":
        # swap the blank with the tile at j
        z = self.blank
        lst = list(self.tiles)
        lst[z], lst[j] = lst[j], lst[z]
        return PuzzleState._unchecked("".join(lst), j)


GOAL = PuzzleState.from_string(GOAL_STRING)

StateLike = Union[str, PuzzleState]


def as_state(s: StateLike) -> PuzzleState:
    return s if isinstance(s, PuzzleState) else PuzzleState.from_string(s)


# ---------- Move generation ----------
def legal_moves(state: PuzzleState) -> Tuple[str, ...]:
    """Legal moves from the blank position, always in U, D, L, R order."""
    return _LEGAL[state.blank]


def successors(state: PuzzleState) -> Iterator[Tuple[str, PuzzleState]]:
    """Yield (move, next_state) pairs in fixed move order."""
    z = state.blank
    for m in _LEGAL[z]:
        yield m, state._slide(z + _DELTA[m])


def apply_path(state: StateLike, path: str) -> PuzzleState:
    """Replay a string of move labels from state."""
    s = as_state(state)
    for m in path:
        s = s.apply_move(m)
    return s


# ---------- Solvability ----------
def inversions(state: StateLike) -> int:
    arr = [ch for ch in as_state(state).tiles if ch != "0"]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv


def is_solvable(state: StateLike, goal: StateLike = GOAL) -> bool:
    """On a 3-wide board two states are mutually reachable iff their inversion
    counts (blank removed) have the same parity."""
    return inversions(state) % 2 == inversions(goal) % 2


def make_unsolvable(state: StateLike) -> PuzzleState:
    """Swap the first two non-blank tiles, flipping inversion parity."""
    s = as_state(state)
    lst = list(s.tiles)
    i = next(k for k, v in enumerate(lst) if v != "0")
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != "0")
    lst[i], lst[j] = lst[j], lst[i]
    return PuzzleState._unchecked("".join(lst), s.blank)


# ---------- Instance generation ----------
def random_state(rng: Optional[random.Random] = None) -> PuzzleState:
    """Uniform random permutation that is solvable w.r.t. the standard goal."""
    rng = rng or random.Random()
    digits = list(GOAL_STRING)
    while True:
        rng.shuffle(digits)
        s = "".join(digits)
        if inversions(s) % 2 == 0:
            return PuzzleState.from_string(s)


def scramble(depth: int, seed: int, goal: StateLike = GOAL) -> PuzzleState:
    """Random walk of `depth` blank moves from goal with no immediate backtrack."""
    rng = random.Random(seed)
    s = as_state(goal)
    last_blank = None
    for _ in range(depth):
        z = s.blank
        cand = [z + _DELTA[m] for m in _LEGAL[z]]
        if last_blank in cand and len(cand) > 1:
            cand.remove(last_blank)
        j = rng.choice(cand)
        last_blank = z
        s = s._slide(j)
    return s


def pretty(state: StateLike) -> str:
    """ASCII rendering, blank shown as '.'."""
    lines: List[str] = []
    for row in as_state(state).rows():
        lines.append(" ".join(str(t) if t else "." for t in row))
    return "\n".join(lines)
