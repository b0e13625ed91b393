from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple
import heapq
import itertools

from eightpuzzle.domains.puzzle8 import PuzzleState


@dataclass
class SearchNode:
    state: PuzzleState
    g: int
    path: str
    h: int = 0  # always 0 under uniform cost search

    @property
    def f(self) -> int:
        return self.g + self.h


class Frontier:
    """Min-priority queue on f = g + h, FIFO among equal keys.

    With h = 0 everywhere this orders by g alone, which is what UCS wants.
    """

    def __init__(self):
        self._heap: List[Tuple[int, int, SearchNode]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.g + node.h, next(self._counter), node))

    def pop_min(self) -> SearchNode:
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap)[2]

    def is_empty(self) -> bool:
        return not self._heap
