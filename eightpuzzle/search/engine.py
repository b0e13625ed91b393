from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Union
from time import perf_counter
import logging

from eightpuzzle.domains.puzzle8 import GOAL, PuzzleState, StateLike, as_state, successors
from eightpuzzle.heuristics.registry import MANHATTAN_DISTANCE, heuristic_name, make_heuristic
from eightpuzzle.search.expanded import ExpandedSet
from eightpuzzle.search.frontier import Frontier, SearchNode

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    path_length: int = 0
    expansions: int = 0
    max_queue_length: int = 0
    elapsed_ms: int = 0

    def as_list(self) -> List[int]:
        """Fixed boundary layout: [pathLength, expansions, maxQueueLength, elapsedMillis]."""
        return [self.path_length, self.expansions, self.max_queue_length, self.elapsed_ms]


@dataclass
class SearchResult:
    path: str
    solved: bool
    algorithm: str
    heuristic: str = ""
    stats: SearchStats = field(default_factory=SearchStats)

    def as_row(self) -> Dict[str, object]:
        return {
            "algorithm": self.algorithm,
            "heuristic": self.heuristic,
            "path_length": self.stats.path_length,
            "expanded": self.stats.expansions,
            "max_queue": self.stats.max_queue_length,
            "time_ms": self.stats.elapsed_ms,
            "termination": "ok" if self.solved else "exhausted",
            "path": self.path,
        }


def _elapsed_ms(t0: float) -> int:
    return int((perf_counter() - t0) * 1000)


def graph_search(
    start: PuzzleState,
    goal: PuzzleState,
    hfun: Optional[Callable[[PuzzleState], int]] = None,
    algorithm: str = "UCS",
    heuristic: str = "",
) -> SearchResult:
    """
    Best-first graph search shared by UCS (hfun=None, ordered by g) and
    A* (ordered by f = g + h). Duplicates are dropped lazily when popped;
    a state is expanded at most once.
    """
    stats = SearchStats()
    frontier = Frontier()
    expanded = ExpandedSet()
    goal_key = goal.tiles

    logger.debug("%s started: start=%s goal=%s heuristic=%s", algorithm, start, goal, heuristic or "-")
    t0 = perf_counter()

    frontier.push(SearchNode(start, 0, "", hfun(start) if hfun else 0))
    stats.max_queue_length = len(frontier)

    while not frontier.is_empty():
        node = frontier.pop_min()
        key = node.state.tiles

        if key == goal_key:
            stats.path_length = node.g
            stats.elapsed_ms = _elapsed_ms(t0)
            logger.info("%s solved: length=%d expansions=%d max_queue=%d time=%dms",
                        algorithm, stats.path_length, stats.expansions,
                        stats.max_queue_length, stats.elapsed_ms)
            return SearchResult(node.path, True, algorithm, heuristic, stats)

        if key in expanded:
            continue
        expanded.insert(key)
        stats.expansions += 1

        g2 = node.g + 1
        for m, s2 in successors(node.state):
            if s2.tiles in expanded:
                continue
            frontier.push(SearchNode(s2, g2, node.path + m, hfun(s2) if hfun else 0))
            if len(frontier) > stats.max_queue_length:
                stats.max_queue_length = len(frontier)

    stats.elapsed_ms = _elapsed_ms(t0)
    logger.info("%s found no solution: expansions=%d max_queue=%d time=%dms",
                algorithm, stats.expansions, stats.max_queue_length, stats.elapsed_ms)
    return SearchResult("", False, algorithm, heuristic, stats)


def uniform_cost(start: StateLike, goal: StateLike = GOAL) -> SearchResult:
    s, g = as_state(start), as_state(goal)
    return graph_search(s, g, None, algorithm="UCS")


def a_star(start: StateLike, goal: StateLike = GOAL,
           heuristic: Union[int, str] = MANHATTAN_DISTANCE) -> SearchResult:
    s, g = as_state(start), as_state(goal)
    hfun = make_heuristic(heuristic, g)
    return graph_search(s, g, hfun, algorithm="A*", heuristic=heuristic_name(heuristic))
