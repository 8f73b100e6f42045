"""
Path Finder

Shortest word-ladder search over a WordGraph: A* and bidirectional BFS,
each with its own result cache.
"""

import heapq
from collections import deque
from itertools import count
from typing import Callable, Dict, List, Optional, Tuple

from ..config.ladder_settings import PATH_HEURISTICS
from .distance import DistanceEstimator, hamming
from .word_graph import WordGraph

Path = List[str]

# Cache marker for pairs that have not been searched yet; None means "no path"
_NOT_COMPUTED = object()


class PathFinder:
    """
    Path search over an immutable word graph.

    A* expands neighbors in lexical order and breaks priority ties by insertion
    order, so the same query always yields the same path. With the default
    "hamming" guide the returned path is a true shortest path. The "composite"
    guide reuses the DistanceEstimator, which may overestimate and therefore may
    return a longer path.
    """

    def __init__(self, graph: WordGraph, estimator: DistanceEstimator,
                 heuristic: str = 'hamming'):
        if heuristic not in PATH_HEURISTICS:
            raise ValueError(f"Unknown path heuristic '{heuristic}', expected one of {PATH_HEURISTICS}")

        self.graph = graph
        self.estimator = estimator
        self.heuristic_name = heuristic
        self._heuristic: Callable[[str, str], float] = (
            hamming if heuristic == 'hamming' else estimator.estimate
        )
        self._astar_cache: Dict[Tuple[str, str, bool], Optional[Path]] = {}
        self._bidirectional_cache: Dict[Tuple[str, str], Optional[Path]] = {}

    def find_path(self, start: str, end: str, use_heuristic: bool = True) -> Optional[Path]:
        """
        A* search from start to end.

        Args:
            start: First word of the ladder
            end: Word to reach
            use_heuristic: Guide the search with the configured heuristic;
                when False every node has estimate 0

        Returns:
            List of words from start to end, or None when the lengths differ
            or no chain exists
        """
        if len(start) != len(end):
            return None
        if start == end:
            return [start]

        key = (start, end, use_heuristic)
        cached = self._astar_cache.get(key, _NOT_COMPUTED)
        if cached is not _NOT_COMPUTED:
            return list(cached) if cached is not None else None

        path = self._astar(start, end, use_heuristic)
        self._astar_cache[key] = path
        return list(path) if path is not None else None

    def _astar(self, start: str, end: str, use_heuristic: bool) -> Optional[Path]:
        if not self.graph.contains(start) or not self.graph.contains(end):
            return None

        estimate = self._heuristic if use_heuristic else (lambda word, goal: 0)
        tie = count()

        open_heap = [(estimate(start, end), next(tie), start)]
        g_score: Dict[str, int] = {start: 0}
        came_from: Dict[str, str] = {}
        closed = set()

        while open_heap:
            _, _, current = heapq.heappop(open_heap)
            if current in closed:
                continue  # stale entry

            if current == end:
                return self._reconstruct(came_from, current)

            closed.add(current)
            tentative = g_score[current] + 1

            for neighbor in self.graph.sorted_neighbors(current):
                if neighbor in closed:
                    continue
                if tentative < g_score.get(neighbor, float('inf')):
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative
                    heapq.heappush(open_heap, (tentative + estimate(neighbor, end), next(tie), neighbor))

        return None

    @staticmethod
    def _reconstruct(came_from: Dict[str, str], current: str) -> Path:
        path = [current]
        while current in came_from:
            current = came_from[current]
            path.append(current)
        path.reverse()
        return path

    def find_path_bidirectional(self, start: str, end: str) -> Optional[Path]:
        """
        Breadth-first search from both ends, alternating one full level at a time.

        Returns:
            A shortest list of words from start to end, or None
        """
        if len(start) != len(end):
            return None
        if start == end:
            return [start]

        key = (start, end)
        cached = self._bidirectional_cache.get(key, _NOT_COMPUTED)
        if cached is not _NOT_COMPUTED:
            return list(cached) if cached is not None else None

        path = self._bidirectional(start, end)
        self._bidirectional_cache[key] = path
        return list(path) if path is not None else None

    def _bidirectional(self, start: str, end: str) -> Optional[Path]:
        if not self.graph.contains(start) or not self.graph.contains(end):
            return None

        forward_depth: Dict[str, int] = {start: 0}
        backward_depth: Dict[str, int] = {end: 0}
        forward_parent: Dict[str, str] = {}
        backward_parent: Dict[str, str] = {}
        forward_queue = deque([start])
        backward_queue = deque([end])

        while forward_queue and backward_queue:
            meeting = self._expand_level(forward_queue, forward_depth, forward_parent, backward_depth)
            if meeting is None:
                meeting = self._expand_level(backward_queue, backward_depth, backward_parent, forward_depth)
            if meeting is not None:
                return self._join(meeting, forward_parent, backward_parent)

        return None

    def _expand_level(self, queue: deque, depth: Dict[str, int], parent: Dict[str, str],
                      other_depth: Dict[str, int]) -> Optional[str]:
        """
        Expand every node of the current frontier level.

        Returns:
            The meeting word with the smallest combined depth discovered during
            this level, or None if the frontiers did not touch
        """
        best_meeting = None
        best_length = None

        for _ in range(len(queue)):
            current = queue.popleft()
            for neighbor in self.graph.sorted_neighbors(current):
                if neighbor in depth:
                    continue
                depth[neighbor] = depth[current] + 1
                parent[neighbor] = current
                queue.append(neighbor)

                if neighbor in other_depth:
                    length = depth[neighbor] + other_depth[neighbor]
                    if best_length is None or length < best_length:
                        best_meeting, best_length = neighbor, length

        return best_meeting

    @staticmethod
    def _join(meeting: str, forward_parent: Dict[str, str], backward_parent: Dict[str, str]) -> Path:
        path = [meeting]
        current = meeting
        while current in forward_parent:
            current = forward_parent[current]
            path.append(current)
        path.reverse()

        current = meeting
        while current in backward_parent:
            current = backward_parent[current]
            path.append(current)

        return path

    @property
    def cache_size(self) -> int:
        return len(self._astar_cache) + len(self._bidirectional_cache)
