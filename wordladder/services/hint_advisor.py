"""
Hint Advisor

Suggests the unused neighbor that looks closest to the target.
"""

from typing import Collection, Optional

from .distance import DistanceEstimator
from .word_graph import WordGraph


class HintAdvisor:
    """Picks hints for human players."""

    def __init__(self, graph: WordGraph, estimator: DistanceEstimator):
        self.graph = graph
        self.estimator = estimator

    def hint(self, current: str, target: str, used: Collection[str] = ()) -> Optional[str]:
        """
        Best next word for a player.

        Args:
            current: Word the player is standing on
            target: Goal word
            used: Words the player already played

        Returns:
            The unused neighbor with the lowest estimated distance to target
            (lexically first on ties), or None if every neighbor was used
        """
        used = set(used)
        candidates = [word for word in self.graph.sorted_neighbors(current) if word not in used]
        if not candidates:
            return None

        return min(candidates, key=lambda word: self.estimator.estimate(word, target))
