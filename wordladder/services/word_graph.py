"""
Word Graph

Adjacency relation over the dictionary: two words are connected iff they have
the same length and differ in exactly one position.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Set

from ..config.ladder_settings import WILDCARD


class WordGraph:
    """
    Immutable neighbor graph built once per dictionary load.

    Neighbors are discovered through wildcard buckets: every word is filed under
    each of its one-position-blanked patterns, and words sharing a pattern are
    connected. This avoids comparing every pair of same-length words.
    """

    def __init__(self, adjacency: Dict[str, Set[str]] = None):
        self._adjacency: Dict[str, Set[str]] = adjacency if adjacency is not None else {}
        self._sorted: Dict[str, List[str]] = {}

    @classmethod
    def build(cls, words: Iterable[str]) -> "WordGraph":
        """
        Build the graph from a collection of words.

        Args:
            words: Dictionary words; duplicates are ignored

        Returns:
            WordGraph containing every word, isolated words included
        """
        unique_words = set(words)
        adjacency: Dict[str, Set[str]] = {word: set() for word in unique_words}

        by_length: Dict[int, List[str]] = defaultdict(list)
        for word in unique_words:
            by_length[len(word)].append(word)

        for length, bucket_words in by_length.items():
            buckets: Dict[str, List[str]] = defaultdict(list)
            for word in bucket_words:
                for i in range(length):
                    buckets[word[:i] + WILDCARD + word[i + 1:]].append(word)

            for pattern_words in buckets.values():
                for i, word1 in enumerate(pattern_words):
                    for word2 in pattern_words[i + 1:]:
                        adjacency[word1].add(word2)
                        adjacency[word2].add(word1)

        return cls(adjacency)

    def neighbors(self, word: str) -> Set[str]:
        """Neighbors of a word; empty set if the word is unknown."""
        return set(self._adjacency.get(word, ()))

    def sorted_neighbors(self, word: str) -> List[str]:
        """Neighbors in lexical order, the iteration order used by the search code."""
        cached = self._sorted.get(word)
        if cached is None:
            cached = sorted(self._adjacency.get(word, ()))
            self._sorted[word] = cached
        return cached

    def degree(self, word: str) -> int:
        return len(self._adjacency.get(word, ()))

    def contains(self, word: str) -> bool:
        return word in self._adjacency

    def __contains__(self, word) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(n) for n in self._adjacency.values()) // 2

    @staticmethod
    def are_neighbors(word1: str, word2: str) -> bool:
        """True if both words have the same length and differ in exactly one position."""
        if len(word1) != len(word2):
            return False

        differences = 0
        for a, b in zip(word1, word2):
            if a != b:
                differences += 1
                if differences > 1:
                    return False

        return differences == 1
