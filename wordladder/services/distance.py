"""
Distance Estimation

Composite word distance used to rank candidate moves and, optionally, to guide A*.
"""

from collections import Counter
from typing import Dict, Tuple

from ..config.ladder_settings import (
    HAMMING_WEIGHT, LEVENSHTEIN_WEIGHT, CHAR_FREQUENCY_WEIGHT
)


def hamming(word1: str, word2: str) -> int:
    """
    Number of positions where the words differ.

    Raises:
        ValueError: If the words have different lengths
    """
    if len(word1) != len(word2):
        raise ValueError(f"Hamming distance needs equal lengths: '{word1}' vs '{word2}'")
    return sum(1 for a, b in zip(word1, word2) if a != b)


def levenshtein(word1: str, word2: str) -> int:
    """Edit distance with unit insertion, deletion and substitution costs."""
    rows, cols = len(word2) + 1, len(word1) + 1
    matrix = [[0] * cols for _ in range(rows)]

    for i in range(rows):
        matrix[i][0] = i
    for j in range(cols):
        matrix[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            if word2[i - 1] == word1[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = min(
                    matrix[i - 1][j - 1] + 1,  # substitution
                    matrix[i][j - 1] + 1,      # insertion
                    matrix[i - 1][j] + 1       # deletion
                )

    return matrix[rows - 1][cols - 1]


def char_frequency_difference(word1: str, word2: str) -> int:
    """Sum of per-character count differences over the characters of both words."""
    freq1, freq2 = Counter(word1), Counter(word2)
    return sum(abs(freq1[char] - freq2[char]) for char in set(freq1) | set(freq2))


class DistanceEstimator:
    """
    Memoized composite distance:
    0.6 * hamming + 0.3 * levenshtein + 0.1 * character frequency difference.

    The cache is never invalidated; the dictionary is immutable after load.
    """

    def __init__(self):
        self._cache: Dict[Tuple[str, str], float] = {}

    def estimate(self, word1: str, word2: str) -> float:
        """
        Estimated distance between two equal-length words.

        Raises:
            ValueError: If the words have different lengths
        """
        key = (word1, word2)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        value = (hamming(word1, word2) * HAMMING_WEIGHT
                 + levenshtein(word1, word2) * LEVENSHTEIN_WEIGHT
                 + char_frequency_difference(word1, word2) * CHAR_FREQUENCY_WEIGHT)

        # Symmetric, store both orderings
        self._cache[key] = value
        self._cache[(word2, word1)] = value
        return value

    @property
    def cache_size(self) -> int:
        return len(self._cache)
