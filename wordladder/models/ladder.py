"""
Word Ladder Data Models

Contains the difficulty variant and the value objects returned by the engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

# Ordered words one contestant has played, start to current
Ladder = List[str]


class Difficulty(Enum):
    """AI opponent strength."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @classmethod
    def parse(cls, value) -> "Difficulty":
        """
        Convert user input to a Difficulty.

        Raises:
            ValueError: If the value does not name a difficulty
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid difficulty: {value!r}")
        return cls(value.strip().lower())


@dataclass(frozen=True)
class WordPair:
    """A solvable start/end pair produced by random pair generation."""
    start: str
    end: str
    optimal_length: int  # words in the optimal path, including both ends
