"""
Word Ladder Tuning Constants Module

All numeric parameters of the search and AI strategies live here so they can be
adjusted in one place. Values are Final to prevent accidental modification at runtime.
"""

from typing import Final

# Dictionary parsing
WORD_PATTERN: Final[str] = r'^[a-z]+$'
"""Accepted shape of a dictionary token after lowercasing."""

WILDCARD: Final[str] = '*'
"""Character substituted at one position to build neighbor bucket keys."""

# Composite distance estimate
HAMMING_WEIGHT: Final[float] = 0.6
LEVENSHTEIN_WEIGHT: Final[float] = 0.3
CHAR_FREQUENCY_WEIGHT: Final[float] = 0.1

# A* guide: "hamming" is admissible on the unit-cost ladder graph,
# "composite" reproduces the weighted estimate above
PATH_HEURISTICS: Final[tuple] = ('hamming', 'composite')

# Easy strategy
EASY_RANDOM_MOVE_PROBABILITY: Final[float] = 0.3

# Medium strategy
MEDIUM_LOOKAHEAD_WEIGHT: Final[float] = 0.3
MEDIUM_BEST_MOVE_PROBABILITY: Final[float] = 0.7
MEDIUM_TOP_MOVES: Final[int] = 3

# Hard strategy
HARD_BLOCK_PROBABILITY: Final[float] = 0.3
HARD_DEVIATION_PROBABILITY: Final[float] = 0.2
HARD_DEVIATION_SLACK: Final[float] = 1.0
MIN_BLOCKABLE_PATH_LENGTH: Final[int] = 3

# Expert strategy
EXPERT_SEARCH_DEPTH: Final[int] = 4
POSITION_BASE_SCORE: Final[float] = 100.0
POSITION_PATH_WEIGHT: Final[float] = 2.0
POSITION_OPPONENT_WEIGHT: Final[float] = 10.0

# Random pair generation (path length counted in words)
PAIR_MAX_ATTEMPTS: Final[int] = 100
PAIR_MIN_PATH_LENGTH: Final[int] = 2   # exclusive
PAIR_MAX_PATH_LENGTH: Final[int] = 8   # exclusive
DEFAULT_PAIR_LENGTH: Final[int] = 4

# Difficulty score
DIFFICULTY_PATH_WEIGHT: Final[float] = 10.0
DIFFICULTY_HAMMING_WEIGHT: Final[float] = 5.0
DIFFICULTY_CONNECTIVITY_BASE: Final[float] = 10.0
