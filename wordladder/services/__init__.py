"""
Services Package

Contains the word graph, search, and AI strategy services.
"""

from .dictionary import DictionaryLoadError, parse_word_lines, load_word_lines
from .distance import DistanceEstimator
from .hint_advisor import HintAdvisor
from .ladder_engine import LadderEngine
from .move_selector import MoveSelector
from .path_finder import PathFinder
from .word_graph import WordGraph

__all__ = [
    'DictionaryLoadError', 'parse_word_lines', 'load_word_lines',
    'DistanceEstimator', 'HintAdvisor', 'LadderEngine', 'MoveSelector',
    'PathFinder', 'WordGraph'
]
