"""
Ladder Engine

Owned engine instance holding the dictionary, the word graph, the caches and
the AI strategies. This is the request/response surface used by the external
game UI, either in-process or through the JSON controller.
"""

import math
import random
import threading
import time
from dataclasses import dataclass, field
from typing import Collection, Dict, Iterable, List, Optional, Sequence, Set

from ..config.ladder_settings import (
    DEFAULT_PAIR_LENGTH, PAIR_MAX_ATTEMPTS, PAIR_MIN_PATH_LENGTH, PAIR_MAX_PATH_LENGTH,
    DIFFICULTY_PATH_WEIGHT, DIFFICULTY_HAMMING_WEIGHT, DIFFICULTY_CONNECTIVITY_BASE,
    EXPERT_SEARCH_DEPTH,
)
from ..models.ladder import Difficulty, WordPair
from ..utils.ladder_logger import ladder_logger
from .dictionary import (
    DictionaryLoadError, parse_word_lines, load_word_lines, get_dictionary_statistics
)
from .distance import DistanceEstimator, hamming
from .hint_advisor import HintAdvisor
from .move_selector import MoveSelector
from .path_finder import PathFinder
from .word_graph import WordGraph


@dataclass
class _Components:
    """Everything derived from one dictionary load, swapped in as a unit."""
    words: Set[str] = field(default_factory=set)
    words_by_length: Dict[int, Set[str]] = field(default_factory=dict)
    graph: WordGraph = field(default_factory=WordGraph)


class LadderEngine:
    """
    Word ladder engine for one dictionary.

    This class handles:
    - Dictionary loading (synchronous or on a background thread)
    - Word validity and neighbor queries
    - Shortest path search (A* and bidirectional BFS)
    - AI move selection and player hints
    - Random solvable pair generation and difficulty scoring

    Until a dictionary has been loaded the engine behaves as an empty graph.
    """

    def __init__(self, heuristic: str = 'hamming', seed: Optional[int] = None,
                 expert_depth: int = EXPERT_SEARCH_DEPTH):
        self.heuristic = heuristic
        self.expert_depth = expert_depth
        self.rng = random.Random(seed)

        self._ready = threading.Event()
        self._load_error: Optional[DictionaryLoadError] = None
        self._loader_thread: Optional[threading.Thread] = None
        self._install(_Components())

    def _install(self, components: _Components) -> None:
        estimator = DistanceEstimator()
        path_finder = PathFinder(components.graph, estimator, self.heuristic)

        self._components = components
        self.estimator = estimator
        self.path_finder = path_finder
        self.move_selector = MoveSelector(components.graph, estimator, path_finder,
                                          rng=self.rng, expert_depth=self.expert_depth)
        self.hint_advisor = HintAdvisor(components.graph, estimator)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def initialize(self, lines: Iterable[str]) -> None:
        """
        Build the engine from raw dictionary lines.

        Raises:
            DictionaryLoadError: If the lines contain no acceptable word
        """
        started = time.perf_counter()
        try:
            words, words_by_length = parse_word_lines(lines)
        except DictionaryLoadError as e:
            self._fail(e)
            raise

        ladder_logger.log_engine_event('dictionary_loaded', total_words=len(words),
                                       lengths=sorted(words_by_length))

        graph = WordGraph.build(words)
        self._install(_Components(words, words_by_length, graph))
        self._load_error = None
        self._ready.set()

        ladder_logger.log_engine_event(
            'graph_built', words=len(graph), edges=graph.edge_count,
            heuristic=self.heuristic,
            seconds=round(time.perf_counter() - started, 3)
        )

    def load_file(self, path: str) -> None:
        """
        Load a dictionary file synchronously.

        Raises:
            DictionaryLoadError: If the file cannot be read or holds no valid word
        """
        try:
            lines = load_word_lines(path)
        except DictionaryLoadError as e:
            self._fail(e)
            raise
        self.initialize(lines)

    def start_loading(self, path: str) -> threading.Thread:
        """
        Load a dictionary file on a background daemon thread.

        Use wait_until_ready() to block until the graph is available.
        """
        self._ready.clear()
        self._load_error = None

        def worker():
            try:
                self.load_file(path)
            except DictionaryLoadError:
                pass  # recorded by _fail, re-raised by wait_until_ready
            except Exception as e:
                error = DictionaryLoadError(f"Dictionary load from {path} crashed: {e}")
                error.__cause__ = e
                self._fail(error)

        self._loader_thread = threading.Thread(target=worker, name='dictionary-loader', daemon=True)
        self._loader_thread.start()
        return self._loader_thread

    def wait_until_ready(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the dictionary is loaded.

        Returns:
            True once the graph is ready, False on timeout

        Raises:
            DictionaryLoadError: If loading failed
        """
        self._ready.wait(timeout)
        if self._load_error is not None:
            raise self._load_error
        return self._ready.is_set() and self._load_error is None

    def _fail(self, error: DictionaryLoadError) -> None:
        self._load_error = error
        ladder_logger.log_engine_event('dictionary_load_failed', error=str(error))
        self._ready.set()

    @property
    def is_ready(self) -> bool:
        return self._ready.is_set() and self._load_error is None

    @property
    def is_loading(self) -> bool:
        return not self._ready.is_set()

    @property
    def load_error(self) -> Optional[DictionaryLoadError]:
        return self._load_error

    @property
    def graph(self) -> WordGraph:
        return self._components.graph

    @property
    def words_by_length(self) -> Dict[int, Set[str]]:
        return self._components.words_by_length

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_valid_word(self, word: str) -> bool:
        return word.lower() in self._components.words

    def are_neighbors(self, word1: str, word2: str) -> bool:
        return WordGraph.are_neighbors(word1, word2)

    def get_neighbors(self, word: str) -> List[str]:
        return list(self._components.graph.sorted_neighbors(word.lower()))

    def find_path(self, start: str, end: str, use_heuristic: bool = True) -> Optional[List[str]]:
        return self.path_finder.find_path(start, end, use_heuristic)

    def find_path_bidirectional(self, start: str, end: str) -> Optional[List[str]]:
        return self.path_finder.find_path_bidirectional(start, end)

    def select_ai_move(self, current: str, target: str, difficulty: Difficulty,
                       opponent_ladder: Sequence[str] = ()) -> Optional[str]:
        """
        Next word for an AI contestant.

        Returns:
            A neighbor of current, or None if the contestant cannot move

        Raises:
            ValueError: If current and target differ in length or the difficulty is unknown
        """
        _require_same_length(current, target)
        return self.move_selector.select_move(current, target, Difficulty.parse(difficulty), opponent_ladder)

    def get_hint(self, current: str, target: str, used: Collection[str] = ()) -> Optional[str]:
        """
        Raises:
            ValueError: If current and target differ in length
        """
        _require_same_length(current, target)
        return self.hint_advisor.hint(current, target, used)

    def generate_random_pair(self, length: int = DEFAULT_PAIR_LENGTH) -> Optional[WordPair]:
        """
        Sample a solvable start/end pair of the given word length.

        A pair qualifies when its optimal path has more than 2 and fewer than
        8 words. At most 100 samples are drawn.

        Returns:
            WordPair, or None when no qualifying pair was found
        """
        candidates = sorted(self._components.words_by_length.get(length, ()))
        if len(candidates) < 2:
            return None

        for _ in range(PAIR_MAX_ATTEMPTS):
            start = self.rng.choice(candidates)
            end = self.rng.choice(candidates)
            if start == end:
                continue

            path = self.find_path(start, end)
            if path and PAIR_MIN_PATH_LENGTH < len(path) < PAIR_MAX_PATH_LENGTH:
                return WordPair(start=start, end=end, optimal_length=len(path))

        return None

    def calculate_difficulty(self, start: str, end: str) -> float:
        """
        Difficulty score of a puzzle: longer paths, more differing letters and
        sparser neighborhoods score higher.

        Returns:
            The score, or math.inf when no path exists
        """
        path = self.find_path(start, end)
        if not path:
            return math.inf

        average_neighbors = sum(self.graph.degree(word) for word in path) / len(path)
        return (len(path) * DIFFICULTY_PATH_WEIGHT
                + hamming(start, end) * DIFFICULTY_HAMMING_WEIGHT
                + (DIFFICULTY_CONNECTIVITY_BASE - average_neighbors))

    def get_statistics(self) -> dict:
        stats = get_dictionary_statistics(self._components.words_by_length)
        stats.update({
            'edges': self.graph.edge_count,
            'heuristic': self.heuristic,
            'path_cache_size': self.path_finder.cache_size,
            'heuristic_cache_size': self.estimator.cache_size,
        })
        return stats


def _require_same_length(current: str, target: str) -> None:
    if len(current) != len(target):
        raise ValueError(f"Words must have the same length: '{current}' vs '{target}'")
