"""
Move Selector

AI move selection for the four opponent strengths. Every strategy returns a
neighbor of the current word, or None when the current word has no neighbors.
"""

import math
import random
from typing import Callable, Dict, Optional, Sequence, Tuple

from ..config.ladder_settings import (
    EASY_RANDOM_MOVE_PROBABILITY,
    MEDIUM_LOOKAHEAD_WEIGHT, MEDIUM_BEST_MOVE_PROBABILITY, MEDIUM_TOP_MOVES,
    HARD_BLOCK_PROBABILITY, HARD_DEVIATION_PROBABILITY, HARD_DEVIATION_SLACK,
    MIN_BLOCKABLE_PATH_LENGTH,
    EXPERT_SEARCH_DEPTH, POSITION_BASE_SCORE, POSITION_PATH_WEIGHT, POSITION_OPPONENT_WEIGHT,
)
from ..models.ladder import Difficulty
from .distance import DistanceEstimator
from .path_finder import PathFinder
from .word_graph import WordGraph


class MoveSelector:
    """
    Strategy table keyed by Difficulty.

    This class handles:
    - Easy: mostly-forward random moves with frequent mistakes
    - Medium: greedy ranking with a two-step lookahead
    - Hard: follows the optimal path, sometimes blocking the opponent
    - Expert: depth-limited minimax with alpha-beta pruning
    """

    def __init__(self, graph: WordGraph, estimator: DistanceEstimator, path_finder: PathFinder,
                 rng: Optional[random.Random] = None, expert_depth: int = EXPERT_SEARCH_DEPTH):
        self.graph = graph
        self.estimator = estimator
        self.path_finder = path_finder
        self.rng = rng or random.Random()
        self.expert_depth = expert_depth

        self._strategies: Dict[Difficulty, Callable[[str, str, Sequence[str]], Optional[str]]] = {
            Difficulty.EASY: self.select_easy_move,
            Difficulty.MEDIUM: self.select_medium_move,
            Difficulty.HARD: self.select_hard_move,
            Difficulty.EXPERT: self.select_expert_move,
        }

    def select_move(self, current: str, target: str, difficulty: Difficulty,
                    opponent_ladder: Sequence[str] = ()) -> Optional[str]:
        """
        Choose the AI's next word.

        Args:
            current: Word the AI is standing on
            target: Shared goal word
            difficulty: Strategy to use
            opponent_ladder: Words played by the opponent so far (not modified)

        Returns:
            A neighbor of current, or None if the AI is stuck
        """
        return self._strategies[difficulty](current, target, opponent_ladder)

    def select_easy_move(self, current: str, target: str, opponent_ladder: Sequence[str] = ()) -> Optional[str]:
        neighbors = self.graph.sorted_neighbors(current)
        if not neighbors:
            return None

        # Frequent mistakes: any neighbor, even one leading away
        if self.rng.random() < EASY_RANDOM_MOVE_PROBABILITY:
            return self.rng.choice(neighbors)

        current_distance = self.estimator.estimate(current, target)
        forward_moves = [word for word in neighbors
                         if self.estimator.estimate(word, target) <= current_distance]

        return self.rng.choice(forward_moves or neighbors)

    def score_with_lookahead(self, word: str, target: str) -> float:
        """Estimate of word plus the weighted best estimate one step further."""
        lookahead = min(
            (self.estimator.estimate(next_word, target) for next_word in self.graph.sorted_neighbors(word)),
            default=math.inf
        )
        return self.estimator.estimate(word, target) + lookahead * MEDIUM_LOOKAHEAD_WEIGHT

    def select_medium_move(self, current: str, target: str, opponent_ladder: Sequence[str] = ()) -> Optional[str]:
        neighbors = self.graph.sorted_neighbors(current)
        if not neighbors:
            return None

        ranked = sorted(neighbors, key=lambda word: self.score_with_lookahead(word, target))

        if self.rng.random() < MEDIUM_BEST_MOVE_PROBABILITY:
            return ranked[0]
        return self.rng.choice(ranked[:MEDIUM_TOP_MOVES])

    def select_hard_move(self, current: str, target: str, opponent_ladder: Sequence[str] = ()) -> Optional[str]:
        neighbors = self.graph.sorted_neighbors(current)
        if not neighbors:
            return None

        optimal_path = self.path_finder.find_path(current, target)
        if not optimal_path or len(optimal_path) < 2:
            return self.select_medium_move(current, target, opponent_ladder)

        if opponent_ladder and self.rng.random() < HARD_BLOCK_PROBABILITY:
            blocking_move = self.find_blocking_move(current, opponent_ladder[-1], target)
            if blocking_move:
                return blocking_move

        next_move = optimal_path[1]

        # Occasional deviation for unpredictability
        if self.rng.random() < HARD_DEVIATION_PROBABILITY:
            limit = self.estimator.estimate(current, target) + HARD_DEVIATION_SLACK
            alternatives = [word for word in neighbors
                            if word != next_move and self.estimator.estimate(word, target) <= limit]
            if alternatives:
                return self.rng.choice(alternatives)

        return next_move

    def find_blocking_move(self, current: str, opponent_word: str, target: str) -> Optional[str]:
        """
        First neighbor of current lying inside the opponent's optimal path to target.

        The opponent's own position and the target are never blocking squares.
        """
        opponent_path = self.path_finder.find_path(opponent_word, target)
        if not opponent_path or len(opponent_path) < MIN_BLOCKABLE_PATH_LENGTH:
            return None

        blocked_squares = set(opponent_path[1:-1])
        for word in self.graph.sorted_neighbors(current):
            if word in blocked_squares:
                return word
        return None

    def select_expert_move(self, current: str, target: str, opponent_ladder: Sequence[str] = ()) -> Optional[str]:
        _, move = self.minimax(current, target, self.expert_depth, -math.inf, math.inf, True, opponent_ladder)
        if move is None and self.graph.sorted_neighbors(current):
            # Standing on the target (or depth 0) leaves nothing to search
            return self.select_medium_move(current, target, opponent_ladder)
        return move

    def minimax(self, word: str, target: str, depth: int, alpha: float, beta: float,
                maximizing: bool, opponent_ladder: Sequence[str] = ()) -> Tuple[float, Optional[str]]:
        """
        Minimax with alpha-beta pruning.

        Returns:
            Tuple of (score, best move from word); the move is None at leaves
        """
        if depth == 0 or word == target:
            return self.evaluate_position(word, target, opponent_ladder), None

        neighbors = self.graph.sorted_neighbors(word)
        if not neighbors:
            # Being stuck is bad for whoever is to move
            return (-math.inf if maximizing else math.inf), None

        best_move = None

        if maximizing:
            best_score = -math.inf
            for neighbor in neighbors:
                score, _ = self.minimax(neighbor, target, depth - 1, alpha, beta, False, opponent_ladder)
                if score > best_score or best_move is None:
                    best_score, best_move = score, neighbor
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
        else:
            best_score = math.inf
            for neighbor in neighbors:
                score, _ = self.minimax(neighbor, target, depth - 1, alpha, beta, True, opponent_ladder)
                if score < best_score or best_move is None:
                    best_score, best_move = score, neighbor
                beta = min(beta, score)
                if beta <= alpha:
                    break

        return best_score, best_move

    def evaluate_position(self, word: str, target: str, opponent_ladder: Sequence[str] = ()) -> float:
        """
        Static score of standing on word: higher is better for the AI.

        Unreachable targets count as an infinitely long path.
        """
        distance = self.estimator.estimate(word, target)
        path = self.path_finder.find_path(word, target)
        path_length = len(path) if path else math.inf

        score = POSITION_BASE_SCORE - distance - path_length * POSITION_PATH_WEIGHT

        # Bonus for being ahead of the opponent
        if opponent_ladder:
            opponent_distance = self.estimator.estimate(opponent_ladder[-1], target)
            score += (opponent_distance - distance) * POSITION_OPPONENT_WEIGHT

        return score
