"""
Score aggregation for compatibility breakdowns.

Combines the eight per-dimension compatibility scores into one overall
match score:

    overall = sum(score_i * weight_i) / sum(weight_i)

Dividing by the actual weight sum keeps partial or custom weight sets
valid. A weight set with zero total weight yields 0.0.
"""

import logging
from typing import Optional

import numpy as np

from ..profiles.schema import CompatibilityBreakdown
from .criteria import MatchingCriteria

logger = logging.getLogger(__name__)


class ScoreAggregator:
    """
    Weighted-average combiner for compatibility scores.

    Attributes:
        criteria: MatchingCriteria with the dimension weights
    """

    def __init__(self, criteria: Optional[MatchingCriteria] = None):
        """
        Initialize the aggregator.

        Args:
            criteria: Weight set (defaults to MatchingCriteria())
        """
        self.criteria = criteria or MatchingCriteria()
        self._weights = self.criteria.as_array()
        self._total_weight = float(self._weights.sum())

    def aggregate(self, breakdown: CompatibilityBreakdown) -> float:
        """
        Combine one breakdown into an overall score in [0, 1].

        Args:
            breakdown: Per-dimension compatibility scores

        Returns:
            Weighted average of the scores
        """
        if self._total_weight <= 0:
            return 0.0

        scores = np.array(breakdown.values(), dtype=float)
        overall = float(np.dot(scores, self._weights) / self._total_weight)
        return float(np.clip(overall, 0.0, 1.0))

    def aggregate_matrix(self, score_matrix: np.ndarray) -> np.ndarray:
        """
        Combine many breakdowns at once.

        Args:
            score_matrix: Array of shape (n_pairs, 8) in DIMENSIONS order

        Returns:
            Array of overall scores (n_pairs,)
        """
        score_matrix = np.asarray(score_matrix, dtype=float)
        if score_matrix.size == 0:
            return np.zeros(score_matrix.shape[0] if score_matrix.ndim == 2 else 0)
        if self._total_weight <= 0:
            return np.zeros(score_matrix.shape[0])

        return np.clip(score_matrix @ self._weights / self._total_weight, 0.0, 1.0)
