"""
Mentor ranking for one mentee over a mentor pool.

This module provides the matching entry point that:
1. Evaluates every mentor against the mentee (eight compatibility scores)
2. Aggregates the scores with the active matching criteria
3. Drops mentors at or below the minimum score
4. Builds explanations only for the surviving mentors
5. Stable-sorts by match score and truncates to the result limit

The engine holds no per-call state. Its criteria are an immutable value:
update_matching_criteria() swaps in a merged copy, and a criteria override
passed to find_best_matches() applies to that call only.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import numpy as np

from ..aggregation import MatchingCriteria, ScoreAggregator
from ..compatibility import CompatibilityEvaluator, SkillMatcher, SynonymSkillMatcher
from ..explanation import ExplanationGenerator, analyze_mentee_profile
from ..profiles.schema import (
    DIMENSIONS,
    MatchResult,
    MenteeAnalysis,
    MenteeProfile,
    MentorProfile,
)

logger = logging.getLogger(__name__)

CriteriaOverride = Union[MatchingCriteria, Mapping[str, float], None]


@dataclass(frozen=True)
class MatchingSettings:
    """
    Tunable constants of the ranking pass.

    Attributes:
        min_score: Exclusive lower bound on the unscaled aggregate score
        max_results: Default result limit
        max_reasons: Maximum match reasons per result
    """
    min_score: float = 0.3
    max_results: int = 10
    max_reasons: int = 5

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Validate configuration values."""
        if not 0 <= self.min_score <= 1:
            raise ValueError(f"min_score must be in [0, 1], got {self.min_score}")
        if self.max_results < 0:
            raise ValueError(f"max_results must be non-negative, got {self.max_results}")
        if self.max_reasons < 0:
            raise ValueError(f"max_reasons must be non-negative, got {self.max_reasons}")

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "MatchingSettings":
        """Create from main config dictionary."""
        matching_config = config.get("matching", {}) or {}
        return cls(
            min_score=float(matching_config.get("min_score", 0.3)),
            max_results=int(matching_config.get("max_results", 10)),
            max_reasons=int(matching_config.get("max_reasons", 5))
        )


def to_match_score(overall_score: float) -> int:
    """Scale an aggregate in [0, 1] to an integer 0-100, rounding halves up."""
    return int(math.floor(overall_score * 100 + 0.5))


class MentorMatchingEngine:
    """
    Ranks mentors for a mentee by multi-factor compatibility.

    Attributes:
        settings: MatchingSettings (threshold and limits)
        evaluator: CompatibilityEvaluator for per-dimension scores
        explainer: ExplanationGenerator for reasons and recommendations
    """

    def __init__(
        self,
        criteria: Optional[MatchingCriteria] = None,
        settings: Optional[MatchingSettings] = None,
        skill_matcher: Optional[SkillMatcher] = None
    ):
        """
        Initialize the engine.

        Args:
            criteria: Default weight set (defaults to MatchingCriteria())
            settings: Threshold and limits (defaults to MatchingSettings())
            skill_matcher: Skill equivalence strategy shared by scoring and
                explanations (defaults to SynonymSkillMatcher())
        """
        self._criteria = criteria or MatchingCriteria()
        self.settings = settings or MatchingSettings()
        matcher = skill_matcher or SynonymSkillMatcher()
        self.evaluator = CompatibilityEvaluator(matcher)
        self.explainer = ExplanationGenerator(matcher, max_reasons=self.settings.max_reasons)
        logger.info(f"Initialized MentorMatchingEngine with min_score={self.settings.min_score}, "
                    f"max_results={self.settings.max_results}")

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "MentorMatchingEngine":
        """Create an engine from the main config dictionary."""
        return cls(
            criteria=MatchingCriteria.from_config(config),
            settings=MatchingSettings.from_config(config),
            skill_matcher=SynonymSkillMatcher.from_config(config)
        )

    # ------------------------------
    # Criteria
    # ------------------------------
    def get_matching_criteria(self) -> MatchingCriteria:
        """Return the current default weight set (immutable)."""
        return self._criteria

    def update_matching_criteria(self, criteria: Mapping[str, float]) -> None:
        """
        Merge new weights over the current defaults.

        Not synchronized: concurrent callers should pass criteria to
        find_best_matches() instead.
        """
        self._criteria = self._criteria.merged(criteria)
        logger.info(f"Updated matching criteria: {self._criteria.to_dict()}")

    def _resolve_criteria(self, criteria: CriteriaOverride) -> MatchingCriteria:
        if criteria is None:
            return self._criteria
        if isinstance(criteria, MatchingCriteria):
            return criteria
        return self._criteria.merged(criteria)

    # ------------------------------
    # Ranking
    # ------------------------------
    def find_best_matches(
        self,
        mentee: MenteeProfile,
        mentors: Sequence[MentorProfile],
        criteria: CriteriaOverride = None,
        max_results: Optional[int] = None
    ) -> List[MatchResult]:
        """
        Rank mentors for a mentee.

        Args:
            mentee: Mentee profile
            mentors: Mentor pool (list or tuple)
            criteria: Full MatchingCriteria, or a partial mapping merged
                over the current criteria for this call only
            max_results: Result limit (defaults to settings.max_results)

        Returns:
            MatchResults sorted by match_score descending; ties keep the
            input order

        Raises:
            TypeError: If mentors is not a list or tuple
        """
        if not isinstance(mentors, (list, tuple)):
            raise TypeError(f"mentors must be a list of MentorProfile, got {type(mentors).__name__}")

        limit = self.settings.max_results if max_results is None else max_results
        if limit < 0:
            raise ValueError(f"max_results must be non-negative, got {limit}")

        aggregator = ScoreAggregator(self._resolve_criteria(criteria))
        results = []

        for mentor in mentors:
            compatibility = self.evaluator.evaluate(mentee, mentor)
            overall = aggregator.aggregate(compatibility)

            if overall <= self.settings.min_score:
                logger.debug(f"Filtered mentor {mentor.id}: score {overall:.4f} "
                             f"<= {self.settings.min_score}")
                continue

            results.append(self._build_result(mentee, mentor, compatibility, overall))

        # list.sort is stable, so equal scores keep the pool order
        results.sort(key=lambda r: r.match_score, reverse=True)
        top = results[:limit]

        logger.info(f"Matched mentee {mentee.id}: {len(mentors)} mentors evaluated, "
                    f"{len(results)} above threshold, {len(top)} returned")
        return top

    def _build_result(self, mentee, mentor, compatibility, overall) -> MatchResult:
        return MatchResult(
            mentor=mentor,
            match_score=to_match_score(overall),
            compatibility=compatibility,
            match_reasons=self.explainer.generate_match_reasons(mentee, mentor, compatibility),
            potential_challenges=self.explainer.identify_potential_challenges(mentee, mentor),
            recommendations=self.explainer.generate_recommendations(mentee, mentor),
            confidence=self.explainer.calculate_confidence(overall, compatibility)
        )

    def score_pool(
        self,
        mentee: MenteeProfile,
        mentors: Sequence[MentorProfile],
        criteria: CriteriaOverride = None
    ) -> np.ndarray:
        """
        Compute unfiltered aggregate scores for a whole pool.

        Args:
            mentee: Mentee profile
            mentors: Mentor pool
            criteria: Optional weight override, as in find_best_matches

        Returns:
            Array of aggregate scores in pool order (n_mentors,)
        """
        aggregator = ScoreAggregator(self._resolve_criteria(criteria))
        return aggregator.aggregate_matrix(self.compatibility_matrix(mentee, mentors))

    def compatibility_matrix(self, mentee: MenteeProfile, mentors: Sequence[MentorProfile]) -> np.ndarray:
        """Per-dimension scores for a pool, shape (n_mentors, 8)."""
        rows = [self.evaluator.evaluate(mentee, mentor).values() for mentor in mentors]
        return np.array(rows, dtype=float).reshape(len(rows), len(DIMENSIONS))

    # ------------------------------
    # Mentee analysis
    # ------------------------------
    def analyze_mentee_profile(self, mentee: MenteeProfile) -> MenteeAnalysis:
        return analyze_mentee_profile(mentee)
