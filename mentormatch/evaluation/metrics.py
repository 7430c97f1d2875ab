"""
Evaluation metrics for mentor rankings.

The matching engine is rule-based and has no ground-truth labels, so
evaluation focuses on describing its behavior for a given pool:
1. Score distribution over the whole pool (before thresholding)
2. Sensitivity of the ranking to perturbations of the matching weights
3. Confidence label counts among returned matches

This module DOES NOT claim that higher scores predict better mentorships.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional, Sequence
import json

import numpy as np
import pandas as pd
from scipy.stats import spearmanr

from ..aggregation import MatchingCriteria, ScoreAggregator
from ..profiles.schema import DIMENSIONS, MatchResult, MenteeProfile, MentorProfile

logger = logging.getLogger(__name__)

DEFAULT_QUANTILES = (0.1, 0.25, 0.5, 0.75, 0.9)


@dataclass
class ScoreDistributionStats:
    """Statistics about score distribution."""
    mean: float
    std: float
    min: float
    max: float
    quantiles: Dict[str, float]  # e.g., {"p10": 0.2, "p50": 0.5, "p90": 0.8}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mean": float(self.mean),
            "std": float(self.std),
            "min": float(self.min),
            "max": float(self.max),
            "quantiles": {k: float(v) for k, v in self.quantiles.items()}
        }


@dataclass
class SensitivityMetrics:
    """Ranking stability under perturbed matching weights."""
    n_perturbations: int
    noise_scale: float
    top_k: int
    rank_correlation_mean: float  # Mean Spearman correlation with the base ranking
    rank_correlation_min: float
    top_k_jaccard_mean: float  # Mean Jaccard overlap of the top-k mentors
    score_std_mean: float  # Mean per-mentor score std across perturbations

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n_perturbations": int(self.n_perturbations),
            "noise_scale": float(self.noise_scale),
            "top_k": int(self.top_k),
            "rank_correlation_mean": float(self.rank_correlation_mean),
            "rank_correlation_min": float(self.rank_correlation_min),
            "top_k_jaccard_mean": float(self.top_k_jaccard_mean),
            "score_std_mean": float(self.score_std_mean)
        }


@dataclass
class MatchingReport:
    """
    Evaluation report for one ranking call.

    Contains the pool score distribution, confidence counts and, optionally,
    weight sensitivity metrics.
    """
    mentee_id: str
    n_mentors: int
    n_matches: int
    criteria: Dict[str, float]
    distribution_stats: ScoreDistributionStats
    confidence_counts: Dict[str, int] = field(default_factory=dict)
    sensitivity: Optional[SensitivityMetrics] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "mentee_id": self.mentee_id,
            "n_mentors": int(self.n_mentors),
            "n_matches": int(self.n_matches),
            "criteria": dict(self.criteria),
            "distribution_stats": self.distribution_stats.to_dict(),
            "confidence_counts": dict(self.confidence_counts)
        }
        if self.sensitivity:
            result["sensitivity"] = self.sensitivity.to_dict()
        return result

    def save(self, filepath: str) -> None:
        """Save report to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved matching report to {filepath}")

    def summary(self) -> str:
        """Generate text summary of the report."""
        lines = [
            f"Matching Report: mentee {self.mentee_id}",
            "=" * 50,
            f"Mentors evaluated: {self.n_mentors}",
            f"Matches returned:  {self.n_matches}",
            "",
            "Pool Score Distribution:",
            f"  Mean: {self.distribution_stats.mean:.4f}",
            f"  Std:  {self.distribution_stats.std:.4f}",
            f"  Min:  {self.distribution_stats.min:.4f}",
            f"  Max:  {self.distribution_stats.max:.4f}",
        ]

        for q_name, q_value in self.distribution_stats.quantiles.items():
            lines.append(f"  {q_name}: {q_value:.4f}")

        if self.confidence_counts:
            lines.extend(["", "Confidence:"])
            for label, count in self.confidence_counts.items():
                lines.append(f"  {label}: {count}")

        if self.sensitivity:
            lines.extend([
                "",
                f"Weight Sensitivity ({self.sensitivity.n_perturbations} perturbations, "
                f"noise {self.sensitivity.noise_scale:.0%}):",
                f"  Rank correlation (mean): {self.sensitivity.rank_correlation_mean:.4f}",
                f"  Rank correlation (min):  {self.sensitivity.rank_correlation_min:.4f}",
                f"  Top-{self.sensitivity.top_k} Jaccard: {self.sensitivity.top_k_jaccard_mean:.4f}",
                f"  Score Std (mean): {self.sensitivity.score_std_mean:.4f}",
            ])

        return "\n".join(lines)


def compute_score_distribution_stats(
    scores: np.ndarray,
    quantiles: Sequence[float] = DEFAULT_QUANTILES
) -> ScoreDistributionStats:
    """
    Compute distribution statistics for scores.

    Args:
        scores: Array of aggregate scores
        quantiles: Quantile values to compute (default: p10, p25, p50, p75, p90)

    Returns:
        ScoreDistributionStats instance (all zeros for an empty array)
    """
    scores = np.asarray(scores, dtype=float)
    if scores.size == 0:
        logger.warning("No scores to summarize")
        return ScoreDistributionStats(
            mean=0.0, std=0.0, min=0.0, max=0.0,
            quantiles={f"p{int(q * 100)}": 0.0 for q in quantiles}
        )

    quantile_dict = {
        f"p{int(q * 100)}": float(np.percentile(scores, q * 100))
        for q in quantiles
    }

    return ScoreDistributionStats(
        mean=float(np.mean(scores)),
        std=float(np.std(scores)),
        min=float(np.min(scores)),
        max=float(np.max(scores)),
        quantiles=quantile_dict
    )


def _top_k_indices(scores: np.ndarray, k: int) -> set:
    # Stable on ties, like the ranking itself
    return set(np.argsort(-scores, kind="stable")[:k].tolist())


def _rank_correlation(a: np.ndarray, b: np.ndarray) -> float:
    if len(a) < 2:
        return 1.0
    correlation, _ = spearmanr(a, b)
    if np.isnan(correlation):
        # Constant score vectors: identical rankings or no ranking at all
        return 1.0 if np.allclose(a, b) else 0.0
    return float(correlation)


def perturb_criteria(
    criteria: MatchingCriteria,
    rng: np.random.RandomState,
    noise_scale: float
) -> MatchingCriteria:
    """
    Draw a multiplicatively perturbed weight set.

    Each weight is scaled by a factor in [1 - noise_scale, 1 + noise_scale]
    and the result is renormalized to the original total weight.
    """
    weights = criteria.as_array()
    total = weights.sum()
    factors = 1.0 + rng.uniform(-noise_scale, noise_scale, size=len(weights))
    perturbed = weights * factors
    if perturbed.sum() > 0:
        perturbed = perturbed / perturbed.sum() * total
    return MatchingCriteria(**dict(zip(DIMENSIONS, perturbed.tolist())))


def compute_criteria_sensitivity(
    compatibility_matrix: np.ndarray,
    criteria: MatchingCriteria,
    n_perturbations: int = 20,
    noise_scale: float = 0.2,
    top_k: int = 5,
    random_seed: int = 42
) -> SensitivityMetrics:
    """
    Measure how stable a ranking is under small changes to the weights.

    Args:
        compatibility_matrix: Per-dimension scores for the pool (n_mentors x 8)
        criteria: Base weight set
        n_perturbations: Number of perturbed weight sets to draw
        noise_scale: Maximum relative change per weight
        top_k: Number of top mentors for Jaccard computation
        random_seed: Seed for the perturbation RNG

    Returns:
        SensitivityMetrics instance
    """
    if not 0 <= noise_scale < 1:
        raise ValueError(f"noise_scale must be in [0, 1), got {noise_scale}")

    matrix = np.asarray(compatibility_matrix, dtype=float)
    base_scores = ScoreAggregator(criteria).aggregate_matrix(matrix)
    n_mentors = len(base_scores)

    if n_mentors == 0 or n_perturbations < 1:
        logger.warning("Need at least one mentor and one perturbation for sensitivity analysis")
        return SensitivityMetrics(
            n_perturbations=n_perturbations,
            noise_scale=noise_scale,
            top_k=top_k,
            rank_correlation_mean=1.0,
            rank_correlation_min=1.0,
            top_k_jaccard_mean=1.0,
            score_std_mean=0.0
        )

    rng = np.random.RandomState(random_seed)
    base_top = _top_k_indices(base_scores, top_k)

    run_scores = []
    correlations = []
    jaccard_scores = []

    for _ in range(n_perturbations):
        perturbed = perturb_criteria(criteria, rng, noise_scale)
        scores = ScoreAggregator(perturbed).aggregate_matrix(matrix)
        run_scores.append(scores)

        correlations.append(_rank_correlation(base_scores, scores))

        top = _top_k_indices(scores, top_k)
        union = len(base_top | top)
        jaccard_scores.append(len(base_top & top) / union if union > 0 else 1.0)

    # Per-mentor std across perturbations
    per_mentor_std = np.std(np.vstack(run_scores), axis=0)

    return SensitivityMetrics(
        n_perturbations=n_perturbations,
        noise_scale=noise_scale,
        top_k=top_k,
        rank_correlation_mean=float(np.mean(correlations)),
        rank_correlation_min=float(np.min(correlations)),
        top_k_jaccard_mean=float(np.mean(jaccard_scores)),
        score_std_mean=float(np.mean(per_mentor_std))
    )


def count_confidence(results: Sequence[MatchResult]) -> Dict[str, int]:
    counts = {"high": 0, "medium": 0, "low": 0}
    for result in results:
        counts[result.confidence.value] += 1
    return counts


def create_matching_report(
    engine,
    mentee: MenteeProfile,
    mentors: Sequence[MentorProfile],
    results: Sequence[MatchResult],
    criteria: Optional[MatchingCriteria] = None,
    quantiles: Sequence[float] = DEFAULT_QUANTILES,
    n_perturbations: int = 20,
    noise_scale: float = 0.2,
    top_k: int = 5,
    random_seed: int = 42,
    include_sensitivity: bool = True
) -> MatchingReport:
    """
    Create a complete matching report.

    Args:
        engine: MentorMatchingEngine used for the ranking
        mentee: Mentee profile
        mentors: Full mentor pool that was ranked
        results: Match results returned by the engine
        criteria: Weight set used (defaults to the engine's current criteria)
        quantiles: Quantiles to compute
        n_perturbations: Perturbed weight sets for sensitivity analysis
        noise_scale: Maximum relative weight change
        top_k: Top-k mentors for ranking overlap
        random_seed: Seed for the perturbation RNG
        include_sensitivity: Whether to run the sensitivity analysis

    Returns:
        MatchingReport instance
    """
    criteria = criteria or engine.get_matching_criteria()
    matrix = engine.compatibility_matrix(mentee, mentors)
    pool_scores = ScoreAggregator(criteria).aggregate_matrix(matrix)

    sensitivity = None
    if include_sensitivity:
        sensitivity = compute_criteria_sensitivity(
            matrix, criteria,
            n_perturbations=n_perturbations,
            noise_scale=noise_scale,
            top_k=top_k,
            random_seed=random_seed
        )

    return MatchingReport(
        mentee_id=mentee.id,
        n_mentors=len(mentors),
        n_matches=len(results),
        criteria=criteria.to_dict(),
        distribution_stats=compute_score_distribution_stats(pool_scores, quantiles),
        confidence_counts=count_confidence(results),
        sensitivity=sensitivity
    )


RESULT_COLUMNS = (
    ["rank", "mentor_id", "mentor_name", "match_score", "confidence"]
    + list(DIMENSIONS)
    + ["match_reasons", "potential_challenges", "session_frequency",
       "session_duration", "focus_areas", "communication_strategy"]
)


def results_to_frame(results: Sequence[MatchResult]) -> pd.DataFrame:
    """
    Flatten match results into one row per mentor.

    List fields are joined with "; " so the frame exports cleanly to CSV.

    Args:
        results: Match results in ranking order

    Returns:
        DataFrame with RESULT_COLUMNS
    """
    rows: List[Dict[str, Any]] = []
    for rank, result in enumerate(results, start=1):
        row = {
            "rank": rank,
            "mentor_id": result.mentor.id,
            "mentor_name": result.mentor.display_name,
            "match_score": result.match_score,
            "confidence": result.confidence.value,
        }
        row.update(result.compatibility.to_dict())
        row.update({
            "match_reasons": "; ".join(result.match_reasons),
            "potential_challenges": "; ".join(result.potential_challenges),
            "session_frequency": result.recommendations.session_frequency,
            "session_duration": result.recommendations.session_duration,
            "focus_areas": "; ".join(result.recommendations.focus_areas),
            "communication_strategy": result.recommendations.communication_strategy,
        })
        rows.append(row)

    return pd.DataFrame(rows, columns=RESULT_COLUMNS)
