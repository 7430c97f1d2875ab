"""Evaluation module for ranking analysis."""

from .metrics import (
    compute_score_distribution_stats,
    compute_criteria_sensitivity,
    create_matching_report,
    results_to_frame,
    MatchingReport
)

__all__ = [
    "compute_score_distribution_stats",
    "compute_criteria_sensitivity",
    "create_matching_report",
    "results_to_frame",
    "MatchingReport"
]
