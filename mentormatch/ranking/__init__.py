"""
Ranking module for mentor matching.

This module provides the engine that ranks a mentor pool for one mentee
and returns explainable match results.
"""

from .engine import MentorMatchingEngine, MatchingSettings, to_match_score

__all__ = [
    "MentorMatchingEngine",
    "MatchingSettings",
    "to_match_score",
]
