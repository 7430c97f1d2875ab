"""Aggregation module for combining compatibility dimensions."""

from .criteria import MatchingCriteria
from .aggregator import ScoreAggregator

__all__ = ["MatchingCriteria", "ScoreAggregator"]
