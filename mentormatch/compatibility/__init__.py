"""Compatibility module for per-dimension mentee/mentor scoring."""

from .evaluator import CompatibilityEvaluator
from .skill_matching import SkillMatcher, SynonymSkillMatcher, matching_items
from .lookups import (
    convert_currency,
    get_continent,
    get_country,
    response_time_compatibility,
    time_slot_compatibility,
    timezone_compatibility,
)

__all__ = [
    "CompatibilityEvaluator",
    "SkillMatcher",
    "SynonymSkillMatcher",
    "matching_items",
    "convert_currency",
    "get_continent",
    "get_country",
    "response_time_compatibility",
    "time_slot_compatibility",
    "timezone_compatibility",
]
