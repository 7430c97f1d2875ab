"""
Matching criteria: the weights used to combine compatibility dimensions.

MatchingCriteria is an immutable value. Callers derive new weight sets with
merged() instead of mutating a shared instance, so a criteria object can be
passed to concurrent ranking calls without synchronization.
"""

import logging
from dataclasses import dataclass, asdict, fields, replace
from typing import Dict, Any, Mapping
import json
import math

import numpy as np

from ..profiles.schema import DIMENSIONS

logger = logging.getLogger(__name__)

WEIGHT_SUM_TOLERANCE = 0.01


@dataclass(frozen=True)
class MatchingCriteria:
    """
    Weights for the eight compatibility dimensions.

    Weights are expected to sum to 1.0 but this is not enforced: the
    aggregator divides by the actual weight sum.

    Attributes:
        skills: Weight for skills matching
        availability: Weight for availability matching
        communication: Weight for communication style matching
        experience: Weight for experience level matching
        personality: Weight for personality matching
        learning: Weight for learning style matching
        budget: Weight for budget compatibility
        location: Weight for location proximity
    """
    skills: float = 0.25
    availability: float = 0.20
    communication: float = 0.15
    experience: float = 0.15
    personality: float = 0.10
    learning: float = 0.10
    budget: float = 0.03
    location: float = 0.02

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Validate configuration values."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ValueError(f"Weight '{f.name}' must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"Weight '{f.name}' must be finite, got {value}")
            if value < 0:
                raise ValueError(f"Weight '{f.name}' must be non-negative, got {value}")

        total = self.total_weight()
        if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            logger.warning(f"Matching weights sum to {total:.3f}, not 1.0; scores are normalized by the sum")

    def total_weight(self) -> float:
        return float(sum(getattr(self, name) for name in DIMENSIONS))

    def merged(self, overrides: Mapping[str, float]) -> "MatchingCriteria":
        """
        Return a copy with some weights replaced.

        Args:
            overrides: Partial mapping of dimension name to weight

        Returns:
            New MatchingCriteria instance

        Raises:
            KeyError: If a key is not a compatibility dimension
            ValueError: If a weight is negative
        """
        unknown = set(overrides) - set(DIMENSIONS)
        if unknown:
            raise KeyError(f"Unknown matching criteria: {sorted(unknown)}")
        return replace(self, **{k: float(v) for k, v in overrides.items()})

    def as_array(self) -> np.ndarray:
        """Weights in DIMENSIONS order."""
        return np.array([getattr(self, name) for name in DIMENSIONS], dtype=float)

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Mapping[str, float]) -> "MatchingCriteria":
        """Create from a (possibly partial) dictionary over the defaults."""
        return cls().merged(d)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "MatchingCriteria":
        """Create from main config dictionary."""
        matching_config = config.get("matching", {}) or {}
        return cls.from_dict(matching_config.get("criteria", {}) or {})

    def save(self, filepath: str) -> None:
        """Save to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved matching criteria to {filepath}")

    @classmethod
    def load(cls, filepath: str) -> "MatchingCriteria":
        """Load from JSON file."""
        with open(filepath, "r") as f:
            d = json.load(f)
        return cls.from_dict(d)
