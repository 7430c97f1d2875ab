"""
Profile module for mentor matching.

This module defines the mentee and mentor profile structures consumed by
the matching engine and the result structures it returns.
"""

from .schema import (
    DIMENSIONS,
    CommunicationFrequency,
    CompatibilityBreakdown,
    Confidence,
    ExperienceLevel,
    LearningFormat,
    MatchRecommendations,
    MatchResult,
    MenteeAnalysis,
    MenteeProfile,
    MentorProfile,
    ResponseTime,
    SessionFrequency,
    TimeOfDay,
)

__all__ = [
    "DIMENSIONS",
    "CommunicationFrequency",
    "CompatibilityBreakdown",
    "Confidence",
    "ExperienceLevel",
    "LearningFormat",
    "MatchRecommendations",
    "MatchResult",
    "MenteeAnalysis",
    "MenteeProfile",
    "MentorProfile",
    "ResponseTime",
    "SessionFrequency",
    "TimeOfDay",
]
