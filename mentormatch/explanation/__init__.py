"""Explanation module for human-readable match output."""

from .generator import ExplanationGenerator
from .mentee_analysis import analyze_mentee_profile

__all__ = ["ExplanationGenerator", "analyze_mentee_profile"]
