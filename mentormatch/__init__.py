"""
Mentor Matching Engine

This package ranks a pool of mentor profiles for one mentee profile and
explains each recommendation.

Key Design Decisions:
- Eight independent compatibility scores per pair, each in [0, 1]
- A weighted average with configurable criteria combines them
- Explanations are rule-based text, built only for mentors that pass the threshold
- Sparse profiles score neutrally instead of failing
"""

__version__ = "1.0.0"
