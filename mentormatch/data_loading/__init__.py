"""Data loading module for mentee and mentor profiles."""

from .loaders import load_mentee_profile, load_mentor_profiles

__all__ = ["load_mentee_profile", "load_mentor_profiles"]
