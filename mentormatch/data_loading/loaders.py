"""
Profile loading functions for the matching engine.

This module reads mentee and mentor profiles from JSON or YAML files. It
stands in for the platform's profile store when the engine runs from the
command line; no scoring happens here.
"""

import json
import logging
from pathlib import Path
from typing import Any, List

import yaml

from ..profiles.schema import MenteeProfile, MentorProfile

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def _read_structured_file(filepath: str) -> Any:
    """
    Read a JSON or YAML file, chosen by suffix.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Profile file not found: {filepath}")

    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(f)
        else:
            text = f.read()
            data = json.loads(text) if text.strip() else None

    if data is None:
        raise ValueError(f"Profile file is empty: {filepath}")

    return data


def load_mentee_profile(filepath: str) -> MenteeProfile:
    """
    Load one mentee profile.

    Args:
        filepath: Path to a JSON or YAML file holding one profile object

    Returns:
        MenteeProfile

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or not a single object
    """
    data = _read_structured_file(filepath)
    if not isinstance(data, dict):
        raise ValueError(f"Mentee file must contain a single profile object: {filepath}")

    mentee = MenteeProfile.from_dict(data)
    logger.info(f"Loaded mentee profile {mentee.id!r} from {filepath}")
    return mentee


def load_mentor_profiles(filepath: str) -> List[MentorProfile]:
    """
    Load a mentor pool.

    Args:
        filepath: Path to a JSON or YAML file holding a list of profiles

    Returns:
        List of MentorProfile in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or its top level is not a list
    """
    data = _read_structured_file(filepath)
    if not isinstance(data, list):
        raise ValueError(f"Mentor file must contain a list of profiles: {filepath}")

    mentors = [MentorProfile.from_dict(item) for item in data]
    logger.info(f"Loaded {len(mentors)} mentor profiles from {filepath}")
    return mentors
