"""
Configuration loading and validation.

This module handles loading of YAML configuration files and
validates the matching weights, thresholds and evaluation settings.
"""

import logging
import math
from pathlib import Path
from typing import Dict, Any, List

import yaml

from ..profiles.schema import DIMENSIONS

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = ["global", "matching"]


def load_config(filepath: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        filepath: Path to the YAML configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If the file is empty
        yaml.YAMLError: If YAML is invalid
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    logger.info(f"Loading configuration from {filepath}")
    with open(path, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        raise ValueError(f"Configuration file is empty: {filepath}")

    return config


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration dictionary

    Returns:
        List of warning/error messages (empty if valid)
    """
    issues = []

    for section in REQUIRED_SECTIONS:
        if section not in config:
            issues.append(f"Missing required section: {section}")

    matching = config.get("matching", {}) or {}

    # Check criteria weights
    criteria = matching.get("criteria", {}) or {}
    for name, weight in criteria.items():
        if name not in DIMENSIONS:
            issues.append(f"Unknown matching criterion: {name}")
        elif not isinstance(weight, (int, float)) or not math.isfinite(weight) or weight < 0:
            issues.append(f"Weight for {name} must be a finite non-negative number, got {weight}")

    if criteria and len(criteria) == len(DIMENSIONS):
        numeric = [w for w in criteria.values() if isinstance(w, (int, float))]
        total = sum(numeric)
        if abs(total - 1.0) > 0.01:
            issues.append(f"Matching weights don't sum to 1: {total}")

    # Check thresholds
    min_score = matching.get("min_score", 0.3)
    if not isinstance(min_score, (int, float)) or not 0 <= min_score <= 1:
        issues.append(f"matching.min_score must be in [0, 1], got {min_score}")

    max_results = matching.get("max_results", 10)
    if not isinstance(max_results, int) or max_results <= 0:
        issues.append(f"matching.max_results must be a positive integer, got {max_results}")

    max_reasons = matching.get("max_reasons", 5)
    if not isinstance(max_reasons, int) or max_reasons < 0:
        issues.append(f"matching.max_reasons must be a non-negative integer, got {max_reasons}")

    # Check synonym groups
    groups = get_config_value(config, "skills.synonym_groups", []) or []
    for i, group in enumerate(groups):
        if not isinstance(group, list) or len(group) < 2:
            issues.append(f"skills.synonym_groups[{i}] must list at least two skills")

    # Check evaluation settings
    noise_scale = get_config_value(config, "evaluation.noise_scale", 0.2)
    if not isinstance(noise_scale, (int, float)) or not 0 <= noise_scale < 1:
        issues.append(f"evaluation.noise_scale must be in [0, 1), got {noise_scale}")

    if "global" in config:
        if "random_seed" not in config["global"]:
            issues.append("Missing global.random_seed (required for reproducible sensitivity analysis)")

    return issues


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "matching.criteria.skills")
        default: Default value if path doesn't exist

    Returns:
        Configuration value or default
    """
    keys = path.split(".")
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value
