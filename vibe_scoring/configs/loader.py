"""
Configuration loading and validation.

This module handles loading of YAML configuration files and
validates that all required fields are present.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List

import yaml

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = ["global", "scoring"]


def load_config(filepath: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        filepath: Path to the YAML configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is empty
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

    scoring = config.get("scoring") or {}
    power = scoring.get("amplification_power")
    if power is not None:
        if not isinstance(power, (int, float)) or isinstance(power, bool):
            issues.append(f"scoring.amplification_power must be a number, got {power!r}")
        elif not 1 <= power <= 5:
            issues.append(f"scoring.amplification_power must be in [1, 5], got {power}")

    top_n = scoring.get("top_n")
    if top_n is not None and (not isinstance(top_n, int) or top_n < 0):
        issues.append(f"scoring.top_n must be a non-negative integer, got {top_n!r}")

    evaluation = config.get("evaluation") or {}
    null_rate = evaluation.get("null_rate")
    if null_rate is not None and not 0 <= null_rate <= 1:
        issues.append(f"evaluation.null_rate must be in [0, 1], got {null_rate}")

    if "evaluation" in config and "random_seed" not in evaluation:
        issues.append("Missing evaluation.random_seed (required for reproducibility)")

    return issues


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "scoring.amplification_power")
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
