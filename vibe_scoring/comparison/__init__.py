"""Per-dimension comparison of two profiles."""

from .dimensions import (
    DimensionConfig,
    DIMENSION_CONFIG,
    CRITICAL_DIMENSIONS,
    validate_dimension_config,
)
from .rules import OverrideRule, OVERRIDE_RULES, apply_override
from .comparator import base_score, compare_dimension, compare_profiles

__all__ = [
    "DimensionConfig",
    "DIMENSION_CONFIG",
    "CRITICAL_DIMENSIONS",
    "validate_dimension_config",
    "OverrideRule",
    "OVERRIDE_RULES",
    "apply_override",
    "base_score",
    "compare_dimension",
    "compare_profiles",
]
