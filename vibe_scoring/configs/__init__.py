"""Configuration loading and scoring settings."""

from .loader import load_config, validate_config, get_config_value
from .settings import ScoringConfig, clamp_amplification_power

__all__ = [
    "load_config",
    "validate_config",
    "get_config_value",
    "ScoringConfig",
    "clamp_amplification_power",
]
