"""
Vibe Compatibility Scoring

This package computes a deterministic compatibility score between two
profiles described by 15 personality dimensions.

Key Design Decisions:
- Dimensions unknown on either side are skipped, never guessed
- Several aggregation methods are blended by a strategy chosen from the
  shape of the per-dimension scores
- A sigmoid plus banded remap spreads raw scores over 0-100
- All configuration is injected; scoring is a pure function of its inputs
"""

from .profiles import Profile, DimensionComparison, CategoryScores, CompatibilityResult, DIMENSIONS
from .inference import CompatibilityCalculator, create_calculator, create_calculator_from_config

__version__ = "1.0.0"

__all__ = [
    "Profile",
    "DimensionComparison",
    "CategoryScores",
    "CompatibilityResult",
    "DIMENSIONS",
    "CompatibilityCalculator",
    "create_calculator",
    "create_calculator_from_config",
]
