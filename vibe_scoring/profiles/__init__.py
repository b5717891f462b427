"""Profile and result data structures."""

from .schema import (
    DIMENSIONS,
    Profile,
    DimensionComparison,
    CategoryScores,
    CompatibilityResult,
    normalize_dimension_name,
)

__all__ = [
    "DIMENSIONS",
    "Profile",
    "DimensionComparison",
    "CategoryScores",
    "CompatibilityResult",
    "normalize_dimension_name",
]
