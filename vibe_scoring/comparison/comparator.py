"""
Per-dimension comparison of two profiles.

For every dimension where both profiles have a value, computes a
compatibility score in [0, 1]:

    similarity dimension:     score = 1 - |a - b|
    complementary dimension:  score = 2d          if d <= 0.5
                              score = 2 - 2d      otherwise

then applies the dimension's override rule (see rules.py). Dimensions where
either side is unknown are skipped and take no part in any aggregate.
"""

import logging
from typing import List, Mapping

from ..profiles.schema import DIMENSIONS, Profile, DimensionComparison
from .dimensions import DimensionConfig, DIMENSION_CONFIG
from .rules import OverrideRule, OVERRIDE_RULES, apply_override

logger = logging.getLogger(__name__)


def base_score(difference: float, is_complementary: bool) -> float:
    """
    Score a value difference before override rules.

    Args:
        difference: |value1 - value2| in [0, 1]
        is_complementary: Whether moderate difference is preferred

    Returns:
        Base score in [0, 1]
    """
    if is_complementary:
        # Peak at difference 0.5: 0 -> 0, 0.5 -> 1, 1 -> 0
        if difference <= 0.5:
            return difference * 2
        return 2 - difference * 2
    return 1 - difference


def compare_dimension(
    dimension: str,
    value1: float,
    value2: float,
    config: DimensionConfig,
    rules: Mapping[str, OverrideRule] = OVERRIDE_RULES
) -> DimensionComparison:
    """Compare a single dimension with both values known."""
    difference = abs(value1 - value2)
    score = base_score(difference, config.is_complementary)
    score = apply_override(dimension, value1, value2, score, rules)

    return DimensionComparison(
        dimension=dimension,
        value1=value1,
        value2=value2,
        difference=difference,
        score=score,
        weight=config.weight,
    )


def compare_profiles(
    profile1: Profile,
    profile2: Profile,
    dimension_config: Mapping[str, DimensionConfig] = DIMENSION_CONFIG,
    rules: Mapping[str, OverrideRule] = OVERRIDE_RULES
) -> List[DimensionComparison]:
    """
    Compare two profiles dimension by dimension.

    Args:
        profile1: First profile
        profile2: Second profile
        dimension_config: Weight/complementarity per dimension
        rules: Override rule table

    Returns:
        Comparisons in fixed dimension order, one per dimension known on
        both sides
    """
    comparisons = []
    for dimension in DIMENSIONS:
        value1 = profile1.get(dimension)
        value2 = profile2.get(dimension)
        if value1 is None or value2 is None:
            continue
        comparisons.append(
            compare_dimension(dimension, value1, value2, dimension_config[dimension], rules)
        )

    logger.debug(
        f"Compared {profile1.profile_id} vs {profile2.profile_id}: "
        f"{len(comparisons)}/{len(DIMENSIONS)} dimensions overlap"
    )
    return comparisons
