"""
Category-level compatibility for display.

Dimensions are grouped into seven fixed categories; each category score is
the weighted mean of its comparisons scaled to 0-100. Categories with no
comparisons default to 50. These scores never feed back into the headline
score.
"""

from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from ..profiles.schema import CategoryScores, DimensionComparison
from ..amplification.amplifier import round_half_up

DEFAULT_CATEGORY_SCORE = 50

CATEGORIES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "emotional": ("positivity", "empathy"),
    "interaction": ("engagement", "debate"),
    "content": ("shitpost", "meme", "intellectual"),
    "topics": ("political", "personalSharing", "inspirationalQuotes"),
    "social": ("extroversion", "authenticity"),
    "values": ("optimism",),
    "communication": ("humor", "aiGenerated"),
})


def category_of(dimension: str) -> str:
    """Return the category a dimension belongs to."""
    for category, dimensions in CATEGORIES.items():
        if dimension in dimensions:
            return category
    raise KeyError(f"Dimension not in any category: {dimension}")


def compute_category_scores(comparisons: Sequence[DimensionComparison]) -> CategoryScores:
    """
    Compute per-category scores.

    Args:
        comparisons: Dimension comparisons

    Returns:
        CategoryScores with integer values in [0, 100]
    """
    scores = {}
    for category, dimensions in CATEGORIES.items():
        members = [c for c in comparisons if c.dimension in dimensions]
        if not members:
            scores[category] = DEFAULT_CATEGORY_SCORE
            continue

        weighted_sum = sum(c.score * c.weight for c in members)
        total_weight = sum(c.weight for c in members)
        scores[category] = round_half_up(weighted_sum / total_weight * 100)

    return CategoryScores(**scores)
