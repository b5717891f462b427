"""Top matching and clashing dimensions."""

from typing import List, Sequence, Tuple

from ..profiles.schema import DimensionComparison

DEFAULT_TOP_N = 3


def rank_dimensions(
    breakdown: Sequence[DimensionComparison],
    count: int = DEFAULT_TOP_N
) -> Tuple[List[DimensionComparison], List[DimensionComparison]]:
    """
    Find the best and worst matching dimensions.

    The breakdown is sorted descending by score (stable, so ties keep
    dimension order). Matches are the head of that order; clashes are the
    tail, reversed so the worst comes first.

    Args:
        breakdown: Dimension comparisons
        count: Number of dimensions per list

    Returns:
        Tuple of (top_matches, top_clashes), each of length
        min(count, len(breakdown))
    """
    if count <= 0:
        return [], []

    ordered = sorted(breakdown, key=lambda c: c.score, reverse=True)
    top_matches = ordered[:count]
    top_clashes = ordered[-count:][::-1]
    return top_matches, top_clashes
