"""Explanation data: category scores, rankings and labels."""

from .categories import CATEGORIES, DEFAULT_CATEGORY_SCORE, category_of, compute_category_scores
from .ranking import DEFAULT_TOP_N, rank_dimensions
from .interpretation import interpret_score, compatibility_level

__all__ = [
    "CATEGORIES",
    "DEFAULT_CATEGORY_SCORE",
    "category_of",
    "compute_category_scores",
    "DEFAULT_TOP_N",
    "rank_dimensions",
    "interpret_score",
    "compatibility_level",
]
