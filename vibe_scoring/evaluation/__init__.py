"""Evaluation module for score distribution analysis."""

from .metrics import (
    compute_score_distribution_stats,
    check_symmetry,
    sanity_check_monotonicity,
    profile_similarity,
    results_to_dataframe,
    ScoringReport,
    create_scoring_report
)

__all__ = [
    "compute_score_distribution_stats",
    "check_symmetry",
    "sanity_check_monotonicity",
    "profile_similarity",
    "results_to_dataframe",
    "ScoringReport",
    "create_scoring_report"
]
