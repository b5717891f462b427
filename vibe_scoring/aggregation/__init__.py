"""Aggregation of dimension comparisons into a raw score."""

from .engine import AggregationEngine, AggregationResult, NEUTRAL_SCORE
from .interactions import INTERACTION_MATRIX, InteractionMatrix, interaction
from .methods import (
    weighted_mean,
    geometric_mean,
    power_mean,
    harmonic_mean,
    waspas,
    choquet_integral,
    penalty_aggregate,
    outranking,
    ordered_weighted_average,
    frank_copula,
)
from .strategy import AggregationStrategy, DEFAULT_STRATEGIES, ScoreStats, select_strategy

__all__ = [
    "AggregationEngine",
    "AggregationResult",
    "NEUTRAL_SCORE",
    "INTERACTION_MATRIX",
    "InteractionMatrix",
    "interaction",
    "weighted_mean",
    "geometric_mean",
    "power_mean",
    "harmonic_mean",
    "waspas",
    "choquet_integral",
    "penalty_aggregate",
    "outranking",
    "ordered_weighted_average",
    "frank_copula",
    "AggregationStrategy",
    "DEFAULT_STRATEGIES",
    "ScoreStats",
    "select_strategy",
]
