"""
Aggregation of dimension comparisons into a raw compatibility score.

All aggregation methods are computed over the same (score, weight) pairs,
then a strategy chosen from the score pattern blends them (see strategy.py).
Two adjustments follow the blend:

1. Critical modifier: if the mean critical-dimension score is below 0.5,
   the result is scaled by (0.5 + avg_critical).
2. Differentiation: if the result lies within 0.05 of the weighted mean
   while some dimension scores below 0.5, it is pushed to weighted - 0.1 so
   a poor dimension cannot hide behind the average.

The result is clamped to [0, 1]. An empty comparison list yields the
neutral raw score 0.5.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Sequence, FrozenSet

from ..profiles.schema import DimensionComparison
from ..comparison.dimensions import CRITICAL_DIMENSIONS
from .interactions import InteractionMatrix, INTERACTION_MATRIX
from .methods import (
    weighted_mean,
    geometric_mean,
    power_mean,
    waspas,
    choquet_integral,
    penalty_aggregate,
)
from .strategy import (
    AggregationStrategy,
    DEFAULT_STRATEGIES,
    ScoreStats,
    select_strategy,
)

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 0.5


@dataclass(frozen=True)
class AggregationResult:
    """
    Raw aggregate with the intermediate values that produced it.

    Attributes:
        raw_score: Final raw score in [0, 1]
        strategy: Name of the selected strategy ("neutral" for no data)
        methods: Value of every aggregation method
        stats: Score statistics used for strategy selection
    """
    raw_score: float
    strategy: str
    methods: Dict[str, float] = field(default_factory=dict)
    stats: Optional[ScoreStats] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "raw_score": self.raw_score,
            "strategy": self.strategy,
            "methods": dict(self.methods),
            "stats": self.stats.to_dict() if self.stats else None,
        }


class AggregationEngine:
    """
    Combines dimension comparisons into one raw score in [0, 1].

    The engine is stateless apart from its immutable configuration and can
    be shared between callers.

    Attributes:
        interactions: Interaction matrix for the Choquet-style method
        strategies: Ordered strategy table
        critical_dimensions: Dimensions whose poor alignment caps the score
        waspas_lambda: Weighted-sum share in WASPAS
        penalty_threshold: Scores below this are penalized
        penalty_factor: Maximum penalty strength per dimension
    """

    def __init__(
        self,
        interactions: InteractionMatrix = INTERACTION_MATRIX,
        strategies: Sequence[AggregationStrategy] = DEFAULT_STRATEGIES,
        critical_dimensions: FrozenSet[str] = CRITICAL_DIMENSIONS,
        waspas_lambda: float = 0.7,
        penalty_threshold: float = 0.4,
        penalty_factor: float = 0.5
    ):
        self.interactions = interactions
        self.strategies = tuple(strategies)
        self.critical_dimensions = frozenset(critical_dimensions)
        self.waspas_lambda = waspas_lambda
        self.penalty_threshold = penalty_threshold
        self.penalty_factor = penalty_factor

    def compute_methods(self, comparisons: Sequence[DimensionComparison]) -> Dict[str, float]:
        """
        Compute every aggregation method over the comparisons.

        Returns:
            Dictionary with keys weighted, geometric, quadratic, power_half,
            waspas, choquet and penalty
        """
        scores = [c.score for c in comparisons]
        weights = [c.weight for c in comparisons]

        return {
            "weighted": weighted_mean(scores, weights),
            "geometric": geometric_mean(scores, weights),
            "quadratic": power_mean(scores, weights, 2),
            "power_half": power_mean(scores, weights, 0.5),
            "waspas": waspas(scores, weights, self.waspas_lambda),
            "choquet": choquet_integral(comparisons, self.interactions),
            "penalty": penalty_aggregate(
                comparisons, self.penalty_threshold, self.penalty_factor
            ),
        }

    def compute_stats(self, comparisons: Sequence[DimensionComparison]) -> ScoreStats:
        """Compute the statistics that drive strategy selection."""
        scores = [c.score for c in comparisons]
        critical = [c.score for c in comparisons if c.dimension in self.critical_dimensions]

        return ScoreStats(
            min_score=min(scores),
            avg_score=sum(scores) / len(scores),
            weighted_avg=weighted_mean(scores, [c.weight for c in comparisons]),
            min_critical=min(critical) if critical else 1.0,
            avg_critical=sum(critical) / len(critical) if critical else 1.0,
        )

    def aggregate(self, comparisons: Sequence[DimensionComparison]) -> AggregationResult:
        """
        Aggregate comparisons into a raw score.

        Args:
            comparisons: Dimension comparisons (possibly empty)

        Returns:
            AggregationResult with raw score in [0, 1]
        """
        if not comparisons:
            return AggregationResult(raw_score=NEUTRAL_SCORE, strategy="neutral")

        methods = self.compute_methods(comparisons)
        stats = self.compute_stats(comparisons)
        strategy = select_strategy(stats, self.strategies)

        final_score = strategy.score(methods)

        if stats.avg_critical < 0.5:
            final_score *= 0.5 + stats.avg_critical

        if abs(final_score - stats.weighted_avg) < 0.05 and stats.min_score < 0.5:
            final_score = stats.weighted_avg - 0.1

        final_score = max(0.0, min(1.0, final_score))

        logger.debug(
            f"Aggregated {len(comparisons)} dimensions with strategy={strategy.name}: "
            f"raw={final_score:.4f} (weighted={stats.weighted_avg:.4f})"
        )
        return AggregationResult(
            raw_score=final_score,
            strategy=strategy.name,
            methods=methods,
            stats=stats,
        )
