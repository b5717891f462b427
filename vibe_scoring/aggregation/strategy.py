"""
Strategy selection for the aggregation engine.

The raw compatibility score is not a single aggregation method: it is a
blend chosen from the shape of the per-dimension scores. Strategies are
evaluated in order and the first whose predicate holds wins.

    critical_failure  min_critical < 0.25
                      -> min(geometric * 0.8, penalty, weighted * 0.7)
    excellent         avg > 0.85 and min > 0.6
                      -> 0.4 quadratic + 0.3 waspas + 0.2 choquet + 0.1 weighted
    good              avg > 0.7
                      -> 0.3 weighted + 0.25 geometric + 0.25 waspas + 0.2 choquet
    poor_dimensions   min < 0.3
                      -> 0.4 penalty + 0.3 geometric + 0.3 weighted
    mixed             always
                      -> 0.35 weighted + 0.25 power_half + 0.25 waspas + 0.15 choquet
"""

from dataclasses import dataclass, asdict
from typing import Callable, Dict, Any, Optional, Sequence, Tuple


@dataclass(frozen=True)
class ScoreStats:
    """
    Summary statistics of per-dimension scores used for strategy selection.

    Attributes:
        min_score: Lowest dimension score
        avg_score: Unweighted mean of dimension scores
        weighted_avg: Weighted mean of dimension scores
        min_critical: Lowest score among critical dimensions (1 if none)
        avg_critical: Mean score of critical dimensions (1 if none)
    """
    min_score: float
    avg_score: float
    weighted_avg: float
    min_critical: float = 1.0
    avg_critical: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AggregationStrategy:
    """
    One row of the strategy table.

    Either blend (method name -> coefficient) or combine (custom function of
    the method values) must be given.
    """
    name: str
    applies: Callable[[ScoreStats], bool]
    blend: Optional[Tuple[Tuple[str, float], ...]] = None
    combine: Optional[Callable[[Dict[str, float]], float]] = None

    def __post_init__(self):
        if (self.blend is None) == (self.combine is None):
            raise ValueError(f"Strategy {self.name} needs exactly one of blend or combine")

    def score(self, methods: Dict[str, float]) -> float:
        """Combine method values into a raw score."""
        if self.combine is not None:
            return self.combine(methods)
        return sum(coefficient * methods[method] for method, coefficient in self.blend)


def _critical_clamp(methods: Dict[str, float]) -> float:
    return min(methods["geometric"] * 0.8, methods["penalty"], methods["weighted"] * 0.7)


DEFAULT_STRATEGIES: Tuple[AggregationStrategy, ...] = (
    AggregationStrategy(
        name="critical_failure",
        applies=lambda stats: stats.min_critical < 0.25,
        combine=_critical_clamp,
    ),
    AggregationStrategy(
        name="excellent",
        applies=lambda stats: stats.avg_score > 0.85 and stats.min_score > 0.6,
        blend=(("quadratic", 0.4), ("waspas", 0.3), ("choquet", 0.2), ("weighted", 0.1)),
    ),
    AggregationStrategy(
        name="good",
        applies=lambda stats: stats.avg_score > 0.7,
        blend=(("weighted", 0.3), ("geometric", 0.25), ("waspas", 0.25), ("choquet", 0.2)),
    ),
    AggregationStrategy(
        name="poor_dimensions",
        applies=lambda stats: stats.min_score < 0.3,
        blend=(("penalty", 0.4), ("geometric", 0.3), ("weighted", 0.3)),
    ),
    AggregationStrategy(
        name="mixed",
        applies=lambda stats: True,
        blend=(("weighted", 0.35), ("power_half", 0.25), ("waspas", 0.25), ("choquet", 0.15)),
    ),
)


def select_strategy(
    stats: ScoreStats,
    strategies: Sequence[AggregationStrategy] = DEFAULT_STRATEGIES
) -> AggregationStrategy:
    """
    Return the first strategy whose predicate holds.

    Raises:
        ValueError: If no strategy applies (the table has no catch-all row)
    """
    for strategy in strategies:
        if strategy.applies(stats):
            return strategy
    raise ValueError("No aggregation strategy applies; the table needs a catch-all row")
