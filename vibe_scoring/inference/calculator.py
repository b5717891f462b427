"""
Compatibility scoring from two personality profiles.

This module wires the scoring stages together:
1. Compare both profiles dimension by dimension
2. Aggregate the comparisons into a raw score
3. Amplify the raw score onto 0-100
4. Derive category scores and top matches/clashes for explanation

The comparison list is computed once and shared by the headline path
(steps 2-3) and the explanation path (step 4).

The calculator holds only immutable configuration, injected at construction,
so one instance can serve any number of callers.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..profiles.schema import Profile, DimensionComparison, CompatibilityResult
from ..comparison.dimensions import (
    DimensionConfig,
    DIMENSION_CONFIG,
    validate_dimension_config,
)
from ..comparison.rules import OverrideRule, OVERRIDE_RULES
from ..comparison.comparator import compare_profiles
from ..aggregation.engine import AggregationEngine
from ..amplification.amplifier import ScoreAmplifier, DEFAULT_AMPLIFICATION_POWER
from ..explain.categories import compute_category_scores
from ..explain.ranking import DEFAULT_TOP_N, rank_dimensions
from ..explain.interpretation import interpret_score
from ..configs.settings import ScoringConfig

logger = logging.getLogger(__name__)


class CompatibilityCalculator:
    """
    Deterministic compatibility calculator.

    Attributes:
        amplification_power: Amplification strength passed to the amplifier
        top_n: Number of top matches/clashes stored on results
        dimension_config: Weight and complementarity per dimension
        rules: Dimension override rules
        engine: Aggregation engine
        amplifier: Score amplifier
    """

    def __init__(
        self,
        amplification_power: float = DEFAULT_AMPLIFICATION_POWER,
        top_n: int = DEFAULT_TOP_N,
        dimension_config: Mapping[str, DimensionConfig] = DIMENSION_CONFIG,
        rules: Mapping[str, OverrideRule] = OVERRIDE_RULES,
        engine: Optional[AggregationEngine] = None
    ):
        """
        Initialize the calculator.

        Args:
            amplification_power: Amplification strength (validated by the caller)
            top_n: Number of top matches/clashes stored on results
            dimension_config: Dimension table covering all 15 dimensions
            rules: Override rule table
            engine: Aggregation engine (default: standard tables)
        """
        validate_dimension_config(dimension_config)
        self.amplification_power = amplification_power
        self.top_n = top_n
        self.dimension_config = dimension_config
        self.rules = rules
        self.engine = engine or AggregationEngine()
        self.amplifier = ScoreAmplifier(amplification_power)
        logger.info(
            f"Initialized CompatibilityCalculator with "
            f"amplification_power={amplification_power}, top_n={top_n}"
        )

    def compare(self, profile1: Profile, profile2: Profile) -> List[DimensionComparison]:
        """Per-dimension comparisons of two profiles."""
        return compare_profiles(profile1, profile2, self.dimension_config, self.rules)

    def calculate_score(self, profile1: Profile, profile2: Profile) -> CompatibilityResult:
        """
        Compute compatibility between two profiles.

        Never raises for valid profiles: missing dimensions are skipped and
        profiles without any overlap get the neutral raw score.

        Args:
            profile1: First profile
            profile2: Second profile

        Returns:
            CompatibilityResult with score, breakdown and category scores
        """
        comparisons = self.compare(profile1, profile2)

        aggregation = self.engine.aggregate(comparisons)
        score = self.amplifier.to_score(aggregation.raw_score)

        category_scores = compute_category_scores(comparisons)
        top_matches, top_clashes = rank_dimensions(comparisons, self.top_n)

        logger.debug(
            f"{profile1.profile_id} x {profile2.profile_id}: score={score} "
            f"(raw={aggregation.raw_score:.4f}, strategy={aggregation.strategy})"
        )

        return CompatibilityResult(
            score=score,
            breakdown=tuple(comparisons),
            category_scores=category_scores,
            raw_score=aggregation.raw_score,
            strategy=aggregation.strategy,
            top_matches=tuple(c.dimension for c in top_matches),
            top_clashes=tuple(c.dimension for c in top_clashes),
            label=interpret_score(score),
        )

    def get_top_matches(
        self,
        breakdown: Sequence[DimensionComparison],
        count: int = DEFAULT_TOP_N
    ) -> Tuple[List[DimensionComparison], List[DimensionComparison]]:
        """Best and worst matching comparisons of a breakdown."""
        return rank_dimensions(breakdown, count)

    def get_score_interpretation(self, score: int) -> str:
        """Text label for a 0-100 score."""
        return interpret_score(score)

    def score_many(
        self,
        pairs: Sequence[Tuple[Profile, Profile]]
    ) -> List[CompatibilityResult]:
        """Score a sequence of profile pairs."""
        return [self.calculate_score(a, b) for a, b in pairs]

    def get_config(self) -> Dict[str, Any]:
        """Effective scoring configuration."""
        return {
            "amplification_power": self.amplification_power,
            "top_n": self.top_n,
        }


def create_calculator(config: Optional[ScoringConfig] = None) -> CompatibilityCalculator:
    """
    Factory function to create a calculator from a ScoringConfig.

    Args:
        config: Scoring configuration (default: ScoringConfig())

    Returns:
        Configured CompatibilityCalculator
    """
    config = config or ScoringConfig()
    config.validate()
    return CompatibilityCalculator(
        amplification_power=config.amplification_power,
        top_n=config.top_n,
    )


def create_calculator_from_config(config: Dict[str, Any]) -> CompatibilityCalculator:
    """
    Factory function to create a calculator from the main config dictionary.

    Args:
        config: Main configuration dictionary (see configs/config.yaml)

    Returns:
        Configured CompatibilityCalculator
    """
    return create_calculator(ScoringConfig.from_config(config))
