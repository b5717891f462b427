"""Tests for aggregation methods, strategy selection and the engine."""

import math

import pytest

from vibe_scoring.profiles import DIMENSIONS, DimensionComparison
from vibe_scoring.comparison import DIMENSION_CONFIG
from vibe_scoring.aggregation import (
    AggregationEngine,
    AggregationStrategy,
    DEFAULT_STRATEGIES,
    NEUTRAL_SCORE,
    ScoreStats,
    choquet_integral,
    frank_copula,
    geometric_mean,
    harmonic_mean,
    interaction,
    ordered_weighted_average,
    outranking,
    penalty_aggregate,
    power_mean,
    select_strategy,
    waspas,
    weighted_mean,
)


def make_comparison(dimension: str, score: float, weight: float = None) -> DimensionComparison:
    """Comparison with a given score; values are irrelevant to aggregation."""
    if weight is None:
        weight = DIMENSION_CONFIG[dimension].weight
    return DimensionComparison(
        dimension=dimension,
        value1=0.5,
        value2=0.5,
        difference=0.0,
        score=score,
        weight=weight,
    )


class TestMethods:
    """Individual aggregation methods."""

    def test_weighted_mean(self):
        assert weighted_mean([1.0, 0.0], [1.0, 3.0]) == pytest.approx(0.25)

    def test_geometric_mean(self):
        assert geometric_mean([0.5, 0.5], [1.0, 2.0]) == pytest.approx(0.5)

    def test_geometric_mean_floors_zero_scores(self):
        assert geometric_mean([0.0, 1.0], [1.0, 1.0]) == pytest.approx(math.sqrt(0.001))

    def test_power_mean_quadratic(self):
        assert power_mean([0.0, 1.0], [1.0, 1.0], 2) == pytest.approx(math.sqrt(0.5), rel=1e-4)

    def test_power_mean_special_exponents(self):
        scores, weights = [0.2, 0.8], [1.0, 1.0]
        assert power_mean(scores, weights, 0) == pytest.approx(geometric_mean(scores, weights))
        assert power_mean(scores, weights, math.inf) == 0.8
        assert power_mean(scores, weights, -math.inf) == 0.2

    def test_power_mean_ordering(self):
        scores, weights = [0.2, 0.9, 0.6], [0.5, 1.0, 0.8]
        assert (power_mean(scores, weights, 0.5)
                <= weighted_mean(scores, weights)
                <= power_mean(scores, weights, 2))

    def test_harmonic_below_geometric(self):
        scores, weights = [0.2, 0.9], [1.0, 1.0]
        assert harmonic_mean(scores, weights) <= geometric_mean(scores, weights)

    def test_waspas_blends_sum_and_product(self):
        scores, weights = [0.3, 0.9], [1.0, 1.0]
        assert waspas(scores, weights, lam=1.0) == pytest.approx(weighted_mean(scores, weights))
        assert waspas(scores, weights, lam=0.0) == pytest.approx(geometric_mean(scores, weights))

    def test_choquet_without_interactions_is_weighted_mean(self):
        comparisons = [
            make_comparison("humor", 0.5),
            make_comparison("meme", 0.9),
            make_comparison("positivity", 0.2),
        ]
        expected = weighted_mean(
            [c.score for c in comparisons], [c.weight for c in comparisons]
        )
        assert choquet_integral(comparisons) == pytest.approx(expected)

    def test_choquet_synergy_raises_score(self):
        comparisons = [
            make_comparison("humor", 0.5, weight=1.0),
            make_comparison("shitpost", 1.0, weight=1.0),
        ]
        assert choquet_integral(comparisons) == pytest.approx(0.75)
        # humor is consumed first and interacts with shitpost (+0.15)
        assert choquet_integral(comparisons, {"humor": {"shitpost": 0.15}}) == pytest.approx(0.7875)

    def test_interaction_lookup_defaults_to_zero(self):
        assert interaction("humor", "shitpost") == 0.15
        assert interaction("optimism", "humor") == 0.0

    def test_penalty_without_poor_dimensions_is_weighted_mean(self):
        comparisons = [make_comparison("humor", 0.8), make_comparison("meme", 0.6)]
        assert penalty_aggregate(comparisons) == pytest.approx(
            weighted_mean([0.8, 0.6], [0.9, 0.8])
        )

    def test_penalty_scales_for_poor_dimension(self):
        comparisons = [
            make_comparison("humor", 0.0, weight=1.0),
            make_comparison("meme", 1.0, weight=1.0),
        ]
        # 0.5 * (1 - 1 * 0.5 * 1 / 2)
        assert penalty_aggregate(comparisons, threshold=0.4, factor=0.5) == pytest.approx(0.375)

    def test_outranking_veto_caps_score(self):
        comparisons = [make_comparison("humor", 0.1), make_comparison("meme", 1.0)]
        assert outranking(comparisons) <= 0.4

    def test_owa_without_weights_is_mean(self):
        assert ordered_weighted_average([0.2, 0.4, 0.9]) == pytest.approx(0.5)

    def test_owa_position_weights_apply_to_best_first(self):
        assert ordered_weighted_average([0.2, 0.9], [1.0, 0.0]) == pytest.approx(0.9)

    def test_frank_copula_in_unit_interval(self):
        value = frank_copula([0.3, 0.7, 0.9], [1.0, 0.5, 0.8])
        assert 0.0 <= value <= 1.0

    @pytest.mark.parametrize("method", [weighted_mean, geometric_mean, harmonic_mean, waspas])
    def test_empty_input(self, method):
        assert method([], []) == 0.0

    def test_empty_comparison_methods(self):
        assert choquet_integral([]) == 0.0
        assert penalty_aggregate([]) == 0.0
        assert outranking([]) == 0.0
        assert ordered_weighted_average([]) == 0.0


class TestStrategySelection:
    """Ordered strategy table."""

    @pytest.mark.parametrize("stats,expected", [
        (ScoreStats(0.1, 0.8, 0.8, min_critical=0.1, avg_critical=0.6), "critical_failure"),
        (ScoreStats(0.7, 0.9, 0.9), "excellent"),
        (ScoreStats(0.5, 0.9, 0.9), "good"),
        (ScoreStats(0.2, 0.6, 0.6), "poor_dimensions"),
        (ScoreStats(0.4, 0.6, 0.6), "mixed"),
    ])
    def test_first_matching_strategy_wins(self, stats, expected):
        assert select_strategy(stats).name == expected

    def test_critical_failure_takes_minimum(self):
        strategy = DEFAULT_STRATEGIES[0]
        methods = {"geometric": 0.5, "penalty": 0.3, "weighted": 0.6}
        assert strategy.score(methods) == pytest.approx(0.3)

    @pytest.mark.parametrize("name,blend,expected", [
        ("excellent",
         (("quadratic", 0.4), ("waspas", 0.3), ("choquet", 0.2), ("weighted", 0.1)),
         0.60),
        ("good",
         (("weighted", 0.3), ("geometric", 0.25), ("waspas", 0.25), ("choquet", 0.2)),
         0.675),
        ("poor_dimensions",
         (("penalty", 0.4), ("geometric", 0.3), ("weighted", 0.3)),
         0.63),
        ("mixed",
         (("weighted", 0.35), ("power_half", 0.25), ("waspas", 0.25), ("choquet", 0.15)),
         0.65),
        ("critical_failure", None, 0.3),
    ])
    def test_strategy_blends(self, name, blend, expected):
        # distinct method values so that any swapped coefficient changes the result
        methods = {
            "weighted": 0.9,
            "geometric": 0.8,
            "quadratic": 0.7,
            "power_half": 0.6,
            "waspas": 0.5,
            "choquet": 0.4,
            "penalty": 0.3,
        }
        strategy = next(s for s in DEFAULT_STRATEGIES if s.name == name)
        assert strategy.blend == blend
        assert strategy.score(methods) == pytest.approx(expected)

    def test_strategy_order(self):
        assert [s.name for s in DEFAULT_STRATEGIES] == [
            "critical_failure", "excellent", "good", "poor_dimensions", "mixed"
        ]

    def test_blend_coefficients_sum_to_one(self):
        for strategy in DEFAULT_STRATEGIES:
            if strategy.blend is not None:
                assert sum(c for _, c in strategy.blend) == pytest.approx(1.0)

    def test_strategy_needs_exactly_one_combination(self):
        with pytest.raises(ValueError):
            AggregationStrategy(name="broken", applies=lambda stats: True)
        with pytest.raises(ValueError):
            AggregationStrategy(
                name="broken",
                applies=lambda stats: True,
                blend=(("weighted", 1.0),),
                combine=lambda methods: 0.0,
            )

    def test_table_without_catch_all_raises(self):
        with pytest.raises(ValueError):
            select_strategy(ScoreStats(0.5, 0.5, 0.5), strategies=())


class TestAggregationEngine:
    """Engine combining methods, strategy and adjustments."""

    @pytest.fixture
    def engine(self):
        return AggregationEngine()

    def test_empty_comparisons_are_neutral(self, engine):
        result = engine.aggregate([])
        assert result.raw_score == NEUTRAL_SCORE
        assert result.strategy == "neutral"
        assert result.methods == {}

    def test_perfect_match_is_excellent(self, engine):
        comparisons = [make_comparison(dim, 1.0) for dim in DIMENSIONS]
        result = engine.aggregate(comparisons)
        assert result.strategy == "excellent"
        assert result.raw_score == pytest.approx(1.0)

    def test_critical_dimension_failure(self, engine):
        comparisons = [make_comparison(dim, 0.9) for dim in DIMENSIONS if dim != "humor"]
        comparisons.append(make_comparison("humor", 0.06))
        result = engine.aggregate(comparisons)
        assert result.strategy == "critical_failure"
        assert result.raw_score < result.stats.weighted_avg

    def test_compute_stats(self, engine):
        comparisons = [
            make_comparison("humor", 0.2, weight=1.0),
            make_comparison("intellectual", 0.6, weight=1.0),
            make_comparison("optimism", 1.0, weight=2.0),
        ]
        stats = engine.compute_stats(comparisons)
        assert stats.min_score == 0.2
        assert stats.avg_score == pytest.approx(0.6)
        assert stats.weighted_avg == pytest.approx(0.7)
        assert stats.min_critical == 0.2
        assert stats.avg_critical == pytest.approx(0.4)

    def test_stats_without_critical_dimensions(self, engine):
        stats = engine.compute_stats([make_comparison("optimism", 0.3)])
        assert stats.min_critical == 1.0
        assert stats.avg_critical == 1.0

    def test_methods_are_all_computed(self, engine):
        methods = engine.compute_methods([make_comparison("humor", 0.5)])
        assert set(methods) == {
            "weighted", "geometric", "quadratic", "power_half", "waspas", "choquet", "penalty"
        }

    @pytest.mark.parametrize("score", [0.0, 0.05, 0.3, 0.5, 0.75, 1.0])
    def test_raw_score_in_unit_interval(self, engine, score):
        comparisons = [make_comparison(dim, score) for dim in DIMENSIONS]
        assert 0.0 <= engine.aggregate(comparisons).raw_score <= 1.0

    def test_custom_strategy_table(self):
        flat = AggregationStrategy(name="flat", applies=lambda stats: True, combine=lambda m: 0.42)
        engine = AggregationEngine(strategies=(flat,))
        result = engine.aggregate([make_comparison("optimism", 0.9)])
        assert result.strategy == "flat"
        assert result.raw_score == pytest.approx(0.42)

    def test_critical_modifier_on_default_table(self, engine):
        comparisons = [
            make_comparison("shitpost", 0.3, weight=1.0),
            make_comparison("intellectual", 0.3, weight=1.0),
            make_comparison("authenticity", 0.3, weight=1.0),
            make_comparison("humor", 0.3, weight=1.0),
            make_comparison("optimism", 1.0, weight=1.0),
            make_comparison("positivity", 1.0, weight=1.0),
        ]
        result = engine.aggregate(comparisons)
        assert result.strategy == "mixed"
        assert result.stats.avg_critical == pytest.approx(0.3)
        blend = select_strategy(result.stats).score(result.methods)
        # blend * (0.5 + 0.3) lands well away from the weighted mean (0.533)
        assert result.raw_score == pytest.approx(blend * 0.8)

    @pytest.mark.parametrize("blend,comparisons,expected", [
        # critical modifier only: 0.5 * (0.5 + 0.3), far from weighted 0.65
        (0.5, [("humor", 0.3), ("optimism", 1.0)], 0.4),
        # differentiation only: 0.62 is within 0.05 of weighted 0.65, min 0.4
        (0.62, [("optimism", 0.4), ("positivity", 0.9)], 0.55),
        # no adjustment: within 0.05 of weighted 0.65 but min 0.6
        (0.62, [("optimism", 0.6), ("positivity", 0.7)], 0.62),
        # modifier first (0.7 * 0.9 = 0.63), then differentiation against 0.65
        (0.7, [("humor", 0.4), ("optimism", 0.9)], 0.55),
        # weighted 0.075 - 0.1 is clamped to 0
        (0.08, [("optimism", 0.05), ("positivity", 0.1)], 0.0),
    ])
    def test_post_blend_adjustments(self, blend, comparisons, expected):
        fixed = AggregationStrategy(name="fixed", applies=lambda stats: True, combine=lambda m: blend)
        engine = AggregationEngine(strategies=(fixed,))
        result = engine.aggregate([make_comparison(dim, score, weight=1.0) for dim, score in comparisons])
        assert result.raw_score == pytest.approx(expected)

    def test_to_dict(self, engine):
        data = engine.aggregate([make_comparison("optimism", 0.9)]).to_dict()
        assert set(data) == {"raw_score", "strategy", "methods", "stats"}
        assert data["stats"]["min_score"] == 0.9
