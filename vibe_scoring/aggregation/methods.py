"""
Aggregation methods for multi-dimensional compatibility.

Each method combines per-dimension scores in [0, 1] with their weights into a
single value. They differ in how much a poor dimension can be compensated by
good ones:

- Weighted mean: fully compensatory
- Geometric mean: multiplicative, one near-zero score drags everything down
- Power mean: p > 1 emphasizes high scores, p < 1 low scores
- WASPAS: blend of weighted sum and weighted product
- Choquet-style integral: accounts for synergy between dimensions
- Penalty: weighted mean scaled down for every poor dimension

Harmonic mean, outranking, ordered weighted averaging and the Frank copula
are provided as alternatives; the headline score does not use them.

Scores are floored at 0.001 wherever they enter a product or a power.
"""

import math
from typing import Optional, Sequence

import numpy as np

from ..profiles.schema import DimensionComparison
from .interactions import InteractionMatrix, interaction

SCORE_FLOOR = 0.001


def _as_arrays(scores: Sequence[float], weights: Sequence[float]):
    return np.asarray(scores, dtype=float), np.asarray(weights, dtype=float)


def weighted_mean(scores: Sequence[float], weights: Sequence[float]) -> float:
    """Weighted arithmetic mean."""
    s, w = _as_arrays(scores, weights)
    if s.size == 0 or w.sum() == 0:
        return 0.0
    return float(np.sum(s * w) / np.sum(w))


def geometric_mean(scores: Sequence[float], weights: Sequence[float]) -> float:
    """
    Weighted geometric mean.

    Formula: prod max(s, 0.001) ** (w / sum(w))
    """
    s, w = _as_arrays(scores, weights)
    total_weight = w.sum()
    if s.size == 0 or total_weight == 0:
        return 0.0
    return float(np.prod(np.power(np.maximum(s, SCORE_FLOOR), w / total_weight)))


def power_mean(scores: Sequence[float], weights: Sequence[float], p: float) -> float:
    """
    Weighted power (generalized) mean.

    p = 1 is the arithmetic mean, p = 2 the quadratic mean, p = 0 the
    geometric mean, p = +inf / -inf the maximum / minimum.

    Formula: (sum w * max(s, 0.001) ** p / sum(w)) ** (1 / p)
    """
    s, w = _as_arrays(scores, weights)
    total_weight = w.sum()
    if s.size == 0 or total_weight == 0:
        return 0.0

    if p == 0:
        return geometric_mean(s, w)
    if math.isinf(p):
        return float(s.max() if p > 0 else s.min())

    total = np.sum(w * np.power(np.maximum(s, SCORE_FLOOR), p))
    return float(np.power(total / total_weight, 1.0 / p))


def harmonic_mean(scores: Sequence[float], weights: Sequence[float]) -> float:
    """Weighted harmonic mean; strongly penalizes low scores."""
    s, w = _as_arrays(scores, weights)
    total_weight = w.sum()
    if s.size == 0 or total_weight == 0:
        return 0.0
    return float(total_weight / np.sum(w / np.maximum(s, SCORE_FLOOR)))


def waspas(
    scores: Sequence[float],
    weights: Sequence[float],
    lam: float = 0.5
) -> float:
    """
    Weighted Aggregated Sum Product Assessment.

    Formula: lam * weighted_mean + (1 - lam) * geometric_mean
    """
    return lam * weighted_mean(scores, weights) + (1 - lam) * geometric_mean(scores, weights)


def choquet_integral(
    comparisons: Sequence[DimensionComparison],
    interactions: Optional[InteractionMatrix] = None
) -> float:
    """
    Choquet-inspired aggregation with pairwise interactions.

    Comparisons are sorted ascending by score. Walking from the lowest score
    upwards, each step adds (score_i - score_{i-1}) times the weight of the
    coalition still unconsumed (comparisons i..n), plus the interaction terms
    from dimension i to every later dimension in that coalition. The result
    is normalized by the total weight.

    Args:
        comparisons: Dimension comparisons
        interactions: Optional interaction matrix

    Returns:
        Aggregated score
    """
    if not comparisons:
        return 0.0

    ordered = sorted(comparisons, key=lambda c: c.score)
    total_weight = sum(c.weight for c in comparisons)

    result = 0.0
    previous_score = 0.0
    for i, current in enumerate(ordered):
        coalition_weight = 0.0
        for j in range(i, len(ordered)):
            coalition_weight += ordered[j].weight
            if interactions is not None and j != i:
                coalition_weight += interaction(current.dimension, ordered[j].dimension, interactions)
        result += (current.score - previous_score) * coalition_weight
        previous_score = current.score

    return result / total_weight


def penalty_aggregate(
    comparisons: Sequence[DimensionComparison],
    threshold: float = 0.4,
    factor: float = 0.5
) -> float:
    """
    Weighted mean with multiplicative penalties for poor dimensions.

    For every comparison scoring below threshold the running score is
    multiplied by 1 - (threshold - s) / threshold * factor * w / sum(w).

    Args:
        comparisons: Dimension comparisons
        threshold: Scores below this are penalized
        factor: Maximum penalty strength per dimension

    Returns:
        Penalized score, floored at 0
    """
    if not comparisons:
        return 0.0

    total_weight = sum(c.weight for c in comparisons)
    result = sum(c.score * c.weight for c in comparisons) / total_weight

    for comp in comparisons:
        if comp.score < threshold:
            strength = (threshold - comp.score) / threshold
            result *= 1 - (strength * factor * comp.weight) / total_weight

    return max(0.0, result)


def outranking(
    comparisons: Sequence[DimensionComparison],
    veto_threshold: float = 0.3
) -> float:
    """
    ELECTRE-inspired outranking score.

    Non-compensatory: any dimension below veto_threshold contributes only a
    tenth of its weighted score and caps the result at 0.4.
    """
    if not comparisons:
        return 0.0

    total_weight = sum(c.weight for c in comparisons)
    concordance = 0.0
    has_veto = False
    for comp in comparisons:
        if comp.score < veto_threshold:
            has_veto = True
            concordance += comp.weight * comp.score * 0.1
        else:
            concordance += comp.weight * comp.score
    concordance /= total_weight

    discordance = 1 - min(c.score for c in comparisons)
    if has_veto:
        return min(0.4, concordance * (1 - discordance))
    return concordance * (1 - discordance * 0.5)


def ordered_weighted_average(
    scores: Sequence[float],
    position_weights: Optional[Sequence[float]] = None
) -> float:
    """
    Ordered weighted average (OWA).

    Weights apply to rank positions (best first), not to dimensions.
    Without position weights this is the plain mean.
    """
    s = np.sort(np.asarray(scores, dtype=float))[::-1]
    if s.size == 0:
        return 0.0
    if position_weights is None:
        w = np.full(s.size, 1.0 / s.size)
    else:
        w = np.asarray(position_weights, dtype=float)[: s.size]
    total_weight = w.sum()
    if total_weight <= 0:
        return 0.0
    return float(np.sum(s[: w.size] * w) / total_weight)


def frank_copula(
    scores: Sequence[float],
    weights: Sequence[float],
    theta: float = 5.0
) -> float:
    """Frank-copula aggregation; theta controls dependency strength."""
    s, w = _as_arrays(scores, weights)
    total_weight = w.sum()
    if s.size == 0 or total_weight == 0:
        return 0.0

    u = np.clip(s, SCORE_FLOOR, 1 - SCORE_FLOOR)
    term = (np.exp(-theta * u) - 1) / (np.exp(-theta) - 1)
    product = np.prod(np.power(1 + term, w / total_weight))
    return float(np.clip(-np.log(product) / theta, 0.0, 1.0))
