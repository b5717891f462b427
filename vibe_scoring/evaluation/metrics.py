"""
Evaluation metrics for the compatibility score.

There is no ground truth for compatibility, so evaluation checks the
behaviour of the scoring contract instead:
1. Score distribution (amplification should avoid clustering at the mean)
2. Symmetry: score(A, B) == score(B, A)
3. Monotonicity: more similar profiles should generally score higher
4. Which aggregation strategies fire, and how often

This module DOES NOT claim real-world predictive accuracy.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from scipy.stats import spearmanr

from ..profiles.schema import DIMENSIONS, Profile, CompatibilityResult

logger = logging.getLogger(__name__)

DEFAULT_QUANTILES = (0.1, 0.25, 0.5, 0.75, 0.9)


@dataclass
class ScoreDistributionStats:
    """Statistics about score distribution."""
    mean: float
    std: float
    min: float
    max: float
    quantiles: Dict[str, float]  # e.g., {"p10": 20.0, "p50": 55.0, "p90": 85.0}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mean": float(self.mean),
            "std": float(self.std),
            "min": float(self.min),
            "max": float(self.max),
            "quantiles": {k: float(v) for k, v in self.quantiles.items()}
        }


@dataclass
class SymmetryCheck:
    """Results of the profile-swap symmetry check."""
    n_pairs: int
    n_asymmetric: int
    max_raw_difference: float

    @property
    def is_symmetric(self) -> bool:
        return self.n_asymmetric == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n_pairs": int(self.n_pairs),
            "n_asymmetric": int(self.n_asymmetric),
            "max_raw_difference": float(self.max_raw_difference),
            "is_symmetric": self.is_symmetric
        }


@dataclass
class MonotonicityCheck:
    """Results of monotonicity sanity check."""
    correlation_with_similarity: float
    is_monotonic: bool
    n_violations: int
    violation_rate: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "correlation_with_similarity": float(self.correlation_with_similarity),
            "is_monotonic": bool(self.is_monotonic),
            "n_violations": int(self.n_violations),
            "violation_rate": float(self.violation_rate)
        }


@dataclass
class ScoringReport:
    """
    Evaluation report for one scoring configuration.

    Contains distribution statistics, strategy usage and sanity checks.
    """
    name: str
    distribution_stats: ScoreDistributionStats
    strategy_counts: Dict[str, int] = field(default_factory=dict)
    symmetry_check: Optional[SymmetryCheck] = None
    monotonicity_check: Optional[MonotonicityCheck] = None
    additional_metrics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "name": self.name,
            "distribution_stats": self.distribution_stats.to_dict(),
            "strategy_counts": dict(self.strategy_counts),
            "additional_metrics": self.additional_metrics
        }
        if self.symmetry_check:
            result["symmetry_check"] = self.symmetry_check.to_dict()
        if self.monotonicity_check:
            result["monotonicity_check"] = self.monotonicity_check.to_dict()
        return result

    def save(self, filepath: str) -> None:
        """Save report to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved scoring report to {filepath}")

    def summary(self) -> str:
        """Generate text summary of the report."""
        lines = [
            f"Scoring Report: {self.name}",
            "=" * 50,
            "",
            "Score Distribution:",
            f"  Mean: {self.distribution_stats.mean:.2f}",
            f"  Std:  {self.distribution_stats.std:.2f}",
            f"  Min:  {self.distribution_stats.min:.2f}",
            f"  Max:  {self.distribution_stats.max:.2f}",
        ]

        for q_name, q_value in self.distribution_stats.quantiles.items():
            lines.append(f"  {q_name}: {q_value:.2f}")

        if self.strategy_counts:
            lines.extend(["", "Strategies:"])
            for name, count in self.strategy_counts.items():
                lines.append(f"  {name}: {count}")

        if self.symmetry_check:
            lines.extend([
                "",
                "Symmetry Check:",
                f"  Pairs: {self.symmetry_check.n_pairs}",
                f"  Asymmetric: {self.symmetry_check.n_asymmetric}",
            ])

        if self.monotonicity_check:
            lines.extend([
                "",
                "Monotonicity Check:",
                f"  Correlation with similarity: {self.monotonicity_check.correlation_with_similarity:.4f}",
                f"  Is monotonic: {self.monotonicity_check.is_monotonic}",
                f"  Violation rate: {self.monotonicity_check.violation_rate:.2%}",
            ])

        return "\n".join(lines)


def compute_score_distribution_stats(
    scores: Sequence[float],
    quantiles: Sequence[float] = DEFAULT_QUANTILES
) -> ScoreDistributionStats:
    """
    Compute distribution statistics for scores.

    Args:
        scores: Compatibility scores
        quantiles: Quantile values to compute (default: p10, p25, p50, p75, p90)

    Returns:
        ScoreDistributionStats instance
    """
    scores = np.asarray(scores, dtype=float)
    if scores.size == 0:
        raise ValueError("Cannot compute distribution statistics of no scores")

    quantile_dict = {
        f"p{int(round(q * 100))}": float(np.percentile(scores, q * 100))
        for q in quantiles
    }

    return ScoreDistributionStats(
        mean=float(np.mean(scores)),
        std=float(np.std(scores)),
        min=float(np.min(scores)),
        max=float(np.max(scores)),
        quantiles=quantile_dict
    )


def profile_similarity(profile1: Profile, profile2: Profile) -> float:
    """
    Plain similarity of two profiles: 1 - mean |a - b| over shared dimensions.

    Returns 0.5 when no dimension is shared.
    """
    differences = [
        abs(profile1.get(dim) - profile2.get(dim))
        for dim in DIMENSIONS
        if profile1.get(dim) is not None and profile2.get(dim) is not None
    ]
    if not differences:
        return 0.5
    return 1.0 - float(np.mean(differences))


def check_symmetry(calculator, pairs: Sequence[Tuple[Profile, Profile]]) -> SymmetryCheck:
    """
    Check that swapping the profiles of each pair does not change the result.

    Args:
        calculator: CompatibilityCalculator
        pairs: Profile pairs

    Returns:
        SymmetryCheck instance
    """
    n_asymmetric = 0
    max_raw_difference = 0.0

    for profile_a, profile_b in pairs:
        forward = calculator.calculate_score(profile_a, profile_b)
        backward = calculator.calculate_score(profile_b, profile_a)
        raw_difference = abs(forward.raw_score - backward.raw_score)
        max_raw_difference = max(max_raw_difference, raw_difference)
        if forward.score != backward.score or forward.category_scores != backward.category_scores:
            n_asymmetric += 1

    if n_asymmetric:
        logger.warning(f"{n_asymmetric} of {len(pairs)} pairs are not symmetric")

    return SymmetryCheck(
        n_pairs=len(pairs),
        n_asymmetric=n_asymmetric,
        max_raw_difference=max_raw_difference
    )


def sanity_check_monotonicity(
    scores: Sequence[float],
    similarity_scores: Sequence[float],
    threshold: float = 0.3,
    max_samples: int = 1000
) -> MonotonicityCheck:
    """
    Check if scores are monotonic with plain profile similarity.

    Higher similarity should generally lead to higher compatibility scores,
    though complementary dimensions and override rules make this loose.

    Args:
        scores: Compatibility scores
        similarity_scores: Plain similarity measures for the same pairs
        threshold: Correlation threshold for "is_monotonic" flag
        max_samples: Limit on samples used for pairwise violation counting

    Returns:
        MonotonicityCheck instance
    """
    scores = np.asarray(scores, dtype=float)
    similarity_scores = np.asarray(similarity_scores, dtype=float)

    correlation = float("nan")
    if len(scores) > 1:
        correlation, _ = spearmanr(similarity_scores, scores)
    if np.isnan(correlation):
        # Constant input has no rank correlation
        correlation = 0.0

    n = min(len(scores), max_samples)
    sim_diff = similarity_scores[:n, None] - similarity_scores[None, :n]
    score_diff = scores[:n, None] - scores[None, :n]
    upper = np.triu(np.ones((n, n), dtype=bool), k=1)

    n_comparisons = int(upper.sum())
    n_violations = int(np.sum((sim_diff * score_diff < 0) & upper))
    violation_rate = n_violations / n_comparisons if n_comparisons > 0 else 0.0

    return MonotonicityCheck(
        correlation_with_similarity=float(correlation),
        is_monotonic=correlation >= threshold,
        n_violations=n_violations,
        violation_rate=violation_rate
    )


def results_to_dataframe(
    pairs: Sequence[Tuple[Profile, Profile]],
    results: Sequence[CompatibilityResult]
) -> pd.DataFrame:
    """One row per scored pair with score, raw score, strategy and similarity."""
    rows = []
    for (profile_a, profile_b), result in zip(pairs, results):
        rows.append({
            "profile_a": profile_a.profile_id,
            "profile_b": profile_b.profile_id,
            "score": result.score,
            "raw_score": result.raw_score,
            "strategy": result.strategy,
            "n_dimensions": len(result.breakdown),
            "similarity": profile_similarity(profile_a, profile_b),
            **{f"category_{k}": v for k, v in result.category_scores.to_dict().items()},
        })
    return pd.DataFrame(rows)


def create_scoring_report(
    name: str,
    calculator,
    pairs: Sequence[Tuple[Profile, Profile]],
    quantiles: Sequence[float] = DEFAULT_QUANTILES,
    symmetry_sample: int = 200
) -> Tuple[ScoringReport, pd.DataFrame]:
    """
    Score all pairs and build a complete report.

    Args:
        name: Report name
        calculator: CompatibilityCalculator
        pairs: Profile pairs to score
        quantiles: Quantiles to compute
        symmetry_sample: Number of pairs used for the symmetry check

    Returns:
        Tuple of (ScoringReport, per-pair DataFrame)
    """
    results = calculator.score_many(pairs)
    df = results_to_dataframe(pairs, results)

    dist_stats = compute_score_distribution_stats(df["score"].to_numpy(), quantiles)
    strategy_counts = {k: int(v) for k, v in df["strategy"].value_counts().items()}
    symmetry = check_symmetry(calculator, list(pairs)[:symmetry_sample])
    monotonicity = sanity_check_monotonicity(
        df["score"].to_numpy(), df["similarity"].to_numpy()
    )

    report = ScoringReport(
        name=name,
        distribution_stats=dist_stats,
        strategy_counts=strategy_counts,
        symmetry_check=symmetry,
        monotonicity_check=monotonicity,
        additional_metrics={
            "n_pairs": len(df),
            "raw_score_std": float(df["raw_score"].std(ddof=0)),
            "amplification_power": calculator.amplification_power,
        }
    )
    logger.info(f"Created scoring report {name} over {len(df)} pairs")
    return report, df
