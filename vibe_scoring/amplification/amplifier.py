"""
Score amplification.

Raw aggregates cluster around the middle of [0, 1]. The amplifier spreads
them out in two steps:

1. Sigmoid centered at 0.5 with steepness = amplification_power * 2
2. Piecewise-linear remap of the sigmoid output into score bands

    sigmoid > 0.85   -> 0.88 + (s - 0.85) * 0.47   excellent
    sigmoid > 0.75   -> 0.78 + (s - 0.75) * 1.0    very good
    sigmoid > 0.6    -> 0.65 + (s - 0.6) * 0.87    good
    sigmoid > 0.4    -> 0.45 + (s - 0.4) * 1.0     mixed
    sigmoid > 0.25   -> 0.25 + (s - 0.25) * 1.33   poor
    sigmoid > 0.1    -> 0.15 + (s - 0.1) * 0.67    very poor
    otherwise        -> 0.05 + s * 1.0             incompatible

The amplifier trusts its amplification_power; range checks belong to the
configuration layer (see configs.settings.ScoringConfig).
"""

import math
from typing import Tuple

from scipy.special import expit

DEFAULT_AMPLIFICATION_POWER = 2.5

# (lower bound, band start, slope), evaluated top-down with strict ">"
SCORE_BANDS: Tuple[Tuple[float, float, float], ...] = (
    (0.85, 0.88, 0.47),
    (0.75, 0.78, 1.0),
    (0.6, 0.65, 0.87),
    (0.4, 0.45, 1.0),
    (0.25, 0.25, 1.33),
    (0.1, 0.15, 0.67),
)
FLOOR_BAND: Tuple[float, float] = (0.05, 1.0)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def sigmoid(x: float, steepness: float, midpoint: float = 0.5) -> float:
    """Logistic function 1 / (1 + exp(-steepness * (x - midpoint)))."""
    return float(expit(steepness * (x - midpoint)))


def remap_bands(transformed: float) -> float:
    """Map a sigmoid output onto the score bands."""
    for lower, start, slope in SCORE_BANDS:
        if transformed > lower:
            return start + (transformed - lower) * slope
    start, slope = FLOOR_BAND
    return start + transformed * slope


class ScoreAmplifier:
    """
    Non-linear remap from raw score to the 0-100 scale.

    Attributes:
        amplification_power: 1 = gentle, 2.5 = strong (default), >= 3.5 extreme
    """

    def __init__(self, amplification_power: float = DEFAULT_AMPLIFICATION_POWER):
        self.amplification_power = amplification_power

    @property
    def steepness(self) -> float:
        return self.amplification_power * 2

    def amplify(self, raw_score: float) -> float:
        """
        Amplify a raw score.

        Args:
            raw_score: Aggregated score in [0, 1]

        Returns:
            Amplified score in [0, 1] (before scaling to 0-100)
        """
        return remap_bands(sigmoid(raw_score, self.steepness, 0.5))

    def to_score(self, raw_score: float) -> int:
        """Amplify and convert to an integer score in [0, 100]."""
        amplified = max(0.0, min(1.0, self.amplify(raw_score)))
        return round_half_up(amplified * 100)
