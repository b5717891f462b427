"""Non-linear score amplification."""

from .amplifier import (
    ScoreAmplifier,
    DEFAULT_AMPLIFICATION_POWER,
    SCORE_BANDS,
    sigmoid,
    remap_bands,
    round_half_up,
)

__all__ = [
    "ScoreAmplifier",
    "DEFAULT_AMPLIFICATION_POWER",
    "SCORE_BANDS",
    "sigmoid",
    "remap_bands",
    "round_half_up",
]
