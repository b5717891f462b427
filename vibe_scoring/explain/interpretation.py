"""Text interpretation of compatibility scores."""

from typing import Tuple

# (minimum score, label), highest first
SCORE_LABELS: Tuple[Tuple[int, str], ...] = (
    (90, "Perfect vibe sync"),
    (80, "Excellent match"),
    (70, "Good compatibility"),
    (60, "Decent match"),
    (50, "Mixed compatibility"),
    (40, "Challenging match"),
    (20, "Poor compatibility"),
)
FALLBACK_LABEL = "Incompatible vibes"

COMPATIBILITY_LEVELS: Tuple[Tuple[int, str], ...] = (
    (90, "perfect"),
    (70, "high"),
    (50, "medium"),
    (0, "low"),
)


def interpret_score(score: int) -> str:
    """Short human-readable label for a 0-100 score."""
    for minimum, label in SCORE_LABELS:
        if score >= minimum:
            return label
    return FALLBACK_LABEL


def compatibility_level(score: int) -> str:
    """Coarse compatibility level: perfect, high, medium or low."""
    for minimum, level in COMPATIBILITY_LEVELS:
        if score >= minimum:
            return level
    return "low"
