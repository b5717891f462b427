"""
Dimension-specific override rules.

After the base similarity/complementary score is computed, some dimensions
override it when both values fall into particular regions. Each rule is a
function (value1, value2, base_score) -> score; a dimension has at most one
rule, and a rule returns base_score unchanged when its condition does not
hold.

Rules:
    shitpost      both > 0.7                     -> min(1, score * 1.5)
    intellectual  difference > 0.5               -> score * 0.3
    humor         difference > 0.6               -> score * 0.2
    political     both > 0.7, difference > 0.3   -> score * 0.1
                  both > 0.7, difference <= 0.3  -> score * score
    meme          both > 0.8                     -> 1
    aiGenerated   both > 0.7                     -> 1
    authenticity  one > 0.8 and the other < 0.3  -> score * 0.1
"""

from types import MappingProxyType
from typing import Callable, Mapping

OverrideRule = Callable[[float, float, float], float]


def shitpost_rule(value1: float, value2: float, score: float) -> float:
    """Two heavy shitposters get a boost."""
    if value1 > 0.7 and value2 > 0.7:
        return min(1.0, score * 1.5)
    return score


def intellectual_rule(value1: float, value2: float, score: float) -> float:
    """Large intellectual gaps are penalized."""
    if abs(value1 - value2) > 0.5:
        return score * 0.3
    return score


def humor_rule(value1: float, value2: float, score: float) -> float:
    """Humor mismatch is close to disqualifying."""
    if abs(value1 - value2) > 0.6:
        return score * 0.2
    return score


def political_rule(value1: float, value2: float, score: float) -> float:
    """Two highly political profiles must agree closely."""
    if value1 > 0.7 and value2 > 0.7:
        if abs(value1 - value2) > 0.3:
            return score * 0.1
        return score * score
    return score


def meme_rule(value1: float, value2: float, score: float) -> float:
    if value1 > 0.8 and value2 > 0.8:
        return 1.0
    return score


def ai_generated_rule(value1: float, value2: float, score: float) -> float:
    if value1 > 0.7 and value2 > 0.7:
        return 1.0
    return score


def authenticity_rule(value1: float, value2: float, score: float) -> float:
    """One authentic and one fake profile is a strong mismatch."""
    if (value1 > 0.8 and value2 < 0.3) or (value1 < 0.3 and value2 > 0.8):
        return score * 0.1
    return score


OVERRIDE_RULES: Mapping[str, OverrideRule] = MappingProxyType({
    "shitpost": shitpost_rule,
    "intellectual": intellectual_rule,
    "humor": humor_rule,
    "political": political_rule,
    "meme": meme_rule,
    "aiGenerated": ai_generated_rule,
    "authenticity": authenticity_rule,
})


def apply_override(
    dimension: str,
    value1: float,
    value2: float,
    base_score: float,
    rules: Mapping[str, OverrideRule] = OVERRIDE_RULES
) -> float:
    """
    Apply the override rule registered for a dimension, if any.

    Args:
        dimension: Dimension id
        value1: Value from the first profile
        value2: Value from the second profile
        base_score: Score before overrides
        rules: Rule table (dimension -> rule)

    Returns:
        Overridden score, or base_score if the dimension has no rule
    """
    rule = rules.get(dimension)
    if rule is None:
        return base_score
    return rule(value1, value2, base_score)
