"""
Static dimension configuration.

Each dimension has a weight (importance for overall compatibility) and a
flag saying whether similarity or moderate difference is preferred.

Similarity dimensions score 1 - |a - b|. Complementary dimensions score a
triangle peaking at a difference of 0.5 (one debater + one listener, one
sharer + one listener, one introvert + one extrovert).

The weights are hand-tuned and kept exactly as shipped.
"""

from dataclasses import dataclass, asdict
from types import MappingProxyType
from typing import Dict, Any, Mapping, FrozenSet

from ..profiles.schema import DIMENSIONS


@dataclass(frozen=True)
class DimensionConfig:
    """
    Configuration of one dimension.

    Attributes:
        weight: Relative importance, > 0
        is_complementary: True if moderate difference is preferred
    """
    weight: float
    is_complementary: bool = False

    def __post_init__(self):
        if self.weight <= 0:
            raise ValueError(f"weight must be > 0, got {self.weight}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


DIMENSION_CONFIG: Mapping[str, DimensionConfig] = MappingProxyType({
    # Emotional
    "positivity": DimensionConfig(weight=0.8),
    "empathy": DimensionConfig(weight=0.6),
    # Interaction
    "engagement": DimensionConfig(weight=0.7),
    "debate": DimensionConfig(weight=0.5, is_complementary=True),
    # Content
    "shitpost": DimensionConfig(weight=0.9),
    "meme": DimensionConfig(weight=0.8),
    "intellectual": DimensionConfig(weight=1.0),
    # Topics
    "political": DimensionConfig(weight=0.7),
    "personalSharing": DimensionConfig(weight=0.4, is_complementary=True),
    "inspirationalQuotes": DimensionConfig(weight=0.3),
    # Social
    "extroversion": DimensionConfig(weight=0.5, is_complementary=True),
    "authenticity": DimensionConfig(weight=0.8),
    # Values
    "optimism": DimensionConfig(weight=0.7),
    # Communication
    "humor": DimensionConfig(weight=0.9),
    "aiGenerated": DimensionConfig(weight=0.2),
})

# Poor alignment on any of these caps the final score
CRITICAL_DIMENSIONS: FrozenSet[str] = frozenset(
    {"intellectual", "humor", "authenticity", "shitpost"}
)


def validate_dimension_config(config: Mapping[str, DimensionConfig]) -> None:
    """
    Check that a dimension table covers exactly the 15 dimensions.

    Raises:
        ValueError: If dimensions are missing or unknown
    """
    missing = [dim for dim in DIMENSIONS if dim not in config]
    unknown = [dim for dim in config if dim not in DIMENSIONS]
    if missing or unknown:
        raise ValueError(
            f"Dimension config mismatch: missing={missing}, unknown={unknown}"
        )
