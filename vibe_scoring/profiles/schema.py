"""
Data structures for profiles and compatibility results.

A profile describes one person (or account) along 15 fixed personality
dimensions. Each dimension is a float in [0, 1], or None when the profile
provider could not determine it.

Dimension order is fixed and is the order used for breakdowns:
    positivity, empathy, engagement, debate, shitpost, meme, intellectual,
    political, personalSharing, inspirationalQuotes, extroversion,
    authenticity, optimism, humor, aiGenerated
"""

import logging
import math
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Optional, Dict, Any, List, Mapping, Tuple

logger = logging.getLogger(__name__)


DIMENSIONS: Tuple[str, ...] = (
    "positivity",
    "empathy",
    "engagement",
    "debate",
    "shitpost",
    "meme",
    "intellectual",
    "political",
    "personalSharing",
    "inspirationalQuotes",
    "extroversion",
    "authenticity",
    "optimism",
    "humor",
    "aiGenerated",
)

# Profile providers report dimensions as e.g. "humorRating"
_RATING_SUFFIX = "Rating"

_ID_KEYS = ("profile_id", "id", "username")


def normalize_dimension_name(name: str) -> str:
    """
    Map a provider dimension key onto a dimension id.

    Accepts the bare id ("humor") and the provider form ("humorRating").

    Raises:
        ValueError: If the name is not one of the 15 dimensions
    """
    if name in DIMENSIONS:
        return name
    if name.endswith(_RATING_SUFFIX):
        stripped = name[: -len(_RATING_SUFFIX)]
        if stripped in DIMENSIONS:
            return stripped
    raise ValueError(f"Unknown dimension: {name}")


def _coerce_value(dimension: str, value: Any) -> Optional[float]:
    """Validate a single dimension value, clamping it into [0, 1]."""
    if value is None:
        return None
    if isinstance(value, (bool, str, bytes)):
        raise ValueError(f"{dimension} must be a number in [0, 1] or None, got {value!r}")
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{dimension} must be a number in [0, 1] or None, got {value!r}")
    if math.isnan(value):
        return None
    if not 0.0 <= value <= 1.0:
        clamped = min(1.0, max(0.0, value))
        logger.warning(f"Clamping {dimension}={value} into [0, 1] -> {clamped}")
        return clamped
    return value


@dataclass(frozen=True)
class Profile:
    """
    Personality profile for one entity.

    Attributes:
        profile_id: Identifier supplied by the profile provider
        dimensions: Mapping of all 15 dimension ids to a value in [0, 1] or
            None. Dimensions missing from the input are stored as None. The
            mapping is read-only; profiles hash by profile_id.
    """
    profile_id: str
    dimensions: Mapping[str, Optional[float]] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        """Validate dimension names and values; fill unknowns with None."""
        values = {dim: None for dim in DIMENSIONS}
        for name, value in dict(self.dimensions).items():
            dim = normalize_dimension_name(name)
            values[dim] = _coerce_value(dim, value)
        object.__setattr__(self, "dimensions", MappingProxyType(values))

    def get(self, dimension: str) -> Optional[float]:
        """Return the value of a dimension (None when unknown)."""
        return self.dimensions[dimension]

    def known_dimensions(self) -> List[str]:
        """Dimensions with data, in fixed dimension order."""
        return [dim for dim in DIMENSIONS if self.dimensions[dim] is not None]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "profile_id": self.profile_id,
            "dimensions": dict(self.dimensions),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        """
        Create from dictionary.

        Accepts either a nested form::

            {"id": "alice", "dimensions": {"humor": 0.8, ...}}

        or a flat form where dimension keys sit next to the identifier.
        Provider-style keys ("humorRating") are accepted in both forms.
        """
        profile_id = None
        for key in _ID_KEYS:
            if data.get(key) is not None:
                profile_id = str(data[key])
                break
        if profile_id is None:
            raise ValueError(f"Profile is missing an identifier (one of {list(_ID_KEYS)})")

        if "dimensions" in data:
            dimensions = data["dimensions"] or {}
        else:
            dimensions = {k: v for k, v in data.items() if k not in _ID_KEYS}
        return cls(profile_id=profile_id, dimensions=dimensions)


@dataclass(frozen=True)
class DimensionComparison:
    """
    Comparison of one dimension between two profiles.

    Only created when both profiles have a value for the dimension.

    Attributes:
        dimension: Dimension id
        value1: Value from the first profile
        value2: Value from the second profile
        difference: |value1 - value2|
        score: Per-dimension compatibility in [0, 1] after override rules
        weight: Dimension weight copied from the dimension table
    """
    dimension: str
    value1: float
    value2: float
    difference: float
    score: float
    weight: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "dimension": self.dimension,
            "value1": self.value1,
            "value2": self.value2,
            "difference": self.difference,
            "score": self.score,
            "weight": self.weight,
        }


@dataclass(frozen=True)
class CategoryScores:
    """Per-category compatibility (0-100). Categories without data stay at 50."""
    emotional: int = 50
    interaction: int = 50
    content: int = 50
    topics: int = 50
    social: int = 50
    values: int = 50
    communication: int = 50

    def __getitem__(self, category: str) -> int:
        if category not in self.names():
            raise KeyError(category)
        return getattr(self, category)

    @classmethod
    def names(cls) -> List[str]:
        """Category names in display order."""
        return [f.name for f in fields(cls)]

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary."""
        return {name: getattr(self, name) for name in self.names()}


@dataclass(frozen=True)
class CompatibilityResult:
    """
    Result of compatibility scoring.

    Attributes:
        score: Amplified compatibility score in [0, 100]
        breakdown: Per-dimension comparisons in fixed dimension order
        category_scores: Per-category averages, for explanation only
        raw_score: Aggregated score in [0, 1] before amplification
        strategy: Name of the aggregation strategy that produced raw_score
        top_matches: Best-matching dimension ids, best first
        top_clashes: Worst-matching dimension ids, worst first
        label: Text interpretation of score
    """
    score: int
    breakdown: Tuple[DimensionComparison, ...]
    category_scores: CategoryScores
    raw_score: float = 0.5
    strategy: str = "neutral"
    top_matches: Tuple[str, ...] = ()
    top_clashes: Tuple[str, ...] = ()
    label: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the dictionary shape handed to result consumers."""
        return {
            "score": self.score,
            "breakdown": [c.to_dict() for c in self.breakdown],
            "categoryScores": self.category_scores.to_dict(),
            "rawScore": self.raw_score,
            "strategy": self.strategy,
            "topMatches": list(self.top_matches),
            "topClashes": list(self.top_clashes),
            "label": self.label,
        }
