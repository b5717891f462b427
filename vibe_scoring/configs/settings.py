"""
Scoring configuration.

The calculator itself never reads the environment or files; callers build a
ScoringConfig (from YAML, a dict or the environment), validate it and pass
its values in.

Environment variables:
    VIBE_AMPLIFICATION_POWER  float in [1, 5], default 2.5
    VIBE_TOP_N                int >= 0, default 3
"""

import json
import logging
import os
from dataclasses import dataclass, asdict
from typing import Dict, Any, Mapping, Optional

from ..amplification.amplifier import DEFAULT_AMPLIFICATION_POWER
from ..explain.ranking import DEFAULT_TOP_N

logger = logging.getLogger(__name__)

MIN_AMPLIFICATION_POWER = 1.0
MAX_AMPLIFICATION_POWER = 5.0

ENV_AMPLIFICATION_POWER = "VIBE_AMPLIFICATION_POWER"
ENV_TOP_N = "VIBE_TOP_N"


@dataclass
class ScoringConfig:
    """
    Configuration for compatibility scoring.

    Attributes:
        amplification_power: Amplification strength in [1, 5]
            (1 = no amplification, 2.5 = strong, >= 3.5 = extreme)
        top_n: Number of top matches/clashes to report
    """
    amplification_power: float = DEFAULT_AMPLIFICATION_POWER
    top_n: int = DEFAULT_TOP_N

    def validate(self) -> None:
        """Validate configuration values."""
        if not MIN_AMPLIFICATION_POWER <= self.amplification_power <= MAX_AMPLIFICATION_POWER:
            raise ValueError(
                f"amplification_power must be in [{MIN_AMPLIFICATION_POWER}, "
                f"{MAX_AMPLIFICATION_POWER}], got {self.amplification_power}"
            )
        if not isinstance(self.top_n, int) or self.top_n < 0:
            raise ValueError(f"top_n must be a non-negative integer, got {self.top_n}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ScoringConfig":
        """Create from dictionary."""
        return cls(**d)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ScoringConfig":
        """Create from main config dictionary."""
        scoring_config = config.get("scoring", {}) or {}

        return cls(
            amplification_power=float(
                scoring_config.get("amplification_power", DEFAULT_AMPLIFICATION_POWER)
            ),
            top_n=int(scoring_config.get("top_n", DEFAULT_TOP_N)),
        )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        base: Optional["ScoringConfig"] = None
    ) -> "ScoringConfig":
        """
        Create from environment variables.

        Unset variables keep the values of base (or the defaults).
        Unparsable values fall back with a warning; the amplification power
        is clamped into [1, 5].

        Args:
            environ: Mapping to read from (default: os.environ)
            base: Configuration supplying values for unset variables
        """
        environ = os.environ if environ is None else environ
        base = base or cls()
        amplification_power = base.amplification_power
        top_n = base.top_n

        raw_power = environ.get(ENV_AMPLIFICATION_POWER)
        if raw_power not in (None, ""):
            try:
                amplification_power = float(raw_power)
            except ValueError:
                logger.warning(
                    f"Invalid {ENV_AMPLIFICATION_POWER}={raw_power!r}, "
                    f"using {amplification_power}"
                )
        amplification_power = clamp_amplification_power(amplification_power)

        raw_top_n = environ.get(ENV_TOP_N)
        if raw_top_n not in (None, ""):
            try:
                top_n = max(0, int(raw_top_n))
            except ValueError:
                logger.warning(f"Invalid {ENV_TOP_N}={raw_top_n!r}, using {top_n}")

        return cls(amplification_power=amplification_power, top_n=top_n)

    def save(self, filepath: str) -> None:
        """Save to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved scoring config to {filepath}")

    @classmethod
    def load(cls, filepath: str) -> "ScoringConfig":
        """Load from JSON file."""
        with open(filepath, "r") as f:
            d = json.load(f)
        return cls.from_dict(d)


def clamp_amplification_power(value: float) -> float:
    """Clamp an amplification power into [1, 5], logging when it changes."""
    clamped = min(MAX_AMPLIFICATION_POWER, max(MIN_AMPLIFICATION_POWER, value))
    if clamped != value:
        logger.warning(f"Clamping amplification_power {value} -> {clamped}")
    return clamped
