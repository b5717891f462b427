"""
Command-line entrypoint for scoring a pair of profiles.

Usage:
    python -m vibe_scoring.run --profiles pair.json
    python -m vibe_scoring.run --profiles pair.json --config configs/config.yaml \
        --amplification-power 3.0 --output result.json

The profile file holds exactly two profiles (JSON list, {"profiles": [...]}
or a two-row CSV). Configuration precedence, lowest first: defaults, YAML
config, VIBE_* environment variables, command-line flags.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging level from config."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(level)


def resolve_scoring_config(
    config: Dict[str, Any],
    amplification_power: Optional[float] = None,
    top_n: Optional[int] = None
):
    """
    Build the effective ScoringConfig from YAML, environment and CLI values.

    Returns:
        Validated ScoringConfig
    """
    from .configs import ScoringConfig, clamp_amplification_power

    scoring_config = ScoringConfig.from_env(base=ScoringConfig.from_config(config))
    if amplification_power is not None:
        scoring_config.amplification_power = clamp_amplification_power(amplification_power)
    if top_n is not None:
        scoring_config.top_n = top_n

    scoring_config.validate()
    return scoring_config


def score_pair(
    profiles_path: str,
    config_path: Optional[str] = None,
    amplification_power: Optional[float] = None,
    top_n: Optional[int] = None,
    log_level: Optional[str] = None
) -> Dict[str, Any]:
    """
    Score the two profiles stored in a file.

    Args:
        profiles_path: JSON or CSV file with exactly two profiles
        config_path: Optional YAML configuration file
        amplification_power: Override for scoring.amplification_power
        top_n: Override for scoring.top_n
        log_level: Override for global.log_level

    Returns:
        Result dictionary (CompatibilityResult.to_dict() plus profile ids)
    """
    from .configs import load_config, validate_config
    from .data_loading import load_profile_pair
    from .inference import create_calculator

    config: Dict[str, Any] = {}
    if config_path:
        config = load_config(config_path)
        for issue in validate_config(config):
            logger.warning(f"Config issue: {issue}")
        if not log_level:
            setup_logging((config.get("global") or {}).get("log_level", "INFO"))

    scoring_config = resolve_scoring_config(config, amplification_power, top_n)
    calculator = create_calculator(scoring_config)

    profile_a, profile_b = load_profile_pair(profiles_path)
    result = calculator.calculate_score(profile_a, profile_b)
    logger.info(
        f"{profile_a.profile_id} x {profile_b.profile_id}: {result.score}/100 "
        f"({result.label}, strategy={result.strategy})"
    )

    output = result.to_dict()
    output["profiles"] = [profile_a.profile_id, profile_b.profile_id]
    output["config"] = scoring_config.to_dict()
    return output


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Compute the compatibility score of two profiles"
    )
    parser.add_argument(
        "--profiles",
        type=str,
        required=True,
        help="JSON or CSV file with exactly two profiles"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration YAML file"
    )
    parser.add_argument(
        "--amplification-power",
        type=float,
        default=None,
        help="Amplification power in [1, 5] (overrides config and environment)"
    )
    parser.add_argument(
        "--top-n",
        type=int,
        default=None,
        help="Number of top matches/clashes to report"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the result JSON to this file instead of stdout"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (overrides config)"
    )

    args = parser.parse_args(argv)
    if args.log_level:
        setup_logging(args.log_level)

    try:
        output = score_pair(
            profiles_path=args.profiles,
            config_path=args.config,
            amplification_power=args.amplification_power,
            top_n=args.top_n,
            log_level=args.log_level
        )
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Scoring failed: {e}")
        return 1

    text = json.dumps(output, indent=2)
    if args.output:
        with open(args.output, "w") as f:
            f.write(text + "\n")
        logger.info(f"Wrote result to {args.output}")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
