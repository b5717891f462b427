"""
Score distribution analysis across amplification powers.

Generates synthetic profiles, scores random pairs with each configured
amplification power and reports how the 0-100 scores spread out. Writes a
per-pair CSV and a JSON report per power, plus a comparison table.

Usage:
    python scripts/score_distribution.py
    python scripts/score_distribution.py --config configs/config.yaml --output-dir /tmp/dist
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import logging
from typing import Any, Dict, List

import pandas as pd

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def run_distribution_analysis(config: Dict[str, Any], output_dir: Path) -> pd.DataFrame:
    """
    Score synthetic pairs for every amplification power in the config.

    Args:
        config: Main configuration dictionary
        output_dir: Directory for CSV/JSON outputs

    Returns:
        DataFrame with one row of distribution statistics per power
    """
    from vibe_scoring.configs import ScoringConfig, get_config_value
    from vibe_scoring.inference import create_calculator
    from vibe_scoring.pair_generation import PairGenerator, generate_synthetic_profiles
    from vibe_scoring.evaluation import create_scoring_report

    seed = get_config_value(config, "evaluation.random_seed", 42)
    n_profiles = get_config_value(config, "evaluation.n_profiles", 300)
    max_pairs = get_config_value(config, "evaluation.max_pairs", 5000)
    null_rate = get_config_value(config, "evaluation.null_rate", 0.1)
    powers = get_config_value(config, "evaluation.amplification_powers", [1.0, 2.5, 5.0])
    quantiles = get_config_value(config, "evaluation.quantiles", [0.1, 0.25, 0.5, 0.75, 0.9])

    profiles = generate_synthetic_profiles(n_profiles, null_rate=null_rate, random_seed=seed)
    pairs = PairGenerator(max_pairs=max_pairs, random_seed=seed).profile_pairs(profiles)

    output_dir.mkdir(parents=True, exist_ok=True)
    rows: List[Dict[str, Any]] = []

    for power in powers:
        logger.info("=" * 60)
        logger.info(f"Amplification power {power}")
        logger.info("=" * 60)

        scoring_config = ScoringConfig.from_config(config)
        scoring_config.amplification_power = float(power)
        calculator = create_calculator(scoring_config)

        report, df = create_scoring_report(
            name=f"amplification_{power}",
            calculator=calculator,
            pairs=pairs,
            quantiles=quantiles
        )
        report.save(str(output_dir / f"report_amplification_{power}.json"))
        df.to_csv(output_dir / f"scores_amplification_{power}.csv", index=False)
        logger.info("\n" + report.summary())

        stats = report.distribution_stats
        rows.append({
            "amplification_power": power,
            "mean": stats.mean,
            "std": stats.std,
            "min": stats.min,
            "max": stats.max,
            **stats.quantiles,
            "spearman_similarity": report.monotonicity_check.correlation_with_similarity,
            "symmetric": report.symmetry_check.is_symmetric,
        })

    comparison = pd.DataFrame(rows)
    comparison.to_csv(output_dir / "comparison.csv", index=False)
    return comparison


def main():
    parser = argparse.ArgumentParser(description="Analyze score distributions")
    parser.add_argument(
        "--config",
        type=str,
        default=str(project_root / "configs" / "config.yaml"),
        help="Path to configuration YAML file"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Output directory (default: evaluation.output_dir from config)"
    )
    args = parser.parse_args()

    from vibe_scoring.configs import load_config, validate_config, get_config_value

    config = load_config(args.config)
    for issue in validate_config(config):
        logger.warning(f"Config issue: {issue}")

    output_dir = Path(
        args.output_dir
        or project_root / get_config_value(config, "evaluation.output_dir", "artifacts/score_distribution")
    )

    comparison = run_distribution_analysis(config, output_dir)

    print("\n" + "=" * 60)
    print("SCORE DISTRIBUTION BY AMPLIFICATION POWER")
    print("=" * 60)
    print(comparison.to_string(index=False, float_format=lambda v: f"{v:.2f}"))
    print(f"\nOutputs written to {output_dir}")


if __name__ == "__main__":
    main()
