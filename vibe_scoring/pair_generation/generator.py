"""
Synthetic profiles and pair generation for score distribution analysis.

Key Design Decisions:
- Pairs are unordered: (A, B) and (B, A) are considered the same pair
- Self-pairs are excluded: (A, A) is never generated
- Random uniform sampling without stratification
- Reproducible given a random seed
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from ..profiles.schema import DIMENSIONS, Profile

logger = logging.getLogger(__name__)


def generate_synthetic_profiles(
    n_profiles: int,
    null_rate: float = 0.1,
    random_seed: Optional[int] = None
) -> List[Profile]:
    """
    Generate random profiles.

    Dimension values are drawn uniformly from [0, 1]; each value is
    independently unknown with probability null_rate.

    Args:
        n_profiles: Number of profiles
        null_rate: Probability that a dimension is unknown
        random_seed: Random seed for reproducibility

    Returns:
        List of profiles with ids "synthetic_0", "synthetic_1", ...
    """
    if not 0 <= null_rate <= 1:
        raise ValueError(f"null_rate must be in [0, 1], got {null_rate}")

    rng = np.random.RandomState(random_seed)
    values = rng.uniform(0.0, 1.0, size=(n_profiles, len(DIMENSIONS)))
    unknown = rng.uniform(0.0, 1.0, size=values.shape) < null_rate

    profiles = []
    for i in range(n_profiles):
        dimensions = {
            dim: (None if unknown[i, j] else float(values[i, j]))
            for j, dim in enumerate(DIMENSIONS)
        }
        profiles.append(Profile(profile_id=f"synthetic_{i}", dimensions=dimensions))

    logger.info(f"Generated {n_profiles} synthetic profiles (null_rate={null_rate})")
    return profiles


class PairGenerator:
    """
    Generator for random profile pairs.

    This class generates random pairs of profile indices. It ensures:
    - No self-pairs (i != j)
    - No duplicate pairs (considering order doesn't matter)
    - Reproducible results given a random seed

    Attributes:
        max_pairs: Maximum number of pairs to generate
        random_state: Numpy RandomState for reproducibility
    """

    def __init__(self, max_pairs: int = 10000, random_seed: Optional[int] = None):
        """
        Initialize the pair generator.

        Args:
            max_pairs: Maximum number of pairs to generate
            random_seed: Random seed for reproducibility
        """
        self.max_pairs = max_pairs
        self.random_state = np.random.RandomState(random_seed)

    def generate_pairs(self, n_profiles: int) -> Tuple[np.ndarray, np.ndarray]:
        """
        Generate random pairs of profile indices.

        The number of pairs generated is
        min(max_pairs, n_profiles * (n_profiles - 1) / 2).

        Args:
            n_profiles: Total number of profiles

        Returns:
            Tuple of (indices_a, indices_b) arrays with indices_a[i] < indices_b[i]
        """
        max_possible = n_profiles * (n_profiles - 1) // 2
        target_pairs = min(self.max_pairs, max_possible)

        logger.info(f"Generating {target_pairs} pairs from {n_profiles} profiles")

        if target_pairs >= max_possible * 0.5:
            return self._generate_by_enumeration(n_profiles, target_pairs)
        return self._generate_by_sampling(n_profiles, target_pairs)

    def _generate_by_enumeration(
        self, n_profiles: int, target_pairs: int
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Enumerate all pairs, then sample; used when most pairs are needed."""
        indices_a, indices_b = np.triu_indices(n_profiles, k=1)

        if target_pairs < len(indices_a):
            sample_idx = np.sort(
                self.random_state.choice(len(indices_a), size=target_pairs, replace=False)
            )
            indices_a = indices_a[sample_idx]
            indices_b = indices_b[sample_idx]

        return indices_a, indices_b

    def _generate_by_sampling(
        self, n_profiles: int, target_pairs: int
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Rejection sampling; used when a small fraction of pairs is needed."""
        pairs_set = set()
        batch_size = min(target_pairs * 2, 1000000)

        while len(pairs_set) < target_pairs:
            a = self.random_state.randint(0, n_profiles, size=batch_size)
            b = self.random_state.randint(0, n_profiles, size=batch_size)

            for i in range(batch_size):
                if a[i] != b[i]:
                    pairs_set.add((int(min(a[i], b[i])), int(max(a[i], b[i]))))
                    if len(pairs_set) >= target_pairs:
                        break

        pairs_list = sorted(pairs_set)
        indices_a = np.array([p[0] for p in pairs_list], dtype=int)
        indices_b = np.array([p[1] for p in pairs_list], dtype=int)
        return indices_a, indices_b

    def profile_pairs(self, profiles: List[Profile]) -> List[Tuple[Profile, Profile]]:
        """Generate pairs and resolve them to profile objects."""
        indices_a, indices_b = self.generate_pairs(len(profiles))
        return [(profiles[a], profiles[b]) for a, b in zip(indices_a, indices_b)]
