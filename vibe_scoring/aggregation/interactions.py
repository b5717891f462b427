"""
Pairwise dimension interactions for the Choquet-style aggregation.

A positive value is a synergy (the two dimensions matching together is worth
more than the sum of their weights); a negative value is a redundancy or
clash. Lookups are directional: the row is the dimension currently being
consumed, the column a dimension still in the coalition.
"""

from types import MappingProxyType
from typing import Mapping

InteractionMatrix = Mapping[str, Mapping[str, float]]

INTERACTION_MATRIX: InteractionMatrix = MappingProxyType({
    "humor": MappingProxyType({"shitpost": 0.15, "meme": 0.1}),
    "shitpost": MappingProxyType({"humor": 0.15, "meme": 0.2}),
    "meme": MappingProxyType({"shitpost": 0.2, "humor": 0.1}),
    "intellectual": MappingProxyType({"debate": 0.1}),
    "debate": MappingProxyType({"intellectual": 0.1}),
    "authenticity": MappingProxyType({
        "empathy": 0.1,
        "personalSharing": 0.15,
        "aiGenerated": -0.2,
    }),
    "political": MappingProxyType({"debate": -0.05}),
    "aiGenerated": MappingProxyType({"authenticity": -0.2}),
})


def interaction(
    source: str,
    target: str,
    matrix: InteractionMatrix = INTERACTION_MATRIX
) -> float:
    """Interaction term from source to target (0 if none is defined)."""
    return matrix.get(source, {}).get(target, 0.0)
