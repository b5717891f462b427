"""Synthetic profile and pair generation."""

from .generator import PairGenerator, generate_synthetic_profiles

__all__ = ["PairGenerator", "generate_synthetic_profiles"]
