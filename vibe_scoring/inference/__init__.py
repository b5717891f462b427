"""
Inference module for compatibility scoring.

This module provides the calculator that turns two profiles into a
compatibility result.
"""

from .calculator import CompatibilityCalculator, create_calculator, create_calculator_from_config

__all__ = [
    "CompatibilityCalculator",
    "create_calculator",
    "create_calculator_from_config",
]
