"""Tests for the sigmoid and band amplification."""

import numpy as np
import pytest

from vibe_scoring.amplification import (
    DEFAULT_AMPLIFICATION_POWER,
    ScoreAmplifier,
    remap_bands,
    round_half_up,
    sigmoid,
)


class TestRounding:

    @pytest.mark.parametrize("value,expected", [
        (0.5, 1),
        (2.5, 3),
        (54.4, 54),
        (54.5, 55),
        (99.99, 100),
        (0.0, 0),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestSigmoid:

    def test_midpoint(self):
        assert sigmoid(0.5, steepness=5.0) == pytest.approx(0.5)

    def test_symmetry_around_midpoint(self):
        assert sigmoid(0.8, 5.0) + sigmoid(0.2, 5.0) == pytest.approx(1.0)


class TestBands:

    @pytest.mark.parametrize("transformed,expected", [
        (0.0, 0.05),
        (0.1, 0.15),
        (0.5, 0.55),
        (0.7, 0.737),
        # band bounds are strict, so 0.85 still belongs to the lower band
        (0.85, 0.88),
        (1.0, 0.9505),
    ])
    def test_remap(self, transformed, expected):
        assert remap_bands(transformed) == pytest.approx(expected)


class TestScoreAmplifier:

    def test_default_power(self):
        amplifier = ScoreAmplifier()
        assert amplifier.amplification_power == DEFAULT_AMPLIFICATION_POWER
        assert amplifier.steepness == 5.0

    def test_neutral_raw_score(self):
        assert ScoreAmplifier().to_score(0.5) == 55

    def test_extremes(self):
        amplifier = ScoreAmplifier()
        assert 90 <= amplifier.to_score(1.0) <= 95
        assert 5 <= amplifier.to_score(0.0) <= 15

    def test_scores_are_non_decreasing(self):
        amplifier = ScoreAmplifier()
        scores = [amplifier.to_score(raw) for raw in np.linspace(0.0, 1.0, 101)]
        assert all(isinstance(s, int) for s in scores)
        assert scores == sorted(scores)

    def test_higher_power_spreads_further(self):
        gentle, extreme = ScoreAmplifier(1.0), ScoreAmplifier(5.0)
        assert extreme.to_score(0.9) >= gentle.to_score(0.9)
        assert extreme.to_score(0.1) <= gentle.to_score(0.1)

    @pytest.mark.parametrize("raw", [-0.5, 0.0, 0.33, 1.0, 1.5])
    def test_score_range(self, raw):
        assert 0 <= ScoreAmplifier(5.0).to_score(raw) <= 100
