"""Shared fixtures for the scoring tests."""

import pytest

from vibe_scoring import CompatibilityCalculator, Profile


@pytest.fixture(autouse=True)
def clean_scoring_env(monkeypatch):
    """Keep VIBE_* variables from the host out of every test."""
    monkeypatch.delenv("VIBE_AMPLIFICATION_POWER", raising=False)
    monkeypatch.delenv("VIBE_TOP_N", raising=False)


@pytest.fixture(scope="module")
def calculator():
    """Calculator with default settings."""
    return CompatibilityCalculator()


@pytest.fixture
def shitposter():
    """Heavy shitposter with strong humor."""
    return Profile("shitposter", {
        "positivity": 0.7, "empathy": 0.6, "engagement": 0.8, "debate": 0.3,
        "shitpost": 0.9, "meme": 0.85, "intellectual": 0.5, "political": 0.2,
        "personalSharing": 0.4, "inspirationalQuotes": 0.1, "extroversion": 0.7,
        "authenticity": 0.8, "optimism": 0.6, "humor": 0.9, "aiGenerated": 0.05,
    })


@pytest.fixture
def kindred_spirit():
    """Close to the shitposter on most dimensions."""
    return Profile("kindred_spirit", {
        "positivity": 0.65, "empathy": 0.7, "engagement": 0.75, "debate": 0.75,
        "shitpost": 0.85, "meme": 0.9, "intellectual": 0.55, "political": 0.25,
        "personalSharing": 0.85, "inspirationalQuotes": 0.15, "extroversion": 0.2,
        "authenticity": 0.85, "optimism": 0.65, "humor": 0.85, "aiGenerated": 0.1,
    })


@pytest.fixture
def earnest_pundit():
    """Earnest, political and humorless."""
    return Profile("earnest_pundit", {
        "positivity": 0.2, "empathy": 0.3, "engagement": 0.3, "debate": 0.3,
        "shitpost": 0.05, "meme": 0.1, "intellectual": 0.95, "political": 0.9,
        "personalSharing": 0.4, "inspirationalQuotes": 0.9, "extroversion": 0.7,
        "authenticity": 0.2, "optimism": 0.1, "humor": 0.1, "aiGenerated": 0.6,
    })
