"""
Smoke test for the scoring pipeline.

Tests:
1. Basic scoring with mock profiles
2. Scores are integers within [0, 100]
3. Symmetry: score(A, B) == score(B, A)
4. Similar profiles score higher than different ones
5. Profiles without shared dimensions get the neutral score

Usage:
    python scripts/smoke_test.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from vibe_scoring import CompatibilityCalculator, Profile


def create_mock_profile_a() -> Profile:
    """Heavy shitposter with strong humor."""
    return Profile("profile_a", {
        "positivity": 0.7, "empathy": 0.6, "engagement": 0.8, "debate": 0.3,
        "shitpost": 0.9, "meme": 0.85, "intellectual": 0.5, "political": 0.2,
        "personalSharing": 0.4, "inspirationalQuotes": 0.1, "extroversion": 0.7,
        "authenticity": 0.8, "optimism": 0.6, "humor": 0.9, "aiGenerated": 0.05,
    })


def create_mock_profile_b_similar() -> Profile:
    """Close to A on most dimensions."""
    return Profile("profile_b_similar", {
        "positivity": 0.65, "empathy": 0.7, "engagement": 0.75, "debate": 0.75,
        "shitpost": 0.85, "meme": 0.9, "intellectual": 0.55, "political": 0.25,
        "personalSharing": 0.85, "inspirationalQuotes": 0.15, "extroversion": 0.2,
        "authenticity": 0.85, "optimism": 0.65, "humor": 0.85, "aiGenerated": 0.1,
    })


def create_mock_profile_c_different() -> Profile:
    """Earnest, political, humorless."""
    return Profile("profile_c_different", {
        "positivity": 0.2, "empathy": 0.3, "engagement": 0.3, "debate": 0.3,
        "shitpost": 0.05, "meme": 0.1, "intellectual": 0.95, "political": 0.9,
        "personalSharing": 0.4, "inspirationalQuotes": 0.9, "extroversion": 0.7,
        "authenticity": 0.2, "optimism": 0.1, "humor": 0.1, "aiGenerated": 0.6,
    })


def test_basic_scoring(calculator: CompatibilityCalculator) -> bool:
    print("\n" + "=" * 60)
    print("TEST 1: Basic Scoring")
    print("=" * 60)

    result = calculator.calculate_score(create_mock_profile_a(), create_mock_profile_b_similar())
    print(f"  Score:     {result.score} ({result.label})")
    print(f"  Raw score: {result.raw_score:.4f}")
    print(f"  Strategy:  {result.strategy}")
    print(f"  Categories: {result.category_scores.to_dict()}")
    print(f"  Top matches: {list(result.top_matches)}")
    print(f"  Top clashes: {list(result.top_clashes)}")
    return True


def test_score_ranges(calculator: CompatibilityCalculator) -> bool:
    print("\n" + "=" * 60)
    print("TEST 2: Score Ranges")
    print("=" * 60)

    cases = [
        (create_mock_profile_a(), create_mock_profile_b_similar(), "A vs B (similar)"),
        (create_mock_profile_a(), create_mock_profile_c_different(), "A vs C (different)"),
        (create_mock_profile_b_similar(), create_mock_profile_c_different(), "B vs C"),
    ]

    all_passed = True
    for profile1, profile2, label in cases:
        result = calculator.calculate_score(profile1, profile2)
        in_range = isinstance(result.score, int) and 0 <= result.score <= 100
        print(f"  {label}: score={result.score} raw={result.raw_score:.4f} "
              f"[{'PASS' if in_range else 'FAIL'}]")
        all_passed = all_passed and in_range

    return all_passed


def test_symmetry(calculator: CompatibilityCalculator) -> bool:
    print("\n" + "=" * 60)
    print("TEST 3: Symmetry (A,B == B,A)")
    print("=" * 60)

    a, c = create_mock_profile_a(), create_mock_profile_c_different()
    forward = calculator.calculate_score(a, c)
    backward = calculator.calculate_score(c, a)
    is_symmetric = forward.score == backward.score and forward.raw_score == backward.raw_score
    print(f"  score(A, C)={forward.score}, score(C, A)={backward.score}")
    return is_symmetric


def test_similar_vs_different(calculator: CompatibilityCalculator) -> bool:
    print("\n" + "=" * 60)
    print("TEST 4: Similar vs Different Scores")
    print("=" * 60)

    a = create_mock_profile_a()
    similar = calculator.calculate_score(a, create_mock_profile_b_similar())
    different = calculator.calculate_score(a, create_mock_profile_c_different())
    print(f"  A vs B (similar):   {similar.score}")
    print(f"  A vs C (different): {different.score}")
    return similar.score > different.score


def test_no_overlap(calculator: CompatibilityCalculator) -> bool:
    print("\n" + "=" * 60)
    print("TEST 5: No Shared Dimensions")
    print("=" * 60)

    result = calculator.calculate_score(Profile("empty_1"), Profile("empty_2"))
    print(f"  score={result.score} raw={result.raw_score} strategy={result.strategy}")
    return result.raw_score == 0.5 and not result.breakdown


def main():
    calculator = CompatibilityCalculator()

    tests = [
        test_basic_scoring,
        test_score_ranges,
        test_symmetry,
        test_similar_vs_different,
        test_no_overlap,
    ]
    results = {test.__name__: test(calculator) for test in tests}

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    for name, passed in results.items():
        print(f"  {name}: {'PASSED' if passed else 'FAILED'}")

    sys.exit(0 if all(results.values()) else 1)


if __name__ == "__main__":
    main()
