"""Reference correctness tests comparing fuzzyunify against jellyfish and rapidfuzz.

These tests verify that fuzzyunify produces the same results as well-known
reference implementations for the algorithms both libraries share.
"""

import hypothesis.strategies as st
import pytest
from hypothesis import HealthCheck, assume, given, settings

import fuzzyunify as fu
from fixtures.real_data import JARO_REFERENCE, NEAR_DUPLICATE_PAIRS

try:
    import jellyfish

    HAS_JELLYFISH = True
except ImportError:
    HAS_JELLYFISH = False

try:
    from rapidfuzz.distance import Levenshtein as rf_levenshtein

    HAS_RAPIDFUZZ = True
except ImportError:
    HAS_RAPIDFUZZ = False


# Strategy for ASCII strings (avoiding unicode edge cases in reference comparison)
ascii_text = st.text(
    alphabet=st.characters(min_codepoint=32, max_codepoint=126), min_size=0, max_size=50
)


@pytest.mark.skipif(not HAS_JELLYFISH, reason="jellyfish not installed")
class TestJellyfishReference:
    """Test Levenshtein and Jaro against jellyfish."""

    @given(ascii_text, ascii_text)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_levenshtein_matches_jellyfish(self, a: str, b: str):
        expected = jellyfish.levenshtein_distance(a, b)
        actual = fu.levenshtein(a, b)
        assert actual == expected, f"Mismatch for ({a!r}, {b!r}): got {actual}, expected {expected}"

    @given(ascii_text, ascii_text)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_jaro_matches_jellyfish(self, a: str, b: str):
        # jellyfish floors the match window at 0; two one-character strings differ
        assume(max(len(a), len(b)) > 1)
        expected = jellyfish.jaro_similarity(a, b)
        actual = fu.jaro_similarity(a, b)
        assert actual == pytest.approx(expected, abs=1e-9), f"Mismatch for ({a!r}, {b!r})"

    @pytest.mark.parametrize(
        "a,b", NEAR_DUPLICATE_PAIRS + [(s, t) for s, t, _, _ in JARO_REFERENCE]
    )
    def test_jaro_winkler_matches_jellyfish_above_threshold(self, a, b):
        """jellyfish only boosts Jaro scores above 0.7; compare where both apply it."""
        if fu.jaro_similarity(a, b) <= 0.7:
            pytest.skip("jellyfish does not apply the prefix boost below 0.7")
        expected = jellyfish.jaro_winkler_similarity(a, b)
        assert fu.jaro_winkler_similarity(a, b) == pytest.approx(expected, abs=1e-9)


@pytest.mark.skipif(not HAS_RAPIDFUZZ, reason="rapidfuzz not installed")
class TestRapidFuzzReference:
    """Test Levenshtein against rapidfuzz."""

    @given(ascii_text, ascii_text)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_levenshtein_matches_rapidfuzz(self, a: str, b: str):
        assert fu.levenshtein(a, b) == rf_levenshtein.distance(a, b)

    @given(ascii_text, ascii_text)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_levenshtein_similarity_matches_rapidfuzz(self, a: str, b: str):
        expected = rf_levenshtein.normalized_similarity(a, b)
        assert fu.levenshtein_similarity(a, b) == pytest.approx(expected, abs=1e-9)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
