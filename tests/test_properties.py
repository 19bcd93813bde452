"""Property-based tests for FuzzyUnify metrics using Hypothesis.

These tests verify properties that should hold for all inputs:
- Bounds: 0.0 <= similarity(a, b) <= 1.0
- Identity: unified_similarity(a, a) == 1.0 for non-blank strings of length >= 3
- Symmetry: checked per metric; Jaro-Winkler is left out since its windowed
  search always runs from source into target
- Triangle inequality for Levenshtein distance
"""

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

import fuzzyunify as fu

text_strategy = st.text(max_size=40, alphabet=st.characters(exclude_categories=["Cs"]))
short_text_strategy = st.text(max_size=20, alphabet=st.characters(exclude_categories=["Cs"]))
ascii_text = st.text(alphabet=st.characters(min_codepoint=32, max_codepoint=126), max_size=30)


class TestBounds:
    """Every metric stays within [0, 1]."""

    @given(text_strategy, text_strategy)
    @settings(max_examples=100, deadline=None)
    def test_unified_bounds(self, a: str, b: str):
        score = fu.unified_similarity(a, b)
        assert 0.0 <= score <= 1.0

    @given(text_strategy, text_strategy)
    @settings(max_examples=100)
    def test_individual_bounds(self, a: str, b: str):
        for metric in fu.BUILTIN_METRICS.values():
            score = metric.compute(a, b)
            assert 0.0 <= score <= 1.0 + 1e-12, f"{metric.name} scored {score}"

    @given(text_strategy, text_strategy)
    @settings(max_examples=100)
    def test_minhash_is_binary(self, a: str, b: str):
        assert fu.minhash_similarity(a, b) in (0.0, 1.0)


class TestIdentity:
    """similarity(a, a) == 1.0."""

    @given(st.text(min_size=3, max_size=40, alphabet=st.characters(exclude_categories=["Cs"])))
    @settings(max_examples=100, deadline=None)
    def test_unified_identity(self, s: str):
        assume(s.strip())
        assert fu.unified_similarity(s, s) == pytest.approx(1.0)

    @given(text_strategy)
    @settings(max_examples=100)
    def test_levenshtein_identity(self, s: str):
        assert fu.levenshtein_similarity(s, s) == 1.0

    @given(st.text(min_size=2, max_size=40))
    @settings(max_examples=100)
    def test_jaro_winkler_identity(self, s: str):
        assert fu.jaro_winkler_similarity(s, s) == 1.0

    @given(st.text(min_size=2, max_size=40))
    @settings(max_examples=100)
    def test_cosine_identity(self, s: str):
        assert fu.cosine_similarity_ngrams(s, s) == 1.0

    @given(text_strategy)
    @settings(max_examples=100)
    def test_simhash_identity(self, s: str):
        assert fu.simhash_similarity(s, s) == 1.0


class TestSymmetry:
    """similarity(a, b) == similarity(b, a) for the metrics where it holds by construction."""

    @given(text_strategy, text_strategy)
    @settings(max_examples=100)
    def test_levenshtein_symmetry(self, a: str, b: str):
        assert fu.levenshtein(a, b) == fu.levenshtein(b, a)

    @given(text_strategy, text_strategy)
    @settings(max_examples=100)
    def test_cosine_symmetry(self, a: str, b: str):
        assert fu.cosine_similarity_ngrams(a, b) == pytest.approx(fu.cosine_similarity_ngrams(b, a))

    @given(text_strategy, text_strategy)
    @settings(max_examples=100)
    def test_jaccard_symmetry(self, a: str, b: str):
        assert fu.ngram_jaccard(a, b) == fu.ngram_jaccard(b, a)

    @given(text_strategy, text_strategy)
    @settings(max_examples=100)
    def test_simhash_symmetry(self, a: str, b: str):
        assert fu.simhash_similarity(a, b) == fu.simhash_similarity(b, a)

    @given(text_strategy, text_strategy)
    @settings(max_examples=100)
    def test_minhash_symmetry(self, a: str, b: str):
        assert fu.minhash_similarity(a, b) == fu.minhash_similarity(b, a)


class TestLevenshteinProperties:
    """Metric-space properties of edit distance."""

    @given(short_text_strategy, short_text_strategy, short_text_strategy)
    @settings(max_examples=100)
    def test_triangle_inequality(self, a: str, b: str, c: str):
        assert fu.levenshtein(a, c) <= fu.levenshtein(a, b) + fu.levenshtein(b, c)

    @given(ascii_text, ascii_text)
    @settings(max_examples=100)
    def test_distance_bounds(self, a: str, b: str):
        distance = fu.levenshtein(a, b)
        assert abs(len(a) - len(b)) <= distance <= max(len(a), len(b))


class TestNgramProperties:
    """Window counting for n-gram extraction."""

    @given(text_strategy, st.integers(min_value=1, max_value=5))
    @settings(max_examples=100)
    def test_window_count(self, s: str, n: int):
        assert len(fu.extract_ngrams(s, n)) == max(0, len(s) - n + 1)
        assert sum(fu.ngram_counts(s, n).values()) == max(0, len(s) - n + 1)

    @given(text_strategy, st.integers(min_value=1, max_value=5))
    @settings(max_examples=100)
    def test_set_matches_counts(self, s: str, n: int):
        assert fu.ngram_set(s, n) == set(fu.ngram_counts(s, n))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
