"""Enums for fuzzyunify API."""

from enum import Enum


class Metric(str, Enum):
    """Built-in similarity metrics combined by ``unified_similarity``.

    Member order is the order metrics are reported in by ``compare_metrics``.
    String values are accepted anywhere a Metric is.

    Example:
        >>> from fuzzyunify import Metric, similarity_by_method
        >>> similarity_by_method("kitten", "sitting", Metric.LEVENSHTEIN)
        0.5714285714285714
    """

    LEVENSHTEIN = "levenshtein"
    """Normalized edit distance (insertions, deletions, substitutions)"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro similarity with a common-prefix boost"""

    COSINE = "cosine"
    """Cosine similarity over bigram frequency vectors"""

    TRIGRAM_JACCARD = "trigram_jaccard"
    """Jaccard overlap of trigram sets"""

    SIMHASH = "simhash"
    """64-bit SimHash fingerprints compared by Hamming distance"""

    MINHASH = "minhash"
    """Single-hash MinHash sketch, 1 if the minimum hashes agree else 0"""


__all__ = ["Metric"]
