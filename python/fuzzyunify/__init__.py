"""
FuzzyUnify - one fuzzy similarity score from many metrics

Computes a single similarity score between two strings by running six
independent metrics concurrently and averaging them: Levenshtein,
Jaro-Winkler, bigram cosine, trigram Jaccard, SimHash and a single-hash
MinHash sketch. Useful for deduplication, fuzzy search and record linkage
without committing to one metric family.

Example usage:
    >>> import fuzzyunify as fu

    # Unified score
    >>> fu.unified_similarity("John Smith", "Jon Smith") > 0.7
    True

    # Per-metric breakdown
    >>> [(s.metric, round(s.score, 2)) for s in fu.compare_metrics("kitten", "sitting")][:2]
    [('levenshtein', 0.57), ('jaro_winkler', 0.75)]

    # Bring your own metric
    >>> fu.similarity_by_method("abc", "abc", lambda x, y: 1 if len(x) == len(y) else 0)
    1
"""

from importlib.metadata import version as _get_version

# Register the .fuzzy expression namespace
import fuzzyunify.expr  # noqa: F401
from fuzzyunify._pool import configure, shutdown
from fuzzyunify.cosine import cosine_similarity_ngrams
from fuzzyunify.enums import Metric
from fuzzyunify.exceptions import FuzzyUnifyError, MetricError, ValidationError
from fuzzyunify.jaccard import ngram_jaccard
from fuzzyunify.jaro import (
    common_prefix_length,
    jaro_similarity,
    jaro_winkler_similarity,
    matching_characters,
    transpositions,
)
from fuzzyunify.levenshtein import levenshtein, levenshtein_similarity
from fuzzyunify.metric import (
    BUILTIN_METRICS,
    FunctionMetric,
    SimilarityMetric,
    as_metric,
    get_metric,
)
from fuzzyunify.minhash import min_hash, minhash_similarity
from fuzzyunify.ngrams import (
    bigrams,
    extract_ngrams,
    ngram_counts,
    ngram_set,
    shingles,
    trigrams,
)
from fuzzyunify.simhash import (
    hamming_distance,
    hamming_weight,
    polynomial_hash,
    simhash,
    simhash_similarity,
)
from fuzzyunify.unified import (
    MetricScore,
    compare_metrics,
    similarity_by_method,
    unified_similarity,
)

__version__ = _get_version("fuzzyunify")
__all__ = [
    # Version
    "__version__",
    # Exceptions
    "FuzzyUnifyError",
    "ValidationError",
    "MetricError",
    # Enums and result types
    "Metric",
    "MetricScore",
    # Unified scoring
    "unified_similarity",
    "similarity_by_method",
    "compare_metrics",
    # Strategy interface
    "SimilarityMetric",
    "FunctionMetric",
    "BUILTIN_METRICS",
    "as_metric",
    "get_metric",
    # N-gram extraction
    "extract_ngrams",
    "ngram_counts",
    "ngram_set",
    "bigrams",
    "trigrams",
    "shingles",
    # Edit distance
    "levenshtein",
    "levenshtein_similarity",
    # Jaro / Jaro-Winkler
    "jaro_similarity",
    "jaro_winkler_similarity",
    "matching_characters",
    "transpositions",
    "common_prefix_length",
    # N-gram vector and set metrics
    "cosine_similarity_ngrams",
    "ngram_jaccard",
    # Hash sketches
    "polynomial_hash",
    "simhash",
    "hamming_weight",
    "hamming_distance",
    "simhash_similarity",
    "min_hash",
    "minhash_similarity",
    # Worker pool
    "configure",
    "shutdown",
]


# Convenience aliases
edit_distance = levenshtein
similarity = unified_similarity
