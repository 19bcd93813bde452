"""N-gram extraction shared by the vector-space, set-overlap and hash metrics.

Windows are taken at every start offset from 0 to ``len(text) - n``, so a
string of length L yields ``max(0, L - n + 1)`` windows. No case or
whitespace normalization is applied; comparison is exact-character.

Example:
    >>> from fuzzyunify import extract_ngrams, bigrams, trigrams
    >>> extract_ngrams("abcab", ngram_size=2)
    ['ab', 'bc', 'ca', 'ab']
    >>> bigrams("abcab")
    Counter({'ab': 2, 'bc': 1, 'ca': 1})
    >>> sorted(trigrams("abcab"))
    ['abc', 'bca', 'cab']
"""

from collections import Counter
from typing import List, Set

from fuzzyunify.exceptions import ValidationError

BIGRAM_SIZE = 2
TRIGRAM_SIZE = 3
DEFAULT_SHINGLE_SIZE = 3


def _check_ngram_size(ngram_size: int) -> None:
    if ngram_size < 1:
        raise ValidationError(f"ngram_size must be at least 1, got {ngram_size}")


def extract_ngrams(text: str, ngram_size: int = BIGRAM_SIZE) -> List[str]:
    """Return every overlapping window of ``ngram_size`` characters, in order.

    Args:
        text: String to slice.
        ngram_size: Window length, at least 1.

    Returns:
        List of n-grams (duplicates kept). Empty when the text is shorter
        than ``ngram_size``.

    Raises:
        ValidationError: If ``ngram_size`` is less than 1.
    """
    _check_ngram_size(ngram_size)
    return [text[i : i + ngram_size] for i in range(len(text) - ngram_size + 1)]


def ngram_counts(text: str, ngram_size: int) -> Counter:
    """Frequency map from n-gram to number of occurrences."""
    return Counter(extract_ngrams(text, ngram_size))


def ngram_set(text: str, ngram_size: int) -> Set[str]:
    """Deduplicated set of n-grams."""
    return set(extract_ngrams(text, ngram_size))


def bigrams(text: str) -> Counter:
    """Bigram frequency map, as used by the cosine and SimHash metrics."""
    return ngram_counts(text, BIGRAM_SIZE)


def trigrams(text: str) -> Set[str]:
    """Trigram set, as used by the Jaccard metric."""
    return ngram_set(text, TRIGRAM_SIZE)


def shingles(text: str, length: int = DEFAULT_SHINGLE_SIZE) -> Set[str]:
    """Set of ``length``-character shingles, as used by the MinHash sketch."""
    return ngram_set(text, length)


__all__ = [
    "extract_ngrams",
    "ngram_counts",
    "ngram_set",
    "bigrams",
    "trigrams",
    "shingles",
    "BIGRAM_SIZE",
    "TRIGRAM_SIZE",
    "DEFAULT_SHINGLE_SIZE",
]
