"""Jaccard overlap of character n-gram sets."""

from fuzzyunify.ngrams import TRIGRAM_SIZE, ngram_set


def ngram_jaccard(source: str, target: str, ngram_size: int = TRIGRAM_SIZE) -> float:
    """Jaccard similarity (intersection over union) of the n-gram sets.

    Returns 0.0 when the union is empty, i.e. both strings are shorter
    than ``ngram_size``.

    Example:
        >>> ngram_jaccard("kitten", "sitting")
        0.125
    """
    source_set = ngram_set(source, ngram_size)
    target_set = ngram_set(target, ngram_size)

    union = source_set | target_set
    if not union:
        return 0.0
    return len(source_set & target_set) / len(union)


__all__ = ["ngram_jaccard"]
