"""Cosine similarity over character n-gram frequency vectors."""

import math

from fuzzyunify.ngrams import BIGRAM_SIZE, ngram_counts


def cosine_similarity_ngrams(source: str, target: str, ngram_size: int = BIGRAM_SIZE) -> float:
    """Cosine of the angle between the n-gram frequency vectors of two strings.

    The dot product runs over the union of both key sets, with missing
    n-grams counting as 0. If either string yields no n-grams (shorter than
    ``ngram_size``), its magnitude is 0 and the similarity is 0.0.

    Args:
        source: First string.
        target: Second string.
        ngram_size: N-gram length (default 2, bigrams).

    Returns:
        Similarity in [0.0, 1.0].

    Example:
        >>> round(cosine_similarity_ngrams("kitten", "sitting"), 4)
        0.3651
    """
    source_counts = ngram_counts(source, ngram_size)
    target_counts = ngram_counts(target, ngram_size)

    source_norm = sum(count * count for count in source_counts.values())
    target_norm = sum(count * count for count in target_counts.values())
    if source_norm == 0 or target_norm == 0:
        return 0.0

    dot_product = sum(
        source_counts[gram] * target_counts[gram]
        for gram in source_counts.keys() | target_counts.keys()
    )
    # dot / (|s| * |t|), exactly 1.0 for identical vectors
    return dot_product / math.sqrt(source_norm * target_norm)


__all__ = ["cosine_similarity_ngrams"]
