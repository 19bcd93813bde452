"""SimHash: 64-bit fingerprints from weighted bigram bit votes.

Every distinct bigram of a string votes on each of the 64 bit positions,
+1 where its hash has the bit set and -1 where it does not. The fingerprint
keeps the bits whose tally is positive. Similar strings share most bigrams
and so end up with fingerprints a small Hamming distance apart.

Example:
    >>> from fuzzyunify import polynomial_hash, simhash, simhash_similarity
    >>> simhash("ab") == polynomial_hash("ab")
    True
    >>> simhash_similarity("ab", "cd")
    0.984375
"""

from fuzzyunify.ngrams import BIGRAM_SIZE, ngram_counts

# Number of bits in the fingerprint
BITS = 64

# Mask for 64-bit unsigned integer
MASK = (1 << BITS) - 1

HASH_MULTIPLIER = 31


def polynomial_hash(text: str) -> int:
    """``hash = hash * 31 + ord(char)`` over the text, starting at 0, wrapped to 64 bits."""
    value = 0
    for char in text:
        value = (value * HASH_MULTIPLIER + ord(char)) & MASK
    return value


def simhash(text: str, ngram_size: int = BIGRAM_SIZE) -> int:
    """Compute the 64-bit SimHash fingerprint of ``text``.

    Each distinct n-gram votes once regardless of how often it occurs.
    A string with no n-grams has fingerprint 0.

    Args:
        text: The text to fingerprint.
        ngram_size: N-gram length (default 2, bigrams).

    Returns:
        Unsigned 64-bit integer fingerprint.
    """
    tally = [0] * BITS

    for gram in ngram_counts(text, ngram_size):
        h = polynomial_hash(gram)
        for i in range(BITS):
            if h & (1 << i):
                tally[i] += 1
            else:
                tally[i] -= 1

    fingerprint = 0
    for i in range(BITS):
        if tally[i] > 0:
            fingerprint |= 1 << i
    return fingerprint


def hamming_weight(value: int) -> int:
    """Number of set bits in the low 64 bits of ``value``."""
    return bin(value & MASK).count("1")


def hamming_distance(a: int, b: int) -> int:
    """Number of differing bits between two fingerprints (0-64)."""
    return hamming_weight(a ^ b)


def simhash_similarity(source: str, target: str) -> float:
    """``1 - hamming_distance / 64`` between the two SimHash fingerprints."""
    return 1.0 - hamming_distance(simhash(source), simhash(target)) / BITS


__all__ = [
    "polynomial_hash",
    "simhash",
    "hamming_weight",
    "hamming_distance",
    "simhash_similarity",
    "BITS",
]
