"""Single-hash MinHash sketch.

This is the degenerate form of MinHash: one hash function, and the score is
whether the two minimum hash values agree (1.0) or not (0.0). It is a coarse,
low-recall signal, not a calibrated Jaccard estimate.

Hashes come from the builtin ``hash``, which is salted per interpreter
process for ``str``; scores are stable within a process, not across runs
unless ``PYTHONHASHSEED`` is fixed.
"""

from typing import Callable, Iterable, Optional

from fuzzyunify.ngrams import DEFAULT_SHINGLE_SIZE, shingles


def min_hash(items: Iterable[str], hash_func: Callable[[str], int] = hash) -> Optional[int]:
    """Smallest hash value over ``items``, or None when there are none."""
    return min((hash_func(item) for item in items), default=None)


def minhash_similarity(
    source: str,
    target: str,
    shingle_size: int = DEFAULT_SHINGLE_SIZE,
) -> float:
    """1.0 if the minimum shingle hashes of both strings are equal, else 0.0.

    A string shorter than ``shingle_size`` has no shingles and no minimum,
    so it scores 0.0 against anything.
    """
    source_min = min_hash(shingles(source, shingle_size))
    target_min = min_hash(shingles(target, shingle_size))
    if source_min is None or target_min is None:
        return 0.0
    return 1.0 if source_min == target_min else 0.0


__all__ = ["min_hash", "minhash_similarity"]
