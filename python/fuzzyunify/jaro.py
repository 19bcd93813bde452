"""Jaro and Jaro-Winkler similarity.

Matching is windowed: each source character looks into the target within a
radius of ``max(len(source), len(target)) // 2 - 1`` and consumes the first
unmatched equal character. Two single-character strings get a radius of -1,
an empty window, and therefore score 0. Because the search always runs from
source into target, symmetry is not guaranteed by construction.
"""

from typing import List, Tuple

from fuzzyunify.exceptions import ValidationError

DEFAULT_PREFIX_WEIGHT = 0.1
MAX_PREFIX_WEIGHT = 0.25
MAX_PREFIX_LENGTH = 4


def _match_window(source: str, target: str) -> int:
    return max(len(source), len(target)) // 2 - 1


def _matched_chars(source: str, target: str) -> Tuple[List[str], List[str]]:
    """Matched characters of source and target, each in original order."""
    window = _match_window(source, target)
    source_matched = [False] * len(source)
    target_matched = [False] * len(target)

    for i, char in enumerate(source):
        start = max(0, i - window)
        end = min(len(target), i + window + 1)
        for j in range(start, end):
            if not target_matched[j] and target[j] == char:
                source_matched[i] = True
                target_matched[j] = True
                break

    return (
        [c for c, matched in zip(source, source_matched) if matched],
        [c for c, matched in zip(target, target_matched) if matched],
    )


def _half_mismatches(source_chars: List[str], target_chars: List[str]) -> int:
    return sum(1 for a, b in zip(source_chars, target_chars) if a != b) // 2


def matching_characters(source: str, target: str) -> int:
    """Number of characters matched within the Jaro window."""
    source_chars, _ = _matched_chars(source, target)
    return len(source_chars)


def transpositions(source: str, target: str) -> int:
    """Half the number of positional mismatches among matched characters.

    Matched characters of each string are replayed in their original order
    and compared pairwise.
    """
    return _half_mismatches(*_matched_chars(source, target))


def common_prefix_length(source: str, target: str, limit: int = MAX_PREFIX_LENGTH) -> int:
    """Number of leading characters the strings share, capped at ``limit``."""
    length = 0
    for a, b in zip(source[:limit], target[:limit]):
        if a != b:
            break
        length += 1
    return length


def jaro_similarity(source: str, target: str) -> float:
    """Compute Jaro similarity.

    ``(m / |source| + m / |target| + (m - t) / m) / 3`` where ``m`` is the
    number of matching characters and ``t`` the transpositions. Returns 0.0
    when nothing matches (including when either string is empty).

    Example:
        >>> round(jaro_similarity("MARTHA", "MARHTA"), 4)
        0.9444
    """
    source_chars, target_chars = _matched_chars(source, target)
    matches = len(source_chars)
    if matches == 0:
        return 0.0

    transposed = _half_mismatches(source_chars, target_chars)
    return (
        matches / len(source) + matches / len(target) + (matches - transposed) / matches
    ) / 3


def jaro_winkler_similarity(
    source: str,
    target: str,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
) -> float:
    """Compute Jaro-Winkler similarity.

    Boosts the Jaro score by ``prefix_weight * prefix_length * (1 - jaro)``,
    where the common prefix is counted up to 4 characters. The boost is
    applied at every Jaro level, with no threshold.

    Args:
        source: First string.
        target: Second string.
        prefix_weight: Scaling factor for the prefix boost, in [0.0, 0.25]
            so the result cannot exceed 1.0.

    Returns:
        Similarity in [0.0, 1.0].

    Raises:
        ValidationError: If ``prefix_weight`` is outside [0.0, 0.25].

    Example:
        >>> round(jaro_winkler_similarity("MARTHA", "MARHTA"), 4)
        0.9611
    """
    if not 0.0 <= prefix_weight <= MAX_PREFIX_WEIGHT:
        raise ValidationError(
            f"prefix_weight must be in range [0.0, {MAX_PREFIX_WEIGHT}], got {prefix_weight}"
        )

    jaro = jaro_similarity(source, target)
    if jaro == 0.0:
        return 0.0

    prefix_length = common_prefix_length(source, target)
    return jaro + prefix_weight * prefix_length * (1.0 - jaro)


__all__ = [
    "jaro_similarity",
    "jaro_winkler_similarity",
    "matching_characters",
    "transpositions",
    "common_prefix_length",
]
