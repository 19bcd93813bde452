"""Levenshtein edit distance and its normalized similarity."""


def levenshtein(source: str, target: str) -> int:
    """Compute the Levenshtein distance between two strings.

    Fills the full ``(len(source) + 1) x (len(target) + 1)`` table. The
    boundary row and column hold plain insertion/deletion counts; interior
    cells are filled row by row since each depends on its upper, left and
    upper-left neighbours.

    Args:
        source: First string.
        target: Second string.

    Returns:
        Minimum number of single-character insertions, deletions and
        substitutions turning ``source`` into ``target``.

    Example:
        >>> levenshtein("kitten", "sitting")
        3
    """
    rows = len(source) + 1
    cols = len(target) + 1
    dp = [[0] * cols for _ in range(rows)]

    for i in range(rows):
        dp[i][0] = i
    for j in range(cols):
        dp[0][j] = j

    for i in range(1, rows):
        prev_row = dp[i - 1]
        row = dp[i]
        source_char = source[i - 1]
        for j in range(1, cols):
            cost = 0 if source_char == target[j - 1] else 1
            row[j] = min(prev_row[j] + 1, row[j - 1] + 1, prev_row[j - 1] + cost)

    return dp[-1][-1]


def levenshtein_similarity(source: str, target: str) -> float:
    """Levenshtein distance normalized to a similarity in [0, 1].

    ``1 - distance / max(len(source), len(target))``; two empty strings
    are identical and score 1.0.

    Example:
        >>> levenshtein_similarity("hello", "hallo")
        0.8
    """
    max_length = max(len(source), len(target))
    if max_length == 0:
        return 1.0
    return 1.0 - levenshtein(source, target) / max_length


__all__ = ["levenshtein", "levenshtein_similarity"]
