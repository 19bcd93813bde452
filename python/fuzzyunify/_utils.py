"""Internal utilities for fuzzyunify."""

from typing import Optional, Union

from fuzzyunify.enums import Metric
from fuzzyunify.exceptions import MetricError

# Alternate spellings accepted for the built-in metrics (lowercase)
METRIC_ALIASES = {
    "edit": "levenshtein",
    "jaro": "jaro_winkler",
    "jaccard": "trigram_jaccard",
    "trigram": "trigram_jaccard",
    "sim_hash": "simhash",
    "min_hash": "minhash",
}

VALID_METRICS = frozenset(m.value for m in Metric)


def normalize_metric(metric: Union[str, Metric]) -> str:
    """Convert Metric enum to string, or validate a string metric name.

    Args:
        metric: Either a Metric enum value or a string metric name.

    Returns:
        Canonical lowercase metric name.

    Raises:
        MetricError: If the metric name is not recognized.
        TypeError: If metric is not a string or Metric enum.

    Example:
        >>> normalize_metric(Metric.JARO_WINKLER)
        'jaro_winkler'
        >>> normalize_metric("Jaccard")
        'trigram_jaccard'
    """
    if isinstance(metric, Metric):
        return metric.value

    if isinstance(metric, str):
        name = metric.strip().lower()
        name = METRIC_ALIASES.get(name, name)
        if name in VALID_METRICS:
            return name
        raise MetricError(
            f"Unknown metric: '{metric}'. "
            f"Valid options: {sorted(VALID_METRICS | set(METRIC_ALIASES))}"
        )

    raise TypeError(f"metric must be str or Metric enum, got {type(metric).__name__}")


def is_blank(text: Optional[str]) -> bool:
    """Return True for None, empty, or all-whitespace text."""
    return text is None or not text.strip()


__all__ = ["normalize_metric", "is_blank", "VALID_METRICS", "METRIC_ALIASES"]
