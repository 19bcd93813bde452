"""Unified similarity: several metrics run concurrently and averaged.

Each call fans the metrics out to the shared worker pool, joins their
scores into a fixed-order list, and reduces it to the arithmetic mean.
Metrics share no mutable state; each builds its own n-gram structures.

Example usage:
    >>> import fuzzyunify as fu

    >>> fu.unified_similarity("hello", "hello")
    1.0

    >>> for s in fu.compare_metrics("kitten", "sitting"):
    ...     print(f"{s.metric}: {s.score:.3f}")
    levenshtein: 0.571
    jaro_winkler: 0.746
    cosine: 0.365
    trigram_jaccard: 0.125
    ...

    >>> fu.similarity_by_method("abc", "abc", lambda x, y: 1.0 if len(x) == len(y) else 0.0)
    1.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Sequence

from fuzzyunify import _pool
from fuzzyunify._utils import is_blank
from fuzzyunify.enums import Metric
from fuzzyunify.metric import as_metric, metric_name

if TYPE_CHECKING:
    from fuzzyunify.metric import MetricLike, SimilarityMetric

logger = logging.getLogger(__name__)

DEFAULT_METRICS = tuple(Metric)


@dataclass(frozen=True)
class MetricScore:
    """Score produced by one metric for one pair of strings."""

    metric: str
    score: float


def _run_metrics(
    source: str, target: str, metrics: Sequence[SimilarityMetric]
) -> list[float]:
    if len(metrics) < 2 or not _pool.threads_enabled() or _pool.in_worker_thread():
        return [m.compute(source, target) for m in metrics]

    futures = _pool.submit_all([m.compute for m in metrics], source, target)
    return [future.result() for future in futures]


def compare_metrics(
    source: Optional[str],
    target: Optional[str],
    metrics: Optional[Sequence[MetricLike]] = None,
) -> list[MetricScore]:
    """Score a pair of strings with each metric.

    Args:
        source: First string.
        target: Second string.
        metrics: Metrics to run, in any form accepted by ``as_metric``.
            None means the six built-in metrics in ``Metric`` order.

    Returns:
        One MetricScore per metric, in the order given. Empty if either
        string is None or blank.

    Raises:
        MetricError: If a metric name is unknown.
        TypeError: If a metric is not a recognised form.
    """
    if is_blank(source) or is_blank(target):
        return []

    resolved = [as_metric(m) for m in (DEFAULT_METRICS if metrics is None else metrics)]
    scores = _run_metrics(source, target, resolved)
    results = [MetricScore(metric_name(m), score) for m, score in zip(resolved, scores)]
    logger.debug("Metric scores for %r vs %r: %s", source, target, results)
    return results


def unified_similarity(
    source: Optional[str],
    target: Optional[str],
    metrics: Optional[Sequence[MetricLike]] = None,
) -> float:
    """Mean of several similarity metrics for a pair of strings.

    By default the six built-in metrics are combined with equal weight:
    Levenshtein, Jaro-Winkler, bigram cosine, trigram Jaccard, SimHash and
    the single-hash MinHash sketch. They run concurrently on the shared
    pool and the call blocks until all have finished.

    Args:
        source: First string.
        target: Second string.
        metrics: Optional subset or replacement of the metrics to average.

    Returns:
        Similarity in [0.0, 1.0] for the built-in metrics. 0.0 if either
        string is None or all whitespace, or if ``metrics`` is empty.

    Example:
        >>> unified_similarity("John Smith", "Jon Smith") > 0.5
        True
        >>> unified_similarity("   ", "x")
        0.0
    """
    scores = compare_metrics(source, target, metrics)
    if not scores:
        return 0.0
    return math.fsum(s.score for s in scores) / len(scores)


def similarity_by_method(
    source: Optional[str],
    target: Optional[str],
    metric: Optional[MetricLike],
) -> Any:
    """Score a pair of strings with a single, caller-chosen metric.

    The metric's result is returned as-is; no range check is made and any
    exception it raises propagates to the caller.

    Args:
        source: First string.
        target: Second string.
        metric: A SimilarityMetric, a two-argument callable, or the name
            or Metric of a built-in metric.

    Returns:
        The metric's score, or 0.0 without calling it if either string is
        None or blank or no metric is given.

    Example:
        >>> similarity_by_method("abc", "abc", lambda x, y: 1 if len(x) == len(y) else 0)
        1
    """
    if metric is None or is_blank(source) or is_blank(target):
        return 0.0
    return as_metric(metric).compute(source, target)


__all__ = [
    "MetricScore",
    "DEFAULT_METRICS",
    "compare_metrics",
    "unified_similarity",
    "similarity_by_method",
]
