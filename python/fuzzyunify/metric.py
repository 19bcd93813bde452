"""Similarity metric strategy interface and the built-in metric registry.

Any object with a ``compute(source, target) -> float`` method is a
:class:`SimilarityMetric`. Plain two-argument callables are adapted with
:class:`FunctionMetric`.

Example:
    >>> from fuzzyunify import FunctionMetric, similarity_by_method
    >>> same_length = FunctionMetric(lambda a, b: 1.0 if len(a) == len(b) else 0.0)
    >>> similarity_by_method("abc", "xyz", same_length)
    1.0
"""

from dataclasses import dataclass
from typing import Callable, Dict, Protocol, Union, runtime_checkable

from fuzzyunify._utils import normalize_metric
from fuzzyunify.cosine import cosine_similarity_ngrams
from fuzzyunify.enums import Metric
from fuzzyunify.jaccard import ngram_jaccard
from fuzzyunify.jaro import jaro_winkler_similarity
from fuzzyunify.levenshtein import levenshtein_similarity
from fuzzyunify.minhash import minhash_similarity
from fuzzyunify.simhash import simhash_similarity


@runtime_checkable
class SimilarityMetric(Protocol):
    """Anything that scores a pair of strings."""

    def compute(self, source: str, target: str) -> float: ...


@dataclass(frozen=True)
class FunctionMetric:
    """Adapts a ``(source, target) -> float`` callable to SimilarityMetric."""

    func: Callable[[str, str], float]
    name: str = ""

    def compute(self, source: str, target: str) -> float:
        return self.func(source, target)

    def __call__(self, source: str, target: str) -> float:
        return self.func(source, target)


BUILTIN_METRICS: Dict[str, FunctionMetric] = {
    Metric.LEVENSHTEIN.value: FunctionMetric(levenshtein_similarity, Metric.LEVENSHTEIN.value),
    Metric.JARO_WINKLER.value: FunctionMetric(jaro_winkler_similarity, Metric.JARO_WINKLER.value),
    Metric.COSINE.value: FunctionMetric(cosine_similarity_ngrams, Metric.COSINE.value),
    Metric.TRIGRAM_JACCARD.value: FunctionMetric(ngram_jaccard, Metric.TRIGRAM_JACCARD.value),
    Metric.SIMHASH.value: FunctionMetric(simhash_similarity, Metric.SIMHASH.value),
    Metric.MINHASH.value: FunctionMetric(minhash_similarity, Metric.MINHASH.value),
}

MetricLike = Union[SimilarityMetric, Metric, str, Callable[[str, str], float]]


def get_metric(name: Union[str, Metric]) -> FunctionMetric:
    """Look up a built-in metric by name or Metric enum.

    Raises:
        MetricError: If the name is not a built-in metric.
    """
    return BUILTIN_METRICS[normalize_metric(name)]


def as_metric(metric: MetricLike) -> SimilarityMetric:
    """Resolve a metric given in any accepted form.

    Args:
        metric: A SimilarityMetric, a Metric enum, a built-in metric name,
            or a two-argument callable.

    Returns:
        An object with a ``compute`` method.

    Raises:
        MetricError: If a string names no built-in metric.
        TypeError: If ``metric`` is none of the accepted forms.
    """
    if isinstance(metric, (Metric, str)):
        return get_metric(metric)
    if isinstance(metric, SimilarityMetric):
        return metric
    if callable(metric):
        return FunctionMetric(metric, getattr(metric, "__name__", ""))
    raise TypeError(
        f"metric must be a SimilarityMetric, Metric, str or callable, got {type(metric).__name__}"
    )


def metric_name(metric: SimilarityMetric) -> str:
    """Display name for a resolved metric."""
    return getattr(metric, "name", "") or type(metric).__name__


__all__ = [
    "SimilarityMetric",
    "FunctionMetric",
    "BUILTIN_METRICS",
    "MetricLike",
    "get_metric",
    "as_metric",
    "metric_name",
]
