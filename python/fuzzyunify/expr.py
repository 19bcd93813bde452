"""Polars expression namespace for unified fuzzy similarity.

This module registers a `.fuzzy` namespace on Polars expressions so the
unified score, or any single built-in metric, can be computed per row
directly in Polars expression contexts.

Scores are computed row by row with ``map_elements``; there is no batching
or indexing behind this namespace.

Example:
    >>> import polars as pl
    >>> import fuzzyunify  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["John Smith", "Jon Smith", "Jane Doe"]})
    >>> df.with_columns(
    ...     score=pl.col("name").fuzzy.similarity("John Smith"),
    ...     jw=pl.col("name").fuzzy.similarity("John Smith", metric="jaro_winkler"),
    ... )
"""

from typing import Any, Callable, Optional, Union

import polars as pl

from fuzzyunify.enums import Metric
from fuzzyunify.metric import get_metric
from fuzzyunify.unified import similarity_by_method, unified_similarity


def _scorer(
    metric: Optional[Union[str, Metric]],
) -> Callable[[Optional[str], Optional[str]], float]:
    if metric is None:
        return unified_similarity
    # Raises MetricError now rather than on first evaluation
    resolved = get_metric(metric)
    return lambda source, target: similarity_by_method(source, target, resolved)


def _text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


@pl.api.register_expr_namespace("fuzzy")
class FuzzyExprNamespace:
    """
    Fuzzy string matching namespace for Polars expressions.

    Provides chainable methods for fuzzy matching directly on columns.
    Access via `.fuzzy` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def similarity(
        self,
        other: Union[str, pl.Expr],
        metric: Optional[Union[str, Metric]] = None,
    ) -> pl.Expr:
        """
        Calculate similarity score between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            metric: Built-in metric name or Metric enum. None (default) uses
                the unified score averaged over all built-in metrics.

        Returns:
            Expression producing similarity scores (0.0 to 1.0). Null or
            all-whitespace values on either side score 0.0.

        Raises:
            MetricError: If the metric name is unknown.

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name").fuzzy.similarity("John")
            ... )
            >>> df.with_columns(
            ...     score=pl.col("name1").fuzzy.similarity(pl.col("name2"), metric="cosine")
            ... )
        """
        sim_func = _scorer(metric)

        if isinstance(other, str):
            return self._expr.map_elements(
                lambda s: sim_func(_text(s), other),
                return_dtype=pl.Float64,
                skip_nulls=False,
            )

        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: sim_func(_text(row["_left"]), _text(row["_right"])),
            return_dtype=pl.Float64,
            skip_nulls=False,
        )

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_similarity: float = 0.8,
        metric: Optional[Union[str, Metric]] = None,
    ) -> pl.Expr:
        """
        Check if values are similar to another value/column above a threshold.

        Args:
            other: String literal or column expression to compare against
            min_similarity: Minimum similarity score to return True (0.0 to 1.0)
            metric: Built-in metric name or Metric enum, None for the unified score

        Returns:
            Boolean expression

        Example:
            >>> df.filter(pl.col("name").fuzzy.is_similar("John", min_similarity=0.6))
        """
        return self.similarity(other, metric=metric) >= min_similarity


__all__ = ["FuzzyExprNamespace"]
