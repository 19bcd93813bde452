"""Exceptions raised by fuzzyunify.

The similarity entry points never raise for null or blank input; these
exceptions cover invalid parameters and unknown metric names.
"""


class FuzzyUnifyError(Exception):
    """Base exception for all fuzzyunify errors."""


class ValidationError(FuzzyUnifyError, ValueError):
    """Raised when input validation fails (invalid parameters, out of range values)."""


class MetricError(FuzzyUnifyError, ValueError):
    """Raised when an unknown or unsupported metric is specified."""


__all__ = ["FuzzyUnifyError", "ValidationError", "MetricError"]
