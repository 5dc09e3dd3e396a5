"""Exceptions raised by cost functions and change point estimators."""

from sklearn.exceptions import NotFittedError


class UninitializedDataError(NotFittedError):
    """Raised when a cost or estimator is used before ``fit``."""


class SegmentLengthError(ValueError):
    """Raised when a segment is too short for a cost evaluation."""


class ArgumentRangeError(ValueError):
    """Raised when a parameter or argument lies outside its valid domain."""
