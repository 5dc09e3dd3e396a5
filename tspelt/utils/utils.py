"""Miscellaneous helpers used by the estimators."""

from __future__ import annotations

from itertools import tee


def pairwise(iterable):
    """Yield consecutive pairs from ``iterable``."""

    a, b = tee(iterable)
    next(b, None)
    return zip(a, b)
