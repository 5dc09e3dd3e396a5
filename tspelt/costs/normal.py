"""Gaussian likelihood cost."""

from __future__ import annotations

import numpy as np

from ..base import BaseCost
from ..utils import cumulative_sums, segment_mean, window_sum

VARIANCE_EPSILON = 1e-10


class CostNormal(BaseCost):
    """Cost based on the Gaussian log-likelihood.

    Each dimension is modelled with its own mean and variance. The cost is
    twice the negative log-likelihood maximised over variances of at least
    ``VARIANCE_EPSILON``, so that constant segments stay finite:
    ``n * log(var)`` when ``var >= VARIANCE_EPSILON`` and
    ``n * log(VARIANCE_EPSILON) + n * var / VARIANCE_EPSILON - n`` below it.
    Additive constants of the log-likelihood are dropped. Splitting a segment
    never increases the total cost, which keeps pruned searches exact.
    """

    model = "normal"

    def __init__(self) -> None:
        self.signal: np.ndarray | None = None
        self._csum: np.ndarray | None = None
        self._csum_sq: np.ndarray | None = None
        self.min_size = 2

    def fit(self, signal) -> "CostNormal":
        signal = self._as_signal(signal)
        csum, csum_sq = cumulative_sums(signal)
        self.signal, self._csum, self._csum_sq = signal, csum, csum_sq
        return self

    def error(self, start: int | None = None, end: int | None = None) -> float:
        start, end = self._check_segment(start, end)
        n = end - start
        mean = segment_mean(self._csum, start, end)
        sums_sq = window_sum(self._csum_sq, start, end)
        var = np.maximum(sums_sq / n - mean * mean, 0.0)
        floored = var < VARIANCE_EPSILON
        per_dim = np.where(
            floored,
            np.log(VARIANCE_EPSILON) + var / VARIANCE_EPSILON - 1.0,
            np.log(np.maximum(var, VARIANCE_EPSILON)),
        )
        return float(n * per_dim.sum())
