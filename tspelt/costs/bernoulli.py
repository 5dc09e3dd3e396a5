"""Bernoulli likelihood cost for binary data."""

from __future__ import annotations

import numpy as np
from scipy.special import xlogy

from ..base import BaseCost
from ..exceptions import ArgumentRangeError
from ..utils import cumulative_sums, window_sum

EPSILON = 1e-9


class CostBernoulli(BaseCost):
    """Twice the negative Bernoulli log-likelihood at the maximum likelihood rate.

    For a segment of ``n`` samples with ``S`` successes the cost of a
    dimension is ``-2 * (S log S + (n - S) log(n - S) - n log n)``, which
    vanishes for segments of only zeros or only ones. Values within
    ``EPSILON`` of 0 or 1 are accepted and snapped to it.
    """

    model = "bernoulli"

    def __init__(self) -> None:
        self.signal: np.ndarray | None = None
        self._csum: np.ndarray | None = None
        self.min_size = 1

    def fit(self, signal) -> "CostBernoulli":
        signal = self._as_signal(signal)
        ones = np.abs(signal - 1.0) <= EPSILON
        zeros = np.abs(signal) <= EPSILON
        invalid = ~(ones | zeros)
        if invalid.any():
            dim, idx = np.argwhere(invalid)[0]
            raise ArgumentRangeError(
                "Bernoulli cost requires binary data, "
                f"found {signal[dim, idx]} at [{dim}, {idx}]"
            )
        csum, _ = cumulative_sums(ones.astype(float))
        self.signal, self._csum = signal, csum
        return self

    def error(self, start: int | None = None, end: int | None = None) -> float:
        start, end = self._check_segment(start, end)
        n = end - start
        successes = window_sum(self._csum, start, end)
        failures = n - successes
        loglik = xlogy(successes, successes) + xlogy(failures, failures) - xlogy(n, n)
        return max(float(-2.0 * loglik.sum()), 0.0)
