"""Poisson likelihood cost for count data."""

from __future__ import annotations

import numpy as np

from ..base import BaseCost
from ..exceptions import ArgumentRangeError
from ..utils import cumulative_sums, window_sum

EPSILON = 1e-9


class CostPoisson(BaseCost):
    """Twice the negative Poisson log-likelihood, up to data-only terms.

    For a segment of ``n`` samples summing to ``S`` the cost of a dimension
    is ``2 * (S - S * log(S) + S * log(n))``, and zero when ``S`` vanishes.
    The signal must be non-negative; values above ``-EPSILON`` are clipped
    to zero.
    """

    model = "poisson"

    def __init__(self) -> None:
        self.signal: np.ndarray | None = None
        self._csum: np.ndarray | None = None
        self.min_size = 1

    def fit(self, signal) -> "CostPoisson":
        signal = self._as_signal(signal)
        if signal.size and signal.min() < -EPSILON:
            dim, idx = np.unravel_index(np.argmin(signal), signal.shape)
            raise ArgumentRangeError(
                "Poisson cost requires non-negative data, "
                f"found {signal[dim, idx]} at [{dim}, {idx}]"
            )
        csum, _ = cumulative_sums(np.clip(signal, 0.0, None))
        self.signal, self._csum = signal, csum
        return self

    def error(self, start: int | None = None, end: int | None = None) -> float:
        start, end = self._check_segment(start, end)
        sums = window_sum(self._csum, start, end)
        sums = sums[sums > EPSILON]
        if not sums.size:
            return 0.0
        return float(2.0 * np.sum(sums - sums * np.log(sums) + sums * np.log(end - start)))
