"""Least-squares cost."""

from __future__ import annotations

import numpy as np

from ..base import BaseCost
from ..utils import cumulative_sums, segment_mean, window_sum


class CostL2(BaseCost):
    """Least squared deviation cost.

    The cost of ``[start, end)`` is the sum over dimensions of
    ``sum(x**2) - sum(x)**2 / n``, read from cumulative sums in constant time.
    """

    model = "l2"

    def __init__(self) -> None:
        self.signal: np.ndarray | None = None
        self._csum: np.ndarray | None = None
        self._csum_sq: np.ndarray | None = None
        self.min_size = 1

    def fit(self, signal) -> "CostL2":
        signal = self._as_signal(signal)
        csum, csum_sq = cumulative_sums(signal)
        self.signal, self._csum, self._csum_sq = signal, csum, csum_sq
        return self

    def error(self, start: int | None = None, end: int | None = None) -> float:
        start, end = self._check_segment(start, end)
        n = end - start
        if n == 1:
            return 0.0
        mean = segment_mean(self._csum, start, end)
        sums_sq = window_sum(self._csum_sq, start, end)
        # rounding can push a constant segment slightly below zero
        return max(float(np.sum(sums_sq - n * mean * mean)), 0.0)
