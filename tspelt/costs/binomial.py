"""Binomial likelihood cost for success counts out of known trials."""

from __future__ import annotations

import numpy as np
from scipy.special import xlogy

from ..base import BaseCost
from ..exceptions import ArgumentRangeError
from ..utils import cumulative_sums, window_sum

TOLERANCE = 1e-9


class CostBinomial(BaseCost):
    """Negative binomial log-likelihood at the pooled success rate.

    The signal has exactly two rows: successes ``k`` and trials ``n`` for
    each time point. Over a segment with ``K`` successes in ``N`` trials the
    cost is ``-(K log K + (N - K) log(N - K) - N log N)``, zero when every
    trial failed or every trial succeeded.
    """

    model = "binomial"

    def __init__(self) -> None:
        self.signal: np.ndarray | None = None
        self._csum: np.ndarray | None = None
        self.min_size = 1

    def fit(self, signal) -> "CostBinomial":
        signal = self._as_signal(signal)
        if signal.shape[0] != 2:
            raise ValueError(
                "CostBinomial expects two rows (successes, trials), "
                f"got {signal.shape[0]}"
            )
        if not np.isfinite(signal).all():
            raise ArgumentRangeError("Binomial cost requires finite successes and trials")
        counts = np.round(signal)
        successes, trials = counts
        invalid = (
            (np.abs(signal - counts) >= TOLERANCE).any(axis=0)
            | (successes < 0)
            | (trials < 1)
            | (successes > trials)
        )
        if invalid.any():
            idx = int(np.flatnonzero(invalid)[0])
            raise ArgumentRangeError(
                "Binomial cost requires integer counts with 0 <= k <= n and n >= 1, "
                f"found k={signal[0, idx]}, n={signal[1, idx]} at index {idx}"
            )
        csum, _ = cumulative_sums(counts)
        self.signal, self._csum = signal, csum
        return self

    def error(self, start: int | None = None, end: int | None = None) -> float:
        start, end = self._check_segment(start, end)
        successes, trials = window_sum(self._csum, start, end)
        failures = trials - successes
        loglik = xlogy(successes, successes) + xlogy(failures, failures) - xlogy(trials, trials)
        return max(float(-loglik), 0.0)
