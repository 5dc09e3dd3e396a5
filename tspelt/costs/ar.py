"""Autoregressive model residual cost."""

from __future__ import annotations

import logging

import numpy as np
from numpy.linalg import lstsq

from ..base import BaseCost
from ..exceptions import ArgumentRangeError

logger = logging.getLogger(__name__)


class CostAR(BaseCost):
    """Residual sum of squares of an AR(``order``) least-squares fit.

    Only univariate signals are supported. A segment needs at least as many
    regression equations as coefficients, which sets :attr:`min_size`.
    """

    model = "ar"

    def __init__(self, order: int = 1, intercept: bool = True) -> None:
        if order < 1:
            raise ArgumentRangeError(f"order must be at least 1, got {order}")
        self.order = int(order)
        self.intercept = intercept
        self.signal: np.ndarray | None = None
        self.min_size = max(self.order + 1, 2 * self.order + int(intercept))

    def fit(self, signal) -> "CostAR":
        signal = self._as_signal(signal)
        if signal.shape[0] != 1:
            raise ValueError(
                f"CostAR only supports univariate signals, got {signal.shape[0]} dimensions"
            )
        self.signal = signal
        return self

    def _design(self, segment: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        p = self.order
        n_eq = segment.shape[0] - p
        lags = [segment[p - lag : p - lag + n_eq] for lag in range(1, p + 1)]
        if self.intercept:
            lags.insert(0, np.ones(n_eq))
        return np.column_stack(lags), segment[p:]

    def error(self, start: int | None = None, end: int | None = None) -> float:
        start, end = self._check_segment(start, end)
        X, y = self._design(self.signal[0, start:end])
        coef, _, rank, _ = lstsq(X, y, rcond=None)
        if rank < X.shape[1]:
            logger.debug(
                "Rank deficient AR(%d) design on [%d, %d), using minimum norm solution",
                self.order,
                start,
                end,
            )
        residuals = y - X @ coef
        return float(residuals @ residuals)
