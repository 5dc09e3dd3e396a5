"""Least absolute deviation cost."""

from __future__ import annotations

import numpy as np

from ..base import BaseCost
from ..utils import median


class CostL1(BaseCost):
    """Least absolute deviation cost.

    Sum of absolute deviations from the per-dimension median of the segment.
    Each query selects the median afresh, so it costs O(segment length).
    """

    model = "l1"

    def __init__(self) -> None:
        self.signal: np.ndarray | None = None
        self.min_size = 1

    def fit(self, signal) -> "CostL1":
        self.signal = self._as_signal(signal)
        return self

    def error(self, start: int | None = None, end: int | None = None) -> float:
        start, end = self._check_segment(start, end)
        if end - start == 1:
            return 0.0
        sub = self.signal[:, start:end]
        med = median(sub, axis=1)
        return float(np.abs(sub - med[:, np.newaxis]).sum())
