"""Radial basis function kernel cost."""

from __future__ import annotations

import logging

import numpy as np
from scipy.spatial.distance import squareform

from ..base import BaseCost
from ..exceptions import ArgumentRangeError
from ..utils import block_sum, integral_image, median_heuristic, pairwise_sq_distances

logger = logging.getLogger(__name__)


class CostRbf(BaseCost):
    """Kernel cost using an RBF kernel.

    With ``k(x, y) = exp(-gamma * ||x - y||**2)`` the cost of a segment of
    ``n`` samples is ``trace(K) - sum(K) / n = n - sum(K) / n`` where ``K`` is
    the Gram matrix restricted to the segment.

    The full Gram matrix is built once per :meth:`fit` and stored as an
    integral image, so every query is answered in constant time whatever the
    order in which segments are requested.

    Parameters
    ----------
    gamma : float, optional
        Kernel bandwidth. When omitted, the inverse median of all pairwise
        squared distances of the fitted signal is used and exposed as
        ``gamma_``.
    """

    model = "rbf"

    def __init__(self, gamma: float | None = None) -> None:
        if gamma is not None and not gamma > 0:
            raise ArgumentRangeError(f"gamma must be positive, got {gamma}")
        self.gamma = gamma
        self.gamma_: float | None = None
        self.signal: np.ndarray | None = None
        self._integral: np.ndarray | None = None
        self.min_size = 1

    def fit(self, signal) -> "CostRbf":
        signal = self._as_signal(signal)
        dist2 = pairwise_sq_distances(signal)
        gamma = self.gamma if self.gamma is not None else median_heuristic(dist2)
        n_samples = signal.shape[1]
        if dist2.size:
            gram = np.exp(-gamma * squareform(dist2))
        else:
            gram = np.ones((n_samples, n_samples))
        logger.debug("RBF cost fitted on %d samples with gamma=%g", n_samples, gamma)
        self.signal, self.gamma_, self._integral = signal, gamma, integral_image(gram)
        return self

    def error(self, start: int | None = None, end: int | None = None) -> float:
        start, end = self._check_segment(start, end)
        n = end - start
        if n == 1:
            return 0.0
        return max(n - block_sum(self._integral, start, end) / n, 0.0)
