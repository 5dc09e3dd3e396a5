"""PELT change point detector exposed through the segmenter API."""

from __future__ import annotations

import numpy as np

from ..base import BaseSegmenter
from ...detection import Pelt

__all__ = ["PeltDetector"]


class PeltDetector(BaseSegmenter):
    """Wrapper around :class:`tspelt.detection.Pelt`.

    Parameters
    ----------
    model : str
        Cost name (``"l1"``, ``"l2"``, ``"rbf"``, ``"normal"``, ``"poisson"``,
        ``"ar"``).
    min_size : int
        Minimum segment length.
    jump : int
        Stride between candidate change points.
    penalty : float
        Cost added per change point.
    cost_params : dict, optional
        Keyword arguments of the cost, e.g. ``{"gamma": 0.5}`` for ``"rbf"``.
    axis : int
        Time axis of the input, see :mod:`tspelt.algorithms.base`.
    """

    _tags = {
        "capability:univariate": True,
        "capability:multivariate": True,
        "fit_is_empty": False,
        "returns_dense": True,
        "detector_type": "change_point_detection",
    }

    def __init__(
        self,
        *,
        model: str = "l2",
        min_size: int = 2,
        jump: int = 1,
        penalty: float = 10.0,
        cost_params: dict | None = None,
        axis: int = 0,
    ) -> None:
        self.model = model
        self.min_size = min_size
        self.jump = jump
        self.penalty = penalty
        self.cost_params = cost_params
        self._estimator: Pelt | None = None
        self._train_signal: np.ndarray | None = None
        self._change_points: np.ndarray | None = None
        super().__init__(axis=axis)

    def _as_channels_first(self, X: np.ndarray) -> np.ndarray:
        return X if self.axis == 1 else X.T

    def _fit(self, X, y=None):
        signal = self._as_channels_first(X)
        estimator = Pelt(
            model=self.model,
            min_size=self.min_size,
            jump=self.jump,
            params=self.cost_params,
        )
        estimator.fit(signal)
        self._estimator = estimator
        self._train_signal = signal
        self._change_points = None
        return self

    def _predict(self, X):
        signal = self._as_channels_first(X)
        if not np.array_equal(signal, self._train_signal):
            self._estimator.fit(signal)
            self._train_signal = signal
        self._change_points = np.asarray(self._estimator.predict(self.penalty), dtype=int)
        return self._change_points.copy()

    @property
    def change_points_(self) -> np.ndarray:
        if self._change_points is None:
            raise RuntimeError("Predict must be called before accessing change_points_")
        return self._change_points.copy()

    @property
    def segment_labels_(self) -> np.ndarray:
        """Segment index of every time point of the last predicted series."""

        return self.to_clusters(self.change_points_, self._train_signal.shape[1])
