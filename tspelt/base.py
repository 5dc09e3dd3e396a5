"""Base classes shared by segment costs and change point estimators."""

from __future__ import annotations

import abc

import numpy as np

from .exceptions import ArgumentRangeError, SegmentLengthError, UninitializedDataError
from .utils import pairwise


class BaseEstimator(metaclass=abc.ABCMeta):
    """Base class for all change point detection estimators."""

    @abc.abstractmethod
    def fit(self, *args, **kwargs):
        """Fit the estimator to data."""

    @abc.abstractmethod
    def predict(self, *args, **kwargs):
        """Predict change points for previously seen data."""

    @abc.abstractmethod
    def fit_predict(self, *args, **kwargs):
        """Convenience method combining :meth:`fit` and :meth:`predict`."""


class BaseCost(metaclass=abc.ABCMeta):
    """Base class for segment cost implementations.

    A cost is bound to one signal by :meth:`fit` and then answers
    :meth:`error` queries for arbitrary segments ``[start, end)`` of it.
    Signals are stored as ``[n_dims, n_samples]`` arrays.
    """

    signal: np.ndarray | None = None
    min_size: int = 1

    @abc.abstractmethod
    def fit(self, signal) -> "BaseCost":
        """Prepare any cached statistics for the supplied signal."""

    @abc.abstractmethod
    def error(self, start: int | None = None, end: int | None = None) -> float:
        """Return the approximation cost for the segment ``[start, end)``."""

    @property
    @abc.abstractmethod
    def model(self) -> str:
        """Identifier used by :func:`cost_factory`."""

    @property
    def n_samples(self) -> int:
        if self.signal is None:
            raise UninitializedDataError(f"{type(self).__name__} is not fitted")
        return self.signal.shape[1]

    def sum_of_costs(self, bkps: list[int]) -> float:
        """Return the total cost for a segmentation defined by ``bkps``.

        The end of the signal is appended when ``bkps`` does not already
        finish with it.
        """

        n_samples = self.n_samples
        ends = list(bkps)
        if not ends or ends[-1] != n_samples:
            ends.append(n_samples)
        return sum(self.error(s, e) for s, e in pairwise([0] + ends))

    @staticmethod
    def _as_signal(signal) -> np.ndarray:
        """Return a read-only ``[n_dims, n_samples]`` float copy of ``signal``."""

        if signal is None:
            raise UninitializedDataError("Cannot fit a cost on a missing signal")
        array = np.array(signal, dtype=float, copy=True)
        if array.ndim == 1:
            array = array.reshape(1, -1)
        elif array.ndim != 2:
            raise ValueError(
                f"Signal must be 1D or 2D [n_dims, n_samples], got {array.ndim}D"
            )
        array.setflags(write=False)
        return array

    def _check_segment(self, start: int | None, end: int | None) -> tuple[int, int]:
        """Resolve default bounds and validate the segment ``[start, end)``."""

        n_samples = self.n_samples
        start = 0 if start is None else int(start)
        end = n_samples if end is None else int(end)
        if end - start < max(self.min_size, 1):
            raise SegmentLengthError(
                f"Segment [{start}, {end}) has {end - start} samples, "
                f"{type(self).__name__} requires at least {max(self.min_size, 1)}"
            )
        if start < 0 or end > n_samples:
            raise ArgumentRangeError(
                f"Segment [{start}, {end}) lies outside the signal [0, {n_samples})"
            )
        return start, end
