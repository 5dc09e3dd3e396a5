"""Statistical primitives shared by the segment costs.

Signals are laid out as ``[n_dims, n_samples]``. Every helper is a pure
function: caches such as cumulative sums are returned to the caller, which
owns them.
"""

from __future__ import annotations

import numpy as np
from scipy.spatial.distance import pdist


def median(values: np.ndarray, axis: int = -1) -> np.ndarray:
    """Median computed by selection rather than a full sort.

    For an even number of values the two middle order statistics are
    averaged, matching :func:`numpy.median`.
    """

    values = np.asarray(values, dtype=float)
    n = values.shape[axis]
    if n == 0:
        raise ValueError("median of an empty sequence is undefined")
    mid = n // 2
    if n % 2:
        part = np.partition(values, mid, axis=axis)
        return np.take(part, mid, axis=axis)
    part = np.partition(values, (mid - 1, mid), axis=axis)
    return 0.5 * (np.take(part, mid - 1, axis=axis) + np.take(part, mid, axis=axis))


def cumulative_sums(signal: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Return running sums of values and squared values.

    Both arrays have shape ``[n_dims, n_samples + 1]`` with a leading zero
    column so that the sum over ``[start, end)`` is ``csum[:, end] -
    csum[:, start]``.
    """

    n_dims, n_samples = signal.shape
    csum = np.zeros((n_dims, n_samples + 1))
    csum_sq = np.zeros((n_dims, n_samples + 1))
    csum[:, 1:] = np.cumsum(signal, axis=1)
    csum_sq[:, 1:] = np.cumsum(signal * signal, axis=1)
    return csum, csum_sq


def window_sum(csum: np.ndarray, start: int, end: int) -> np.ndarray:
    """Per-dimension sum over ``[start, end)`` from a padded running sum."""

    return csum[:, end] - csum[:, start]


def segment_mean(csum: np.ndarray, start: int, end: int) -> np.ndarray:
    """Per-dimension mean over ``[start, end)`` from a padded running sum."""

    return window_sum(csum, start, end) / (end - start)


def integral_image(matrix: np.ndarray) -> np.ndarray:
    """2-D prefix sums of a square matrix, padded with a zero row and column."""

    size = matrix.shape[0]
    integral = np.zeros((size + 1, size + 1))
    integral[1:, 1:] = matrix.cumsum(axis=0).cumsum(axis=1)
    return integral


def block_sum(integral: np.ndarray, start: int, end: int) -> float:
    """Sum of ``matrix[start:end, start:end]`` read from its integral image."""

    return float(
        integral[end, end]
        - integral[start, end]
        - integral[end, start]
        + integral[start, start]
    )


def pairwise_sq_distances(signal: np.ndarray) -> np.ndarray:
    """Condensed squared euclidean distances between the samples of ``signal``."""

    if signal.shape[1] < 2:
        return np.empty(0)
    return pdist(signal.T, metric="sqeuclidean")


def median_heuristic(distances: np.ndarray) -> float:
    """Kernel bandwidth ``1 / median`` of pairwise squared distances.

    Falls back to ``1.0`` when there is no pair or the median is zero.
    """

    if distances.size == 0:
        return 1.0
    med = float(median(distances))
    return 1.0 / med if med > 0 else 1.0
