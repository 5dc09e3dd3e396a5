"""Shared fixtures for the segmenter test suite."""

from __future__ import annotations

import numpy as np
import pytest

from tspelt.algorithms import PeltDetector


def _segmented_signal(
    rng: np.random.Generator,
    n_samples: int,
    change_points: np.ndarray,
    means: list[np.ndarray],
    scales: list[np.ndarray],
) -> np.ndarray:
    """Generate a ``(n_timepoints, n_channels)`` piecewise-Gaussian signal."""
    segments, start = [], 0
    for end, mu, sigma in zip(list(change_points) + [n_samples], means, scales):
        seg = rng.normal(loc=mu, scale=sigma, size=(end - start, mu.shape[0]))
        segments.append(seg)
        start = end
    return np.concatenate(segments, axis=0).astype(np.float64)


@pytest.fixture(scope="session")
def synthetic_data():
    """Three-segment series, univariate and multivariate.

    Change points at index 300 and 700 in a length-1000 signal.
    """
    rng = np.random.default_rng(42)
    n = 1000
    cps = np.array([300, 700])
    labels = np.zeros(n, dtype=int)
    labels[cps[0] : cps[1]] = 1
    labels[cps[1] :] = 2

    uni = _segmented_signal(
        rng,
        n,
        cps,
        means=[np.array([-0.8]), np.array([0.5]), np.array([-0.1])],
        scales=[np.array([0.2]), np.array([0.25]), np.array([0.1])],
    )
    multi = _segmented_signal(
        rng,
        n,
        cps,
        means=[
            np.array([-0.8, 0.4]),
            np.array([0.5, -0.3]),
            np.array([-0.1, 0.6]),
        ],
        scales=[
            np.array([0.2, 0.18]),
            np.array([0.25, 0.22]),
            np.array([0.22, 0.2]),
        ],
    )
    return {
        "univariate": {"X": uni, "y": labels.copy(), "change_points": cps.copy()},
        "multivariate": {"X": multi, "y": labels.copy(), "change_points": cps.copy()},
        "n_samples": n,
    }


@pytest.fixture
def detector():
    """Fresh detector with default hyper-parameters."""
    return PeltDetector()
