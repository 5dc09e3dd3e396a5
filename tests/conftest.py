"""Shared fixtures for the cost and PELT test suites."""

from __future__ import annotations

import numpy as np
import pytest


def segmented_signal(
    rng: np.random.Generator,
    n_samples: int,
    change_points: list[int],
    means: list[np.ndarray],
    scale: float,
) -> np.ndarray:
    """Piecewise-Gaussian signal shaped ``[n_dims, n_samples]``."""
    segments, start = [], 0
    for end, mu in zip(list(change_points) + [n_samples], means):
        seg = rng.normal(loc=mu, scale=scale, size=(end - start, mu.shape[0]))
        segments.append(seg)
        start = end
    return np.concatenate(segments, axis=0).T


@pytest.fixture
def step_signal():
    """Two level shifts, at 3 and 6."""
    return np.array([1, 1, 1, 5, 5, 5, 1, 1, 1], dtype=float)


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def noisy_univariate(rng):
    """Length-120 signal with mean shifts at 40 and 80."""
    return segmented_signal(
        rng,
        120,
        [40, 80],
        means=[np.array([0.0]), np.array([3.0]), np.array([-1.0])],
        scale=0.5,
    )


@pytest.fixture
def noisy_multivariate(rng):
    """Two channels, length 300, mean shifts at 100 and 200."""
    return segmented_signal(
        rng,
        300,
        [100, 200],
        means=[np.array([0.0, 5.0]), np.array([5.0, 5.0]), np.array([5.0, 0.0])],
        scale=0.1,
    )
