"""Utility helpers for costs and estimators."""

from .stats import (
    block_sum,
    cumulative_sums,
    integral_image,
    median,
    median_heuristic,
    pairwise_sq_distances,
    segment_mean,
    window_sum,
)
from .utils import pairwise

__all__ = [
    "block_sum",
    "cumulative_sums",
    "integral_image",
    "median",
    "median_heuristic",
    "pairwise",
    "pairwise_sq_distances",
    "segment_mean",
    "window_sum",
]
