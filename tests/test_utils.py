"""Tests for tspelt.utils: statistical primitives shared by the costs."""

import numpy as np
import pytest

from tspelt.utils import (
    block_sum,
    cumulative_sums,
    integral_image,
    median,
    median_heuristic,
    pairwise,
    pairwise_sq_distances,
    segment_mean,
    window_sum,
)


class TestMedian:
    @pytest.mark.parametrize(
        "values, expected",
        [
            ([3.0], 3.0),
            ([5.0, 1.0, 2.0], 2.0),
            ([10.0, 1.0, 3.0, 2.0], 2.5),
            ([4.0, 4.0, 4.0, 4.0], 4.0),
        ],
    )
    def test_known_values(self, values, expected):
        assert median(np.array(values)) == pytest.approx(expected)

    def test_matches_numpy_along_axis(self, rng):
        values = rng.normal(size=(3, 11))
        np.testing.assert_allclose(median(values, axis=1), np.median(values, axis=1))
        values = rng.normal(size=(4, 10))
        np.testing.assert_allclose(median(values, axis=1), np.median(values, axis=1))

    def test_does_not_reorder_input(self):
        values = np.array([3.0, 1.0, 2.0])
        median(values)
        np.testing.assert_array_equal(values, [3.0, 1.0, 2.0])

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            median(np.array([]))


class TestPartialSums:
    def test_window_sums_match_slices(self, rng):
        signal = rng.normal(size=(2, 20))
        csum, csum_sq = cumulative_sums(signal)
        assert csum.shape == (2, 21)
        for start, end in [(0, 20), (3, 9), (7, 8), (19, 20)]:
            np.testing.assert_allclose(
                window_sum(csum, start, end), signal[:, start:end].sum(axis=1)
            )
            np.testing.assert_allclose(
                window_sum(csum_sq, start, end), (signal[:, start:end] ** 2).sum(axis=1)
            )

    def test_segment_mean(self):
        signal = np.array([[1.0, 2.0, 3.0, 4.0], [0.0, 0.0, 2.0, 2.0]])
        csum, _ = cumulative_sums(signal)
        np.testing.assert_allclose(segment_mean(csum, 1, 4), [3.0, 4.0 / 3.0])
        np.testing.assert_allclose(segment_mean(csum, 0, 1), [1.0, 0.0])

    def test_block_sum_matches_slices(self, rng):
        matrix = rng.normal(size=(8, 8))
        integral = integral_image(matrix)
        assert integral.shape == (9, 9)
        for start, end in [(0, 8), (2, 5), (4, 5), (0, 1)]:
            assert block_sum(integral, start, end) == pytest.approx(
                matrix[start:end, start:end].sum()
            )


class TestDistances:
    def test_condensed_sq_distances(self):
        signal = np.array([[1.0, 2.0, 3.0]])
        np.testing.assert_allclose(pairwise_sq_distances(signal), [1.0, 4.0, 1.0])

    def test_multivariate_distances(self):
        signal = np.array([[0.0, 3.0], [0.0, 4.0]])
        np.testing.assert_allclose(pairwise_sq_distances(signal), [25.0])

    def test_fewer_than_two_samples(self):
        assert pairwise_sq_distances(np.zeros((1, 1))).size == 0
        assert pairwise_sq_distances(np.zeros((1, 0))).size == 0

    def test_median_heuristic(self):
        assert median_heuristic(np.array([1.0, 4.0, 1.0])) == pytest.approx(1.0)
        assert median_heuristic(np.array([2.0, 6.0])) == pytest.approx(0.25)

    def test_median_heuristic_fallbacks(self):
        assert median_heuristic(np.array([])) == 1.0
        assert median_heuristic(np.zeros(5)) == 1.0


def test_pairwise():
    assert list(pairwise([0, 3, 6, 9])) == [(0, 3), (3, 6), (6, 9)]
    assert list(pairwise([1])) == []
