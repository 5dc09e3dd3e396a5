"""Penalised change point detection (PELT)."""

from __future__ import annotations

import logging
import math
import warnings
from collections import deque
from dataclasses import dataclass

from ..base import BaseCost, BaseEstimator
from ..costs import cost_factory
from ..exceptions import ArgumentRangeError, UninitializedDataError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeltPath:
    """Outcome of a single penalised search.

    Attributes
    ----------
    ends : tuple[int, ...]
        Segment ends visited by the search, in increasing order, starting
        with the artificial boundary ``0``.
    costs : tuple[float, ...]
        Optimal penalised cost of the prefix ending at each entry of ``ends``
        (``inf`` when no admissible segmentation reaches it).
    predecessors : tuple[int, ...]
        Optimal previous boundary for each entry of ``ends``, ``-1`` when
        unreachable.
    bkps : tuple[int, ...]
        Detected breakpoints, end of signal excluded.
    n_evaluations : int
        Number of segment cost evaluations performed.
    n_pruned : int
        Number of candidates discarded by the pruning rule.
    """

    ends: tuple[int, ...]
    costs: tuple[float, ...]
    predecessors: tuple[int, ...]
    bkps: tuple[int, ...]
    n_evaluations: int
    n_pruned: int


class Pelt(BaseEstimator):
    """PELT change point detection algorithm.

    Finds the segmentation minimising the sum of segment costs plus ``pen``
    per change point. Candidate boundaries are the multiples of ``jump``; with
    ``jump=1`` the result is the exact optimum over all segmentations whose
    segments hold at least ``min_size`` samples.

    Parameters
    ----------
    model : str
        Name of the cost, see :func:`tspelt.costs.cost_factory`.
    custom_cost : BaseCost, optional
        Cost instance used instead of ``model``.
    min_size : int
        Minimum segment length. Raised to the cost's own minimum if lower.
    jump : int
        Stride between candidate boundaries.
    params : dict, optional
        Keyword arguments forwarded to the cost constructor.
    prune : bool
        Disable to run plain optimal partitioning, which evaluates every
        candidate at every end.
    """

    def __init__(
        self,
        model: str = "l2",
        custom_cost: BaseCost | None = None,
        min_size: int = 2,
        jump: int = 1,
        params: dict | None = None,
        prune: bool = True,
    ) -> None:
        if min_size < 1:
            raise ArgumentRangeError(f"min_size must be at least 1, got {min_size}")
        if jump < 1:
            raise ArgumentRangeError(f"jump must be at least 1, got {jump}")
        if custom_cost is not None:
            if not isinstance(custom_cost, BaseCost):
                raise TypeError(
                    f"custom_cost must be a BaseCost instance, got {type(custom_cost).__name__}"
                )
            self.cost = custom_cost
        else:
            self.cost = cost_factory(model, **(params or {}))
        if self.cost.min_size > min_size:
            warnings.warn(
                f"min_size={min_size} is below the minimum of the {self.cost.model!r} "
                f"cost; using min_size={self.cost.min_size}",
                UserWarning,
            )
        self.min_size = max(int(min_size), self.cost.min_size)
        self.jump = int(jump)
        self.prune = prune
        self.n_samples: int | None = None
        self.path_: PeltPath | None = None

    def _candidate_ends(self) -> list[int]:
        ends = [k for k in range(0, self.n_samples, self.jump) if k >= self.min_size]
        ends.append(self.n_samples)
        return ends

    def _seg(self, pen: float) -> PeltPath:
        costs: dict[int, float] = {0: -pen}
        predecessors: dict[int, int] = {0: 0}
        # kept sorted: boundaries are appended in increasing order
        admissible: list[int] = [0]
        # a candidate pruned at ``end`` may still be the best start for ends
        # closer than ``min_size``, so removals are released with a delay
        pending: deque[tuple[int, set[int]]] = deque()
        n_evaluations = 0
        n_pruned = 0

        for end in self._candidate_ends():
            while pending and pending[0][0] <= end:
                _, pruned = pending.popleft()
                admissible = [t for t in admissible if t not in pruned]

            best_start, best_cost = -1, math.inf
            scored: list[tuple[int, float]] = []
            for start in admissible:
                if end - start < self.min_size:
                    break
                value = costs[start] + self.cost.error(start, end)
                n_evaluations += 1
                scored.append((start, value))
                if value + pen < best_cost:
                    best_start, best_cost = start, value + pen

            costs[end] = best_cost
            predecessors[end] = best_start
            if best_start < 0:
                logger.debug("No admissible segmentation ends at %d", end)
                continue

            if self.prune:
                pruned = {start for start, value in scored if value > best_cost}
                if pruned:
                    pending.append((end + self.min_size, pruned))
                    n_pruned += len(pruned)
            admissible.append(end)

        bkps = self._backtrack(predecessors)
        logger.debug(
            "PELT on %d samples: %d ends, %d cost evaluations, %d candidates pruned",
            self.n_samples,
            len(costs) - 1,
            n_evaluations,
            n_pruned,
        )
        ends = tuple(sorted(costs))
        return PeltPath(
            ends=ends,
            costs=tuple(costs[t] for t in ends),
            predecessors=tuple(predecessors[t] for t in ends),
            bkps=tuple(bkps),
            n_evaluations=n_evaluations,
            n_pruned=n_pruned,
        )

    def _backtrack(self, predecessors: dict[int, int]) -> list[int]:
        bkps: list[int] = []
        end = self.n_samples
        while end > 0:
            start = predecessors[end]
            if start < 0:
                logger.warning(
                    "Signal end %d is unreachable with the current cost, "
                    "no breakpoint returned beyond it",
                    end,
                )
                break
            if start > 0:
                bkps.append(start)
            end = start
        return bkps[::-1]

    def fit(self, signal) -> "Pelt":
        """Bind the estimator to ``signal`` (1D, or 2D ``[n_dims, n_samples]``)."""

        self.cost.fit(signal)
        self.n_samples = self.cost.n_samples
        self.path_ = None
        return self

    def predict(self, pen: float) -> list[int]:
        """Return the breakpoints minimising the penalised cost.

        Breakpoints are strictly increasing indices in ``[min_size, n)``; the
        end of the signal is not included.
        """

        if self.n_samples is None:
            raise UninitializedDataError("Pelt must be fitted before predict")
        pen = float(pen)
        if math.isnan(pen):
            raise ArgumentRangeError("pen must be a number, got nan")
        if self.n_samples < 2 * self.min_size:
            logger.info(
                "Signal length %d is below 2 * min_size (%d), no change point possible",
                self.n_samples,
                2 * self.min_size,
            )
            return []
        self.path_ = self._seg(pen)
        return list(self.path_.bkps)

    def fit_predict(self, signal, pen: float) -> list[int]:
        self.fit(signal)
        return self.predict(pen)
