"""
tspelt: penalised change point detection for time series.
"""

__version__ = "0.1.0"

from .costs import (
    CostAR,
    CostBernoulli,
    CostBinomial,
    CostL1,
    CostL2,
    CostNormal,
    CostPoisson,
    CostRbf,
    cost_factory,
)
from .detection import Pelt, PeltPath
from .exceptions import ArgumentRangeError, SegmentLengthError, UninitializedDataError

__all__ = [
    "ArgumentRangeError",
    "CostAR",
    "CostBernoulli",
    "CostBinomial",
    "CostL1",
    "CostL2",
    "CostNormal",
    "CostPoisson",
    "CostRbf",
    "Pelt",
    "PeltPath",
    "SegmentLengthError",
    "UninitializedDataError",
    "cost_factory",
]
