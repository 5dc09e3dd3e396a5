"""Segment cost functions."""

from .ar import CostAR
from .bernoulli import CostBernoulli
from .binomial import CostBinomial
from .factory import cost_factory
from .l1 import CostL1
from .l2 import CostL2
from .normal import CostNormal
from .poisson import CostPoisson
from .rbf import CostRbf

__all__ = [
    "cost_factory",
    "CostAR",
    "CostBernoulli",
    "CostBinomial",
    "CostL1",
    "CostL2",
    "CostNormal",
    "CostPoisson",
    "CostRbf",
]
