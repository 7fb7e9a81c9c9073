"""Exports for benchmark problems."""

from .base import VectorProblem
from .combinatorial_tasks import KnapsackProblem, make_knapsack_instance
from .continuous_tasks import ZDT1Problem

__all__ = [
    "VectorProblem",
    "KnapsackProblem",
    "make_knapsack_instance",
    "ZDT1Problem",
]
