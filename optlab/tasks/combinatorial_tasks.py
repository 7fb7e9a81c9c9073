"""
Combinatorial benchmark problems (multi-objective 0/1 knapsack).
"""

from typing import Any, Optional

import numpy as np
from loguru import logger

from ..core.loader import Loader
from ..exceptions import DimensionError, FeasibilityError
from .base import VectorProblem


def make_knapsack_instance(
        n_items: int = 50,
        n_objectives: int = 2,
        seed: int = 0,
        capacity_ratio: float = 0.5,
) -> dict[str, Any]:
    """
    Build random knapsack loader attributes.

    Parameters
    ----------
    n_items : int
        Number of items.
    n_objectives : int
        Number of profit vectors (one per objective).
    seed : int
        Seed of the generator.
    capacity_ratio : float
        Capacity as a fraction of the total item weight.

    Returns
    -------
    dict
        Attributes accepted by `KnapsackProblem` (``weights``, ``profits``,
        ``capacity``).
    """
    rng = np.random.default_rng(seed)
    weights = rng.integers(10, 101, size=n_items)
    profits = rng.integers(10, 101, size=(n_objectives, n_items))
    capacity = float(capacity_ratio * weights.sum())
    logger.debug(f"Generated knapsack instance: items={n_items}, objectives={n_objectives}, capacity={capacity}")
    return {
        "weights": weights.tolist(),
        "profits": profits.tolist(),
        "capacity": capacity,
    }


class KnapsackProblem(VectorProblem):
    """
    Multi-objective 0/1 knapsack.

    Each objective is the negated total profit of the packed items under
    one profit vector, so that all objectives are minimized. A solution is
    feasible when its total weight does not exceed the capacity.

    Loader attributes
    -----------------
    weights : list of float
        Weight of each item.
    profits : list of list of float
        One profit list per objective, each as long as `weights`.
    capacity : float
        Knapsack capacity.
    objective_names : list of str, optional
        Defaults to ``profit_1``, ``profit_2``, ...
    """

    is_binary = True

    def __init__(self):
        super().__init__()
        self.weights = np.zeros(0)
        self.profits = np.zeros((0, 0))
        self.capacity = 0.0
        self._names: Optional[list[str]] = None

    def count_objectives(self) -> int:
        return self.profits.shape[0]

    def objective_names(self) -> list[str]:
        if self._names is not None:
            return list(self._names)
        return [f"profit_{i + 1}" for i in range(self.count_objectives())]

    def _initialize(self, loader: Loader) -> None:
        weights = np.asarray(loader.get("weights"), dtype=np.float64)
        profits = np.atleast_2d(np.asarray(loader.get("profits"), dtype=np.float64))
        capacity = float(loader.get("capacity"))

        if profits.shape[1] != weights.shape[0]:
            raise DimensionError(
                f"Each profit list must have {weights.shape[0]} items, got {profits.shape[1]}"
            )
        names = loader.get("objective_names", None)
        if names is not None and len(names) != profits.shape[0]:
            raise DimensionError(
                f"Expected {profits.shape[0]} objective names, got {len(names)}"
            )

        self.weights = weights
        self.profits = profits
        self.capacity = capacity
        self._names = list(names) if names is not None else None
        self._set_bounds(weights.shape[0], 0.0, 1.0)

    def total_weight(self, solution) -> float:
        return float(self.weights @ np.asarray(solution, dtype=np.float64))

    def _check_feasibility(self, solution) -> None:
        super()._check_feasibility(solution)
        weight = self.total_weight(solution)
        if weight > self.capacity:
            raise FeasibilityError(
                f"Total weight {weight:g} exceeds the capacity {self.capacity:g}"
            )

    def _evaluate(self, solution, index: int) -> float:
        x = np.asarray(solution, dtype=np.float64)
        return -float(self.profits[index] @ x)
