"""
Continuous benchmark problems.
"""

import numpy as np

from ..core.loader import Loader
from .base import VectorProblem


class ZDT1Problem(VectorProblem):
    """
    ZDT1: two objectives over [0, 1]^n with a convex Pareto front
    ``f2 = 1 - sqrt(f1)`` reached when ``x[1:] == 0``.

    Loader attributes
    -----------------
    n_variables : int, optional
        Number of decision variables (default: 30, minimum 2).
    """

    def count_objectives(self) -> int:
        return 2

    def objective_names(self) -> list[str]:
        return ["f1", "f2"]

    def _initialize(self, loader: Loader) -> None:
        n_variables = int(loader.get("n_variables", 30))
        if n_variables < 2:
            raise ValueError(f"ZDT1 needs at least 2 variables, got {n_variables}")
        self._set_bounds(n_variables, 0.0, 1.0)

    def _evaluate(self, solution, index: int) -> float:
        x = np.asarray(solution, dtype=np.float64)
        f1 = x[0]
        if index == 0:
            return f1
        g = 1.0 + 9.0 * np.sum(x[1:]) / (self.n_variables - 1)
        return g * (1.0 - np.sqrt(f1 / g))
