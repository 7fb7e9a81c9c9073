"""
Problems whose solutions are fixed-length numpy vectors.
"""

import numpy as np

from ..core.problem import Problem
from ..exceptions import FeasibilityError


class VectorProblem(Problem):
    """
    Problem over vectors of `n_variables` values bounded by `lower` and
    `upper`. Binary problems restrict every value to {0, 1}.

    Besides evaluation, a vector problem knows how to sample, mutate and
    recombine its solutions, which is what the bundled optimizers need.
    """

    is_binary: bool = False

    def __init__(self):
        super().__init__()
        self.n_variables = 0
        self.lower = np.zeros(0)
        self.upper = np.zeros(0)

    def _set_bounds(self, n_variables: int, low: float, high: float) -> None:
        self.n_variables = n_variables
        self.lower = np.full(n_variables, low, dtype=np.float64)
        self.upper = np.full(n_variables, high, dtype=np.float64)

    def random_solution(self, rng: np.random.Generator) -> np.ndarray:
        """
        Sample a solution uniformly inside the bounds.
        """
        if self.is_binary:
            return rng.integers(0, 2, size=self.n_variables).astype(np.int8)
        return rng.uniform(self.lower, self.upper)

    def mutate(self, solution: np.ndarray, rng: np.random.Generator, rate: float) -> np.ndarray:
        """
        Apply mutation with per-variable probability `rate`.

        Binary vectors get bit flips; real vectors get Gaussian steps of a
        tenth of the variable span, clipped to the bounds.
        """
        mask = rng.random(self.n_variables) < rate
        child = solution.copy()
        if self.is_binary:
            child[mask] = 1 - child[mask]
            return child
        span = self.upper - self.lower
        steps = rng.normal(0.0, 1.0, size=self.n_variables) * span * 0.1
        child[mask] = child[mask] + steps[mask]
        return np.clip(child, self.lower, self.upper)

    def crossover(self, parent1: np.ndarray, parent2: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        """
        Uniform crossover between two parents at the variable level.
        """
        mask = rng.random(self.n_variables) < 0.5
        return np.where(mask, parent1, parent2)

    def _check_feasibility(self, solution) -> None:
        x = np.asarray(solution)
        if x.shape != (self.n_variables,):
            raise FeasibilityError(
                f"Solution must have {self.n_variables} variables, got shape {x.shape}"
            )
        below = np.flatnonzero(x < self.lower)
        if below.size:
            i = int(below[0])
            raise FeasibilityError(f"Variable {i} = {x[i]} is below its lower bound {self.lower[i]}")
        above = np.flatnonzero(x > self.upper)
        if above.size:
            i = int(above[0])
            raise FeasibilityError(f"Variable {i} = {x[i]} is above its upper bound {self.upper[i]}")
        if self.is_binary:
            fractional = np.flatnonzero((x != 0) & (x != 1))
            if fractional.size:
                i = int(fractional[0])
                raise FeasibilityError(f"Variable {i} = {x[i]} is not binary")
