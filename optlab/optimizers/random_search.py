"""
Random search optimizer.
"""

from typing import Any

import numpy as np
from loguru import logger

from ..core.archive import ParetoArchive
from .base import VectorOptimizer


class RandomSearchOptimizer(VectorOptimizer):
    """
    Simple random search baseline: `n_trials` uniform samples, all feasible
    ones offered to the archive.
    """

    def _solve(self, problem, data: dict[str, Any]) -> ParetoArchive:
        """
        Run random search for a fixed number of trials.

        Output data
        -----------
        evaluations : int
            Number of sampled solutions.
        feasible : int
            Number of feasible samples.
        archive_size : int
            Size of the returned archive.
        """
        problem = self._check_problem(problem)
        archive = self._make_archive(problem)
        rng = np.random.default_rng(self.seed)

        logger.info(f"Starting RandomSearch for {self.n_trials} trials.")
        n_feasible = 0
        for _ in range(self.n_trials):
            solution = problem.random_solution(rng)
            if self._offer(problem, archive, solution) is not None:
                n_feasible += 1

        data["evaluations"] = self.n_trials
        data["feasible"] = n_feasible
        data["archive_size"] = len(archive)
        logger.info(
            f"RandomSearch finished. feasible={n_feasible}/{self.n_trials}, "
            f"archive size={len(archive)}"
        )
        return archive
