"""
Optuna-based NSGA-II optimizer wrapper.
"""

from typing import Any, Optional, Sequence, Union

import numpy as np
import optuna
from loguru import logger

from ..core.algorithm import positive_int
from ..core.archive import ParetoArchive
from .base import VectorOptimizer


class OptunaNSGA2Optimizer(VectorOptimizer):
    """
    NSGA-II via Optuna's multi-objective study.

    Every objective is minimized; infeasible trials are reported to the
    sampler through its constraints function and never enter the archive.
    """

    PARAMETERS = {
        "population_size": positive_int,
    }

    def __init__(
            self,
            n_trials: int = 200,
            population_size: int = 20,
            seed: int = 0,
            epsilon: Optional[Union[float, Sequence[float]]] = None,
            accept_equivalent: bool = False,
    ):
        super().__init__(n_trials, seed, epsilon, accept_equivalent)
        self.population_size = population_size

    def _suggest_solution(self, trial: optuna.Trial, problem) -> np.ndarray:
        """
        Suggest a solution vector using Optuna's Trial.
        """
        if problem.is_binary:
            values = [trial.suggest_int(f"x{i}", 0, 1) for i in range(problem.n_variables)]
            return np.asarray(values, dtype=np.int8)
        values = [
            trial.suggest_float(f"x{i}", float(problem.lower[i]), float(problem.upper[i]))
            for i in range(problem.n_variables)
        ]
        return np.asarray(values, dtype=np.float64)

    def _solve(self, problem, data: dict[str, Any]) -> ParetoArchive:
        """
        Run NSGA-II for `n_trials` trials.

        Output data
        -----------
        evaluations : int
            Number of completed trials.
        archive_size : int
            Size of the returned archive.
        """
        problem = self._check_problem(problem)
        archive = self._make_archive(problem)
        n_obj = problem.count_objectives()

        logger.info(f"Starting Optuna NSGA-II optimization for {self.n_trials} trials.")
        optuna.logging.set_verbosity(optuna.logging.WARNING)

        def optuna_objective(trial: optuna.Trial) -> list[float]:
            """Optuna objective - one value per problem objective"""
            solution = self._suggest_solution(trial, problem)
            evaluation = self._offer(problem, archive, solution)
            trial.set_user_attr("constraint", [0.0 if evaluation is not None else 1.0])
            if evaluation is None:
                evaluation = problem.evaluate(solution)
            return evaluation

        sampler = optuna.samplers.NSGAIISampler(
            population_size=max(2, self.population_size),
            seed=self.seed,
            constraints_func=lambda t: t.user_attrs["constraint"],
        )
        study = optuna.create_study(directions=["minimize"] * n_obj, sampler=sampler)
        study.optimize(optuna_objective, n_trials=self.n_trials)

        data["evaluations"] = len(study.trials)
        data["archive_size"] = len(archive)
        logger.info(f"Optuna NSGA-II finished. Archive size={len(archive)}")
        return archive
