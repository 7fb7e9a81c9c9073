"""Base script for optimizers"""
import numbers
from typing import Any, Optional, Sequence, Union

import numpy as np
from loguru import logger

from ..core.algorithm import Algorithm
from ..core.archive import ParetoArchive
from ..core.dominance import EpsilonDominance, ParetoDominance
from ..exceptions import DimensionError
from ..tasks.base import VectorProblem


def epsilon_vector(value: Any) -> Union[None, float, tuple[float, ...]]:
    """
    Converter for ``epsilon`` parameters: None, one non-negative number
    (shared by all objectives) or a sequence of non-negative numbers.
    """
    if value is None:
        return None
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("epsilon must be a number or a sequence of numbers")
    if isinstance(value, numbers.Real):
        values: Sequence[float] = [float(value)]
        scalar = True
    else:
        values = [float(v) for v in value]
        scalar = False
    if any(v < 0 for v in values):
        raise ValueError(f"epsilon values must be non-negative, got {value!r}")
    return values[0] if scalar else tuple(values)


class VectorOptimizer(Algorithm):
    """
    Abstract base class for the bundled optimizers of `VectorProblem`s.

    Every feasible evaluated solution is offered to a Pareto archive;
    binding ``epsilon`` switches the archive to epsilon dominance.
    """

    PARAMETERS = {
        "n_trials": int,
        "seed": int,
        "epsilon": epsilon_vector,
        "accept_equivalent": bool,
    }

    def __init__(
            self,
            n_trials: int = 100,
            seed: int = 0,
            epsilon: Optional[Union[float, Sequence[float]]] = None,
            accept_equivalent: bool = False,
    ):
        self.n_trials = n_trials
        self.seed = seed
        self.epsilon = epsilon_vector(epsilon)
        self.accept_equivalent = accept_equivalent

    def _check_problem(self, problem) -> VectorProblem:
        if not isinstance(problem, VectorProblem):
            raise TypeError(f"{type(self).__name__} solves VectorProblem instances, got {type(problem).__name__}")
        if not problem.is_initialized():
            raise ValueError(f"{type(problem).__name__} has not been initialized")
        return problem

    def _make_archive(self, problem: VectorProblem) -> ParetoArchive:
        n_obj = problem.count_objectives()
        if self.epsilon is None:
            dominance = ParetoDominance()
        elif isinstance(self.epsilon, float):
            dominance = EpsilonDominance([self.epsilon] * n_obj)
        else:
            if len(self.epsilon) != n_obj:
                raise DimensionError(
                    f"epsilon has {len(self.epsilon)} values but the problem has {n_obj} objectives"
                )
            dominance = EpsilonDominance(self.epsilon)
        return ParetoArchive(dominance, accept_equivalent=self.accept_equivalent)

    def _offer(
            self,
            problem: VectorProblem,
            archive: ParetoArchive,
            solution: np.ndarray,
    ) -> Optional[list[float]]:
        """
        Evaluate `solution` and offer it to `archive` if it is feasible.

        Returns the evaluation, or None for an infeasible solution.
        """
        if not problem.is_feasible(solution):
            return None
        evaluation = problem.evaluate(solution)
        if archive.add(solution, evaluation):
            logger.debug(f"[{type(self).__name__}] Archived {evaluation} (archive size={len(archive)})")
        return evaluation
