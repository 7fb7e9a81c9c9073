"""
Genetic algorithm (GA) for multi-objective vector problems.
"""

from typing import Any, Optional, Sequence, Union

import numpy as np
from loguru import logger

from ..core.algorithm import positive_int
from ..core.archive import ParetoArchive
from ..core.dominance import ParetoDominance, Relation
from .base import VectorOptimizer


class GAOptimizer(VectorOptimizer):
    """
    Genetic algorithm driven by Pareto dominance.

    - Direct encoding: individuals are the problem's solution vectors.
    - Tournament selection on dominance (infeasible individuals always lose),
      uniform crossover, problem-specific mutation.
    - Elitism: one archive member joins every new generation with its stored
      evaluation, so it costs no evaluation and is not archived twice. A
      population of one individual has no room for it.
    """

    PARAMETERS = {
        "population_size": positive_int,
        "crossover_prob": float,
        "mutation_prob": float,
        "tournament_size": positive_int,
    }

    def __init__(
            self,
            n_trials: int = 1000,
            population_size: int = 20,
            crossover_prob: float = 0.8,
            mutation_prob: float = 0.1,
            tournament_size: int = 3,
            seed: int = 0,
            epsilon: Optional[Union[float, Sequence[float]]] = None,
            accept_equivalent: bool = False,
    ):
        super().__init__(n_trials, seed, epsilon, accept_equivalent)
        self.population_size = population_size
        self.crossover_prob = crossover_prob
        self.mutation_prob = mutation_prob
        self.tournament_size = tournament_size
        self._pareto = ParetoDominance()

    def _tournament_select(
            self,
            rng: np.random.Generator,
            pop: list[np.ndarray],
            evaluations: list[Optional[list[float]]],
    ) -> np.ndarray:
        """
        Tournament selection over the population.

        The first sampled individual is challenged by the others; a
        challenger wins if it dominates the current winner, or if the
        winner is infeasible and the challenger is not.
        """
        k = min(self.tournament_size, len(pop))
        idxs = rng.choice(len(pop), size=k, replace=False)
        best = int(idxs[0])
        for i in idxs[1:]:
            i = int(i)
            if evaluations[i] is None:
                continue
            if evaluations[best] is None:
                best = i
            elif self._pareto.compare(evaluations[i], evaluations[best]) is Relation.DOMINANT:
                best = i
        return pop[best]

    def _solve(self, problem, data: dict[str, Any]) -> ParetoArchive:
        """
        Run the GA until the evaluation budget (n_trials) is exhausted.

        Output data
        -----------
        evaluations : int
            Number of evaluated individuals.
        generations : int
            Number of generations bred after the initial population.
        archive_size : int
            Size of the returned archive.
        """
        problem = self._check_problem(problem)
        archive = self._make_archive(problem)
        rng = np.random.default_rng(self.seed)
        population_size = max(2, self.population_size)

        logger.info(
            f"Starting GA optimization with population_size={population_size}, "
            f"n_trials={self.n_trials}"
        )

        n_evals = 0
        population: list[np.ndarray] = []
        evaluations: list[Optional[list[float]]] = []

        def eval_pop(pop: list[np.ndarray], carried: Sequence[list[float]] = ()) -> bool:
            """
            Evaluate the population; True once the budget is exhausted.

            The first `len(carried)` individuals are archive members whose
            stored evaluations are reused: they are not offered again and do
            not count against the budget.
            """
            nonlocal n_evals
            evaluations.clear()
            evaluations.extend(carried)
            for p in pop[len(carried):]:
                if n_evals >= self.n_trials:
                    return True
                evaluations.append(self._offer(problem, archive, p))
                n_evals += 1
            return n_evals >= self.n_trials

        population = [problem.random_solution(rng) for _ in range(population_size)]
        done = eval_pop(population)

        gen = 0
        while not done:
            gen += 1
            logger.debug(
                f"Starting GA generation {gen} "
                f"(evaluations so far: {n_evals}/{self.n_trials}, archive size={len(archive)})"
            )
            new_population: list[np.ndarray] = []
            carried: list[list[float]] = []
            if population_size > 1 and not archive.is_empty():
                elite = archive.entries[int(rng.integers(0, len(archive)))]
                new_population.append(elite.solution)
                carried.append(list(elite.evaluation))

            while len(new_population) < population_size:
                parent1 = self._tournament_select(rng, population, evaluations)
                parent2 = self._tournament_select(rng, population, evaluations)
                if rng.random() < self.crossover_prob:
                    child = problem.crossover(parent1, parent2, rng)
                else:
                    child = parent1.copy()
                child = problem.mutate(child, rng, self.mutation_prob)
                new_population.append(child)

            population = new_population
            done = eval_pop(population, carried)

        data["evaluations"] = n_evals
        data["generations"] = gen
        data["archive_size"] = len(archive)
        logger.info(
            f"GA optimization finished after {n_evals} evaluations and {gen} generations. "
            f"Archive size={len(archive)}"
        )
        return archive
