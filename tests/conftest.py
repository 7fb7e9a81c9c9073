"""Pytest fixtures for optlab tests."""

import threading
import time

import numpy as np
import pytest

from optlab.core.algorithm import Algorithm
from optlab.core.archive import ParetoArchive
from optlab.core.loader import DictLoader
from optlab.core.problem import Problem
from optlab.exceptions import FeasibilityError
from optlab.runner import AlgorithmFactory, DictLoaderFactory, ProblemFactory, RunnerListener
from optlab.tasks import KnapsackProblem, ZDT1Problem


class PointsProblem(Problem):
    """Two objectives over scalar solutions: (scale * x, index)."""

    def count_objectives(self):
        return 2

    def objective_names(self):
        return ["a", "b"]

    def _initialize(self, loader):
        self.scale = float(loader.get("scale"))

    def _check_feasibility(self, solution):
        if solution < 0:
            raise FeasibilityError(f"{solution} is negative")

    def _evaluate(self, solution, index):
        return self.scale * solution if index == 0 else index


class PointsAlgorithm(Algorithm):
    """Archives `n_points` mutually non-dominated points, or fails on demand."""

    PARAMETERS = {
        "n_points": int,
        "fail": bool,
        "delay": float,
    }

    def __init__(self):
        self.n_points = 3
        self.fail = False
        self.delay = 0.0

    def _solve(self, problem, data):
        if self.delay:
            time.sleep(self.delay)
        if self.fail:
            raise RuntimeError("solve failed")
        archive = ParetoArchive()
        for i in range(self.n_points):
            archive.add(i, [i, self.n_points - i])
        data["points"] = self.n_points
        return archive


class RecordingListener(RunnerListener):
    """Stores every notification as (callback, run_id, payload)."""

    def __init__(self):
        self.events = []
        self.active = 0
        self.max_active = 0
        self._guard = threading.Lock()

    def _record(self, name, run_id=None, **payload):
        with self._guard:
            self.active += 1
            self.max_active = max(self.max_active, self.active)
        time.sleep(0.001)
        self.events.append((name, run_id, payload))
        with self._guard:
            self.active -= 1

    def on_runner_starting(self, runner, when):
        self._record("runner_starting")

    def on_runner_finishing(self, runner, when):
        self._record("runner_finishing")

    def on_entry_starting(self, runner, when, run_id, label, problem, algorithm, parameters):
        self._record("entry_starting", run_id, label=label, problem=problem,
                     algorithm=algorithm, parameters=dict(parameters))

    def on_entry_finishing(self, runner, when, run_id, label, problem, algorithm,
                           parameters, data, archive, elapsed_ms):
        self._record("entry_finishing", run_id, label=label, problem=problem, algorithm=algorithm,
                     parameters=dict(parameters), data=dict(data), archive=archive,
                     elapsed_ms=elapsed_ms)

    def on_entry_failure(self, runner, when, run_id, label, problem, algorithm,
                         parameters, data, error, elapsed_ms):
        self._record("entry_failure", run_id, label=label, problem=problem, algorithm=algorithm,
                     parameters=dict(parameters), data=dict(data), error=error,
                     elapsed_ms=elapsed_ms)

    def named(self, name):
        return [e for e in self.events if e[0] == name]


@pytest.fixture
def rng():
    """Seeded numpy generator."""
    return np.random.default_rng(42)


@pytest.fixture
def points_problem():
    """Initialized two-objective scalar problem."""
    problem = PointsProblem()
    problem.initialize(DictLoader({"scale": 2.0}))
    return problem


@pytest.fixture
def points_algorithm():
    return PointsAlgorithm()


@pytest.fixture
def problem_factory():
    return ProblemFactory(PointsProblem)


@pytest.fixture
def algorithm_factory():
    return AlgorithmFactory(PointsAlgorithm)


@pytest.fixture
def loader_factory():
    return DictLoaderFactory({"scale": 1.0})


@pytest.fixture
def recorder():
    return RecordingListener()


@pytest.fixture
def knapsack_attributes():
    """Four items, two objectives, capacity 7."""
    return {
        "weights": [2, 3, 4, 5],
        "profits": [[3, 4, 5, 6], [6, 5, 4, 3]],
        "capacity": 7,
    }


@pytest.fixture
def knapsack_problem(knapsack_attributes):
    problem = KnapsackProblem()
    problem.initialize(DictLoader(knapsack_attributes))
    return problem


@pytest.fixture
def zdt1_problem():
    problem = ZDT1Problem()
    problem.initialize(DictLoader({"n_variables": 5}))
    return problem
