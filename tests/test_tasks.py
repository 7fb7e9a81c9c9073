"""Tests for the reference problems."""

import numpy as np
import pytest

from optlab.core.loader import DictLoader
from optlab.exceptions import AttributeNotFoundError, DimensionError, FeasibilityError
from optlab.tasks import KnapsackProblem, ZDT1Problem, make_knapsack_instance


class TestZDT1:
    """Tests for ZDT1Problem."""

    def test_defaults(self):
        problem = ZDT1Problem()
        problem.initialize(DictLoader())
        assert problem.n_variables == 30
        assert problem.count_objectives() == 2
        assert problem.objective_names() == ["f1", "f2"]

    def test_too_few_variables(self):
        with pytest.raises(ValueError):
            ZDT1Problem().initialize(DictLoader({"n_variables": 1}))

    def test_front_point(self, zdt1_problem):
        f1, f2 = zdt1_problem.evaluate(np.array([0.25, 0.0, 0.0, 0.0, 0.0]))
        assert f1 == pytest.approx(0.25)
        assert f2 == pytest.approx(0.5)

    def test_worst_point(self, zdt1_problem):
        f1, f2 = zdt1_problem.evaluate(np.ones(5))
        assert f1 == pytest.approx(1.0)
        assert f2 == pytest.approx(10.0 * (1.0 - np.sqrt(0.1)))

    def test_feasibility(self, zdt1_problem):
        assert zdt1_problem.is_feasible(np.full(5, 0.5))
        with pytest.raises(FeasibilityError, match="upper bound"):
            zdt1_problem.check_feasibility(np.array([0.5, 1.5, 0.0, 0.0, 0.0]))
        with pytest.raises(FeasibilityError, match="5 variables"):
            zdt1_problem.check_feasibility(np.zeros(4))


class TestKnapsack:
    """Tests for KnapsackProblem."""

    def test_objectives_are_negated_profits(self, knapsack_problem):
        assert knapsack_problem.count_objectives() == 2
        assert knapsack_problem.objective_names() == ["profit_1", "profit_2"]
        assert knapsack_problem.evaluate(np.array([1, 0, 0, 1])) == [-9.0, -9.0]
        assert knapsack_problem.evaluate(np.array([1, 1, 0, 0]), 1) == -11.0

    def test_capacity(self, knapsack_problem):
        assert knapsack_problem.is_feasible(np.array([1, 0, 0, 1], dtype=np.int8))
        with pytest.raises(FeasibilityError, match="Total weight 9 exceeds the capacity 7"):
            knapsack_problem.check_feasibility(np.array([0, 0, 1, 1]))

    def test_non_binary_values(self, knapsack_problem):
        with pytest.raises(FeasibilityError, match="not binary"):
            knapsack_problem.check_feasibility(np.array([0.5, 0, 0, 0]))

    def test_custom_objective_names(self, knapsack_attributes):
        problem = KnapsackProblem()
        problem.initialize(DictLoader({**knapsack_attributes, "objective_names": ["value", "volume"]}))
        assert problem.objective_names() == ["value", "volume"]

    def test_profit_length_mismatch(self, knapsack_attributes):
        attributes = {**knapsack_attributes, "profits": [[1, 2, 3]]}
        with pytest.raises(DimensionError):
            KnapsackProblem().initialize(DictLoader(attributes))

    def test_missing_attribute(self, knapsack_attributes):
        attributes = dict(knapsack_attributes)
        del attributes["capacity"]
        with pytest.raises(AttributeNotFoundError):
            KnapsackProblem().initialize(DictLoader(attributes))

    def test_generated_instance(self):
        attributes = make_knapsack_instance(n_items=12, n_objectives=3, seed=5)
        assert len(attributes["weights"]) == 12
        assert np.asarray(attributes["profits"]).shape == (3, 12)
        assert attributes["capacity"] == pytest.approx(0.5 * sum(attributes["weights"]))
        assert attributes == make_knapsack_instance(n_items=12, n_objectives=3, seed=5)

        problem = KnapsackProblem()
        problem.initialize(DictLoader(attributes))
        assert problem.count_objectives() == 3


class TestVectorOperators:
    """Tests for sampling and variation operators."""

    def test_random_solution_within_bounds(self, zdt1_problem, rng):
        for _ in range(10):
            x = zdt1_problem.random_solution(rng)
            assert x.shape == (5,)
            assert zdt1_problem.is_feasible(x)

    def test_binary_random_solution(self, knapsack_problem, rng):
        x = knapsack_problem.random_solution(rng)
        assert x.dtype == np.int8
        assert set(np.unique(x)) <= {0, 1}

    def test_mutate_rate_zero_copies(self, zdt1_problem, rng):
        x = zdt1_problem.random_solution(rng)
        child = zdt1_problem.mutate(x, rng, 0.0)
        assert child is not x
        np.testing.assert_array_equal(child, x)

    def test_bit_flip(self, knapsack_problem, rng):
        x = np.array([1, 0, 0, 1], dtype=np.int8)
        np.testing.assert_array_equal(knapsack_problem.mutate(x, rng, 1.0), [0, 1, 1, 0])
        np.testing.assert_array_equal(x, [1, 0, 0, 1])

    def test_gaussian_mutation_is_clipped(self, zdt1_problem, rng):
        for _ in range(20):
            child = zdt1_problem.mutate(np.ones(5), rng, 1.0)
            assert np.all(child >= 0.0) and np.all(child <= 1.0)

    def test_crossover_mixes_parents(self, zdt1_problem, rng):
        a = np.zeros(5)
        b = np.ones(5)
        child = zdt1_problem.crossover(a, b, rng)
        assert child.shape == (5,)
        assert np.all((child == 0.0) | (child == 1.0))
