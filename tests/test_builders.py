"""Tests for runner builders."""

import pytest

from optlab.runner import BatchRunnerBuilder, DictLoaderFactory, Label, SimpleRunnerBuilder


@pytest.fixture
def batch_builder(problem_factory, algorithm_factory):
    builder = BatchRunnerBuilder()
    builder.register_problem("points", problem_factory, {"n_points": 2, "delay": 0.1})
    builder.register_algorithm("fixed", algorithm_factory, {"n_points": 1, "fail": False, "delay": 0.2})
    builder.register_loader("unit", DictLoaderFactory({"scale": 1.0}), {"delay": 0.3})
    return builder


class TestBatchRunnerBuilder:
    """Tests for BatchRunnerBuilder."""

    def test_parameter_precedence(self, batch_builder):
        entry = batch_builder.add_entry("points", "fixed", "unit")
        assert dict(entry.parameters) == {"n_points": 2, "fail": False, "delay": 0.3}

        entry = batch_builder.add_entry("points", "fixed", "unit", {"delay": 0.0, "extra": 1})
        assert dict(entry.parameters) == {"n_points": 2, "fail": False, "delay": 0.0, "extra": 1}

    def test_default_label(self, batch_builder):
        entry = batch_builder.add_entry("points", "fixed", "unit")
        assert entry.label == Label("points", "fixed", "unit")

        custom = Label("p", "a", "l")
        assert batch_builder.add_entry("points", "fixed", "unit", label=custom).label is custom

    @pytest.mark.parametrize(
        "problem, algorithm, loader, missing",
        [
            ("nope", "fixed", "unit", "nope"),
            ("points", "nope", "unit", "nope"),
            ("points", "fixed", "nope", "nope"),
        ],
    )
    def test_unknown_identifier(self, batch_builder, problem, algorithm, loader, missing):
        with pytest.raises(ValueError, match=f'"{missing}"'):
            batch_builder.add_entry(problem, algorithm, loader)
        assert batch_builder.entries == []

    def test_entry_parameters_are_read_only(self, batch_builder):
        entry = batch_builder.add_entry("points", "fixed", "unit")
        with pytest.raises(TypeError):
            entry.parameters["delay"] = 1.0


class TestRunnerBuilder:
    def test_replications(self, problem_factory, algorithm_factory, loader_factory):
        builder = SimpleRunnerBuilder()
        builder.add_entry(problem_factory, algorithm_factory, loader_factory, label=Label("a"))
        builder.add_entry(problem_factory, algorithm_factory, loader_factory, label=Label("b"))
        builder.set_replications(3)
        runner = builder.build()
        assert runner.count_entries() == 6
        assert [e.label.problem for e in runner.entries] == ["a", "b"] * 3

    def test_non_positive_replications_are_ignored(self, problem_factory, algorithm_factory, loader_factory):
        builder = SimpleRunnerBuilder()
        builder.add_entry(problem_factory, algorithm_factory, loader_factory)
        builder.set_replications(2)
        builder.set_replications(0)
        assert builder.replications == 2
        assert builder.build().count_entries() == 2

    def test_shuffle_is_reproducible(self, problem_factory, algorithm_factory, loader_factory):
        builder = SimpleRunnerBuilder()
        for name in "abcdefgh":
            builder.add_entry(problem_factory, algorithm_factory, loader_factory, label=Label(name))
        builder.set_shuffle(True, seed=7)

        first = [e.label.problem for e in builder.build().entries]
        second = [e.label.problem for e in builder.build().entries]
        assert first == second
        assert sorted(first) == list("abcdefgh")
        assert [e.label.problem for e in builder.entries] == list("abcdefgh")

    def test_listeners_are_passed(self, recorder, problem_factory, algorithm_factory, loader_factory):
        builder = SimpleRunnerBuilder()
        builder.add_entry(problem_factory, algorithm_factory, loader_factory, {"n_points": 2})
        builder.add_listener(recorder)
        runner = builder.build()
        assert runner.listeners == [recorder]
        assert dict(runner.entries[0].parameters) == {"n_points": 2}
        assert runner.entries[0].label == Label()
