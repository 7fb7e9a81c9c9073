"""Tests for the concurrent runner and its notifications."""

import pytest

from optlab.core.archive import ParetoArchive
from optlab.exceptions import AttributeNotFoundError, FactoryError
from optlab.runner import (
    DictLoaderFactory,
    Label,
    ProblemFactory,
    Runner,
    RunnerListener,
    SimpleRunnerBuilder,
)


def broken_problem():
    raise RuntimeError("no problem today")


class ExplodingListener(RunnerListener):
    """Raises from every callback."""

    def __init__(self):
        self.calls = 0

    def _explode(self, *args):
        self.calls += 1
        raise RuntimeError("listener exploded")

    on_runner_starting = _explode
    on_runner_finishing = _explode
    on_entry_starting = _explode
    on_entry_finishing = _explode
    on_entry_failure = _explode


def build_runner(entries, listeners, replications=1):
    builder = SimpleRunnerBuilder()
    for problem, algorithm, loader, parameters in entries:
        builder.add_entry(problem, algorithm, loader, parameters)
    for listener in listeners:
        builder.add_listener(listener)
    builder.set_replications(replications)
    return builder.build()


class TestRunner:
    """Tests for Runner.run."""

    @pytest.mark.parametrize("n_entries, n_workers", [(1, 1), (6, 1), (8, 3), (5, 16)])
    def test_every_entry_is_reported_once(self, recorder, problem_factory, algorithm_factory,
                                          loader_factory, n_entries, n_workers):
        entries = [(problem_factory, algorithm_factory, loader_factory, {"delay": 0.005})]
        runner = build_runner(entries, [recorder], replications=n_entries)
        runner.run(n_workers)

        names = [e[0] for e in recorder.events]
        assert names[0] == "runner_starting"
        assert names[-1] == "runner_finishing"

        finished = [e[1] for e in recorder.named("entry_finishing")]
        assert sorted(finished) == list(range(1, n_entries + 1))
        assert recorder.named("entry_failure") == []

        starting = [e[1] for e in recorder.named("entry_starting")]
        assert sorted(starting) == list(range(1, n_entries + 1))
        for run_id in finished:
            start = next(i for i, e in enumerate(recorder.events) if e[:2] == ("entry_starting", run_id))
            end = next(i for i, e in enumerate(recorder.events) if e[:2] == ("entry_finishing", run_id))
            assert start < end

    def test_notifications_never_overlap(self, recorder, problem_factory, algorithm_factory, loader_factory):
        entries = [(problem_factory, algorithm_factory, loader_factory, {})]
        build_runner(entries, [recorder], replications=12).run(4)
        assert recorder.max_active == 1

    def test_default_worker_count(self, recorder, problem_factory, algorithm_factory, loader_factory):
        entries = [(problem_factory, algorithm_factory, loader_factory, {})]
        build_runner(entries, [recorder], replications=3).run()
        assert len(recorder.named("entry_finishing")) == 3

    def test_finishing_payload(self, recorder, problem_factory, algorithm_factory, loader_factory):
        runner = build_runner(
            [(problem_factory, algorithm_factory, loader_factory, {"n_points": 4, "bogus": 1})],
            [recorder],
        )
        runner.run(1)

        (_, run_id, payload), = recorder.named("entry_finishing")
        assert run_id == 1
        assert isinstance(payload["archive"], ParetoArchive)
        assert len(payload["archive"]) == 4
        assert payload["data"] == {"points": 4}
        assert payload["parameters"] == {"n_points": 4, "bogus": 1}
        assert payload["algorithm"].n_points == 4
        assert payload["problem"].is_initialized()
        assert payload["elapsed_ms"] >= 0.0
        assert payload["label"] == Label()

    def test_problem_factory_failure(self, recorder, algorithm_factory, loader_factory):
        runner = build_runner(
            [(ProblemFactory(broken_problem), algorithm_factory, loader_factory, {"n_points": 1})],
            [recorder],
        )
        runner.run(2)

        assert recorder.named("entry_starting") == []
        (_, run_id, payload), = recorder.named("entry_failure")
        assert run_id == 1
        assert payload["problem"] is None
        assert payload["algorithm"] is None
        assert payload["elapsed_ms"] is None
        assert isinstance(payload["error"], FactoryError)
        assert isinstance(payload["error"].__cause__, RuntimeError)

    def test_initialization_failure(self, recorder, problem_factory, algorithm_factory):
        runner = build_runner(
            [(problem_factory, algorithm_factory, DictLoaderFactory({}), {})],
            [recorder],
        )
        runner.run(1)

        (_, _, payload), = recorder.named("entry_failure")
        assert isinstance(payload["error"], AttributeNotFoundError)
        assert payload["problem"] is not None
        assert payload["algorithm"] is not None
        assert payload["elapsed_ms"] is None

    def test_solve_failure(self, recorder, problem_factory, algorithm_factory, loader_factory):
        runner = build_runner(
            [(problem_factory, algorithm_factory, loader_factory, {"fail": True})],
            [recorder],
        )
        runner.run(1)

        assert len(recorder.named("entry_starting")) == 1
        (_, _, payload), = recorder.named("entry_failure")
        assert str(payload["error"]) == "solve failed"
        assert payload["elapsed_ms"] is not None
        assert payload["elapsed_ms"] >= 0.0
        assert payload["algorithm"].fail is True

    def test_failures_do_not_stop_other_entries(self, recorder, problem_factory, algorithm_factory,
                                                loader_factory):
        runner = build_runner(
            [
                (problem_factory, algorithm_factory, loader_factory, {"fail": True}),
                (ProblemFactory(broken_problem), algorithm_factory, loader_factory, {}),
                (problem_factory, algorithm_factory, loader_factory, {}),
            ],
            [recorder],
            replications=2,
        )
        runner.run(3)

        assert len(recorder.named("entry_failure")) == 4
        assert len(recorder.named("entry_finishing")) == 2

    def test_listener_errors_are_isolated(self, recorder, problem_factory, algorithm_factory, loader_factory):
        exploding = ExplodingListener()
        runner = build_runner(
            [(problem_factory, algorithm_factory, loader_factory, {})],
            [exploding, recorder],
            replications=3,
        )
        runner.run(2)

        # 2 runner events + 3 starting + 3 finishing
        assert exploding.calls == 8
        assert len(recorder.events) == 8
        assert len(recorder.named("entry_finishing")) == 3

    def test_listeners_added_after_construction(self, recorder, problem_factory, algorithm_factory,
                                                loader_factory):
        runner = build_runner([(problem_factory, algorithm_factory, loader_factory, {})], [])
        runner.listeners.append(recorder)
        runner.run(1)

        assert [e[0] for e in recorder.events] == [
            "runner_starting", "entry_starting", "entry_finishing", "runner_finishing",
        ]

    def test_empty_runner(self, recorder):
        Runner([], [recorder]).run(2)
        assert [e[0] for e in recorder.events] == ["runner_starting", "runner_finishing"]
