"""Listener interface of the runner."""

from typing import Any, Mapping, Optional

from ...core.algorithm import Algorithm
from ...core.archive import SolutionArchive
from ...core.problem import Problem
from ..entry import Label


class RunnerListener:
    """
    Receives the runner's lifecycle events. Every callback does nothing by
    default; subclasses override the ones they need.

    Callbacks are called one at a time, but from the worker thread that
    ran the entry, and events of different entries may arrive in any order.
    A slow callback holds up that worker. Timestamps are seconds since the
    epoch; elapsed times are milliseconds.
    """

    def on_runner_starting(self, runner, when: float) -> None:
        pass

    def on_runner_finishing(self, runner, when: float) -> None:
        pass

    def on_entry_starting(
            self,
            runner,
            when: float,
            run_id: int,
            label: Label,
            problem: Optional[Problem],
            algorithm: Optional[Algorithm],
            parameters: Mapping[str, Any],
    ) -> None:
        """Called before the parameters are bound to the algorithm."""

    def on_entry_finishing(
            self,
            runner,
            when: float,
            run_id: int,
            label: Label,
            problem: Optional[Problem],
            algorithm: Optional[Algorithm],
            parameters: Mapping[str, Any],
            data: Mapping[str, Any],
            archive: SolutionArchive,
            elapsed_ms: Optional[float],
    ) -> None:
        pass

    def on_entry_failure(
            self,
            runner,
            when: float,
            run_id: int,
            label: Label,
            problem: Optional[Problem],
            algorithm: Optional[Algorithm],
            parameters: Mapping[str, Any],
            data: Mapping[str, Any],
            error: BaseException,
            elapsed_ms: Optional[float],
    ) -> None:
        """
        `problem` and `algorithm` are None when the failure happened before
        they were built; `elapsed_ms` is None when `solve` never started.
        """
