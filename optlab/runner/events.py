"""
Runner lifecycle events and the bus that delivers them to listeners.

Each event is a small immutable record that knows which listener callback
it maps to. The bus delivers one event to every listener while holding a
lock, so listeners never see two notifications at the same time, while the
runs themselves keep executing in parallel.
"""

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping, Optional

from loguru import logger

from ..core.algorithm import Algorithm
from ..core.archive import SolutionArchive
from ..core.problem import Problem
from .entry import Label

if TYPE_CHECKING:
    from .listeners.base import RunnerListener
    from .runner import Runner


@dataclass(frozen=True)
class RunnerStarting:
    runner: "Runner"
    when: float

    def dispatch(self, listener: "RunnerListener") -> None:
        listener.on_runner_starting(self.runner, self.when)


@dataclass(frozen=True)
class RunnerFinishing:
    runner: "Runner"
    when: float

    def dispatch(self, listener: "RunnerListener") -> None:
        listener.on_runner_finishing(self.runner, self.when)


@dataclass(frozen=True)
class EntryStarting:
    """Published before the parameters are bound to the algorithm."""

    runner: "Runner"
    when: float
    run_id: int
    label: Label
    problem: Optional[Problem]
    algorithm: Optional[Algorithm]
    parameters: Mapping[str, Any]

    def dispatch(self, listener: "RunnerListener") -> None:
        listener.on_entry_starting(
            self.runner, self.when, self.run_id, self.label,
            self.problem, self.algorithm, self.parameters,
        )


@dataclass(frozen=True)
class EntryFinishing:
    runner: "Runner"
    when: float
    run_id: int
    label: Label
    problem: Optional[Problem]
    algorithm: Optional[Algorithm]
    parameters: Mapping[str, Any]
    data: Mapping[str, Any]
    archive: SolutionArchive
    elapsed_ms: Optional[float]

    def dispatch(self, listener: "RunnerListener") -> None:
        listener.on_entry_finishing(
            self.runner, self.when, self.run_id, self.label,
            self.problem, self.algorithm, self.parameters,
            self.data, self.archive, self.elapsed_ms,
        )


@dataclass(frozen=True)
class EntryFailure:
    """
    Published when any step of a run raised. `elapsed_ms` is None if the
    failure happened before `solve` started.
    """

    runner: "Runner"
    when: float
    run_id: int
    label: Label
    problem: Optional[Problem]
    algorithm: Optional[Algorithm]
    parameters: Mapping[str, Any]
    data: Mapping[str, Any]
    error: BaseException
    elapsed_ms: Optional[float]

    def dispatch(self, listener: "RunnerListener") -> None:
        listener.on_entry_failure(
            self.runner, self.when, self.run_id, self.label,
            self.problem, self.algorithm, self.parameters,
            self.data, self.error, self.elapsed_ms,
        )


class NotificationBus:
    """
    Delivers events to listeners, one event at a time.

    The bus keeps the list it is given, so listeners appended to it later
    receive the following events.
    """

    def __init__(self, listeners: Optional[list["RunnerListener"]] = None):
        self.listeners = listeners if listeners is not None else []
        self._lock = threading.Lock()

    def publish(self, event) -> None:
        with self._lock:
            for listener in self.listeners:
                try:
                    event.dispatch(listener)
                except Exception:
                    logger.exception(
                        f"Listener {type(listener).__name__} failed on {type(event).__name__}"
                    )
