"""
Concurrent execution of entries.

The runner executes every entry in a thread pool. Each entry builds its own
problem, algorithm and loader, so runs share no state; the only point of
contact between workers is the notification bus, which delivers lifecycle
events to the listeners one at a time.
"""

import itertools
import os
import time
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Any, Iterable, Optional, Sequence

from loguru import logger

from .entry import Entry
from .events import (
    EntryFailure,
    EntryFinishing,
    EntryStarting,
    NotificationBus,
    RunnerFinishing,
    RunnerStarting,
)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


class Runner:
    """
    Run a list of entries and report their outcome to listeners.

    Instead of creating a runner by hand, builders such as
    `SimpleRunnerBuilder` and `BatchRunnerBuilder` are usually more
    convenient.
    """

    def __init__(self, entries: Iterable[Entry], listeners: Optional[Sequence[Any]] = None):
        """
        Parameters
        ----------
        entries : iterable of Entry
            Entries to run, in dispatch order.
        listeners : sequence of RunnerListener, optional
            Listeners notified of the lifecycle events. They are kept in
            `listeners`, which can still be extended before `run`.
        """
        self.entries: list[Entry] = list(entries)
        self.listeners = list(listeners or [])
        self._bus = NotificationBus(self.listeners)

    def count_entries(self) -> int:
        return len(self.entries)

    def run(self, n_workers: Optional[int] = None) -> None:
        """
        Run every entry and block until all of them are done.

        Parameters
        ----------
        n_workers : int, optional
            Number of worker threads. None or a value below 1 means
            ``os.cpu_count()``.

        A failing entry is reported through `on_entry_failure` and never
        interrupts the other entries; this method does not raise because of
        an entry. There is no timeout: a run that never returns blocks the
        whole batch.
        """
        if n_workers is None or n_workers < 1:
            n_workers = os.cpu_count() or 1

        logger.info(f"Runner starting: {len(self.entries)} entries on {n_workers} workers")
        self._bus.publish(RunnerStarting(self, time.time()))

        run_ids = itertools.count(1)
        with ThreadPoolExecutor(max_workers=n_workers, thread_name_prefix="optlab-runner") as executor:
            futures = [
                executor.submit(self._run_entry, entry, next(run_ids))
                for entry in self.entries
            ]
            wait(futures)

        self._bus.publish(RunnerFinishing(self, time.time()))
        logger.info("Runner finished: all entries have been run")

    def _run_entry(self, entry: Entry, run_id: int) -> None:
        """
        Execute one entry and publish its lifecycle events.
        """
        problem = None
        algorithm = None
        parameters: dict[str, Any] = {}
        data: dict[str, Any] = {}
        started_at: Optional[float] = None

        try:
            problem = entry.problem_factory.create()
            algorithm = entry.algorithm_factory.create()
            loader = entry.loader_factory.create()

            problem.initialize(loader)

            parameters.update(entry.parameters)

            # Listeners see the algorithm before its parameters are bound
            self._bus.publish(EntryStarting(
                self, time.time(), run_id, entry.label, problem, algorithm, parameters,
            ))

            for name, value in parameters.items():
                if not algorithm.set_parameter(name, value):
                    logger.warning(f"[Entry {run_id}] Parameter '{name}' could not be set on {type(algorithm).__name__}")

            logger.debug(f"[Entry {run_id}] Solving {entry.label}")
            started_at = time.perf_counter()
            archive = algorithm.solve(problem, data)
            elapsed_ms = _elapsed_ms(started_at)

            self._bus.publish(EntryFinishing(
                self, time.time(), run_id, entry.label, problem, algorithm,
                parameters, data, archive, elapsed_ms,
            ))

        except Exception as error:
            elapsed_ms = _elapsed_ms(started_at) if started_at is not None else None
            logger.debug(f"[Entry {run_id}] Failed with {type(error).__name__}: {error}")
            self._bus.publish(EntryFailure(
                self, time.time(), run_id, entry.label, problem, algorithm,
                parameters, data, error, elapsed_ms,
            ))
