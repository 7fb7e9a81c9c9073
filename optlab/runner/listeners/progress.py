"""
Progress reporting through loguru.
"""

from datetime import datetime

from loguru import logger

from .base import RunnerListener


class ProgressLogger(RunnerListener):
    """
    Logs a progress line when the runner starts, after every finished or
    failed entry, and when the runner finishes.
    """

    def __init__(self, level: str = "INFO"):
        self.level = level
        self.total = 0
        self.succeeded = 0
        self.failed = 0

    @property
    def finished(self) -> int:
        return self.succeeded + self.failed

    def _log(self, when: float, message: str) -> None:
        percent = 100.0 * self.finished / self.total if self.total else 100.0
        stamp = datetime.fromtimestamp(when).strftime("%Y-%m-%d %H:%M:%S")
        logger.log(
            self.level,
            f"[{stamp}] Progress {percent:6.2f}% ({self.finished:6d} finished, "
            f"{self.succeeded:6d} success, {self.failed:6d} failed) -> {message}",
        )

    def on_runner_starting(self, runner, when):
        self.total = runner.count_entries()
        self.succeeded = 0
        self.failed = 0
        self._log(when, "Starting...")

    def on_runner_finishing(self, runner, when):
        self._log(when, "All entries have been finished")

    def on_entry_finishing(self, runner, when, run_id, label, problem, algorithm,
                           parameters, data, archive, elapsed_ms):
        self.succeeded += 1
        self._log(when, f"Entry {run_id} finished in {elapsed_ms:.1f} ms with {len(archive)} solutions")

    def on_entry_failure(self, runner, when, run_id, label, problem, algorithm,
                         parameters, data, error, elapsed_ms):
        self.failed += 1
        self._log(when, f"Entry {run_id} failed: {type(error).__name__}: {error}")
