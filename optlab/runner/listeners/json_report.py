"""
JSON dump of every run.
"""

import traceback
from pathlib import Path
from typing import Any, Optional, Union

from loguru import logger

from ...utils.logging_utils import archive_to_records, save_json
from .base import RunnerListener


def _describe_common(run_id, label, problem, algorithm, parameters, data, elapsed_ms) -> dict[str, Any]:
    return {
        "id": run_id,
        "problem": {
            "name": label.problem,
            "class": type(problem).__name__ if problem is not None else None,
            "objectives": problem.objective_names() if problem is not None and problem.is_initialized() else None,
        },
        "loader": {
            "name": label.loader,
            "class": type(problem.loader).__name__ if problem is not None and problem.loader is not None else None,
        },
        "algorithm": {
            "name": label.algorithm,
            "class": type(algorithm).__name__ if algorithm is not None else None,
            "parameters": dict(parameters),
        },
        "data": dict(data),
        "elapsed_ms": elapsed_ms,
    }


class JsonReport(RunnerListener):
    """
    Writes ``run_<id>.json`` into `out_dir` for every finished or failed
    entry, and a ``runner.json`` summary when the runner finishes.

    Write errors are logged and otherwise ignored so that reporting never
    interferes with the runs.
    """

    def __init__(self, out_dir: Union[str, Path]):
        self.out_dir = Path(out_dir)
        self.started_at: Optional[float] = None
        self.summary: list[dict[str, Any]] = []

    def _write(self, data: Any, filename: str) -> None:
        try:
            save_json(data, self.out_dir / filename)
        except OSError as e:
            logger.warning(f"JsonReport could not write {filename}: {e}")

    def on_runner_starting(self, runner, when):
        self.started_at = when
        self.summary = []

    def on_runner_finishing(self, runner, when):
        self._write(
            {
                "started_at": self.started_at,
                "finished_at": when,
                "entries": runner.count_entries(),
                "succeeded": sum(1 for r in self.summary if r["status"] == "finished"),
                "failed": sum(1 for r in self.summary if r["status"] == "failed"),
                "runs": sorted(self.summary, key=lambda r: r["id"]),
            },
            "runner.json",
        )

    def on_entry_finishing(self, runner, when, run_id, label, problem, algorithm,
                           parameters, data, archive, elapsed_ms):
        record = _describe_common(run_id, label, problem, algorithm, parameters, data, elapsed_ms)
        record["status"] = "finished"
        record["solutions"] = archive_to_records(archive, problem)
        record["n_solutions"] = len(record["solutions"])
        record["n_feasible"] = sum(1 for s in record["solutions"] if s["feasible"])
        self._write(record, f"run_{run_id}.json")
        self.summary.append({"id": run_id, "status": "finished", "label": str(label),
                             "elapsed_ms": elapsed_ms, "n_solutions": record["n_solutions"]})

    def on_entry_failure(self, runner, when, run_id, label, problem, algorithm,
                         parameters, data, error, elapsed_ms):
        record = _describe_common(run_id, label, problem, algorithm, parameters, data, elapsed_ms)
        record["status"] = "failed"
        record["error"] = {
            "class": type(error).__name__,
            "message": str(error),
            "traceback": "".join(traceback.format_exception(type(error), error, error.__traceback__)),
        }
        self._write(record, f"run_{run_id}.json")
        self.summary.append({"id": run_id, "status": "failed", "label": str(label),
                             "elapsed_ms": elapsed_ms, "error": type(error).__name__})
