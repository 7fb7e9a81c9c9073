"""
Utility helpers for logging and saving experiment outputs.

This module provides:
- A convenience function to configure the global loguru logger
  with console and optional file sinks.
- JSON writers for run records and solution archives.
"""

import json
from pathlib import Path
from typing import Any, Optional, Union

import numpy as np
from loguru import logger

from ..core.archive import SolutionArchive


def setup_logger(
        log_dir: str,
        run_name: str,
        console_level: str = "INFO",
        file_level: str = "DEBUG",
) -> None:
    """
    Configure the global loguru logger.

    Parameters
    ----------
    log_dir : str
        Directory where a run-specific log file will be placed.
    run_name : str
        Name of the run, used to name the log file.
    console_level : str, optional
        Logging level for the console sink (default: "INFO").
    file_level : str, optional
        Logging level for the file sink (default: "DEBUG").
    """
    path = Path(log_dir)
    path.mkdir(parents=True, exist_ok=True)
    log_path = path / f"{run_name}.log"

    # Reset any previous configuration (important when reusing in multiple scripts)
    logger.remove()

    # Console sink
    logger.add(
        sink=lambda msg: print(msg, end=""),
        level=console_level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
               "<level>{level: <8}</level> | "
               "<yellow>{thread.name}</yellow> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
               "<level>{message}</level>",
    )

    # File sink; enqueue keeps lines whole when worker threads log together
    logger.add(
        str(log_path),
        level=file_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {thread.name} | "
               "{name}:{function}:{line} - {message}",
        rotation="10 MB",
        retention=10,
        enqueue=True,
    )

    logger.info(f"Logger initialized. Log file: {log_path}")


def to_serializable(obj: Any) -> Any:
    """
    Recursively convert common non-JSON-serializable types
    (NumPy scalars, arrays, sets, mappings, etc.) to plain
    Python types that `json.dump` can handle.
    """
    # Basic primitives are fine
    if isinstance(obj, (str, int, float, bool)) or obj is None:
        return obj

    # Mappings (dict, MappingProxyType, ...)
    if hasattr(obj, "items"):
        return {str(k): to_serializable(v) for k, v in obj.items()}

    # List / tuple
    if isinstance(obj, (list, tuple)):
        return [to_serializable(v) for v in obj]

    # NumPy scalar
    if isinstance(obj, (np.integer,)):
        return int(obj)
    if isinstance(obj, (np.floating,)):
        return float(obj)
    if isinstance(obj, (np.bool_,)):
        return bool(obj)

    # NumPy array
    if isinstance(obj, np.ndarray):
        return obj.tolist()

    # Set -> list
    if isinstance(obj, (set, frozenset)):
        return [to_serializable(v) for v in obj]

    # Fallback: try direct JSON dump, otherwise string
    try:
        json.dumps(obj)
        return obj
    except TypeError:
        return str(obj)


def archive_to_records(archive: SolutionArchive, problem=None) -> list[dict[str, Any]]:
    """
    Describe an archive as a list of JSON-safe dicts.

    Each record has the form:
        {"solution": ..., "evaluation": [...], "feasible": bool | None}

    `feasible` is None when no problem is given.
    """
    records = []
    for entry in archive:
        records.append({
            "solution": to_serializable(entry.solution),
            "evaluation": to_serializable(list(entry.evaluation)),
            "feasible": problem.is_feasible(entry.solution) if problem is not None else None,
        })
    return records


def save_json(data: Any, out_path: Union[str, Path]) -> None:
    """
    Save any data to JSON, coercing types to be JSON-safe.
    """
    path = Path(out_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    clean = to_serializable(data)
    with path.open("w", encoding="utf-8") as f:
        json.dump(clean, f, indent=2)


def save_pareto_front(archive: SolutionArchive, path: Union[str, Path], problem: Optional[Any] = None) -> None:
    """
    Save the entries of an archive as JSON.
    """
    save_json(archive_to_records(archive, problem), path)
    logger.info(f"Saved Pareto front with {len(archive)} entries to {path}")
