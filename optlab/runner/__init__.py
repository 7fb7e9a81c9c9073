"""Exports for the execution harness."""

from .builders import BatchRunnerBuilder, RunnerBuilder, SimpleRunnerBuilder
from .entry import Entry, Label
from .events import (
    EntryFailure,
    EntryFinishing,
    EntryStarting,
    NotificationBus,
    RunnerFinishing,
    RunnerStarting,
)
from .factories import (
    AlgorithmFactory,
    DictLoaderFactory,
    Factory,
    FileLoaderFactory,
    LoaderFactory,
    ProblemFactory,
)
from .listeners import JsonReport, ProgressLogger, RunnerListener
from .runner import Runner

__all__ = [
    "BatchRunnerBuilder",
    "RunnerBuilder",
    "SimpleRunnerBuilder",
    "Entry",
    "Label",
    "EntryFailure",
    "EntryFinishing",
    "EntryStarting",
    "NotificationBus",
    "RunnerFinishing",
    "RunnerStarting",
    "AlgorithmFactory",
    "DictLoaderFactory",
    "Factory",
    "FileLoaderFactory",
    "LoaderFactory",
    "ProblemFactory",
    "JsonReport",
    "ProgressLogger",
    "RunnerListener",
    "Runner",
]
