"""Exports for runner listeners."""

from .base import RunnerListener
from .json_report import JsonReport
from .progress import ProgressLogger

__all__ = [
    "RunnerListener",
    "JsonReport",
    "ProgressLogger",
]
