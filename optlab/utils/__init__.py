"""Exports for utility helpers used across experiments."""

from .logging_utils import (
    archive_to_records,
    save_json,
    save_pareto_front,
    setup_logger,
    to_serializable,
)
from .seed import set_global_seed

__all__ = [
    "archive_to_records",
    "save_json",
    "save_pareto_front",
    "setup_logger",
    "to_serializable",
    "set_global_seed",
]
