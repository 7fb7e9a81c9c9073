"""
Exception hierarchy shared by the core, the loaders and the runner.
"""

from pathlib import Path
from typing import Optional, Union


class OptLabError(Exception):
    """Base class for all errors raised by optlab."""


class DimensionError(OptLabError, ValueError):
    """
    Two vectors that must share a length do not (objective vectors,
    epsilon vectors, evaluation buffers).
    """


class FeasibilityError(OptLabError):
    """
    A solution violates a problem constraint.

    The message is a human-readable description of the violated constraint.
    """


class AttributeNotFoundError(OptLabError, LookupError):
    """A loader does not hold a required attribute."""

    def __init__(self, key: str, message: Optional[str] = None):
        self.key = key
        super().__init__(
            message or f'There is no attribute represented by the key "{key}"'
        )


class FactoryError(OptLabError):
    """
    A factory could not build its object. The original error is chained
    as ``__cause__``.
    """


class PathNotFoundError(OptLabError, FileNotFoundError):
    """An input file handed to a file loader does not exist."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Path not found: {self.path}")
