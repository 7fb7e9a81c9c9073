"""
Run descriptors executed by the `Runner`.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .factories import AlgorithmFactory, LoaderFactory, ProblemFactory


@dataclass(frozen=True)
class Label:
    """
    Names of the problem, the algorithm and the loader (usually the instance
    name) of an entry. Any of them may be None.
    """

    problem: Optional[str] = None
    algorithm: Optional[str] = None
    loader: Optional[str] = None

    def __str__(self) -> str:
        return f'(Problem: "{self.problem}", Algorithm: "{self.algorithm}", Loader: "{self.loader}")'


@dataclass(frozen=True)
class Entry:
    """
    One independent run: factories for a fresh problem, algorithm and loader,
    plus the parameters bound to the algorithm before solving.
    """

    label: Label
    problem_factory: ProblemFactory
    algorithm_factory: AlgorithmFactory
    loader_factory: LoaderFactory
    parameters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters or {})))
