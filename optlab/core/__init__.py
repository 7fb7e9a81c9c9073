"""Exports for the core abstractions: dominance, archives, loaders, problems and algorithms."""

from .algorithm import Algorithm, BindResult, positive_int
from .archive import Entry, ParetoArchive, SolutionArchive, UnboundedArchive
from .dominance import (
    DEFAULT_PRECISION,
    Dominance,
    EpsilonDominance,
    NoDominance,
    ParetoDominance,
    Relation,
    compare_numbers,
)
from .loader import DictLoader, FileLoader, JsonFileLoader, Loader
from .problem import Problem

__all__ = [
    "Algorithm",
    "BindResult",
    "positive_int",
    "Entry",
    "ParetoArchive",
    "SolutionArchive",
    "UnboundedArchive",
    "DEFAULT_PRECISION",
    "Dominance",
    "EpsilonDominance",
    "NoDominance",
    "ParetoDominance",
    "Relation",
    "compare_numbers",
    "DictLoader",
    "FileLoader",
    "JsonFileLoader",
    "Loader",
    "Problem",
]
