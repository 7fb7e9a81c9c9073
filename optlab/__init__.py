"""Convenience exports for the core abstractions, optimizers, tasks, runner and utilities."""

from .core import (
    Algorithm,
    DictLoader,
    EpsilonDominance,
    JsonFileLoader,
    NoDominance,
    ParetoArchive,
    ParetoDominance,
    Problem,
    Relation,
    UnboundedArchive,
)
from .optimizers import GAOptimizer, OptunaNSGA2Optimizer, RandomSearchOptimizer
from .runner import BatchRunnerBuilder, Runner, RunnerListener, SimpleRunnerBuilder
from .tasks import KnapsackProblem, ZDT1Problem
from .utils import save_pareto_front, set_global_seed, setup_logger

__all__ = [
    "Algorithm",
    "DictLoader",
    "EpsilonDominance",
    "JsonFileLoader",
    "NoDominance",
    "ParetoArchive",
    "ParetoDominance",
    "Problem",
    "Relation",
    "UnboundedArchive",
    "GAOptimizer",
    "OptunaNSGA2Optimizer",
    "RandomSearchOptimizer",
    "BatchRunnerBuilder",
    "Runner",
    "RunnerListener",
    "SimpleRunnerBuilder",
    "KnapsackProblem",
    "ZDT1Problem",
    "save_pareto_front",
    "set_global_seed",
    "setup_logger",
]
