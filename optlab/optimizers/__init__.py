"""Exports for optimizer implementations."""

from .base import VectorOptimizer, epsilon_vector
from .ga import GAOptimizer
from .optuna_nsga2 import OptunaNSGA2Optimizer
from .random_search import RandomSearchOptimizer

__all__ = [
    "VectorOptimizer",
    "epsilon_vector",
    "GAOptimizer",
    "OptunaNSGA2Optimizer",
    "RandomSearchOptimizer",
]
