"""
Global seeding utilities for reproducible experiments.

This module exposes a single helper `set_global_seed` which seeds:
- Python's `random`
- NumPy's legacy global generator

The bundled optimizers draw from their own `numpy.random.Generator`
seeded through their ``seed`` parameter; the global seed covers
user code that relies on the module-level generators.
"""

import random

import numpy as np
from loguru import logger


def set_global_seed(seed: int = 0) -> None:
    """
    Set global random seeds across common libraries.

    Parameters
    ----------
    seed : int, optional
        Seed value for random number generators (default: 0).
    """
    random.seed(seed)
    np.random.seed(seed)
    logger.info(f"Global seed set to {seed}")
