"""Base class of optimization problems."""

import abc
from typing import Any, MutableSequence, Optional

from ..exceptions import DimensionError
from .loader import Loader


class Problem(abc.ABC):
    """
    Definition of a multi-objective optimization problem.

    All objectives are minimized. A problem is initialized once from a
    `Loader`; afterwards its rules do not change.
    """

    def __init__(self):
        self._loader: Optional[Loader] = None

    @abc.abstractmethod
    def count_objectives(self) -> int:
        raise NotImplementedError

    @abc.abstractmethod
    def objective_names(self) -> list[str]:
        """Names of the objectives, parallel to the objective indices."""
        raise NotImplementedError

    @abc.abstractmethod
    def _initialize(self, loader: Loader) -> None:
        """
        Read the instance from `loader`; raises AttributeNotFoundError when a
        required attribute is missing.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def _check_feasibility(self, solution: Any) -> None:
        """
        Raise FeasibilityError describing the violated constraint if
        `solution` is not feasible.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def _evaluate(self, solution: Any, index: int) -> float:
        raise NotImplementedError

    def evaluate(self, solution: Any, index: Optional[int] = None, out: Optional[MutableSequence[float]] = None):
        """
        Evaluate a solution.

        Parameters
        ----------
        solution : Any
            Candidate solution.
        index : int, optional
            Objective to evaluate. When omitted all objectives are evaluated.
        out : mutable sequence of float, optional
            Buffer receiving every objective value (list or numpy array of
            length `count_objectives()`). Only valid without `index`.

        Returns
        -------
        float or list[float] or `out`
            The value of objective `index`, `out` filled in index order, or a
            new list holding every objective value.

        Raises
        ------
        DimensionError
            If `out` does not have one slot per objective.
        """
        n_obj = self.count_objectives()
        if index is None:
            if out is None:
                return [self.evaluate(solution, i) for i in range(n_obj)]
            if len(out) != n_obj:
                raise DimensionError(
                    f"The buffer length ({len(out)}) should be equal to the number of objectives ({n_obj})."
                )
            for i in range(n_obj):
                out[i] = self.evaluate(solution, i)
            return out

        if out is not None:
            raise ValueError("`out` can not be combined with an objective index")
        if index < 0 or index >= n_obj:
            raise IndexError(f"Objective index should range from 0 to {n_obj - 1}, got {index}.")
        return float(self._evaluate(solution, index))

    def check_feasibility(self, solution: Any) -> None:
        self._check_feasibility(solution)

    def is_feasible(self, solution: Any) -> bool:
        """
        Return True if `solution` passes `check_feasibility`. Any error,
        not only FeasibilityError, counts as infeasible.
        """
        try:
            self.check_feasibility(solution)
        except Exception:
            return False
        return True

    def initialize(self, loader: Loader) -> None:
        self._initialize(loader)
        self._loader = loader

    def is_initialized(self) -> bool:
        return self._loader is not None

    @property
    def loader(self) -> Optional[Loader]:
        """Loader used by `initialize`, or None before initialization."""
        return self._loader
