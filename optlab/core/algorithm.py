"""Base class for optimization algorithms"""
import abc
import numbers
from dataclasses import dataclass
from typing import Any, Callable, Optional

import numpy as np
from loguru import logger

from .archive import SolutionArchive
from .problem import Problem


@dataclass(frozen=True)
class BindResult:
    """
    Outcome of binding one named parameter.
    """

    name: str
    ok: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok


def _convert(converter: Callable[[Any], Any], value: Any) -> Any:
    """
    Convert `value` for a parameter declared with `converter`.

    Built-in types are checked strictly (no bool for numbers, no lossy
    float -> int). Any other callable is trusted to validate on its own.
    """
    if converter is int:
        if value is None or isinstance(value, (bool, np.bool_)):
            raise TypeError(f"expected an integer, got {value!r}")
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, numbers.Real):
            as_float = float(value)
            if not as_float.is_integer():
                raise ValueError(f"{value!r} is not integral")
            return int(as_float)
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if converter is float:
        if value is None or isinstance(value, (bool, np.bool_)):
            raise TypeError(f"expected a number, got {value!r}")
        if isinstance(value, numbers.Real):
            return float(value)
        raise TypeError(f"expected a number, got {type(value).__name__}")
    if converter is bool:
        if isinstance(value, (bool, np.bool_)):
            return bool(value)
        raise TypeError(f"expected a boolean, got {type(value).__name__}")
    if converter is str:
        if isinstance(value, str):
            return value
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return converter(value)


def positive_int(value: Any) -> int:
    """Converter for integer parameters that must be at least 1."""
    converted = _convert(int, value)
    if converted < 1:
        raise ValueError(f"expected a positive integer, got {value!r}")
    return converted


class Algorithm(abc.ABC):
    """
    Abstract base class for optimization algorithms.

    Parameters that can be set by name are declared in the class-level
    ``PARAMETERS`` table, mapping the parameter name to a converter. A bound
    value is stored in the instance attribute of the same name. Tables of
    subclasses extend those of their bases.
    """

    PARAMETERS: dict[str, Callable[[Any], Any]] = {}

    @classmethod
    def parameter_table(cls) -> dict[str, Callable[[Any], Any]]:
        table: dict[str, Callable[[Any], Any]] = {}
        for klass in reversed(cls.__mro__):
            table.update(vars(klass).get("PARAMETERS", {}))
        return table

    @abc.abstractmethod
    def _solve(self, problem: Problem, data: dict[str, Any]) -> SolutionArchive:
        """
        Run the optimization and return the archive of candidate solutions.
        Output metrics (iterations, evaluations, ...) go into `data`.
        """
        raise NotImplementedError

    def _bind_parameter(self, name: str, value: Any) -> BindResult:
        """
        Bind one parameter. Subclasses may override this to handle
        parameters outside ``PARAMETERS``.
        """
        table = self.parameter_table()
        if name not in table:
            return BindResult(name, False, f"unknown parameter for {type(self).__name__}")
        try:
            converted = _convert(table[name], value)
        except (TypeError, ValueError) as e:
            return BindResult(name, False, str(e))
        setattr(self, name, converted)
        return BindResult(name, True)

    def set_parameter(self, name: str, value: Any) -> bool:
        """
        Set a parameter by name.

        On failure the previous value is kept and False is returned; this
        method never raises.
        """
        try:
            result = self._bind_parameter(name, value)
        except Exception as e:
            result = BindResult(name, False, f"{type(e).__name__}: {e}")
        if not result.ok:
            logger.debug(f"{type(self).__name__}: parameter '{name}'={value!r} not set ({result.reason})")
        return result.ok

    def set_parameters(self, parameters: dict[str, Any]) -> dict[str, bool]:
        return {name: self.set_parameter(name, value) for name, value in parameters.items()}

    def get_parameters(self) -> dict[str, Any]:
        """Current values of the declared parameters."""
        return {
            name: getattr(self, name, None)
            for name in self.parameter_table()
        }

    def solve(self, problem: Problem, data: Optional[dict[str, Any]] = None) -> SolutionArchive:
        """
        Solve an initialized problem instance.

        Parameters
        ----------
        problem : Problem
            Problem instance to solve.
        data : dict, optional
            Output side channel filled during the run. A new dict is used
            when omitted.

        Returns
        -------
        SolutionArchive
            Candidate solutions found.
        """
        if data is None:
            data = {}
        return self._solve(problem, data)

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.get_parameters().items())
        return f"{type(self).__name__}({params})"
