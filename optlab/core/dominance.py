"""
Dominance criteria over objective vectors.

All criteria assume minimization: for every element, lower is better.
A criterion compares a first vector against a second one and answers from
the first vector's point of view with a `Relation`:

- DOMINATED:   the first is nowhere better and somewhere worse;
- EQUIVALENT:  the vectors are equal (within the criterion's precision);
- INDIFFERENT: each vector is better somewhere;
- DOMINANT:    the first is nowhere worse and somewhere better.
"""

import abc
import enum
from typing import Sequence

from ..exceptions import DimensionError

DEFAULT_PRECISION = 1e-6


class Relation(enum.Enum):
    """Relation of a first vector to a second one."""

    DOMINATED = "dominated"
    EQUIVALENT = "equivalent"
    INDIFFERENT = "indifferent"
    DOMINANT = "dominant"

    def inverse(self) -> "Relation":
        """
        Relation of the second vector to the first one.
        """
        if self is Relation.DOMINATED:
            return Relation.DOMINANT
        if self is Relation.DOMINANT:
            return Relation.DOMINATED
        return self


def compare_numbers(a: float, b: float, precision: float = DEFAULT_PRECISION) -> int:
    """
    Three-way comparison with a least significant difference.

    Returns 0 if ``a == b`` or ``|a - b| < precision``, -1 if ``a < b`` and
    1 otherwise.
    """
    if a == b or abs(a - b) < precision:
        return 0
    elif a < b:
        return -1
    else:
        return 1


def _check_dimensions(first: Sequence[float], second: Sequence[float]) -> None:
    if len(first) != len(second):
        raise DimensionError(
            f"Incompatible dimension (len(first)={len(first)}, "
            f"len(second)={len(second)})"
        )


class Dominance(abc.ABC):
    """
    Abstract dominance criterion.
    """

    @abc.abstractmethod
    def compare(self, first: Sequence[float], second: Sequence[float]) -> Relation:
        """
        Return the relation of `first` to `second`.

        Raises
        ------
        DimensionError
            If the vectors have different lengths.
        """
        raise NotImplementedError


class NoDominance(Dominance):
    """
    Ignores the values: every pair of same-length vectors is INDIFFERENT.
    """

    def compare(self, first: Sequence[float], second: Sequence[float]) -> Relation:
        _check_dimensions(first, second)
        return Relation.INDIFFERENT


class ParetoDominance(Dominance):
    """
    Pareto dominance with a least significant difference.

    Two elements whose difference is below `precision` count as equal.
    """

    def __init__(self, precision: float = DEFAULT_PRECISION):
        self.precision = precision

    def compare(self, first: Sequence[float], second: Sequence[float]) -> Relation:
        _check_dimensions(first, second)

        better = False
        worse = False
        for a, b in zip(first, second):
            comp = compare_numbers(a, b, self.precision)
            if comp < 0:
                better = True
            elif comp > 0:
                worse = True

        if not better and not worse:
            return Relation.EQUIVALENT
        elif worse and not better:
            return Relation.DOMINATED
        elif better and not worse:
            return Relation.DOMINANT
        else:
            return Relation.INDIFFERENT

    def __repr__(self) -> str:
        return f"ParetoDominance(precision={self.precision})"


class EpsilonDominance(Dominance):
    """
    Epsilon dominance.

    The first vector is better than the second on element i when
    ``first[i] <= second[i] - epsilon[i]`` (and worse when the same holds
    the other way round). Pure outcomes are returned as such; when the
    vectors are each better somewhere, Pareto dominance on the raw vectors
    decides and an INDIFFERENT answer is reported as EQUIVALENT, so that
    vectors sharing an epsilon box collapse onto each other.
    """

    def __init__(self, epsilon: Sequence[float], precision: float = DEFAULT_PRECISION):
        self.epsilon = [float(e) for e in epsilon]
        self.pareto = ParetoDominance(precision)

    def compare(self, first: Sequence[float], second: Sequence[float]) -> Relation:
        _check_dimensions(first, second)
        if len(first) != len(self.epsilon):
            raise DimensionError(
                f"The vectors must have the length of the epsilon vector "
                f"(len(vectors)={len(first)}, len(epsilon)={len(self.epsilon)})"
            )

        better = False
        worse = False
        for a, b, eps in zip(first, second, self.epsilon):
            if a <= b - eps:
                better = True
            if b <= a - eps:
                worse = True

        if better and not worse:
            return Relation.DOMINANT
        elif worse and not better:
            return Relation.DOMINATED
        elif not better and not worse:
            return Relation.INDIFFERENT

        relation = self.pareto.compare(first, second)
        if relation is Relation.INDIFFERENT:
            return Relation.EQUIVALENT
        return relation

    def __repr__(self) -> str:
        return f"EpsilonDominance(epsilon={self.epsilon}, precision={self.pareto.precision})"
