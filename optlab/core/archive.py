"""
Solution archives for multi-objective optimization.

An archive keeps (solution, evaluation) pairs in insertion order and decides,
for every candidate, whether it enters and which stored entries it evicts.
Evaluations are minimization vectors. The archive stores what it is given
without copying, so callers must not mutate a solution or an evaluation
after adding it.
"""

import abc
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Sequence

from .dominance import Dominance, NoDominance, ParetoDominance, Relation


@dataclass(frozen=True)
class Entry:
    """
    One accepted pair.

    - solution:   opaque candidate solution
    - evaluation: objective values, one per objective (minimization)
    """

    solution: Any
    evaluation: Sequence[float]


class SolutionArchive(abc.ABC):
    """
    Base class of all archives.

    Subclasses implement `_accept`, the single place where a candidate is
    judged and the entry list is mutated.
    """

    def __init__(self):
        self.entries: list[Entry] = []

    @abc.abstractmethod
    def _accept(self, entry: Entry, entries: list[Entry]) -> bool:
        """
        Decide whether `entry` enters `entries` and apply the mutation.

        Returns True if the entry has been added.
        """
        raise NotImplementedError

    def add(self, solution: Any, evaluation: Sequence[float]) -> bool:
        """
        Offer a candidate to the archive.

        Parameters
        ----------
        solution : Any
            Candidate solution.
        evaluation : sequence of float
            Objective values of `solution`.

        Returns
        -------
        bool
            True if the candidate has been accepted.
        """
        return self._accept(Entry(solution, evaluation), self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def size(self) -> int:
        return len(self.entries)

    def clear(self) -> None:
        self.entries.clear()

    def is_empty(self) -> bool:
        return not self.entries

    def get_front(self) -> list[Entry]:
        """
        Return a shallow copy of the stored entries, in insertion order.
        """
        return list(self.entries)


class ParetoArchive(SolutionArchive):
    """
    Maintain a set of mutually non-dominated solutions.

    - If the candidate is dominated by a stored entry: discard it.
    - If it is equivalent to a stored entry: discard it, unless
      `accept_equivalent` is set.
    - Else: remove the entries the candidate dominates and append it.

    The whole archive is scanned before anything is removed, so a rejected
    candidate never changes the archive.
    """

    def __init__(
            self,
            dominance: Optional[Dominance] = None,
            accept_equivalent: bool = False,
    ):
        """
        Parameters
        ----------
        dominance : Dominance, optional
            Criterion used to compare evaluations (default: ParetoDominance()).
        accept_equivalent : bool, optional
            Whether candidates equivalent to a stored entry are accepted.
        """
        super().__init__()
        self.dominance = dominance if dominance is not None else ParetoDominance()
        self.accept_equivalent = accept_equivalent

    def _accept(self, entry: Entry, entries: list[Entry]) -> bool:
        dominated_idx = []
        for idx, current in enumerate(entries):
            relation = self.dominance.compare(entry.evaluation, current.evaluation)
            if relation is Relation.DOMINATED:
                return False
            if relation is Relation.EQUIVALENT and not self.accept_equivalent:
                return False
            if relation is Relation.DOMINANT:
                dominated_idx.append(idx)

        for idx in reversed(dominated_idx):
            del entries[idx]
        entries.append(entry)
        return True


class UnboundedArchive(SolutionArchive):
    """
    Accept every candidate whose evaluation has the archive's dimension.
    """

    def __init__(self):
        super().__init__()
        self.dominance = NoDominance()

    def _accept(self, entry: Entry, entries: list[Entry]) -> bool:
        if entries:
            # raises DimensionError on a length mismatch
            self.dominance.compare(entry.evaluation, entries[0].evaluation)
        entries.append(entry)
        return True
