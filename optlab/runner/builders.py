"""
Builders that assemble `Runner` instances.
"""

import random
from typing import Any, Mapping, Optional

from loguru import logger

from .entry import Entry, Label
from .factories import AlgorithmFactory, LoaderFactory, ProblemFactory
from .runner import Runner


class RunnerBuilder:
    """
    Common part of the builders: listeners, replications and shuffling.

    By default each entry runs once, in the order it was added.
    """

    def __init__(self):
        self.entries: list[Entry] = []
        self.listeners: list[Any] = []
        self.replications = 1
        self.shuffle = False
        self.shuffle_seed: Optional[int] = None

    def add_listener(self, listener) -> None:
        self.listeners.append(listener)

    def set_replications(self, replications: int) -> None:
        """
        Number of independent runs of every entry. Values below 1 are
        ignored.
        """
        if replications > 0:
            self.replications = replications

    def set_shuffle(self, shuffle: bool, seed: Optional[int] = None) -> None:
        """Run the entries in a random order (reproducible with `seed`)."""
        self.shuffle = shuffle
        self.shuffle_seed = seed

    def build(self) -> Runner:
        entries = [entry for _ in range(self.replications) for entry in self.entries]
        if self.shuffle:
            random.Random(self.shuffle_seed).shuffle(entries)
        logger.debug(
            f"{type(self).__name__} built a runner with {len(entries)} entries "
            f"({len(self.entries)} x {self.replications} replications, shuffle={self.shuffle})"
        )
        return Runner(entries, self.listeners)


class SimpleRunnerBuilder(RunnerBuilder):
    """
    Builder where each entry is given its factories directly.
    """

    def add_entry(
            self,
            problem: ProblemFactory,
            algorithm: AlgorithmFactory,
            loader: LoaderFactory,
            parameters: Optional[Mapping[str, Any]] = None,
            label: Optional[Label] = None,
    ) -> Entry:
        entry = Entry(label or Label(), problem, algorithm, loader, dict(parameters or {}))
        self.entries.append(entry)
        return entry


class BatchRunnerBuilder(RunnerBuilder):
    """
    Builder where problem, algorithm and loader factories are registered
    under identifiers and entries combine identifiers. Large sets of
    entries can be created this way.

    Each registration may carry algorithm parameters. The parameters of an
    entry are merged in this order, later ones overriding earlier ones:
    algorithm, problem, loader, entry.
    """

    def __init__(self):
        super().__init__()
        self.problems: dict[str, tuple[ProblemFactory, dict[str, Any]]] = {}
        self.algorithms: dict[str, tuple[AlgorithmFactory, dict[str, Any]]] = {}
        self.loaders: dict[str, tuple[LoaderFactory, dict[str, Any]]] = {}

    def register_problem(
            self,
            identifier: str,
            factory: ProblemFactory,
            parameters: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.problems[identifier] = (factory, dict(parameters or {}))

    def register_algorithm(
            self,
            identifier: str,
            factory: AlgorithmFactory,
            parameters: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.algorithms[identifier] = (factory, dict(parameters or {}))

    def register_loader(
            self,
            identifier: str,
            factory: LoaderFactory,
            parameters: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.loaders[identifier] = (factory, dict(parameters or {}))

    def add_entry(
            self,
            problem: str,
            algorithm: str,
            loader: str,
            parameters: Optional[Mapping[str, Any]] = None,
            label: Optional[Label] = None,
    ) -> Entry:
        """
        Add an entry made of registered identifiers. The default label is
        the three identifiers.

        Raises
        ------
        ValueError
            If an identifier does not match any registered factory.
        """
        if problem not in self.problems:
            raise ValueError(f'The value "{problem}" does not match any problem factory registered in the builder.')
        if algorithm not in self.algorithms:
            raise ValueError(f'The value "{algorithm}" does not match any algorithm factory registered in the builder.')
        if loader not in self.loaders:
            raise ValueError(f'The value "{loader}" does not match any loader factory registered in the builder.')

        problem_factory, problem_params = self.problems[problem]
        algorithm_factory, algorithm_params = self.algorithms[algorithm]
        loader_factory, loader_params = self.loaders[loader]

        params: dict[str, Any] = {}
        params.update(algorithm_params)
        params.update(problem_params)
        params.update(loader_params)
        params.update(parameters or {})

        entry = Entry(
            label or Label(problem, algorithm, loader),
            problem_factory,
            algorithm_factory,
            loader_factory,
            params,
        )
        self.entries.append(entry)
        return entry
