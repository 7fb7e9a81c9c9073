"""
Deferred construction of problems, algorithms and loaders.

A factory keeps a callable and its arguments and only builds the object
when `create` is called, so that every run gets fresh instances.
"""

from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Union

from ..core.algorithm import Algorithm
from ..core.loader import DictLoader, FileLoader, Loader
from ..core.problem import Problem
from ..exceptions import FactoryError


class Factory:
    """
    Base factory: calls `target(*args, **kwargs)` and checks the result type.
    """

    product: type = object
    kind: str = "object"

    def __init__(self, target: Callable[..., Any], *args: Any, **kwargs: Any):
        if not callable(target):
            raise TypeError(f"{type(self).__name__} target must be callable, got {target!r}")
        self.target = target
        self.args = args
        self.kwargs = kwargs

    @property
    def target_name(self) -> str:
        return getattr(self.target, "__qualname__", repr(self.target))

    def _build(self) -> Any:
        return self.target(*self.args, **self.kwargs)

    def create(self) -> Any:
        """
        Build a new instance.

        Raises
        ------
        FactoryError
            If the construction fails or does not yield the expected type.
            The original error is chained.
        """
        try:
            obj = self._build()
        except Exception as e:
            raise FactoryError(
                f'The {self.kind} factory was not able to create an instance of "{self.target_name}".'
            ) from e
        if not isinstance(obj, self.product):
            raise FactoryError(
                f'The {self.kind} factory expected a {self.product.__name__} from "{self.target_name}", '
                f"got {type(obj).__name__}."
            )
        return obj

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.target_name})"


class ProblemFactory(Factory):
    product = Problem
    kind = "problem"

    def create(self) -> Problem:
        return super().create()


class AlgorithmFactory(Factory):
    product = Algorithm
    kind = "algorithm"

    def create(self) -> Algorithm:
        return super().create()


class LoaderFactory(Factory):
    product = Loader
    kind = "loader"

    def create(self) -> Loader:
        return super().create()


class DictLoaderFactory(LoaderFactory):
    """
    Factory of in-memory loaders; each call gets its own copy of the
    attributes.
    """

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None):
        super().__init__(DictLoader, dict(attributes or {}))


class FileLoaderFactory(LoaderFactory):
    """
    Factory of file loaders. Files are read when `create` is called.
    """

    def __init__(
            self,
            loader_cls: type[FileLoader],
            *paths: Union[str, Path],
            parameters: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(loader_cls)
        self.paths = tuple(Path(p) for p in paths)
        self.parameters = dict(parameters or {})

    def _build(self) -> Loader:
        loader = self.target(self.parameters)
        loader.read(*self.paths)
        return loader
