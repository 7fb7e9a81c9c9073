"""
Keyed attribute stores used to initialize problems.
"""

import abc
import json
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from loguru import logger

from ..exceptions import AttributeNotFoundError, PathNotFoundError

_MISSING = object()


class Loader(abc.ABC):
    """
    Read-only mapping of attribute names to values describing a problem
    instance.
    """

    @abc.abstractmethod
    def _attributes(self) -> Mapping[str, Any]:
        """Return the underlying attribute mapping."""
        raise NotImplementedError

    def get(self, key: str, default: Any = _MISSING) -> Any:
        """
        Return the attribute stored under `key`.

        Raises
        ------
        AttributeNotFoundError
            If `key` is absent and no `default` is given.
        """
        attributes = self._attributes()
        if key in attributes:
            return attributes[key]
        if default is _MISSING:
            raise AttributeNotFoundError(key)
        return default

    def contains(self, key: str) -> bool:
        return key in self._attributes()

    def __contains__(self, key: object) -> bool:
        return key in self._attributes()

    def keys(self) -> frozenset[str]:
        return frozenset(self._attributes())


class DictLoader(Loader):
    """
    Loader backed by an in-memory mapping (copied at construction).
    """

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None):
        self.attributes: dict[str, Any] = dict(attributes or {})

    def _attributes(self) -> Mapping[str, Any]:
        return self.attributes

    def __repr__(self) -> str:
        return f"DictLoader(keys={sorted(self.attributes)})"


class FileLoader(Loader):
    """
    Loader that reads its attributes from one or more files.

    Subclasses implement `_read`. Attributes given as `parameters` are laid
    over whatever the files define. Until `read` is called the loader is
    empty.
    """

    def __init__(self, parameters: Optional[Mapping[str, Any]] = None):
        self.parameters = dict(parameters or {})
        self.paths: tuple[Path, ...] = ()
        self.attributes: Optional[dict[str, Any]] = None

    @abc.abstractmethod
    def _read(self, attributes: dict[str, Any], paths: tuple[Path, ...]) -> None:
        """
        Parse `paths` and store the attributes found into `attributes`.
        """
        raise NotImplementedError

    def read(self, *paths: Union[str, Path]) -> None:
        """
        Read data from files.

        Raises
        ------
        PathNotFoundError
            If some path does not exist. Nothing is read in that case.
        OSError
            If some file can not be read.
        """
        resolved = tuple(Path(p) for p in paths)
        for p in resolved:
            if not p.exists():
                raise PathNotFoundError(p)

        attributes: dict[str, Any] = {}
        self._read(attributes, resolved)
        attributes.update(self.parameters)

        self.paths = resolved
        self.attributes = attributes
        logger.debug(f"{type(self).__name__} read {len(attributes)} attributes from {len(resolved)} file(s)")

    def _attributes(self) -> Mapping[str, Any]:
        return self.attributes if self.attributes is not None else {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(paths={[str(p) for p in self.paths]})"


class JsonFileLoader(FileLoader):
    """
    Each file holds one JSON object; later files override earlier keys.
    """

    def _read(self, attributes: dict[str, Any], paths: tuple[Path, ...]) -> None:
        for path in paths:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"{path} must contain a JSON object, got {type(data).__name__}")
            attributes.update(data)
