"""
Attribute-access mapping used for configuration.

    settings = DotDict(tests={"dir": "tests"})
    settings.tests.dir            # "tests"
    settings.get("tests.suffix")  # None
"""

from collections.abc import Iterator
from typing import Any

_MISSING = object()


def _wrap(value: Any) -> Any:
    """Nested dicts become DotDicts, also inside lists."""
    if isinstance(value, dict):
        return DotDict(**value)
    if isinstance(value, list):
        return [_wrap(item) for item in value]
    return value


def _unwrap(value: Any) -> Any:
    if isinstance(value, DotDict):
        return value.to_dict()
    if isinstance(value, list):
        return [_unwrap(item) for item in value]
    return value


class DotDict:
    """
    Mapping whose keys are also attributes.

    Keys are stored as instance attributes, so names starting with an
    underscore are treated as private state: they are skipped by to_dict()
    and len(). Method names used by Config cannot be keys. Other keys such
    as "items" are allowed and shadow the method of that name on the
    instance, so internal code reads __dict__ directly.
    """

    _RESERVED_KEYS = frozenset({"set", "clear", "to_dict", "get", "has"})

    def __init__(self, **kwargs: Any) -> None:
        self.set(**kwargs)

    def set(self, **kwargs: Any) -> "DotDict":
        """Set several keys at once; returns self."""
        for key, value in kwargs.items():
            self[key] = value
        return self

    def clear(self) -> None:
        self.__dict__.clear()

    def to_dict(self) -> dict[str, Any]:
        """Plain nested dicts and lists, without private keys."""
        return {
            k: _unwrap(v) for k, v in self.__dict__.items() if not k.startswith("_")
        }

    def keys(self) -> Iterator[str]:
        return iter(list(self.__dict__))

    def items(self) -> Iterator[tuple[str, Any]]:
        return iter(list(self.__dict__.items()))

    def __contains__(self, key: Any) -> bool:
        return key in self.__dict__

    def __getitem__(self, key: str) -> Any:
        return self.__dict__.get(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        key = str(key)
        if key in self._RESERVED_KEYS:
            raise ValueError(f"Key '{key}' is reserved and cannot be used")
        self.__dict__[key] = _wrap(value)

    def __len__(self) -> int:
        return len(self.to_dict())

    def __str__(self) -> str:
        return str(self.to_dict())

    def _lookup(self, path: str) -> Any:
        node: Any = self
        for part in filter(None, path.split(".")):
            if not isinstance(node, DotDict) or part not in node:
                return _MISSING
            node = node[part]
        return node

    def has(self, path: str) -> bool:
        """True if a dotted path such as "tests.dir" exists."""
        return bool(path) and self._lookup(path) is not _MISSING

    def get(self, path: str, default: Any = None) -> Any:
        """Value at a dotted path, or default when any part is missing."""
        if not path:
            return default
        value = self._lookup(path)
        return default if value is _MISSING else value


class DotDictPathNotFoundError(Exception):
    """A ${variable} reference names a path that is not defined."""

    def __init__(self, obj: DotDict, path: str) -> None:
        self.obj = obj
        self.path = path
        super().__init__(f"Path '{path}' not found")
