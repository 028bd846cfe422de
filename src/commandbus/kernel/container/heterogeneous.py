"""Kernel container – type-keyed heterogeneous store.

Each key is a class and holds at most one value, which must be an
instance of that class. ``put`` is the only place the key/value
relationship is checked; reads can therefore trust what they return.
"""
from __future__ import annotations

import abc
from typing import Any, TypeVar

from commandbus.kernel.errors import InvalidArgumentError, TypeMismatchError

T = TypeVar("T")


class HeterogeneousContainer(abc.ABC):
    """Port: one instance per type, keyed by the type itself."""

    @abc.abstractmethod
    def put(self, key: type[T], value: T) -> T | None:
        """Store *value* under *key*, returning the value it replaced."""

    @abc.abstractmethod
    def remove(self, key: type[T]) -> T | None: ...

    @abc.abstractmethod
    def get(self, key: type[T]) -> T | None: ...

    @abc.abstractmethod
    def contains(self, key: type) -> bool: ...

    @abc.abstractmethod
    def clear(self) -> None: ...

    @abc.abstractmethod
    def size(self) -> int: ...

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, type) and self.contains(key)


def _require_type(key: Any) -> None:
    if key is None:
        raise InvalidArgumentError("key")
    if not isinstance(key, type):
        raise InvalidArgumentError("key", f"must be a class, got {key!r}")


class TypedContainer(HeterogeneousContainer):
    """Dict-backed :class:`HeterogeneousContainer`.

    Not synchronised; callers sharing one across threads must lock around it
    (the concurrent registry does).

    Usage::

        container = TypedContainer()
        container.put(int, 5)
        container.get(int)         # -> 5
        container.put(str, 5)      # raises TypeMismatchError
    """

    def __init__(self) -> None:
        self._values: dict[type, Any] = {}

    def put(self, key: type[T], value: T) -> T | None:
        _require_type(key)
        if value is None:
            raise InvalidArgumentError("value")
        if not isinstance(value, key):
            raise TypeMismatchError(key, value)
        previous = self._values.get(key)
        self._values[key] = value
        return previous

    def remove(self, key: type[T]) -> T | None:
        _require_type(key)
        return self._values.pop(key, None)

    def get(self, key: type[T]) -> T | None:
        _require_type(key)
        return self._values.get(key)

    def contains(self, key: type) -> bool:
        _require_type(key)
        return key in self._values

    def clear(self) -> None:
        self._values.clear()

    def size(self) -> int:
        return len(self._values)

    def keys(self) -> list[type]:
        """Snapshot of the stored type keys, in insertion order."""
        return list(self._values)

    def __repr__(self) -> str:
        names = ", ".join(k.__qualname__ for k in self._values)
        return f"TypedContainer([{names}])"


__all__ = ["HeterogeneousContainer", "TypedContainer"]
