"""Copy-on-write collections: readers see immutable snapshots, writers copy."""

from __future__ import annotations

import threading
from collections.abc import Callable, Hashable, Iterable, Mapping
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from .atomic import AtomicValue

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
T = TypeVar("T")


class CopyOnWriteMap(Generic[K, V]):
    """A mapping whose writes replace the whole underlying dict."""

    def __init__(self) -> None:
        self._value: AtomicValue[dict[K, V]] = AtomicValue({})
        self._lock = threading.Lock()

    def _current(self) -> dict[K, V]:
        return self._value.load() or {}

    def put(self, key: K, value: V) -> None:
        with self._lock:
            updated = dict(self._current())
            updated[key] = value
            self._value.store(updated)

    def get(self, key: K) -> V | None:
        """Return the value for key, or None if absent."""
        return self._current().get(key)

    def delete(self, key: K) -> None:
        with self._lock:
            self._value.store({k: v for k, v in self._current().items() if k != key})

    def as_map(self) -> Mapping[K, V]:
        """Return a read-only view of the current snapshot."""
        return MappingProxyType(self._current())

    def clear(self) -> None:
        with self._lock:
            self._value.store({})

    def delete_if(self, predicate: Callable[[K, V], bool]) -> bool:
        """Remove entries matching predicate; return whether any matched."""
        with self._lock:
            kept: dict[K, V] = {}
            matched = False
            for k, v in self._current().items():
                if predicate(k, v):
                    matched = True
                else:
                    kept[k] = v
            self._value.store(kept)
            return matched


class CopyOnWriteSlice(Generic[T]):
    """A list whose writes replace the whole underlying tuple."""

    def __init__(self) -> None:
        self._value: AtomicValue[tuple[T, ...]] = AtomicValue(())
        self._lock = threading.Lock()

    def value(self) -> tuple[T, ...]:
        return self._value.load() or ()

    def append(self, item: T) -> None:
        with self._lock:
            self._value.store((*self.value(), item))

    def delete(self, item: T) -> None:
        """Remove every element equal to item."""
        with self._lock:
            self._value.store(tuple(x for x in self.value() if x != item))

    def delete_if(self, predicate: Callable[[T], bool]) -> None:
        with self._lock:
            self._value.store(tuple(x for x in self.value() if not predicate(x)))


class CowSlice:
    """An untyped copy-on-write registry of listeners."""

    def __init__(self, initial: Iterable[Any] = ()) -> None:
        self._value: AtomicValue[tuple[Any, ...]] = AtomicValue(tuple(initial))
        self._lock = threading.Lock()

    def value(self) -> tuple[Any, ...]:
        return self._value.load() or ()

    def append(self, listener: Any) -> None:
        with self._lock:
            self._value.store((*self.value(), listener))

    def delete(self, listener: Any) -> None:
        """Remove every element equal to listener."""
        with self._lock:
            self._value.store(tuple(x for x in self.value() if x != listener))