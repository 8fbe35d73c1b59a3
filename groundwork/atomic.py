"""Thread-safe value cell and reference counter."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")

_INT32_RANGE = 1 << 32
_INT32_OFFSET = 1 << 31


def _wrap_int32(value: int) -> int:
    return (value + _INT32_OFFSET) % _INT32_RANGE - _INT32_OFFSET


class AtomicValue(Generic[T]):
    """A value that can be loaded, stored and swapped atomically."""

    def __init__(self, initial: T | None = None) -> None:
        self._lock = threading.Lock()
        self._value = initial

    def store(self, value: T) -> None:
        with self._lock:
            self._value = value

    def load(self) -> T | None:
        with self._lock:
            return self._value

    def compare_and_swap(self, old: T, new: T) -> bool:
        """Replace the value with new if it currently equals old."""
        with self._lock:
            if self._value != old:
                return False
            self._value = new
            return True

    def swap(self, new: T) -> T | None:
        """Store new and return the previous value."""
        with self._lock:
            previous, self._value = self._value, new
            return previous


class RefCount:
    """A 32-bit signed counter updated atomically."""

    def __init__(self, value: int = 0) -> None:
        self._lock = threading.Lock()
        self._value = _wrap_int32(value)

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def incr(self) -> int:
        """Add one and return the new count."""
        with self._lock:
            self._value = _wrap_int32(self._value + 1)
            return self._value

    def decr(self) -> int:
        """Subtract one and return the new count."""
        with self._lock:
            self._value = _wrap_int32(self._value - 1)
            return self._value