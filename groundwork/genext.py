"""Generic helpers for sequences and sets of hashable values."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def equal_slices(a: Sequence[T], b: Sequence[T]) -> bool:
    """Return True if both sequences hold equal items in the same order."""
    if len(a) != len(b):
        return False
    return all(x == y for x, y in zip(a, b))


def contains(a: Iterable[T], val: T) -> bool:
    return first_index_of(a, val) is not None


def remove(a: Iterable[T], val: T) -> list[T]:
    """Return a new list without any item equal to val."""
    return [item for item in a if item != val]


def contains_all(a: Sequence[T], *values: T) -> bool:
    return all(contains(a, val) for val in values)


def contains_any(a: Sequence[T], *values: T) -> bool:
    return any(contains(a, val) for val in values)


def first_index_of(a: Iterable[T], val: T) -> int | None:
    """Return the index of the first item equal to val, or None."""
    for idx, item in enumerate(a):
        if item == val:
            return idx
    return None


def difference(a: Iterable[H], b: Iterable[H]) -> list[H]:
    """Return the items of a that are not in b, keeping a's order."""
    excluded = set(b)
    return [x for x in a if x not in excluded]


def or_default(val: T | None, default: Any = None) -> T | Any:
    """Return val, or default when val is None."""
    return default if val is None else val


def set_to_slice(values: Iterable[H]) -> list[H]:
    return list(values)


def slice_to_set(values: Iterable[H]) -> set[H]:
    return set(values)