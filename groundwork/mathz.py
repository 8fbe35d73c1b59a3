"""Small min/max helpers."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def max_int64(a: int, b: int) -> int:
    return a if a >= b else b


def min_int64(a: int, b: int) -> int:
    return a if a <= b else b


def min_int(a: int, b: int) -> int:
    return a if a <= b else b


def min_of(x: T, y: T) -> T:
    """Return x if it is strictly smaller than y, otherwise y."""
    return x if x < y else y