"""String-list helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from .genext import (
    contains,
    contains_all,
    contains_any,
    difference,
    equal_slices,
    first_index_of,
    remove,
    set_to_slice,
    slice_to_set,
)

__all__ = [
    "contains",
    "contains_all",
    "contains_any",
    "difference",
    "equal_slices",
    "first_index_of",
    "or_empty",
    "permutation_with",
    "permutations",
    "remove",
    "set_to_slice",
    "slice_to_set",
    "to_string_slice",
]


def to_string_slice(a: Iterable[bytes]) -> list[str]:
    """Decode each byte string as UTF-8."""
    return [item.decode("utf-8", errors="replace") for item in a]


def or_empty(val: str | None) -> str:
    return "" if val is None else val


def permutations(v: Sequence[str]) -> Iterator[list[str]]:
    """Yield every non-empty ordered selection of v, depth first."""
    return permutation_with([], v)


def permutation_with(base: Sequence[str], v: Sequence[str]) -> Iterator[list[str]]:
    """Yield base extended by each non-empty ordered selection of v."""
    for idx, item in enumerate(v):
        result = [*base, item]
        yield result
        yield from permutation_with(result, v[idx + 1:])