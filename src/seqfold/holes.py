"""
Explicit absent slots for sparse collections.

A slot holding HOLE is skipped by every fold in this package. Any other
value, None included, is a present entry.
"""

from __future__ import annotations
from typing import Any, Iterator, Mapping, Sequence, TypeVar

T = TypeVar("T")


class _Hole:
    """Singleton marking an absent slot."""

    _instance: _Hole | None = None

    def __new__(cls) -> _Hole:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "HOLE"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "HOLE"

    def __copy__(self) -> _Hole:
        return self

    def __deepcopy__(self, memo: dict) -> _Hole:
        return self


HOLE = _Hole()


def is_hole(value: Any) -> bool:
    return value is HOLE


def sparse(length: int, entries: Mapping[int, T]) -> list[T | _Hole]:
    """
    Build a list of `length` slots with `entries` placed at their indices.

    Example:
        sparse(4, {0: "foo", 1: "bar", 3: "baz"})
        # ["foo", "bar", HOLE, "baz"]
    """
    if length < 0:
        raise IndexError(f"length must be non-negative, got {length}")
    slots: list[T | _Hole] = [HOLE] * length
    for index, value in entries.items():
        if not 0 <= index < length:
            raise IndexError(f"index {index} out of range for length {length}")
        slots[index] = value
    return slots


def present(collection: Sequence[T]) -> Iterator[tuple[int, T]]:
    """
    Yield (index, value) for each present slot, in order.

    The length is read once, when iteration starts.
    """
    for index in range(len(collection)):
        value = collection[index]
        if value is not HOLE:
            yield index, value
