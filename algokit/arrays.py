"""Elementary operations on sequences: sorting, insertion, deletion, search."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` in ascending order, using bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def delete_at(values: Sequence[Any], pos: int) -> list[Any]:
    """Return a copy of ``values`` without the element at ``pos``.

    Raises IndexError if ``pos`` does not name an existing element.
    """
    items = list(values)
    if not 0 <= pos < len(items):
        raise IndexError(f"position {pos} out of range for {len(items)} elements")
    del items[pos]
    return items


def insert_at(values: Sequence[Any], pos: int, value: Any) -> list[Any]:
    """Return a copy of ``values`` with ``value`` inserted before index ``pos``.

    ``pos`` may equal the length, which appends. Raises IndexError otherwise.
    """
    items = list(values)
    if not 0 <= pos <= len(items):
        raise IndexError(f"position {pos} out of range for {len(items)} elements")
    items.insert(pos, value)
    return items


def largest(values: Iterable[Any]) -> Any:
    """Return the largest element; raises ValueError for an empty input."""
    items = list(values)
    if not items:
        raise ValueError("largest() of an empty sequence")
    return max(items)


def linear_search(values: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return None