"""Binary heaps stored in lists, and heap sort."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, MutableSequence
from typing import Any


def _sift_down(
    values: MutableSequence[Any],
    size: int,
    index: int,
    above: Callable[[Any, Any], bool],
) -> None:
    if not 0 <= size <= len(values):
        raise ValueError(f"heap size {size} out of range for {len(values)} elements")
    if index < 0:
        raise IndexError(f"index {index} must be non-negative")
    while True:
        best = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and above(values[child], values[best]):
                best = child
        if best == index:
            return
        values[index], values[best] = values[best], values[index]
        index = best


def max_heapify(values: MutableSequence[Any], size: int, index: int) -> None:
    """Sift ``values[index]`` down within the first ``size`` items to restore a max-heap."""
    _sift_down(values, size, index, operator.gt)


def min_heapify(values: MutableSequence[Any], size: int, index: int) -> None:
    """Sift ``values[index]`` down within the first ``size`` items to restore a min-heap."""
    _sift_down(values, size, index, operator.lt)


def _build(values: Iterable[Any], heapify: Callable[[list, int, int], None]) -> list[Any]:
    items = list(values)
    for index in reversed(range(len(items) // 2)):
        heapify(items, len(items), index)
    return items


def build_max_heap(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` arranged as a max-heap."""
    return _build(values, max_heapify)


def build_min_heap(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` arranged as a min-heap."""
    return _build(values, min_heapify)


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` in ascending order, using heap sort."""
    items = build_max_heap(values)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        max_heapify(items, end, 0)
    return items