"""Bounded stacks and queues backed by fixed-capacity storage."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any


class CapacityError(Exception):
    """Raised when a value is added to a container that is full."""


class EmptyError(Exception):
    """Raised when a value is taken from or read off an empty container."""


def _check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    return capacity


class ArrayStack:
    """A last-in, first-out stack holding at most ``capacity`` values."""

    def __init__(self, items: Iterable[Any] = (), capacity: int = 5) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[Any] = []
        for item in items:
            self.push(item)

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raises CapacityError when the stack is full."""
        if len(self._items) >= self._capacity:
            raise CapacityError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raises EmptyError when empty."""
        if not self._items:
            raise EmptyError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise EmptyError("stack is empty")
        return self._items[-1]

    def display(self) -> str:
        """Return the contents from top to bottom as a line of text."""
        if not self._items:
            return "Stack is empty"
        return "Stack: " + " ".join(str(value) for value in reversed(self._items))

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


class ArrayQueue:
    """A first-in, first-out queue over a linear array of ``capacity`` slots.

    Slots are never reused: once ``capacity`` values have been enqueued the
    queue refuses further values, even if some have since been dequeued.
    """

    def __init__(self, items: Iterable[Any] = (), capacity: int = 5) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()
        self._slots_used = 0
        for item in items:
            self.enqueue(item)

    @property
    def capacity(self) -> int:
        return self._capacity

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear; raises CapacityError when no slot is left."""
        if self._slots_used >= self._capacity:
            raise CapacityError("queue overflow")
        self._items.append(value)
        self._slots_used += 1

    def dequeue(self) -> Any:
        """Remove and return the front value; raises EmptyError when empty."""
        if not self._items:
            raise EmptyError("queue underflow")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise EmptyError("queue is empty")
        return self._items[0]

    def rear(self) -> Any:
        """Return the most recently enqueued value still in the queue."""
        if not self._items:
            raise EmptyError("queue is empty")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class CircularQueue:
    """A first-in, first-out ring buffer holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 3) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def enqueue(self, value: Any) -> None:
        """Append ``value``; raises CapacityError when the ring is full."""
        if len(self._items) >= self._capacity:
            raise CapacityError("circular queue overflow")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the oldest value; raises EmptyError when empty."""
        if not self._items:
            raise EmptyError("circular queue underflow")
        return self._items.popleft()

    def rear(self) -> Any:
        """Return the most recently enqueued value."""
        if not self._items:
            raise EmptyError("circular queue is empty")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)