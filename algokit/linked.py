"""Singly linked list, and the stack and queue built on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from algokit.stacks_queues import EmptyError


@dataclass
class _Node:
    value: Any
    next: Optional[_Node] = None


class LinkedList:
    """A singly linked list that keeps a reference to both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.insert_end(item)

    def insert_beginning(self, value: Any) -> None:
        """Put ``value`` before the current first element."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def insert_end(self, value: Any) -> None:
        """Put ``value`` after the current last element."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def delete_head(self) -> Any:
        """Remove and return the first element; raises EmptyError when empty."""
        if self._head is None:
            raise EmptyError("list is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def _first(self) -> Any:
        if self._head is None:
            raise EmptyError("list is empty")
        return self._head.value

    def _last(self) -> Any:
        if self._tail is None:
            raise EmptyError("list is empty")
        return self._tail.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class LinkedStack:
    """An unbounded last-in, first-out stack on a linked list."""

    def __init__(self) -> None:
        self._list = LinkedList()

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._list.insert_beginning(value)

    def pop(self) -> Any:
        """Remove and return the top value; raises EmptyError when empty."""
        return self._list.delete_head()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        return self._list._first()

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return iter(self._list)

    def __len__(self) -> int:
        return len(self._list)


class LinkedQueue:
    """An unbounded first-in, first-out queue on a linked list."""

    def __init__(self) -> None:
        self._list = LinkedList()

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear."""
        self._list.insert_end(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raises EmptyError when empty."""
        return self._list.delete_head()

    def front(self) -> Any:
        """Return the front value without removing it."""
        return self._list._first()

    def rear(self) -> Any:
        """Return the most recently enqueued value."""
        return self._list._last()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._list)

    def __len__(self) -> int:
        return len(self._list)