"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList:
    """Singly linked list supporting front and back insertion."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """Return the last value; raise IndexError when the list is empty."""
        if self._tail is None:
            raise IndexError("last() of an empty list")
        return self._tail.value

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every element, passing each value to ``delete`` when given."""
        node = self._head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.value)
            node.next = None
            node = following
        self._head = self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every value in order."""
        for value in self:
            func(value)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding ``func`` applied to every value."""
        return LinkedList(func(value) for value in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"