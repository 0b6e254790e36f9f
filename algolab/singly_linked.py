"""A singly linked list of values with head and tail references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node | None = None


class SinglyLinkedList:
    """Values linked front to back; appending is constant time."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Append ``value`` at the tail."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``.

        Does nothing on an empty list; raises ``ValueError`` if a non-empty
        list does not hold ``value``.
        """
        head = self._head
        if head is None:
            return
        if head.value == value:
            self._head = head.next
            if self._head is None:
                self._tail = None
            return
        previous = head
        while previous.next is not None:
            if previous.next.value == value:
                previous.next = previous.next.next
                if previous.next is None:
                    self._tail = previous
                return
            previous = previous.next
        raise ValueError(f"{value!r} is not in the list")

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def clear(self) -> None:
        """Drop every node."""
        self._head = self._tail = None

    def description(self) -> str:
        """Return the values in order, each followed by ``", "``."""
        return "".join(f"{value}, " for value in self)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next