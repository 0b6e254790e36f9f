"""A doubly linked list of values with head and tail references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any, prev: _Node | None) -> None:
        self.value = value
        self.prev = prev
        self.next: _Node | None = None


class DoublyLinkedList:
    """Values linked in both directions; can be walked forward or backward."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Append ``value`` at the tail."""
        node = _Node(value, self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def remove(self, value: Any) -> None:
        """Remove one node holding ``value``.

        The head is checked first, then the tail, then the nodes between
        them from the front. Nothing happens when ``value`` is absent.
        """
        head, tail = self._head, self._tail
        if head is None or tail is None:
            return
        if head.value == value:
            self._head = head.next
            if self._head is None:
                self._tail = None
            else:
                self._head.prev = None
            return
        if tail.value == value:
            self._tail = tail.prev
            if self._tail is not None:
                self._tail.next = None
            return
        node = head.next
        while node is not None and node is not tail:
            if node.value == value:
                node.prev.next = node.next
                node.next.prev = node.prev
                return
            node = node.next

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

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev