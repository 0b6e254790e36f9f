"""A max heap kept in a list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class MaxHeap:
    """A binary max heap; ``pop`` always returns the largest value."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def insert(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> Any:
        """Remove and return the largest value; raise ``IndexError`` if empty."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        items = self._items
        items[0], items[-1] = items[-1], items[0]
        largest = items.pop()
        self._sift_down(0)
        return largest

    def pop_all(self) -> list[Any]:
        """Empty the heap, returning its values from largest to smallest."""
        return [self.pop() for _ in range(len(self))]

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[index] <= items[parent]:
                return
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        count = len(items)
        while True:
            largest = index
            left, right = 2 * index + 1, 2 * index + 2
            if left < count and items[left] > items[largest]:
                largest = left
            if right < count and items[right] > items[largest]:
                largest = right
            if largest == index:
                return
            items[index], items[largest] = items[largest], items[index]
            index = largest