"""Comparison sorts over mutable sequences.

``merge_sort`` returns a new list; every other sort works in place and
returns ``None``, as ``list.sort`` does.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new sorted list of ``values``; the input is left untouched."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def insertion_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place by insertion."""
    for i in range(1, len(values)):
        current = values[i]
        j = i - 1
        while j >= 0 and values[j] > current:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = current


def heap_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place using a max heap."""
    count = len(values)
    for root in range(count // 2 - 1, -1, -1):
        _sift_down(values, count, root)
    for end in range(count - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        _sift_down(values, end, 0)


def _sift_down(values: MutableSequence[Any], count: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < count and values[left] > values[largest]:
            largest = left
        if right < count and values[right] > values[largest]:
            largest = right
        if largest == root:
            return
        values[root], values[largest] = values[largest], values[root]
        root = largest


def _bounds(values: MutableSequence[Any], low: int, high: int | None) -> tuple[int, int]:
    if high is None:
        high = len(values) - 1
    if low < high and (low < 0 or high >= len(values)):
        raise IndexError(f"range [{low}, {high}] is outside a sequence of length {len(values)}")
    return low, high


def lomuto_quick_sort(values: MutableSequence[Any], low: int = 0, high: int | None = None) -> None:
    """Sort ``values[low:high + 1]`` in place with Lomuto partitioning.

    ``high`` defaults to the last index.
    """
    low, high = _bounds(values, low, high)
    while low < high:
        pivot = _lomuto_partition(values, low, high)
        # Recurse into the smaller side to keep the stack shallow.
        if pivot - low < high - pivot:
            lomuto_quick_sort(values, low, pivot - 1)
            low = pivot + 1
        else:
            lomuto_quick_sort(values, pivot + 1, high)
            high = pivot - 1


def _lomuto_partition(values: MutableSequence[Any], low: int, high: int) -> int:
    pivot = values[high]
    boundary = low
    for i in range(low, high):
        if values[i] <= pivot:
            values[boundary], values[i] = values[i], values[boundary]
            boundary += 1
    values[boundary], values[high] = values[high], values[boundary]
    return boundary


def hoare_quick_sort(values: MutableSequence[Any], low: int = 0, high: int | None = None) -> None:
    """Sort ``values[low:high + 1]`` in place with Hoare partitioning.

    ``high`` defaults to the last index.
    """
    low, high = _bounds(values, low, high)
    while low < high:
        split = _hoare_partition(values, low, high)
        if split - low < high - split:
            hoare_quick_sort(values, low, split)
            low = split + 1
        else:
            hoare_quick_sort(values, split + 1, high)
            high = split


def _hoare_partition(values: MutableSequence[Any], low: int, high: int) -> int:
    pivot = values[low]
    i, j = low - 1, high + 1
    while True:
        i += 1
        while values[i] < pivot:
            i += 1
        j -= 1
        while values[j] > pivot:
            j -= 1
        if i >= j:
            return j
        values[i], values[j] = values[j], values[i]


def selection_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place by repeatedly selecting the smallest item."""
    _select_from(values, 0)


def bubble_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place by swapping adjacent out-of-order pairs."""
    count = len(values)
    for _ in range(count - 1):
        for j in range(1, count):
            if values[j - 1] > values[j]:
                values[j - 1], values[j] = values[j], values[j - 1]


def bubble_sort_recursive(values: MutableSequence[Any], start: int = 0) -> None:
    """Sort ``values[start:]`` in place, moving the smallest remaining item
    to each position in turn; items before ``start`` are left alone."""
    _select_from(values, start)


def _select_from(values: MutableSequence[Any], start: int) -> None:
    count = len(values)
    for position in range(max(start, 0), count):
        smallest = min(range(position, count), key=values.__getitem__)
        values[position], values[smallest] = values[smallest], values[position]