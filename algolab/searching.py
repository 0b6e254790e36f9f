"""Searches over sequences; each returns the index of the target or raises
``ValueError`` when it is absent, as ``list.index`` does."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import count
from typing import Any


def _missing(target: Any) -> ValueError:
    return ValueError(f"{target!r} is not in the sequence")


def binary_search(values: Sequence[Any], target: Any, low: int = 0, high: int | None = None) -> int:
    """Find ``target`` in the sorted slice ``values[low:high + 1]``.

    ``high`` defaults to the last index.
    """
    if high is None:
        high = len(values) - 1
    while low <= high:
        middle = low + (high - low) // 2
        found = values[middle]
        if found == target:
            return middle
        if found > target:
            high = middle - 1
        else:
            low = middle + 1
    raise _missing(target)


def linear_search(values: Sequence[Any], target: Any) -> int:
    """Return the index of the first item equal to ``target``."""
    for index, value in enumerate(values):
        if value == target:
            return index
    raise _missing(target)


def jump_search(values: Sequence[Any], target: Any, steps: int) -> int:
    """Find ``target`` in sorted ``values`` by jumping ahead ``steps`` at a time
    and scanning the block whose ends bracket it."""
    if steps < 1:
        raise ValueError("steps must be a positive integer")
    size = len(values)
    if size == 0:
        raise _missing(target)
    for high in count(steps - 1, steps):
        low = high - steps
        if low >= size:
            break
        low = max(low, 0)
        high = min(high, size - 1)
        if values[low] <= target <= values[high]:
            try:
                return values.index(target, low, high + 1)
            except ValueError:
                pass
    raise _missing(target)


def exponential_search(values: Sequence[Any], target: Any) -> int:
    """Find ``target`` in sorted ``values`` by doubling a bound, then
    searching the last range binarily."""
    size = len(values)
    bound = 1
    while bound < size and values[bound] < target:
        bound *= 2
    return binary_search(values, target, bound // 2, min(bound, size - 1))