"""Searching in integer sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = ["linear_search", "binary_search", "first_occurrence", "last_occurrence"]


def linear_search(values: Iterable[int], target: int) -> bool:
    """Return True if ``target`` occurs anywhere in ``values``."""
    return any(item == target for item in values)


def binary_search(values: Sequence[int], target: int) -> bool:
    """Return True if ``target`` occurs in the sorted sequence ``values``."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return True
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return False


def first_occurrence(values: Sequence[int], target: int) -> int | None:
    """Return the index of the first ``target`` in sorted ``values``, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] > target:
            high = mid - 1
        elif values[mid] < target:
            low = mid + 1
        elif mid == 0 or values[mid - 1] != values[mid]:
            return mid
        else:
            high = mid - 1
    return None


def last_occurrence(values: Sequence[int], target: int) -> int | None:
    """Return the index of the last ``target`` in sorted ``values``, or None."""
    last = len(values) - 1
    low, high = 0, last
    while low <= high:
        mid = (low + high) // 2
        if values[mid] > target:
            high = mid - 1
        elif values[mid] < target:
            low = mid + 1
        elif mid == last or values[mid + 1] != values[mid]:
            return mid
        else:
            low = mid + 1
    return None