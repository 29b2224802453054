"""Questions about contiguous runs and pairs within integer sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "longest_even_odd",
    "majority_element",
    "max_consecutive_ones",
    "max_difference",
    "max_subarray_sum",
    "max_circular_subarray_sum",
]


def _require_items(values: Iterable[int], minimum: int, name: str) -> list[int]:
    items = list(values)
    if len(items) < minimum:
        raise ValueError(
            f"{name}() needs at least {minimum} element(s), got {len(items)}"
        )
    return items


def longest_even_odd(values: Iterable[int]) -> int:
    """Return the length of the longest subarray whose elements alternate in parity."""
    items = _require_items(values, 1, "longest_even_odd")
    best = current = 1
    for previous, item in zip(items, items[1:]):
        if (previous % 2) != (item % 2):
            current += 1
            best = max(best, current)
        else:
            current = 1
    return best


def majority_element(values: Sequence[int]) -> int | None:
    """Return the index of the first occurrence of the majority element.

    The majority element appears more than ``len(values) // 2`` times.
    Returns None when there is no such element.
    """
    items = list(values)
    if not items:
        return None

    candidate = items[0]
    count = 0
    for item in items:
        if count == 0:
            candidate = item
            count = 1
        elif item == candidate:
            count += 1
        else:
            count -= 1

    if items.count(candidate) > len(items) // 2:
        return items.index(candidate)
    return None


def max_consecutive_ones(values: Iterable[int]) -> int:
    """Return the length of the longest run of ones."""
    best = current = 0
    for item in values:
        if item == 1:
            current += 1
            best = max(best, current)
        else:
            current = 0
    return best


def max_difference(values: Iterable[int]) -> int:
    """Return the largest ``values[j] - values[i]`` with ``j > i``."""
    items = _require_items(values, 2, "max_difference")
    best = items[1] - items[0]
    lowest = items[0]
    for item in items[1:]:
        best = max(best, item - lowest)
        lowest = min(lowest, item)
    return best


def _kadane(items: list[int]) -> int:
    best = ending = items[0]
    for item in items[1:]:
        ending = max(ending + item, item)
        best = max(best, ending)
    return best


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    return _kadane(_require_items(values, 1, "max_subarray_sum"))


def max_circular_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty subarray that may wrap around the end."""
    items = _require_items(values, 1, "max_circular_subarray_sum")
    normal = _kadane(items)
    if normal < 0:
        return normal
    # The wrapping subarray is everything except the minimum-sum subarray.
    wrapped = sum(items) + _kadane([-item for item in items])
    return max(normal, wrapped)