"""Basic operations on sequences of integers."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby

__all__ = [
    "delete_element",
    "frequencies",
    "is_sorted",
    "insert",
    "largest",
    "leaders",
    "left_rotate",
    "flip_groups",
    "move_zeroes_to_end",
]


def delete_element(values: Iterable[int], target: int) -> list[int]:
    """Return a copy of ``values`` with the first occurrence of ``target`` removed.

    If ``target`` is absent the copy is returned unchanged.
    """
    items = list(values)
    try:
        items.remove(target)
    except ValueError:
        pass
    return items


def frequencies(values: Iterable[int]) -> list[tuple[int, int]]:
    """Return ``(value, count)`` for each run of equal values in a sorted sequence."""
    return [(key, sum(1 for _ in run)) for key, run in groupby(values)]


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if ``values`` is in non-decreasing order."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


def insert(values: Iterable[int], capacity: int, value: int, position: int) -> list[int]:
    """Return a copy of ``values`` with ``value`` placed at 1-based ``position``.

    When the sequence already holds ``capacity`` elements nothing is inserted
    and the copy is returned as it was.
    """
    items = list(values)
    if len(items) >= capacity:
        return items
    if not 1 <= position <= len(items) + 1:
        raise ValueError(
            f"position must be between 1 and {len(items) + 1}, got {position}"
        )
    items.insert(position - 1, value)
    return items


def largest(values: Iterable[int]) -> int:
    """Return the largest element of ``values``."""
    items = list(values)
    if not items:
        raise ValueError("largest() of an empty sequence")
    return max(items)


def leaders(values: Iterable[int]) -> list[int]:
    """Return, in their original order, the elements greater than all that follow them."""
    found: list[int] = []
    current: int | None = None
    for item in reversed(list(values)):
        if current is None or item > current:
            current = item
            found.append(item)
    found.reverse()
    return found


def left_rotate(values: Iterable[int], d: int) -> list[int]:
    """Return ``values`` rotated ``d`` places to the left."""
    if d < 0:
        raise ValueError(f"rotation distance must be non-negative, got {d}")
    items = list(values)
    if not items:
        return items
    shift = d % len(items)
    return items[shift:] + items[:shift]


def flip_groups(values: Iterable[int]) -> list[tuple[int, int]]:
    """Return inclusive ``(start, end)`` index ranges of the runs that differ from the first element.

    Flipping each of these runs makes every element equal to the first one,
    with the fewest consecutive flips.
    """
    items = list(values)
    if not items:
        return []
    first = items[0]
    groups: list[tuple[int, int]] = []
    for key, run in groupby(enumerate(items), key=lambda pair: pair[1]):
        if key != first:
            indices = [index for index, _ in run]
            groups.append((indices[0], indices[-1]))
    return groups


def move_zeroes_to_end(values: Iterable[int]) -> list[int]:
    """Return a copy of ``values`` with all zeroes moved to the end.

    The non-zero elements keep their relative order.
    """
    items = list(values)
    non_zero = [item for item in items if item != 0]
    return non_zero + [0] * (len(items) - len(non_zero))