"""Simple comparison sorts."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["bubble_sort", "selection_sort"]


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values``, stopping early once a pass makes no swap."""
    items = list(values)
    for done in range(len(items) - 1):
        swapped = False
        for index in range(len(items) - done - 1):
            if items[index] > items[index + 1]:
                items[index], items[index + 1] = items[index + 1], items[index]
                swapped = True
        if not swapped:
            break
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` built by repeatedly selecting the minimum."""
    items = list(values)
    for start in range(len(items)):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items