"""Simple comparison sorts that return a new sorted list."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "insertion_sort",
    "insertion_sort_descending",
    "selection_sort",
    "selection_sort_descending",
]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort ascending with bubble sort, stopping early once a pass makes no swap."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def _insertion(values: Iterable[Any], before: Callable[[Any, Any], bool]) -> list[Any]:
    items = list(values)
    for i in range(1, len(items)):
        j = i
        while j > 0 and before(items[j], items[j - 1]):
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort ascending with insertion sort."""
    return _insertion(values, lambda a, b: a < b)


def insertion_sort_descending(values: Iterable[Any]) -> list[Any]:
    """Sort descending with insertion sort."""
    return _insertion(values, lambda a, b: a > b)


def _selection(values: Iterable[Any], pick: Callable[..., int]) -> list[Any]:
    items = list(values)
    for i in range(len(items) - 1):
        chosen = pick(range(i, len(items)), key=items.__getitem__)
        items[i], items[chosen] = items[chosen], items[i]
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort ascending with selection sort."""
    return _selection(values, min)


def selection_sort_descending(values: Iterable[Any]) -> list[Any]:
    """Sort descending with selection sort."""
    return _selection(values, max)