"""Searching in sequences, including the aggressive cows placement search."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["binary_search", "contains_sorted", "find_index", "aggressive_cows"]


def binary_search(values: Sequence[Any], key: Any) -> int:
    """Return an index of ``key`` in the ascending ``values``, or -1 if absent."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def contains_sorted(values: Sequence[Any], key: Any) -> bool:
    """Tell whether ``key`` occurs in the ascending ``values``."""
    pos = bisect_left(values, key)
    return pos < len(values) and values[pos] == key


def find_index(values: Sequence[Any], key: Any) -> int:
    """Return the first index of ``key``, or ``len(values)`` if it is absent."""
    return next((i for i, value in enumerate(values) if value == key), len(values))


def _placeable(stalls: list[int], gap: int) -> int:
    count, last = 1, stalls[0]
    for position in stalls[1:]:
        if last + gap <= position:
            count += 1
            last = position
    return count


def aggressive_cows(stalls: Iterable[int], k: int) -> int:
    """Return the largest minimum distance at which ``k`` cows fit into ``stalls``.

    Raises ValueError when no distance of at least 1 allows the placement.
    """
    positions = sorted(stalls)
    if not positions:
        raise ValueError("no stalls given")
    start, end = 1, positions[-1] - positions[0]
    best: int | None = None
    while start <= end:
        mid = start + (end - start) // 2
        if _placeable(positions, mid) < k:
            end = mid - 1
        else:
            best = mid
            start = mid + 1
    if best is None:
        raise ValueError(f"cannot place {k} cows at distance 1 or more")
    return best