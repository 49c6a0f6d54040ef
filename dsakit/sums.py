"""Sum-based array problems: triplet sums, subarray sums, splits and trapped water."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate

__all__ = [
    "three_sum",
    "can_split_equal",
    "max_subarray_sum",
    "max_difference",
    "prefix_sums",
    "suffix_sums",
    "trap_rain_water",
]


def three_sum(values: Iterable[int], target: int) -> bool:
    """Tell whether three distinct elements of ``values`` add up to ``target``."""
    items = sorted(values)
    for i, first in enumerate(items[:-2]):
        wanted = target - first
        start, end = i + 1, len(items) - 1
        while start < end:
            pair = items[start] + items[end]
            if pair == wanted:
                return True
            if pair > wanted:
                end -= 1
            else:
                start += 1
    return False


def can_split_equal(values: Iterable[int]) -> bool:
    """Tell whether some prefix of ``values`` sums to the same as the rest."""
    items = list(values)
    total = sum(items)
    return any(2 * prefix == total for prefix in accumulate(items))


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("values must not be empty")
    return best


def max_difference(values: Iterable[int]) -> int:
    """Return the largest ``values[j] - values[i]`` with ``j >= i``.

    Raises ValueError when fewer than two values are given.
    """
    items = list(values)
    if len(items) < 2:
        raise ValueError("at least two values are needed")
    best_after = items[-1]
    best = best_after - items[-1]
    for value in reversed(items):
        best_after = max(best_after, value)
        best = max(best, best_after - value)
    return best


def prefix_sums(values: Iterable[int]) -> list[int]:
    """Return the running totals of ``values`` from the left."""
    return list(accumulate(values))


def suffix_sums(values: Iterable[int]) -> list[int]:
    """Return the running totals of ``values`` from the right."""
    return list(accumulate(reversed(list(values))))[::-1]


def trap_rain_water(heights: Iterable[int]) -> int:
    """Return how much water is held between the bars of ``heights``."""
    bars = list(heights)
    if not bars:
        return 0
    peak = max(range(len(bars)), key=bars.__getitem__)

    def _collect(side: Iterable[int]) -> int:
        water, highest = 0, 0
        for height in side:
            if highest > height:
                water += highest - height
            else:
                highest = height
        return water

    return _collect(bars[:peak]) + _collect(reversed(bars[peak + 1:]))