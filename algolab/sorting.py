"""Comparison sorts and random test data."""

from __future__ import annotations

import heapq
import random
from collections.abc import Iterable


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using quicksort with the last element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = items[high]
        boundary = low
        for j in range(low, high):
            if items[j] < pivot:
                items[boundary], items[j] = items[j], items[boundary]
                boundary += 1
        items[boundary], items[high] = items[high], items[boundary]
        pending.append((low, boundary - 1))
        pending.append((boundary + 1, high))
    return items


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using a stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return list(heapq.merge(merge_sort(items[:middle]), merge_sort(items[middle:])))


def random_array(
    n: int, low: int, high: int, rng: random.Random | None = None
) -> list[int]:
    """Return ``n`` random integers between ``low`` and ``high`` inclusive."""
    if n < 0:
        raise ValueError("length cannot be negative")
    if low > high:
        raise ValueError("low bound exceeds high bound")
    rng = rng or random.Random()
    return [rng.randint(low, high) for _ in range(n)]