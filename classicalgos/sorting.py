"""Comparison sorts: heap sort, merge sort and quick sort, plus a timing helper."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def _sift_down(heap: list[Any], size: int, root: int) -> None:
    """Restore the max-heap property for the subtree rooted at ``root``."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with ``values`` in ascending order, using heap sort."""
    items = list(values)
    size = len(items)
    for root in reversed(range(size // 2)):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
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


def _merge_sorted(items: list[T]) -> list[T]:
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(_merge_sorted(items[:mid]), _merge_sorted(items[mid:]))


def merge_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with ``values`` in ascending order, using a stable merge sort."""
    return _merge_sorted(list(values))


def _partition(items: list[Any], low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` around its last element; return the pivot's place."""
    pivot = items[high]
    boundary = low
    for j in range(low, high):
        if items[j] <= pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quick_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with ``values`` in ascending order, using quick sort."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = _partition(items, low, high)
        pending.append((low, pivot - 1))
        pending.append((pivot + 1, high))
    return items


def timed_sort(
    sort: Callable[[Iterable[T]], list[T]], values: Iterable[T]
) -> tuple[list[T], float]:
    """Run ``sort`` on ``values`` and return the result with the CPU seconds it took."""
    items = list(values)
    start = time.process_time()
    result = sort(items)
    elapsed = time.process_time() - start
    return result, elapsed