"""Classic comparison sorts and a small binary min-heap."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import Any


def exchange_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by comparing each position with every later one and swapping."""
    result = list(items)
    size = len(result)
    for i in range(size):
        for j in range(i + 1, size):
            if result[i] > result[j]:
                result[i], result[j] = result[j], result[i]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list sorted by insertion."""
    result = list(items)
    for j in range(1, len(result)):
        key = result[j]
        i = j - 1
        while i >= 0 and result[i] > key:
            result[i + 1] = result[i]
            i -= 1
        result[i + 1] = key
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
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


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list sorted by a stable top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _max_heapify(heap: list[Any], index: int, size: int) -> None:
    while True:
        left, right = 2 * index + 1, 2 * index + 2
        largest = index
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == index:
            return
        heap[index], heap[largest] = heap[largest], heap[index]
        index = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list sorted with an in-place max-heap."""
    result = list(items)
    size = len(result)
    for index in range(size // 2 - 1, -1, -1):
        _max_heapify(result, index, size)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _max_heapify(result, 0, end)
    return result


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[high]
    i = low - 1
    for j in range(low, high):
        if values[j] <= pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    values[i + 1], values[high] = values[high], values[i + 1]
    return i + 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list sorted by quicksort with last-element pivots."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(result, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return result


class MinHeap:
    """A binary min-heap built from an initial collection."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._heap = list(items)
        heapq.heapify(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def pop_min(self) -> Any:
        """Remove and return the smallest element."""
        if not self._heap:
            raise IndexError("pop_min from an empty heap")
        return heapq.heappop(self._heap)


def min_heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return the elements in ascending order by draining a min-heap."""
    heap = MinHeap(items)
    return [heap.pop_min() for _ in range(len(heap))]


def sort_012(items: list[int]) -> None:
    """Sort a list holding only 0, 1 and 2 in place in a single pass."""
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        value = items[mid]
        if value == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
        else:
            raise ValueError(f"sort_012 accepts only 0, 1 and 2, got {value!r}")