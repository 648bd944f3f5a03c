"""Assorted array and matrix algorithms."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any


def common_elements(
    first: Sequence[Any], second: Sequence[Any], third: Sequence[Any]
) -> list[Any]:
    """Return the elements common to three ascending sequences."""
    i = j = k = 0
    common: list[Any] = []
    while i < len(first) and j < len(second) and k < len(third):
        a, b, c = first[i], second[j], third[k]
        if a == b == c:
            common.append(a)
            i += 1
            j += 1
            k += 1
        elif a < b:
            i += 1
        elif b < c:
            j += 1
        else:
            k += 1
    return common


def find_duplicate(items: Iterable[Any]) -> Any | None:
    """Return the smallest value that occurs more than once, or None."""
    ordered = sorted(items)
    return next((a for a, b in zip(ordered, ordered[1:]) if a == b), None)


def unique_grid_paths(rows: int, cols: int) -> int:
    """Count right/down paths from the top-left to the bottom-right cell."""
    if rows < 1 or cols < 1:
        raise ValueError("a grid needs at least one row and one column")
    return math.comb(rows + cols - 2, rows - 1)


def max_subarray_sum(items: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    iterator = iter(items)
    try:
        best = running = next(iterator)
    except StopIteration:
        raise ValueError("max_subarray_sum of an empty sequence") from None
    for value in iterator:
        running = max(running + value, value)
        best = max(best, running)
    return best


def kth_smallest(items: Iterable[Any], k: int) -> Any:
    """Return the k-th smallest element, counting from 1."""
    ordered = sorted(items)
    if not 1 <= k <= len(ordered):
        raise ValueError(f"k must be between 1 and {len(ordered)}, got {k}")
    return ordered[k - 1]


def longest_zero_sum_subarray(items: Iterable[int]) -> int:
    """Return the length of the longest contiguous run summing to zero."""
    first_seen: dict[int, int] = {0: -1}
    longest = 0
    total = 0
    for index, value in enumerate(items):
        total += value
        if total in first_seen:
            longest = max(longest, index - first_seen[total])
        else:
            first_seen[total] = index
    return longest


def min_max(items: Iterable[Any]) -> tuple[Any, Any]:
    """Return the smallest and largest elements as a pair."""
    values = list(items)
    if not values:
        raise ValueError("min_max of an empty sequence")
    return min(values), max(values)


def merge_intervals(
    intervals: Iterable[Sequence[int]],
) -> list[tuple[int, int]]:
    """Merge overlapping or touching closed intervals."""
    ordered = sorted((start, end) for start, end in intervals)
    if not ordered:
        return []
    merged: list[tuple[int, int]] = []
    current_start, current_end = ordered[0]
    for start, end in ordered[1:]:
        if current_end >= start:
            current_end = max(current_end, end)
        else:
            merged.append((current_start, current_end))
            current_start, current_end = start, end
    merged.append((current_start, current_end))
    return merged


def merge_without_extra_space(first: list[Any], second: list[Any]) -> None:
    """Rearrange two lists in place so both are sorted and first holds the smallest."""
    i, j = len(first) - 1, 0
    while i >= 0 and j < len(second) and first[i] >= second[j]:
        first[i], second[j] = second[j], first[i]
        i -= 1
        j += 1
    first.sort()
    second.sort()


def negatives_first(items: Iterable[int]) -> list[int]:
    """Return the values ordered so that every negative comes before the rest."""
    return sorted(items)


def next_greater_elements(
    queries: Iterable[Any], items: Sequence[Any]
) -> list[Any]:
    """For each query, return the next greater element after it in ``items``, or -1."""
    following: dict[Any, Any] = {}
    stack: list[Any] = []
    for element in reversed(items):
        while stack and stack[-1] <= element:
            stack.pop()
        following.setdefault(element, stack[-1] if stack else -1)
        stack.append(element)
    result = []
    for query in queries:
        if query not in following:
            raise ValueError(f"{query!r} does not occur in items")
        result.append(following[query])
    return result


def reverse_in_place(items: list[Any]) -> None:
    """Reverse a list in place by swapping from both ends."""
    start, end = 0, len(items) - 1
    while start < end:
        items[start], items[end] = items[end], items[start]
        start += 1
        end -= 1


def rotate_right_by_one(items: list[Any]) -> None:
    """Move the last element to the front in place."""
    if items:
        items.insert(0, items.pop())


def rotate_matrix(matrix: list[list[Any]]) -> list[list[Any]]:
    """Rotate a square matrix 90 degrees clockwise in place and return it."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("rotate_matrix needs a square matrix")
    matrix[:] = [list(column) for column in zip(*reversed(matrix))]
    return matrix