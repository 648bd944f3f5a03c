"""Searching in sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def linear_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    return next(
        (index for index, item in enumerate(items) if item == target),
        None,
    )


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the ascending ``items``, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == target:
            return mid
        if value > target:
            high = mid - 1
        else:
            low = mid + 1
    return None