"""Interval and partition dynamic programming problems."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def is_interleave(
    first: Sequence[Any], second: Sequence[Any], combined: Sequence[Any]
) -> bool:
    """Tell whether ``combined`` interleaves ``first`` and ``second`` keeping their orders."""
    m, n = len(first), len(second)
    if m + n != len(combined):
        return False
    # reach[j] is True when first[:i] and second[:j] can form combined[:i + j].
    reach = [False] * (n + 1)
    for i in range(m + 1):
        for j in range(n + 1):
            if i == 0 and j == 0:
                reach[0] = True
                continue
            target = combined[i + j - 1]
            from_first = i > 0 and reach[j] and first[i - 1] == target
            from_second = j > 0 and reach[j - 1] and second[j - 1] == target
            reach[j] = from_first or from_second
    return reach[n]


def matrix_chain_cost(dimensions: Sequence[int]) -> int:
    """Return the fewest scalar multiplications needed to multiply a matrix chain.

    Matrix ``i`` has shape ``dimensions[i] x dimensions[i + 1]``.
    """
    dims = list(dimensions)
    if any(size <= 0 for size in dims):
        raise ValueError("matrix dimensions must be positive")
    count = len(dims) - 1
    if count < 2:
        return 0
    cost = [[0] * count for _ in range(count)]
    for length in range(2, count + 1):
        for i in range(count - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1]
                for k in range(i, j)
            )
    return cost[0][count - 1]


def _palindrome_table(text: Sequence[Any]) -> list[list[bool]]:
    size = len(text)
    table = [[False] * size for _ in range(size)]
    for gap in range(size):
        for i in range(size - gap):
            j = i + gap
            if gap == 0:
                table[i][j] = True
            elif gap == 1:
                table[i][j] = text[i] == text[j]
            else:
                table[i][j] = text[i] == text[j] and table[i + 1][j - 1]
    return table


def min_palindrome_cuts(text: Sequence[Any]) -> int:
    """Return the fewest cuts that split ``text`` into palindromic pieces."""
    size = len(text)
    if size == 0:
        return 0
    palindrome = _palindrome_table(text)
    cuts = [0] * size
    for j in range(size):
        if palindrome[0][j]:
            cuts[j] = 0
        else:
            cuts[j] = 1 + min(cuts[i - 1] for i in range(1, j + 1) if palindrome[i][j])
    return cuts[-1]


def super_egg_drop(eggs: int, floors: int) -> int:
    """Return the fewest drops that always find the critical floor."""
    if eggs < 1:
        raise ValueError("at least one egg is needed")
    if floors < 0:
        raise ValueError("floors must be non-negative")
    # covered[k] is the number of floors that k eggs settle within the current number of moves.
    covered = [0] * (eggs + 1)
    moves = 0
    while covered[eggs] < floors:
        moves += 1
        for k in range(eggs, 0, -1):
            covered[k] = covered[k] + covered[k - 1] + 1
    return moves