"""Subsequence and supersequence problems on sequences and strings."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from typing import Any


def longest_increasing_subsequence(nums: Sequence[Any]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[Any] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def _lcs_table(first: Sequence[Any], second: Sequence[Any]) -> list[list[int]]:
    table = [[0] * (len(second) + 1) for _ in range(len(first) + 1)]
    for i, a in enumerate(first, start=1):
        row, above = table[i], table[i - 1]
        for j, b in enumerate(second, start=1):
            if a == b:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(above[j], row[j - 1])
    return table


def lcs_length(first: Sequence[Any], second: Sequence[Any]) -> int:
    """Return the length of the longest common subsequence."""
    return _lcs_table(first, second)[-1][-1]


def longest_common_subsequence(first: str, second: str) -> str:
    """Return one longest common subsequence of two strings."""
    table = _lcs_table(first, second)
    i, j = len(first), len(second)
    collected: list[str] = []
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            collected.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            j -= 1
        else:
            i -= 1
    return "".join(reversed(collected))


def longest_common_substring(first: Sequence[Any], second: Sequence[Any]) -> int:
    """Return the length of the longest common contiguous run."""
    longest = 0
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0] * (len(second) + 1)
        for j, b in enumerate(second, start=1):
            if a == b:
                current[j] = previous[j - 1] + 1
                longest = max(longest, current[j])
        previous = current
    return longest


def longest_palindromic_subsequence(text: str) -> int:
    """Return the length of the longest palindromic subsequence."""
    return lcs_length(text, text[::-1])


def longest_repeating_subsequence(text: str) -> int:
    """Return the length of the longest subsequence occurring twice at distinct positions."""
    size = len(text)
    table = [[0] * (size + 1) for _ in range(size + 1)]
    for i in range(1, size + 1):
        for j in range(1, size + 1):
            if text[i - 1] == text[j - 1] and i != j:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i][j - 1], table[i - 1][j])
    return table[size][size]


def min_deletions_to_palindrome(text: str) -> int:
    """Return the fewest deletions that leave a palindrome."""
    return len(text) - longest_palindromic_subsequence(text)


def min_insertions_to_palindrome(text: str) -> int:
    """Return the fewest insertions that make a palindrome."""
    return len(text) - longest_palindromic_subsequence(text)


def shortest_common_supersequence(first: str, second: str) -> str:
    """Return one shortest string holding both strings as subsequences."""
    table = _lcs_table(first, second)
    i, j = len(first), len(second)
    collected: list[str] = []
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            collected.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            collected.append(second[j - 1])
            j -= 1
        else:
            collected.append(first[i - 1])
            i -= 1
    collected.extend(reversed(first[:i]))
    collected.extend(reversed(second[:j]))
    return "".join(reversed(collected))


def shortest_common_supersequence_length(first: Sequence[Any], second: Sequence[Any]) -> int:
    """Return the length of the shortest common supersequence."""
    return len(first) + len(second) - lcs_length(first, second)