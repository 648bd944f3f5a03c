"""Knapsack-family dynamic programming problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

PERFECT_SUM_MODULUS = 1_000_000_007


def _non_negative(items: Iterable[int]) -> list[int]:
    values = list(items)
    if any(value < 0 for value in values):
        raise ValueError("all values must be non-negative")
    return values


def _positive(items: Iterable[int], what: str) -> list[int]:
    values = list(items)
    if any(value <= 0 for value in values):
        raise ValueError(f"all {what} must be positive")
    return values


def _subset_sum_counts(items: Sequence[int], limit: int) -> list[int]:
    """Number of subsets reaching each total from 0 to ``limit``."""
    counts = [1] + [0] * limit
    for value in items:
        for total in range(limit, value - 1, -1):
            counts[total] += counts[total - value]
    return counts


def _reachable_sums(items: Sequence[int], limit: int) -> list[bool]:
    reachable = [True] + [False] * limit
    for value in items:
        for total in range(limit, value - 1, -1):
            if reachable[total - value]:
                reachable[total] = True
    return reachable


def knapsack(
    capacity: int, weights: Sequence[int], values: Sequence[int]
) -> int:
    """Return the best total value of items fitting within ``capacity``."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    _non_negative(weights)
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def count_coin_ways(coins: Iterable[int], amount: int) -> int:
    """Count the combinations of coins, each usable any number of times, summing to ``amount``."""
    denominations = _positive(coins, "coins")
    if amount < 0:
        return 0
    ways = [1] + [0] * amount
    for coin in denominations:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def min_coins(coins: Iterable[int], amount: int) -> int | None:
    """Return the fewest coins summing to ``amount``, or None if impossible."""
    denominations = _positive(coins, "coins")
    if not denominations or amount < 0:
        return None
    unreachable = amount + 1
    best = [0] + [unreachable] * amount
    for coin in denominations:
        for total in range(coin, amount + 1):
            best[total] = min(best[total], best[total - coin] + 1)
    return None if best[amount] == unreachable else best[amount]


def min_subset_sum_difference(items: Iterable[int]) -> int:
    """Split the values into two groups and return the smallest difference of their sums."""
    values = _non_negative(items)
    total = sum(values)
    reachable = _reachable_sums(values, total // 2)
    closest = max(s for s, ok in enumerate(reachable) if ok)
    return total - 2 * closest


def count_subsets_with_difference(items: Iterable[int], difference: int) -> int:
    """Count the ways to split the values into two groups whose sums differ by ``difference``."""
    values = _non_negative(items)
    total = sum(values)
    if abs(difference) > total or (total - difference) % 2:
        return 0
    wanted = (total - difference) // 2
    return _subset_sum_counts(values, wanted)[wanted]


def perfect_sum(items: Iterable[int], target: int) -> int:
    """Count subsets summing to ``target``, modulo 1_000_000_007."""
    values = _non_negative(items)
    if target < 0:
        return 0
    counts = [1] + [0] * target
    for value in values:
        for total in range(target, value - 1, -1):
            counts[total] = (counts[total] + counts[total - value]) % PERFECT_SUM_MODULUS
    return counts[target]


def rod_cutting(prices: Sequence[int]) -> int:
    """Return the best price for a rod of length ``len(prices)``; piece i+1 sells for prices[i]."""
    length = len(prices)
    best = [0] * (length + 1)
    for piece, price in enumerate(prices, start=1):
        for room in range(piece, length + 1):
            best[room] = max(best[room], best[room - piece] + price)
    return best[length]


def has_subset_sum(items: Iterable[int], target: int) -> bool:
    """Tell whether some subset of the values sums to ``target``."""
    values = _non_negative(items)
    if target < 0:
        return False
    return _reachable_sums(values, target)[target]


def can_partition_equally(items: Iterable[int]) -> bool:
    """Tell whether the values split into two groups of equal sum."""
    values = _non_negative(items)
    total = sum(values)
    return total % 2 == 0 and has_subset_sum(values, total // 2)


def target_sum_ways(nums: Iterable[int], target: int) -> int:
    """Count the sign assignments to ``nums`` whose signed sum equals ``target``."""
    return count_subsets_with_difference(nums, target)