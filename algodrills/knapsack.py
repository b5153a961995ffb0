"""Knapsack-style dynamic programming: subsets, coins and rods."""

from __future__ import annotations

from collections.abc import Sequence

_MODULUS = 1_000_000_007


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative")


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items fitting in ``capacity`` (each used once)."""
    _check_non_negative("capacity", capacity)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, 0, -1):
            if weight <= room:
                best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def count_coin_ways(coins: Sequence[int], amount: int) -> int:
    """Return the number of coin combinations, each coin usable any number of times."""
    _check_non_negative("amount", amount)
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(1, amount + 1):
            if coin <= total:
                ways[total] += ways[total - coin]
    return ways[amount]


def min_coins(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins summing to ``amount``, or -1 when it cannot be made."""
    _check_non_negative("amount", amount)
    if not coins:
        return -1
    unreachable = float("inf")
    fewest: list[float] = [0] + [unreachable] * amount
    for coin in coins:
        for total in range(1, amount + 1):
            if coin <= total:
                fewest[total] = min(fewest[total], 1 + fewest[total - coin])
    result = fewest[amount]
    return -1 if result == unreachable else int(result)


def _reachable_sums(arr: Sequence[int], limit: int) -> list[bool]:
    reachable = [True] + [False] * limit
    for value in arr:
        for total in range(limit, 0, -1):
            if value <= total and reachable[total - value]:
                reachable[total] = True
    return reachable


def min_subset_sum_difference(arr: Sequence[int]) -> int:
    """Return the smallest difference between the sums of a two-way split of ``arr``."""
    total = sum(arr)
    reachable = _reachable_sums(arr, total // 2)
    best = next(s for s in range(total // 2, -1, -1) if reachable[s])
    return total - 2 * best


def _count_sums(arr: Sequence[int], target: int, modulus: int | None = None) -> int:
    _check_non_negative("target", target)
    counts = [1] + [0] * target
    for value in arr:
        for total in range(target, 0, -1):
            if value <= total:
                counts[total] += counts[total - value]
                if modulus is not None:
                    counts[total] %= modulus
    return counts[target]


def count_subsets_with_sum(arr: Sequence[int], target: int) -> int:
    """Return how many subsets of ``arr`` add up to ``target``."""
    return _count_sums(arr, target)


def count_subsets_with_difference(arr: Sequence[int], diff: int) -> int:
    """Return how many ways ``arr`` splits into two groups whose sums differ by ``diff``."""
    excess = sum(arr) - diff
    if excess < 0 or excess % 2:
        return 0
    return _count_sums(arr, excess // 2)


def perfect_sum(arr: Sequence[int], target: int) -> int:
    """Return the number of subsets summing to ``target``, modulo 10**9 + 7."""
    return _count_sums(arr, target, _MODULUS)


def can_partition(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` splits into two groups of equal sum."""
    total = sum(nums)
    if total % 2:
        return False
    return _reachable_sums(nums, total // 2)[total // 2]


def find_target_sum_ways(nums: Sequence[int], target: int) -> int:
    """Return how many ways to sign each number so that they add up to ``target``."""
    total = sum(nums)
    if target > total or (total - target) % 2:
        return 0
    wanted = (total - target) // 2
    if wanted < 0:
        return 0
    zeros = sum(1 for value in nums if value == 0)
    non_zero = [value for value in nums if value != 0]
    return 2**zeros * _count_sums(non_zero, wanted)


def rod_cutting(prices: Sequence[int]) -> int:
    """Return the best price for a rod of length ``len(prices)``.

    ``prices[i]`` is the price of a piece of length ``i + 1``.
    """
    n = len(prices)
    best = [0] * (n + 1)
    for piece, price in enumerate(prices, start=1):
        for length in range(piece, n + 1):
            best[length] = max(best[length], price + best[length - piece])
    return best[n]