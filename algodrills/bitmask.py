"""Dynamic programming over subsets encoded as bitmasks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache
from math import gcd


def _fill_groups(values: Sequence[int], target: int) -> bool:
    """Tell whether every value can be placed in groups that each sum to ``target``."""
    n = len(values)
    full = (1 << n) - 1

    def search(start: int, current: int, mask: int) -> bool:
        if mask == full:
            return True
        if current == target:
            # A new group must hold the first unused value, so commit to it.
            first = next(i for i in range(n) if not mask & (1 << i))
            return search(first + 1, values[first], mask | (1 << first))
        for j in range(start, n):
            if not mask & (1 << j) and current + values[j] <= target:
                if search(j + 1, current + values[j], mask | (1 << j)):
                    return True
        return False

    return search(1, values[0], 1)


def make_square(matchsticks: Sequence[int]) -> bool:
    """Tell whether all matchsticks together form the four sides of a square."""
    if not matchsticks:
        return False
    total = sum(matchsticks)
    if total % 4:
        return False
    side = total // 4
    if side < max(matchsticks):
        return False
    return _fill_groups(matchsticks, side)


def can_partition_k_subsets(nums: Sequence[int], k: int) -> bool:
    """Tell whether ``nums`` splits into ``k`` groups with equal sums."""
    if k < 1:
        raise ValueError("k must be positive")
    if not nums:
        return False
    total = sum(nums)
    if total % k:
        return False
    group = total // k
    if group < max(nums):
        return False
    return _fill_groups(nums, group)


def max_score(nums: Sequence[int]) -> int:
    """Return the best score from pairing off all numbers.

    The ``i``-th pairing (counting from 1) scores ``i * gcd(x, y)``.
    """
    size = len(nums)
    if size % 2:
        raise ValueError("an even number of values is required")

    @lru_cache(maxsize=None)
    def best(mask: int) -> int:
        operation = bin(mask).count("1") // 2 + 1
        if operation > size // 2:
            return 0
        result = 0
        for i in range(size):
            if mask & (1 << i):
                continue
            for j in range(i + 1, size):
                if not mask & (1 << j):
                    score = operation * gcd(nums[i], nums[j])
                    result = max(result, score + best(mask | (1 << i) | (1 << j)))
        return result

    return best(0)


def _check_square(matrix: Sequence[Sequence[int]]) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("a square matrix is required")
    return n


def min_assignment_cost(cost: Sequence[Sequence[int]]) -> int:
    """Return the cheapest way to give each worker (row) a distinct job (column)."""
    n = _check_square(cost)

    @lru_cache(maxsize=None)
    def best(worker: int, mask: int) -> int:
        if worker == n:
            return 0
        return min(
            cost[worker][job] + best(worker + 1, mask | (1 << job))
            for job in range(n)
            if not mask & (1 << job)
        )

    return best(0, 0)


def connect_two_groups(cost: Sequence[Sequence[int]]) -> int:
    """Return the least cost to connect two groups so that every point has an edge.

    ``cost[i][j]`` is the price of joining point ``i`` of the first group to
    point ``j`` of the second.
    """
    if not cost or not cost[0]:
        raise ValueError("both groups must be non-empty")
    first, second = len(cost), len(cost[0])
    if any(len(row) != second for row in cost):
        raise ValueError("every row must have the same length")
    cheapest = [min(row[j] for row in cost) for j in range(second)]

    @lru_cache(maxsize=None)
    def best(i: int, mask: int) -> int:
        if i >= first:
            return sum(cheapest[j] for j in range(second) if not mask & (1 << j))
        return min(cost[i][j] + best(i + 1, mask | (1 << j)) for j in range(second))

    return best(0, 0)


def minimum_xor_sum(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Return the smallest sum of ``nums1[i] ^ nums2[p(i)]`` over rearrangements ``p``."""
    n = len(nums1)
    if len(nums2) != n:
        raise ValueError("both sequences must have the same length")

    @lru_cache(maxsize=None)
    def best(mask: int) -> int:
        i = bin(mask).count("1")
        if i == n:
            return 0
        return min(
            (nums1[i] ^ nums2[j]) + best(mask | (1 << j))
            for j in range(n)
            if not mask & (1 << j)
        )

    return best(0)


def travelling_salesman(distance: Sequence[Sequence[int]]) -> int:
    """Return the shortest round trip from city 0 through every city and back."""
    n = _check_square(distance)
    if n == 0:
        raise ValueError("at least one city is required")
    full = (1 << n) - 1

    @lru_cache(maxsize=None)
    def best(city: int, mask: int) -> int:
        if mask == full:
            return distance[city][0]
        return min(
            distance[city][j] + best(j, mask | (1 << j))
            for j in range(n)
            if not mask & (1 << j)
        )

    return best(0, 1)


def count_shirt_assignments(collections: Sequence[Iterable[int]]) -> int:
    """Return how many ways each person gets a different shirt from their own collection."""
    owned = [frozenset(shirts) for shirts in collections]
    people = len(owned)
    shirts = sorted(set().union(*owned)) if owned else []
    full = (1 << people) - 1

    @lru_cache(maxsize=None)
    def ways(index: int, mask: int) -> int:
        if mask == full:
            return 1
        if index == len(shirts):
            return 0
        shirt = shirts[index]
        total = ways(index + 1, mask)
        for person in range(people):
            if not mask & (1 << person) and shirt in owned[person]:
                total += ways(index + 1, mask | (1 << person))
        return total

    return ways(0, 0)