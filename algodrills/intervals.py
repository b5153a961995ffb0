"""Interval dynamic programming: chains, partitions, balloons and cuts."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

_OPERANDS = {"T": True, "F": False}
_OPERATORS = frozenset("&|^")


def matrix_chain_cost(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` has shape ``dims[i] x dims[i + 1]``, so ``len(dims) - 1``
    matrices are multiplied.  Fewer than two matrices cost nothing.
    """
    count = len(dims) - 1
    if count < 2:
        return 0
    # cost[l][r]: cheapest way to multiply matrices l..r inclusive.
    cost = [[0] * count for _ in range(count)]
    for gap in range(1, count):
        for left in range(count - gap):
            right = left + gap
            cost[left][right] = min(
                cost[left][k] + cost[k + 1][right] + dims[left] * dims[k + 1] * dims[right + 1]
                for k in range(left, right)
            )
    return cost[0][count - 1]


def _palindrome_table(s: str) -> list[list[bool]]:
    n = len(s)
    table = [[False] * n for _ in range(n)]
    for gap in range(n):
        for left in range(n - gap):
            right = left + gap
            if gap == 0:
                table[left][right] = True
            elif gap == 1:
                table[left][right] = s[left] == s[right]
            else:
                table[left][right] = s[left] == s[right] and table[left + 1][right - 1]
    return table


def palindromic_partition_cuts(s: str) -> int:
    """Return the fewest cuts that split ``s`` into palindromes."""
    n = len(s)
    if n == 0:
        return 0
    is_palindrome = _palindrome_table(s)
    # cuts[r]: fewest cuts for the prefix s[:r + 1].
    cuts = [0] * n
    for right in range(1, n):
        if is_palindrome[0][right]:
            cuts[right] = 0
        else:
            cuts[right] = 1 + min(
                cuts[left - 1] for left in range(1, right + 1) if is_palindrome[left][right]
            )
    return cuts[-1]


def max_coins(nums: Sequence[int]) -> int:
    """Return the most coins from bursting every balloon.

    Bursting a balloon pays its value times its current neighbours; a
    missing neighbour counts as 1.
    """
    n = len(nums)
    if n == 0:
        return 0
    best = [[0] * n for _ in range(n)]
    for gap in range(n):
        for left in range(n - gap):
            right = left + gap
            outer = 1
            if left > 0:
                outer *= nums[left - 1]
            if right < n - 1:
                outer *= nums[right + 1]
            for last in range(left, right + 1):
                before = best[left][last - 1] if last > left else 0
                after = best[last + 1][right] if last < right else 0
                best[left][right] = max(
                    best[left][right], before + nums[last] * outer + after
                )
    return best[0][n - 1]


def _check_expression(expr: str) -> None:
    if len(expr) % 2 == 0:
        raise ValueError("expression must alternate operands and operators")
    for pos, symbol in enumerate(expr):
        if pos % 2 == 0 and symbol not in _OPERANDS:
            raise ValueError(f"expected T or F at position {pos}, got {symbol!r}")
        if pos % 2 == 1 and symbol not in _OPERATORS:
            raise ValueError(f"expected an operator at position {pos}, got {symbol!r}")


def count_boolean_parenthesizations(expr: str) -> int:
    """Return how many ways ``expr`` can be parenthesized to evaluate to true.

    ``expr`` alternates the operands ``T``/``F`` with the operators
    ``&``, ``|`` and ``^``, for example ``"T|T&F^T"``.
    """
    if not expr:
        return 0
    _check_expression(expr)

    @lru_cache(maxsize=None)
    def ways(i: int, j: int) -> tuple[int, int]:
        """Return (true count, false count) for expr[i..j]."""
        if i == j:
            value = _OPERANDS[expr[i]]
            return (1, 0) if value else (0, 1)
        true_count = false_count = 0
        for k in range(i + 1, j, 2):
            left_t, left_f = ways(i, k - 1)
            right_t, right_f = ways(k + 1, j)
            op = expr[k]
            if op == "&":
                true_count += left_t * right_t
                false_count += left_f * right_f + left_t * right_f + left_f * right_t
            elif op == "|":
                true_count += left_t * right_t + left_t * right_f + left_f * right_t
                false_count += left_f * right_f
            else:
                true_count += left_f * right_t + left_t * right_f
                false_count += left_t * right_t + left_f * right_f
        return true_count, false_count

    return ways(0, len(expr) - 1)[0]


def min_cost_to_cut_stick(length: int, cuts: Sequence[int]) -> int:
    """Return the least total cost of making every cut in a stick of ``length``.

    Each cut costs the length of the piece being cut; cuts may be made in
    any order.
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    for cut in cuts:
        if not 0 < cut < length:
            raise ValueError(f"cut {cut} lies outside the stick")
    points = sorted([0, length, *cuts])
    n = len(points)
    best = [[0] * n for _ in range(n)]
    for gap in range(2, n):
        for left in range(n - gap):
            right = left + gap
            best[left][right] = points[right] - points[left] + min(
                best[left][k] + best[k][right] for k in range(left + 1, right)
            )
    return best[0][n - 1]


def super_egg_drop(eggs: int, floors: int) -> int:
    """Return the fewest drops that always find the critical floor."""
    if eggs < 0 or floors < 0:
        raise ValueError("eggs and floors must be non-negative")
    if eggs == 0 or floors == 0:
        return 0
    previous = list(range(floors + 1))
    for _ in range(2, eggs + 1):
        current = [0] * (floors + 1)
        current[1] = 1
        for j in range(2, floors + 1):
            current[j] = 1 + min(
                max(current[j - k], previous[k - 1]) for k in range(1, j + 1)
            )
        previous = current
    return previous[floors]