"""Dynamic programming that optimises a path towards a target."""

from __future__ import annotations

from collections.abc import Sequence


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the least cost to climb past the top step.

    Each step may be climbed one or two at a time, paying the cost of the
    step left behind; the climb may start on step 0 or step 1.
    """
    two_back, one_back = 0, 0
    for i in range(2, len(cost) + 1):
        two_back, one_back = one_back, min(one_back + cost[i - 1], two_back + cost[i - 2])
    return one_back


def find_max_form(strs: Sequence[str], zeros: int, ones: int) -> int:
    """Return the most strings that fit within ``zeros`` '0' and ``ones`` '1' characters.

    Every character that is not '0' counts as a '1'.
    """
    if zeros < 0 or ones < 0:
        raise ValueError("zeros and ones must be non-negative")
    best = [[0] * (ones + 1) for _ in range(zeros + 1)]
    for text in strs:
        need_zeros = text.count("0")
        need_ones = len(text) - need_zeros
        for i in range(zeros, need_zeros - 1, -1):
            row, source = best[i], best[i - need_zeros]
            for j in range(ones, need_ones - 1, -1):
                row[j] = max(row[j], 1 + source[j - need_ones])
    return best[zeros][ones]


def maximal_square(matrix: Sequence[Sequence[str]]) -> int:
    """Return the area of the largest square holding only '1' cells."""
    if not matrix or not matrix[0]:
        return 0
    filled = [[str(cell) == "1" for cell in row] for row in matrix]
    side = [[1 if cell else 0 for cell in row] for row in filled]
    largest = max((max(row) for row in side), default=0)
    for i in range(1, len(side)):
        for j in range(1, len(side[i])):
            if filled[i][j]:
                side[i][j] = 1 + min(side[i - 1][j], side[i][j - 1], side[i - 1][j - 1])
                largest = max(largest, side[i][j])
    return largest * largest


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum along a path from the top left to the bottom right.

    Each move goes either right or down.
    """
    if not grid or not grid[0]:
        raise ValueError("the grid must be non-empty")
    row: list[int] = []
    for value in grid[0]:
        row.append(value + (row[-1] if row else 0))
    for line in grid[1:]:
        row[0] += line[0]
        for j in range(1, len(row)):
            row[j] = min(row[j], row[j - 1]) + line[j]
    return row[-1]


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins that add up to ``amount``, or -1 if none do."""
    if amount < 0:
        raise ValueError("amount must be non-negative")
    unreachable = float("inf")
    fewest: list[float] = [0] + [unreachable] * amount
    for total in range(1, amount + 1):
        for coin in coins:
            if 0 < coin <= total:
                fewest[total] = min(fewest[total], fewest[total - coin] + 1)
    result = fewest[amount]
    return -1 if result == unreachable else int(result)


def min_falling_path_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum of a path falling one row at a time through a square matrix.

    From one row the path moves to the same column or a diagonal neighbour.
    """
    n = len(matrix)
    if n == 0 or any(len(row) != n for row in matrix):
        raise ValueError("a non-empty square matrix is required")
    previous = list(matrix[0])
    for line in matrix[1:]:
        previous = [
            value + min(previous[max(0, j - 1) : min(n, j + 2)])
            for j, value in enumerate(line)
        ]
    return min(previous)


def mincost_tickets(days: Sequence[int], costs: Sequence[int]) -> int:
    """Return the least spent on 1-, 7- and 30-day passes covering every travel day."""
    if len(costs) != 3:
        raise ValueError("three pass costs are required")
    if not days:
        return 0
    travel = set(days)
    last = max(days)
    spent = [0] * (last + 1)
    for day in range(1, last + 1):
        if day not in travel:
            spent[day] = spent[day - 1]
        else:
            spent[day] = min(
                spent[day - 1] + costs[0],
                spent[max(0, day - 7)] + costs[1],
                spent[max(0, day - 30)] + costs[2],
            )
    return spent[last]


def min_steps(n: int) -> int:
    """Return the fewest copy-all and paste operations to get ``n`` characters from one."""
    if n < 1:
        raise ValueError("n must be positive")
    steps = [0] * (n + 1)
    for i in range(2, n + 1):
        factor = next(j for j in range(i // 2, 0, -1) if i % j == 0)
        steps[i] = steps[factor] + i // factor
    return steps[n]


def num_squares(n: int) -> int:
    """Return the fewest perfect squares that add up to ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    fewest = [0] * (n + 1)
    for i in range(1, n + 1):
        fewest[i] = 1 + min(fewest[i - j * j] for j in range(1, int(i**0.5) + 2) if j * j <= i)
    return fewest[n]


def last_stone_weight_ii(stones: Sequence[int]) -> int:
    """Return the smallest possible weight of the last stone after smashing them all."""
    total = sum(stones)
    half = total // 2
    reachable = 1
    for stone in stones:
        reachable |= reachable << stone
    best = next(s for s in range(half, -1, -1) if reachable >> s & 1)
    return total - 2 * best


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum along a path from the top of a triangle to its base."""
    if not triangle:
        raise ValueError("the triangle must be non-empty")
    for i, row in enumerate(triangle):
        if len(row) != i + 1:
            raise ValueError(f"row {i} must hold {i + 1} values")
    previous = list(triangle[0])
    for i, line in enumerate(triangle[1:], start=1):
        previous = [
            value + min(previous[max(0, j - 1)], previous[min(i - 1, j)])
            for j, value in enumerate(line)
        ]
    return min(previous)