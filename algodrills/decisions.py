"""Take-or-skip dynamic programming: house robbing and stock trading."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node holding an amount of money."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _rob_line(houses: Sequence[int]) -> int:
    if not houses:
        return 0
    robbed, skipped = houses[0], 0
    for amount in houses[1:]:
        robbed, skipped = amount + skipped, max(robbed, skipped)
    return max(robbed, skipped)


def rob(houses: Sequence[int]) -> int:
    """Return the most money from houses in a row, never taking two neighbours."""
    return _rob_line(houses)


def rob_circular(houses: Sequence[int]) -> int:
    """Like :func:`rob`, but the first and last houses are neighbours too."""
    if len(houses) == 1:
        return houses[0]
    return max(_rob_line(houses[:-1]), _rob_line(houses[1:]))


def rob_tree(root: TreeNode | None) -> int:
    """Return the most money from a tree, never taking a parent and its child."""
    if root is None:
        return 0
    # Post-order walk; each node maps to (best without it, best with it).
    results: dict[int, tuple[int, int]] = {}
    stack: list[tuple[TreeNode, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if not expanded:
            stack.append((node, True))
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, False))
            continue
        left = results.pop(id(node.left), (0, 0)) if node.left else (0, 0)
        right = results.pop(id(node.right), (0, 0)) if node.right else (0, 0)
        without = max(left) + max(right)
        with_node = node.val + left[0] + right[0]
        results[id(node)] = (without, with_node)
    return max(results[id(root)])


def max_profit_single(prices: Sequence[int]) -> int:
    """Return the best profit from at most one buy followed by one sell."""
    best = 0
    lowest = None
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_with_fee(prices: Sequence[int], fee: int) -> int:
    """Return the best profit with unlimited trades, paying ``fee`` on each buy."""
    own_next, free_next = 0, 0
    for price in reversed(prices):
        own = max(own_next, price + free_next)
        free = max(free_next, -(price + fee) + own_next)
        own_next, free_next = own, free
    return free_next


def max_profit_with_cooldown(prices: Sequence[int]) -> int:
    """Return the best profit with unlimited trades and a one-day wait after selling."""
    own_next, ready_next, cooling_next = 0, 0, 0
    for price in reversed(prices):
        own = max(price + cooling_next, own_next)
        ready = max(-price + own_next, ready_next)
        cooling = max(0, ready_next)
        own_next, ready_next, cooling_next = own, ready, cooling
    return ready_next


def max_profit_k_transactions(k: int, prices: Sequence[int]) -> int:
    """Return the best profit from at most ``k`` buy-and-sell transactions."""
    if k < 0:
        raise ValueError("transaction count must be non-negative")
    # Index t holds the value with t transactions left; t == 0 is always 0.
    own_next = [0] * (k + 1)
    free_next = [0] * (k + 1)
    for price in reversed(prices):
        own = [0] * (k + 1)
        free = [0] * (k + 1)
        for t in range(1, k + 1):
            own[t] = max(price + free_next[t - 1], own_next[t])
            free[t] = max(-price + own_next[t], free_next[t])
        own_next, free_next = own, free
    return free_next[k]


def max_profit_two_transactions(prices: Sequence[int]) -> int:
    """Return the best profit from at most two transactions."""
    return max_profit_k_transactions(2, prices)