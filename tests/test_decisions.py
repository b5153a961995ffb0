import pytest

from algodrills.decisions import (
    TreeNode,
    max_profit_k_transactions,
    max_profit_single,
    max_profit_two_transactions,
    max_profit_with_cooldown,
    max_profit_with_fee,
    rob,
    rob_circular,
    rob_tree,
)

HOUSES = [[1, 2, 3, 1], [2, 7, 9, 3, 1], [5], [4, 1, 2, 7, 5, 3, 1], [0, 0, 0]]
PRICES = [
    [7, 1, 5, 3, 6, 4],
    [1, 2, 3, 4, 5],
    [7, 6, 4, 3, 1],
    [3, 3, 5, 0, 0, 3, 1, 4],
    [1, 3, 2, 8, 4, 9],
    [],
]


def _chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, left=root)
    return root


def test_rob_worked_example():
    assert rob([1, 2, 3, 1]) == 4


def test_rob_empty_and_single():
    assert rob([]) == 0
    assert rob([5]) == 5


@pytest.mark.parametrize("houses", HOUSES)
def test_rob_bounded_by_total(houses):
    result = rob(houses)
    assert max(houses) <= result <= sum(houses)


@pytest.mark.parametrize("houses", HOUSES)
def test_circular_not_better_than_line(houses):
    assert rob_circular(houses) <= rob(houses)


def test_circular_single_house():
    assert rob_circular([5]) == 5


def test_circular_ends_adjacent():
    assert rob_circular([9, 1, 9]) == 9


@pytest.mark.parametrize("houses", HOUSES)
def test_tree_chain_matches_line(houses):
    assert rob_tree(_chain(houses)) == rob(houses)


def test_tree_empty():
    assert rob_tree(None) == 0


def test_tree_grandchildren_preferred():
    root = TreeNode(1, TreeNode(1, TreeNode(10), TreeNode(10)), TreeNode(1))
    assert rob_tree(root) == 10 + 10 + 1


def test_single_worked_example():
    assert max_profit_single([7, 1, 5, 3, 6, 4]) == 5


def test_single_ascending():
    prices = [1, 2, 3, 4, 5]
    assert max_profit_single(prices) == prices[-1] - prices[0]


def test_single_descending_is_zero():
    assert max_profit_single([7, 6, 4, 3, 1]) == 0


@pytest.mark.parametrize("prices", PRICES)
def test_k_one_equals_single(prices):
    assert max_profit_k_transactions(1, prices) == max_profit_single(prices)


@pytest.mark.parametrize("prices", PRICES)
def test_two_equals_k_two(prices):
    assert max_profit_two_transactions(prices) == max_profit_k_transactions(2, prices)


@pytest.mark.parametrize("prices", PRICES)
def test_k_monotonic(prices):
    profits = [max_profit_k_transactions(k, prices) for k in range(5)]
    assert profits[0] == 0
    assert profits == sorted(profits)


@pytest.mark.parametrize("prices", PRICES)
def test_zero_fee_matches_unlimited(prices):
    unlimited = max_profit_k_transactions(len(prices) + 1, prices)
    assert max_profit_with_fee(prices, 0) == unlimited


def test_ascending_unlimited_gain():
    prices = [1, 2, 3, 4, 5]
    assert max_profit_with_fee(prices, 0) == prices[-1] - prices[0]


@pytest.mark.parametrize("prices", PRICES)
def test_fee_reduces_profit(prices):
    assert max_profit_with_fee(prices, 2) <= max_profit_with_fee(prices, 0)
    assert max_profit_with_fee(prices, 2) >= 0


@pytest.mark.parametrize("prices", PRICES)
def test_cooldown_between_single_and_unlimited(prices):
    result = max_profit_with_cooldown(prices)
    assert max_profit_single(prices) <= result <= max_profit_with_fee(prices, 0)


def test_cooldown_blocks_immediate_rebuy():
    assert max_profit_with_cooldown([1, 4, 1, 4]) == 3


def test_negative_k_rejected():
    with pytest.raises(ValueError):
        max_profit_k_transactions(-1, [1, 2])