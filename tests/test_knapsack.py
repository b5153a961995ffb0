import pytest

from algodrills.knapsack import (
    can_partition,
    count_coin_ways,
    count_subsets_with_difference,
    count_subsets_with_sum,
    find_target_sum_ways,
    knapsack,
    min_coins,
    min_subset_sum_difference,
    perfect_sum,
    rod_cutting,
)


def test_count_subsets_source_example():
    assert count_subsets_with_sum([2, 3, 5, 6, 8, 10], 10) == 3


def test_count_subsets_with_difference_source_example():
    assert count_subsets_with_difference([1, 1, 2, 3], 1) == 3


def test_target_sum_worked_example():
    assert find_target_sum_ways([1, 1, 1, 1, 1], 3) == 5


def test_knapsack_everything_fits():
    weights = [3, 4, 5]
    values = [7, 2, 9]
    assert knapsack(sum(weights), weights, values) == sum(values)


def test_knapsack_nothing_fits():
    assert knapsack(2, [3, 4], [10, 20]) == 0


def test_knapsack_single_item_choice():
    assert knapsack(5, [5, 5], [8, 11]) == 11


def test_knapsack_length_mismatch():
    with pytest.raises(ValueError):
        knapsack(5, [1, 2], [3])


def test_knapsack_negative_capacity():
    with pytest.raises(ValueError):
        knapsack(-1, [1], [1])


@pytest.mark.parametrize("amount", [0, 1, 7, 20])
def test_count_coin_ways_single_coin(amount):
    assert count_coin_ways([1], amount) == 1


def test_count_coin_ways_impossible():
    assert count_coin_ways([2], 3) == 0


@pytest.mark.parametrize("amount", [0, 4, 13])
def test_min_coins_unit_coin(amount):
    assert min_coins([1], amount) == amount


def test_min_coins_impossible():
    assert min_coins([2], 3) == -1


def test_min_coins_no_coins():
    assert min_coins([], 5) == -1


def test_min_coins_prefers_large_coin():
    assert min_coins([1, 5], 10) == 2


def test_min_subset_difference_zero_when_partitionable():
    arr = [1, 5, 11, 5]
    assert can_partition(arr) is True
    assert min_subset_sum_difference(arr) == 0


def test_min_subset_difference_parity_matches_sum():
    arr = [3, 1, 4, 2, 2, 1]
    diff = min_subset_sum_difference(arr)
    assert 0 <= diff <= sum(arr)
    assert diff % 2 == sum(arr) % 2


def test_can_partition_odd_sum():
    assert can_partition([1, 2, 4]) is False


def test_can_partition_even_sum_unsplittable():
    assert can_partition([1, 2, 5]) is False


def test_count_subsets_invariants():
    arr = [2, 4, 6, 9]
    assert count_subsets_with_sum(arr, 0) == 1
    assert count_subsets_with_sum(arr, sum(arr)) == 1
    assert count_subsets_with_sum(arr, sum(arr) + 1) == 0


def test_count_subsets_symmetry():
    arr = [1, 2, 3, 4, 5]
    total = sum(arr)
    for target in range(total + 1):
        assert count_subsets_with_sum(arr, target) == count_subsets_with_sum(arr, total - target)


def test_count_subsets_negative_target():
    with pytest.raises(ValueError):
        count_subsets_with_sum([1, 2], -1)


def test_count_subsets_with_difference_odd_gap():
    assert count_subsets_with_difference([1, 1, 2, 3], 2) == 0


def test_count_subsets_with_difference_too_large():
    assert count_subsets_with_difference([1, 2], 10) == 0


def test_difference_agrees_with_target_sum():
    arr = [1, 2, 3, 4, 2]
    for diff in range(sum(arr) + 1):
        assert count_subsets_with_difference(arr, diff) == find_target_sum_ways(arr, diff)


def test_perfect_sum_matches_plain_count():
    arr = [2, 3, 5, 6, 8, 10]
    for target in range(sum(arr) + 1):
        assert perfect_sum(arr, target) == count_subsets_with_sum(arr, target)


def test_perfect_sum_is_reduced_modulo():
    arr = [1] * 40
    assert 0 <= perfect_sum(arr, 20) < 1_000_000_007


def test_target_sum_zeros_double():
    base = find_target_sum_ways([1, 2, 3], 0)
    assert find_target_sum_ways([1, 2, 3, 0], 0) == 2 * base
    assert find_target_sum_ways([1, 2, 3, 0, 0], 0) == 4 * base


def test_target_sum_unreachable():
    assert find_target_sum_ways([1, 2], 5) == 0
    assert find_target_sum_ways([1, 2], 2) == 0


def test_target_sum_negative_mirrors_positive():
    nums = [1, 1, 1, 1, 1]
    assert find_target_sum_ways(nums, -3) == find_target_sum_ways(nums, 3)


def test_rod_cutting_lower_bounds():
    prices = [1, 5, 8, 9, 10, 17, 17, 20]
    best = rod_cutting(prices)
    assert best >= prices[-1]
    assert best >= len(prices) * prices[0]
    assert best >= (len(prices) // 2) * prices[1]


def test_rod_cutting_linear_prices():
    prices = [3 * length for length in range(1, 7)]
    assert rod_cutting(prices) == prices[-1]


def test_rod_cutting_empty():
    assert rod_cutting([]) == 0