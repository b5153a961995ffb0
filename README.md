# algodrills

Classic algorithms and dynamic-programming patterns. Each one is a small
Python function that takes plain values, such as lists, strings and ints,
and returns a plain result. The package needs nothing beyond the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `algodrills.classic`
  - `roman_to_int`
  - `generate_parenthesis`: balanced strings in lexicographic order
  - `activity_selection`
  - `power`: exponentiation by squaring
  - `book_allocation`
- `algodrills.graphs`
  - the `Graph` class, with `add_edge` and `bfs`
  - `dfs_adjacency_matrix`
  - `dfs_components`: vertices `1..n`, walking every component
- `algodrills.sorting`
  - `bucket_sort`: values in `[0, 1)`
  - `heap_sort`
- `algodrills.sequences`
  - `length_of_lis`
  - `lcs_length`, `longest_common_subsequence`
  - `longest_common_substring`
  - `longest_palindromic_subsequence`
  - `longest_repeating_subsequence`
  - `shortest_common_supersequence`, `shortest_common_supersequence_length`
  - `is_interleave`
  - `min_deletions_to_palindrome`, `min_insertions_to_palindrome`
- `algodrills.decisions`
  - house robbing: `rob`, `rob_circular`, and `rob_tree` over `TreeNode` trees
  - stock trading: `max_profit_single`, `max_profit_with_fee`,
    `max_profit_with_cooldown`, `max_profit_two_transactions`,
    `max_profit_k_transactions`
- `algodrills.knapsack`
  - `knapsack`
  - `count_coin_ways`, `min_coins`
  - `min_subset_sum_difference`
  - `count_subsets_with_sum`, `count_subsets_with_difference`
  - `perfect_sum`: the count modulo 10**9 + 7
  - `can_partition`
  - `find_target_sum_ways`
  - `rod_cutting`
- `algodrills.intervals`
  - `matrix_chain_cost`
  - `palindromic_partition_cuts`
  - `max_coins`: burst balloons
  - `count_boolean_parenthesizations`, with expressions such as `"T|T&F^T"`
  - `min_cost_to_cut_stick`
  - `super_egg_drop`
- `algodrills.bitmask`
  - `make_square`
  - `max_score`
  - `min_assignment_cost`
  - `connect_two_groups`
  - `minimum_xor_sum`
  - `can_partition_k_subsets`
  - `travelling_salesman`
  - `count_shirt_assignments`
- `algodrills.paths`
  - `min_cost_climbing_stairs`
  - `find_max_form`
  - `maximal_square`
  - `min_path_sum`
  - `coin_change`
  - `min_falling_path_sum`
  - `mincost_tickets`
  - `min_steps`
  - `num_squares`
  - `last_stone_weight_ii`
  - `minimum_total`

Bad input raises `ValueError`. Examples of bad input are mismatched lengths, negative amounts and non-square matrices.

## Example

```python
from algodrills.classic import roman_to_int, generate_parenthesis
from algodrills.sequences import longest_common_subsequence
from algodrills.knapsack import knapsack
from algodrills.graphs import Graph

roman_to_int("MMXIII")                             # 2013
generate_parenthesis(3)
# ['((()))', '(()())', '(())()', '()(())', '()()()']
longest_common_subsequence("ABCDEF", "ABXYDVEYF")  # 'ABDEF'
knapsack(50, [10, 20, 30], [60, 100, 120])         # 220

g = Graph(4)
for v, w in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(v, w)
g.bfs(2)                                           # [2, 0, 3, 1]
```

## What it does not do

- This is a library only. It has no command-line program, and it reads no input from files or standard input.
- It has no functions for Catalan numbers or binomial coefficients.
- `roman_to_int` does not handle subtractive forms. It adds up the leading runs of `M`, `D`, `C`, `L` and `X`, in that order, and then reads what is left only if it is one of `I` to `IX`.