# cpkit

Algorithms that come up again and again in competitive programming, packaged
as plain Python functions and classes. There are no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cpkit.segtree` | Generic point-update, inclusive range-query `SegmentTree` (`update`, `set`, `query`, `len()`), plus `sum_tree`, `min_tree`, `min_count_tree` (returns `MinCount(value, count)`), `ones_tree` and `flip`; `INF` is the empty-range minimum |
| `cpkit.segtree_search` | `MaxTree` with `set` and `first_at_least` (returns -1 when no value qualifies), and `MaxSubarrayTree` with `set` and `best`, built on the `SegmentSummary` dataclass |
| `cpkit.numtheory` | `gcd`, `expo`, `extended_gcd`, `mod_inverse`, `mod_inverse_prime`, `mod_add`, `mod_sub`, `mod_mul`, `mod_div`, `combination`, `sieve`, `phi`, `random_in_range`, `parse_int`, `case_label`, and the constants `MOD` and `MOD1` |
| `cpkit.counting` | `array_descriptions`, `counting_towers`, `dice_combinations`, `coin_combinations_ordered`, `coin_combinations_unordered`, `grid_paths` |
| `cpkit.knapsack` | `knapsack_max_value`, `knapsack_large_capacity`, `book_shop`, `minimum_coins` (-1 when impossible), `removing_digits`, `rectangle_cutting` |
| `cpkit.sequences` | `edit_distance`, `longest_increasing_subsequence`, `removal_game`, `max_project_reward` with the `Project` dataclass |
| `cpkit.subsets` | `money_sums` |
| `cpkit.probability` | `more_heads_probability`, `sushi_expected_moves` |
| `cpkit.bitmask` | `elevator_rides`, `count_perfect_matchings` |
| `cpkit.trees` | `subordinates` |
| `cpkit.partitions` | `two_sets_ways` |

Counting results are reduced modulo `MOD` (1 000 000 007). Invalid input, such
as negative targets, empty arrays or out-of-range indices, raises `ValueError`
or `IndexError`.

## Examples

Range sums with point updates:

```python
from cpkit.segtree import sum_tree

tree = sum_tree([5, 4, 2, 3, 5])
tree.query(0, 2)   # inclusive range -> 11
tree.set(1, 1)
tree.query(0, 2)   # -> 8
```

Maximum subarray sum that stays current under updates (the empty subarray
counts, so the answer is never negative):

```python
from cpkit.segtree_search import MaxSubarrayTree

tree = MaxSubarrayTree([5, -4, 4, 3, -5])
tree.best()        # -> 8
tree.set(4, 3)
tree.best()        # -> 11
```

Dynamic programming:

```python
from cpkit.counting import dice_combinations
from cpkit.sequences import edit_distance
from cpkit.knapsack import minimum_coins

dice_combinations(3)               # -> 4
edit_distance("LOVE", "MOVIE")     # -> 2
minimum_coins([1, 5, 7], 11)       # -> 3
```

Number theory:

```python
from cpkit.numtheory import expo, sieve, phi

expo(2, 10, 1_000_000_007)   # -> 1024
sieve(20)                    # -> [2, 3, 5, 7, 11, 13, 17, 19]
phi(36)                      # -> 12
```

Note that `mod_inverse` returns the raw Bezout coefficient, which may be
negative; reduce it modulo the modulus if a value in range is needed.

## What it does not do

cpkit is a library only. It has no command-line programs and does not read
judge-style problem input from standard input: every solver takes ordinary
Python values and returns its answer.