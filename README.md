# contestsolvers

This package holds solutions to a collection of contest problems. Each one is an
ordinary Python function or a small data structure. A function takes the
problem's input as Python values and returns its answer.

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

| Module | Contents |
| --- | --- |
| `contestsolvers.codebattle` | `colorless_and_colorful`, `min_removals_strictly_decreasing`, `satya_tree_beauty` |
| `contestsolvers.ucs_finale` | `factorial_digits`, `is_bipartite`, `max_tennis_rounds` |
| `contestsolvers.rising_coders` | `parity_of_sum`, `is_acm`, `football_fantasy`, `alien_dictionary_match`, `superior_inferior_pair`, `count_pharaoh_segments` |
| `contestsolvers.cf849` | `in_codeforces`, `passes_candy`, `shortest_original_length`, `max_distinct_split`, `max_sum_after_negations`, `DigitSumArray` |
| `contestsolvers.cf847` | `pi_prefix_length`, `dice_values`, `restore_permutation`, `min_matryoshka_sets`, `vlad_pair`, `black_white_distances` |
| `contestsolvers.lockout_v1` | `blue_balls`, `positive_sum_subarrays`, `prefix_order_count`, `min_cut_cost`, `expected_values`, `FenwickTree` |
| `contestsolvers.lockout_v2` | `kth_common_divisor`, `tournament_ranks`, `om_wins`, `min_swaps_couples`, `min_swaps_couples_dsu`, `DisjointSet`, `count_distinct_lcms`, `MinSegmentTree`, `min_absolute_difference` |
| `contestsolvers.codecode` | `love_for_cricket`, `count_lines_float`, `count_lines`, `decrease_to_zero_winner`, `BinomialTable`, `count_arrays`, `one_is_enough`, `one_is_enough_memo`, `tle_or_mle_min_ops`, `tle_or_mle_min_ops_binary`, `three_tuples` |

Vertices, indices and positions are 0-based throughout. Where a problem has no
answer, a function returns `None` or `-1` as its docstring states. Input that
the function cannot handle raises `ValueError` or `IndexError`.

## Examples

```python
from contestsolvers.ucs_finale import is_bipartite, max_tennis_rounds
from contestsolvers.cf849 import DigitSumArray, max_distinct_split

is_bipartite(3, [(0, 1), (1, 2)])   # True
max_tennis_rounds(3)                # 2
max_distinct_split("abcabcd")       # 7

arr = DigitSumArray([1, 420, 69, 1434, 2023])
arr.update(1, 3)
arr.query(1)                        # 6
```

## What it does not do

The package has no command-line program. It does not read test cases from
standard input and does not print answers. To use it, call the functions from
Python.