# algobox

Compact algorithm routines in plain Python for integer sequences, strings,
grids, graphs, binary trees and singly linked lists. The package uses only
the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algobox.arrays`: routines over integer sequences. It covers rain water
  trapping (`trap`), multiset intersection (`intersect`) and prefix-sum
  counting (`subarrays_div_by_k`, `number_of_subarrays`,
  `max_chunks_to_sorted`). Sliding windows are `max_satisfied`,
  `maximum_subarray_sum`, `continuous_subarrays` and `maximum_beauty`.
  Sorting and bisecting are behind `count_fair_pairs`, `min_difference` and
  `is_array_special`. Heap-based operations are `pick_gifts`,
  `get_final_state` and `find_score`. The rest are `check_if_exist`,
  `find_length_of_shortest_subarray`, `decrypt`, `get_maximum_xor`,
  `time_required_to_buy`, `longest_subarray`, `can_sort_array`,
  `longest_common_prefix` and `results_array`.
- `algobox.strings`: stack, window and run-length routines:
  - `remove_k_digits`, `rotate_string`, `find_the_longest_substring`
  - `make_good`, `max_depth`, `make_fancy_string`
  - `repeat_limited_string`, `take_characters`, `min_extra_char`
  - `minimum_steps`, `compressed_string`
- `algobox.search`: sorting, binary search and dynamic programming:
  - `max_profit_assignment`, `max_sum_after_partitioning`, `max_distance`
  - `minimum_mountain_removals`, `minimum_size`, `minimized_maximum`
  - `most_beautiful_items`, `prime_sub_operation`
- `algobox.grids`: two-dimensional grids and matrices:
  - `exist` (word search), `maximal_rectangle`, `num_islands`
  - `longest_increasing_path`, `island_perimeter`, `count_squares`
  - `max_matrix_sum`, `find_farmland`, `construct_2d_array`
- `algobox.graphs`: reachability, shortest paths and room scheduling:
  - `valid_path`, `maximum_importance`, `most_booked`
  - `find_champion`, `shortest_distance_after_queries`
- `algobox.trees`: the `TreeNode` dataclass and tree routines:
  - `build_tree` and `to_level_order` convert between trees and level-order lists.
  - The tree routines are `sum_numbers`, `postorder_traversal`,
    `sum_of_left_leaves`, `add_one_row`, `smallest_from_leaf`, `bst_to_gst`
    and `is_even_odd_tree`.
- `algobox.linked_lists`: the `ListNode` dataclass and list routines:
  - Iterating over a `ListNode` yields its value and the values after it.
  - `from_values` and `to_values` convert between linked lists and Python lists.
  - `spiral_matrix` and `modified_list` are the list routines.
- `algobox.arithmetic`: number and bit routines:
  - `num_squares`, `judge_square_sum`, `maximum_swap`, `count_max_or_subsets`
  - `min_bit_flips`, `largest_combination`, `max_count`, `pass_the_pillow`

Some routines raise `ValueError` on input they cannot handle. Examples are a
negative `depth` in `add_one_row`, `k == 0` in `subarrays_div_by_k`, and a
sequence that cannot form a mountain in `minimum_mountain_removals`.
`time_required_to_buy` raises `IndexError` when `k` is outside the queue.

## Examples

```python
from algobox.arrays import trap
from algobox.trees import build_tree, to_level_order, add_one_row
from algobox.linked_lists import from_values, to_values, modified_list

trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])        # 6

root = build_tree([4, 2, 6, 3, 1, 5])
to_level_order(add_one_row(root, 1, 2))

head = from_values([1, 2, 3, 4, 5])
to_values(modified_list([1, 2, 3], head))        # [4, 5]
```

`build_tree` reads a level-order list in which `None` marks a missing child.
`to_level_order` writes the same layout, with trailing `None` values removed.

## What it does not do

algobox is a library only. It has no command-line program, and it does not
read or store data of its own. Every routine takes Python values and returns
Python values.