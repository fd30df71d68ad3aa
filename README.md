# algosuite

A library of compact, well-known algorithms and small data structures, grouped
by topic. It has no runtime dependencies beyond the standard library.

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

- `algosuite.trees`: `TreeNode` (a dataclass with `val`, `left`, `right`
  and an `is_leaf` property; nodes compare by identity), `build_tree` (from
  level-order values with `None` for missing children), and `is_same_tree`,
  `is_symmetric`, `level_order`, `zigzag_level_order`, `height`,
  `is_balanced`, `path_sum`, `deepest_leaves_sum`, `get_target_copy`,
  `pseudo_palindromic_paths`, `right_side_view`, `check_tree`,
  `kth_smallest`, `lowest_common_ancestor`, `convert_bst`, `tree_to_str`,
  `search_bst`, `inorder_traversal`, `is_valid_bst`.
- `algosuite.linked_list`: `ListNode` (iterable over its nodes),
  `build_list`, `list_values`, `remove_nth_from_end`.
- `algosuite.strings`: `roman_to_int`, `remove_palindrome_sub`,
  `longest_common_subsequence`, `repeated_character`, `smallest_number`,
  `seconds_to_remove_occurrences`, `robot_with_string`,
  `length_of_longest_substring`, `can_construct`, `first_uniq_char`,
  `valid_utf8`, `reverse_str`, `reverse_words`,
  `unique_morse_representations`, `is_chain`, `longest_str_chain`.
- `algosuite.arithmetic`: `number_of_steps`, `concatenated_binary`
  (modulo `MOD = 10**9 + 7`), `hamming_weight`, `add`, `is_power_of_two`,
  `is_power_of_three`, `is_power_of_four`, `fib`, `climb_stairs`,
  `mirror_reflection`.
- `algosuite.arrays`: `remove_duplicates`, `max_profit`,
  `max_profit_multiple`, `running_sum`, `two_sum_sorted`, `max_operations`,
  `majority_element`, `maximum_unique_subarray`,
  `number_of_weak_characters`, `find_original_array`, `contains_duplicate`,
  `contains_nearby_duplicate`, `majority_elements`, `maximum_groups`,
  `merge_similar_items`, `missing_number`, `trap`, `sort_colors`, `merge`,
  `sort_array_by_parity`, `bag_of_tokens_score`, `sum_even_after_queries`.
- `algosuite.dynamic`: `maximum_score`, `can_partition`, `find_length`,
  `min_cost_climbing_stairs`.
- `algosuite.graphs`: `DisjointSet` (`find`, `union`), `gcd_sort`,
  `closest_meeting_node`, `reachable_nodes`, `edge_score`.
- `algosuite.designs`: `TimeMap` (`set`, `get`), `UndergroundSystem`
  (`check_in`, `check_out`, `get_average_time`), `CircularQueue`
  (`enqueue`, `dequeue`, `front`, `rear`, `is_empty`, `is_full`),
  `ArrayHashMap` (`put`, `get`, `remove`, for keys `0..MAX_KEY`).
- `algosuite.grids`: `solve_maze`, `format_grid`, `is_valid_sudoku`,
  `solve_sudoku`, `rotate`, `transpose`, `largest_local`, and the `main`
  entry point behind the command below.

Functions that work in place (`sort_colors`, `merge`, `remove_duplicates`,
`rotate`, `solve_sudoku`, `convert_bst`, `remove_nth_from_end`) change the
object they are given. Invalid input raises `ValueError`, `IndexError` or
`KeyError` as each function's docstring describes.

## Example

```python
from algosuite.trees import build_tree, level_order
from algosuite.strings import roman_to_int
from algosuite.grids import solve_maze, format_grid

root = build_tree([3, 9, 20, None, None, 15, 7])
print(level_order(root))        # [[3], [9, 20], [15, 7]]
print(roman_to_int("MCMXCIV"))  # 1994

path = solve_maze([[1, 0], [1, 1]])
print(format_grid(path), end="")
```

## Command line

The package installs one command, which solves a built-in 4×4 demonstration
maze by backtracking and prints the path as a grid of 1s and 0s:

```
algosuite-maze
```

The same can be run with `python -m algosuite.grids`.

## Limitations

The `algosuite-maze` command takes no options and always solves its built-in
maze; it does not read a maze from a file or from standard input. To solve
other mazes, call `solve_maze` from Python. No other command-line tools are
provided.