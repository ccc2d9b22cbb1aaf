# algosolve

Plain-Python solutions to well-known algorithm problems, grouped by theme.
It has no dependencies outside the standard library.

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

### `algosolve.trees`

- `TreeNode`: a dataclass with `val`, `left` and `right`. `TreeNode.from_list(values)` builds a tree from a level-order list in which `None` marks a missing child. It returns `None` for an empty list.
- `is_same_tree(p, q)`: returns True when both trees have the same shape and values.
- `level_order(root)`: returns the values level by level, left to right.
- `remove_leaf_nodes(root, target)`: deletes leaves equal to `target` again and again, so parents that become such leaves go too. It returns the new root. The tree is changed in place.
- `evaluate_tree(root)`: evaluates a boolean tree. Leaves are 0 (false) or 1 (true), and inner nodes are 2 (OR) or 3 (AND). It raises `ValueError` for any other value and for an operator node without two children.

### `algosolve.strings`

- `roman_to_int`: raises `ValueError` on a character that is not a Roman numeral.
- `partition_palindromes`
- `num_steps`
- `first_palindrome`: returns `""` when there is none.
- `decode_message`
- `is_anagram`
- `append_characters`
- `is_subsequence`
- `longest_palindrome`
- `group_anagrams`: groups come in order of first appearance.
- `num_jewels_in_stones`
- `common_chars`: raises `ValueError` for an empty list.

### `algosolve.arrays`

- `height_checker`
- `max_satisfied`
- `relative_sort_array`
- `xor_operation`
- `num_identical_pairs`
- `restore_matrix`
- `count_k_difference`
- `min_moves_to_seat`
- `contains_duplicate`
- `product_except_self`
- `convert_temperature`: returns `(kelvin, fahrenheit)`.
- `min_operations`: returns -1 when the conversion is impossible.
- `maximum_achievable_x`
- `min_patches`
- `trap`
- `check_subarray_sum`
- `subsets`
- `max_profit_assignment`: considers only the first `len(worker)` jobs.
- `subarrays_div_by_k`
- `sorted_squares`

Some inputs make these functions raise `ValueError`:

- `max_satisfied`, `min_moves_to_seat` and `min_operations` take sequences that must have matching lengths.
- `max_satisfied` needs `minutes` between 1 and the number of customers.
- `check_subarray_sum` and `subarrays_div_by_k` reject `k == 0`.

### `algosolve.search`

- `search_insert(nums, target)`: returns the index of `target` in sorted `nums`, or the index where it would be inserted.
- `search_matrix(matrix, target)`: binary search over a matrix whose rows are sorted and increasing.
- `find_median_sorted_arrays(nums1, nums2)`: returns the median as a float. It raises `ValueError` when both arrays are empty.
- `count_pairs(nums, target)`: counts the pairs whose sum is less than `target`.

## Examples

```python
from algosolve.trees import TreeNode, level_order
from algosolve.strings import roman_to_int, group_anagrams
from algosolve.arrays import trap, subsets
from algosolve.search import search_insert, find_median_sorted_arrays

root = TreeNode.from_list([3, 9, 20, None, None, 15, 7])
level_order(root)                          # [[3], [9, 20], [15, 7]]

roman_to_int("MCMXCIV")                    # 1994
group_anagrams(["eat", "tea", "tan"])      # [["eat", "tea"], ["tan"]]

trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) # 6
subsets([1, 2])                            # [[1, 2], [1], [2], []]

search_insert([1, 3, 5, 6], 5)             # 2
find_median_sorted_arrays([1, 2], [3, 4])  # 2.5
```

Functions that take lists or strings leave them unchanged and return fresh values. The one exception is `remove_leaf_nodes`, which changes the tree it is given.

## What it does not do

This is a library of functions only. It has no command-line program, and it reads no input files.