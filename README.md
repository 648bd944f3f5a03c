# dsakit

A small collection of classic algorithms and data structures written in plain
Python with no dependencies. It covers searching, sorting, array puzzles,
dynamic programming and a singly linked list.

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

| Module | What it holds |
| --- | --- |
| `dsakit.searching` | `linear_search`, `binary_search` |
| `dsakit.sorting` | `exchange_sort`, `insertion_sort`, `merge_sort`, `heap_sort`, `quick_sort`, `MinHeap`, `min_heap_sort`, `sort_012` |
| `dsakit.arrays` | `common_elements`, `find_duplicate`, `unique_grid_paths`, `max_subarray_sum`, `kth_smallest`, `longest_zero_sum_subarray`, `min_max`, `merge_intervals`, `merge_without_extra_space`, `negatives_first`, `next_greater_elements`, `reverse_in_place`, `rotate_right_by_one`, `rotate_matrix` |
| `dsakit.knapsack` | `knapsack`, `count_coin_ways`, `min_coins`, `min_subset_sum_difference`, `count_subsets_with_difference`, `perfect_sum`, `rod_cutting`, `has_subset_sum`, `can_partition_equally`, `target_sum_ways` |
| `dsakit.subsequences` | `longest_increasing_subsequence`, `lcs_length`, `longest_common_subsequence`, `longest_common_substring`, `longest_palindromic_subsequence`, `longest_repeating_subsequence`, `min_deletions_to_palindrome`, `min_insertions_to_palindrome`, `shortest_common_supersequence`, `shortest_common_supersequence_length` |
| `dsakit.partitions` | `is_interleave`, `matrix_chain_cost`, `min_palindrome_cuts`, `super_egg_drop` |
| `dsakit.linked_list` | `LinkedList` |

## Examples

```python
from dsakit.searching import binary_search, linear_search
from dsakit.sorting import merge_sort, sort_012
from dsakit.arrays import max_subarray_sum, merge_intervals
from dsakit.knapsack import knapsack, min_coins
from dsakit.subsequences import longest_common_subsequence
from dsakit.linked_list import LinkedList

linear_search([2, 4, 0, 1, 9], 1)          # 3
binary_search([2, 3, 4, 10, 40], 10)       # 3
linear_search([2, 4, 0, 1, 9], 7)          # None

merge_sort([4, 13, 6, 34, 10])             # [4, 6, 10, 13, 34]

colours = [0, 1, 2, 1, 0]
sort_012(colours)                          # sorts in place, returns None
colours                                    # [0, 0, 1, 1, 2]

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1]) # 6
merge_intervals([[1, 3], [2, 6], [8, 10]]) # [(1, 6), (8, 10)]

knapsack(50, [10, 20, 30], [60, 100, 120]) # 220
min_coins([2], 3)                          # None
longest_common_subsequence("ABCDEF", "ABXYDVEYF")  # "ABDEF"

items = LinkedList([1, 2])
items.push_front(0)
items.push_back(3)
list(items)                                # [0, 1, 2, 3]
```

## Conventions

- The search functions return `None` when the value is absent.
- The sorting functions other than `sort_012` take any iterable and return a
  new list; `sort_012`, `reverse_in_place`, `rotate_right_by_one` and
  `merge_without_extra_space` change their list arguments in place and return
  `None`. `rotate_matrix` rotates in place and also returns the matrix.
- Invalid input raises `ValueError` (for example an empty sequence passed to
  `max_subarray_sum` or `min_max`, `k` out of range in `kth_smallest`, a value
  other than 0, 1 or 2 in `sort_012`, or a negative weight in the knapsack
  functions). `MinHeap.pop_min` on an empty heap raises `IndexError`.
- `perfect_sum` counts modulo 1,000,000,007.

## What it does not do

dsakit is a library only. It has no command-line program and does not read
numbers from standard input or print results; call the functions from your own
code.