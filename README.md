# arraydrills

A small library of classic array, hashing, subarray and matrix algorithms.
Each one is a plain Python function over lists, sequences and strings. It
has no dependencies outside the standard library.

## Installation

```
pip install .
```

To install the test requirements as well, run `pip install ".[test]"`.
Then run the suite with `pytest`.

## Modules

### `arraydrills.basics`

Single-pass queries:

- `largest_element`
- `second_largest_element`: returns -1 when no value lies strictly below the maximum. The search starts from -1, so values below -1 are never reported.
- `is_sorted_rotated`
- `linear_search`: returns -1 when the target is absent.
- `max_consecutive_ones`
- `missing_number`
- `single_number`
- `sorted_union`
- `leaders`

### `arraydrills.rearrange`

- `rearrange_by_sign` returns a new list that alternates non-negative and negative values.
- These functions change the list they are given:
  - `remove_duplicates`: returns the count of distinct values.
  - `sort_colors`: one-pass three-way partition.
  - `count_sort_colors`
  - `move_zeroes`
  - `rotate`: rotates to the right by `k`.
  - `next_permutation`: wraps round to ascending order after the last permutation.
  - `merge_sorted`

### `arraydrills.hashing`

- `reverse_digits`
- `count_distinct_integers`
- `max_string_pairs`
- `unique_occurrences`
- `is_anagram`
- `two_sum`: one pass.
- `two_sum_two_pass`: uses a full index map.
- `longest_unique_substring`

Both two-sum functions return an empty list when there is no pair.

### `arraydrills.subarrays`

- `majority_element`: voting.
- `most_frequent`: ties go to the value seen first.
- `longest_subarray_with_sum`: correct for non-negative values only.
- `max_subarray_sum`
- `count_subarrays_with_sum`
- `max_profit`
- `product_except_self`
- `longest_consecutive`
- `three_sum`
- `rescue_boats`
- `find_duplicate`: cycle detection, and it does not modify its input.

### `arraydrills.matrix`

- `rotate_matrix`: a quarter turn clockwise, in place, for square matrices.
- `set_zeroes`: in place.
- `spiral_order`
- `find_missing_and_repeated`: returns `[repeated, missing]`.
- `search_matrix`: binary search over a matrix whose rows, read in turn, are sorted.
- `word_exists`
- `merge_intervals`: merges overlapping or touching intervals.

## Errors

These cases raise `ValueError`:

- An empty sequence given to any of these functions:
  - `largest_element`
  - `second_largest_element`
  - `majority_element`
  - `most_frequent`
  - `max_subarray_sum`
  - `find_duplicate`
- `rearrange_by_sign` when the two signs occur unequally often.
- `rotate` with a negative `k`.
- `merge_sorted` with negative counts or too little room.
- `rotate_matrix` with a non-square matrix.
- `find_missing_and_repeated` with a value outside `1..n*n`.

## Example

```python
from arraydrills.basics import largest_element, second_largest_element
from arraydrills.subarrays import max_subarray_sum
from arraydrills.matrix import spiral_order

nums = [1, 2, 4, 5, 6, 10, 8]
largest_element(nums)            # 10
second_largest_element(nums)     # 8
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # 6
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
# [1, 2, 3, 6, 9, 8, 7, 4, 5]
```

## What it does not do

This is a library only. It has no command-line tool, and it does not read input files.