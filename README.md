# seqalgos

A small library of well-known algorithms over integer sequences and strings,
written as plain functions that take ordinary Python sequences and strings.
It has no dependencies outside the standard library.

## Installation

```
pip install seqalgos
```

To run the test suite:

```
pip install "seqalgos[test]"
pytest
```

## Modules

### `seqalgos.strings`

- `length_of_longest_substring(s)` – length of the longest substring with no repeated character.
- `is_vowel(ch)` – whether a character is one of the ASCII vowels `aeiou`, in either case.
- `reverse_vowels(s)` – reverse the order of the vowels, leaving every other character in place.
- `reverse_words(s)` – reverse each space-separated word, keeping the word order and the spaces.
- `is_rotation(s, goal)` – whether `goal` is a rotation of `s`; always `False` for an empty `s`.

### `seqalgos.search`

- `rotation_pivot(nums)` – index of the smallest element of a rotated ascending sequence
  (0 if it is not rotated); raises `ValueError` on an empty sequence.
- `binary_search(nums, target, lo=0, hi=None)` – binary search within the inclusive slice
  `nums[lo..hi]` (the whole sequence by default), returning the index or `-1`.
- `search_rotated(nums, target)` – index of `target` in a rotated ascending sequence of
  distinct values, or `-1`.
- `find_min_rotated(nums)` – smallest value of a rotated ascending sequence of distinct
  values; raises `ValueError` on an empty sequence or a repeated value met during the search.
- `min_eating_speed(piles, hours)` – slowest whole eating speed that finishes every pile
  within `hours`; if no speed up to the largest pile is enough, the largest pile plus one.
  Raises `ValueError` when there are no piles.
- `min_subarray_len(target, nums)` – length of the shortest contiguous run of non-negative
  values whose sum reaches `target`, or `0`.

### `seqalgos.arrays`

- `max_area(heights)` – most water held between two of the lines.
- `three_sum(nums)` – every distinct ascending triple summing to zero, as a list of tuples.
- `merge_intervals(intervals)` – overlapping or touching closed intervals merged, as a sorted
  list of `(start, end)` tuples.
- `plus_one(digits)` – a new digit list for the number plus one.
- `max_profit(prices)` – best gain from one buy and a later sell, or `0`.
- `single_number(nums)` – the value that appears once when all others appear twice.
- `contains_duplicate(nums)` – whether any value repeats.
- `product_except_self(nums)` – for each position, the product of all other values.
- `move_zeroes(nums)` – moves zeros to the end **in place**, keeping the others in order.
- `pivot_index(nums)` – leftmost index with equal left and right sums, or `-1`.
- `kids_with_candies(candies, extra)` – for each kid, whether `extra` candies would give them
  the most; raises `ValueError` on an empty list.
- `running_sum(nums)` – a new list of running totals.
- `rotate(nums, k)` – rotates right by `k` places **in place**.
- `missing_number(nums)` – the one value of `0..len(nums)` that is absent.
- `remove_element(nums, val)` – moves every `val` to the end **in place** and returns how
  many other values remain.

### `seqalgos.subarrays`

- `longest_balanced_subarray(nums)` – longest run with as many zeros as non-zero values.
- `count_subarrays_with_sum(nums, k)` – number of contiguous runs summing to `k`.
- `max_average(nums, k)` – largest mean of any `k` consecutive values; raises `ValueError`
  unless `1 <= k <= len(nums)`.
- `count_subarrays_divisible_by(nums, k)` – number of contiguous runs whose sum is a
  multiple of `k`; raises `ValueError` unless `k` is positive.

## Example

```python
from seqalgos.arrays import three_sum, merge_intervals
from seqalgos.search import search_rotated
from seqalgos.strings import reverse_vowels

three_sum([-1, 0, 1, 2, -1, -4])            # [(-1, -1, 2), (-1, 0, 1)]
merge_intervals([[1, 3], [2, 6], [8, 10]])  # [(1, 6), (8, 10)]
search_rotated([4, 5, 6, 7, 0, 1, 2], 0)    # 4
reverse_vowels("hello")                     # "holle"
```

## What it does not do

`seqalgos` is a library only: it has no command-line tool, and it reads and writes no files.