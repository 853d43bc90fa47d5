"""Array algorithms: two pointers, prefix products, in-place rearrangements."""

from collections.abc import MutableSequence, Sequence
from functools import reduce
from itertools import accumulate, chain
from operator import mul, xor


def max_area(heights: Sequence[int]) -> int:
    """Return the most water two of the vertical lines ``heights`` can hold."""
    lo, hi = 0, len(heights) - 1
    best = 0
    while lo < hi:
        best = max(best, min(heights[lo], heights[hi]) * (hi - lo))
        if heights[lo] <= heights[hi]:
            lo += 1
        else:
            hi -= 1
    return best


def three_sum(nums: Sequence[int]) -> list[tuple[int, int, int]]:
    """Return every distinct ascending triple of values from ``nums`` that sums to zero."""
    ordered = sorted(nums)
    size = len(ordered)
    triples: list[tuple[int, int, int]] = []
    for i, first in enumerate(ordered[:-2]):
        if i > 0 and first == ordered[i - 1]:
            continue
        lo, hi = i + 1, size - 1
        while lo < hi:
            total = first + ordered[lo] + ordered[hi]
            if total == 0:
                triples.append((first, ordered[lo], ordered[hi]))
                while lo < hi and ordered[lo] == ordered[lo + 1]:
                    lo += 1
                while lo < hi and ordered[hi] == ordered[hi - 1]:
                    hi -= 1
                lo += 1
                hi -= 1
            elif total < 0:
                lo += 1
            else:
                hi -= 1
    return triples


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Merge overlapping or touching closed intervals, returned in ascending order."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted((iv[0], iv[1]) for iv in intervals):
        if merged and merged[-1][1] >= start:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to the decimal number whose digits are ``digits``, most significant first."""
    result = list(digits)
    for position in reversed(range(len(result))):
        if result[position] < 9:
            result[position] += 1
            return result
        result[position] = 0
    return [1, *result]


def max_profit(prices: Sequence[int]) -> int:
    """Return the best gain from one buy followed by one later sell, or 0."""
    best = 0
    lowest: int | None = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        best = max(best, price - lowest)
    return best


def single_number(nums: Sequence[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Tell whether any value occurs more than once in ``nums``."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all the other values, without division."""
    values = list(nums)
    if not values:
        return []
    before = accumulate(values[:-1], mul, initial=1)
    after = list(accumulate(reversed(values[1:]), mul, initial=1))
    return [left * right for left, right in zip(before, reversed(after))]


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero in ``nums`` to the end in place, keeping the others in order."""
    kept = [value for value in nums if value != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))


def pivot_index(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if left == total - left - value:
            return index
        left += value
    return -1


def kids_with_candies(candies: Sequence[int], extra: int) -> list[bool]:
    """Tell, for each kid, whether ``extra`` more candies would give them the most."""
    if not candies:
        raise ValueError("no candies given")
    threshold = max(candies) - extra
    return [count >= threshold for count in candies]


def running_sum(nums: Sequence[int]) -> list[int]:
    """Return the running totals of ``nums``."""
    return list(accumulate(nums))


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    size = len(nums)
    if not size:
        return
    split = size - k % size
    nums[:] = list(chain(nums[split:], nums[:split]))


def missing_number(nums: Sequence[int]) -> int:
    """Return the one value of ``0..len(nums)`` that ``nums`` lacks."""
    return reduce(xor, chain(range(len(nums) + 1), nums), 0)


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move every ``val`` to the end of ``nums`` in place; return how many others remain."""
    kept = [value for value in nums if value != val]
    nums[:] = kept + [val] * (len(nums) - len(kept))
    return len(kept)