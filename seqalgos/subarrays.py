"""Counting and measuring contiguous runs with prefix sums."""

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate


def longest_balanced_subarray(nums: Sequence[int]) -> int:
    """Return the length of the longest run with as many zeros as non-zeros."""
    first_seen = {0: -1}
    balance = 0
    best = 0
    for index, value in enumerate(nums):
        balance += 1 if value else -1
        if balance in first_seen:
            best = max(best, index - first_seen[balance])
        else:
            first_seen[balance] = index
    return best


def count_subarrays_with_sum(nums: Sequence[int], k: int) -> int:
    """Count the contiguous runs of ``nums`` whose sum is ``k``."""
    seen = Counter({0: 1})
    count = 0
    for total in accumulate(nums):
        count += seen[total - k]
        seen[total] += 1
    return count


def max_average(nums: Sequence[int], k: int) -> float:
    """Return the largest mean of any ``k`` consecutive values."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"window size {k} does not fit {len(nums)} values")
    window = sum(nums[:k])
    best = window
    for leaving, entering in zip(nums, nums[k:]):
        window += entering - leaving
        best = max(best, window)
    return best / k


def count_subarrays_divisible_by(nums: Sequence[int], k: int) -> int:
    """Count the contiguous runs of ``nums`` whose sum is a multiple of ``k``."""
    if k <= 0:
        raise ValueError("divisor must be positive")
    remainders = Counter({0: 1})
    count = 0
    for total in accumulate(nums):
        remainder = total % k
        count += remainders[remainder]
        remainders[remainder] += 1
    return count