"""Binary searches over sorted, rotated and monotone search spaces."""

from bisect import bisect_left
from collections.abc import Sequence
from itertools import accumulate


def rotation_pivot(nums: Sequence[int]) -> int:
    """Return the index of the smallest element of a rotated ascending sequence.

    An unrotated sequence gives 0.
    """
    if not nums:
        raise ValueError("sequence is empty")
    last = nums[-1]
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if mid > 0 and nums[mid - 1] > nums[mid]:
            return mid
        if nums[mid] > last:
            lo = mid + 1
        else:
            hi = mid - 1
    return 0


def binary_search(
    nums: Sequence[int], target: int, lo: int = 0, hi: int | None = None
) -> int:
    """Find ``target`` in the ascending slice ``nums[lo..hi]`` (inclusive).

    Returns its index, or -1 if it is not there.
    """
    if hi is None:
        hi = len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        value = nums[mid]
        if value == target:
            return mid
        if value > target:
            hi = mid - 1
        else:
            lo = mid + 1
    return -1


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Find ``target`` in a rotated ascending sequence of distinct values.

    Returns its index, or -1 if it is not there.
    """
    pivot = rotation_pivot(nums)
    if nums[pivot] <= target <= nums[-1]:
        return binary_search(nums, target, pivot, len(nums) - 1)
    return binary_search(nums, target, 0, pivot - 1)


def find_min_rotated(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated ascending sequence of distinct values."""
    if not nums:
        raise ValueError("sequence is empty")
    last = nums[-1]
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] < last:
            hi = mid
        elif nums[mid] > last:
            lo = mid + 1
        else:
            raise ValueError("values must be distinct")
    return nums[lo]


def min_eating_speed(piles: Sequence[int], hours: int) -> int:
    """Return the slowest whole eating speed that finishes every pile within ``hours``.

    Each hour one pile is eaten from, at most ``speed`` items. When no speed up
    to the largest pile suffices, the largest pile plus one is returned.
    """
    if not piles:
        raise ValueError("no piles given")
    lo, hi = 1, max(piles)
    while lo <= hi:
        speed = (lo + hi) // 2
        needed = sum(-(-pile // speed) for pile in piles)
        if needed <= hours:
            hi = speed - 1
        else:
            lo = speed + 1
    return lo


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest contiguous run summing to at least ``target``.

    ``nums`` holds non-negative values. Returns 0 when no run reaches the target.
    """
    prefix = [0, *accumulate(nums)]
    size = len(nums)
    best: int | None = None
    for start in range(size):
        stop = bisect_left(prefix, target + prefix[start], start + 1, size + 1)
        if stop <= size:
            length = stop - start
            if best is None or length < best:
                best = length
    return best or 0