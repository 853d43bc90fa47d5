import math
from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from seqalgos.arrays import (
    contains_duplicate,
    kids_with_candies,
    max_area,
    max_profit,
    merge_intervals,
    missing_number,
    move_zeroes,
    pivot_index,
    plus_one,
    product_except_self,
    remove_element,
    rotate,
    running_sum,
    single_number,
    three_sum,
)

small_ints = st.integers(min_value=-20, max_value=20)


@given(st.lists(st.integers(min_value=0, max_value=50), max_size=15))
def test_max_area_is_best_pair(heights):
    result = max_area(heights)
    areas = [
        min(heights[i], heights[j]) * (j - i)
        for i in range(len(heights))
        for j in range(i + 1, len(heights))
    ]
    assert all(result >= area for area in areas)
    assert result in areas or (result == 0 and not areas)


def test_max_area_single_line_holds_nothing():
    assert max_area([7]) == 0


@given(st.lists(small_ints, max_size=12))
def test_three_sum_triples_are_valid_and_distinct(nums):
    triples = three_sum(nums)
    available = Counter(nums)
    assert len(set(triples)) == len(triples)
    for triple in triples:
        assert sum(triple) == 0
        assert list(triple) == sorted(triple)
        assert not Counter(triple) - available


def test_three_sum_repeated_zeros_give_one_triple():
    assert three_sum([0, 0, 0, 0]) == [(0, 0, 0)]


def test_three_sum_leaves_input_alone():
    nums = [3, -1, -2, 0]
    three_sum(nums)
    assert nums == [3, -1, -2, 0]


@given(
    st.lists(
        st.tuples(st.integers(0, 30), st.integers(0, 10)).map(lambda p: (p[0], p[0] + p[1])),
        max_size=10,
    )
)
def test_merge_intervals_covers_and_separates(intervals):
    merged = merge_intervals(intervals)
    for (_, end), (start, _) in zip(merged, merged[1:]):
        assert end < start
    for start, end in intervals:
        assert any(lo <= start and end <= hi for lo, hi in merged)
    starts = {start for start, _ in intervals}
    ends = {end for _, end in intervals}
    for lo, hi in merged:
        assert lo in starts and hi in ends


def test_merge_intervals_touching_ends_join():
    assert merge_intervals([[4, 5], [1, 4]]) == [(1, 5)]


def test_merge_intervals_empty():
    assert merge_intervals([]) == []


@given(st.integers(min_value=0, max_value=10**12))
def test_plus_one_matches_integer_increment(number):
    digits = [int(ch) for ch in str(number)]
    result = plus_one(digits)
    assert int("".join(map(str, result))) == number + 1
    assert digits == [int(ch) for ch in str(number)]


def test_plus_one_carries_into_new_digit():
    assert plus_one([9, 9]) == [1, 0, 0]


@given(st.lists(st.integers(0, 100), max_size=15))
def test_max_profit_is_best_ordered_difference(prices):
    result = max_profit(prices)
    gains = [prices[j] - prices[i] for i in range(len(prices)) for j in range(i + 1, len(prices))]
    assert result >= 0
    assert all(result >= gain for gain in gains)
    assert result == 0 or result in gains


def test_max_profit_falling_prices():
    assert max_profit([9, 7, 4, 1]) == 0


@given(st.lists(small_ints, unique=True, min_size=1, max_size=10), st.randoms())
def test_single_number_finds_unpaired(values, rng):
    single, *paired = values
    nums = [single, *paired, *paired]
    rng.shuffle(nums)
    assert single_number(nums) == single


@given(st.lists(small_ints, min_size=1, max_size=10))
def test_contains_duplicate_with_repeat(nums):
    assert contains_duplicate(nums + nums[:1]) is True


@given(st.integers(0, 30))
def test_contains_duplicate_distinct(n):
    assert contains_duplicate(list(range(n))) is False


@given(st.lists(st.integers(1, 9) | st.integers(-9, -1), min_size=1, max_size=8))
def test_product_except_self_times_self_is_total(nums):
    result = product_except_self(nums)
    total = math.prod(nums)
    assert len(result) == len(nums)
    assert all(product * value == total for product, value in zip(result, nums))


def test_product_except_self_with_zero():
    assert product_except_self([0, 3, 4]) == [12, 0, 0]
    assert product_except_self([]) == []


@given(st.lists(st.integers(-5, 5), max_size=15))
def test_move_zeroes_in_place(nums):
    original = list(nums)
    assert move_zeroes(nums) is None
    nonzero = [x for x in original if x != 0]
    assert nums[: len(nonzero)] == nonzero
    assert nums[len(nonzero):] == [0] * (len(original) - len(nonzero))


@given(st.lists(small_ints, max_size=12))
def test_pivot_index_is_leftmost_balance(nums):
    result = pivot_index(nums)
    balanced = [i for i in range(len(nums)) if sum(nums[:i]) == sum(nums[i + 1:])]
    if balanced:
        assert result == balanced[0]
    else:
        assert result == -1


@given(st.lists(st.integers(0, 20), min_size=1, max_size=10))
def test_kids_with_candies_without_extra_marks_maxima(candies):
    result = kids_with_candies(candies, 0)
    top = max(candies)
    assert result == [count == top for count in candies]


@given(st.lists(st.integers(0, 20), min_size=1, max_size=10), st.integers(0, 20))
def test_kids_with_candies_extra_never_hurts(candies, extra):
    assert kids_with_candies(candies, extra + 1) >= kids_with_candies(candies, extra) or all(
        later or not earlier
        for earlier, later in zip(kids_with_candies(candies, extra), kids_with_candies(candies, extra + 1))
    )
    assert all(kids_with_candies(candies, max(candies)))


def test_kids_with_candies_empty_raises():
    with pytest.raises(ValueError):
        kids_with_candies([], 3)


@given(st.lists(small_ints, max_size=15))
def test_running_sum_differences_give_input(nums):
    totals = running_sum(nums)
    assert len(totals) == len(nums)
    if nums:
        assert totals[-1] == sum(nums)
        assert [totals[0]] + [b - a for a, b in zip(totals, totals[1:])] == nums


@given(st.lists(small_ints, min_size=1, max_size=12), st.integers(0, 50))
def test_rotate_round_trip(nums, k):
    original = list(nums)
    rotate(nums, k)
    assert Counter(nums) == Counter(original)
    rotate(nums, len(nums) - k % len(nums))
    assert nums == original


def test_rotate_by_one_moves_last_first():
    nums = [1, 2, 3, 4]
    rotate(nums, 1)
    assert nums == [4, 1, 2, 3]


def test_rotate_empty_is_noop():
    nums: list[int] = []
    rotate(nums, 3)
    assert nums == []


@given(st.integers(0, 30).flatmap(lambda n: st.tuples(st.just(n), st.integers(0, n))), st.randoms())
def test_missing_number_finds_gap(pair, rng):
    n, gap = pair
    nums = [x for x in range(n + 1) if x != gap]
    rng.shuffle(nums)
    assert missing_number(nums) == gap


@given(st.lists(st.integers(0, 4), max_size=15), st.integers(0, 4))
def test_remove_element_partitions(nums, val):
    original = list(nums)
    kept = remove_element(nums, val)
    assert kept == sum(1 for x in original if x != val)
    assert val not in nums[:kept]
    assert all(x == val for x in nums[kept:])
    assert Counter(nums) == Counter(original)