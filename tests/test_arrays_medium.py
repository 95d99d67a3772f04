from collections import Counter
from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsadrills.arrays_medium import (
    count_subarrays_with_sum,
    leaders,
    longest_positive_subarray_with_sum,
    longest_subarray_with_sum,
    majority_element,
    max_profit,
    max_subarray_sum,
    rearrange_by_sign,
    sort_zeros_ones_twos,
    two_sum,
)

small_ints = st.lists(st.integers(min_value=-20, max_value=20), max_size=12)
naturals = st.lists(st.integers(min_value=0, max_value=20), max_size=12)


def _windows(nums):
    return [nums[i:j] for i in range(len(nums)) for j in range(i + 1, len(nums) + 1)]


# two_sum


def test_two_sum_finds_pair():
    nums = [2, 7, 11, 15]
    i, j = two_sum(nums, 9)
    assert (nums[i], nums[j]) == (2, 7)


def test_two_sum_none_when_absent():
    assert two_sum([1, 2, 3], 100) is None


@given(small_ints, st.integers(min_value=-40, max_value=40))
def test_two_sum_property(nums, target):
    result = two_sum(nums, target)
    exists = any(a + b == target for a, b in combinations(nums, 2))
    assert (result is not None) == exists
    if result is not None:
        i, j = result
        assert i < j
        assert nums[i] + nums[j] == target


# max_subarray_sum


def test_max_subarray_sum_all_negative_is_max_element():
    nums = [-8, -3, -6, -2, -5, -4]
    assert max_subarray_sum(nums) == max(nums)


def test_max_subarray_sum_classic():
    assert max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


@given(naturals.filter(bool))
def test_max_subarray_sum_non_negative_is_total(nums):
    assert max_subarray_sum(nums) == sum(nums)


@given(small_ints.filter(bool))
def test_max_subarray_sum_bounds_every_window(nums):
    result = max_subarray_sum(nums)
    sums = [sum(w) for w in _windows(nums)]
    assert all(result >= s for s in sums)
    assert result in sums


# longest subarray with sum


def test_longest_subarray_whole_list():
    nums = [1, -1, 5, -2, 3]
    assert longest_subarray_with_sum(nums, sum(nums)) == len(nums)


def test_longest_subarray_unreachable():
    assert longest_subarray_with_sum([1, 2, 3], 100) == 0
    assert longest_positive_subarray_with_sum([1, 2, 3], 100) == 0


def test_longest_positive_empty():
    assert longest_positive_subarray_with_sum([], 5) == 0


@given(naturals, st.integers(min_value=0, max_value=60))
def test_both_longest_agree_on_non_negative(nums, k):
    assert longest_subarray_with_sum(nums, k) == longest_positive_subarray_with_sum(nums, k)


@given(small_ints, st.integers(min_value=-30, max_value=30))
def test_longest_subarray_is_maximal(nums, k):
    length = longest_subarray_with_sum(nums, k)
    matching = [len(w) for w in _windows(nums) if sum(w) == k]
    assert length == max(matching, default=0)


# count_subarrays_with_sum


@given(small_ints, st.integers(min_value=-30, max_value=30))
def test_count_positive_iff_some_subarray(nums, k):
    count = count_subarrays_with_sum(nums, k)
    assert (count > 0) == (longest_subarray_with_sum(nums, k) > 0)
    assert count <= len(nums) * (len(nums) + 1) // 2


@given(naturals.filter(bool))
def test_count_includes_whole_list(nums):
    assert count_subarrays_with_sum(nums, sum(nums)) >= 1


def test_count_empty():
    assert count_subarrays_with_sum([], 0) == 0


# majority_element


def test_majority_found():
    assert majority_element([3, 3, 4, 2, 3, 3]) == 3


def test_majority_absent():
    assert majority_element([1, 2, 3, 1, 2]) is None
    assert majority_element([]) is None


@given(st.lists(st.integers(min_value=0, max_value=3), max_size=15))
def test_majority_property(nums):
    result = majority_element(nums)
    counts = Counter(nums)
    dominant = [v for v, c in counts.items() if c > len(nums) // 2]
    assert ([result] if result is not None else []) == dominant


# rearrange_by_sign


def test_rearrange_interleaves():
    assert rearrange_by_sign([3, 1, -2, -5, 2, -4]) == [3, -2, 1, -5, 2, -4]


def test_rearrange_unbalanced_raises():
    with pytest.raises(ValueError):
        rearrange_by_sign([1, 2, -3])


@given(
    st.lists(st.integers(min_value=1, max_value=50), max_size=8),
    st.lists(st.integers(min_value=-50, max_value=0), max_size=8),
)
def test_rearrange_keeps_group_order(positives, others):
    size = min(len(positives), len(others))
    positives, others = positives[:size], others[:size]
    mixed = [v for pair in zip(others, positives) for v in pair]
    result = rearrange_by_sign(mixed)
    assert result[0::2] == positives
    assert result[1::2] == others


# leaders


def test_leaders_example():
    assert leaders([16, 17, 4, 3, 5, 2]) == [17, 5, 2]


def test_leaders_empty():
    assert leaders([]) == []


@given(small_ints.filter(bool))
def test_leaders_property(nums):
    result = leaders(nums)
    assert result[-1] == nums[-1]
    expected = [v for i, v in enumerate(nums) if all(v > w for w in nums[i + 1:])]
    assert result == expected


# sort_zeros_ones_twos


@given(st.lists(st.sampled_from([0, 1, 2]), max_size=20))
def test_sort_012_matches_sorted(nums):
    original = list(nums)
    assert sort_zeros_ones_twos(nums) == sorted(original)
    assert nums == original


# max_profit


def test_max_profit_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_falling_prices():
    assert max_profit([9, 7, 4, 1]) == 0
    assert max_profit([]) == 0


@given(st.lists(st.integers(min_value=0, max_value=100), max_size=12))
def test_max_profit_property(prices):
    result = max_profit(prices)
    gains = [b - a for a, b in combinations(prices, 2)]
    assert result == max([0, *gains])