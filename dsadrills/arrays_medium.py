"""Medium array drills: pair sums, subarray sums, majority, leaders and partitioning."""

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices (i, j), i < j, of two elements adding up to target.

    The pair returned is the first one completed while scanning left to right;
    for that j, i is the latest earlier index holding the needed value.
    Returns None when no such pair exists.
    """
    last_index: dict[int, int] = {}
    for j, value in enumerate(nums):
        complement = target - value
        if complement in last_index:
            return last_index[complement], j
        last_index[value] = j
    return None


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous subarray (Kadane's algorithm)."""
    best: int | None = None
    running = 0
    for value in nums:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() of an empty sequence")
    return best


def longest_subarray_with_sum(nums: Iterable[int], k: int) -> int:
    """Length of the longest contiguous subarray summing to k; 0 if none.

    Uses prefix sums, so negative numbers are handled.
    """
    first_seen: dict[int, int] = {0: -1}
    longest = 0
    total = 0
    for i, value in enumerate(nums):
        total += value
        start = first_seen.get(total - k)
        if start is not None:
            longest = max(longest, i - start)
        first_seen.setdefault(total, i)
    return longest


def longest_positive_subarray_with_sum(nums: Sequence[int], k: int) -> int:
    """Length of the longest contiguous subarray summing to k; 0 if none.

    Uses a sliding window and is only correct when no element is negative.
    """
    longest = 0
    left = 0
    window = 0
    for right, value in enumerate(nums):
        window += value
        while left <= right and window > k:
            window -= nums[left]
            left += 1
        if window == k and left <= right:
            longest = max(longest, right - left + 1)
    return longest


def majority_element(nums: Sequence):
    """The element occurring more than len(nums) // 2 times, or None.

    Finds a candidate with Boyer-Moore voting, then confirms it.
    """
    candidate = None
    votes = 0
    for value in nums:
        if votes == 0:
            candidate, votes = value, 1
        elif value == candidate:
            votes += 1
        else:
            votes -= 1
    if votes and sum(1 for value in nums if value == candidate) > len(nums) // 2:
        return candidate
    return None


def rearrange_by_sign(nums: Iterable[int]) -> list[int]:
    """Alternate positives and non-positives, starting with a positive.

    Each group keeps its original order. The two groups must be the same size.
    """
    positives: list[int] = []
    others: list[int] = []
    for value in nums:
        (positives if value > 0 else others).append(value)
    if len(positives) != len(others):
        raise ValueError("needs as many positive as non-positive numbers")
    return [value for pair in zip(positives, others) for value in pair]


def count_subarrays_with_sum(nums: Iterable[int], k: int) -> int:
    """Number of contiguous subarrays whose elements add up to k."""
    seen: defaultdict[int, int] = defaultdict(int)
    seen[0] = 1
    total = 0
    count = 0
    for value in nums:
        total += value
        count += seen[total - k]
        seen[total] += 1
    return count


def leaders(nums: Sequence[int]) -> list[int]:
    """Elements greater than every element to their right, in original order.

    The last element is always a leader.
    """
    found: list[int] = []
    for value in reversed(nums):
        if not found or value > found[-1]:
            found.append(value)
    found.reverse()
    return found


def sort_zeros_ones_twos(nums: Iterable[int]) -> list[int]:
    """A new list with 0s, then 1s, then the rest (Dutch national flag).

    Any value other than 0 or 1 is handled as a 2.
    """
    values = list(nums)
    low = mid = 0
    high = len(values) - 1
    while mid <= high:
        if values[mid] == 0:
            values[low], values[mid] = values[mid], values[low]
            low += 1
            mid += 1
        elif values[mid] == 1:
            mid += 1
        else:
            values[mid], values[high] = values[high], values[mid]
            high -= 1
    return values


def max_profit(prices: Iterable[int]) -> int:
    """Best gain from buying once and selling later; 0 if no gain is possible."""
    lowest: int | None = None
    best = 0
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        best = max(best, price - lowest)
    return best


__all__ = [
    "two_sum",
    "max_subarray_sum",
    "longest_subarray_with_sum",
    "longest_positive_subarray_with_sum",
    "majority_element",
    "rearrange_by_sign",
    "count_subarrays_with_sum",
    "leaders",
    "sort_zeros_ones_twos",
    "max_profit",
    "Counter",
]