"""Easy array drills: search, union, rotation, deduplication and selection."""

from collections import Counter
from collections.abc import Iterable, Sequence


def missing_number_linear(nums: Sequence[int]) -> int:
    """First value in 0..len(nums) absent from nums, found by scanning the list.

    Returns -1 if every candidate is present.
    """
    return next((i for i in range(len(nums) + 1) if i not in nums), -1)


def missing_number_hashing(nums: Sequence[int]) -> int:
    """First value in 0..len(nums) absent from nums, found through a set lookup.

    Returns -1 if every candidate is present.
    """
    seen = set(nums)
    return next((i for i in range(len(nums) + 1) if i not in seen), -1)


def union_sorted(first: Iterable, second: Iterable) -> list:
    """Distinct values of both inputs in ascending order; inputs need not be sorted."""
    return sorted(set(first) | set(second))


def union_merge(first: Sequence, second: Sequence) -> list:
    """Merge two ascending sequences into their union without duplicates.

    Both inputs must already be sorted; a value is skipped when it equals the
    last value written.
    """
    result: list = []

    def push(value) -> None:
        if not result or result[-1] != value:
            result.append(value)

    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            push(first[i])
            i += 1
        else:
            push(second[j])
            j += 1
    for value in first[i:]:
        push(value)
    for value in second[j:]:
        push(value)
    return result


def is_sorted(items: Sequence) -> bool:
    """True when no element is greater than the one after it."""
    return all(a <= b for a, b in zip(items, items[1:]))


def largest_element(items: Iterable):
    """The greatest element; raises ValueError for an empty input."""
    values = list(items)
    if not values:
        raise ValueError("largest_element() of an empty sequence")
    largest = values[0]
    for value in values[1:]:
        if value > largest:
            largest = value
    return largest


def left_rotate_one(items: Sequence) -> list:
    """A new list with the first element moved to the end."""
    values = list(items)
    if not values:
        return values
    return values[1:] + values[:1]


def move_zeroes_to_end(items: Iterable[int]) -> list[int]:
    """A new list with every zero moved to the end; other values keep their order."""
    values = list(items)
    non_zero = [value for value in values if value != 0]
    return non_zero + [0] * (len(values) - len(non_zero))


def remove_duplicates(items: Iterable) -> list:
    """Drop each element equal to the element kept just before it.

    On sorted input this leaves every distinct value once; its length is the
    count of distinct values.
    """
    result: list = []
    for value in items:
        if not result or value != result[-1]:
            result.append(value)
    return result


def rotate_right(items: Sequence, k: int) -> list:
    """A new list rotated right by k places; k <= 0 leaves the order unchanged."""
    values = list(items)
    if not values or k <= 0:
        return values
    shift = k % len(values)
    return values[-shift:] + values[:-shift] if shift else values


def rotate_left(items: Sequence, d: int) -> list:
    """A new list rotated left by d places, using the three-reversal method."""
    if d < 0:
        raise ValueError("rotation count must not be negative")
    values = list(items)
    if not values:
        return values
    shift = d % len(values)
    values[:shift] = values[:shift][::-1]
    values[shift:] = values[shift:][::-1]
    values.reverse()
    return values


def second_largest(items: Iterable):
    """The largest value strictly below the maximum, or None if there is none."""
    largest = second = None
    for value in items:
        if largest is None or value > largest:
            second, largest = largest, value
        elif value != largest and (second is None or value > second):
            second = value
    return second


def single_occurrence(items: Iterable):
    """The smallest value that appears exactly once, or None if there is none."""
    counts = Counter(items)
    singles = [value for value, count in counts.items() if count == 1]
    return min(singles) if singles else None