"""Classic recursion drills, written as plain functions over Python values."""

from math import prod


def one_to_n(n: int) -> list[int]:
    """Numbers 1 through n; a non-positive n gives [0]."""
    if n <= 0:
        return [0]
    return list(range(1, n + 1))


def n_to_one(n: int) -> list[int]:
    """Numbers n down to 1; empty when n is below 1."""
    return list(range(n, 0, -1))


def is_palindrome_string(text: str) -> bool:
    """True when text reads the same from both ends."""
    start, end = 0, len(text) - 1
    while start < end:
        if text[start] != text[end]:
            return False
        start += 1
        end -= 1
    return True


def factorial(n: int) -> int:
    """Product of 1 through n; 0! is 1."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return prod(range(1, n + 1))


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number; any n <= 1 is returned unchanged."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def repeat_name(name: str, n: int) -> list[str]:
    """The name repeated n times; empty for n <= 0."""
    return [name] * max(n, 0)


def reverse_array(items: list) -> list:
    """A new list holding items in reverse order."""
    return items[::-1]


def sum_to_n(n: int) -> int:
    """Sum of 1 through n; 0 when n is below 1."""
    return sum(range(1, n + 1))