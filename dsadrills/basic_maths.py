"""Digit-level number drills: Armstrong numbers, digit reversal, palindromes, digit counts."""

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def _check_int32(n: int) -> None:
    if not INT_MIN <= n <= INT_MAX:
        raise ValueError(f"{n} is outside the signed 32-bit range")


def _digits(n: int) -> list[int]:
    """Decimal digits of a positive integer, least significant first."""
    digits = []
    while n > 0:
        n, digit = divmod(n, 10)
        digits.append(digit)
    return digits


def armstrong_sum(n: int) -> int:
    """Sum of each digit raised to the number of digits; 0 for n <= 0."""
    digits = _digits(n) if n > 0 else []
    power = len(digits)
    return sum(digit**power for digit in digits)


def is_armstrong(n: int) -> bool:
    """True when n equals the sum of its digits each raised to the digit count."""
    return armstrong_sum(n) == n


def reverse_digits(n: int) -> int:
    """Reverse the decimal digits of a signed 32-bit integer.

    The sign is kept. The minimum 32-bit value and any reversal that would
    exceed the 32-bit maximum give 0.
    """
    _check_int32(n)
    if n == INT_MIN:
        return 0
    negative = n < 0
    result = 0
    for digit in _digits(abs(n)):
        if result > (INT_MAX - digit) // 10:
            return 0
        result = result * 10 + digit
    return -result if negative else result


def is_palindrome_number(n: int) -> bool:
    """True when reversing the digits of n gives n back."""
    return reverse_digits(n) == n


def count_digits(n: int) -> int:
    """Number of decimal digits of n; any value below 10 counts as one digit."""
    count = 1
    while n >= 10:
        n //= 10
        count += 1
    return count