"""Classic recursive integer functions."""

from __future__ import annotations


def factorial(n: int) -> int:
    """Return n!; values of ``n`` at or below 1 give 1."""
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; ``n`` at or below 1 is returned as is."""
    if n <= 1:
        return n
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fibonacci_series(terms: int) -> list[int]:
    """Return the first ``terms`` Fibonacci numbers, starting with 0."""
    series = []
    a, b = 0, 1
    for _ in range(max(terms, 0)):
        series.append(a)
        a, b = b, a + b
    return series


def _truncated_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor by Euclid's algorithm.

    The remainder is taken with truncating division, so signs follow the inputs.
    """
    while b != 0:
        a, b = b, _truncated_mod(a, b)
    return a


def power(base, exp: int):
    """Return ``base`` raised to the non-negative integer ``exp``."""
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    for _ in range(exp):
        result *= base
    return result


def sum_of_digits(n: int) -> int:
    """Return the sum of the decimal digits of ``n``; negative input gives a negative sum."""
    if n < 0:
        return -sum_of_digits(-n)
    total = 0
    while n:
        n, digit = divmod(n, 10)
        total += digit
    return total