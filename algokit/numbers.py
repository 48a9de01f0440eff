"""Integer number-theory helpers: digits, factorials, Fibonacci, primes and more."""

from __future__ import annotations

import math
from collections.abc import Iterator


def _digits(num: int) -> Iterator[int]:
    """Yield the decimal digits of a positive number, least significant first."""
    while num > 0:
        num, digit = divmod(num, 10)
        yield digit


def count_digits(num: int) -> int:
    """Return the number of decimal digits of ``num``; zero and negatives give 0."""
    return sum(1 for _ in _digits(num))


def armstrong_sum(num: int) -> int:
    """Return the sum of the digits of ``num``, each raised to the digit count."""
    if num < 0:
        raise ValueError("armstrong_sum requires a non-negative number")
    width = count_digits(num)
    return sum(digit**width for digit in _digits(num))


def is_armstrong(num: int) -> bool:
    """Return True if ``num`` equals the sum of its digits raised to the digit count."""
    return num == armstrong_sum(num)


def is_cubic_armstrong(num: int) -> bool:
    """Return True if ``num`` equals the sum of the cubes of its digits."""
    if num < 0:
        raise ValueError("is_cubic_armstrong requires a non-negative number")
    return num == sum(digit**3 for digit in _digits(num))


def factorial(n: int) -> int:
    """Return ``n!``; any ``n`` below 1 gives 1."""
    return math.prod(range(1, n + 1)) if n >= 1 else 1


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number; values of ``n`` up to 1 are returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def fibonacci_series(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers."""
    if count <= 0:
        raise ValueError("Please enter a positive integer.")
    series = [0]
    previous, current = 0, 1
    for _ in range(count - 1):
        series.append(current)
        previous, current = current, previous + current
    return series


def _truncated_remainder(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend, as with truncating division."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's algorithm."""
    while b != 0:
        a, b = b, _truncated_remainder(a, b)
    return a


def binomial_coefficient(n: int, k: int) -> int:
    """Return C(n, k); it is 0 when ``k`` exceeds ``n``."""
    if n < 0 or k < 0:
        raise ValueError("binomial_coefficient requires non-negative arguments")
    if k > n:
        return 0
    return math.comb(n, k)


def pascal_triangle(rows: int) -> list[list[int]]:
    """Return the first ``rows`` rows of Pascal's triangle."""
    return [[math.comb(line, i) for i in range(line + 1)] for line in range(max(rows, 0))]


def format_pascal_triangle(rows: int) -> str:
    """Render Pascal's triangle as left-padded text, one row per line."""
    return "".join(
        " " * (rows - index - 1) + "".join(f"{value} " for value in row) + "\n"
        for index, row in enumerate(pascal_triangle(rows))
    )


def is_perfect(num: int) -> bool:
    """Return True if ``num`` equals the sum of its divisors below itself."""
    return num == sum(i for i in range(1, num) if num % i == 0)


def is_prime(num: int) -> bool:
    """Return True if ``num`` is a prime number."""
    if num < 2:
        return False
    return all(num % divisor for divisor in range(2, math.isqrt(num) + 1))