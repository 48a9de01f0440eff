"""Sequence helpers: palindromes and the median of two merged lists."""

from __future__ import annotations

from collections.abc import Iterable


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same backwards."""
    return text == text[::-1]


def merged_median(first: Iterable[int], second: Iterable[int]) -> int:
    """Return the integer median of both sequences taken together.

    For an even count the two middle values are averaged with the result
    truncated toward zero.
    """
    merged = sorted([*first, *second])
    if not merged:
        raise ValueError("cannot take the median of no values")
    middle = len(merged) // 2
    if len(merged) % 2:
        return merged[middle]
    total = merged[middle] + merged[middle - 1]
    half = abs(total) // 2
    return -half if total < 0 else half