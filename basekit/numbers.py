"""Small integer helpers: decimal conversion, extremes and sign."""

from __future__ import annotations


def itoa(number: int) -> str:
    """Decimal representation of number, with a leading '-' when negative."""
    if number < 0:
        return "-" + str(-number)
    return str(number)


def maximum(first: int, second: int) -> int:
    """The larger of two values; second when they are equal."""
    return first if first > second else second


def minimum(first: int, second: int) -> int:
    """The smaller of two values; second when they are equal."""
    return first if first < second else second


def sign(number: int) -> int:
    """-1 for negative numbers, 1 otherwise (zero included)."""
    if number < 0:
        return -1
    return 1