"""Arithmetic, geometric and harmonic progressions, sums and factorials."""

from __future__ import annotations

import math


def ap_nth_term(first: int, difference: int, n: int) -> int:
    """The n-th term of an arithmetic progression."""
    return first + (n - 1) * difference


def hp_nth_term(first: int, difference: int, n: int) -> float:
    """The n-th term of the harmonic progression built on an arithmetic one."""
    denominator = ap_nth_term(first, difference, n)
    if denominator == 0:
        raise ZeroDivisionError("the matching arithmetic term is zero")
    return 1.0 / denominator


def infinite_gp_sum(first: float, ratio: float) -> float:
    """Sum to infinity of a geometric progression; requires |ratio| < 1."""
    if not -1 < ratio < 1:
        raise ValueError("sum to infinity is not defined for |r| >= 1")
    return first / (1 - ratio)


def gp_product(first: float, ratio: float, n: int) -> float:
    """Product of the first ``n`` terms of a geometric progression."""
    return math.pow(first, n) * math.pow(ratio, n * (n - 1) // 2)


def ap_sum(first: int, difference: int, n: int) -> int:
    """Sum of the first ``n`` terms of an arithmetic progression."""
    return n * (2 * first + (n - 1) * difference) // 2


def harmonic_sum(n: int) -> float:
    """Sum 1 + 1/2 + ... + 1/n; zero when ``n`` is below 1."""
    return sum(1.0 / i for i in range(1, n + 1))


def natural_sum(n: int) -> int:
    """Sum 1 + 2 + ... + n; zero when ``n`` is below 1."""
    return sum(range(1, n + 1))


def factorial(n: int) -> int:
    """n! for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial of a negative number doesn't exist")
    return math.factorial(n)