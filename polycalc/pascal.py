"""Factorials, falling factorials, binomials and Pascal's triangle."""

from __future__ import annotations

from fractions import Fraction
from math import prod

from polycalc.polynomial import Polynomial


def factorial(n: int) -> int:
    """``n!`` for a non-negative integer ``n``."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    return prod(range(1, n + 1))


def pick(poly: Polynomial, k: int) -> Polynomial:
    """Falling factorial ``poly * (poly - 1) * ... * (poly - k + 1)``."""
    result = Polynomial.constant(1)
    for i in range(k):
        result = result * (poly - Polynomial.constant(i))
    return result


def choose(poly: Polynomial, k: int) -> Polynomial:
    """Binomial coefficient ``C(poly, k)`` as a polynomial."""
    if k == 0:
        return Polynomial.constant(1)
    return pick(poly, k) / Fraction(factorial(k))


def generate_pascal_triangle(rows: int) -> list[list[int]]:
    """The first ``rows`` rows of Pascal's triangle."""
    triangle: list[list[int]] = []
    row = [1]
    for _ in range(rows):
        triangle.append(row)
        row = [1, *(a + b for a, b in zip(row, row[1:])), 1]
    return triangle