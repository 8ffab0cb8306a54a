"""Polynomials in one variable with exact rational coefficients."""

from __future__ import annotations

from collections.abc import Iterable
from fractions import Fraction
from numbers import Rational
from typing import Union

from polycalc.format import format_from_coeffs

Number = Union[int, Fraction, Rational]


def _trimmed(coeffs: list[Fraction]) -> list[Fraction]:
    while len(coeffs) > 1 and coeffs[-1] == 0:
        coeffs.pop()
    return coeffs


class Polynomial:
    """An immutable polynomial stored as coefficients, lowest degree first."""

    __slots__ = ("_coeffs",)

    def __init__(self, coeffs: Iterable[Number] = ()) -> None:
        self._coeffs: tuple[Fraction, ...] = tuple(Fraction(c) for c in coeffs)

    @classmethod
    def constant(cls, value: Number) -> Polynomial:
        """The constant polynomial ``value``."""
        return cls((value,))

    def evaluate(self, x: Number) -> Fraction:
        """Value of the polynomial at ``x`` (Horner's scheme)."""
        result = Fraction(0)
        for c in reversed(self._coeffs):
            result = result * x + c
        return result

    def is_zero(self) -> bool:
        return all(c == 0 for c in self._coeffs)

    def degree(self) -> int:
        return max(len(self._coeffs) - 1, 0)

    def coeff_at(self, n: int) -> Fraction:
        """Coefficient of ``x**n``; zero beyond the stored terms."""
        if 0 <= n < len(self._coeffs):
            return self._coeffs[n]
        return Fraction(0)

    def coeffs(self) -> tuple[Fraction, ...]:
        return self._coeffs

    def extract_constant(self) -> Fraction | None:
        """The constant value if the polynomial has no ``x`` terms, else None."""
        if not self._coeffs:
            return Fraction(0)
        if len(self._coeffs) == 1:
            return self._coeffs[0]
        return None

    def scaled(self, factor: Number) -> Polynomial:
        """Every coefficient multiplied by ``factor``."""
        return Polynomial(c * factor for c in self._coeffs)

    def _combine(self, other: Polynomial, sign: int) -> Polynomial:
        length = max(len(self._coeffs), len(other._coeffs))
        coeffs = [
            self.coeff_at(i) + sign * other.coeff_at(i) for i in range(length)
        ]
        return Polynomial(_trimmed(coeffs))

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._combine(other, 1)

    def __sub__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._combine(other, -1)

    def __mul__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        if self.is_zero() or other.is_zero():
            return Polynomial()
        coeffs = [Fraction(0)] * (self.degree() + other.degree() + 1)
        for i, a in enumerate(self._coeffs):
            for j, b in enumerate(other._coeffs):
                coeffs[i + j] += a * b
        return Polynomial(_trimmed(coeffs))

    def __pow__(self, exponent: int) -> Polynomial:
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            raise ValueError("exponent must be a non-negative integer")
        one = Polynomial.constant(1)
        if exponent == 0:
            return one
        base, acc, n = self, one, exponent
        while n > 1:
            if n % 2 == 1:
                acc = acc * base
            base = base * base
            n //= 2
        return acc * base

    def __truediv__(self, divisor: object) -> Polynomial:
        if not isinstance(divisor, (int, Rational)):
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("division of a polynomial by zero")
        return Polynomial(c / divisor for c in self._coeffs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coeffs == other._coeffs

    def __hash__(self) -> int:
        return hash(self._coeffs)

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coeffs)!r})"

    def __str__(self) -> str:
        return format_from_coeffs(self._coeffs, lambda degree: f"x^{degree}")


def x() -> Polynomial:
    """The polynomial ``x``."""
    return Polynomial((0, 1))