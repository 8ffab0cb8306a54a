"""Display bases for polynomials: powers of x or binomial coefficients."""

from __future__ import annotations

from enum import Enum
from fractions import Fraction

from polycalc.format import format_from_coeffs
from polycalc.pascal import factorial, pick
from polycalc.polynomial import Polynomial, x


def to_binomial_coeffs(poly: Polynomial) -> list[Fraction]:
    """Coefficients of ``poly`` in the basis ``C(x, 0), C(x, 1), ...``.

    The result has ``poly.degree() + 1`` entries, lowest degree first.
    """
    degree = poly.degree()
    coeffs = [Fraction(0)] * (degree + 1)
    residual = poly
    for n in range(degree, -1, -1):
        leading = residual.coeff_at(n)
        if leading == 0:
            continue
        coeffs[n] = leading * factorial(n)
        residual = residual - pick(x(), n).scaled(leading)
    return coeffs


class Basis(Enum):
    """The basis a polynomial is written in."""

    STANDARD = "standard"
    BINOMIAL = "binomial"

    def format(self, poly: Polynomial) -> str:
        """Render ``poly`` as text in this basis."""
        if self is Basis.BINOMIAL:
            return format_from_coeffs(
                to_binomial_coeffs(poly), lambda degree: f"C(x,{degree})"
            )
        return format_from_coeffs(poly.coeffs(), lambda degree: f"x^{degree}")