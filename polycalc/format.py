"""Rendering of coefficient sequences as human-readable polynomial text."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from fractions import Fraction


def _coefficient_prefix(magnitude: Fraction) -> str:
    if magnitude == 1:
        return ""
    if magnitude.denominator == 1:
        return f"{magnitude}*"
    return f"({magnitude})*"


def format_from_coeffs(
    coeffs: Sequence[Fraction],
    format_term: Callable[[int], str],
) -> str:
    """Format coefficients (lowest degree first) as a sum of terms.

    ``format_term`` renders the basis element of a given degree for
    degrees of two and above; degree one is always ``x`` and degree zero
    is the bare constant.
    """
    terms: list[str] = []
    for degree, coeff in reversed(list(enumerate(coeffs))):
        if coeff == 0:
            continue

        negative = coeff < 0
        if not terms:
            sign = "-" if negative else ""
        else:
            sign = " - " if negative else " + "

        magnitude = abs(Fraction(coeff))
        if degree == 0:
            terms.append(f"{sign}{magnitude}")
            continue

        var_str = "x" if degree == 1 else format_term(degree)
        terms.append(f"{sign}{_coefficient_prefix(magnitude)}{var_str}")

    return "".join(terms) if terms else "0"