"""Calculator session state, Pascal's triangle explorer and command line."""

from __future__ import annotations

import argparse
import re
import sys
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from fractions import Fraction

from polycalc.basis import Basis
from polycalc.pascal import generate_pascal_triangle
from polycalc.parse import ParseError, parse_expr, parse_polynomial
from polycalc.polynomial import Polynomial

HISTORY_LIMIT = 10
DEFAULT_PASCAL_ROWS = 7

_RATIONAL = re.compile(r"([+-]?\d+)(?:/([+-]?\d+))?")
_ROW_COUNT = re.compile(r"\+?\d+")


def _parse_rational(text: str) -> Fraction | None:
    match = _RATIONAL.fullmatch(text)
    if match is None:
        return None
    numerator, denominator = match.groups()
    if denominator is None:
        return Fraction(int(numerator))
    if int(denominator) == 0:
        return None
    return Fraction(int(numerator), int(denominator))


@dataclass(frozen=True)
class HistoryEntry:
    """A submitted expression and the text it produced at the time."""

    query: str
    result: str


@dataclass
class Calculator:
    """Polynomial calculator with a bounded history and a display basis."""

    basis: Basis = Basis.STANDARD
    current_poly: Polynomial | None = None
    history: deque[HistoryEntry] = field(
        default_factory=lambda: deque(maxlen=HISTORY_LIMIT)
    )

    def calculate(self, expression: str) -> str:
        """Parse ``expression``, record it in the history and return the result text.

        An empty expression yields ``"0"`` and is not recorded.
        """
        if not expression:
            self.current_poly = Polynomial.constant(0)
            return "0"
        try:
            poly = parse_polynomial(expression)
        except ParseError as error:
            self.current_poly = None
            result = f"Error: {error}"
        else:
            self.current_poly = poly
            result = self.basis.format(poly)
        self.history.append(HistoryEntry(expression, result))
        return result

    def evaluate(self, x_text: str) -> str:
        """Evaluate the current polynomial at the rational number in ``x_text``."""
        if not x_text:
            return ""
        value = _parse_rational(x_text)
        if value is None:
            return "Invalid number for x"
        if self.current_poly is None:
            return "No valid polynomial to evaluate."
        return str(self.current_poly.evaluate(value))

    def set_basis(self, name: str) -> str | None:
        """Switch basis (``"binomial"`` or anything else for standard).

        Returns the current polynomial rendered in the new basis, if there is one.
        """
        self.basis = Basis.BINOMIAL if name == "binomial" else Basis.STANDARD
        if self.current_poly is None:
            return None
        return self.basis.format(self.current_poly)

    def history_results(self) -> list[tuple[str, str]]:
        """History as ``(query, result)`` pairs, newest first, in the current basis."""
        results = []
        for entry in reversed(self.history):
            try:
                poly, _ = parse_expr(entry.query)
            except ParseError:
                results.append((entry.query, entry.result))
            else:
                results.append((entry.query, self.basis.format(poly)))
        return results


@dataclass
class PascalTriangle:
    """Pascal's triangle with a set of highlighted cells."""

    rows: int = DEFAULT_PASCAL_ROWS
    highlighted: set[tuple[int, int]] = field(default_factory=set)
    triangle: list[list[int]] = field(init=False)

    def __post_init__(self) -> None:
        self.triangle = generate_pascal_triangle(self.rows)

    def set_rows(self, text: str) -> int:
        """Rebuild with the row count in ``text`` (default if unparsable).

        Clears all highlights and returns the new row count.
        """
        self.rows = int(text) if _ROW_COUNT.fullmatch(text) else DEFAULT_PASCAL_ROWS
        self.triangle = generate_pascal_triangle(self.rows)
        self.highlighted.clear()
        return self.rows

    def toggle(self, row: int, col: int) -> bool:
        """Flip the highlight of a cell; returns whether it is now highlighted."""
        cell = (row, col)
        if cell in self.highlighted:
            self.highlighted.discard(cell)
            return False
        self.highlighted.add(cell)
        return True

    def highlighted_sum(self) -> int:
        """Sum of the values of highlighted cells that lie inside the triangle."""
        return sum(
            self.triangle[r][c]
            for r, c in self.highlighted
            if 0 <= r < len(self.triangle) and 0 <= c < len(self.triangle[r])
        )

    def render(self) -> str:
        """Text rendering, one centred line per row, highlighted cells in brackets."""
        lines = [
            " ".join(
                f"[{value}]" if (r, c) in self.highlighted else str(value)
                for c, value in enumerate(row)
            )
            for r, row in enumerate(self.triangle)
        ]
        width = max((len(line) for line in lines), default=0)
        return "\n".join(line.center(width).rstrip() for line in lines)


def _run(calculator: Calculator, expressions: Iterable[str], at: str | None) -> int:
    status = 0
    for expression in expressions:
        result = calculator.calculate(expression)
        print(result)
        if result.startswith("Error: "):
            status = 1
        elif at is not None:
            print(calculator.evaluate(at))
    return status


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: evaluate expressions or print Pascal's triangle."""
    parser = argparse.ArgumentParser(
        prog="polycalc", description="Exact polynomial calculator."
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="expressions to compute; read from standard input if none are given",
    )
    parser.add_argument(
        "--basis", choices=("standard", "binomial"), default="standard"
    )
    parser.add_argument("--at", metavar="X", help="also evaluate each result at X")
    parser.add_argument(
        "--pascal", metavar="ROWS", help="print Pascal's triangle with ROWS rows"
    )
    args = parser.parse_args(argv)

    if args.pascal is not None:
        triangle = PascalTriangle()
        triangle.set_rows(args.pascal)
        print(triangle.render())
        if not args.expressions:
            return 0

    calculator = Calculator()
    calculator.set_basis(args.basis)
    if args.expressions:
        expressions: Iterable[str] = args.expressions
    else:
        expressions = (line.rstrip("\n") for line in sys.stdin if line.strip())
    return _run(calculator, expressions, args.at)


if __name__ == "__main__":
    sys.exit(main())