"""Recursive-descent parser for polynomial expressions in ``x``."""

from __future__ import annotations

import string
from collections.abc import Callable

from polycalc.pascal import choose, factorial, pick
from polycalc.polynomial import Polynomial, x

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_MAX_EXPONENT = 2**31 - 1
_MAX_K = 2**32 - 1

_FUNCTIONS: dict[str, tuple[str, Callable[[Polynomial, int], Polynomial]]] = {
    "P": ("Permutation", pick),
    "C": ("Combination", choose),
}


class ParseError(ValueError):
    """Raised when an expression cannot be parsed or evaluated."""


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def remaining(self) -> str:
        return self.text[self.pos :]

    def _next_nonspace(self) -> int:
        i = self.pos
        while i < len(self.text) and self.text[i].isspace():
            i += 1
        return i

    def _skip_space(self) -> None:
        self.pos = self._next_nonspace()

    def _peek(self) -> str:
        i = self._next_nonspace()
        return self.text[i : i + 1]

    def _take(self, char: str) -> bool:
        i = self._next_nonspace()
        if self.text.startswith(char, i):
            self.pos = i + 1
            return True
        return False

    def expr(self) -> Polynomial:
        poly = self.term()
        while True:
            if self._take("+"):
                poly = poly + self.term()
            elif self._take("-"):
                poly = poly - self.term()
            else:
                return poly

    def term(self) -> Polynomial:
        poly = self.factor()
        while True:
            if self._take("*"):
                poly = poly * self.factor()
            elif self._take("/"):
                rhs = self.factor()
                divisor = rhs.extract_constant()
                if divisor is None:
                    raise ParseError(
                        "Division must be by a constant number, not a polynomial "
                        f"containing 'x'. Problem term: {rhs}"
                    )
                if divisor == 0:
                    raise ParseError("Division by zero is not allowed.")
                poly = poly / divisor
            elif (char := self._peek()) and (char in _LETTERS or char == "("):
                poly = poly * self.factor()
            else:
                return poly

    def factor(self) -> Polynomial:
        if self._take("-"):
            return Polynomial.constant(-1) * self.factor()
        self._skip_space()
        return self.power()

    def power(self) -> Polynomial:
        base = self.postfix()
        while self._take("^"):
            exponent = self.postfix().extract_constant()
            if exponent is None or exponent.denominator != 1:
                raise ParseError("Exponent must be an integer constant.")
            value = exponent.numerator
            if value < 0:
                raise ParseError("Exponent must be a non-negative integer constant.")
            if value > _MAX_EXPONENT:
                raise ParseError("Exponent is too large.")
            base = base**value
        return base

    def postfix(self) -> Polynomial:
        poly = self.primary()
        while self._take("!"):
            value = poly.extract_constant()
            if value is None:
                raise ParseError(f"Operand for ! must be a constant, got {poly}")
            if value.denominator != 1:
                raise ParseError(f"Operand for ! must be an integer, got {value}")
            n = value.numerator
            if n < 0:
                raise ParseError(f"Operand for ! must be non-negative, got {n}")
            poly = Polynomial.constant(factorial(n))
        return poly

    def primary(self) -> Polynomial:
        self._skip_space()
        if self._take("("):
            poly = self.expr()
            if not self._take(")"):
                raise ParseError("Mismatched parentheses")
            return poly
        if self._peek() in _LETTERS:
            ident = self._identifier()
            if self._peek() == "(":
                return self._call(ident)
            if ident == "x":
                return x()
            raise ParseError(f"Unexpected identifier '{ident}' without function call")
        return self._number()

    def _identifier(self) -> str:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in _LETTERS:
            self.pos += 1
        return self.text[start : self.pos]

    def _call(self, ident: str) -> Polynomial:
        self._take("(")
        args = self._args()
        if not self._take(")"):
            raise ParseError("Expected ')' to close function call")
        try:
            label, function = _FUNCTIONS[ident]
        except KeyError:
            raise ParseError(f"Unknown function '{ident}'") from None
        if len(args) != 2:
            raise ParseError(
                f"{label} function {ident} takes 2 arguments, got {len(args)}"
            )
        poly_arg, k_arg = args
        k_value = k_arg.extract_constant()
        if k_value is None:
            raise ParseError(
                f"Second argument to {ident} must be a constant, got {k_arg}"
            )
        if k_value.denominator != 1:
            raise ParseError(
                f"Second argument to {ident} must be an integer, got {k_value}"
            )
        k = k_value.numerator
        if k < 0:
            raise ParseError(
                f"Second argument to {ident} must be non-negative, got {k}"
            )
        if k > _MAX_K:
            raise ParseError(f"Second argument to {ident} is too large")
        return function(poly_arg, k)

    def _args(self) -> list[Polynomial]:
        args: list[Polynomial] = []
        if self._peek() == ")":
            return args
        while True:
            args.append(self.expr())
            if self._peek() == ")":
                return args
            if not self._take(","):
                raise ParseError("Expected ',' or ')' in argument list")

    def _number(self) -> Polynomial:
        self._skip_space()
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in _DIGITS:
            self.pos += 1
        if self.pos == start:
            found = self.text[start : start + 1]
            raise ParseError(
                f"Expected a number, variable 'x', or parenthesis but found '{found}'"
            )
        return Polynomial.constant(int(self.text[start : self.pos]))


def parse_expr(text: str) -> tuple[Polynomial, str]:
    """Parse the longest leading expression of ``text``.

    Returns the polynomial and the unparsed rest of the text.
    """
    parser = _Parser(text)
    poly = parser.expr()
    return poly, parser.remaining


def parse_polynomial(text: str) -> Polynomial:
    """Parse ``text`` as a whole; trailing non-blank text is an error."""
    poly, rest = parse_expr(text)
    if rest.strip():
        raise ParseError(
            f"Could not parse entire expression. Unparsed remainder: '{rest}'"
        )
    return poly