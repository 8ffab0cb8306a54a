import re
from fractions import Fraction

import pytest

from polycalc.pascal import choose, factorial, pick
from polycalc.parse import ParseError, parse_expr, parse_polynomial
from polycalc.polynomial import Polynomial, x


def _c(value) -> Polynomial:
    return Polynomial.constant(value)


def _raises(text: str, message: str):
    with pytest.raises(ParseError, match=re.escape(message)):
        parse_polynomial(text)


def test_square_of_binomial():
    assert parse_polynomial("x^2 + 2*x + 1") == (x() + _c(1)) ** 2


def test_implicit_multiplication_matches_explicit():
    assert parse_polynomial("2x") == parse_polynomial("2*x")
    assert parse_polynomial("3(x+1)") == parse_polynomial("3*(x+1)")
    assert parse_polynomial("x x") == x() ** 2


def test_whitespace_is_ignored():
    assert parse_polynomial("  ( x + 1 ) ^ 3 ") == parse_polynomial("(x+1)^3")


def test_unary_minus_binds_looser_than_power():
    assert parse_polynomial("-x^2") == (x() ** 2).scaled(-1)


def test_power_is_left_associative():
    assert parse_polynomial("2^3^2") == (_c(2) ** 3) ** 2


def test_subtraction_and_addition():
    assert parse_polynomial("x - x") == _c(0)
    assert parse_polynomial("x + 1 - 1") == x()


def test_division_by_constant():
    assert parse_polynomial("x/2") == x() / 2
    assert parse_polynomial("(x^2 + x)/3").coeffs() == (0, Fraction(1, 3), Fraction(1, 3))


def test_factorial_and_repeated_factorial():
    assert parse_polynomial("5!") == _c(factorial(5))
    assert parse_polynomial("3!!") == _c(factorial(factorial(3)))
    assert parse_polynomial("0!") == _c(1)


def test_choose_and_pick_functions():
    assert parse_polynomial("C(x, 3)") == choose(x(), 3)
    assert parse_polynomial("P(x,2)") == pick(x(), 2)
    assert parse_polynomial("C(x+1, 2)") == choose(x() + _c(1), 2)
    assert parse_polynomial("C(x,0)") == _c(1)


def test_evaluation_of_parsed_result_agrees_with_built_polynomial():
    parsed = parse_polynomial("(x+1)^3 - C(x,2)")
    built = (x() + _c(1)) ** 3 - choose(x(), 2)
    for value in (0, 1, -2, Fraction(3, 4)):
        assert parsed.evaluate(value) == built.evaluate(value)


def test_parse_expr_returns_untrimmed_remainder():
    assert parse_expr("x )") == (x(), " )")
    assert parse_expr("x 2") == (x(), " 2")


def test_parse_expr_consumes_everything():
    poly, rest = parse_expr("x + 1")
    assert poly == x() + _c(1)
    assert rest == ""


def test_parse_polynomial_rejects_remainder():
    _raises("x )", "Could not parse entire expression. Unparsed remainder: ' )'")


def test_trailing_whitespace_is_allowed():
    assert parse_polynomial("x   ") == x()


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("x/x", "Division must be by a constant number, not a polynomial containing 'x'. Problem term: x"),
        ("x/0", "Division by zero is not allowed."),
        ("x^x", "Exponent must be an integer constant."),
        ("x^(1/2)", "Exponent must be an integer constant."),
        ("x^(0-1)", "Exponent must be a non-negative integer constant."),
        ("x!", "Operand for ! must be a constant, got x"),
        ("(1/2)!", "Operand for ! must be an integer, got 1/2"),
        ("(0-3)!", "Operand for ! must be non-negative, got -3"),
        ("(x+1", "Mismatched parentheses"),
        ("y", "Unexpected identifier 'y' without function call"),
        ("foo(x)", "Unknown function 'foo'"),
        ("C(x)", "Combination function C takes 2 arguments, got 1"),
        ("P(x,1,2)", "Permutation function P takes 2 arguments, got 3"),
        ("C()", "Combination function C takes 2 arguments, got 0"),
        ("C(x,x)", "Second argument to C must be a constant, got x"),
        ("P(x,1/2)", "Second argument to P must be an integer, got 1/2"),
        ("C(x,0-1)", "Second argument to C must be non-negative, got -1"),
        ("P(x,4294967296)", "Second argument to P is too large"),
        ("P(x,2 3)", "Expected ',' or ')' in argument list"),
        ("+", "Expected a number, variable 'x', or parenthesis but found '+'"),
        ("", "Expected a number, variable 'x', or parenthesis but found ''"),
        ("x^-1", "Expected a number, variable 'x', or parenthesis but found '-'"),
    ],
)
def test_errors(text, message):
    _raises(text, message)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_expr("x/0")