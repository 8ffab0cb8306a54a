import math
from fractions import Fraction

import pytest

from polycalc.pascal import choose, factorial, generate_pascal_triangle, pick
from polycalc.polynomial import Polynomial, x


@pytest.mark.parametrize("n", range(0, 15))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative_rejected():
    with pytest.raises(ValueError):
        factorial(-1)


def test_pick_zero_is_one():
    assert pick(x(), 0) == Polynomial.constant(1)


@pytest.mark.parametrize("k", range(0, 6))
def test_pick_degree(k):
    assert pick(x(), k).degree() == k


@pytest.mark.parametrize("k", range(0, 6))
@pytest.mark.parametrize("n", range(0, 9))
def test_pick_counts_permutations(n, k):
    assert pick(x(), k).evaluate(n) == math.perm(n, k)


@pytest.mark.parametrize("k", range(0, 6))
@pytest.mark.parametrize("n", range(0, 9))
def test_choose_counts_combinations(n, k):
    assert choose(x(), k).evaluate(n) == math.comb(n, k)


def test_choose_of_shifted_polynomial():
    shifted = x() + Polynomial.constant(2)
    for n in range(6):
        assert choose(shifted, 3).evaluate(n) == math.comb(n + 2, 3)


def test_choose_zero_is_one():
    assert choose(x() * x(), 0) == Polynomial.constant(1)


def test_choose_at_fraction_is_pick_over_factorial():
    v = Fraction(1, 3)
    assert choose(x(), 4).evaluate(v) * factorial(4) == pick(x(), 4).evaluate(v)


def test_triangle_empty():
    assert generate_pascal_triangle(0) == []


def test_triangle_first_row():
    assert generate_pascal_triangle(1) == [[1]]


@pytest.mark.parametrize("rows", [1, 2, 7, 20])
def test_triangle_shape_and_values(rows):
    triangle = generate_pascal_triangle(rows)
    assert len(triangle) == rows
    for r, row in enumerate(triangle):
        assert len(row) == r + 1
        assert row == row[::-1]
        assert sum(row) == 2**r
        assert row == [math.comb(r, c) for c in range(r + 1)]