# polycalc

An exact polynomial calculator in one variable, `x`. Coefficients are kept as
exact rationals (`fractions.Fraction`), so nothing is lost to rounding. A
result can be shown in the standard basis (`x^k`) or the binomial basis
(`C(x,k)`). The package also builds Pascal's triangle and can sum highlighted
cells of it.

## Installation

```
pip install .
```

## Expression syntax

- Numbers are non-negative integers. The variable is `x`.
- `+`, `-`, `*`, `/` and `^` work as usual. Unary minus is allowed.
- Writing a factor directly before a letter or `(` multiplies them: `2x`, `3(x+1)`, `x(x-1)`.
- You can only divide by a constant, and the divisor must not be zero.
- The exponent in `^` must be a non-negative integer constant.
- `n!` is the factorial of a non-negative integer constant.
- `P(p, k)` is the falling factorial `p(p-1)...(p-k+1)`.
- `C(p, k)` is the binomial coefficient `P(p, k) / k!`.
- In `P` and `C`, `p` may be any polynomial. `k` must be a non-negative integer constant.

## Command line

```
polycalc "C(x, 2) + x" "(x+1)^3"
```

Each expression given as an argument is computed and its result printed, one
per line. With no expressions, non-blank lines are read from standard input
instead. The exit status is 1 if any expression failed to parse, otherwise 0.

Options:

- `--basis standard|binomial` chooses how results are shown (default `standard`).
- `--at X` also prints each successful result evaluated at `X`, an integer or a
  fraction such as `-1/2`.
- `--pascal ROWS` prints Pascal's triangle with `ROWS` rows first (7 if `ROWS`
  is not a whole number). If no expressions are given alongside it, nothing
  else is done.

```
$ polycalc --basis binomial --at 4 "C(x, 2) + x"
C(x,2) + x
10
```

## Library use

```python
from polycalc.parse import parse_polynomial
from polycalc.basis import Basis
from polycalc.pascal import generate_pascal_triangle

poly = parse_polynomial("C(x, 2) + x")
print(Basis.STANDARD.format(poly))   # (1/2)*x^2 + (1/2)*x
print(Basis.BINOMIAL.format(poly))   # C(x,2) + x
print(poly.evaluate(4))              # 10

print(generate_pascal_triangle(4))   # [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1]]
```

Parse failures raise `polycalc.parse.ParseError`, a subclass of `ValueError`.
`parse_expr` parses the longest leading expression and returns it with the
unparsed rest of the text.

`polycalc.app` holds session state:

- `Calculator` keeps the current polynomial, the selected basis and a history
  of at most ten entries. `calculate`, `evaluate`, `set_basis` and
  `history_results` return the text to show; errors come back as text starting
  with `Error: `.
- `PascalTriangle` keeps a triangle and a set of highlighted cells, with
  `set_rows`, `toggle`, `highlighted_sum` and `render`.

## What it does not do

There is no interactive screen. Highlighting cells of Pascal's triangle and
summing them is available only through `PascalTriangle` in code, not from the
command line.