"""Exact rational polynomial calculator with binomial-basis output and Pascal's triangle."""

__version__ = "0.1.0"