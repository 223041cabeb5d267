"""
Rounding

Quotes round halves upward (2.5 -> 3), the same in the scalar and
DataFrame paths. Python's round() and polars' round() both round half to
even, so neither is used for quote figures.
"""

import math

import polars as pl


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves upward."""
    return math.floor(value + 0.5)


def round_half_up_expr(expr: pl.Expr) -> pl.Expr:
    """Polars twin of round_half_up, returning Int64."""
    return (expr + 0.5).floor().cast(pl.Int64)


__all__ = ["round_half_up", "round_half_up_expr"]
