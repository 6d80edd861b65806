"""Gauss-Jordan elimination over exact rationals for Vandermonde systems."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .errors import Singular
from .rational import ZERO, ExactRational, IntoRational

logger = logging.getLogger(__name__)

Row = Tuple[ExactRational, ...]


def vandermonde_rows(points: Sequence[Tuple[int, IntoRational]]) -> List[Row]:
    """Build the ``k x (k+1)`` augmented matrix ``[x^0 .. x^(k-1) | y]``."""
    k = len(points)
    rows: List[Row] = []
    for x, y in points:
        entries: List[ExactRational] = []
        power = 1
        for _ in range(k):
            entries.append(ExactRational(power))
            power *= x
        entries.append(ExactRational.coerce(y))
        rows.append(tuple(entries))
    return rows


def _scale_row(row: Row, divisor: ExactRational) -> Row:
    return tuple(entry / divisor for entry in row)


def _subtract_multiple(row: Row, pivot_row: Row, factor: ExactRational) -> Row:
    return tuple(a - factor * b for a, b in zip(row, pivot_row))


def solve(points: Sequence[Tuple[int, IntoRational]]) -> Tuple[ExactRational, ...]:
    """Return the coefficients ``c_0..c_{k-1}`` of the polynomial through ``points``.

    ``c_0`` is the constant term. Raises :class:`Singular` when the system has
    no unique solution (repeated x-coordinates).
    """
    if not points:
        raise Singular("cannot interpolate through zero points")
    rows = vandermonde_rows(points)
    k = len(rows)
    for col in range(k):
        # first row at or below the pivot with a non-zero entry
        pivot_idx = next((r for r in range(col, k) if not rows[r][col].is_zero()), None)
        if pivot_idx is None:
            raise Singular(f"no pivot in column {col} for x={[x for x, _ in points]}")
        if pivot_idx != col:
            rows[col], rows[pivot_idx] = rows[pivot_idx], rows[col]
        pivot_row = _scale_row(rows[col], rows[col][col])
        rows[col] = pivot_row
        for r in range(k):
            if r == col:
                continue
            factor = rows[r][col]
            if factor.is_zero():
                continue
            rows[r] = _subtract_multiple(rows[r], pivot_row, factor)
    return tuple(row[k] for row in rows)


def evaluate_polynomial(coefficients: Sequence[IntoRational], x: IntoRational) -> ExactRational:
    """Evaluate ``sum(c_i * x^i)`` exactly using Horner's rule."""
    acc = ZERO
    for coeff in reversed(coefficients):
        acc = acc * x + coeff
    return acc


__all__ = ["vandermonde_rows", "solve", "evaluate_polynomial"]
