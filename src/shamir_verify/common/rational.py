"""Exact fractions over Python integers, always kept in lowest terms."""

from __future__ import annotations

from typing import Union

from sympy import igcd

from .base_decoder import to_decimal_string
from .errors import DivisionByZero

IntoRational = Union["ExactRational", int]


class ExactRational:
    """Immutable reduced fraction ``numerator / denominator``.

    The sign always lives in the numerator and the denominator is strictly
    positive. Every arithmetic operation returns a fresh, reduced value.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        numerator = int(numerator)
        denominator = int(denominator)
        if denominator == 0:
            raise DivisionByZero(f"zero denominator for numerator {to_decimal_string(numerator)}")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        g = int(igcd(abs(numerator), denominator))
        self._numerator = numerator // g
        self._denominator = denominator // g

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @classmethod
    def coerce(cls, value: IntoRational) -> "ExactRational":
        if isinstance(value, ExactRational):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value, 1)
        raise TypeError(f"cannot use {type(value).__name__} as an exact rational")

    def is_integer(self) -> bool:
        return self._denominator == 1

    def is_zero(self) -> bool:
        return self._numerator == 0

    def as_integer(self) -> int:
        """Return the value as ``int``; fails unless :meth:`is_integer` holds."""
        if not self.is_integer():
            raise ValueError(f"{self} is not an integer")
        return self._numerator

    def __add__(self, other: IntoRational) -> "ExactRational":
        try:
            o = ExactRational.coerce(other)
        except TypeError:
            return NotImplemented
        return ExactRational(
            self._numerator * o._denominator + o._numerator * self._denominator,
            self._denominator * o._denominator,
        )

    __radd__ = __add__

    def __sub__(self, other: IntoRational) -> "ExactRational":
        try:
            o = ExactRational.coerce(other)
        except TypeError:
            return NotImplemented
        return ExactRational(
            self._numerator * o._denominator - o._numerator * self._denominator,
            self._denominator * o._denominator,
        )

    def __rsub__(self, other: IntoRational) -> "ExactRational":
        try:
            o = ExactRational.coerce(other)
        except TypeError:
            return NotImplemented
        return o - self

    def __mul__(self, other: IntoRational) -> "ExactRational":
        try:
            o = ExactRational.coerce(other)
        except TypeError:
            return NotImplemented
        return ExactRational(
            self._numerator * o._numerator,
            self._denominator * o._denominator,
        )

    __rmul__ = __mul__

    def __truediv__(self, other: IntoRational) -> "ExactRational":
        try:
            o = ExactRational.coerce(other)
        except TypeError:
            return NotImplemented
        if o.is_zero():
            raise DivisionByZero(f"division of {self} by a zero fraction")
        return ExactRational(
            self._numerator * o._denominator,
            self._denominator * o._numerator,
        )

    def __rtruediv__(self, other: IntoRational) -> "ExactRational":
        try:
            o = ExactRational.coerce(other)
        except TypeError:
            return NotImplemented
        return o / self

    def __neg__(self) -> "ExactRational":
        return ExactRational(-self._numerator, self._denominator)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExactRational):
            return (
                self._numerator == other._numerator
                and self._denominator == other._denominator
            )
        if isinstance(other, int) and not isinstance(other, bool):
            return self._denominator == 1 and self._numerator == other
        return NotImplemented

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __lt__(self, other: IntoRational) -> bool:
        o = ExactRational.coerce(other)
        return self._numerator * o._denominator < o._numerator * self._denominator

    def __le__(self, other: IntoRational) -> bool:
        return self == other or self < other

    def __gt__(self, other: IntoRational) -> bool:
        return ExactRational.coerce(other) < self

    def __ge__(self, other: IntoRational) -> bool:
        return self == other or self > other

    def __repr__(self) -> str:
        return (
            f"ExactRational({to_decimal_string(self._numerator)}, "
            f"{to_decimal_string(self._denominator)})"
        )

    def __str__(self) -> str:
        if self._denominator == 1:
            return to_decimal_string(self._numerator)
        return f"{to_decimal_string(self._numerator)}/{to_decimal_string(self._denominator)}"


ZERO = ExactRational(0)
ONE = ExactRational(1)

__all__ = ["ExactRational", "ZERO", "ONE"]
