"""Acceptance rules for solved coefficient vectors."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from .rational import ExactRational


class AcceptancePolicy(str, Enum):
    """Rule deciding whether a solved coefficient vector certifies a subset.

    ``INTEGER`` accepts any all-integer vector (zero and negative
    coefficients included). ``POSITIVE_INTEGER`` additionally requires every
    coefficient to be strictly positive.
    """

    INTEGER = "integer"
    POSITIVE_INTEGER = "positive"

    def accepts(self, coefficients: Sequence[ExactRational]) -> bool:
        if not all(c.is_integer() for c in coefficients):
            return False
        if self is AcceptancePolicy.POSITIVE_INTEGER:
            return all(c.numerator > 0 for c in coefficients)
        return True


__all__ = ["AcceptancePolicy"]
