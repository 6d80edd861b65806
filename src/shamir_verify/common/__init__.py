"""Exact-arithmetic building blocks shared by the reconstruction engine."""

from .base_decoder import MAX_BASE, MIN_BASE, decode, digit_value, to_decimal_string
from .errors import (
    DivisionByZero,
    EmptyInput,
    InsufficientShares,
    InvalidBase,
    MalformedDigit,
    MalformedRecord,
    NotFound,
    ShareVerificationError,
    Singular,
)
from .linear_solver import evaluate_polynomial, solve, vandermonde_rows
from .policy import AcceptancePolicy
from .rational import ONE, ZERO, ExactRational
from .subsets import SubsetEnumerator

__all__ = [
    "MIN_BASE",
    "MAX_BASE",
    "decode",
    "digit_value",
    "to_decimal_string",
    "ShareVerificationError",
    "MalformedDigit",
    "InvalidBase",
    "MalformedRecord",
    "EmptyInput",
    "Singular",
    "DivisionByZero",
    "InsufficientShares",
    "NotFound",
    "ExactRational",
    "ZERO",
    "ONE",
    "solve",
    "evaluate_polynomial",
    "vandermonde_rows",
    "SubsetEnumerator",
    "AcceptancePolicy",
]
