"""Failure taxonomy shared by the decoder, solver and reconstruction engine."""

from __future__ import annotations


class ShareVerificationError(Exception):
    """Base class for every per-case failure.

    ``kind`` is a stable identifier used in reports and logs.
    """

    kind = "ShareVerificationError"


class MalformedDigit(ShareVerificationError, ValueError):
    """A digit string contains a character that is invalid for its base."""

    kind = "MalformedDigit"


class InvalidBase(MalformedDigit):
    """The declared radix lies outside 2..36."""

    kind = "InvalidBase"


class MalformedRecord(ShareVerificationError, ValueError):
    """A test-case record is structurally unusable."""

    kind = "MalformedRecord"


class EmptyInput(MalformedRecord):
    kind = "EmptyInput"


class Singular(ShareVerificationError):
    """The Vandermonde system of a candidate subset is not invertible."""

    kind = "Singular"


class DivisionByZero(ShareVerificationError, ZeroDivisionError):
    """A zero denominator reached exact arithmetic (internal invariant broken)."""

    kind = "DivisionByZero"


class InsufficientShares(ShareVerificationError):
    """Fewer usable shares than the threshold ``k``."""

    kind = "InsufficientShares"

    def __init__(self, available: int, k: int) -> None:
        super().__init__(f"need at least k={k} shares, only {available} available")
        self.available = available
        self.k = k


class NotFound(ShareVerificationError):
    """No k-subset lies on an acceptable polynomial."""

    kind = "NotFound"


__all__ = [
    "ShareVerificationError",
    "MalformedDigit",
    "InvalidBase",
    "MalformedRecord",
    "EmptyInput",
    "Singular",
    "DivisionByZero",
    "InsufficientShares",
    "NotFound",
]
