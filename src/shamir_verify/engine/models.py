"""Data model for decoded shares, accepted interpolations and per-case results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..common.base_decoder import to_decimal_string
from ..common.rational import ExactRational


@dataclass(frozen=True)
class Share:
    """A decoded ``(index, value)`` point; ``index`` is the x-coordinate."""

    index: int
    value: int


@dataclass(frozen=True)
class TestCase:
    """Decoded shares of one case, in input order."""

    __test__ = False  # keep pytest from collecting this class

    n: int
    k: int
    shares: Tuple[Share, ...]

    @property
    def solvable(self) -> bool:
        return 0 < self.k <= len(self.shares)


@dataclass(frozen=True)
class Interpolation:
    """The first subset whose polynomial passed the acceptance policy."""

    subset: Tuple[Share, ...]
    coefficients: Tuple[ExactRational, ...]
    subsets_tried: int

    @property
    def secret(self) -> int:
        return self.coefficients[0].as_integer()

    @property
    def indices(self) -> Tuple[int, ...]:
        return tuple(share.index for share in self.subset)


@dataclass
class CaseResult:
    """Outcome of one test case: a secret or a failure kind, never both."""

    case_number: int
    n: Optional[int] = None
    k: Optional[int] = None
    secret: Optional[int] = None
    failure: Optional[str] = None
    message: str = ""
    subset: Tuple[int, ...] = field(default_factory=tuple)
    subsets_tried: int = 0

    @property
    def ok(self) -> bool:
        return self.failure is None and self.secret is not None

    def render(self, error_token: str = "ERROR") -> str:
        return to_decimal_string(self.secret) if self.ok else error_token

    def to_dict(self) -> dict:
        return {
            "case": self.case_number,
            "n": self.n,
            "k": self.k,
            "ok": self.ok,
            # decimal string keeps big secrets exact for JSON consumers
            "secret": to_decimal_string(self.secret) if self.secret is not None else None,
            "failure": self.failure,
            "message": self.message,
            "subset": list(self.subset),
            "subsets_tried": self.subsets_tried,
        }


__all__ = [
    "Share",
    "TestCase",
    "Interpolation",
    "CaseResult",
]
