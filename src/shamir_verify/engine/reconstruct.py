"""Per-case orchestration: decode shares, search subsets, report the secret."""

from __future__ import annotations

import logging
from math import comb
from typing import Iterable, List, Optional

from ..common.base_decoder import decode
from ..common.errors import DivisionByZero, InsufficientShares, ShareVerificationError
from ..common.policy import AcceptancePolicy
from ..config import VerifierConfig
from ..records.parser import CaseRecord, ParsedCase, load_cases
from .models import CaseResult, Interpolation, Share, TestCase
from .search import find_consistent_polynomial

logger = logging.getLogger(__name__)


def decode_case(record: CaseRecord) -> TestCase:
    """Decode every share of ``record``; one bad digit string fails the case."""
    shares = tuple(
        Share(index=entry.index, value=decode(entry.digits, entry.base))
        for entry in record.entries
    )
    return TestCase(n=record.n, k=record.k, shares=shares)


def reconstruct_polynomial(
    test_case: TestCase,
    policy: AcceptancePolicy = AcceptancePolicy.INTEGER,
) -> Interpolation:
    if not test_case.solvable:
        raise InsufficientShares(len(test_case.shares), test_case.k)
    return find_consistent_polynomial(test_case.shares, test_case.k, policy)


def reconstruct(
    test_case: TestCase,
    policy: AcceptancePolicy = AcceptancePolicy.INTEGER,
) -> int:
    """Return the reconstructed secret or raise ``InsufficientShares``/``NotFound``."""
    return reconstruct_polynomial(test_case, policy).secret


class ReconstructionEngine:
    """Batch verifier; every case is independent and stateless."""

    def __init__(self, config: Optional[VerifierConfig] = None) -> None:
        self.config = config or VerifierConfig()

    def verify_case(self, case: ParsedCase, case_number: int) -> CaseResult:
        """Turn one parsed case into a :class:`CaseResult` without raising."""
        if isinstance(case, ShareVerificationError):
            logger.info("case %d: %s (%s)", case_number, case.kind, case)
            return CaseResult(case_number=case_number, failure=case.kind, message=str(case))

        result = CaseResult(case_number=case_number, n=case.n, k=case.k)
        search_space = comb(len(case.entries), case.k)
        if search_space > self.config.subset_warning_threshold:
            logger.warning(
                "case %d: %d candidate subsets (n=%d usable, k=%d); search may be slow",
                case_number,
                search_space,
                len(case.entries),
                case.k,
            )
        try:
            interpolation = reconstruct_polynomial(decode_case(case), self.config.policy)
        except DivisionByZero:
            logger.exception("case %d: internal arithmetic invariant violated", case_number)
            result.failure = DivisionByZero.kind
            result.message = "internal error: division by zero during elimination"
            return result
        except ShareVerificationError as exc:
            logger.info("case %d: %s (%s)", case_number, exc.kind, exc)
            result.failure = exc.kind
            result.message = str(exc)
            return result

        result.secret = interpolation.secret
        result.subset = interpolation.indices
        result.subsets_tried = interpolation.subsets_tried
        logger.info(
            "case %d: secret found using shares %s after %d subsets",
            case_number,
            list(result.subset),
            result.subsets_tried,
        )
        return result

    def verify_records(self, cases: Iterable[ParsedCase]) -> List[CaseResult]:
        return [self.verify_case(case, number) for number, case in enumerate(cases, start=1)]

    def verify_text(self, text: str) -> List[CaseResult]:
        """Parse a whole document and verify each case in input order.

        Document-level problems (empty input, invalid JSON) are raised; per-case
        problems are reported in the returned results.
        """
        return self.verify_records(load_cases(text))


__all__ = [
    "decode_case",
    "reconstruct",
    "reconstruct_polynomial",
    "ReconstructionEngine",
]
