"""Short-circuiting search for a share subset on an integer polynomial."""

from __future__ import annotations

import logging
from typing import Sequence

from ..common.errors import NotFound, Singular
from ..common.linear_solver import solve
from ..common.policy import AcceptancePolicy
from ..common.subsets import SubsetEnumerator
from .models import Interpolation, Share

logger = logging.getLogger(__name__)


def find_consistent_polynomial(
    shares: Sequence[Share],
    k: int,
    policy: AcceptancePolicy = AcceptancePolicy.INTEGER,
) -> Interpolation:
    """Return the first ``k``-subset (lexicographic by position) that ``policy`` accepts.

    Singular subsets are skipped. Raises :class:`NotFound` once every one of
    the ``C(n, k)`` subsets has been rejected.
    """
    enumerator = SubsetEnumerator(len(shares), k)
    tried = 0
    for positions in enumerator:
        tried += 1
        subset = tuple(shares[p] for p in positions)
        try:
            coefficients = solve([(s.index, s.value) for s in subset])
        except Singular as exc:
            logger.debug("skipping subset %s: %s", positions, exc)
            continue
        if policy.accepts(coefficients):
            logger.debug("subset %s accepted after %d attempts", positions, tried)
            return Interpolation(subset=subset, coefficients=coefficients, subsets_tried=tried)
    raise NotFound(
        f"none of the {tried} subsets of size {k} lies on a polynomial "
        f"accepted by the {policy.value} policy"
    )


def find_consistent_secret(
    shares: Sequence[Share],
    k: int,
    policy: AcceptancePolicy = AcceptancePolicy.INTEGER,
) -> int:
    """Constant term of :func:`find_consistent_polynomial`."""
    return find_consistent_polynomial(shares, k, policy).secret


__all__ = ["find_consistent_polynomial", "find_consistent_secret"]
