"""Restartable enumeration of k-element position subsets."""

from __future__ import annotations

from itertools import combinations
from math import comb
from typing import Iterator, Tuple


class SubsetEnumerator:
    """All ``k``-subsets of positions ``0..n-1`` in lexicographic order.

    Each call to ``iter()`` starts a fresh, independent pass; the enumerator
    itself holds no iteration state. ``k > n`` yields nothing.
    """

    def __init__(self, n: int, k: int) -> None:
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")
        self.n = n
        self.k = k

    def __iter__(self) -> Iterator[Tuple[int, ...]]:
        return combinations(range(self.n), self.k)

    def __len__(self) -> int:
        return comb(self.n, self.k)

    def __repr__(self) -> str:
        return f"SubsetEnumerator(n={self.n}, k={self.k})"


__all__ = ["SubsetEnumerator"]
