"""Runtime configuration for the verifier."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from .common.policy import AcceptancePolicy

DEFAULT_SUBSET_WARNING_THRESHOLD = 10_000


@dataclass
class VerifierConfig:
    """
    policy: rule applied to each solved coefficient vector.
    subset_warning_threshold: log a warning when C(n, k) exceeds this many
        subsets. The search itself is never cut short.
    """

    policy: AcceptancePolicy = AcceptancePolicy.INTEGER
    subset_warning_threshold: int = DEFAULT_SUBSET_WARNING_THRESHOLD

    def __post_init__(self) -> None:
        self.policy = AcceptancePolicy(self.policy)
        if self.subset_warning_threshold <= 0:
            raise ValueError("subset_warning_threshold must be positive.")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "VerifierConfig":
        return cls(
            policy=AcceptancePolicy(args.policy),
            subset_warning_threshold=args.max_subsets_warning,
        )


__all__ = ["DEFAULT_SUBSET_WARNING_THRESHOLD", "VerifierConfig"]
