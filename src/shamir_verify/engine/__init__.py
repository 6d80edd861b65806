"""Reconstruction engine: subset search, per-case orchestration and reporting."""

from ..common.policy import AcceptancePolicy
from .models import CaseResult, Interpolation, Share, TestCase
from .reconstruct import ReconstructionEngine, decode_case, reconstruct, reconstruct_polynomial
from .report import results_frame, summarize, write_report
from .search import find_consistent_polynomial, find_consistent_secret

__all__ = [
    "AcceptancePolicy",
    "CaseResult",
    "Interpolation",
    "Share",
    "TestCase",
    "ReconstructionEngine",
    "decode_case",
    "reconstruct",
    "reconstruct_polynomial",
    "results_frame",
    "summarize",
    "write_report",
    "find_consistent_polynomial",
    "find_consistent_secret",
]
