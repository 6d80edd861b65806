"""Input records consumed by the reconstruction engine."""

from .parser import CaseRecord, ParsedCase, ShareRecord, iter_documents, load_cases, parse_case

__all__ = [
    "CaseRecord",
    "ParsedCase",
    "ShareRecord",
    "iter_documents",
    "load_cases",
    "parse_case",
]
