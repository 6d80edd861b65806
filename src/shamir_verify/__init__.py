"""Top-level package for threshold share verification."""

from . import common, engine, records
from .cli import main
from .config import VerifierConfig
from .engine import ReconstructionEngine, find_consistent_secret, reconstruct

__all__ = [
    "common",
    "engine",
    "records",
    "main",
    "VerifierConfig",
    "ReconstructionEngine",
    "find_consistent_secret",
    "reconstruct",
]
