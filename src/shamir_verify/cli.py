"""CLI entry point: verify test-case documents and print one result per case."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .common.errors import MalformedRecord
from .common.policy import AcceptancePolicy
from .config import DEFAULT_SUBSET_WARNING_THRESHOLD, VerifierConfig
from .engine import CaseResult, ReconstructionEngine, summarize, write_report

ERROR_TOKEN = "ERROR"

EXIT_OK = 0
EXIT_NO_SECRET = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shamir-verify",
        description="Find the secret behind threshold shares encoded in arbitrary bases.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="JSON document with test cases ('-' or omitted reads stdin).",
    )
    parser.add_argument(
        "--policy",
        choices=[p.value for p in AcceptancePolicy],
        default=AcceptancePolicy.INTEGER.value,
        help="Coefficient acceptance rule: any integers, or strictly positive integers.",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Print one line per case, or a JSON array of detailed results.",
    )
    parser.add_argument(
        "--report",
        type=Path,
        help="Optional CSV path for a per-case report.",
    )
    parser.add_argument(
        "--max-subsets-warning",
        type=int,
        default=DEFAULT_SUBSET_WARNING_THRESHOLD,
        help="Warn when a case has more candidate subsets than this.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug).",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _emit(results: List[CaseResult], fmt: str) -> None:
    if fmt == "json":
        print(json.dumps([r.to_dict() for r in results], indent=2))
        return
    for result in results:
        print(result.render(ERROR_TOKEN))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = VerifierConfig.from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        text = _read_input(args.input)
    except UnicodeDecodeError as exc:
        print(f"Invalid input: {args.input} is not UTF-8 text ({exc})", file=sys.stderr)
        return EXIT_BAD_INPUT
    except OSError as exc:
        print(f"Cannot read {args.input}: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    engine = ReconstructionEngine(config)
    try:
        results = engine.verify_text(text)
    except MalformedRecord as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    _emit(results, args.format)
    if args.report:
        report_path = write_report(results, args.report)
        print(f"Saved report to {report_path}", file=sys.stderr)

    counts = summarize(results)
    logging.getLogger(__name__).info("verified %(total)d cases, %(ok)d succeeded", counts)
    return EXIT_OK if counts["ok"] else EXIT_NO_SECRET


if __name__ == "__main__":
    sys.exit(main())
