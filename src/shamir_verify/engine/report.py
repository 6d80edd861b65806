"""Tabular summaries of a verification run."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Sequence

import pandas as pd

from .models import CaseResult

REPORT_COLUMNS = (
    "case",
    "n",
    "k",
    "ok",
    "secret",
    "failure",
    "message",
    "subset",
    "subsets_tried",
)


def results_frame(results: Sequence[CaseResult]) -> pd.DataFrame:
    """One row per case; secrets stay decimal strings so big values are not truncated."""
    records = []
    for result in results:
        row = result.to_dict()
        row["subset"] = " ".join(str(i) for i in result.subset)
        records.append(row)
    df = pd.DataFrame(records, columns=list(REPORT_COLUMNS))
    return df.astype({"secret": "object", "failure": "object"})


def summarize(results: Sequence[CaseResult]) -> Dict[str, int]:
    """Counts of successes and of each failure kind."""
    counts: Dict[str, int] = {"total": len(results), "ok": 0}
    for result in results:
        if result.ok:
            counts["ok"] += 1
        else:
            counts[result.failure] = counts.get(result.failure, 0) + 1
    return counts


def write_report(results: Sequence[CaseResult], out_path: Path) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    results_frame(results).to_csv(out_path, index=False)
    return out_path


__all__ = ["REPORT_COLUMNS", "results_frame", "summarize", "write_report"]
