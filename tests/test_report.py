import pandas as pd

from shamir_verify.engine import CaseResult, results_frame, summarize, write_report
from shamir_verify.engine.report import REPORT_COLUMNS

BIG = 2**256 + 1

RESULTS = [
    CaseResult(case_number=1, n=4, k=3, secret=BIG, subset=(1, 2, 3), subsets_tried=1),
    CaseResult(case_number=2, n=2, k=2, failure="NotFound", message="none", subsets_tried=1),
    CaseResult(case_number=3, failure="MalformedRecord", message="missing keys"),
]


def test_results_frame_columns():
    df = results_frame(RESULTS)
    assert list(df.columns) == list(REPORT_COLUMNS)
    assert df.loc[0, "secret"] == str(BIG)
    assert df.loc[0, "subset"] == "1 2 3"
    assert bool(df.loc[1, "ok"]) is False


def test_summarize_counts_failure_kinds():
    assert summarize(RESULTS) == {"total": 3, "ok": 1, "NotFound": 1, "MalformedRecord": 1}


def test_write_report_round_trips_big_secret(tmp_path):
    path = write_report(RESULTS, tmp_path / "out" / "report.csv")
    df = pd.read_csv(path, dtype={"secret": str})
    assert df["secret"].iloc[0] == str(BIG)
    assert df["failure"].tolist()[1:] == ["NotFound", "MalformedRecord"]


def test_report_handles_secret_beyond_digit_limit():
    huge = 10**5000
    result = CaseResult(case_number=1, n=1, k=1, secret=huge, subset=(1,), subsets_tried=1)
    assert result.render() == "1" + "0" * 5000
    df = results_frame([result])
    assert df.loc[0, "secret"] == "1" + "0" * 5000
