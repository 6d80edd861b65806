import json

import pytest

from shamir_verify import ReconstructionEngine, VerifierConfig
from shamir_verify.common import DivisionByZero, InsufficientShares, MalformedDigit, NotFound
from shamir_verify.engine import search as search_module
from shamir_verify.engine import AcceptancePolicy, Share, TestCase, decode_case, reconstruct
from shamir_verify.records import CaseRecord, ShareRecord

SAMPLE = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}

EXAMPLE = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "136"},
    "2": {"base": "10", "value": "264"},
    "3": {"base": "10", "value": "390"},
    "4": {"base": "10", "value": "518"},
}


def test_decode_case_uses_each_base():
    record = CaseRecord(
        n=2,
        k=2,
        entries=(ShareRecord(1, 16, "ff"), ShareRecord(2, 8, "777")),
    )
    assert decode_case(record) == TestCase(n=2, k=2, shares=(Share(1, 255), Share(2, 511)))


def test_decode_case_propagates_malformed_digit():
    record = CaseRecord(n=1, k=1, entries=(ShareRecord(1, 16, "g"),))
    with pytest.raises(MalformedDigit):
        decode_case(record)


def test_reconstruct_requires_k_shares():
    case = TestCase(n=5, k=5, shares=(Share(1, 1), Share(2, 2), Share(3, 3)))
    with pytest.raises(InsufficientShares) as info:
        reconstruct(case)
    assert info.value.available == 3
    assert info.value.k == 5


def test_reconstruct_returns_secret():
    case = TestCase(n=3, k=2, shares=(Share(1, 9), Share(2, 13), Share(3, 17)))
    assert reconstruct(case) == 5


def test_engine_sample_document():
    # index 6 lies beyond n and is ignored: 3 + 0x + x^2 through shares 1..3
    results = ReconstructionEngine().verify_text(json.dumps(SAMPLE))
    assert [r.render() for r in results] == ["3"]
    assert results[0].subset == (1, 2, 3)


def test_engine_sample_document_positive_policy():
    engine = ReconstructionEngine(VerifierConfig(policy=AcceptancePolicy.POSITIVE_INTEGER))
    [result] = engine.verify_text(json.dumps(SAMPLE))
    assert not result.ok
    assert result.failure == NotFound.kind


def test_engine_isolates_failures_between_cases():
    bad_digit = {"keys": {"n": 1, "k": 1}, "1": {"base": "16", "value": "xyz"}}
    too_few = {"keys": {"n": 5, "k": 5}, "1": {"base": "10", "value": "1"}}
    missing_base = {"keys": {"n": 1, "k": 1}, "1": {"value": "1"}}
    document = json.dumps([EXAMPLE, bad_digit, too_few, missing_base, SAMPLE])
    results = ReconstructionEngine().verify_text(document)
    assert [r.case_number for r in results] == [1, 2, 3, 4, 5]
    assert [r.render() for r in results] == ["6", "ERROR", "ERROR", "ERROR", "3"]
    assert [r.failure for r in results] == [
        None,
        "MalformedDigit",
        "InsufficientShares",
        "MalformedRecord",
        None,
    ]


def test_engine_is_deterministic():
    document = json.dumps([EXAMPLE, SAMPLE, {"keys": {"n": 2, "k": 2}}])
    engine = ReconstructionEngine()
    first = [r.to_dict() for r in engine.verify_text(document)]
    second = [r.to_dict() for r in engine.verify_text(document)]
    assert first == second


def test_large_search_space_logs_warning(caplog):
    entries = {str(i): {"base": "10", "value": str(7 + 2 * i)} for i in range(1, 9)}
    document = json.dumps({"keys": {"n": 8, "k": 2}, **entries})
    engine = ReconstructionEngine(VerifierConfig(subset_warning_threshold=5))
    with caplog.at_level("WARNING"):
        [result] = engine.verify_text(document)
    assert result.secret == 7
    assert "candidate subsets" in caplog.text


def test_config_rejects_non_positive_threshold():
    with pytest.raises(ValueError):
        VerifierConfig(subset_warning_threshold=0)


def test_config_accepts_policy_name():
    assert VerifierConfig(policy="positive").policy is AcceptancePolicy.POSITIVE_INTEGER


def test_division_by_zero_fails_only_its_case(monkeypatch, caplog):
    real_solve = search_module.solve

    def solve_with_broken_invariant(points):
        if any(y == 999 for _, y in points):
            raise DivisionByZero("zero pivot slipped through")
        return real_solve(points)

    monkeypatch.setattr(search_module, "solve", solve_with_broken_invariant)
    broken = {"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "999"}}
    with caplog.at_level("ERROR"):
        results = ReconstructionEngine().verify_text(json.dumps([broken, EXAMPLE]))
    assert results[0].failure == "DivisionByZero"
    assert results[0].render() == "ERROR"
    assert results[1].secret == 6
    assert any(
        record.levelname == "ERROR" and "invariant" in record.getMessage()
        for record in caplog.records
    )
