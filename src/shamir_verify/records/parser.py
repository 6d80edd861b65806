"""Structured parsing of test-case documents into validated records.

A document is one JSON object, a JSON array of objects, or several
top-level values written back to back. Each case object looks like::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, List, Mapping, Tuple, Union

from ..common.errors import EmptyInput, MalformedRecord


@dataclass(frozen=True)
class ShareRecord:
    """Raw share entry before base decoding."""

    index: int
    base: int
    digits: str


@dataclass(frozen=True)
class CaseRecord:
    """One test case as supplied by the input document."""

    n: int
    k: int
    entries: Tuple[ShareRecord, ...]


ParsedCase = Union[CaseRecord, MalformedRecord]


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise MalformedRecord(f"{field} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise MalformedRecord(f"{field} must be an integer, got {value!r}") from None
    raise MalformedRecord(f"{field} must be an integer, got {type(value).__name__}")


def iter_documents(text: str) -> List[Any]:
    """Decode every top-level JSON value in ``text``; arrays are flattened one level."""
    if not text.strip():
        raise EmptyInput("no input provided")
    decoder = json.JSONDecoder()
    values: List[Any] = []
    pos = 0
    end = len(text)
    while True:
        while pos < end and text[pos].isspace():
            pos += 1
        if pos >= end:
            break
        try:
            value, pos = decoder.raw_decode(text, pos)
        except ValueError as exc:
            # JSONDecodeError, or an integer literal too long to convert
            raise MalformedRecord(f"invalid JSON: {exc}") from exc
        if isinstance(value, list):
            values.extend(value)
        else:
            values.append(value)
    if not values:
        raise EmptyInput("no test cases found in input")
    return values


def _share_indices(obj: Mapping[str, Any], n: int) -> List[int]:
    """Canonical decimal keys of ``obj`` that fall in ``1..n``, ascending."""
    width = len(str(n))
    indices: List[int] = []
    for key in obj:
        if not (isinstance(key, str) and key.isdigit() and key.isascii()):
            continue
        if len(key) > width or key != str(int(key)):
            continue
        index = int(key)
        if 1 <= index <= n:
            indices.append(index)
    return sorted(indices)


def parse_case(obj: Any) -> CaseRecord:
    """Validate one case object and collect the entries for indices ``1..n``.

    An index without any entry is skipped. An entry that exists but lacks
    ``base`` or ``value`` makes the whole case malformed.
    """
    if not isinstance(obj, Mapping):
        raise MalformedRecord(f"test case must be an object, got {type(obj).__name__}")
    keys = obj.get("keys")
    if not isinstance(keys, Mapping):
        raise MalformedRecord('missing "keys" object')
    if "n" not in keys or "k" not in keys:
        raise MalformedRecord('"keys" must define both "n" and "k"')
    n = _as_int(keys["n"], "keys.n")
    k = _as_int(keys["k"], "keys.k")
    if n <= 0 or k <= 0:
        raise MalformedRecord(f"n and k must be positive (n={n}, k={k})")

    entries: List[ShareRecord] = []
    for index in _share_indices(obj, n):
        raw = obj[str(index)]
        if raw is None:
            continue
        if not isinstance(raw, Mapping):
            raise MalformedRecord(f"share {index} must be an object")
        if "base" not in raw:
            raise MalformedRecord(f'share {index} has no "base"')
        if "value" not in raw:
            raise MalformedRecord(f'share {index} has no "value"')
        base = _as_int(raw["base"], f"share {index} base")
        digits = raw["value"]
        if not isinstance(digits, str):
            raise MalformedRecord(f'share {index} "value" must be a string')
        entries.append(ShareRecord(index=index, base=base, digits=digits))
    return CaseRecord(n=n, k=k, entries=tuple(entries))


def load_cases(text: str) -> List[ParsedCase]:
    """Parse a whole document; malformed cases are returned in place, not raised."""
    cases: List[ParsedCase] = []
    for obj in iter_documents(text):
        try:
            cases.append(parse_case(obj))
        except MalformedRecord as exc:
            cases.append(exc)
    return cases


__all__ = [
    "ShareRecord",
    "CaseRecord",
    "ParsedCase",
    "iter_documents",
    "parse_case",
    "load_cases",
]
