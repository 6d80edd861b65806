"""Arbitrary-radix digit strings to Python integers."""

from __future__ import annotations

from .errors import InvalidBase, MalformedDigit

MIN_BASE = 2
MAX_BASE = 36

# str() of ints above ~4300 digits is refused by default on Python 3.11+
_CHUNK_DIGITS = 1000
_CHUNK = 10**_CHUNK_DIGITS


def digit_value(ch: str) -> int:
    """Map ``0-9`` to 0..9 and ``a-z``/``A-Z`` to 10..35 (case-insensitive)."""
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    raise MalformedDigit(f"invalid digit {ch!r}")


def decode(digits: str, base: int) -> int:
    """Decode ``digits`` written most-significant first in ``base``.

    Whitespace is ignored and an empty string decodes to 0. There is no sign
    handling: share values are non-negative magnitudes.
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(f"base must be an integer, got {base!r}")
    if not (MIN_BASE <= base <= MAX_BASE):
        raise InvalidBase(f"base {base} outside {MIN_BASE}..{MAX_BASE}")
    value = 0
    for ch in digits:
        if ch.isspace():
            continue
        d = digit_value(ch)
        if d >= base:
            raise MalformedDigit(f"digit {ch!r} is not valid in base {base}")
        value = value * base + d
    return value


def to_decimal_string(value: int) -> str:
    """Render ``value`` in base 10 regardless of the interpreter's int-to-str digit limit."""
    if value < 0:
        return "-" + to_decimal_string(-value)
    chunks = []
    while value >= _CHUNK:
        value, low = divmod(value, _CHUNK)
        chunks.append(str(low).zfill(_CHUNK_DIGITS))
    chunks.append(str(value))
    return "".join(reversed(chunks))


__all__ = ["MIN_BASE", "MAX_BASE", "digit_value", "decode", "to_decimal_string"]
