"""ASCII case-insensitive, length-bounded string comparison."""

from __future__ import annotations

from itertools import islice, zip_longest

__all__ = ["strncmpci"]

_UPPER_A = ord("A")
_UPPER_Z = ord("Z")
_CASE_SHIFT = ord("a") - ord("A")


def _codes(text: str | bytes) -> list[int]:
    codes = list(text) if isinstance(text, (bytes, bytearray)) else [ord(c) for c in text]
    # A NUL character ends the string, as it would for a C string.
    try:
        return codes[: codes.index(0)]
    except ValueError:
        return codes


def _lower(code: int) -> int:
    return code + _CASE_SHIFT if _UPPER_A <= code <= _UPPER_Z else code


def strncmpci(s1: str | bytes, s2: str | bytes, num: int) -> int:
    """Compare at most ``num`` characters, folding only ASCII ``A``-``Z`` to lower case.

    Returns zero when the compared prefixes match, otherwise the difference
    between the first pair of differing (lower-cased) character codes; a
    missing character counts as code 0.  Raises ``TypeError`` when either
    string is ``None`` and ``ValueError`` when ``num`` is negative.
    """
    if s1 is None or s2 is None:
        raise TypeError("strings to compare must not be None")
    if num < 0:
        raise ValueError("num must not be negative")
    pairs = zip_longest(_codes(s1), _codes(s2), fillvalue=0)
    for a, b in islice(pairs, num):
        diff = _lower(a) - _lower(b)
        if diff:
            return diff
    return 0