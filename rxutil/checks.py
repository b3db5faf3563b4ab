"""Argument coercion with uniform error messages.

Each ``as_*`` function checks that a value has the expected shape and type
and returns it in a plain Python form.  Otherwise it raises
:class:`ArgumentError`, whose message names the argument.  A sequence of
length one counts as a scalar wherever a scalar is expected.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from numbers import Integral, Real
from typing import Any

__all__ = [
    "ArgumentError",
    "as_list",
    "as_int",
    "as_unsigned_int",
    "as_double",
    "as_bool",
    "as_str",
    "as_str_vector",
    "as_logical_vector",
    "as_numeric_vector",
    "as_int_vector",
]


class ArgumentError(TypeError, ValueError):
    """Raised when an argument does not have the required type or shape."""

    def __init__(self, what: str, requirement: str) -> None:
        super().__init__(f"'{what}' needs to be {requirement}")
        self.what = what
        self.requirement = requirement


def _is_vector(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _scalar(value: object) -> tuple[bool, Any]:
    """Return ``(True, element)`` for a scalar or a one-element vector."""
    if _is_vector(value):
        if len(value) != 1:
            return False, None
        return True, value[0]
    return True, value


def _integerish(value: object) -> bool:
    if isinstance(value, bool) or not _is_number(value):
        return False
    if isinstance(value, Integral):
        return True
    number = float(value)
    return math.isfinite(number) and number.is_integer()


def as_list(value: object, what: str) -> list[Any] | dict[Any, Any]:
    """Return ``value`` as a list, or as a dict when it is a mapping."""
    if isinstance(value, Mapping):
        return dict(value)
    if _is_vector(value):
        return list(value)
    raise ArgumentError(what, "a list")


def as_int(value: object, what: str) -> int:
    """Return a single whole number as ``int``."""
    ok, element = _scalar(value)
    if not ok or not _integerish(element):
        raise ArgumentError(what, "an integer")
    return int(element)


def as_unsigned_int(value: object, what: str) -> int:
    """Return a single non-negative whole number as ``int``."""
    ok, element = _scalar(value)
    if not ok or not _integerish(element) or element < 0:
        raise ArgumentError(what, "an integer greater than 0")
    return int(element)


def as_double(value: object, what: str) -> float:
    """Return a single number as ``float``."""
    ok, element = _scalar(value)
    if not ok or not _is_number(element):
        raise ArgumentError(what, "an double")
    return float(element)


def as_bool(value: object, what: str) -> bool:
    """Return a single logical or numeric value as ``bool``."""
    ok, element = _scalar(value)
    if not ok or not (isinstance(element, bool) or _is_number(element)):
        raise ArgumentError(what, "a boolean")
    if _is_number(element) and math.isnan(float(element)):
        raise ArgumentError(what, "a boolean")
    return bool(element)


def as_str(value: object, what: str) -> str:
    """Return a single string."""
    ok, element = _scalar(value)
    if not ok or not isinstance(element, str):
        raise ArgumentError(what, "a string")
    return element


def as_str_vector(value: object, what: str) -> list[str]:
    """Return a string or a sequence of strings as a list of strings."""
    if isinstance(value, str):
        return [value]
    if _is_vector(value) and all(isinstance(item, str) for item in value):
        return list(value)
    raise ArgumentError(what, "a vector of strings")


def as_logical_vector(value: object, what: str) -> list[bool]:
    """Return a logical value or a sequence of them as a list of ``bool``."""
    if isinstance(value, bool):
        return [value]
    if _is_vector(value) and all(isinstance(item, bool) for item in value):
        return list(value)
    raise ArgumentError(what, "an logical vector or NULL")


def as_numeric_vector(value: object, what: str) -> list[float]:
    """Return a number or a sequence of numbers as a list of ``float``."""
    if _is_number(value):
        return [float(value)]
    if _is_vector(value) and all(_is_number(item) for item in value):
        return [float(item) for item in value]
    raise ArgumentError(what, "a numeric vector")


def as_int_vector(value: object, what: str) -> list[int]:
    """Return a number or a sequence of numbers as a list of ``int``.

    Fractional values are truncated toward zero; non-finite values are rejected.
    """
    items = [value] if _is_number(value) else value
    if not _is_vector(items) or not all(_is_number(item) for item in items):
        raise ArgumentError(what, "a integer vector")
    if not all(math.isfinite(float(item)) for item in items):
        raise ArgumentError(what, "a integer vector")
    return [int(item) for item in items]