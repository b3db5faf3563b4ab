"""Bounded link functions (logit, expit, probit and its inverse) and quiet-aware printing.

The scalar functions map a value on ``(low, high)`` to the real line and back.
The ``*_values`` variants check the bounds first and then map every element of
a sequence.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from numbers import Real

from rxutil.transforms import power_d, power_d_inverse

__all__ = [
    "logit",
    "expit",
    "probit",
    "probit_inv",
    "logit_values",
    "expit_values",
    "probit_values",
    "probit_inv_values",
    "set_silent",
    "is_silent",
    "rs_print",
]

_LOGIT = 4
_PROBIT = 6


def logit(x: float, low: float = 0.0, high: float = 1.0) -> float:
    """Logit of ``x`` rescaled from ``(low, high)``; NaN outside the interval."""
    return power_d(x, 1.0, _LOGIT, low, high)


def expit(x: float, low: float = 0.0, high: float = 1.0) -> float:
    """Inverse of :func:`logit`, giving a value on ``(low, high)``."""
    return power_d_inverse(x, 1.0, _LOGIT, low, high)


def probit(x: float, low: float = 0.0, high: float = 1.0) -> float:
    """Probit of ``x`` rescaled from ``(low, high)``; NaN outside the interval."""
    return power_d(x, 1.0, _PROBIT, low, high)


def probit_inv(x: float, low: float = 0.0, high: float = 1.0) -> float:
    """Inverse of :func:`probit`, giving a value on ``(low, high)``."""
    return power_d_inverse(x, 1.0, _PROBIT, low, high)


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _bound(value: object, name: str) -> float:
    message = f"'{name}' must be a numeric of length 1"
    if isinstance(value, (list, tuple)):
        if len(value) != 1:
            raise ValueError(message)
        (value,) = value
    if not _is_number(value):
        raise TypeError(message)
    return float(value)


def _bounds(low: object, high: object) -> tuple[float, float]:
    lo = _bound(low, "low")
    hi = _bound(high, "high")
    if hi <= lo:
        raise ValueError("'high' must be greater than 'low'")
    return lo, hi


def _map(
    func: Callable[[float, float, float], float],
    values: Iterable[float],
    low: object,
    high: object,
) -> list[float]:
    lo, hi = _bounds(low, high)
    result = []
    for value in values:
        if not _is_number(value):
            raise TypeError("values must be numeric")
        result.append(func(float(value), lo, hi))
    return result


def logit_values(values: Iterable[float], low: object = 0.0, high: object = 1.0) -> list[float]:
    """Apply :func:`logit` to every value after checking the bounds."""
    return _map(logit, values, low, high)


def expit_values(values: Iterable[float], low: object = 0.0, high: object = 1.0) -> list[float]:
    """Apply :func:`expit` to every value after checking the bounds."""
    return _map(expit, values, low, high)


def probit_values(values: Iterable[float], low: object = 0.0, high: object = 1.0) -> list[float]:
    """Apply :func:`probit` to every value after checking the bounds."""
    return _map(probit, values, low, high)


def probit_inv_values(
    values: Iterable[float], low: object = 0.0, high: object = 1.0
) -> list[float]:
    """Apply :func:`probit_inv` to every value after checking the bounds."""
    return _map(probit_inv, values, low, high)


@dataclass
class _PrintSettings:
    silent: bool = False


_settings = _PrintSettings()


def set_silent(silent: bool) -> None:
    """Switch output from :func:`rs_print` off (True) or on (False)."""
    _settings.silent = bool(silent)


def is_silent() -> bool:
    """Return whether :func:`rs_print` is currently suppressed."""
    return _settings.silent


def rs_print(message: str) -> None:
    """Write ``message`` to standard output unless printing is silenced."""
    if not _settings.silent:
        sys.stdout.write(message)
        sys.stdout.flush()