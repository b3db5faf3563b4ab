"""Parameter transformations, their derivatives and log-likelihood terms.

Transform codes follow the ``yj`` convention: the last decimal digit selects
the transformation, the remaining digits select the residual distribution
(see :func:`split_yj`).

Transformation digits:

* 0 - Box-Cox
* 1 - Yeo-Johnson
* 2 - identity (normal)
* 3 - log
* 4 - logit on ``(low, high)``
* 5 - logit followed by Yeo-Johnson
* 6 - probit on ``(low, high)``
* 7 - probit followed by Yeo-Johnson

Unknown digits and non-finite inputs give NaN.
"""

from __future__ import annotations

import math
import sys
from enum import IntEnum
from statistics import NormalDist

__all__ = [
    "Distribution",
    "split_yj",
    "erfinv",
    "power_d",
    "power_d_inverse",
    "power_dd",
    "power_ddd",
    "power_l",
    "power_dl",
    "abs1",
    "dabs",
    "dabs2",
]

_EPS = math.sqrt(sys.float_info.epsilon)
_NAN = math.nan
_INF = math.inf
_STD_NORMAL = NormalDist()

_SQRT_2PI = 2.506628274631000241612
_LOG_SQRT_2PI = 0.918938533204672669541
_D2_PROBIT_CONST = 8.885765876316728650863


class Distribution(IntEnum):
    """Residual distribution selected by the tens part of a transform code."""

    NORM = 1
    POIS = 2
    BINOM = 3
    BETA = 4
    T = 5
    CHISQ = 6
    DEXP = 7
    F = 8
    GEOM = 9
    HYPER = 10
    UNIF = 11
    WEIBULL = 12
    CAUCHY = 13
    GAMMA = 14
    ORDINAL = 15
    N2LL = 16
    DNORM = 17


# --- IEEE-style arithmetic helpers -----------------------------------------


def _div(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return _NAN
        return math.copysign(_INF, a) * math.copysign(1.0, b)


def _pow(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and float(b).is_integer() and int(b) % 2:
            return -_INF
        return _INF
    except ValueError:
        if a == 0:
            return _INF
        return _NAN


def _log(x: float) -> float:
    if math.isnan(x) or x < 0:
        return _NAN
    if x == 0:
        return -_INF
    return math.log(x)


def _log1p(x: float) -> float:
    if math.isnan(x) or x < -1:
        return _NAN
    if x == -1:
        return -_INF
    return math.log1p(x)


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return _INF


def _expm1(x: float) -> float:
    try:
        return math.expm1(x)
    except OverflowError:
        return _INF


def _qnorm(p: float) -> float:
    if math.isnan(p) or p < 0 or p > 1:
        return _NAN
    if p == 0:
        return -_INF
    if p == 1:
        return _INF
    return _STD_NORMAL.inv_cdf(p)


def _pnorm(x: float) -> float:
    return 0.5 * math.erfc(-x / math.sqrt(2.0))


def _is_finite(x: float) -> bool:
    return math.isfinite(x)


def _yeo_johnson(p: float, lam: float) -> float:
    if lam == 1.0:
        return p
    if p >= 0:
        if lam == 0:
            return _log1p(p)
        return (_pow(p + 1.0, lam) - 1.0) / lam
    if lam == 2.0:
        return -_log1p(-p)
    l2 = 2.0 - lam
    return (1.0 - _pow(1.0 - p, l2)) / l2


def _unit_fraction(x: float, low: float, high: float) -> float:
    return _div(x - low, high - low)


# --- public API ------------------------------------------------------------


def split_yj(yj: int) -> tuple[int, int]:
    """Split a transform code into ``(distribution, transformation)``."""
    yj = int(yj)
    tens = -((-yj) // 10) if yj < 0 else yj // 10
    trans = yj - tens * 10
    return tens + 1, trans


def erfinv(x: float) -> float:
    """Inverse error function."""
    return _qnorm((1.0 + x) / 2.0) * math.sqrt(0.5)


def power_d(x: float, lam: float, yj: int, low: float, high: float) -> float:
    """Apply the transformation selected by ``yj`` to ``x``."""
    x = float(x)
    if not _is_finite(x):
        return _NAN
    _, trans = split_yj(yj)
    match trans:
        case 7:
            p = _unit_fraction(x, low, high)
            if p >= 1 or p <= 0 or math.isnan(p):
                return _NAN
            return _yeo_johnson(_qnorm(p), lam)
        case 6:
            p = _unit_fraction(x, low, high)
            if p >= 1 or p <= 0 or math.isnan(p):
                return _NAN
            return _qnorm(p)
        case 5:
            p = _unit_fraction(x, low, high)
            if p >= 1 or p <= 0 or math.isnan(p):
                return _NAN
            return _yeo_johnson(-_log(1.0 / p - 1.0), lam)
        case 4:
            p = _unit_fraction(x, low, high)
            if p >= 1 or p <= 0 or math.isnan(p):
                return _NAN
            return -_log(1.0 / p - 1.0)
        case 3:
            return _log(_EPS if x <= _EPS else x)
        case 2:
            return x
        case 0:
            if lam == 1.0:
                return x - 1.0
            x0 = _EPS if x <= _EPS else x
            if lam == 0.0:
                return _log(x0)
            return (_pow(x0, lam) - 1.0) / lam
        case 1:
            return _yeo_johnson(x, lam)
    return _NAN


def power_d_inverse(x: float, lam: float, yj: int, low: float, high: float) -> float:
    """Map a transformed value back to the original scale."""
    x = float(x)
    if not _is_finite(x):
        return _NAN
    _, trans = split_yj(yj)
    match trans:
        case 7 | 6:
            return (high - low) * _pnorm(x) + low
        case 5:
            yjd = _yeo_johnson(x, lam)
            return _div(high - low, 1.0 + _exp(-yjd)) + low
        case 4:
            return _div(high - low, 1.0 + _exp(-x)) + low
        case 3:
            return _exp(x)
        case 2:
            return x
        case 0:
            if lam == 1.0:
                return x + 1.0
            if lam == 0:
                return _exp(x)
            x0 = x * lam + 1.0
            if x0 <= _EPS:
                return _EPS
            return _pow(x0, 1.0 / lam)
        case 1:
            if lam == 1.0:
                return x
            if x >= 0:
                if lam == 0:
                    return _expm1(x)
                return _pow(x * lam + 1.0, 1.0 / lam) - 1.0
            if lam == 2.0:
                return -_expm1(-x)
            l2 = 2.0 - lam
            return 1.0 - _pow(1.0 - l2 * x, 1.0 / l2)
    return _NAN


def power_dd(x: float, lam: float, yj: int, low: float, high: float) -> float:
    """First derivative of :func:`power_d` with respect to ``x``."""
    x = float(x)
    if not _is_finite(x):
        return _NAN
    _, trans = split_yj(yj)
    match trans:
        case 7:
            return power_dd(power_d(x, lam, 6, low, high), lam, 1, low, high) * power_dd(
                x, lam, 6, low, high
            )
        case 6:
            hl = high - low
            eri = erfinv(-1.0 + _div(2.0 * (x - low), hl))
            return _div(_SQRT_2PI * _exp(eri * eri), hl)
        case 5:
            return power_dd(power_d(x, lam, 4, low, high), lam, 1, low, high) * power_dd(
                x, lam, 4, low, high
            )
        case 4:
            xl = x - low
            hl = high - low
            return _div(hl, xl * (hl - xl))
        case 3:
            if x <= _EPS:
                return _EPS
            return 1.0 / x
        case 2:
            return 1.0
        case 0:
            if lam == 1.0:
                return 1.0
            if x <= _EPS:
                return _EPS
            if lam == 0.0:
                return 1.0 / x
            return _pow(x, lam - 1.0)
        case 1:
            if lam == 1.0:
                return 1.0
            if x >= 0:
                if lam == 0.0:
                    return _div(1.0, x + 1.0)
                return _pow(x + 1.0, lam - 1.0)
            if lam == 2.0:
                return -1.0 / (1.0 - x)
            return _pow(1.0 - x, 1.0 - lam)
    return _NAN


def power_ddd(x: float, lam: float, yj: int, low: float, high: float) -> float:
    """Second derivative of :func:`power_d` with respect to ``x``."""
    x = float(x)
    if not _is_finite(x):
        return _NAN
    _, trans = split_yj(yj)
    match trans:
        case 7:
            d_l = power_dd(x, lam, 6, low, high)
            return d_l * d_l * power_dd(power_d(x, lam, 6, low, high), lam, 1, low, high)
        case 6:
            hl = high - low
            eri = erfinv(-1.0 + _div(2.0 * (x - low), hl))
            return _div(_D2_PROBIT_CONST * _exp(2.0 * eri * eri) * eri, hl * hl)
        case 5:
            d_l = power_dd(x, lam, 4, low, high)
            return d_l * d_l * power_dd(power_d(x, lam, 4, low, high), lam, 1, low, high)
        case 4:
            hl = high - low
            hl2 = hl * hl
            xl = x - low
            t1 = -1.0 + _div(hl, xl)
            return _div(hl2, hl2 * hl2 * t1 * t1) - _div(2.0 * hl, xl * xl * xl * t1)
        case 3:
            x0 = _EPS if x <= _EPS else x
            return -1.0 / (x0 * x0)
        case 2:
            return 0.0
        case 0:
            if lam == 1.0:
                return 0.0
            if x <= _EPS:
                return _EPS
            if lam == 0.0:
                return -1.0 / (x * x)
            return (lam - 1.0) * _pow(x, lam - 2.0)
        case 1:
            if lam == 1.0:
                return 0.0
            if x >= 0:
                if lam == 0.0:
                    return -1.0 / ((x + 1.0) * (x + 1.0))
                return (lam - 1.0) * _pow(x + 1.0, lam - 2.0)
            if lam == 2.0:
                return -1.0 / ((1.0 - x) * (1.0 - x))
            return -(1.0 - lam) * _pow(1.0 - x, -lam)
    return _NAN


def power_l(x: float, lam: float, yj: int, low: float, high: float) -> float:
    """Log-Jacobian of the transformation, used in the likelihood."""
    x = float(x)
    if not _is_finite(x):
        return _NAN
    _, trans = split_yj(yj)
    match trans:
        case 7:
            return _log(
                power_dd(power_d(x, lam, 6, low, high), lam, 1, low, high)
            ) + _log(power_dd(x, lam, 6, low, high))
        case 6:
            hl = high - low
            eri = erfinv(-1.0 + _div(2.0 * (x - low), hl))
            return _LOG_SQRT_2PI + eri * eri - _log(hl)
        case 5:
            return _log(
                power_dd(power_d(x, lam, 4, low, high), lam, 1, low, high)
            ) + _log(power_dd(x, lam, 4, low, high))
        case 4:
            xl = x - low
            if xl <= _EPS:
                xl = _EPS
            hl = high - low
            hl2 = hl - xl
            if xl <= _EPS:
                hl2 = _EPS
            return _log(hl) - _log(xl) - _log(hl2)
        case 3:
            return -_log(_EPS if x <= _EPS else x)
        case 2:
            return 0.0
        case 0:
            if lam == 1.0:
                return 0.0
            return (lam - 1.0) * _log(_EPS if x <= _EPS else x)
        case 1:
            if x >= 0:
                return (lam - 1.0) * _log1p(x)
            return (1.0 - lam) * _log1p(-x)
    return _NAN


def power_dl(x: float, lam: float, yj: int, low: float, high: float) -> float:
    """Derivative of :func:`power_l` with respect to ``lam``."""
    x = float(x)
    if not _is_finite(x):
        return _NAN
    _, trans = split_yj(yj)
    match trans:
        case 6 | 4 | 2:
            return 0.0
        case 5:
            return power_dl(power_d(x, lam, 4, low, high), lam, 1, low, high)
        case 3:
            return _log(_EPS if x <= _EPS else x)
        case 0:
            if lam == 1.0:
                return 0.0
            return _log(_EPS if x <= _EPS else x)
        case 1:
            if lam == 1.0:
                return 0.0
            if x >= 0:
                return _log1p(x)
            return -_log1p(x)
    return _NAN


def abs1(x: float) -> float:
    """Absolute value, with zero mapped to one."""
    if x == 0.0:
        return 1.0
    return math.fabs(x)


def dabs(x: float) -> float:
    """Derivative of ``abs``: the sign of ``x`` (zero at zero)."""
    return float((x > 0) - (x < 0))


def dabs2(x: float) -> float:
    """Second derivative of ``abs``, taken as zero everywhere."""
    return 0.0