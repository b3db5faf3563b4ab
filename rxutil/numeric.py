"""Small numeric helpers: weighted max-norm, element-wise erf and zero checks."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from numbers import Real

__all__ = ["vmnorm", "rx_erf", "is_null_zero"]


def vmnorm(v: Iterable[float], w: Iterable[float]) -> float:
    """Weighted max-norm: ``max(abs(v[i]) * w[i])``, never below zero.

    NaN products are ignored.  ``v`` and ``w`` must have the same length.
    """
    norm = 0.0
    for value, weight in zip(v, w, strict=True):
        product = math.fabs(value) * weight
        if not math.isnan(product):
            norm = max(norm, product)
    return norm


def rx_erf(values: Iterable[float]) -> list[float]:
    """Error function of every value."""
    return [math.erf(value) for value in values]


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _is_matrix(obj: object) -> bool:
    """A matrix is a non-empty sequence of equally long rows of numbers."""
    if not _is_sequence(obj) or len(obj) == 0:
        return False
    if not all(_is_sequence(row) for row in obj):
        return False
    width = len(obj[0])
    return all(len(row) == width and all(_is_number(x) for x in row) for row in obj)


def _matrix_is_zero(matrix: Sequence[Sequence[float]]) -> bool:
    cells = [x for row in matrix for x in row]
    return bool(cells) and all(x == 0 for x in cells)


def is_null_zero(obj: object) -> bool:
    """True for ``None``, an all-zero matrix, or a list ending in an all-zero matrix.

    A list (or mapping) of matrices is scanned from its last element: the
    first all-zero matrix gives True, and any element that is not a matrix
    gives False.  Plain vectors and other objects give False.
    """
    if obj is None:
        return True
    if _is_matrix(obj):
        return _matrix_is_zero(obj)
    if isinstance(obj, Mapping):
        elements = list(obj.values())
    elif _is_sequence(obj):
        elements = list(obj)
    else:
        return False
    for element in reversed(elements):
        if not _is_matrix(element):
            return False
        if _matrix_is_zero(element):
            return True
    return False