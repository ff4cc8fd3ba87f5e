"""Helpers for the numeric field type carried by coordinates.

Coordinates accept any value type with the usual ring operations: ``int``,
:class:`fractions.Fraction`, :class:`decimal.Decimal`, ``float`` or numpy
scalars. Distance additionally needs ``abs`` and ordering; projection only
needs the value to be convertible by the chosen float type.
"""

from __future__ import annotations

import math
import numbers
import sys
from typing import Any, Callable, TypeVar

import numpy as np

T = TypeVar("T")
U = TypeVar("U")

FloatType = Callable[[Any], U]

# Rounding error allowed when summing three inexact components, in ulps of the
# largest one.
_ULP_SLACK = 4


def sums_to_zero(x: Any, y: Any, z: Any) -> bool:
    """Return True if ``x + y + z`` equals the additive identity.

    Rational types (``int``, ``Fraction``, numpy integers) are compared
    exactly. Inexact types such as ``float``, ``Decimal`` or numpy floats are
    compared with a tolerance scaled to the largest component, so values
    produced by ``y = -x - z`` are accepted.
    """

    total = x + y + z
    if isinstance(total, numbers.Rational):
        return total == 0
    if isinstance(total, np.floating):
        eps = float(np.finfo(total.dtype).eps)
    else:
        eps = sys.float_info.epsilon
    scale = max(float(abs(x)), float(abs(y)), float(abs(z)), 1.0)
    return math.isclose(float(total), 0.0, abs_tol=_ULP_SLACK * eps * scale)


def halve(value: T) -> T:
    """Divide ``value`` by two without leaving its numeric type.

    Integral types use floor division; cube distances are always even sums,
    so nothing is lost.
    """

    if isinstance(value, numbers.Integral):
        return value // 2
    return value / 2


def sqrt3(float_type: FloatType[U]) -> U:
    """``sqrt(3)`` expressed in ``float_type``."""

    return float_type(3) ** float_type(0.5)


__all__ = ["FloatType", "T", "U", "halve", "sqrt3", "sums_to_zero"]
