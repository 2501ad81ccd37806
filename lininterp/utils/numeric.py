"""Numeric policies for the interpolation blend."""

from __future__ import annotations

from fractions import Fraction
from typing import Any, Protocol

import numpy as np


class NumericPolicy(Protocol):
    """Computes ``(qx - x0) * (y1 - y0) / (x1 - x0) + y0``.

    Any object with a matching ``blend`` method can be injected into an
    interpolator.
    """

    def blend(self, qx: Any, x0: Any, x1: Any, y0: Any, y1: Any) -> Any:
        ...


def _cast_like(value: Any, like: Any) -> Any:
    """Cast ``value`` back to the type of ``like``.

    Integer targets truncate toward zero, matching a C-style cast.
    """
    if isinstance(like, np.generic):
        if isinstance(like, np.integer):
            return like.dtype.type(int(value))
        return like.dtype.type(value)
    if isinstance(like, bool):
        return bool(value)
    if isinstance(like, int):
        return int(value)
    if isinstance(like, float):
        return float(value)
    return type(like)(value)


def _to_fraction(value: Any) -> Fraction:
    if isinstance(value, np.generic):
        value = value.item()
    return Fraction(value)


def promoted_dtype(*operands: Any) -> np.dtype:
    """Smallest floating dtype of at least float64 that holds every operand."""
    return np.result_type(np.float64, *(np.asarray(op).dtype for op in operands))


class PromotingPolicy:
    """Blend in a floating dtype wide enough for the X and Y types.

    Operands are promoted before any subtraction, so unsigned x types never
    underflow. Python ints/floats and numpy float32 compute in float64;
    longdouble inputs stay longdouble.
    """

    def blend(self, qx: Any, x0: Any, x1: Any, y0: Any, y1: Any) -> Any:
        wide = promoted_dtype(qx, x0, x1, y0, y1).type
        x_span = wide(x1) - wide(x0)
        y_span = wide(y1) - wide(y0)
        value = (wide(qx) - wide(x0)) * y_span / x_span + wide(y0)
        return _cast_like(value, y0)

    def __repr__(self) -> str:
        return "PromotingPolicy()"


class ExactPolicy:
    """Blend with rational arithmetic.

    Intended for int or Fraction tables where rounding through a float
    intermediate is not acceptable. The result is cast back to the type
    of ``y0`` (ints truncate toward zero).
    """

    def blend(self, qx: Any, x0: Any, x1: Any, y0: Any, y1: Any) -> Any:
        fx0 = _to_fraction(x0)
        fy0 = _to_fraction(y0)
        value = (_to_fraction(qx) - fx0) * (_to_fraction(y1) - fy0) / (_to_fraction(x1) - fx0) + fy0
        if isinstance(y0, Fraction):
            return value
        return _cast_like(value, y0)

    def __repr__(self) -> str:
        return "ExactPolicy()"
