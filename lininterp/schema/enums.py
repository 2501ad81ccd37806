"""
Core enumeration types for the interpolation engine.
"""

from enum import Enum


class InterpStatus(Enum):
    """Outcome of a single interpolation."""

    OK = "OK"
    X_VALUE_OUT_OF_RANGE = "X_VALUE_OUT_OF_RANGE"
    INVALID_TABLE = "INVALID_TABLE"


class SearchMethod(Enum):
    """Bracket search strategies."""

    LINEAR = "LINEAR"
    BINARY = "BINARY"
