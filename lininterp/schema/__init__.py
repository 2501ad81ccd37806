"""
Value types shared by the interpolation engine.
"""

from .enums import InterpStatus, SearchMethod
from .errors import InvalidTableError
from .point import Point
from .result import InterpResult

__all__ = [
    # Enums
    "InterpStatus",
    "SearchMethod",
    # Errors
    "InvalidTableError",
    # Records
    "Point",
    "InterpResult",
]
