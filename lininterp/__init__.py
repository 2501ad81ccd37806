"""
lininterp: piecewise-linear interpolation with endpoint clamping.
"""

from .config import InterpConfig
from .interpolation import (
    BinarySearchInterpolator,
    Interpolator,
    LinearScanInterpolator,
    PointTable,
    create_interpolator,
    results_to_frame,
)
from .schema import InterpResult, InterpStatus, InvalidTableError, Point, SearchMethod
from .utils.numeric import ExactPolicy, NumericPolicy, PromotingPolicy

__version__ = "0.1.0"

__all__ = [
    "Point",
    "PointTable",
    "InterpResult",
    "InterpStatus",
    "SearchMethod",
    "InvalidTableError",
    "InterpConfig",
    "Interpolator",
    "LinearScanInterpolator",
    "BinarySearchInterpolator",
    "create_interpolator",
    "results_to_frame",
    "NumericPolicy",
    "PromotingPolicy",
    "ExactPolicy",
]
