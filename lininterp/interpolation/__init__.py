"""
Piecewise-linear interpolation over x-ascending point tables.

Queries inside the table are blended linearly between the two bracketing
points; queries outside it are clamped to the nearest endpoint.
"""

# Base classes
from .base import Interpolator

# Table view
from .table import PointTable

# Search strategies
from .binary import BinarySearchInterpolator
from .linear import LinearScanInterpolator

# Factory and utilities
from .factory import create_interpolator, results_to_frame

__all__ = [
    # Base classes
    'Interpolator',
    'PointTable',

    # Search strategies
    'LinearScanInterpolator',
    'BinarySearchInterpolator',

    # Factory and utilities
    'create_interpolator',
    'results_to_frame',
]
