"""
Factory functions and utilities for creating interpolators.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence, Union

import pandas as pd

from lininterp.config import InterpConfig, parse_method
from lininterp.schema.enums import SearchMethod
from lininterp.schema.result import InterpResult

from .base import Interpolator, TableLike
from .binary import BinarySearchInterpolator
from .linear import LinearScanInterpolator

_STRATEGIES = {
    SearchMethod.LINEAR: LinearScanInterpolator,
    SearchMethod.BINARY: BinarySearchInterpolator,
}


def create_interpolator(points: TableLike,
                        num_points: Optional[int] = None,
                        method: Union[str, SearchMethod, None] = None,
                        config: Optional[InterpConfig] = None) -> Interpolator:
    """
    Create an interpolator based on search method.

    Args:
        points: PointTable or sequence of Point, x-ascending
        num_points: Number of leading points to use (None = all)
        method: LINEAR or BINARY; defaults to ``config.method``
        config: Interpolator settings (defaults to InterpConfig())

    Returns:
        Configured interpolator
    """
    config = config if config is not None else InterpConfig()
    if method is not None:
        config = replace(config, method=parse_method(method))
    return _STRATEGIES[config.method](points, num_points, config)


def results_to_frame(queries: Sequence, results: Sequence[InterpResult]) -> pd.DataFrame:
    """Tabulate queries and their results, one row per query."""
    if len(queries) != len(results):
        raise ValueError("Queries and results must have same length")

    return pd.DataFrame(
        {
            "x": list(queries),
            "status": [r.status.value for r in results],
            "value": [r.value for r in results],
            "section_num": [r.section_num for r in results],
        }
    )
