"""
Binary-search bracket lookup.
"""
from __future__ import annotations

import numpy as np

from .base import Interpolator, X


class BinarySearchInterpolator(Interpolator):
    """Finds the bracket with ``numpy.searchsorted``.

    Gives the same sections as LinearScanInterpolator on strictly ascending
    tables: ``side="left"`` returns the first index whose x is >= the query,
    so a query equal to a table x lands in the section ending at that point.
    """

    def _find_section(self, x: X) -> int:
        i = int(np.searchsorted(self.table.xs(), x, side="left"))
        return max(i, 1)
