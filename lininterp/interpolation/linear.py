"""
Forward-scan bracket search.
"""
from __future__ import annotations

from .base import Interpolator, X


class LinearScanInterpolator(Interpolator):
    """Finds the bracket by scanning forward from the second point.

    O(N) per query. Suited to small tables and to tables whose active count
    grows as points are streamed in.
    """

    def _find_section(self, x: X) -> int:
        table = self.table
        last = len(table) - 1

        # Start at 1, a single point cannot form an interval
        i = 1
        while table[i].x < x:
            if i == last:
                return i + 1
            i += 1
        return i
