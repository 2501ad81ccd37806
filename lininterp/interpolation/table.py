"""
Bounded view over a caller-owned sequence of points.
"""
from __future__ import annotations

import logging
import operator
from typing import Generic, Iterable, Iterator, Optional, Sequence, Tuple, TypeVar

import numpy as np
import pandas as pd

from lininterp.schema.errors import InvalidTableError
from lininterp.schema.point import Point

logger = logging.getLogger(__name__)

X = TypeVar("X")
Y = TypeVar("Y")


class PointTable(Generic[X, Y]):
    """Read-only window over the first ``active_count`` entries of ``points``.

    The table does not copy or own ``points``; changes the caller makes to the
    backing sequence are seen by the next query. Entries at or beyond the
    active count are never consulted.
    """

    def __init__(self, points: Sequence[Point[X, Y]], active_count: Optional[int] = None):
        """
        Initialize the view.

        Args:
            points: Backing sequence of points, x-ascending
            active_count: Number of leading entries to use (None = all)
        """
        self._points = points
        self._active_count: Optional[int] = None
        self.active_count = active_count

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[X, Y]]) -> "PointTable[X, Y]":
        """Build a table from (x, y) pairs in the given order."""
        return cls([Point.of(pair) for pair in pairs])

    @classmethod
    def from_frame(cls, frame: pd.DataFrame, x: str = "x", y: str = "y") -> "PointTable":
        """Build a table from two DataFrame columns, keeping row order."""
        missing = [col for col in (x, y) if col not in frame.columns]
        if missing:
            raise ValueError(f"DataFrame is missing columns: {missing}")
        return cls([Point(xv, yv) for xv, yv in zip(frame[x].tolist(), frame[y].tolist(), strict=True)])

    @property
    def points(self) -> Sequence[Point[X, Y]]:
        """The backing sequence, including inactive entries."""
        return self._points

    @property
    def capacity(self) -> int:
        return len(self._points)

    @property
    def active_count(self) -> int:
        if self._active_count is None:
            return len(self._points)
        return self._active_count

    @active_count.setter
    def active_count(self, value: Optional[int]) -> None:
        if value is not None:
            try:
                value = operator.index(value)
            except TypeError:
                raise ValueError(f"Active count must be an integer: {value!r}") from None
            if value < 0:
                raise ValueError(f"Active count must be non-negative: {value}")
        self._active_count = value

    def __len__(self) -> int:
        return min(self.active_count, self.capacity)

    def __getitem__(self, index: int) -> Point[X, Y]:
        n = len(self)
        if index < 0:
            index += n
        if not 0 <= index < n:
            raise IndexError(f"Index {index} outside active window of {n} points")
        return self._points[index]

    def __iter__(self) -> Iterator[Point[X, Y]]:
        for i in range(len(self)):
            yield self._points[i]

    def __repr__(self) -> str:
        return f"PointTable(active_count={self.active_count}, capacity={self.capacity})"

    def xs(self) -> np.ndarray:
        """Active x-values as an array."""
        return np.asarray([p.x for p in self])

    def ys(self) -> np.ndarray:
        """Active y-values as an array."""
        return np.asarray([p.y for p in self])

    def check(self) -> Optional[str]:
        """Return why the table cannot be interpolated, or None if it can."""
        n = self.active_count
        if n > self.capacity:
            return f"Active count {n} exceeds table capacity {self.capacity}"
        if n < 2:
            return f"Need at least 2 active points for interpolation, got {n}"

        prev = self._points[0].x
        for i in range(1, n):
            cur = self._points[i].x
            if not prev < cur:
                if cur == prev:
                    return f"Duplicate x-value {cur} at index {i} (zero-width interval)"
                return f"x-values not ascending at index {i}: {prev} followed by {cur}"
            prev = cur
        return None

    def validate(self) -> None:
        """Raise InvalidTableError if the table cannot be interpolated."""
        reason = self.check()
        if reason is not None:
            logger.debug("Table validation failed: %s", reason)
            raise InvalidTableError(reason)
