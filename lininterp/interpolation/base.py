"""
Base class for piecewise-linear table interpolation.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, Optional, Sequence, TypeVar, Union

from lininterp.config import InterpConfig
from lininterp.interpolation.table import PointTable
from lininterp.schema.enums import InterpStatus
from lininterp.schema.errors import InvalidTableError
from lininterp.schema.point import Point
from lininterp.schema.result import InterpResult

logger = logging.getLogger(__name__)

X = TypeVar("X")
Y = TypeVar("Y")

TableLike = Union[PointTable, Sequence[Point]]


class Interpolator(ABC, Generic[X, Y]):
    """Linear interpolation over an x-ascending point table.

    Queries below the first x are clamped to the first y (section 0); queries
    past the last active x are clamped to the last y (section N). Everything
    in between is blended linearly between the bracketing points. A query
    equal to a table x belongs to the section ending at that point.

    The interpolator does not own the table. Callers that mutate the backing
    sequence from another thread must synchronize around ``interp``.
    """

    def __init__(
        self,
        points: TableLike,
        num_points: Optional[int] = None,
        config: Optional[InterpConfig] = None,
    ):
        """
        Initialize interpolator.

        Args:
            points: PointTable or sequence of Point, x-ascending
            num_points: Number of leading points to use (None = all)
            config: Interpolator settings (defaults to InterpConfig())
        """
        self.config = config if config is not None else InterpConfig()
        self.table: PointTable[X, Y]
        self.bind(points, num_points)

    def bind(self, points: TableLike, num_points: Optional[int] = None) -> None:
        """Point the interpolator at another table.

        A PointTable passed without ``num_points`` is shared as is, so later
        changes to its active count are seen here. With ``num_points`` a new
        view over the same backing sequence is created and the given table is
        left untouched.
        """
        if isinstance(points, PointTable):
            if num_points is not None:
                points = PointTable(points.points, num_points)
            self.table = points
        else:
            self.table = PointTable(points, num_points)

    @property
    def num_points(self) -> int:
        """Active point count of the bound table."""
        return self.table.active_count

    @num_points.setter
    def num_points(self, value: Optional[int]) -> None:
        self.table.active_count = value

    @abstractmethod
    def _find_section(self, x: X) -> int:
        """Return the first index i >= 1 with ``table[i].x >= x``.

        Returns the active point count when every active x is below ``x``.
        Only called once ``x`` is known not to lie below the first point.
        """
        pass

    def interp(self, x: X) -> InterpResult[Y]:
        """Interpolate the y-value at ``x``."""
        table = self.table

        if self.config.validate:
            reason = table.check()
            if reason is not None:
                logger.warning("Cannot interpolate x=%s: %s", x, reason)
                if self.config.strict:
                    raise InvalidTableError(reason)
                return InterpResult(InterpStatus.INVALID_TABLE, None, 0, reason)

        first = table[0]
        # NaN and other unordered queries compare false both ways
        if not (x < first.x or x >= first.x):
            raise ValueError(f"Query x is not comparable with table x-values: {x!r}")
        if x < first.x:
            return InterpResult(InterpStatus.X_VALUE_OUT_OF_RANGE, first.y, 0)

        n = len(table)
        i = self._find_section(x)
        logger.debug("Index = %s", i)

        if i >= n:
            return InterpResult(InterpStatus.X_VALUE_OUT_OF_RANGE, table[n - 1].y, n)

        lo, hi = table[i - 1], table[i]
        logger.debug("Bracket = %s .. %s", lo, hi)
        value = self.config.policy.blend(x, lo.x, hi.x, lo.y, hi.y)
        return InterpResult(InterpStatus.OK, value, i)

    def interp_many(self, xs: Iterable[X]) -> List[InterpResult[Y]]:
        """Interpolate several x-values against the same table."""
        return [self.interp(x) for x in xs]

    def __call__(self, x: X) -> InterpResult[Y]:
        return self.interp(x)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.table!r})"
