"""Result returned from Interpolator.interp()."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .enums import InterpStatus
from .errors import InvalidTableError

Y = TypeVar("Y")


@dataclass(frozen=True)
class InterpResult(Generic[Y]):
    """Outcome of one interpolation.

    Attributes:
        status: OK, X_VALUE_OUT_OF_RANGE (value clamped to an endpoint) or
            INVALID_TABLE (value is None)
        value: Interpolated or clamped y-value
        section_num: Section the query fell into. 0 is before the first point,
            k is between points k-1 and k, N is after the last point.
        reason: Why the table was rejected (INVALID_TABLE only)
    """

    status: InterpStatus
    value: Optional[Y]
    section_num: int
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is InterpStatus.OK

    def raise_for_status(self) -> "InterpResult[Y]":
        """Raise InvalidTableError for INVALID_TABLE results, else return self.

        Out-of-range results are valid clamped values and are returned as is.
        """
        if self.status is InterpStatus.INVALID_TABLE:
            raise InvalidTableError(self.reason or "Interpolation table is invalid")
        return self
