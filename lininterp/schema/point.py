"""Point record used as a table entry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Tuple, TypeVar

X = TypeVar("X")
Y = TypeVar("Y")


@dataclass(frozen=True)
class Point(Generic[X, Y]):
    """One (x, y) sample. X and Y may be different numeric types."""

    x: X
    y: Y

    @classmethod
    def of(cls, pair: Tuple[X, Y]) -> "Point[X, Y]":
        x, y = pair
        return cls(x, y)

    def astuple(self) -> Tuple[X, Y]:
        return (self.x, self.y)
