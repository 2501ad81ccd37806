from dataclasses import FrozenInstanceError

import pytest

from lininterp import Point


def test_mixed_types():
    p = Point(3, 2.5)
    assert isinstance(p.x, int)
    assert isinstance(p.y, float)


def test_equality_and_hash():
    assert Point(1, 2.0) == Point(1, 2.0)
    assert Point(1, 2.0) != Point(1, 2.5)
    assert len({Point(1, 2.0), Point(1, 2.0)}) == 1


def test_is_immutable():
    p = Point(0.0, 0.0)
    with pytest.raises(FrozenInstanceError):
        p.x = 1.0


def test_of_and_astuple():
    assert Point.of((4, -1.0)).astuple() == (4, -1.0)
