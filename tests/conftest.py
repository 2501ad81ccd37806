import pytest

from lininterp import Point


@pytest.fixture
def unit_ramp():
    """[(0, 0), (1, 1)]"""
    return [Point(0.0, 0.0), Point(1.0, 1.0)]


@pytest.fixture
def three_points():
    """[(0, 0), (1, 1), (2, 2)]"""
    return [Point(0.0, 0.0), Point(1.0, 1.0), Point(2.0, 2.0)]


@pytest.fixture(params=["LINEAR", "BINARY"])
def method(request):
    return request.param
