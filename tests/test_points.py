import math

import numpy
import pytest
import shapely.geometry

from encdisk.points import as_points, coordinates, same


class LonLat:
    def __init__(self, lon, lat):
        self.lon = lon
        self.lat = lat


@coordinates.register(LonLat)
def _(p):
    return coordinates((p.lon, p.lat))


@pytest.mark.parametrize("point", [
    (1, 2),
    [1, 2],
    numpy.array([1., 2.]),
    shapely.geometry.Point(1, 2),
    LonLat(1, 2),
])
def test_coordinates(point):
    res = coordinates(point)
    assert res == (1.0, 2.0)
    assert all(isinstance(x, float) for x in res)


@pytest.mark.parametrize("point", [
    (math.nan, 0.),
    (0., math.inf),
    numpy.array([-math.inf, 1.]),
    (1., 2., 3.),
    (1., ),
    numpy.zeros(3),
    None,
])
def test_coordinates_invalid(point):
    with pytest.raises(ValueError):
        coordinates(point)


def test_same():
    assert same((1, 0), [1., 0.])
    assert same(numpy.array([1., 0.]), shapely.geometry.Point(1, 0))
    assert not same((1, 0), (1, 1e-300))


def test_as_points():
    arr = numpy.arange(6, dtype=float).reshape(3, 2)
    assert as_points(arr) == [(0., 1.), (2., 3.), (4., 5.)]
    assert as_points([]) == []


@pytest.mark.parametrize("array", [
    numpy.zeros((3, 3)),
    numpy.zeros(4),
    [(0., 0.), (numpy.nan, 1.)],
])
def test_as_points_invalid(array):
    with pytest.raises(ValueError):
        as_points(array)
