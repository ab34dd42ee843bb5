# Copyright (C) 2018 DataStorm
#
# This file is part of EnclosingDisk.
#
# EnclosingDisk is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# EnclosingDisk is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# A copy of the GNU General Public License is available in the LICENSE
# file or at <http://www.gnu.org/licenses/>.
'''
Point abstraction.

The algorithms never look inside a point: they only extract its two
coordinates through :func:`coordinates`. Any pair-like value works out of the
box (tuples, lists, numpy rows), as well as objects with ``x`` and ``y``
attributes such as shapely points. Other point types plug in by registering an
extractor::

    @coordinates.register(MyPoint)
    def _(p):
        return p.lon, p.lat
'''
import functools
import math

import numpy


def _checked(x, y):
    x = float(x)
    y = float(y)
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(
            "Point coordinates must be finite, got ({}, {})".format(x, y))
    return (x, y)


# Dispatching on the point class, pair-like values by default.
@functools.singledispatch
def coordinates(p):
    """
    Returns the coordinates of `p` as a pair of finite floats.

    Raises:
        ValueError: if `p` has not exactly two coordinates, or if one of them
            is NaN or infinite.
    """
    if hasattr(p, "x") and hasattr(p, "y"):
        return _checked(p.x, p.y)
    try:
        x, y = p
    except (TypeError, ValueError):
        raise ValueError(
            "Expected a point with two coordinates, got {!r}".format(p))
    return _checked(x, y)


@coordinates.register(numpy.ndarray)
def _(p):
    if p.shape != (2,):
        raise ValueError(
            "Expected an array of shape (2,), got shape {}".format(p.shape))
    return _checked(p[0], p[1])


def same(p, q):
    """Bit-exact equality of the coordinates of `p` and `q`."""
    return coordinates(p) == coordinates(q)


def as_points(array):
    """
    Converts a N x 2 array-like of coordinates to a list of float pairs.

    Args:
        array (array-like): coordinates, one row per point.

    Returns:
        list of (float, float) tuples, in input order.
    """
    arr = numpy.asarray(array, dtype=float)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(
            "Expected an array of shape (N, 2), got shape {}".format(arr.shape))
    if not numpy.isfinite(arr).all():
        raise ValueError("Point coordinates must be finite")
    return [(float(x), float(y)) for x, y in arr]
