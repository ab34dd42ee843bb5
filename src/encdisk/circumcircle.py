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
Circles through two or three points.

Centers and radii are computed in plain floating point and are therefore not
exact. Only the sign of the orientation is taken from the robust kernel; the
combinatorial correctness of the algorithms never depends on these values.
'''
import math

from .points import coordinates
from .predicates import DEFAULT


def diameter(a, b):
    """Returns the center and radius of the circle of diameter `ab`."""
    (ax, ay), (bx, by) = coordinates(a), coordinates(b)
    center = ((ax + bx) / 2.0, (ay + by) / 2.0)
    return center, math.hypot(ax - bx, ay - by) / 2.0


def circumcircle(a, b, c, predicates=DEFAULT):
    """
    Returns the center and radius of the circle through `a`, `b` and `c`.

    The center is expressed in the local basis of `c`, and the radius is
    given by the product of the side lengths over four times the area.

    Args:
        a, b, c (point-like): three non-collinear points.
        predicates (OrientationPredicate, optional): kernel computing the
            signed area. Defaults to the adaptive kernel.

    Returns:
        tuple: ((x, y), radius)

    Raises:
        ValueError: if the points are collinear.
    """
    alpha = 2.0 * predicates.orientation_area(a, b, c)
    if alpha < 0.0:
        b, c = c, b
        alpha = -alpha
    elif alpha == 0.0:
        raise ValueError(
            "Collinear points {!r}, {!r}, {!r} have no circumcircle"
            .format(a, b, c))
    (ax, ay), (bx, by), (cx, cy) = map(coordinates, (a, b, c))
    acx, acy = ax - cx, ay - cy
    bcx, bcy = bx - cx, by - cy
    abx, aby = ax - bx, ay - by
    ac2 = acx * acx + acy * acy
    bc2 = bcx * bcx + bcy * bcy
    ab2 = abx * abx + aby * aby
    center = (
        cx + (ac2 * bcy - bc2 * acy) / alpha,
        cy + (acx * bc2 - bcx * ac2) / alpha,
    )
    return center, math.sqrt(ab2 * bc2 * ac2) / alpha
