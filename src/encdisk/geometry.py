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
Shapely adapters.

Smallest enclosing disks are a natural bounding volume for shapely
geometries: the disk of a geometry is the disk of its vertices. In the other
direction, disks are converted to shapely shapes for display or for further
geometric processing.
'''
import shapely.geometry
import shapely.geometry.base
import toolz

from .disk import Empty, One
from .points import coordinates
from .predicates import DEFAULT
from .welzl import smallest_enclosing_disk_with


def geometry_points(geom):
    """
    Returns the vertices of a shapely geometry as a list of (x, y) pairs.

    Polygon holes are skipped since the exterior ring encloses them. Multi-part
    geometries and collections are flattened.
    """
    if geom.is_empty:
        return []
    # Overloading
    # 1st case: multi-part geometries and collections
    if isinstance(geom, shapely.geometry.base.BaseMultipartGeometry):
        return list(toolz.concat(geometry_points(g) for g in geom.geoms))
    # 2nd case: polygons
    if hasattr(geom, "exterior"):
        coords = geom.exterior.coords
    # 3rd case: points and line strings
    else:
        coords = geom.coords
    return [(x, y) for x, y, *_ in coords]


def enclosing_disk(geom, predicates=DEFAULT):
    """Returns the smallest disk enclosing the shapely geometry `geom`."""
    return smallest_enclosing_disk_with(geometry_points(geom), predicates)


def to_shapely(disk, resolution=16):
    """
    Converts `disk` to a shapely geometry.

    Args:
        disk (Disk): the disk to convert.
        resolution (int, optional): number of segments per quarter circle of
            the polygon approximating the disk. Defaults to 16.

    Returns:
        An empty polygon for an empty disk, the point itself for a one-point
        disk, and a polygon approximating the disk otherwise.
    """
    if isinstance(disk, Empty):
        return shapely.geometry.Polygon()
    if isinstance(disk, One):
        return shapely.geometry.Point(*coordinates(disk.p))
    return shapely.geometry.Point(*disk.center()).buffer(
        disk.radius(), resolution)
