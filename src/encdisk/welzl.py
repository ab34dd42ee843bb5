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
Smallest enclosing disk via Welzl's algorithm.

Welzl, E. (1991). Smallest enclosing disks (balls and ellipsoids).
In New results and new trends in computer science (pp. 359-370).
Springer, Berlin, Heidelberg.

The algorithm is classically written as a recursion on the remaining points
`P` and the support points `R` found so far::

    welzl(P, R):
        if P is empty or |R| == 3:
            return disk spanned by R
        p = P.pop()
        D = welzl(P, R)
        if p not in D:
            D = welzl(P, R + [p])
        P.push(p)
        return D

The recursion depth grows linearly with the number of points, which quickly
exceeds Python's recursion limit. The engine below runs the very same control
flow on an explicit stack of states instead.

The input order is not randomized: expected linear time needs a random order,
which the caller can provide by shuffling beforehand.
'''
import logging

from .disk import Disk, Empty
from .points import coordinates
from .predicates import DEFAULT

logger = logging.getLogger(__name__)

# ====================  Engine states  ========================================

# Each state is pushed on the stack as a (state, point) pair, where the point
# is None for the states that do not need one.
#   ENTER:   a call to welzl(P, R). Returns the base case or goes on to POP.
#   POP:     takes p out of P and schedules the first inner call.
#   EXAMINE: after the first inner call. Schedules the second inner call with
#            p in the support if the returned disk does not contain p.
#   RESTORE: puts p back on P once the call it was popped in is over.
#   RELEASE: takes p back out of R after the second inner call.
ENTER = 0
POP = 1
EXAMINE = 2
RESTORE = 3
RELEASE = 4


def smallest_enclosing_disk_with(points, predicates):
    """
    Returns the smallest disk enclosing `points`, using the kernel
    `predicates` for all geometric decisions.

    Args:
        points (iterable): point-like values with finite coordinates.
            Duplicates are allowed.
        predicates: a kernel implementing both
            :class:`~encdisk.predicates.OrientationPredicate` and
            :class:`~encdisk.predicates.InCirclePredicate`.

    Returns:
        Disk: an :class:`~encdisk.disk.Empty` disk for no points, otherwise
        the disk spanned by one to three of the input points.

    Raises:
        ValueError: if a point does not have two finite coordinates.
    """
    remaining = list(points)
    for p in remaining:
        coordinates(p)
    logger.debug("Enclosing %d points", len(remaining))

    support = []
    disk = Empty(predicates)
    stack = [(ENTER, None)]
    while stack:
        state, point = stack.pop()
        if state == ENTER:
            if not remaining or len(support) == 3:
                disk = Disk.from_support(support, predicates)
            else:
                stack.append((POP, None))
        elif state == POP:
            point = remaining.pop()
            stack.append((EXAMINE, point))
            stack.append((ENTER, None))
        elif state == EXAMINE:
            stack.append((RESTORE, point))
            if not disk.contains(point, predicates):
                support.append(point)
                stack.append((RELEASE, None))
                stack.append((ENTER, None))
        elif state == RESTORE:
            remaining.append(point)
        elif state == RELEASE:
            support.pop()
        else:
            raise RuntimeError("Engine state {!r} not recognized".format(state))

    logger.debug("Smallest enclosing disk: %r", disk)
    return disk


def smallest_enclosing_disk(points):
    """
    Returns the smallest disk enclosing `points`.

    Example:
        >>> disk = smallest_enclosing_disk([(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> disk.center()
        (0.5, 0.5)
        >>> disk.radius()
        0.7071067811865476

    See :func:`smallest_enclosing_disk_with` for a custom predicate kernel.
    """
    return smallest_enclosing_disk_with(points, DEFAULT)


def smallest_enclosing_disk_recursive(points, predicates=DEFAULT):
    """
    Recursive formulation of :func:`smallest_enclosing_disk_with`.

    Gives the same results as the iterative engine but overflows the call
    stack on large inputs. Only meant as a reference.
    """
    def welzl(remaining, support):
        if not remaining or len(support) == 3:
            return Disk.from_support(support, predicates)
        point = remaining[-1]
        disk = welzl(remaining[:-1], support)
        if not disk.contains(point, predicates):
            disk = welzl(remaining[:-1], support + [point])
        return disk

    points = list(points)
    for p in points:
        coordinates(p)
    return welzl(points, [])
