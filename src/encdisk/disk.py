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
Disks defined by their support.

A disk is represented by the (at most three) points lying on its boundary
that determine it, called its support. There are four kinds of disks, one
class each:

* :class:`Empty`: no point at all, hence no disk.
* :class:`One`: a single point. The disk degenerates to that point and has
  neither center nor radius.
* :class:`Two`: two distinct points on a diameter.
* :class:`Three`: three distinct, non-collinear points on the circle. Their
  orientation is stored since it determines how in-circle tests read.

Containment and boundary tests are decided by the robust predicates only, the
center and radius being floating-point approximations. All tests of a
two-point disk go through a surrogate third point, the image of `b` by a
quarter turn around the center, so that they reduce to the in-circle
predicate of three counter-clockwise points. When rounding moves the
surrogate off the circle or onto a support point, e.g. for support points
one ulp apart, the tests fall back to the exact diametral predicate.

Disks hold shallow copies of their support points, so that mutating the
input afterwards (typically rows of a numpy array) leaves them unchanged.
'''
import abc
import copy

import numpy

from .circumcircle import circumcircle, diameter
from .points import coordinates, same
from .predicates import DEFAULT, InCircle, Orientation, indiametral


class Disk(abc.ABC):
    """
    Abstract interface for disks given by their support.

    Instances are immutable. Use :meth:`from_support` to build the right kind
    of disk from a collection of up to three points.

    Attributes:
        predicates: the kernel used for the orientation of the support, and
            for containment tests when none is given explicitly.
    """
    __slots__ = ('predicates', )

    @staticmethod
    def from_support(points, predicates=DEFAULT):
        """
        Returns the disk spanned by `points`, taking duplicates into account.

        Args:
            points (sequence): zero to three point-like values.
            predicates (optional): kernel deciding the orientation of three
                points. Defaults to the adaptive kernel.

        Raises:
            ValueError: if more than three points are given, or if three
                distinct points are collinear.
        """
        points = list(points)
        if len(points) == 0:
            return Empty(predicates)
        if len(points) == 1:
            return One(points[0], predicates)
        if len(points) == 2:
            a, b = points
            if same(a, b):
                return One(a, predicates)
            return Two(a, b, predicates)
        if len(points) == 3:
            a, b, c = points
            ab, bc, ca = same(a, b), same(b, c), same(c, a)
            if ab and bc:
                return One(a, predicates)
            if ab or bc:
                return Two(a, c, predicates)
            if ca:
                return Two(a, b, predicates)
            return Three(a, b, c, predicates)
        raise ValueError(
            "A disk is supported by at most 3 points, got {}"
            .format(len(points)))

    def __init__(self, predicates=DEFAULT):
        self.predicates = predicates

    @property
    @abc.abstractmethod
    def support(self):
        """Tuple of the points spanning `self`."""
        pass

    def __len__(self):
        return len(self.support)

    def __repr__(self):
        return "{}({})".format(self.__class__.__name__,
                               ", ".join(map(repr, self.support)))

    def center(self):
        """Returns the center of `self`, or None if there is none."""
        return None

    def radius(self):
        """Returns the radius of `self`, or None if there is none."""
        return None

    @abc.abstractmethod
    def contains(self, point, predicates=None):
        """True iff `point` lies in the closed disk `self`."""
        pass

    @abc.abstractmethod
    def is_on_boundary(self, point, predicates=None):
        """True iff `point` lies exactly on the boundary circle of `self`."""
        pass

    def is_spanned_by(self, point):
        """True iff `point` is one of the support points of `self`."""
        return any(same(point, p) for p in self.support)

    def contains_all(self, points, predicates=None):
        """Returns a boolean array of the containment of each of `points`."""
        return numpy.array([self.contains(p, predicates) for p in points],
                           dtype=bool)

    def equals(self, other, predicates=None):
        """
        Geometric equality.

        Two disks are equal when each support point of one lies on the
        boundary of the other. Different supports on the same circle, such as
        two triples of cocircular points, therefore compare equal.
        """
        if not isinstance(other, Disk):
            raise TypeError(
                "Cannot compare a disk with {}".format(type(other).__name__))
        return (
            all(other.is_on_boundary(p, predicates) for p in self.support)
            and all(self.is_on_boundary(p, predicates) for p in other.support)
        )

    def _kernel(self, predicates):
        return self.predicates if predicates is None else predicates


class Empty(Disk):
    '''No disk at all, e.g. the result for no input points.'''
    __slots__ = ()

    @property
    def support(self):
        return ()

    def contains(self, point, predicates=None):
        return False

    def is_on_boundary(self, point, predicates=None):
        return False


class One(Disk):
    '''Disk degenerated to a single point.'''
    __slots__ = ('p', )

    def __init__(self, p, predicates=DEFAULT):
        super().__init__(predicates)
        self.p = copy.copy(p)

    @property
    def support(self):
        return (self.p, )

    def contains(self, point, predicates=None):
        return same(point, self.p)

    def is_on_boundary(self, point, predicates=None):
        return same(point, self.p)


class Two(Disk):
    '''Disk with two distinct support points on a diameter.'''
    __slots__ = ('a', 'b', '_surrogate', '_exact')

    def __init__(self, a, b, predicates=DEFAULT):
        super().__init__(predicates)
        if same(a, b):
            raise ValueError(
                "Support points of a two-point disk must differ, got {!r} "
                "twice".format(a))
        self.a = copy.copy(a)
        self.b = copy.copy(b)
        self._surrogate = self._make_surrogate()
        # The surrogate must lie exactly on the circle and differ from a and b.
        self._exact = (
            not same(self._surrogate, self.a)
            and not same(self._surrogate, self.b)
            and indiametral(coordinates(self.a), coordinates(self.b),
                            self._surrogate) == 0
        )

    def _make_surrogate(self):
        (ax, ay), (bx, by) = coordinates(self.a), coordinates(self.b)
        mx, my = (ax + bx) / 2.0, (ay + by) / 2.0
        return (mx - my + ay, my + mx - ax)

    @property
    def support(self):
        return (self.a, self.b)

    def surrogate(self):
        """
        Third point on the circle, such that `a`, `b` and the surrogate are
        counter-clockwise.
        """
        return self._surrogate

    def center(self):
        return diameter(self.a, self.b)[0]

    def radius(self):
        return diameter(self.a, self.b)[1]

    def _position(self, point, predicates):
        if not self._exact:
            return InCircle(indiametral(
                coordinates(self.a), coordinates(self.b), coordinates(point)))
        return self._kernel(predicates).in_circle(
            self.a, self.b, self._surrogate, point)

    def contains(self, point, predicates=None):
        return self._position(point, predicates) != InCircle.OUTSIDE

    def is_on_boundary(self, point, predicates=None):
        return self._position(point, predicates) == InCircle.ON


class Three(Disk):
    '''Circumscribed disk of three distinct, non-collinear points.'''
    __slots__ = ('a', 'b', 'c', 'ccw')

    def __init__(self, a, b, c, predicates=DEFAULT):
        super().__init__(predicates)
        turn = predicates.orientation(a, b, c)
        # Duplicates are collinear too.
        if turn == Orientation.COLLINEAR:
            raise ValueError(
                "Collinear points {!r}, {!r}, {!r} cannot support a disk"
                .format(a, b, c))
        self.a = copy.copy(a)
        self.b = copy.copy(b)
        self.c = copy.copy(c)
        self.ccw = turn == Orientation.COUNTER_CLOCKWISE

    @property
    def support(self):
        return (self.a, self.b, self.c)

    def __repr__(self):
        return "Three({!r}, {!r}, {!r}, ccw={})".format(
            self.a, self.b, self.c, self.ccw)

    def center(self):
        return circumcircle(self.a, self.b, self.c, self.predicates)[0]

    def radius(self):
        return circumcircle(self.a, self.b, self.c, self.predicates)[1]

    def contains(self, point, predicates=None):
        position = self._kernel(predicates).in_circle(
            self.a, self.b, self.c, point)
        if position == InCircle.ON:
            return True
        if self.ccw:
            return position == InCircle.INSIDE
        return position == InCircle.OUTSIDE

    def is_on_boundary(self, point, predicates=None):
        position = self._kernel(predicates).in_circle(
            self.a, self.b, self.c, point)
        return position == InCircle.ON
