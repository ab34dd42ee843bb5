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
Robust geometric predicates.

All combinatorial decisions of the algorithms (is this point inside that
circle? are these three points turning left?) are sign tests of small
determinants. Evaluated naively in floating point, these signs are wrong for
nearly degenerate inputs, and the algorithms built on top of them break.

The default kernel is adaptive, in the spirit of J.R. Shewchuk's predicates:
the determinant is first evaluated in floating point together with a static
bound on its rounding error. Whenever the bound cannot certify the sign, the
determinant is re-evaluated exactly with rationals. Every finite double is a
rational number, so the exact stage never fails on valid inputs. The exact
stage is only reached for (nearly) degenerate configurations.

Predicates are pluggable. A caller embedding this package in a larger
geometric computation can pass its own kernel, i.e. any object implementing
:class:`OrientationPredicate` and :class:`InCirclePredicate`, so that all
sign decisions are shared.
'''
import abc
import enum
from fractions import Fraction

from .points import coordinates


class Orientation(enum.Enum):
    """Turn direction of three points (mathematical, upward y-axis)."""
    COUNTER_CLOCKWISE = 1
    CLOCKWISE = -1
    COLLINEAR = 0


class InCircle(enum.Enum):
    """Position of a probe point relative to a circle."""
    INSIDE = 1
    OUTSIDE = -1
    ON = 0


# Half the machine epsilon, i.e. the unit roundoff of doubles.
_EPSILON = 2.0 ** -53
# Static error bounds of the floating-point determinants (Shewchuk).
_CCW_ERRBOUND = (3.0 + 16.0 * _EPSILON) * _EPSILON
_ICC_ERRBOUND = (10.0 + 96.0 * _EPSILON) * _EPSILON


def _sign(value):
    return (value > 0) - (value < 0)


def _orient2d_exact(a, b, c):
    ax, ay, bx, by, cx, cy = map(Fraction, (*a, *b, *c))
    return (ax - cx) * (by - cy) - (ay - cy) * (bx - cx)


def orient2d(a, b, c):
    """
    Twice the signed area of the triangle `abc`, with an exact sign.

    Args:
        a, b, c (pair of floats): coordinates.

    Returns:
        float: positive if `abc` is counter-clockwise, negative if clockwise
            and zero if collinear. The value is the floating-point
            determinant when its sign is certified, otherwise the correctly
            rounded exact determinant.
    """
    detleft = (a[0] - c[0]) * (b[1] - c[1])
    detright = (a[1] - c[1]) * (b[0] - c[0])
    det = detleft - detright
    if detleft > 0.0:
        if detright <= 0.0:
            return det
        detsum = detleft + detright
    elif detleft < 0.0:
        if detright >= 0.0:
            return det
        detsum = -detleft - detright
    else:
        if detright == 0.0:
            return float(_orient2d_exact(a, b, c))
        return det
    if abs(det) > _CCW_ERRBOUND * detsum:
        return det
    return float(_orient2d_exact(a, b, c))


def _incircle_exact(a, b, c, d):
    ax, ay, bx, by, cx, cy, dx, dy = map(Fraction, (*a, *b, *c, *d))
    adx, ady = ax - dx, ay - dy
    bdx, bdy = bx - dx, by - dy
    cdx, cdy = cx - dx, cy - dy
    alift = adx * adx + ady * ady
    blift = bdx * bdx + bdy * bdy
    clift = cdx * cdx + cdy * cdy
    return (alift * (bdx * cdy - cdx * bdy)
            + blift * (cdx * ady - adx * cdy)
            + clift * (adx * bdy - bdx * ady))


def incircle(a, b, c, d):
    """
    Sign of the in-circle determinant of `d` against the circle `abc`.

    Returns:
        int: 1 if `d` lies inside the circle through the counter-clockwise
            points `abc`, -1 if outside, 0 if cocircular. The sign flips
            when `abc` is clockwise.
    """
    adx = a[0] - d[0]
    bdx = b[0] - d[0]
    cdx = c[0] - d[0]
    ady = a[1] - d[1]
    bdy = b[1] - d[1]
    cdy = c[1] - d[1]

    bdxcdy = bdx * cdy
    cdxbdy = cdx * bdy
    alift = adx * adx + ady * ady

    cdxady = cdx * ady
    adxcdy = adx * cdy
    blift = bdx * bdx + bdy * bdy

    adxbdy = adx * bdy
    bdxady = bdx * ady
    clift = cdx * cdx + cdy * cdy

    det = (alift * (bdxcdy - cdxbdy)
           + blift * (cdxady - adxcdy)
           + clift * (adxbdy - bdxady))
    permanent = ((abs(bdxcdy) + abs(cdxbdy)) * alift
                 + (abs(cdxady) + abs(adxcdy)) * blift
                 + (abs(adxbdy) + abs(bdxady)) * clift)
    if abs(det) > _ICC_ERRBOUND * permanent:
        return _sign(det)
    return _sign(_incircle_exact(a, b, c, d))


def _indiametral_exact(a, b, p):
    ax, ay, bx, by, px, py = map(Fraction, (*a, *b, *p))
    return (ax - px) * (bx - px) + (ay - py) * (by - py)


def indiametral(a, b, p):
    """
    Position of `p` relative to the circle of diameter `ab`.

    By Thales' theorem, `p` lies inside the circle iff the angle `apb` is
    obtuse, i.e. iff the dot product of `a - p` and `b - p` is negative.

    Returns:
        int: 1 if `p` is strictly inside, -1 if strictly outside, 0 if on
            the circle.
    """
    left = (a[0] - p[0]) * (b[0] - p[0])
    right = (a[1] - p[1]) * (b[1] - p[1])
    det = left + right
    if abs(det) > _CCW_ERRBOUND * (abs(left) + abs(right)):
        return -_sign(det)
    return -_sign(_indiametral_exact(a, b, p))


class OrientationPredicate(abc.ABC):
    """Abstract interface for orientation tests of three points."""
    __slots__ = ()

    @abc.abstractmethod
    def orientation(self, a, b, c):
        """Returns the :class:`Orientation` of the triple `abc`."""
        pass

    @abc.abstractmethod
    def orientation_area(self, a, b, c):
        """
        Returns twice the signed area of the triangle `abc`.

        The sign must agree with :meth:`orientation`.
        """
        pass


class InCirclePredicate(abc.ABC):
    """Abstract interface for in-circle tests."""
    __slots__ = ()

    @abc.abstractmethod
    def in_circle(self, a, b, c, p):
        """
        Returns the :class:`InCircle` position of `p` relative to the circle
        through `a`, `b` and `c`, assuming `abc` is counter-clockwise. The
        sense is inverted for a clockwise triple.
        """
        pass


class Predicates(OrientationPredicate, InCirclePredicate):
    """
    Default adaptive-precision kernel.

    Accepts any point-like values (see :func:`encdisk.points.coordinates`).
    """
    __slots__ = ()

    def orientation(self, a, b, c):
        return Orientation(_sign(self.orientation_area(a, b, c)))

    def orientation_area(self, a, b, c):
        return orient2d(coordinates(a), coordinates(b), coordinates(c))

    def in_circle(self, a, b, c, p):
        return InCircle(incircle(coordinates(a), coordinates(b),
                                 coordinates(c), coordinates(p)))

    def __repr__(self):
        return "{}()".format(self.__class__.__name__)

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))


DEFAULT = Predicates()


def orientation(a, b, c):
    """Orientation of `abc` on the default kernel."""
    return DEFAULT.orientation(a, b, c)


def orientation_area(a, b, c):
    """Twice the signed area of `abc` on the default kernel."""
    return DEFAULT.orientation_area(a, b, c)


def in_circle(a, b, c, p):
    """In-circle test of `p` against `abc` on the default kernel."""
    return DEFAULT.in_circle(a, b, c, p)
