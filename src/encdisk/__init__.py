"""
Smallest enclosing disks of planar point sets.

The smallest enclosing disk (a.k.a. minimum covering circle, bounding circle)
of a finite set of points is the unique closed disk of minimum radius
containing all of them. It is computed here by Welzl's algorithm, in expected
linear time for randomly ordered inputs.

Classically, Welzl's algorithm is written recursively, which fails on large
inputs as the recursion depth grows with the number of points. Our
implementation runs the same algorithm on an explicit stack and has no
such limit.

Geometric decisions rely on adaptive-precision predicates, so that
degenerate inputs (duplicates, collinear or cocircular points) are handled
exactly. The result is a :class:`Disk` recording the one to three input
points spanning it.

Example:
    >>> import encdisk
    >>> disk = encdisk.smallest_enclosing_disk([(0, 0), (1, 0), (2, 0)])
    >>> disk.center(), disk.radius()
    ((1.0, 0.0), 1.0)
"""
from .disk import Disk, Empty, One, Two, Three  # noqa: F401
from .points import coordinates, as_points  # noqa: F401
from .predicates import (  # noqa: F401
    DEFAULT, InCircle, InCirclePredicate, Orientation, OrientationPredicate,
    Predicates, in_circle, orientation, orientation_area,
)
from .circumcircle import circumcircle, diameter  # noqa: F401
from .welzl import (  # noqa: F401
    smallest_enclosing_disk, smallest_enclosing_disk_with,
)
from .utils import smallest_enclosing_disks  # noqa: F401

__version__ = "0.1.0"
