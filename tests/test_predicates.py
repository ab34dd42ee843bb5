import pytest

from encdisk.predicates import (
    DEFAULT, InCircle, InCirclePredicate, Orientation, OrientationPredicate,
    Predicates, in_circle, indiametral, orientation, orientation_area,
)

# Offset making naive floating-point evaluation unreliable.
X0 = 1e6
# Smallest increment of X0 + 1.
ULP = 2.0 ** -33


def test_orientation():
    assert orientation((0., 0.), (1., 0.), (1., 1.)) \
        == Orientation.COUNTER_CLOCKWISE
    assert orientation((0., 0.), (1., 0.), (1., -1.)) \
        == Orientation.CLOCKWISE
    assert orientation((0., 0.), (1., 0.), (2., 0.)) \
        == Orientation.COLLINEAR


def test_orientation_area():
    assert orientation_area((0., 0.), (1., 0.), (1., 1.)) == 1.0
    assert orientation_area((0., 0.), (1., 0.), (1., -1.)) == -1.0
    assert orientation_area((0., 0.), (1., 0.), (2., 0.)) == 0.0


def test_orientation_nearly_collinear():
    a, b = (0.5, 0.5), (12., 12.)
    on_line = (24., 24.)
    # 24 + 2**-48 is the successor of 24.
    above = (24., 24. + 2.0 ** -48)
    assert orientation(a, b, on_line) == Orientation.COLLINEAR
    assert orientation(a, b, above) == Orientation.COUNTER_CLOCKWISE
    assert orientation(b, a, above) == Orientation.CLOCKWISE
    assert orientation_area(a, b, above) > 0.
    assert orientation_area(b, a, above) < 0.


def test_in_circle():
    a, b, c = (0., 0.), (1., 0.), (1., 1.)
    assert in_circle(a, b, c, (0.5, 0.5)) == InCircle.INSIDE
    assert in_circle(a, b, c, (1.5, 1.5)) == InCircle.OUTSIDE
    assert in_circle(a, b, c, (0., 1.)) == InCircle.ON


def test_in_circle_clockwise_inverts():
    a, b, c = (0., 0.), (1., 1.), (1., 0.)
    assert in_circle(a, b, c, (0.5, 0.5)) == InCircle.OUTSIDE
    assert in_circle(a, b, c, (1.5, 1.5)) == InCircle.INSIDE
    assert in_circle(a, b, c, (0., 1.)) == InCircle.ON


def test_in_circle_nearly_cocircular():
    a, b, c = (X0, X0), (X0 + 1., X0), (X0 + 1., X0 + 1.)
    assert in_circle(a, b, c, (X0, X0 + 1.)) == InCircle.ON
    assert in_circle(a, b, c, (X0, X0 + 1. + ULP)) == InCircle.OUTSIDE
    assert in_circle(a, b, c, (X0, X0 + 1. - ULP)) == InCircle.INSIDE


def test_in_circle_repeated_point():
    a, b, c = (0.1, 0.7), (3.3, -0.2), (1.9, 5.1)
    assert in_circle(a, b, c, a) == InCircle.ON
    assert in_circle(a, b, c, c) == InCircle.ON


def test_interfaces_are_abstract():
    with pytest.raises(TypeError):
        OrientationPredicate()
    with pytest.raises(TypeError):
        InCirclePredicate()
    assert isinstance(DEFAULT, OrientationPredicate)
    assert isinstance(DEFAULT, InCirclePredicate)
    assert DEFAULT == Predicates()


def test_indiametral():
    a, b = (-1., 0.), (1., 0.)
    assert indiametral(a, b, (0., 0.)) == 1
    assert indiametral(a, b, (0., 1.)) == 0
    assert indiametral(a, b, a) == 0
    assert indiametral(a, b, (0., 1.5)) == -1


def test_indiametral_nearly_on():
    a, b = (X0, X0), (X0 + 1., X0 + 1.)
    assert indiametral(a, b, (X0, X0 + 1.)) == 0
    assert indiametral(a, b, (X0 - ULP, X0 + 1.)) == -1
    assert indiametral(a, b, (X0 + ULP, X0 + 1.)) == 1
