"""
Testing the Point and EllipticCurve classes and methods
"""
import random
from secrets import randbelow

import pytest

from dashmsg.crypto import SECP256K1, EllipticCurve, Point

# y^2 = x^3 + 7 (mod 11)
SMALL_POINTS = [(2, 2), (2, 9), (3, 1), (3, 10), (4, 4), (4, 7), (5, 0), (6, 5), (6, 6), (7, 3), (7, 8)]


def test_point_at_infinity():
    """
    We test aspects of the point at infinity, represented by Point() = (None, None)
    We also verify (None, x) and (x, None) yield value errors when constructed
    """
    inf_pt = Point()
    assert inf_pt == Point(x=None, y=None), "Point at infinity construction mismatch."
    assert not inf_pt
    assert SECP256K1.is_point_on_curve(inf_pt), "Point at infinity not on curve error"

    with pytest.raises(ValueError):
        Point(x=random.randint(0, 0xffff), y=None)
    with pytest.raises(ValueError):
        Point(x=None, y=random.randint(0, 0xffff))


def test_small_curve_addition():
    """
    On y^2 = x^3 + 7 (mod 11):
        (2,2) + (2,9) = point at infinity
        (2,2) + (3,1) = (7,3)
        (5,0) + (5,0) = point at infinity
    """
    curve = EllipticCurve(a=0, b=7, p=11, order=12, generator=(2, 2))
    for point in SMALL_POINTS:
        assert curve.is_point_on_curve(Point(*point)), f"{point} should be on the small curve"

    assert not curve.add_points(Point(2, 2), Point(2, 9))
    assert curve.add_points(Point(2, 2), Point(3, 1)) == Point(7, 3)
    assert not curve.add_points(Point(5, 0), Point(5, 0))
    assert curve.add_points(Point(), Point(3, 1)) == Point(3, 1)


def test_singular_curve():
    with pytest.raises(ValueError):
        EllipticCurve(a=0, b=0, p=11, order=12, generator=(0, 0))


def test_generator_multiples():
    g = SECP256K1.generator
    two_g = Point(0xc6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5,
                  0x1ae168fea63dc339a3c58419466ceaeef7f632653266d0e1236431a950cfe52a)

    assert SECP256K1.multiply_generator(1) == g
    assert SECP256K1.multiply_generator(2) == two_g
    assert SECP256K1.add_points(g, g) == two_g
    assert not SECP256K1.multiply_generator(SECP256K1.order), "n * G must be the point at infinity"


def test_scalar_multiplication_agrees_with_generator():
    """
    For random a, b: a * (b * G) == (a * b) * G, and the double-and-add path agrees with the precomputed path
    """
    a = randbelow(SECP256K1.order - 1) + 1
    b = randbelow(SECP256K1.order - 1) + 1
    b_g = SECP256K1.multiply_generator(b)

    assert SECP256K1.is_point_on_curve(b_g)
    assert SECP256K1.scalar_multiplication(a, b_g) == SECP256K1.multiply_generator(a * b)


def test_lift_x():
    g = SECP256K1.generator
    assert SECP256K1.lift_x(g.x, g.y % 2) == g
    assert SECP256K1.lift_x(g.x, 1 - g.y % 2) == SECP256K1.negate(g)

    with pytest.raises(ValueError):
        SECP256K1.lift_x(SECP256K1.p, 0)
