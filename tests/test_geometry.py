import math

import pytest

from quadkit.geometry import Rect, Vec2, polar_to_cartesian


def test_add_then_subtract_round_trips():
    a = Vec2(1.5, -2.25)
    b = Vec2(-7.0, 3.5)
    assert (a + b) - b == a


def test_scalar_multiplication_matches_repeated_addition():
    a = Vec2(1.25, -0.5)
    assert a * 2 == a + a
    assert 2 * a == a + a


def test_division_inverts_multiplication():
    a = Vec2(3.0, -9.0)
    assert (a * 4.0) / 4.0 == a


def test_negation():
    a = Vec2(2.0, -3.0)
    assert -a == Vec2(-2.0, 3.0)
    assert a + (-a) == Vec2()


def test_unpacking():
    x, y = Vec2(4.0, 7.0)
    assert (x, y) == (4.0, 7.0)


def test_length_of_pythagorean_vector():
    assert Vec2(3.0, 4.0).length() == pytest.approx(5.0)


@pytest.mark.parametrize("vec", [Vec2(3.0, 4.0), Vec2(-0.1, 0.0), Vec2(100.0, -250.0)])
def test_normalize_gives_unit_length_same_direction(vec):
    unit = vec.normalize()
    assert unit.length() == pytest.approx(1.0)
    assert unit.dot(vec) == pytest.approx(vec.length())


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        Vec2(0.0, 0.0).normalize()


def test_overlaps_is_symmetric_and_inclusive():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    touching = Rect(10.0, 0.0, 5.0, 5.0)
    apart = Rect(10.5, 0.0, 5.0, 5.0)
    assert a.overlaps(touching)
    assert touching.overlaps(a)
    assert not a.overlaps(apart)
    assert not apart.overlaps(a)


def test_overlaps_contained_rect():
    outer = Rect(-5.0, -5.0, 20.0, 20.0)
    inner = Rect(0.0, 0.0, 1.0, 1.0)
    assert outer.overlaps(inner)
    assert inner.overlaps(outer)


def test_contains_edges():
    r = Rect(2.0, 3.0, 4.0, 5.0)
    assert r.contains(Vec2(2.0, 3.0))
    assert not r.contains(Vec2(r.right, 4.0))
    assert not r.contains(Vec2(3.0, r.bottom))
    assert not r.contains(Vec2(1.9, 4.0))


def test_rect_sides():
    r = Rect(2.0, 3.0, 4.0, 5.0)
    assert (r.left, r.top) == (2.0, 3.0)
    assert r.right - r.left == r.w
    assert r.bottom - r.top == r.h


@pytest.mark.parametrize("rho,theta", [(2.0, 0.3), (5.0, 2.0), (1.0, -1.2)])
def test_polar_to_cartesian_preserves_radius_and_angle(rho, theta):
    v = polar_to_cartesian(rho, theta)
    assert v.length() == pytest.approx(rho)
    assert math.atan2(v.y, v.x) == pytest.approx(theta)


def test_polar_zero_angle_lies_on_x_axis():
    v = polar_to_cartesian(7.0, 0.0)
    assert v.x == pytest.approx(7.0)
    assert v.y == pytest.approx(0.0)