import pytest

from quadkit.angles import angle_lerp, short_angle_dist, wrap_rotation


def test_short_angle_dist_crosses_zero_the_short_way():
    assert short_angle_dist(10.0, 350.0) == pytest.approx(-20.0)


def test_short_angle_dist_identical_angles_is_zero():
    assert short_angle_dist(123.0, 123.0) == 0.0


@pytest.mark.parametrize("a0", [0.0, 45.0, 170.0, 300.0, -90.0])
@pytest.mark.parametrize("a1", [0.0, 10.0, 179.0, 200.0, 359.0, 720.0])
def test_short_angle_dist_is_at_most_half_turn(a0, a1):
    d = short_angle_dist(a0, a1)
    assert abs(d) <= 180.0 + 1e-9
    # rotating by d lands on an angle equivalent to a1
    assert (a0 + d - a1) % 360.0 == pytest.approx(0.0, abs=1e-9) or (
        a0 + d - a1
    ) % 360.0 == pytest.approx(360.0, abs=1e-9)


def test_short_angle_dist_is_antisymmetric():
    for a0, a1 in [(10.0, 80.0), (300.0, 20.0), (0.0, 179.0)]:
        assert short_angle_dist(a0, a1) == pytest.approx(-short_angle_dist(a1, a0))


def test_angle_lerp_endpoints():
    assert angle_lerp(30.0, 100.0, 0.0) == 30.0
    assert angle_lerp(30.0, 100.0, 1.0) == pytest.approx(100.0)


def test_angle_lerp_moves_towards_target_across_zero():
    value = angle_lerp(350.0, 10.0, 0.5)
    assert value == pytest.approx(360.0)


def test_angle_lerp_repeated_converges():
    current = 0.0
    for _ in range(200):
        current = angle_lerp(current, 90.0, 0.1)
    assert current == pytest.approx(90.0, abs=1e-6)


@pytest.mark.parametrize("angle", [float(a) for a in range(-360, 720, 15)])
def test_wrap_rotation_lands_in_range_and_is_equivalent(angle):
    wrapped = wrap_rotation(angle)
    assert 0.0 <= wrapped < 360.0
    assert (wrapped - angle) % 360.0 == 0.0


def test_wrap_rotation_keeps_in_range_value():
    assert wrap_rotation(200.0) == 200.0