import math

import pytest

from avoidkit.geometry import (
    Color,
    Point,
    add_points,
    angle_to_range,
    distance,
    interpolate,
    interpolate_points,
    middle_point,
    norm,
    point_norm,
    posterior,
    scale_point,
    spectral_color,
    squared,
    subtract_points,
)


def test_squared_negative():
    assert squared(-3) == 9


def test_interpolate_endpoints():
    assert interpolate(2.0, 8.0, 0.0) == 2.0
    assert interpolate(2.0, 8.0, 1.0) == 8.0


def test_interpolate_points_endpoints():
    a = Point(1.0, 2.0, 3.0)
    b = Point(-4.0, 6.0, 10.0)
    assert interpolate_points(a, b, 0.0) == a
    assert interpolate_points(a, b, 1.0) == b


def test_middle_point_is_equidistant():
    a = Point(1.0, -2.0, 5.0)
    b = Point(7.0, 4.0, -1.0)
    m = middle_point(a, b)
    assert distance(a, m) == pytest.approx(distance(m, b))
    assert distance(a, m) + distance(m, b) == pytest.approx(distance(a, b))


def test_add_subtract_round_trip():
    a = Point(1.0, 2.0, 3.0)
    b = Point(10.0, -5.0, 0.5)
    assert subtract_points(add_points(a, b), b) == a


def test_scale_point_doubles():
    p = Point(1.5, -2.0, 4.0)
    assert scale_point(p, 2) == add_points(p, p)


def test_norm_known_value():
    assert norm(3.0, 4.0, 12.0) == 13.0


def test_distance_symmetric_and_matches_norm():
    a = Point(1.0, 2.0, 3.0)
    b = Point(-2.0, 0.5, 7.0)
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(a, b) == pytest.approx(point_norm(subtract_points(b, a)))


def test_point_operators_match_helpers():
    a = Point(1.0, 2.0, 3.0)
    b = Point(4.0, 5.0, 6.0)
    assert a + b == add_points(a, b)
    assert b - a == subtract_points(b, a)
    assert 3 * a == scale_point(a, 3)
    assert tuple(a) == (1.0, 2.0, 3.0)


@pytest.mark.parametrize("angle", [-20.0, -5.5, -1.0, 0.3, 3.0, 5.5, 17.25])
def test_angle_to_range_wraps(angle):
    wrapped = angle_to_range(angle)
    assert -math.pi <= wrapped <= math.pi
    turns = (angle - wrapped) / (2 * math.pi)
    assert turns == pytest.approx(round(turns))


def test_angle_to_range_keeps_zero():
    assert angle_to_range(0.0) == pytest.approx(0.0)


def test_posterior_properties():
    assert posterior(0.3, 0.8) == pytest.approx(posterior(0.8, 0.3))
    assert posterior(0.0, 0.7) == 0.0
    assert 0.0 < posterior(0.6, 0.6) < 1.0
    assert posterior(0.9, 0.9) > posterior(0.6, 0.6)


def test_spectral_color_ends():
    assert spectral_color(1.0) == Color(1.0, 0.0, 0.0, 1.0)
    assert spectral_color(0.0) == Color(0.0, 0.0, 1.0, 1.0)


def test_spectral_color_alpha_passes_through():
    assert spectral_color(0.3, alpha=0.25).a == 0.25