import pytest

from avoidkit.bezier import (
    BezierSegment,
    bezier_from_two_points,
    bezier_from_two_speeds,
    get_acceleration_magnitude,
    get_duration,
    quadratic_bezier,
    quadratic_bezier_acc,
    three_point_bezier,
)
from avoidkit.geometry import Point, distance, middle_point


def test_quadratic_bezier_endpoints():
    assert quadratic_bezier(1.0, 4.0, 9.0, 0.0) == 1.0
    assert quadratic_bezier(1.0, 4.0, 9.0, 1.0) == 9.0


def test_quadratic_bezier_collinear_midpoint():
    assert quadratic_bezier(0.0, 5.0, 10.0, 0.5) == pytest.approx(5.0)


def test_quadratic_bezier_on_points():
    a, b, c = Point(0.0, 0.0, 0.0), Point(2.0, 2.0, 0.0), Point(4.0, 0.0, 0.0)
    assert quadratic_bezier(a, b, c, 0.0) == a
    assert quadratic_bezier(a, b, c, 1.0) == c


def test_acceleration_zero_for_evenly_spaced_line():
    assert quadratic_bezier_acc(0.0, 5.0, 10.0) == 0.0
    assert get_acceleration_magnitude(
        Point(0.0, 0.0, 0.0), Point(1.0, 1.0, 1.0), Point(2.0, 2.0, 2.0), 3.0
    ) == pytest.approx(0.0)


def test_acceleration_does_not_depend_on_duration():
    assert quadratic_bezier_acc(0.0, 3.0, 1.0, 2.0) == pytest.approx(
        quadratic_bezier_acc(0.0, 3.0, 1.0, 0.5)
    )


def test_three_point_bezier_shape():
    p0, p1, p2 = Point(0.0, 0.0, 1.0), Point(3.0, 0.0, 1.0), Point(3.0, 3.0, 1.0)
    curve = three_point_bezier(p0, p1, p2)
    assert len(curve) == 11
    assert curve[0] == p0
    assert curve[-1] == p2
    assert all(p.z == pytest.approx(1.0) for p in curve)


def test_three_point_bezier_step_count():
    curve = three_point_bezier(Point(), Point(1.0, 0.0, 0.0), Point(2.0, 0.0, 0.0), num_steps=4)
    assert len(curve) == 5


def test_get_duration_satisfies_kinematics():
    p0, p1 = Point(0.0, 0.0, 0.0), Point(3.0, 4.0, 0.0)
    acc = 2.5
    t = get_duration(p0, p1, acc)
    assert 0.5 * acc * t * t == pytest.approx(distance(p0, p1))


def test_bezier_from_two_points_continuity():
    start, end = Point(0.0, 0.0, 0.0), Point(20.0, 0.0, 0.0)
    segments = bezier_from_two_points(start, end, acc=1.0, max_vel=2.0)
    assert len(segments) == 3
    first, cruise, last = segments
    assert first.prev == start and first.ctrl == start
    assert last.next == end and last.ctrl == end
    assert first.next == cruise.prev
    assert cruise.next == last.prev
    assert cruise.ctrl == middle_point(start, end)
    assert first.duration == last.duration
    assert cruise.duration * 2.0 == pytest.approx(distance(cruise.prev, cruise.next))


def test_bezier_from_two_points_short_distance_has_no_cruise():
    start, end = Point(0.0, 0.0, 0.0), Point(1.0, 0.0, 0.0)
    _, cruise, _ = bezier_from_two_points(start, end, acc=1.0, max_vel=5.0)
    assert cruise.prev == middle_point(start, end)
    assert cruise.duration == pytest.approx(0.0)


def test_bezier_from_two_points_same_point():
    p = Point(1.0, 1.0, 1.0)
    segments = bezier_from_two_points(p, p, acc=1.0, max_vel=1.0)
    assert all(s.prev == p and s.next == p for s in segments)


def test_bezier_from_two_speeds_equal_speeds():
    start, end = Point(0.0, 0.0, 0.0), Point(0.0, 6.0, 8.0)
    segment = bezier_from_two_speeds(start, end, 2.0, 2.0)
    assert isinstance(segment, BezierSegment)
    assert segment.ctrl == middle_point(start, end)
    assert segment.duration * 2.0 == pytest.approx(distance(start, end))


def test_bezier_from_two_speeds_rejects_zero_speeds():
    with pytest.raises(ValueError):
        bezier_from_two_speeds(Point(), Point(1.0, 0.0, 0.0), 0.0, 0.0)