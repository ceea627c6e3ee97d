"""Quadratic Bezier curves and simple trajectory segments built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeVar

from avoidkit.geometry import (
    HasXYZ,
    Point,
    distance,
    interpolate_points,
    middle_point,
)

T = TypeVar("T", float, Point)


@dataclass(frozen=True)
class BezierSegment:
    """A quadratic Bezier segment with its duration."""

    prev: Point
    ctrl: Point
    next: Point
    duration: float


def quadratic_bezier(p0: T, p1: T, p2: T, t: float) -> T:
    """Return the point of the quadratic Bezier curve at time t in [0, 1]."""
    return ((1 - t) * (1 - t) * p0) + 2 * ((1 - t) * t * p1) + (t * t * p2)


def quadratic_bezier_acc(p0: T, p1: T, p2: T, duration: float = 1.0) -> T:
    """Return the acceleration along the curve, which does not depend on t."""
    return 2 * (p2 - 2 * p1 + p0) / duration * duration


def three_point_bezier(p0: HasXYZ, p1: HasXYZ, p2: HasXYZ, num_steps: int = 10) -> list[Point]:
    """Return num_steps + 1 points on the curve from p0 to p2 controlled by p1."""
    a, b, c = (Point(p.x, p.y, p.z) for p in (p0, p1, p2))
    return [quadratic_bezier(a, b, c, i / num_steps) for i in range(num_steps + 1)]


def bezier_from_two_points(start: HasXYZ, end: HasXYZ, acc: float, max_vel: float) -> list[BezierSegment]:
    """Return accelerate, cruise and decelerate segments from start to end."""
    total_dist = distance(start, end)
    acc_duration = max_vel / acc
    acc_dist = acc_duration * max_vel / 2
    # Acceleration may take at most half of the trajectory.
    acc_part = 0.5 if total_dist == 0 else min(0.5, acc_dist / total_dist)

    start_p = Point(start.x, start.y, start.z)
    end_p = Point(end.x, end.y, end.z)
    middle = middle_point(start_p, end_p)
    max_vel_point = interpolate_points(start_p, end_p, acc_part)
    decel_point = interpolate_points(end_p, start_p, acc_part)
    max_vel_duration = distance(max_vel_point, decel_point) / max_vel

    return [
        BezierSegment(start_p, start_p, max_vel_point, acc_duration),
        BezierSegment(max_vel_point, middle, decel_point, max_vel_duration),
        BezierSegment(decel_point, end_p, end_p, acc_duration),
    ]


def bezier_from_two_speeds(start: HasXYZ, end: HasXYZ, start_speed: float, end_speed: float) -> BezierSegment:
    """Return a segment whose control point matches the given end speeds."""
    total_speed = start_speed + end_speed
    if total_speed == 0:
        raise ValueError("start_speed and end_speed must not sum to zero")
    avg_speed = total_speed / 2.0
    duration = distance(start, end) / avg_speed
    start_p = Point(start.x, start.y, start.z)
    end_p = Point(end.x, end.y, end.z)
    ctrl = interpolate_points(start_p, end_p, start_speed / total_speed)
    return BezierSegment(start_p, ctrl, end_p, duration)


def get_duration(p0: HasXYZ, p1: HasXYZ, acc: float) -> float:
    """Return the time to go from p0 to p1 at constant acceleration from rest."""
    return math.sqrt(2 * distance(p0, p1) / acc)


def get_acceleration_magnitude(p0: HasXYZ, p1: HasXYZ, p2: HasXYZ, duration: float) -> float:
    """Return the magnitude of the curve's acceleration."""
    dx = quadratic_bezier_acc(p0.x, p1.x, p2.x)
    dy = quadratic_bezier_acc(p0.y, p1.y, p2.y)
    dz = quadratic_bezier_acc(p0.z, p1.z, p2.z)
    return math.sqrt(dx * dx + dy * dy + dz * dz) / duration * duration