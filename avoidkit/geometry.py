"""Points, vector helpers and small numeric utilities shared by the planners."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Protocol


class HasXYZ(Protocol):
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Point:
    """An immutable point or vector in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: HasXYZ) -> Point:
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: HasXYZ) -> Point:
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Point:
        return Point(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y, -self.z)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with channels in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


def squared(x: float) -> float:
    """Return x * x."""
    return x * x


def interpolate(start: float, end: float, ratio: float) -> float:
    """Return the value a fraction ``ratio`` of the way from start to end."""
    return start + (end - start) * ratio


def interpolate_points(p1: HasXYZ, p2: HasXYZ, ratio: float) -> Point:
    """Return the point between p1 (ratio 0) and p2 (ratio 1)."""
    return Point(
        interpolate(p1.x, p2.x, ratio),
        interpolate(p1.y, p2.y, ratio),
        interpolate(p1.z, p2.z, ratio),
    )


def middle_point(p1: HasXYZ, p2: HasXYZ) -> Point:
    """Return the midpoint of the segment p1-p2."""
    return interpolate_points(p1, p2, 0.5)


def add_points(p1: HasXYZ, p2: HasXYZ) -> Point:
    """Return the component-wise sum of two points."""
    return Point(p1.x + p2.x, p1.y + p2.y, p1.z + p2.z)


def subtract_points(p1: HasXYZ, p2: HasXYZ) -> Point:
    """Return the component-wise difference p1 - p2."""
    return Point(p1.x - p2.x, p1.y - p2.y, p1.z - p2.z)


def scale_point(point: HasXYZ, scalar: float) -> Point:
    """Return the point multiplied by a scalar."""
    return Point(scalar * point.x, scalar * point.y, scalar * point.z)


def norm(x: float, y: float, z: float) -> float:
    """Return the Euclidean length of the vector (x, y, z)."""
    return math.sqrt(squared(x) + squared(y) + squared(z))


def point_norm(p: HasXYZ) -> float:
    """Return the Euclidean length of a point treated as a vector."""
    return norm(p.x, p.y, p.z)


def distance(p1: HasXYZ, p2: HasXYZ) -> float:
    """Return the Euclidean distance between two points."""
    return norm(p2.x - p1.x, p2.y - p1.y, p2.z - p1.z)


def angle_to_range(angle: float) -> float:
    """Wrap an angle into the range [-pi, pi]."""
    angle += math.pi
    angle -= (2 * math.pi) * math.floor(angle / (2 * math.pi))
    angle -= math.pi
    return angle


def posterior(p: float, prior: float) -> float:
    """Combine two independent probabilities of the same event."""
    prob_obstacle = p * prior
    prob_free = (1 - p) * (1 - prior)
    return prob_obstacle / (prob_obstacle + prob_free + 0.0001)


def spectral_color(hue: float, alpha: float = 1.0) -> Color:
    """Return a spectral colour for a hue in [0, 1]."""
    return Color(
        r=max(0.0, 2 * hue - 1),
        g=1.0 - 2.0 * abs(hue - 0.5),
        b=max(0.0, 1.0 - 2 * hue),
        a=alpha,
    )