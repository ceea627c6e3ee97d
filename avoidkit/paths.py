"""Poses and measures on paths made of poses: length, energy, corners, smoothing."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from itertools import pairwise
from typing import Sequence

from avoidkit.bezier import three_point_bezier
from avoidkit.geometry import Point, distance, middle_point


@dataclass(frozen=True)
class Quaternion:
    """An orientation quaternion."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass(frozen=True)
class Pose:
    """A position and orientation in a named frame."""

    position: Point = field(default_factory=Point)
    orientation: Quaternion = field(default_factory=Quaternion)
    frame_id: str = ""


def pose_distance(a: Pose, b: Pose) -> float:
    """Return the distance between the positions of two poses."""
    return distance(a.position, b.position)


def has_same_yaw_and_altitude(a: Pose, b: Pose) -> bool:
    """Return True if both poses share altitude and yaw orientation."""
    return (
        a.orientation.z == b.orientation.z
        and a.orientation.w == b.orientation.w
        and a.position.z == b.position.z
    )


def path_length(poses: Sequence[Pose]) -> float:
    """Return the total length of the path."""
    return sum((pose_distance(a, b) for a, b in pairwise(poses)), 0.0)


def filter_path_corners(poses: Sequence[Pose]) -> list[Pose]:
    """Return the first and last pose and every pose where the path turns."""
    if not poses:
        return []
    corners = [poses[0]]
    for last, curr, nxt in zip(poses, poses[1:], poses[2:]):
        lp, cp, np_ = last.position, curr.position, nxt.position
        straight = (
            np_.x - cp.x == cp.x - lp.x
            and np_.y - cp.y == cp.y - lp.y
            and np_.z - cp.z == cp.z - lp.z
        )
        if not straight:
            corners.append(curr)
    corners.append(poses[-1])
    return corners


def path_kinetic_energy(poses: Sequence[Pose]) -> float:
    """Return the summed absolute change of squared per-axis step lengths."""
    if len(poses) < 3:
        return 0.0
    steps = [b.position - a.position for a, b in pairwise(poses)]
    total = 0.0
    for prev, curr in pairwise(steps):
        total += abs(curr.x * curr.x - prev.x * prev.x)
        total += abs(curr.y * curr.y - prev.y * prev.y)
        total += abs(curr.z * curr.z - prev.z * prev.z)
    return total


def path_energy(poses: Sequence[Pose], up_penalty: float) -> float:
    """Return the path length plus a penalty for every metre climbed."""
    total = 0.0
    for a, b in pairwise(poses):
        total += pose_distance(a, b)
        total += max(0.0, up_penalty * (b.position.z - a.position.z))
    return total


def smooth_path(poses: Sequence[Pose]) -> list[Pose]:
    """Return the path with each corner replaced by a quadratic Bezier curve."""
    if len(poses) < 3:
        return list(poses)
    template = poses[0]
    smoothed = [poses[0]]
    for a, b, c in zip(poses, poses[1:], poses[2:]):
        p1 = b.position
        p0 = middle_point(a.position, p1)
        p2 = middle_point(p1, c.position)
        smoothed.extend(replace(template, position=p) for p in three_point_bezier(p0, p1, p2))
    smoothed.append(poses[-1])
    return smoothed


def three_point_bezier_path(poses: Sequence[Pose], num_steps: int = 10) -> list[Pose]:
    """Return the Bezier curve through a path of exactly three poses."""
    if len(poses) != 3:
        raise ValueError(f"path must have exactly 3 poses, got {len(poses)}")
    template = poses[0]
    points = three_point_bezier(*(p.position for p in poses), num_steps=num_steps)
    return [replace(template, position=p) for p in points]