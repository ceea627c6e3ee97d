"""Polar histogram matrices: padding, smoothing, cost images and path setpoints."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from numpy.typing import ArrayLike


def get_conic_kernel(radius: int) -> np.ndarray:
    """Return a 1D cone of length 2 * radius + 1 whose peak is 1."""
    if radius < 0:
        raise ValueError("radius must not be negative")
    offsets = np.abs(np.arange(2 * radius + 1) - radius)
    kernel = np.maximum(0.0, 1.0 + radius - offsets).astype(float)
    return kernel / kernel.max()


def pad_polar_matrix(matrix: ArrayLike, n_lines_padding: int) -> np.ndarray:
    """Pad a polar matrix on all sides, honouring elevation and azimuth wrapping.

    Rows beyond the poles are mirrored and shifted by half a turn in azimuth;
    columns wrap around.
    """
    m = np.asarray(matrix, dtype=float)
    rows, cols = m.shape
    n = n_lines_padding
    if cols % 2:
        raise ValueError("invalid resolution: 180 mod (2 * resolution) must be zero")
    if n > rows or n > cols:
        raise ValueError("padding must not exceed the matrix size")
    mid = cols // 2

    padded = np.zeros((rows + 2 * n, cols + 2 * n))
    padded[n : n + rows, n : n + cols] = m
    if n == 0:
        return padded

    # Top border
    padded[0:n, n : n + mid] = m[0:n, mid : 2 * mid][::-1]
    padded[0:n, n + mid : n + 2 * mid] = m[0:n, 0:mid][::-1]
    # Bottom border
    padded[rows + n :, n : n + mid] = m[rows - n :, mid : 2 * mid][::-1]
    padded[rows + n :, n + mid : n + 2 * mid] = m[rows - n :, 0:mid][::-1]
    # Left and right borders wrap around in azimuth
    total_cols = padded.shape[1]
    padded[:, 0:n] = padded[:, total_cols - 2 * n : total_cols - n]
    padded[:, n + cols :] = padded[:, n : 2 * n]
    return padded


def smooth_polar_matrix(matrix: ArrayLike, smoothing_radius: int) -> np.ndarray:
    """Return the matrix smoothed with a separable conic kernel."""
    m = np.asarray(matrix, dtype=float)
    r = smoothing_radius
    padded = pad_polar_matrix(m, r)
    kernel = get_conic_kernel(r)
    width = 2 * r + 1

    column_pass = sliding_window_view(padded, width, axis=0) @ kernel
    return sliding_window_view(column_pass, width, axis=1) @ kernel


def generate_cost_image(cost_matrix: ArrayLike, distance_matrix: ArrayLike) -> bytes:
    """Return an RGB8 image: red is distance cost, green the other costs.

    Rows are written from the highest elevation index down.
    """
    cost = np.asarray(cost_matrix, dtype=float)
    dist = np.asarray(distance_matrix, dtype=float)
    if cost.shape != dist.shape:
        raise ValueError("cost and distance matrices must have the same shape")

    max_val = max(np.nanmax(cost), np.nanmax(dist))

    def scale(values: np.ndarray) -> np.ndarray:
        with np.errstate(divide="ignore", invalid="ignore"):
            scaled = 255.0 * values / max_val
        return np.where(np.isnan(scaled), 255.0, np.clip(scaled, 0.0, 255.0)).astype(np.uint8)

    red = scale(dist)[::-1]
    green = scale(cost)[::-1]
    blue = np.zeros_like(red)
    return np.stack([red, green, blue], axis=-1).tobytes()


def color_image_index(e_ind: int, z_ind: int, color: int, grid_length_e: int, grid_length_z: int) -> int:
    """Return the byte index of a colour channel (0 red, 1 green, 2 blue) in a cost image."""
    return ((grid_length_e - e_ind - 1) * grid_length_z + z_ind) * 3 + color


def get_setpoint_from_path(
    path: Sequence[ArrayLike],
    path_generation_time: float,
    velocity: float,
    current_time: float,
) -> np.ndarray | None:
    """Return where on the path one would be after travelling at velocity since it was made.

    The path is stored goal first, so travel runs from its end towards index 0.
    Returns None if the path is too short or already travelled past.
    """
    points = [np.asarray(p, dtype=float) for p in path]
    n = len(points)
    if n < 2:
        return None
    if n == 2:
        return points[0]

    segment = points[n - 3] - points[n - 2]
    distance_left = (current_time - path_generation_time) * velocity
    setpoint = points[n - 2] + (distance_left / np.linalg.norm(segment)) * segment
    i = n - 3
    while i > 0 and distance_left > np.linalg.norm(segment):
        distance_left -= np.linalg.norm(segment)
        segment = points[i - 1] - points[i]
        setpoint = points[i] + (distance_left / np.linalg.norm(segment)) * segment
        i -= 1

    if distance_left < np.linalg.norm(segment):
        return setpoint
    return None