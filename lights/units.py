"""Unit conversions between pixels, meters and physics units, and mouse helpers."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

__all__ = [
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "PIXELS_PER_METER",
    "PHYSICS_UNIT_PER_METER",
    "pixels_to_meters",
    "meters_to_pixels",
    "physics_unit_to_meters",
    "meters_to_physics_unit",
    "pixels_to_physics",
    "physics_unit_to_pixels",
    "centered_mouse_position",
    "screen_to_world_position",
]

VERSION_MAJOR = 0
VERSION_MINOR = 1

PIXELS_PER_METER = 64
PHYSICS_UNIT_PER_METER = 1

Vec2 = tuple[float, float]


def pixels_to_meters(vector: Sequence[float]) -> Vec2:
    """Convert screen pixels to meters; the y axis is flipped."""
    x, y = vector
    return (x / PIXELS_PER_METER, -y / PIXELS_PER_METER)


def meters_to_pixels(vector: Sequence[float]) -> Vec2:
    """Convert meters to screen pixels; the y axis is flipped."""
    x, y = vector
    return (float(x * PIXELS_PER_METER), float(-y * PIXELS_PER_METER))


def physics_unit_to_meters(vector: Sequence[float]) -> Vec2:
    """Convert physics units to meters."""
    x, y = vector
    return (x / PHYSICS_UNIT_PER_METER, y / PHYSICS_UNIT_PER_METER)


def meters_to_physics_unit(vector: Sequence[float]) -> Vec2:
    """Convert meters to physics units."""
    x, y = vector
    return (float(x * PHYSICS_UNIT_PER_METER), float(y * PHYSICS_UNIT_PER_METER))


def pixels_to_physics(vector: Sequence[float]) -> Vec2:
    """Convert screen pixels to physics units."""
    return meters_to_physics_unit(pixels_to_meters(vector))


def physics_unit_to_pixels(vector: Sequence[float]) -> Vec2:
    """Convert physics units to screen pixels."""
    return meters_to_pixels(physics_unit_to_meters(vector))


def _half(value: int) -> int:
    # Integer halving that truncates toward zero.
    return int(value / 2) if value < 0 else value // 2


def centered_mouse_position(pos: Sequence[int], window_size: Sequence[int]) -> tuple[int, int]:
    """Move the origin to the window centre with y pointing up."""
    x, y = int(pos[0]), int(pos[1])
    width, height = int(window_size[0]), int(window_size[1])
    return (x - _half(width), -(y - _half(height)))


def screen_to_world_position(
    screen_pos: Sequence[int],
    window_size: Sequence[int],
    projection: Sequence[Sequence[float]],
    view: Sequence[Sequence[float]],
) -> Vec2:
    """Unproject a screen position into world coordinates.

    ``projection`` and ``view`` are 4x4 matrices that transform column vectors.
    """
    cx, cy = centered_mouse_position(screen_pos, window_size)
    width, height = window_size
    clip = np.array([cx / (width / 2.0), cy / (height / 2.0), 0.0, 1.0])
    combined = np.asarray(projection, dtype=float) @ np.asarray(view, dtype=float)
    world = np.linalg.inv(combined) @ clip
    world = world / world[3]
    return (float(world[0]), float(world[1]))