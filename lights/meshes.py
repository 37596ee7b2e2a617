"""Vertex layout and procedural meshes: quad, cube, pyramid, circle and sphere."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = [
    "Vertex",
    "get_normal",
    "generate_circle",
    "generate_sphere",
    "QUAD_INDICES",
    "QUAD_OUTLINE_INDICES",
    "QUAD_VERTICES",
    "CUBE_INDICES",
    "INVERTED_CUBE_INDICES",
    "CUBE_VERTICES",
    "PYRAMID_INDICES",
    "PYRAMID_VERTICES",
]

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex: position, colour, normal and texture coordinate."""

    position: Vec3 = (0.0, 0.0, 0.0)
    color: Vec4 = (1.0, 1.0, 1.0, 1.0)
    normal: Vec3 = (0.0, 0.0, 0.0)
    uv: Vec2 = (0.0, 0.0)


def get_normal(p1: Sequence[float], p2: Sequence[float], p3: Sequence[float]) -> Vec3:
    """Return the (unnormalized) normal of the triangle p1, p2, p3."""
    ux, uy, uz = (p2[i] - p1[i] for i in range(3))
    vx, vy, vz = (p3[i] - p1[i] for i in range(3))
    return (
        float(uy * vz - uz * vy),
        float(uz * vx - ux * vz),
        float(ux * vy - uy * vx),
    )


def _v(position: Vec3, normal: Vec3, uv: Vec2) -> Vertex:
    return Vertex(position=position, normal=normal, uv=uv)


QUAD_INDICES: tuple[int, ...] = (0, 1, 3, 1, 2, 3)
QUAD_OUTLINE_INDICES: tuple[int, ...] = (0, 1, 1, 2, 2, 3, 3, 0)

QUAD_VERTICES: tuple[Vertex, ...] = (
    _v((0.5, 0.5, 0.0), (0.0, 0.0, 1.0), (1.0, 1.0)),
    _v((0.5, -0.5, 0.0), (0.0, 0.0, 1.0), (1.0, 0.0)),
    _v((-0.5, -0.5, 0.0), (0.0, 0.0, 1.0), (0.0, 0.0)),
    _v((-0.5, 0.5, 0.0), (0.0, 0.0, 1.0), (0.0, 1.0)),
)

CUBE_INDICES: tuple[int, ...] = tuple(
    index
    for face in range(6)
    for index in (4 * face, 4 * face + 1, 4 * face + 3, 4 * face + 1, 4 * face + 2, 4 * face + 3)
)

INVERTED_CUBE_INDICES: tuple[int, ...] = tuple(
    index
    for face in range(6)
    for index in (4 * face + 3, 4 * face + 1, 4 * face, 4 * face + 3, 4 * face + 2, 4 * face + 1)
)

CUBE_VERTICES: tuple[Vertex, ...] = (
    # front
    _v((0.5, 0.5, 0.5), (0.0, 0.0, 1.0), (1.0, 1.0)),
    _v((0.5, -0.5, 0.5), (0.0, 0.0, 1.0), (1.0, 0.0)),
    _v((-0.5, -0.5, 0.5), (0.0, 0.0, 1.0), (0.0, 0.0)),
    _v((-0.5, 0.5, 0.5), (0.0, 0.0, 1.0), (0.0, 1.0)),
    # back
    _v((-0.5, 0.5, -0.5), (0.0, 0.0, -1.0), (1.0, 1.0)),
    _v((-0.5, -0.5, -0.5), (0.0, 0.0, -1.0), (1.0, 0.0)),
    _v((0.5, -0.5, -0.5), (0.0, 0.0, -1.0), (0.0, 0.0)),
    _v((0.5, 0.5, -0.5), (0.0, 0.0, -1.0), (0.0, 1.0)),
    # left
    _v((-0.5, 0.5, 0.5), (-1.0, 0.0, 0.0), (1.0, 1.0)),
    _v((-0.5, -0.5, 0.5), (-1.0, 0.0, 0.0), (1.0, 0.0)),
    _v((-0.5, -0.5, -0.5), (-1.0, 0.0, 0.0), (0.0, 0.0)),
    _v((-0.5, 0.5, -0.5), (-1.0, 0.0, 0.0), (0.0, 1.0)),
    # right
    _v((0.5, 0.5, -0.5), (1.0, 0.0, 0.0), (1.0, 1.0)),
    _v((0.5, -0.5, -0.5), (1.0, 0.0, 0.0), (1.0, 0.0)),
    _v((0.5, -0.5, 0.5), (1.0, 0.0, 0.0), (0.0, 0.0)),
    _v((0.5, 0.5, 0.5), (1.0, 0.0, 0.0), (0.0, 1.0)),
    # top
    _v((0.5, 0.5, -0.5), (0.0, 1.0, 0.0), (1.0, 1.0)),
    _v((0.5, 0.5, 0.5), (0.0, 1.0, 0.0), (1.0, 0.0)),
    _v((-0.5, 0.5, 0.5), (0.0, 1.0, 0.0), (0.0, 0.0)),
    _v((-0.5, 0.5, -0.5), (0.0, 1.0, 0.0), (0.0, 1.0)),
    # bottom
    _v((0.5, -0.5, 0.5), (0.0, -1.0, 0.0), (1.0, 1.0)),
    _v((0.5, -0.5, -0.5), (0.0, -1.0, 0.0), (1.0, 0.0)),
    _v((-0.5, -0.5, -0.5), (0.0, -1.0, 0.0), (0.0, 0.0)),
    _v((-0.5, -0.5, 0.5), (0.0, -1.0, 0.0), (0.0, 1.0)),
)

PYRAMID_INDICES: tuple[int, ...] = (
    0, 1, 2,
    3, 4, 5,
    6, 7, 8,
    9, 10, 11,
    12, 13, 14, 13, 15, 14,
)

PYRAMID_VERTICES: tuple[Vertex, ...] = (
    # front
    _v((-0.5, 0.0, 0.5), (0.0, 0.5, 1.0), (0.0, 0.0)),
    _v((0.0, 1.0, 0.0), (0.0, 0.5, 1.0), (0.5, 1.0)),
    _v((0.5, 0.0, 0.5), (0.0, 0.5, 1.0), (1.0, 0.0)),
    # right
    _v((0.5, 0.0, 0.5), (1.0, 0.5, 0.0), (0.0, 0.0)),
    _v((0.0, 1.0, 0.0), (1.0, 0.5, 0.0), (0.5, 1.0)),
    _v((0.5, 0.0, -0.5), (1.0, 0.5, 0.0), (1.0, 0.0)),
    # back
    _v((0.5, 0.0, -0.5), (0.0, 0.5, -1.0), (0.0, 0.0)),
    _v((0.0, 1.0, 0.0), (0.0, 0.5, -1.0), (0.5, 1.0)),
    _v((-0.5, 0.0, -0.5), (0.0, 0.5, -1.0), (1.0, 0.0)),
    # left
    _v((-0.5, 0.0, -0.5), (-1.0, 0.5, 0.0), (0.0, 0.0)),
    _v((0.0, 1.0, 0.0), (-1.0, 0.5, 0.0), (0.5, 1.0)),
    _v((-0.5, 0.0, 0.5), (-1.0, 0.5, 0.0), (1.0, 0.0)),
    # bottom
    _v((-0.5, 0.0, -0.5), (0.0, -1.0, 0.0), (0.0, 0.0)),
    _v((-0.5, 0.0, 0.5), (0.0, -1.0, 0.0), (0.0, 1.0)),
    _v((0.5, 0.0, -0.5), (0.0, -1.0, 0.0), (1.0, 0.0)),
    _v((0.5, 0.0, 0.5), (0.0, -1.0, 0.0), (1.0, 1.0)),
)


def generate_circle(
    radius: float = 1.0, sectors: int = 50, outline_only: bool = False
) -> tuple[list[Vertex], list[int]]:
    """Build a circle in the XY plane.

    Filled circles are a triangle fan around vertex 0; outlines are line segments.
    """
    if sectors <= 0:
        raise ValueError("a circle needs at least one sector")
    step = 2 * math.pi / sectors
    vertices: list[Vertex] = []
    indices: list[int] = []
    for i in range(sectors + 1):
        angle = i * step
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        vertices.append(
            Vertex(
                position=(radius * cos_a, radius * sin_a, 0.0),
                normal=(0.0, 0.0, 1.0),
                uv=(0.5 + 0.5 * cos_a, 0.5 + 0.5 * sin_a),
            )
        )
        if i > 0:
            if not outline_only:
                indices.append(0)
            indices.extend((i, i - 1))
    return vertices, indices


def generate_sphere(
    radius: float = 1.0, sectors: int = 50, stacks: int = 50
) -> tuple[list[Vertex], list[int]]:
    """Build a UV sphere with ``stacks`` rings of ``sectors`` segments each."""
    if sectors <= 0 or stacks <= 0:
        raise ValueError("a sphere needs at least one sector and one stack")
    if radius == 0:
        raise ValueError("a sphere needs a non-zero radius")
    length_inv = 1.0 / radius
    sector_step = 2 * math.pi / sectors
    stack_step = math.pi / stacks

    vertices: list[Vertex] = []
    for i in range(stacks + 1):
        stack_angle = math.pi / 2 - i * stack_step
        xy = radius * math.cos(stack_angle)
        z = radius * math.sin(stack_angle)
        for j in range(sectors + 1):
            sector_angle = j * sector_step
            x = xy * math.cos(sector_angle)
            y = xy * math.sin(sector_angle)
            vertices.append(
                Vertex(
                    position=(x, y, z),
                    normal=(x * length_inv, y * length_inv, z * length_inv),
                    uv=(j / sectors, i / stacks),
                )
            )

    indices: list[int] = []
    for i in range(stacks):
        k1 = i * (sectors + 1)
        k2 = k1 + sectors + 1
        for _ in range(sectors):
            if i != 0:
                indices.extend((k1, k1 + 1, k2))
            if i != stacks - 1:
                indices.extend((k1 + 1, k2 + 1, k2))
            k1 += 1
            k2 += 1
    return vertices, indices