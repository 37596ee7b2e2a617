"""Two-dimensional collision tests between points, circles, rectangles and lines."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union

__all__ = [
    "CollisionResult",
    "ShapeKind",
    "Extents",
    "Point",
    "Circle",
    "Rectangle",
    "Line",
    "Shape",
    "is_colliding",
    "shape_kind",
]

Vec2 = tuple[float, float]

_LINE_TOLERANCE = 0.001


def _vec(value) -> Vec2:
    x, y = value
    return (float(x), float(y))


def _sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def _add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def _mul(a: Vec2, s: float) -> Vec2:
    return (a[0] * s, a[1] * s)


def _dot(a: Vec2, b: Vec2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def _length(a: Vec2) -> float:
    return math.sqrt(_dot(a, a))


def _distance(a: Vec2, b: Vec2) -> float:
    return _length(_sub(a, b))


def _normalize(a: Vec2) -> Vec2:
    # A zero vector has no direction; it normalizes to NaN components.
    length = _length(a)
    if length == 0.0:
        return (math.nan, math.nan)
    return (a[0] / length, a[1] / length)


def _clamp(value: Vec2, low: Vec2, high: Vec2) -> Vec2:
    return (
        min(max(value[0], low[0]), high[0]),
        min(max(value[1], low[1]), high[1]),
    )


@dataclass
class CollisionResult:
    """Outcome of a collision test."""

    collided: bool
    contact_points: list[Vec2] = field(default_factory=list)
    collision_normal: Vec2 = (0.0, 0.0)

    def __bool__(self) -> bool:
        return self.collided

    @classmethod
    def no_collision(cls) -> CollisionResult:
        """A result for shapes that do not touch."""
        return cls(collided=False)


class ShapeKind(IntEnum):
    """The kind of a collision shape."""

    UNKNOWN = -1
    POINT = 0
    RECTANGLE = 1
    CIRCLE = 2
    LINE = 3


@dataclass(frozen=True)
class Extents:
    """The edges of an axis-aligned rectangle."""

    left: float
    right: float
    up: float
    down: float


def _unsupported(shape: object, other: object) -> TypeError:
    return TypeError(
        f"cannot test {type(shape).__name__} against {type(other).__name__}"
    )


@dataclass
class Point:
    """A single point."""

    position: Vec2

    def __post_init__(self) -> None:
        self.position = _vec(self.position)

    def scale(self) -> Vec2:
        return (1.0, 1.0)

    def is_colliding(self, other: Shape) -> CollisionResult:
        if isinstance(other, Point):
            return CollisionResult(
                collided=self.position == other.position,
                contact_points=[self.position],
            )
        if isinstance(other, (Circle, Rectangle, Line)):
            return other.is_colliding(self)
        raise _unsupported(self, other)


@dataclass
class Circle:
    """A circle given by its centre and radius."""

    position: Vec2
    radius: float

    def __post_init__(self) -> None:
        self.position = _vec(self.position)
        self.radius = float(self.radius)

    def scale(self) -> Vec2:
        return (self.radius * 2, self.radius * 2)

    def is_colliding(self, other: Shape) -> CollisionResult:
        if isinstance(other, Point):
            distance = _distance(self.position, other.position)
            return CollisionResult(
                collided=distance <= self.radius,
                contact_points=[self.position],
            )
        if isinstance(other, Circle):
            distance = _distance(self.position, other.position)
            direction = _normalize(_sub(other.position, self.position))
            contact = _add(self.position, _mul(direction, self.radius))
            return CollisionResult(
                collided=distance <= self.radius + other.radius,
                contact_points=[contact],
            )
        if isinstance(other, Rectangle):
            ext = other.extents()
            closest = _clamp(self.position, (ext.left, ext.down), (ext.right, ext.up))
            between = _sub(self.position, closest)
            distance = _length(between)
            if distance <= self.radius:
                penetration = _mul(_normalize(between), self.radius - distance)
                return CollisionResult(
                    collided=True,
                    contact_points=[closest],
                    collision_normal=penetration,
                )
            return CollisionResult.no_collision()
        if isinstance(other, Line):
            return other.is_colliding(self)
        raise _unsupported(self, other)


@dataclass
class Rectangle:
    """An axis-aligned rectangle positioned by its centre."""

    position: Vec2
    size: Vec2

    def __post_init__(self) -> None:
        self.position = _vec(self.position)
        self.size = _vec(self.size)

    def scale(self) -> Vec2:
        return self.size

    def extents(self) -> Extents:
        x, y = self.position
        w, h = self.size
        return Extents(left=x - w / 2.0, right=x + w / 2.0, up=y + h / 2.0, down=y - h / 2.0)

    def is_colliding(self, other: Shape) -> CollisionResult:
        if isinstance(other, Point):
            return self._collide_point(other)
        if isinstance(other, Circle):
            return self._collide_circle(other)
        if isinstance(other, Rectangle):
            return self._collide_rectangle(other)
        if isinstance(other, Line):
            return other.is_colliding(self)
        raise _unsupported(self, other)

    def _collide_point(self, other: Point) -> CollisionResult:
        ext = self.extents()
        px, py = other.position
        if not (ext.left <= px <= ext.right and ext.down <= py <= ext.up):
            return CollisionResult.no_collision()
        dist_left = abs(px - ext.left)
        dist_right = abs(px - ext.right)
        dist_up = abs(py - ext.up)
        dist_down = abs(py - ext.down)
        min_dist = min(dist_left, dist_right, dist_up, dist_down)
        if min_dist == dist_left:
            normal = (-1.0, 0.0)
        elif min_dist == dist_right:
            normal = (1.0, 0.0)
        elif min_dist == dist_up:
            normal = (0.0, 1.0)
        else:
            normal = (0.0, -1.0)
        return CollisionResult(
            collided=True, contact_points=[other.position], collision_normal=normal
        )

    def _collide_circle(self, other: Circle) -> CollisionResult:
        ext = self.extents()
        closest = _clamp(other.position, (ext.left, ext.down), (ext.right, ext.up))
        between = _sub(closest, other.position)
        if _length(between) <= other.radius:
            return CollisionResult(
                collided=True, contact_points=[closest], collision_normal=between
            )
        return CollisionResult.no_collision()

    def _collide_rectangle(self, other: Rectangle) -> CollisionResult:
        mine = self.extents()
        theirs = other.extents()
        if not (
            mine.right >= theirs.left
            and mine.left <= theirs.right
            and mine.down <= theirs.up
            and mine.up >= theirs.down
        ):
            return CollisionResult.no_collision()
        overlap_left = theirs.right - mine.left
        overlap_right = theirs.left - mine.right
        overlap_up = theirs.down - mine.up
        overlap_down = theirs.up - mine.down
        min_overlap = min(
            abs(overlap_left), abs(overlap_right), abs(overlap_up), abs(overlap_down)
        )
        if min_overlap == abs(overlap_left):
            normal = (overlap_left, 0.0)
        elif min_overlap == abs(overlap_right):
            normal = (overlap_right, 0.0)
        elif min_overlap == abs(overlap_up):
            normal = (0.0, overlap_up)
        else:
            normal = (0.0, overlap_down)
        return CollisionResult(collided=True, contact_points=[], collision_normal=normal)


@dataclass
class Line:
    """A line segment from ``position`` to ``end``."""

    position: Vec2
    end: Vec2

    def __post_init__(self) -> None:
        self.position = _vec(self.position)
        self.end = _vec(self.end)

    def scale(self) -> Vec2:
        return (1.0, 1.0)

    def is_colliding(self, other: Shape) -> CollisionResult:
        if isinstance(other, (Line, Rectangle)):
            return CollisionResult.no_collision()
        if isinstance(other, Point):
            return self._collide_point(other)
        if isinstance(other, Circle):
            return self._collide_circle(other)
        raise _unsupported(self, other)

    def _collide_point(self, other: Point) -> CollisionResult:
        line_vector = _sub(self.end, self.position)
        line_length = _length(line_vector)
        total = _distance(other.position, self.position) + _distance(other.position, self.end)
        if line_length - _LINE_TOLERANCE <= total <= line_length + _LINE_TOLERANCE:
            normal = _normalize((-line_vector[1], line_vector[0]))
            return CollisionResult(
                collided=True, contact_points=[other.position], collision_normal=normal
            )
        return CollisionResult.no_collision()

    def _collide_circle(self, other: Circle) -> CollisionResult:
        start_inside = other.is_colliding(Point(self.position))
        if start_inside.collided:
            return start_inside
        end_inside = other.is_colliding(Point(self.end))
        if end_inside.collided:
            return end_inside

        line_vector = _sub(self.end, self.position)
        squared = _dot(line_vector, line_vector)
        if squared == 0.0:
            return CollisionResult.no_collision()
        t = _dot(_sub(other.position, self.position), line_vector) / squared
        closest = _add(self.position, _mul(line_vector, t))
        if not self._collide_point(Point(closest)).collided:
            return CollisionResult.no_collision()
        return other.is_colliding(Point(closest))


Shape = Union[Point, Rectangle, Circle, Line]

_KINDS = {Point: ShapeKind.POINT, Rectangle: ShapeKind.RECTANGLE, Circle: ShapeKind.CIRCLE, Line: ShapeKind.LINE}


def is_colliding(collider: Shape, collidee: Shape) -> CollisionResult:
    """Test ``collider`` against ``collidee``."""
    return collider.is_colliding(collidee)


def shape_kind(shape: object) -> ShapeKind:
    """Return the kind of a shape, or UNKNOWN for anything else."""
    return _KINDS.get(type(shape), ShapeKind.UNKNOWN)