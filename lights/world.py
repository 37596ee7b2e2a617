"""A small 2D physics world: bodies with shapes, gravity and collision response."""

from __future__ import annotations

import math
import random
import threading
from dataclasses import dataclass
from enum import Enum

from lights.collision import CollisionResult, Shape, ShapeKind, is_colliding, shape_kind

__all__ = [
    "BodyID",
    "INVALID_BODY_ID",
    "GRAVITY",
    "BodyType",
    "Body",
    "World2D",
    "bodies_colliding",
]

BodyID = int
INVALID_BODY_ID: BodyID = (1 << 64) - 1

GRAVITY = 50.0
_PUSH_FACTOR = 2.0 * 0.1

Vec2 = tuple[float, float]


class BodyType(Enum):
    """How a body takes part in the simulation."""

    STATIC = "static"
    DYNAMIC = "dynamic"
    KINEMATIC = "kinematic"


@dataclass
class Body:
    """A shape placed in the world, with a velocity and a per-tick collision flag."""

    id: BodyID
    type: BodyType
    shape: Shape
    velocity: Vec2 = (0.0, 0.0)
    collided_this_frame: bool = False

    def position(self) -> Vec2:
        """The position of the body's shape."""
        return self.shape.position

    def scale(self) -> Vec2:
        """The size of the body's shape."""
        return self.shape.scale()

    def kind(self) -> ShapeKind:
        """The kind of the body's shape."""
        return shape_kind(self.shape)

    def _move_to(self, position: Vec2) -> None:
        self.shape.position = (float(position[0]), float(position[1]))


def bodies_colliding(a: Body, b: Body) -> CollisionResult:
    """Test the shape of ``a`` against the shape of ``b``."""
    return is_colliding(a.shape, b.shape)


def _signbit(value: float) -> bool:
    return math.copysign(1.0, value) < 0


class World2D:
    """Holds bodies and advances them in fixed physics ticks."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._bodies: list[Body] = []
        self._random = random.SystemRandom()

    def __len__(self) -> int:
        return len(self._bodies)

    def __iter__(self):
        return iter(list(self._bodies))

    def _unused_id(self) -> BodyID:
        used = {body.id for body in self._bodies}
        while True:
            candidate = self._random.getrandbits(64)
            if candidate != 0 and candidate not in used:
                return candidate

    def create_body(
        self, body_type: BodyType, shape: Shape, velocity: Vec2 = (0.0, 0.0)
    ) -> BodyID:
        """Add a body and return its new, unique, non-zero id."""
        with self._lock:
            body_id = self._unused_id()
            self._bodies.append(
                Body(
                    id=body_id,
                    type=body_type,
                    shape=shape,
                    velocity=(float(velocity[0]), float(velocity[1])),
                )
            )
        return body_id

    def destroy_body(self, body_id: BodyID) -> None:
        """Remove the body with ``body_id``; unknown ids are ignored."""
        with self._lock:
            self._bodies = [body for body in self._bodies if body.id != body_id]

    def get_body(self, body_id: BodyID) -> Body | None:
        """Return the body with ``body_id``, or None."""
        with self._lock:
            return next((body for body in self._bodies if body.id == body_id), None)

    def physics_tick(self, delta_time: float) -> None:
        """Apply gravity and velocity to dynamic bodies, then detect and resolve collisions."""
        with self._lock:
            dynamic: list[Body] = []
            static: list[Body] = []
            kinematic: list[Body] = []

            for body in self._bodies:
                body.collided_this_frame = False
                if body.type is BodyType.DYNAMIC:
                    vx, vy = body.velocity
                    vy -= GRAVITY * delta_time
                    body.velocity = (vx, vy)
                    x, y = body.position()
                    body._move_to((x + vx, y + vy))
                    dynamic.append(body)
                elif body.type is BodyType.KINEMATIC:
                    kinematic.append(body)
                else:
                    static.append(body)

            collisions: list[tuple[Body, Body, CollisionResult]] = []
            for mover in dynamic:
                others = [*static, *kinematic, *(b for b in dynamic if b is not mover)]
                for other in others:
                    result = bodies_colliding(mover, other)
                    if result.collided:
                        mover.collided_this_frame = True
                        other.collided_this_frame = True
                        collisions.append((mover, other, result))

            for mover, _other, result in collisions:
                if mover.type is not BodyType.DYNAMIC:
                    continue
                nx, ny = result.collision_normal
                x, y = mover.position()
                mover._move_to((x + nx * _PUSH_FACTOR, y + ny * _PUSH_FACTOR))

                vx, vy = mover.velocity
                if ny != 0 and _signbit(vy) != _signbit(ny):
                    vy = 0.0
                if nx != 0 and _signbit(vx) != _signbit(nx):
                    vx = 0.0
                mover.velocity = (vx, vy)