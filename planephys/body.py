"""Rigid polygonal bodies moving in the plane, plus separating-axis helpers."""

from __future__ import annotations

import math
from itertools import pairwise
from typing import Any, List, Optional, Sequence, Tuple

from planephys.color import RGBColor
from planephys.polygon import polygon_centroid, polygon_rotate, polygon_translate
from planephys.vector import VEC_ZERO, Vector, amount_overlapping, is_overlapping

__all__ = [
    "Body",
    "find_edges",
    "find_axes",
    "project_on_axis",
    "check_overlap_axis",
]


class Body:
    """A uniform-density polygon that accumulates forces and impulses each tick.

    A mass of ``math.inf`` makes the body immovable by forces and impulses.
    Angular dynamics are not simulated.
    """

    def __init__(
        self,
        shape: Sequence[Vector],
        mass: float,
        color: RGBColor,
        info: Any = None,
        image_path: Optional[str] = None,
    ) -> None:
        if not mass > 0:
            raise ValueError(f"body mass must be positive, got {mass}")
        self._shape: List[Vector] = list(shape)
        self._centroid: Vector = polygon_centroid(self._shape)
        self.mass = mass
        self.color = color
        self.info = info
        self.image_path = image_path
        self.velocity: Vector = VEC_ZERO
        self.angle = 0.0
        self._forces: Vector = VEC_ZERO
        self._impulses: Vector = VEC_ZERO
        self._removed = False
        self.in_collision = False
        self._collision_body: Optional[Body] = None

    def __repr__(self) -> str:
        return (
            f"Body(centroid={self._centroid!r}, velocity={self.velocity!r}, "
            f"mass={self.mass!r}, info={self.info!r})"
        )

    @property
    def centroid(self) -> Vector:
        """The body's centre of mass; assigning it translates the shape."""
        return self._centroid

    @centroid.setter
    def centroid(self, position: Vector) -> None:
        polygon_translate(self._shape, position - self._centroid)
        self._centroid = position

    @property
    def is_removed(self) -> bool:
        """Whether :meth:`remove` has been called."""
        return self._removed

    def get_shape(self) -> List[Vector]:
        """Return a fresh list of the body's current vertices."""
        return list(self._shape)

    def set_shape(self, shape: Sequence[Vector]) -> None:
        """Replace the body's vertices and recompute its centroid."""
        new_shape = list(shape)
        self._centroid = polygon_centroid(new_shape)
        self._shape = new_shape

    def set_rotation(self, angle: float) -> None:
        """Rotate the body about its centroid to the absolute ``angle``."""
        polygon_rotate(self._shape, angle - self.angle, self._centroid)
        self.angle = angle

    def set_rotation_relative(self, angle: float) -> None:
        """Rotate the body about its centroid by ``angle`` and record it as the angle."""
        polygon_rotate(self._shape, angle, self._centroid)
        self.angle = angle

    def add_force(self, force: Vector) -> None:
        """Accumulate a force to be applied over the next tick."""
        self._forces = self._forces + force

    def add_impulse(self, impulse: Vector) -> None:
        """Accumulate an impulse to be applied at the next tick."""
        self._impulses = self._impulses + impulse

    def tick(self, dt: float) -> None:
        """Advance the body by ``dt`` seconds using the accumulated forces and impulses.

        The body moves at the average of its velocities before and after the tick;
        the accumulated forces and impulses are then cleared.
        """
        delta_v = Vector(
            self._forces.x / self.mass * dt + self._impulses.x / self.mass,
            self._forces.y / self.mass * dt + self._impulses.y / self.mass,
        )
        self._forces = VEC_ZERO
        self._impulses = VEC_ZERO
        previous = self.velocity
        self.velocity = previous + delta_v
        translation = dt * (0.5 * (previous + self.velocity))
        self.centroid = self._centroid + translation

    def remove(self) -> None:
        """Mark the body for removal from its scene."""
        self._removed = True

    def set_collision(self, value: bool, other: Optional[Body]) -> None:
        """Record whether the body is colliding and, if given, with which body."""
        self.in_collision = value
        if other is not None:
            self._collision_body = other

    def collision_body(self) -> Optional[Body]:
        """Return the body last collided with, or None when not in collision."""
        if not self.in_collision:
            return None
        return self._collision_body


def find_edges(shape: Sequence[Vector]) -> List[Vector]:
    """Return the edge vectors between consecutive vertices (the closing edge is omitted)."""
    return [nxt - cur for cur, nxt in pairwise(shape)]


def find_axes(edges: Sequence[Vector]) -> List[Vector]:
    """Return the unit normal ``(e.y, -e.x) / |e|`` of each edge."""
    return [Vector(edge.y, -edge.x).unit() for edge in edges]


def project_on_axis(shape: Sequence[Vector], axis: Vector) -> Tuple[float, float]:
    """Return the (min, max) of the vertices projected onto the direction of ``axis``."""
    direction = axis.unit()
    low = math.inf
    high = -math.inf
    for point in shape:
        value = direction.dot(point)
        low = min(value, low)
        high = max(value, high)
    return low, high


def check_overlap_axis(
    shape1: Sequence[Vector], shape2: Sequence[Vector], axis: Vector
) -> Optional[float]:
    """Return how far the projections of two shapes on ``axis`` overlap, or None if they do not."""
    proj1 = project_on_axis(shape1, axis)
    proj2 = project_on_axis(shape2, axis)
    if is_overlapping(proj1, proj2):
        return amount_overlapping(proj1, proj2)
    return None