"""Separating-axis collision detection between convex polygons."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from planephys.body import check_overlap_axis, find_axes, find_edges
from planephys.vector import Vector

__all__ = ["CollisionInfo", "find_collision"]


@dataclass(frozen=True)
class CollisionInfo:
    """Whether two shapes collide and, if they do, the unit axis of least overlap."""

    collided: bool
    axis: Optional[Vector] = None

    def __bool__(self) -> bool:
        return self.collided


def find_collision(shape1: Sequence[Vector], shape2: Sequence[Vector]) -> CollisionInfo:
    """Test two convex polygons for collision with the separating-axis theorem.

    The candidate axes are the edge normals of both shapes. If the projections
    overlap on every axis the shapes collide, and the axis with the smallest
    overlap (the first one found on ties) is reported as a unit vector.
    """
    if not shape1 or not shape2:
        raise ValueError("both shapes need at least one vertex")

    axes = find_axes(find_edges(shape1)) + find_axes(find_edges(shape2))
    if not axes:
        raise ValueError("the shapes have no edges to test against")

    min_overlap = math.inf
    collision_axis: Optional[Vector] = None
    for axis in axes:
        overlap = check_overlap_axis(shape1, shape2, axis)
        if overlap is None:
            return CollisionInfo(False)
        if overlap < min_overlap:
            min_overlap = overlap
            collision_axis = axis

    assert collision_axis is not None
    return CollisionInfo(True, collision_axis.unit())