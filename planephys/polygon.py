"""Polygon geometry on lists of vertices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from planephys.color import RGBColor
from planephys.vector import VEC_ZERO, Vector

__all__ = [
    "Polygon",
    "polygon_area",
    "polygon_centroid",
    "polygon_translate",
    "polygon_rotate",
    "rect_init",
]


def _edges(points: List[Vector]):
    """Yield (previous, current) vertex pairs, closing the loop."""
    return zip(points[-1:] + points[:-1], points)


def polygon_area(points: List[Vector]) -> float:
    """Return the (unsigned) area of a polygon by the shoelace formula."""
    total = sum((p1.x + p2.x) * (p1.y - p2.y) for p1, p2 in _edges(points))
    return abs(total / 2.0)


def polygon_centroid(points: List[Vector]) -> Vector:
    """Return the centroid of a polygon whose vertices run counterclockwise."""
    area = polygon_area(points)
    if area == 0:
        raise ValueError("polygon has zero area")
    x_sum = 0.0
    y_sum = 0.0
    for p1, p2 in _edges(points):
        cross = p1.x * p2.y - p2.x * p1.y
        x_sum += (p1.x + p2.x) * cross
        y_sum += (p1.y + p2.y) * cross
    return Vector(x_sum / (6.0 * area), y_sum / (6.0 * area))


def polygon_translate(points: List[Vector], translation: Vector) -> None:
    """Move every vertex by ``translation``, in place."""
    points[:] = [p + translation for p in points]


def polygon_rotate(points: List[Vector], angle: float, point: Vector) -> None:
    """Rotate every vertex counterclockwise by ``angle`` about ``point``, in place."""
    points[:] = [point + (p - point).rotate(angle) for p in points]


def rect_init(width: float, height: float) -> List[Vector]:
    """Return the vertices of a rectangle centred on the origin, counterclockwise."""
    half_width = Vector(width / 2, 0.0)
    half_height = Vector(0.0, height / 2)
    top_right = half_width + half_height
    return [
        top_right,
        half_height - half_width,
        -top_right,
        half_width - half_height,
    ]


@dataclass
class Polygon:
    """A coloured polygon with a velocity."""

    color: RGBColor
    points: List[Vector] = field(default_factory=list)
    velocity: Vector = VEC_ZERO

    def all_at_right(self, right: Vector) -> bool:
        """Return whether no vertex lies left of ``right.x``."""
        return all(p.x >= right.x for p in self.points)

    def one_at_bottom(self, bottom: Vector) -> bool:
        """Return whether some vertex lies at or below ``bottom.y``."""
        return any(p.y <= bottom.y for p in self.points)