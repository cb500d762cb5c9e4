"""Two-dimensional real vectors and one-dimensional interval helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Sequence, Union

__all__ = ["Vector", "VEC_ZERO", "is_overlapping", "amount_overlapping"]


@dataclass(frozen=True)
class Vector:
    """An immutable planar vector; positive x is right, positive y is up."""

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self + (-other)

    def __neg__(self) -> Vector:
        return self * -1

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(scalar * self.x, scalar * self.y)

    def __rmul__(self, scalar: float) -> Vector:
        return self.__mul__(scalar)

    def dot(self, other: Vector) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector) -> float:
        """Return the z-component of the cross product with ``other``."""
        return self.x * other.y - self.y * other.x

    def rotate(self, angle: float) -> Vector:
        """Return this vector rotated counterclockwise by ``angle`` radians about the origin."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )

    def distance(self, other: Vector) -> float:
        """Return the Euclidean distance to ``other``."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def magnitude(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def unit(self) -> Vector:
        """Return the vector of length one pointing the same way."""
        mag = self.magnitude()
        if mag == 0:
            raise ValueError("the zero vector has no direction")
        return Vector(self.x / mag, self.y / mag)


VEC_ZERO = Vector(0.0, 0.0)

Interval = Union[Vector, Sequence[float]]


def is_overlapping(interval1: Interval, interval2: Interval) -> bool:
    """Return whether two closed intervals ``(low, high)`` intersect."""
    low1, high1 = interval1
    low2, high2 = interval2
    return max(low1, low2) <= min(high1, high2)


def amount_overlapping(interval1: Interval, interval2: Interval) -> float:
    """Return the length of the overlap of two intervals (negative if disjoint)."""
    low1, high1 = interval1
    low2, high2 = interval2
    return min(high1, high2) - max(low1, low2)