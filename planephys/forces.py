"""Force creators and collision handlers that act on bodies in a scene."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from planephys.body import Body
from planephys.collision import find_collision
from planephys.polygon import polygon_area
from planephys.scene import Scene
from planephys.vector import VEC_ZERO, Vector

__all__ = [
    "CollisionHandler",
    "create_newtonian_gravity",
    "create_spring",
    "create_drag",
    "create_buoyancy",
    "create_duck_gravity",
    "create_collision",
    "create_destructive_collision",
    "create_physics_collision",
    "apply_impulse",
]

CollisionHandler = Callable[[Body, Body, Vector, Any], None]

# Gravity is switched off below this separation to avoid blow-up.
_MIN_GRAVITY_DISTANCE = 5.0
# Depth of the body, turning its area into a displaced volume.
_CONSTANT_DIMENSION = 2


def _gravity_force(G: float, body1: Body, body2: Body) -> Vector:
    """Return the gravitational force on ``body1`` due to ``body2``."""
    center1 = body1.centroid
    center2 = body2.centroid
    dist = center1.distance(center2)
    if dist < _MIN_GRAVITY_DISTANCE:
        return VEC_ZERO
    magnitude = G * body1.mass * body2.mass / (dist * dist)
    return Vector(
        magnitude * (center2.x - center1.x) / dist,
        magnitude * (center2.y - center1.y) / dist,
    )


def _spring_force(k: float, body1: Body, body2: Body) -> Vector:
    """Return the Hooke's-law force on ``body1`` pulling it towards ``body2``."""
    return k * (body2.centroid - body1.centroid)


def _buoyancy_force(
    G: float, body: Body, p: float, water_level: float
) -> Optional[Vector]:
    """Return the buoyant force on a submerged body, or None above the water."""
    center = body.centroid
    if center.y >= water_level:
        return None
    volume = _CONSTANT_DIMENSION * polygon_area(body.get_shape())
    magnitude = volume * p * G
    return Vector(center.x, magnitude * center.y)


def create_newtonian_gravity(scene: Scene, G: float, body1: Body, body2: Body) -> None:
    """Add mutual Newtonian gravity between two bodies."""

    def forcer() -> None:
        force = _gravity_force(G, body1, body2)
        body1.add_force(force)
        body2.add_force(-force)

    scene.add_force_creator(forcer, (body1, body2))


def create_spring(scene: Scene, k: float, body1: Body, body2: Body) -> None:
    """Add a zero-length spring with constant ``k`` between two bodies."""

    def forcer() -> None:
        force = _spring_force(k, body1, body2)
        body1.add_force(force)
        body2.add_force(-force)

    scene.add_force_creator(forcer, (body1, body2))


def create_drag(scene: Scene, gamma: float, body: Body) -> None:
    """Add a drag force proportional to the body's velocity, opposing it."""

    def forcer() -> None:
        body.add_force(-(gamma * body.velocity))

    scene.add_force_creator(forcer, (body,))


def create_buoyancy(
    scene: Scene, G: float, body: Body, p: float, water_level: float
) -> None:
    """Add a buoyancy force acting on ``body`` while its centroid is below the water."""

    def forcer() -> None:
        force = _buoyancy_force(G, body, p, water_level)
        if force is not None:
            body.add_force(force)

    scene.add_force_creator(forcer, (body,))


def create_duck_gravity(
    scene: Scene, G: float, water_level: float, body1: Body, body2: Body
) -> None:
    """Add gravity between two bodies that acts only while ``body1`` is above the water."""

    def forcer() -> None:
        force = _gravity_force(G, body1, body2)
        if body1.centroid.y > water_level:
            body1.add_force(force)
            body2.add_force(-force)

    scene.add_force_creator(forcer, (body1, body2))


@dataclass
class _CollisionWatcher:
    body1: Body
    body2: Body
    handler: CollisionHandler
    aux: Any = None
    colliding: bool = field(default=False)

    def __call__(self) -> None:
        info = find_collision(self.body1.get_shape(), self.body2.get_shape())
        if info.collided and not self.colliding:
            self.colliding = True
            self.body1.set_collision(True, self.body2)
            self.body2.set_collision(True, self.body1)
            assert info.axis is not None
            self.handler(self.body1, self.body2, info.axis, self.aux)
        elif not info.collided and self.colliding:
            self.colliding = False


def create_collision(
    scene: Scene,
    body1: Body,
    body2: Body,
    handler: CollisionHandler,
    aux: Any = None,
) -> None:
    """Call ``handler(body1, body2, axis, aux)`` once each time the bodies start colliding."""
    scene.add_force_creator(_CollisionWatcher(body1, body2, handler, aux), (body1, body2))


def _destructive_handler(body1: Body, body2: Body, axis: Vector, aux: Any) -> None:
    body1.remove()
    body2.remove()


def create_destructive_collision(scene: Scene, body1: Body, body2: Body) -> None:
    """Remove both bodies when they collide."""
    create_collision(scene, body1, body2, _destructive_handler, scene)


def _physics_handler(body1: Body, body2: Body, axis: Vector, elasticity: float) -> None:
    apply_impulse(body1, body2, axis, elasticity)


def create_physics_collision(
    scene: Scene, elasticity: float, body1: Body, body2: Body
) -> None:
    """Resolve collisions between two bodies with impulses of the given elasticity."""
    create_collision(scene, body1, body2, _physics_handler, elasticity)


def apply_impulse(body1: Body, body2: Body, axis: Vector, elasticity: float) -> None:
    """Apply equal and opposite collision impulses along ``axis``.

    A body of infinite mass acts as an immovable wall.
    """
    mass1 = body1.mass
    mass2 = body2.mass
    vel_dif = body2.velocity.dot(axis) - body1.velocity.dot(axis)
    if mass1 == math.inf:
        reduced_mass = mass2
    elif mass2 == math.inf:
        reduced_mass = mass1
    else:
        reduced_mass = mass1 * mass2 / (mass1 + mass2)
    impulse = (reduced_mass * (elasticity + 1) * vel_dif) * axis
    body1.add_impulse(impulse)
    body2.add_impulse(-impulse)