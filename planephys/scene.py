"""A collection of bodies and the force creators that act on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from planephys.body import Body

__all__ = ["ForceCreator", "Scene"]

ForceCreator = Callable[[], None]


@dataclass(frozen=True)
class _ForceEntry:
    forcer: ForceCreator
    bodies: Tuple[Body, ...]

    def involves(self, body: Body) -> bool:
        return any(member is body for member in self.bodies)


class Scene:
    """Bodies plus force creators that run once per tick.

    A force creator registered with a set of bodies is dropped as soon as any
    of those bodies leaves the scene.
    """

    def __init__(self) -> None:
        self._bodies: List[Body] = []
        self._forces: List[_ForceEntry] = []

    def __len__(self) -> int:
        return len(self._bodies)

    def __getitem__(self, index: int) -> Body:
        return self._bodies[index]

    def __iter__(self) -> Iterator[Body]:
        return iter(list(self._bodies))

    def add_body(self, body: Body) -> None:
        """Append a body to the scene."""
        self._bodies.append(body)

    def remove_body(self, index: int) -> None:
        """Mark the body at ``index`` for removal at the end of its next tick."""
        self._bodies[index].remove()

    def get_index(self, body: Body) -> int:
        """Return the index of ``body`` (its last occurrence) in the scene."""
        for index in range(len(self._bodies) - 1, -1, -1):
            if self._bodies[index] is body:
                return index
        raise ValueError("body is not in the scene")

    def add_force_creator(
        self, forcer: ForceCreator, bodies: Optional[Iterable[Body]] = None
    ) -> None:
        """Register ``forcer`` to be called every tick, tied to ``bodies`` if given."""
        self._forces.append(_ForceEntry(forcer, tuple(bodies or ())))

    def remove_last_force(self) -> None:
        """Drop the most recently registered force creator."""
        if not self._forces:
            raise IndexError("the scene has no force creators")
        self._forces.pop()

    def tick(self, dt: float) -> None:
        """Run every force creator, then advance each body and drop removed ones."""
        # Iterating the live list lets creators added during this pass run too.
        for entry in self._forces:
            entry.forcer()
        for body in list(self._bodies):
            body.tick(dt)
            if body.is_removed:
                self._discard(body)

    def _discard(self, body: Body) -> None:
        self._forces = [entry for entry in self._forces if not entry.involves(body)]
        self._bodies = [member for member in self._bodies if member is not body]