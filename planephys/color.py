"""RGB colours with components in the unit interval."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

__all__ = ["RGBColor", "rand_color", "rand_purple_color", "white_color"]


@dataclass(frozen=True)
class RGBColor:
    """A colour given by red, green and blue components between 0 and 1."""

    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        for name, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"colour component {name}={value} outside [0, 1]")


def rand_color(rng: Optional[random.Random] = None) -> RGBColor:
    """Return a colour with uniformly random components."""
    source = rng if rng is not None else random
    return RGBColor(source.random(), source.random(), source.random())


def rand_purple_color(rng: Optional[random.Random] = None) -> RGBColor:
    """Return a random colour blended halfway towards pure blue."""
    base = rand_color(rng)
    return RGBColor(base.r / 2, base.g / 2, (base.b + 1) / 2)


def white_color() -> RGBColor:
    """Return white."""
    return RGBColor(1.0, 1.0, 1.0)