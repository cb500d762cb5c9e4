"""Two-dimensional rigid-body physics: vectors, colours, polygons, bodies, collisions, scenes and forces."""

__version__ = "0.1.0"

__all__ = ["vector", "color", "polygon", "body", "collision", "scene", "forces"]