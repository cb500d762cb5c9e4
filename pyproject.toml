[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planephys"
version = "0.1.0"
description = "A small two-dimensional rigid-body physics engine: vectors, polygons, bodies, forces, collisions and scenes."
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "2d", "rigid body", "collision", "simulation", "polygon"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["planephys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
