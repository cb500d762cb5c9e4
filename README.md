# planephys

A small two-dimensional rigid-body physics engine. Bodies are polygons with
uniform density; they accumulate forces and impulses during a tick and move at
the average of their old and new velocities. A scene holds bodies and force
creators (gravity, springs, drag, buoyancy, collisions) and advances them
together. It has no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Modules

- `planephys.vector` – `Vector`, an immutable 2-D dataclass with `+`, `-`,
  unary `-`, scalar `*` (either side), `dot`, `cross`, `rotate`, `distance`,
  `magnitude` and `unit` (which raises `ValueError` for the zero vector). It
  unpacks as `x, y`. `VEC_ZERO` is the zero vector. `is_overlapping` and
  `amount_overlapping` work on closed `(low, high)` intervals.
- `planephys.color` – `RGBColor`, whose components must lie in `[0, 1]`
  (otherwise `ValueError`), and the helpers `rand_color`, `rand_purple_color`
  (both take an optional `random.Random`) and `white_color`.
- `planephys.polygon` – functions on lists of `Vector` vertices:
  `polygon_area` (shoelace, unsigned), `polygon_centroid` (raises
  `ValueError` for zero area), `polygon_translate` and `polygon_rotate`
  (both change the list in place), and `rect_init`, which returns the four
  corners of a rectangle centred on the origin. The `Polygon` dataclass holds
  a colour, points and velocity, with `all_at_right` and `one_at_bottom`.
- `planephys.body` – `Body(shape, mass, color, info=None, image_path=None)`.
  The mass must be positive; `math.inf` makes the body immovable. Assigning
  `centroid` translates the shape; `velocity`, `color`, `info`, `angle` and
  `in_collision` are plain attributes. Methods: `get_shape`, `set_shape`,
  `set_rotation`, `set_rotation_relative`, `add_force`, `add_impulse`,
  `tick`, `remove` (see `is_removed`), `set_collision` and
  `collision_body`. Also the separating-axis helpers `find_edges` (edges
  between consecutive vertices, without the closing edge), `find_axes`,
  `project_on_axis` and `check_overlap_axis` (returns the overlap, or `None`
  when the projections are disjoint).
- `planephys.collision` – `find_collision(shape1, shape2)` returns a
  `CollisionInfo` with `collided` and, on a hit, the unit `axis` of least
  overlap. A `CollisionInfo` is truthy exactly when the shapes collide.
- `planephys.scene` – `Scene` supports `len()`, indexing and iteration, plus
  `add_body`, `remove_body` (marks the body for removal), `get_index`,
  `add_force_creator(forcer, bodies=None)`, `remove_last_force` and `tick`.
  A force creator is any callable taking no arguments.
- `planephys.forces` – `create_newtonian_gravity` (switched off when the
  bodies are closer than 5 units), `create_spring`, `create_drag`,
  `create_buoyancy`, `create_duck_gravity`, `create_collision`,
  `create_destructive_collision`, `create_physics_collision` and
  `apply_impulse`. A collision handler is called as
  `handler(body1, body2, axis, aux)` once each time the two bodies start to
  collide.

## Example

```python
from planephys.body import Body
from planephys.color import RGBColor
from planephys.forces import create_newtonian_gravity, create_physics_collision
from planephys.polygon import rect_init
from planephys.scene import Scene
from planephys.vector import Vector

scene = Scene()

ball = Body(rect_init(2, 2), 2.0, RGBColor(1, 0, 0))
ball.centroid = Vector(40, 70)
ball.velocity = Vector(0, -8)

ground = Body(rect_init(80, 1), float("inf"), RGBColor(0, 0, 1))
ground.centroid = Vector(40, 0.5)

earth = Body(rect_init(1, 1), 6e24, RGBColor(0, 0, 1))
earth.centroid = Vector(40, -6.38e6)

for body in (ball, ground, earth):
    scene.add_body(body)

create_newtonian_gravity(scene, 6.67e-11, earth, ball)
create_physics_collision(scene, 0.7, ball, ground)

for _ in range(600):
    scene.tick(1 / 60)

print(ball.centroid, ball.velocity)
```

Bodies with infinite mass never move, which makes them suitable for walls and
floors. Calling `remove()` on a body takes it, and every force creator tied
to it, out of the scene at the end of the next tick.

## What it does not do

The package only simulates. It opens no window, draws nothing, plays no
sound and reads no input; `Body.image_path` and `Body.color` are stored for
whoever renders the scene but are not used by the package itself. There is
no command-line program: drive a `Scene` from your own loop, passing the
elapsed time to `tick`.