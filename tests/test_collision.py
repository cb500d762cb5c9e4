import math

import pytest

from planephys.collision import CollisionInfo, find_collision
from planephys.polygon import polygon_translate, rect_init
from planephys.vector import Vector


def _square_at(offset):
    shape = rect_init(2, 2)
    polygon_translate(shape, offset)
    return shape


def test_identical_squares_collide():
    info = find_collision(rect_init(2, 2), rect_init(2, 2))
    assert info.collided is True
    assert bool(info) is True


def test_overlapping_squares_collide_along_x():
    info = find_collision(rect_init(2, 2), _square_at(Vector(1.5, 0.0)))
    assert info.collided
    assert info.axis.x == pytest.approx(-1.0)
    assert info.axis.y == pytest.approx(0.0)


def test_separated_squares_do_not_collide():
    info = find_collision(rect_init(2, 2), _square_at(Vector(2.5, 0.0)))
    assert info.collided is False
    assert info.axis is None
    assert not info


def test_touching_squares_count_as_colliding():
    info = find_collision(rect_init(2, 2), _square_at(Vector(2.0, 0.0)))
    assert info.collided


@pytest.mark.parametrize(
    "offset",
    [Vector(0.5, 0.3), Vector(-1.2, 0.7), Vector(0.1, -1.9), Vector(1.0, 1.0)],
)
def test_collision_axis_is_unit_length(offset):
    info = find_collision(rect_init(2, 2), _square_at(offset))
    assert info.collided
    assert info.axis.magnitude() == pytest.approx(1.0)


@pytest.mark.parametrize(
    "offset", [Vector(0.5, 0.3), Vector(3.0, 0.0), Vector(0.0, -4.0)]
)
def test_collision_is_symmetric_in_outcome(offset):
    a = rect_init(2, 2)
    b = _square_at(offset)
    assert find_collision(a, b).collided == find_collision(b, a).collided


def test_rotated_square_far_away_does_not_collide():
    square = rect_init(2, 2)
    diamond = [p.rotate(math.pi / 4) + Vector(0.0, 10.0) for p in rect_init(2, 2)]
    assert not find_collision(square, diamond).collided


def test_inputs_are_not_modified():
    a = rect_init(2, 2)
    b = _square_at(Vector(1.0, 0.0))
    a_copy, b_copy = list(a), list(b)
    find_collision(a, b)
    assert a == a_copy
    assert b == b_copy


def test_empty_shape_raises():
    with pytest.raises(ValueError):
        find_collision([], rect_init(2, 2))


def test_single_points_raise():
    with pytest.raises(ValueError):
        find_collision([Vector(0.0, 0.0)], [Vector(0.0, 0.0)])


def test_collision_info_default_axis():
    assert CollisionInfo(False).axis is None