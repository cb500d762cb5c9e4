import math

import pytest

from planephys.color import white_color
from planephys.polygon import (
    Polygon,
    polygon_area,
    polygon_centroid,
    polygon_rotate,
    polygon_translate,
    rect_init,
)
from planephys.vector import VEC_ZERO, Vector


def close(v, w):
    return tuple(v) == pytest.approx(tuple(w), abs=1e-9)


def test_rect_vertices_order():
    rect = rect_init(4.0, 2.0)
    assert rect[0] == Vector(4.0 / 2, 2.0 / 2)
    assert rect[2] == -rect[0]
    assert len(rect) == 4


def test_rect_area_and_centroid():
    rect = rect_init(4.0, 2.5)
    assert polygon_area(rect) == pytest.approx(4.0 * 2.5)
    assert close(polygon_centroid(rect), VEC_ZERO)


def test_triangle_area_pinned():
    triangle = [Vector(0, 0), Vector(4, 0), Vector(0, 3)]
    assert polygon_area(triangle) == 6


def test_area_independent_of_orientation():
    rect = rect_init(3.0, 5.0)
    assert polygon_area(list(reversed(rect))) == pytest.approx(polygon_area(rect))


def test_translate_moves_centroid():
    rect = rect_init(2.0, 6.0)
    shift = Vector(10.0, -3.0)
    polygon_translate(rect, shift)
    assert close(polygon_centroid(rect), shift)
    assert polygon_area(rect) == pytest.approx(2.0 * 6.0)


def test_translate_mutates_same_list():
    rect = rect_init(1.0, 1.0)
    alias = rect
    polygon_translate(rect, Vector(1.0, 1.0))
    assert alias is rect
    assert alias[0] == Vector(1.5, 1.5)


def test_clockwise_centroid_is_sign_flipped():
    rect = rect_init(2.0, 2.0)
    polygon_translate(rect, Vector(5.0, 7.0))
    centroid = polygon_centroid(list(reversed(rect)))
    assert centroid.x == pytest.approx(-5.0)
    assert centroid.y == pytest.approx(-7.0)


def test_rotate_preserves_area_and_full_turn_restores():
    rect = rect_init(3.0, 1.0)
    polygon_translate(rect, Vector(2.0, 2.0))
    original = list(rect)
    pivot = Vector(-1.0, 4.0)
    polygon_rotate(rect, 0.9, pivot)
    assert polygon_area(rect) == pytest.approx(polygon_area(original))
    polygon_rotate(rect, 2 * math.pi - 0.9, pivot)
    assert all(close(a, b) for a, b in zip(rect, original))


def test_rotate_about_centroid_keeps_centroid():
    rect = rect_init(3.0, 1.0)
    shift = Vector(4.0, -2.0)
    polygon_translate(rect, shift)
    polygon_rotate(rect, 1.2, shift)
    centroid = polygon_centroid(rect)
    assert centroid.x == pytest.approx(4.0)
    assert centroid.y == pytest.approx(-2.0)


def test_degenerate_polygon_centroid_raises():
    with pytest.raises(ValueError):
        polygon_centroid([])
    with pytest.raises(ValueError):
        polygon_centroid([Vector(0, 0), Vector(1, 1), Vector(2, 2)])


def test_all_at_right():
    poly = Polygon(white_color(), rect_init(2.0, 2.0))
    polygon_translate(poly.points, Vector(5.0, 0.0))
    assert poly.all_at_right(Vector(4.0, 0.0))
    assert not poly.all_at_right(Vector(4.5, 0.0))


def test_one_at_bottom():
    poly = Polygon(white_color(), rect_init(2.0, 2.0), Vector(1.0, 0.0))
    assert poly.one_at_bottom(Vector(0.0, -1.0))
    assert not poly.one_at_bottom(Vector(0.0, -1.5))
    assert poly.velocity == Vector(1.0, 0.0)