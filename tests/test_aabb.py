import math

import pytest

from rtengine.aabb import (
    EMPTY_AABB,
    UNIVERSE_AABB,
    aabb_from_points,
    axis_key,
    bbox_compare,
    surrounding_box,
)
from rtengine.interval import Interval
from rtengine.ray import Ray
from rtengine.vec3 import Vec3


class _Thing:
    def __init__(self, box):
        self.box = box

    def bounding_box(self):
        return self.box


def _unit_box():
    return aabb_from_points(Vec3(0, 0, 0), Vec3(1, 1, 1))


def test_from_points_orders_each_axis():
    box = aabb_from_points(Vec3(2, -1, 5), Vec3(0, 3, 1))
    assert box.x == Interval(0, 2)
    assert box.y == Interval(-1, 3)
    assert box.z == Interval(1, 5)


def test_thin_axis_is_padded():
    box = aabb_from_points(Vec3(0, 0, 0), Vec3(1, 1, 0))
    assert box.z.size() == pytest.approx(0.0001)
    assert box.z.contains(0)
    assert box.x == Interval(0, 1)


def test_axis_interval_selects_axis():
    box = aabb_from_points(Vec3(0, 10, 20), Vec3(1, 12, 23))
    assert box.axis_interval(0) == box.x
    assert box.axis_interval(1) == box.y
    assert box.axis_interval(2) == box.z
    assert box.axis_interval(7) == box.x


@pytest.mark.parametrize("corner", [Vec3(3, 1, 1), Vec3(1, 5, 2), Vec3(1, 1, 4)])
def test_longest_axis_has_largest_size(corner):
    box = aabb_from_points(Vec3(0, 0, 0), corner)
    sizes = [box.axis_interval(i).size() for i in range(3)]
    assert box.axis_interval(box.longest_axis()).size() == max(sizes)


def test_longest_axis_tie_goes_to_z():
    box = aabb_from_points(Vec3(0, 0, 0), Vec3(2, 2, 2))
    assert box.longest_axis() == 2


def test_ray_towards_box_hits():
    ray = Ray(Vec3(-5, 0.5, 0.5), Vec3(1, 0, 0))
    assert _unit_box().hit(ray, Interval(0, math.inf)) is True


def test_ray_away_from_box_misses():
    ray = Ray(Vec3(-5, 0.5, 0.5), Vec3(-1, 0, 0))
    assert _unit_box().hit(ray, Interval(0, math.inf)) is False


def test_ray_beside_box_misses():
    ray = Ray(Vec3(-5, 2, 0.5), Vec3(1, 0, 0))
    assert _unit_box().hit(ray, Interval(0, math.inf)) is False


def test_interval_limits_hit():
    ray = Ray(Vec3(-5, 0.5, 0.5), Vec3(1, 0, 0))
    assert _unit_box().hit(ray, Interval(0, 1)) is False


def test_origin_inside_box_hits():
    ray = Ray(Vec3(0.5, 0.5, 0.5), Vec3(0, 0, 1))
    assert _unit_box().hit(ray, Interval(0, math.inf)) is True


def test_universe_box_is_always_hit():
    ray = Ray(Vec3(3, -7, 2), Vec3(0.3, 0.1, -0.2))
    assert UNIVERSE_AABB.hit(ray, Interval(0.001, math.inf)) is True


def test_surrounding_box_encloses_both():
    b1 = _unit_box()
    b2 = aabb_from_points(Vec3(2, -1, 3), Vec3(4, 0.5, 5))
    box = surrounding_box(b1, b2)
    assert box.x == Interval(0, 4)
    assert box.y == Interval(-1, 1)
    assert box.z == Interval(0, 5)


def test_surrounding_with_empty_is_identity():
    box = aabb_from_points(Vec3(-1, 2, 3), Vec3(4, 5, 9))
    assert surrounding_box(EMPTY_AABB, box) == box
    assert surrounding_box(box, EMPTY_AABB) == box


def test_offset_moves_box():
    moved = _unit_box() + Vec3(1, 2, 3)
    assert moved.x == Interval(1, 2)
    assert moved.y == Interval(2, 3)
    assert moved.z == Interval(3, 4)
    assert Vec3(1, 2, 3) + _unit_box() == moved


def test_bbox_compare_per_axis():
    a = _Thing(_unit_box())
    b = _Thing(aabb_from_points(Vec3(2, -3, 0.5), Vec3(3, -2, 1)))
    assert bbox_compare(a, b, 0) is True
    assert bbox_compare(b, a, 0) is False
    assert bbox_compare(a, b, 1) is False
    assert bbox_compare(b, a, 1) is True


def test_axis_key_sorts_by_box_start():
    a = _Thing(_unit_box())
    b = _Thing(aabb_from_points(Vec3(2, -3, 0.5), Vec3(3, -2, 1)))
    assert sorted([b, a], key=axis_key(0)) == [a, b]
    assert sorted([a, b], key=axis_key(1)) == [b, a]