import math
import random

import pytest

from rtengine.aabb import aabb_from_points
from rtengine.bvh import BVHNode
from rtengine.hittable import Hittable, HitRecord, HittableList
from rtengine.interval import Interval
from rtengine.ray import Ray
from rtengine.vec3 import Vec3


class _Square(Hittable):
    """A unit square in the plane z = depth centred on (cx, 0)."""

    def __init__(self, cx, depth, label="", weight=0.0):
        self.cx = cx
        self.depth = depth
        self.label = label
        self.weight = weight

    def bounding_box(self):
        return aabb_from_points(
            Vec3(self.cx - 0.5, -0.5, self.depth), Vec3(self.cx + 0.5, 0.5, self.depth)
        )

    def hit(self, ray, t_values):
        if ray.direction.z == 0:
            return None
        t = (self.depth - ray.origin.z) / ray.direction.z
        if not t_values.surrounds(t):
            return None
        point = ray.at(t)
        if abs(point.x - self.cx) > 0.5 or abs(point.y) > 0.5:
            return None
        return HitRecord(point=point, t=t, material=self.label)

    def pdf_value(self, origin, direction):
        return self.weight

    def random(self, origin):
        return Vec3(self.cx, self.depth, 0)


def _squares():
    return [_Square(cx, cx % 3 + 1, label=f"s{cx}") for cx in range(-3, 4)] + [
        _Square(0.25, 5, label="back"),
        _Square(-1.25, 0.5, label="front"),
    ]


def test_hits_match_linear_search():
    squares = _squares()
    world = HittableList(*squares)
    tree = BVHNode(squares)
    hits = 0
    for step in range(-40, 41):
        for y in (-0.4, 0.1, 0.6):
            ray = Ray(Vec3(step / 10, y, -10), Vec3(0.01, 0, 1))
            expected = world.hit(ray, Interval(0.001, math.inf))
            actual = tree.hit(ray, Interval(0.001, math.inf))
            if expected is None:
                assert actual is None
            else:
                hits += 1
                assert actual.t == pytest.approx(expected.t)
                assert actual.material == expected.material
    assert hits > 0


def test_nearer_object_wins():
    tree = BVHNode([_Square(0, 3, label="far"), _Square(0, 1, label="near"), _Square(5, 2)])
    record = tree.hit(Ray(Vec3(0, 0, -10), Vec3(0, 0, 1)), Interval(0.001, math.inf))
    assert record.material == "near"


def test_ray_outside_box_misses():
    tree = BVHNode(_squares())
    assert tree.hit(Ray(Vec3(100, 100, -10), Vec3(0, 0, 1)), Interval(0.001, math.inf)) is None


def test_bounding_box_matches_list():
    squares = _squares()
    assert BVHNode(squares).bounding_box() == HittableList(*squares).bounding_box()


def test_builds_from_list_without_reordering_it():
    squares = _squares()
    random.seed(3)
    random.shuffle(squares)
    world = HittableList(*squares)
    BVHNode(world)
    assert list(world) == squares


def test_empty_input_raises():
    with pytest.raises(ValueError):
        BVHNode([])


def test_single_object_pdf_value():
    tree = BVHNode([_Square(0, 1, weight=0.25)])
    assert tree.pdf_value(Vec3(0, 0, 0), Vec3(0, 0, 1)) == pytest.approx(0.25)


def test_two_object_pdf_value_is_average():
    tree = BVHNode([_Square(0, 1, weight=0.2), _Square(2, 1, weight=0.6)])
    assert tree.pdf_value(Vec3(0, 0, 0), Vec3(0, 0, 1)) == pytest.approx(0.4)


def test_random_chooses_from_children():
    random.seed(5)
    squares = [_Square(0, 1), _Square(2, 2)]
    tree = BVHNode(squares)
    draws = {tree.random(Vec3(0, 0, 0)) for _ in range(200)}
    assert draws == {sq.random(Vec3(0, 0, 0)) for sq in squares}