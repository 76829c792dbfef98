"""Bounding volume hierarchy over a set of hittables."""

from __future__ import annotations

from collections.abc import Iterable

from .aabb import AABB, EMPTY_AABB, axis_key, surrounding_box
from .hittable import Hittable, HitRecord
from .interval import Interval
from .ray import Ray
from .vec3 import Point3, Vec3, random_int


class BVHNode(Hittable):
    """A binary tree of bounding boxes that skips objects a ray cannot reach."""

    def __init__(self, objects: Iterable[Hittable]) -> None:
        items = list(objects)
        if not items:
            raise ValueError("cannot build a bounding volume hierarchy from no objects")

        bbox = EMPTY_AABB
        for obj in items:
            bbox = surrounding_box(bbox, obj.bounding_box())
        self._bbox = bbox

        self.left: Hittable
        self.right: Hittable
        if len(items) == 1:
            self.left = self.right = items[0]
        elif len(items) == 2:
            self.left, self.right = items
        else:
            items.sort(key=axis_key(bbox.longest_axis()))
            mid = len(items) // 2
            self.left = BVHNode(items[:mid])
            self.right = BVHNode(items[mid:])

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, ray: Ray, t_values: Interval) -> HitRecord | None:
        if not self._bbox.hit(ray, t_values):
            return None
        left = self.left.hit(ray, t_values)
        right = self.right.hit(
            ray, Interval(t_values.min, left.t if left is not None else t_values.max)
        )
        return right if right is not None else left

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        """The average of the two children's densities."""
        return 0.5 * self.left.pdf_value(origin, direction) + 0.5 * self.right.pdf_value(
            origin, direction
        )

    def random(self, origin: Point3) -> Vec3:
        """A direction sampled toward a child chosen at random."""
        if random_int(0, 1) == 0:
            return self.left.random(origin)
        return self.right.random(origin)