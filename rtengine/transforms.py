"""Instances that move or rotate another hittable."""

from __future__ import annotations

import math

from .aabb import AABB, aabb_from_points
from .hittable import Hittable, HitRecord
from .interval import Interval
from .ray import Ray
from .vec3 import INF, Point3, Vec3, degrees_to_radians


class RotateY(Hittable):
    """Another hittable rotated by ``angle`` degrees about the y axis."""

    def __init__(self, obj: Hittable, angle: float) -> None:
        self.object = obj
        radians = degrees_to_radians(angle)
        self._sin = math.sin(radians)
        self._cos = math.cos(radians)

        box = obj.bounding_box()
        low = [INF, INF, INF]
        high = [-INF, -INF, -INF]
        for x in (box.x.min, box.x.max):
            for y in (box.y.min, box.y.max):
                for z in (box.z.min, box.z.max):
                    corner = self._to_world(Vec3(x, y, z))
                    low = [min(a, b) for a, b in zip(low, corner)]
                    high = [max(a, b) for a, b in zip(high, corner)]
        self._bbox = aabb_from_points(Point3(*low), Point3(*high))

    def _to_object(self, v: Vec3) -> Vec3:
        return Vec3(self._cos * v.x - self._sin * v.z, v.y, self._sin * v.x + self._cos * v.z)

    def _to_world(self, v: Vec3) -> Vec3:
        return Vec3(self._cos * v.x + self._sin * v.z, v.y, -self._sin * v.x + self._cos * v.z)

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, ray: Ray, t_values: Interval) -> HitRecord | None:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        record = self.object.hit(rotated, t_values)
        if record is None:
            return None
        record.point = self._to_world(record.point)
        record.normal = self._to_world(record.normal)
        return record


class Translate(Hittable):
    """Another hittable moved by ``offset``."""

    def __init__(self, obj: Hittable, offset: Vec3) -> None:
        self.object = obj
        self.offset = offset
        self._bbox = obj.bounding_box() + offset

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, ray: Ray, t_values: Interval) -> HitRecord | None:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        record = self.object.hit(moved, t_values)
        if record is None:
            return None
        record.point = record.point + self.offset
        return record