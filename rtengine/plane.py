"""Planar parallelograms and boxes built from them."""

from __future__ import annotations

from typing import Any

from .aabb import AABB, aabb_from_points, surrounding_box
from .hittable import Hittable, HitRecord, HittableList
from .interval import Interval
from .ray import Ray
from .vec3 import INF, Point3, Vec3, cross, dot, random_double, unit_vector

_UNIT_INTERVAL = Interval(0.0, 1.0)


class Plane(Hittable):
    """The parallelogram spanned by ``u_side`` and ``v_side`` from ``corner``."""

    def __init__(self, corner: Point3, u_side: Vec3, v_side: Vec3, material: Any = None) -> None:
        self.corner = corner
        self.u_side = u_side
        self.v_side = v_side
        self.material = material

        n = cross(u_side, v_side)
        self.normal = unit_vector(n)
        self._d = dot(self.normal, corner)
        self._w = n / dot(n, n)
        self.area = n.length()

        self._bbox = surrounding_box(
            aabb_from_points(corner, corner + u_side + v_side),
            aabb_from_points(corner + u_side, corner + v_side),
        )

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, ray: Ray, t_values: Interval) -> HitRecord | None:
        denom = dot(self.normal, ray.direction)
        if abs(denom) < 1e-8:
            return None

        t = (self._d - dot(self.normal, ray.origin)) / denom
        if not t_values.contains(t):
            return None

        intersection = ray.at(t)
        planar = intersection - self.corner
        alpha = dot(self._w, cross(planar, self.v_side))
        beta = dot(self._w, cross(self.u_side, planar))
        if not (_UNIT_INTERVAL.contains(alpha) and _UNIT_INTERVAL.contains(beta)):
            return None

        record = HitRecord(point=intersection, material=self.material, t=t, u=alpha, v=beta)
        record.set_face_normal(ray, self.normal)
        return record

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        """Solid-angle density of ``direction`` toward the shape."""
        record = self.hit(Ray(origin, direction), Interval(0.001, INF))
        if record is None:
            return 0.0
        distance_squared = record.t * record.t * direction.length_squared()
        cosine = abs(dot(direction, record.normal) / direction.length())
        return distance_squared / (cosine * self.area)

    def random(self, origin: Point3) -> Vec3:
        """The direction from ``origin`` to a random point on the shape."""
        point = self.corner + (random_double() * self.u_side) + (random_double() * self.v_side)
        return point - origin


def make_box(a: Point3, b: Point3, material: Any = None) -> HittableList:
    """The six sides of the box with opposite corners ``a`` and ``b``."""
    low = Point3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
    high = Point3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    dx = Vec3(high.x - low.x, 0, 0)
    dy = Vec3(0, high.y - low.y, 0)
    dz = Vec3(0, 0, high.z - low.z)

    return HittableList(
        Plane(Point3(low.x, low.y, high.z), dx, dy, material),  # front
        Plane(Point3(high.x, low.y, high.z), -dz, dy, material),  # right
        Plane(Point3(high.x, low.y, low.z), -dx, dy, material),  # back
        Plane(Point3(low.x, low.y, low.z), dz, dy, material),  # left
        Plane(Point3(low.x, high.y, high.z), dx, -dz, material),  # top
        Plane(Point3(low.x, low.y, low.z), dx, dz, material),  # bottom
    )