"""Spheres, stationary or moving linearly over the shutter interval."""

from __future__ import annotations

import math
from typing import Any

from .aabb import AABB, aabb_from_points, surrounding_box
from .hittable import Hittable, HitRecord
from .interval import Interval
from .ray import Ray
from .vec3 import INF, ONB, PI, Point3, Vec3, dot, random_double


class Sphere(Hittable):
    """A sphere; with ``end_center`` it moves from ``center`` at time 0 to ``end_center`` at time 1."""

    def __init__(
        self,
        center: Point3,
        radius: float,
        material: Any = None,
        *,
        end_center: Point3 | None = None,
    ) -> None:
        end = center if end_center is None else end_center
        self._center = Ray(center, end - center)
        self.radius = max(0.0, radius)
        self.material = material

        radius_vector = Vec3(radius, radius, radius)
        start_box = aabb_from_points(center - radius_vector, center + radius_vector)
        if end_center is None:
            self._bbox = start_box
        else:
            end_box = aabb_from_points(end - radius_vector, end + radius_vector)
            self._bbox = surrounding_box(start_box, end_box)

    def center_at(self, time: float) -> Point3:
        """Where the centre is at ``time``."""
        return self._center.at(time)

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, ray: Ray, t_values: Interval) -> HitRecord | None:
        current_center = self._center.at(ray.time)
        oc = current_center - ray.origin
        a = ray.direction.length_squared()
        h = dot(ray.direction, oc)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = h * h - a * c
        if discriminant < 0:
            return None
        sqrtd = math.sqrt(discriminant)

        root = (h - sqrtd) / a
        if not t_values.surrounds(root):
            root = (h + sqrtd) / a
            if not t_values.surrounds(root):
                return None

        point = ray.at(root)
        outward_normal = (point - current_center) / self.radius
        record = HitRecord(point=point, material=self.material, t=root)
        record.set_face_normal(ray, outward_normal)

        theta = math.acos(max(-1.0, min(1.0, -outward_normal.y)))
        phi = math.atan2(-outward_normal.z, outward_normal.x) + PI
        record.u = phi / (2 * PI)
        record.v = theta / PI
        return record

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        """Solid-angle density of ``direction``; meaningful for stationary spheres."""
        if self.hit(Ray(origin, direction), Interval(0.001, INF)) is None:
            return 0.0
        dist_squared = (self._center.at(0) - origin).length_squared()
        cos_theta_max = math.sqrt(max(0.0, 1 - self.radius * self.radius / dist_squared))
        solid_angle = 2 * PI * (1 - cos_theta_max)
        return 1 / solid_angle

    def random(self, origin: Point3) -> Vec3:
        """A direction from ``origin`` inside the cone that the sphere subtends."""
        direction = self._center.at(0) - origin
        distance_squared = direction.length_squared()
        uvw = ONB(direction)

        r1 = random_double()
        r2 = random_double()
        cos_max = math.sqrt(max(0.0, 1 - self.radius * self.radius / distance_squared))
        z = 1 + r2 * (cos_max - 1)
        phi = 2 * PI * r1
        sin_z = math.sqrt(max(0.0, 1 - z * z))
        return uvw.transform(Vec3(math.cos(phi) * sin_z, math.sin(phi) * sin_z, z))