"""Participating media such as fog and smoke."""

from __future__ import annotations

import math

from .aabb import AABB
from .hittable import Hittable, HitRecord
from .interval import UNIVERSE_INTERVAL, Interval
from .materials import IsotropicMaterial
from .ray import Ray
from .textures import Texture
from .vec3 import INF, Color, Vec3, random_double


class ConstantMedium(Hittable):
    """A volume of constant density inside a boundary, scattering rays at random depths."""

    def __init__(self, boundary: Hittable, density: float, albedo: Texture | Color) -> None:
        self.boundary = boundary
        self.density = density
        self.phase_function = IsotropicMaterial(albedo)

    def bounding_box(self) -> AABB:
        return self.boundary.bounding_box()

    def hit(self, ray: Ray, t_values: Interval) -> HitRecord | None:
        entry = self.boundary.hit(ray, UNIVERSE_INTERVAL)
        if entry is None:
            return None
        exit_ = self.boundary.hit(ray, Interval(entry.t + 0.0001, INF))
        if exit_ is None:
            return None

        t_enter = max(entry.t, t_values.min)
        t_exit = min(exit_.t, t_values.max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside = (t_exit - t_enter) * ray_length

        sample = random_double()
        if sample <= 0.0:
            return None  # An infinite free path never scatters.
        hit_distance = (-1.0 / self.density) * math.log(sample)
        if hit_distance > distance_inside:
            return None

        t = t_enter + hit_distance / ray_length
        return HitRecord(
            point=ray.at(t),
            normal=Vec3(1, 0, 0),
            material=self.phase_function,
            t=t,
            front_face=True,
        )