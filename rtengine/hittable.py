"""Objects a ray can hit, hit records and lists of hittables."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from .aabb import AABB, surrounding_box
from .interval import Interval
from .ray import Ray
from .vec3 import Point3, Vec3, dot, random_int


@dataclass(slots=True)
class HitRecord:
    """What is known about the point where a ray met an object."""

    point: Point3 = field(default_factory=Point3)
    normal: Vec3 = field(default_factory=Vec3)
    material: Any = None
    t: float = 0.0
    front_face: bool = False
    u: float = 0.0
    v: float = 0.0

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Set the normal to face against the ray; ``outward_normal`` is unit length."""
        self.front_face = dot(ray.direction, outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """An object that a ray can hit."""

    @abstractmethod
    def bounding_box(self) -> AABB:
        """The box enclosing the object."""

    @abstractmethod
    def hit(self, ray: Ray, t_values: Interval) -> HitRecord | None:
        """The hit with ``t`` inside ``t_values``, or None if there is none."""

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        """Density of sampling ``direction`` from ``origin`` toward this object."""
        return 0.0

    def random(self, origin: Point3) -> Vec3:
        """A direction from ``origin`` sampled toward this object."""
        return Vec3(1, 0, 0)


class HittableList(Hittable):
    """A collection of hittables treated as one."""

    def __init__(self, *objects: Hittable) -> None:
        self._objects: list[Hittable] = []
        self._bbox = AABB()
        for obj in objects:
            self.add(obj)

    @property
    def objects(self) -> list[Hittable]:
        return self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self._objects)

    def clear(self) -> None:
        self._objects.clear()
        self._bbox = AABB()

    def add(self, obj: Hittable) -> None:
        self._objects.append(obj)
        self._bbox = surrounding_box(self._bbox, obj.bounding_box())

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, ray: Ray, t_values: Interval) -> HitRecord | None:
        """The closest hit among all objects."""
        closest: HitRecord | None = None
        closest_so_far = t_values.max
        for obj in self._objects:
            record = obj.hit(ray, Interval(t_values.min, closest_so_far))
            if record is not None:
                closest = record
                closest_so_far = record.t
        return closest

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        """The average of the objects' densities."""
        if not self._objects:
            return 0.0
        weight = 1.0 / len(self._objects)
        return sum(weight * obj.pdf_value(origin, direction) for obj in self._objects)

    def random(self, origin: Point3) -> Vec3:
        """A direction sampled toward one object chosen at random."""
        if not self._objects:
            raise IndexError("cannot sample a direction from an empty list")
        return self._objects[random_int(0, len(self._objects) - 1)].random(origin)