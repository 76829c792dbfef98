"""Probability density functions over directions, and scatter records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .hittable import Hittable
from .ray import Ray
from .vec3 import (
    PI,
    ONB,
    Color,
    Point3,
    Vec3,
    dot,
    random_cosine_direction,
    random_double,
    random_unit_vector,
    unit_vector,
)


class PDF(ABC):
    """A distribution of directions that can be sampled and evaluated."""

    @abstractmethod
    def value(self, direction: Vec3) -> float:
        """The density for ``direction``."""

    @abstractmethod
    def generate(self) -> Vec3:
        """A direction drawn from the distribution."""


class SpherePDF(PDF):
    """Uniform directions over the unit sphere."""

    def value(self, direction: Vec3) -> float:
        return 1.0 / (4.0 * PI)

    def generate(self) -> Vec3:
        return random_unit_vector()


class CosinePDF(PDF):
    """Cosine-weighted directions in the hemisphere around ``w``."""

    def __init__(self, w: Vec3) -> None:
        self._uvw = ONB(w)

    def value(self, direction: Vec3) -> float:
        cosine_theta = dot(unit_vector(direction), self._uvw.w)
        return max(0.0, cosine_theta / PI)

    def generate(self) -> Vec3:
        return self._uvw.transform(random_cosine_direction())


class HittablePDF(PDF):
    """Directions from ``origin`` toward a hittable, as that object samples them."""

    def __init__(self, objects: Hittable, origin: Point3) -> None:
        self._objects = objects
        self._origin = origin

    def value(self, direction: Vec3) -> float:
        return self._objects.pdf_value(self._origin, direction)

    def generate(self) -> Vec3:
        return self._objects.random(self._origin)


class MixturePDF(PDF):
    """An even mixture of two distributions."""

    def __init__(self, p0: PDF, p1: PDF) -> None:
        self._p0 = p0
        self._p1 = p1

    def value(self, direction: Vec3) -> float:
        return 0.5 * self._p0.value(direction) + 0.5 * self._p1.value(direction)

    def generate(self) -> Vec3:
        if random_double() < 0.5:
            return self._p0.generate()
        return self._p1.generate()


@dataclass(slots=True)
class ScatterRecord:
    """How a material scattered a ray.

    With ``skip_pdf`` set the scattered ray is given outright in
    ``skip_pdf_ray``; otherwise directions are sampled from ``pdf``.
    """

    attenuation: Color = field(default_factory=Color)
    pdf: PDF | None = None
    skip_pdf: bool = False
    skip_pdf_ray: Ray = field(default_factory=Ray)