"""Materials: how surfaces emit and scatter light."""

from __future__ import annotations

import math

from .hittable import HitRecord
from .pdf import CosinePDF, ScatterRecord, SpherePDF
from .ray import Ray
from .textures import SolidColorTexture, Texture
from .vec3 import (
    PI,
    Color,
    Point3,
    Vec3,
    dot,
    random_double,
    random_unit_vector,
    reflect,
    refract,
    unit_vector,
)


def _texture_of(source: Texture | Color) -> Texture:
    if isinstance(source, Texture):
        return source
    if isinstance(source, Vec3):
        return SolidColorTexture(source)
    raise TypeError(f"expected a Texture or a Color, got {type(source).__name__}")


class Material:
    """A surface that neither emits nor scatters; subclasses override."""

    def emitted(self, ray: Ray, record: HitRecord, u: float, v: float, point: Point3) -> Color:
        """Light emitted at the hit point; black by default."""
        return Color(0, 0, 0)

    def scatter(self, ray: Ray, record: HitRecord) -> ScatterRecord | None:
        """How the ray scatters, or None if it is absorbed."""
        return None

    def scattering_pdf(self, ray: Ray, record: HitRecord, scattered: Ray) -> float:
        """Density of scattering into the direction of ``scattered``."""
        return 0.0


class LambertianMaterial(Material):
    """A matte surface scattering with a cosine distribution about the normal."""

    def __init__(self, albedo: Texture | Color) -> None:
        self.texture = _texture_of(albedo)

    def scatter(self, ray: Ray, record: HitRecord) -> ScatterRecord | None:
        return ScatterRecord(
            attenuation=self.texture.value(record.u, record.v, record.point),
            pdf=CosinePDF(record.normal),
            skip_pdf=False,
        )

    def scattering_pdf(self, ray: Ray, record: HitRecord, scattered: Ray) -> float:
        cos_theta = dot(record.normal, unit_vector(scattered.direction))
        return 0.0 if cos_theta < 0 else cos_theta / PI


class MetalMaterial(Material):
    """A specular surface; ``fuzz`` blurs the reflection (0 is a mirror)."""

    def __init__(self, albedo: Color, fuzz: float) -> None:
        self.albedo = albedo
        self.fuzz = fuzz

    def scatter(self, ray: Ray, record: HitRecord) -> ScatterRecord | None:
        reflected = reflect(ray.direction, record.normal)
        reflected = unit_vector(reflected) + self.fuzz * random_unit_vector()
        return ScatterRecord(
            attenuation=self.albedo,
            pdf=None,
            skip_pdf=True,
            skip_pdf_ray=Ray(record.point, reflected, ray.time),
        )


class DielectricMaterial(Material):
    """A clear material such as glass that reflects and refracts."""

    def __init__(self, refraction_index: float) -> None:
        self.refraction_index = refraction_index

    def scatter(self, ray: Ray, record: HitRecord) -> ScatterRecord | None:
        ri = 1.0 / self.refraction_index if record.front_face else self.refraction_index

        unit_direction = unit_vector(ray.direction)
        cos_theta = min(dot(-unit_direction, record.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
        cannot_refract = ri * sin_theta > 1.0

        # Schlick's approximation for reflectance.
        r0 = ((1 - ri) / (1 + ri)) ** 2
        reflectance = r0 + (1 - r0) * (1 - cos_theta) ** 5

        if cannot_refract or reflectance > random_double():
            direction = reflect(unit_direction, record.normal)
        else:
            direction = refract(unit_direction, record.normal, ri)

        return ScatterRecord(
            attenuation=Color(1.0, 1.0, 1.0),
            pdf=None,
            skip_pdf=True,
            skip_pdf_ray=Ray(record.point, direction),
        )


class DiffuseLightMaterial(Material):
    """A surface that emits light from its front face."""

    def __init__(self, emit: Texture | Color) -> None:
        self.texture = _texture_of(emit)

    def emitted(self, ray: Ray, record: HitRecord, u: float, v: float, point: Point3) -> Color:
        if not record.front_face:
            return Color(0, 0, 0)
        return self.texture.value(u, v, point)


class IsotropicMaterial(Material):
    """Scatters uniformly in every direction, as in fog or smoke."""

    def __init__(self, albedo: Texture | Color) -> None:
        self.texture = _texture_of(albedo)

    def scatter(self, ray: Ray, record: HitRecord) -> ScatterRecord | None:
        return ScatterRecord(
            attenuation=self.texture.value(record.u, record.v, record.point),
            pdf=SpherePDF(),
            skip_pdf=False,
        )

    def scattering_pdf(self, ray: Ray, record: HitRecord, scattered: Ray) -> float:
        return 1 / (4 * PI)