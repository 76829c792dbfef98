"""Surface textures: colours that vary over a surface."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .perlin import PerlinNoise
from .vec3 import Color, Point3, Vec3


class Texture(ABC):
    """The colour of a surface at a given point."""

    @abstractmethod
    def value(self, u: float, v: float, p: Point3) -> Color:
        """The colour at texture coordinates ``u``, ``v`` and point ``p``."""


class SolidColorTexture(Texture):
    """A single colour everywhere."""

    def __init__(self, albedo: Color) -> None:
        self.albedo = albedo

    def value(self, u: float, v: float, p: Point3) -> Color:
        return self.albedo


def _as_texture(source: Texture | Color) -> Texture:
    if isinstance(source, Texture):
        return source
    if isinstance(source, Vec3):
        return SolidColorTexture(source)
    raise TypeError(f"expected a Texture or a Color, got {type(source).__name__}")


class CheckerTexture(Texture):
    """A 3D checker pattern alternating between two textures.

    ``even`` and ``odd`` may be textures or plain colours.
    """

    def __init__(self, scale: float, even: Texture | Color, odd: Texture | Color) -> None:
        self.scale = scale
        self.even = _as_texture(even)
        self.odd = _as_texture(odd)

    def value(self, u: float, v: float, p: Point3) -> Color:
        inv_scale = 1.0 / self.scale
        index_sum = sum(math.floor(inv_scale * component) for component in p)
        texture = self.even if index_sum % 2 == 0 else self.odd
        return texture.value(u, v, p)


class NoiseTexture(Texture):
    """A marble-like pattern driven by Perlin turbulence."""

    def __init__(self, scale: float) -> None:
        self.scale = scale
        self._perlin = PerlinNoise()

    def value(self, u: float, v: float, p: Point3) -> Color:
        return Color(0.5, 0.5, 0.5) * (1 + math.sin(self.scale * p.z + 10 * self._perlin.turb(p, 7)))