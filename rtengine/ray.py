"""Rays given by an origin, a direction and a time."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vec3 import Point3, Vec3


@dataclass(slots=True)
class Ray:
    """The ray ``origin + t * direction``, cast at ``time``."""

    origin: Point3 = field(default_factory=Point3)
    direction: Vec3 = field(default_factory=Vec3)
    time: float = 0.0

    def at(self, t: float) -> Point3:
        """The point reached at parameter ``t``."""
        return self.origin + t * self.direction