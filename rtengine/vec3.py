"""Three-component vectors, random sampling helpers and orthonormal bases."""

from __future__ import annotations

import math
import random as _random
from collections.abc import Iterator

INF = math.inf
PI = 3.1415926535897932385

_NEAR_ZERO = 1e-8


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def random_double(low: float = 0.0, high: float = 1.0) -> float:
    """Return a random real in [low, high)."""
    return low + (high - low) * _random.random()


def random_int(low: int, high: int) -> int:
    """Return a random integer in [low, high]."""
    return int(random_double(low, high + 1))


class Vec3:
    """An immutable 3D vector, also used for points and colours."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = x
        self.y = y
        self.z = z

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec3 | float) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, t: float) -> Vec3:
        if isinstance(t, (int, float)):
            return Vec3(t * self.x, t * self.y, t * self.z)
        return NotImplemented

    def __truediv__(self, t: float) -> Vec3:
        if not isinstance(t, (int, float)):
            return NotImplemented
        return (1 / t) * self

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def near_zero(self) -> bool:
        """True if the vector is close to zero in every dimension."""
        return abs(self.x) < _NEAR_ZERO and abs(self.y) < _NEAR_ZERO and abs(self.z) < _NEAR_ZERO

    @staticmethod
    def random(low: float = 0.0, high: float = 1.0) -> Vec3:
        """A vector whose components are each random in [low, high)."""
        return Vec3(random_double(low, high), random_double(low, high), random_double(low, high))


Color = Vec3
Point3 = Vec3


def dot(u: Vec3, v: Vec3) -> float:
    return u.x * v.x + u.y * v.y + u.z * v.z


def cross(u: Vec3, v: Vec3) -> Vec3:
    return Vec3(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def unit_vector(v: Vec3) -> Vec3:
    return v / v.length()


def random_in_unit_disk() -> Point3:
    """A random point inside the unit disk in the z = 0 plane."""
    while True:
        point = Point3(random_double(-1, 1), random_double(-1, 1), 0.0)
        if point.length_squared() < 1:
            return point


def random_unit_vector() -> Vec3:
    """A unit vector uniformly distributed over the unit sphere."""
    while True:
        vector = Vec3.random(-1, 1)
        lensq = vector.length_squared()
        if 1e-160 < lensq <= 1.0:
            return vector / math.sqrt(lensq)


def random_on_hemisphere(normal: Vec3) -> Vec3:
    """A random unit vector in the hemisphere around ``normal``."""
    on_unit_sphere = random_unit_vector()
    if dot(on_unit_sphere, normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere


def reflect(incident: Vec3, normal: Vec3) -> Vec3:
    return incident - 2 * dot(incident, normal) * normal


def refract(direction: Vec3, normal: Vec3, etai_over_etat: float) -> Vec3:
    """Refract a unit ``direction`` through a surface with unit ``normal``."""
    cos_theta = min(dot(-direction, normal), 1.0)
    r_out_perp = etai_over_etat * (direction + cos_theta * normal)
    r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.length_squared())) * normal
    return r_out_perp + r_out_parallel


def random_cosine_direction() -> Vec3:
    """A random unit vector biased toward +z with a cosine distribution."""
    r1 = random_double()
    r2 = random_double()
    phi = 2 * PI * r1
    x = math.cos(phi) * math.sqrt(r2)
    y = math.sin(phi) * math.sqrt(r2)
    z = math.sqrt(1 - r2)
    return Vec3(x, y, z)


class ONB:
    """An orthonormal basis whose w axis follows a given vector."""

    __slots__ = ("u", "v", "w")

    def __init__(self, n: Vec3) -> None:
        w = unit_vector(n)
        a = Vec3(0, 1, 0) if abs(w.x) > 0.9 else Vec3(1, 0, 0)
        v = unit_vector(cross(w, a))
        self.w = w
        self.v = v
        self.u = cross(w, v)

    def transform(self, v: Vec3) -> Vec3:
        """Map a vector from local coordinates to world coordinates."""
        return (v.x * self.u) + (v.y * self.v) + (v.z * self.w)