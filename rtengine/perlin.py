"""Perlin gradient noise."""

from __future__ import annotations

import itertools
import math
import random

from .vec3 import Point3, Vec3, dot, unit_vector

POINT_COUNT = 256


def _generate_perm() -> list[int]:
    perm = list(range(POINT_COUNT))
    random.shuffle(perm)
    return perm


class PerlinNoise:
    """Smooth gradient noise on a lattice of random unit vectors."""

    def __init__(self) -> None:
        self._rand_vec = [unit_vector(Vec3.random(-1, 1)) for _ in range(POINT_COUNT)]
        self._perm_x = _generate_perm()
        self._perm_y = _generate_perm()
        self._perm_z = _generate_perm()

    def noise(self, p: Point3) -> float:
        """The noise value at point ``p``."""
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        xi, yi, zi = int(fx), int(fy), int(fz)

        corners = {
            (di, dj, dk): self._rand_vec[
                self._perm_x[(xi + di) & 255]
                ^ self._perm_y[(yi + dj) & 255]
                ^ self._perm_z[(zi + dk) & 255]
            ]
            for di, dj, dk in itertools.product((0, 1), repeat=3)
        }
        return self._interp(corners, u, v, w)

    def turb(self, p: Point3, depth: int = 7) -> float:
        """Turbulence: the absolute sum of ``depth`` octaves of noise."""
        accum = 0.0
        weight = 1.0
        point = p
        for _ in range(depth):
            accum += weight * self.noise(point)
            weight *= 0.5
            point = point * 2
        return abs(accum)

    @staticmethod
    def _interp(corners: dict[tuple[int, int, int], Vec3], u: float, v: float, w: float) -> float:
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)
        accum = 0.0
        for (i, j, k), gradient in corners.items():
            weight_v = Vec3(u - i, v - j, w - k)
            accum += (
                (i * uu + (1 - i) * (1 - uu))
                * (j * vv + (1 - j) * (1 - vv))
                * (k * ww + (1 - k) * (1 - ww))
                * dot(gradient, weight_v)
            )
        return accum