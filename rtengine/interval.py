"""Closed real intervals."""

from __future__ import annotations

from dataclasses import dataclass

from .vec3 import INF


@dataclass(frozen=True, slots=True)
class Interval:
    """A closed interval [min, max]; the default interval is empty."""

    min: float = INF
    max: float = -INF

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def expand(self, delta: float) -> Interval:
        """A new interval widened by ``delta`` in total."""
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)

    def __add__(self, displacement: float) -> Interval:
        if not isinstance(displacement, (int, float)):
            return NotImplemented
        return Interval(self.min + displacement, self.max + displacement)

    def __radd__(self, displacement: float) -> Interval:
        return self.__add__(displacement)


def enclose(a: Interval, b: Interval) -> Interval:
    """The tightest interval enclosing both ``a`` and ``b``."""
    low = a.min if a.min <= b.min else b.min
    high = a.max if a.max >= b.max else b.max
    return Interval(low, high)


EMPTY_INTERVAL = Interval(INF, -INF)
UNIVERSE_INTERVAL = Interval(-INF, INF)