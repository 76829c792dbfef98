"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Protocol

from .interval import EMPTY_INTERVAL, UNIVERSE_INTERVAL, Interval, enclose
from .ray import Ray
from .vec3 import Point3, Vec3

_PAD_DELTA = 0.0001


class _Bounded(Protocol):
    def bounding_box(self) -> AABB: ...


def _pad(interval: Interval) -> Interval:
    if interval.size() < _PAD_DELTA:
        return interval.expand(_PAD_DELTA)
    return interval


class AABB:
    """A box aligned with the coordinate axes, one interval per axis.

    No side of a box built from intervals is narrower than a small delta.
    """

    __slots__ = ("x", "y", "z")

    def __init__(
        self,
        x: Interval = EMPTY_INTERVAL,
        y: Interval = EMPTY_INTERVAL,
        z: Interval = EMPTY_INTERVAL,
    ) -> None:
        self.x = _pad(x)
        self.y = _pad(y)
        self.z = _pad(z)

    @classmethod
    def _exact(cls, x: Interval, y: Interval, z: Interval) -> AABB:
        box = cls.__new__(cls)
        box.x = x
        box.y = y
        box.z = z
        return box

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return (self.x, self.y, self.z) == (other.x, other.y, other.z)

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"AABB({self.x!r}, {self.y!r}, {self.z!r})"

    def axis_interval(self, index: int) -> Interval:
        """The interval for axis 1 (y) or 2 (z); any other index gives x."""
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        return self.x

    def longest_axis(self) -> int:
        """Index of the longest axis of the box."""
        if self.x.size() > self.y.size():
            return 0 if self.x.size() > self.z.size() else 2
        return 1 if self.y.size() > self.z.size() else 2

    def hit(self, ray: Ray, t_values: Interval) -> bool:
        """True if the ray passes through the box for some t in ``t_values``."""
        t_min, t_max = t_values.min, t_values.max
        for interval, origin, direction in zip((self.x, self.y, self.z), ray.origin, ray.direction):
            dir_inv = 1.0 / direction if direction != 0 else math.copysign(math.inf, direction)
            t0 = (interval.min - origin) * dir_inv
            t1 = (interval.max - origin) * dir_inv
            if t0 < t1:
                if t0 > t_min:
                    t_min = t0
                if t1 < t_max:
                    t_max = t1
            else:
                if t1 > t_min:
                    t_min = t1
                if t0 < t_max:
                    t_max = t0
            if t_max <= t_min:
                return False
        return True

    def __add__(self, offset: Vec3) -> AABB:
        if not isinstance(offset, Vec3):
            return NotImplemented
        return AABB(self.x + offset.x, self.y + offset.y, self.z + offset.z)

    def __radd__(self, offset: Vec3) -> AABB:
        return self.__add__(offset)


def aabb_from_points(p1: Point3, p2: Point3) -> AABB:
    """The box with ``p1`` and ``p2`` at opposite corners."""

    def span(a: float, b: float) -> Interval:
        return Interval(a, b) if a <= b else Interval(b, a)

    return AABB(span(p1.x, p2.x), span(p1.y, p2.y), span(p1.z, p2.z))


def surrounding_box(b1: AABB, b2: AABB) -> AABB:
    """The tightest box enclosing both boxes."""
    return AABB._exact(enclose(b1.x, b2.x), enclose(b1.y, b2.y), enclose(b1.z, b2.z))


def bbox_compare(a: _Bounded, b: _Bounded, axis_index: int) -> bool:
    """True if ``a``'s box starts before ``b``'s along the given axis."""
    return (
        a.bounding_box().axis_interval(axis_index).min
        < b.bounding_box().axis_interval(axis_index).min
    )


def axis_key(axis_index: int) -> Callable[[_Bounded], float]:
    """A sort key ordering objects by where their boxes start on an axis."""

    def key(obj: _Bounded) -> float:
        return obj.bounding_box().axis_interval(axis_index).min

    return key


EMPTY_AABB = AABB(EMPTY_INTERVAL, EMPTY_INTERVAL, EMPTY_INTERVAL)
UNIVERSE_AABB = AABB(UNIVERSE_INTERVAL, UNIVERSE_INTERVAL, UNIVERSE_INTERVAL)