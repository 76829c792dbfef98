"""Gamma correction and byte conversion for output colours."""

from __future__ import annotations

import math
from typing import TextIO

from .interval import Interval
from .vec3 import Color

_INTENSITY = Interval(0.000, 0.999)


def linear_to_gamma(linear_component: float) -> float:
    """Gamma-2 encode a linear colour component."""
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0


def to_byte(color_value: float) -> int:
    """Convert a linear colour component to a byte in [0, 255]."""
    return int(256 * _INTENSITY.clamp(linear_to_gamma(color_value)))


def write_color(out: TextIO, pixel_color: Color) -> None:
    """Write one pixel as a plain PPM "r g b" line."""
    out.write(f"{to_byte(pixel_color.x)} {to_byte(pixel_color.y)} {to_byte(pixel_color.z)}\n")