"""Camera configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vec3 import Color, Point3, Vec3


@dataclass
class CameraConfig:
    """Settings that describe a camera and how it renders."""

    aspect_ratio: float = 1.0
    image_width: int = 600
    samples_per_pixel: int = 10
    max_depth: int = 10
    background: Color = field(default_factory=lambda: Color(0, 0, 0))

    vfov: float = 90.0
    lookfrom: Point3 = field(default_factory=lambda: Point3(0, 0, 0))
    lookat: Point3 = field(default_factory=lambda: Point3(0, 0, -1))
    vup: Vec3 = field(default_factory=lambda: Vec3(0, 1, 0))

    defocus_angle: float = 0.0
    focus_dist: float = 10.0

    use_parallelism: bool = False
    use_bvh: bool = False
    use_gpu: bool = False