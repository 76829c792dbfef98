"""The camera model shared by every renderer: ray generation and path tracing."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .bvh import BVHNode
from .config import CameraConfig
from .hittable import HittableList
from .interval import Interval
from .pdf import PDF, HittablePDF, MixturePDF
from .ray import Ray
from .vec3 import (
    INF,
    Color,
    Point3,
    Vec3,
    cross,
    degrees_to_radians,
    random_double,
    random_in_unit_disk,
    unit_vector,
)


class Camera(ABC):
    """A positioned camera that traces rays through a scene.

    Subclasses decide where the rendered pixels go.
    """

    def __init__(self, config: CameraConfig) -> None:
        self.aspect_ratio = config.aspect_ratio
        self.image_width = config.image_width
        self.samples_per_pixel = config.samples_per_pixel
        self.max_depth = config.max_depth
        self.background = config.background
        self.vfov = config.vfov
        self.lookfrom = config.lookfrom
        self.lookat = config.lookat
        self.vup = config.vup
        self.defocus_angle = config.defocus_angle
        self.focus_dist = config.focus_dist
        self.use_parallelism = config.use_parallelism
        self.use_bvh = config.use_bvh
        self.use_gpu = config.use_gpu
        self.initialize()

    @abstractmethod
    def render(self, world: HittableList, lights: HittableList) -> object:
        """Render the scene seen by the camera."""

    def initialize(self) -> None:
        """Compute the image size, camera frame and viewport from the settings."""
        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self.pixel_samples_scale = 1.0 / self.samples_per_pixel
        self.center = self.lookfrom

        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2 * h * self.focus_dist
        viewport_width = viewport_height * (float(self.image_width) / self.image_height)

        self.w = unit_vector(self.lookfrom - self.lookat)
        self.u = unit_vector(cross(self.vup, self.w))
        self.v = cross(self.w, self.u)

        viewport_u = viewport_width * self.u
        viewport_v = viewport_height * -self.v

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (
            self.center - (self.focus_dist * self.w) - viewport_u / 2 - viewport_v / 2
        )
        self.pixel00_loc = viewport_upper_left + 0.5 * (self.pixel_delta_u + self.pixel_delta_v)

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def get_ray(self, i: int, j: int, s_i: int, s_j: int) -> Ray:
        """A ray through a jittered point of sub-pixel (s_i, s_j) of pixel (i, j)."""
        offset = self.sample_square_stratified(s_i, s_j)
        pixel_sample = (
            self.pixel00_loc
            + ((i + offset.x) * self.pixel_delta_u)
            + ((j + offset.y) * self.pixel_delta_v)
        )
        origin = self.center if self.defocus_angle <= 0 else self.defocus_disk_sample()
        return Ray(origin, pixel_sample - origin, random_double())

    def sample_square_stratified(self, s_i: int, s_j: int) -> Vec3:
        """A random offset inside sub-square (s_i, s_j) of the unit pixel square."""
        sqrt_spp = int(math.sqrt(self.samples_per_pixel))
        recip_sqrt_spp = 1.0 / sqrt_spp
        px = ((s_i + random_double()) * recip_sqrt_spp) - 0.5
        py = ((s_j + random_double()) * recip_sqrt_spp) - 0.5
        return Vec3(px, py, 0.0)

    def sample_square(self) -> Vec3:
        """A random offset in the square [-0.5, 0.5) x [-0.5, 0.5)."""
        return Vec3(random_double() - 0.5, random_double() - 0.5, 0.0)

    def sample_disk(self, radius: float) -> Vec3:
        """A random point in the disk of ``radius`` about the origin."""
        return radius * random_in_unit_disk()

    def defocus_disk_sample(self) -> Point3:
        """A random point on the camera's defocus disk."""
        point = random_in_unit_disk()
        return self.center + (point.x * self.defocus_disk_u) + (point.y * self.defocus_disk_v)

    def ray_color(self, ray: Ray, depth: int, world: HittableList, lights: HittableList) -> Color:
        """The light arriving along ``ray``, following at most ``depth`` bounces."""
        if depth <= 0:
            return Color(0, 0, 0)

        record = world.hit(ray, Interval(0.001, INF))
        if record is None:
            return self.background

        material = record.material
        emitted = material.emitted(ray, record, record.u, record.v, record.point)
        scatter = material.scatter(ray, record)
        if scatter is None:
            return emitted

        if scatter.skip_pdf:
            return scatter.attenuation * self.ray_color(
                scatter.skip_pdf_ray, depth - 1, world, lights
            )

        light_pdf: PDF
        if len(lights) == 0:
            light_pdf = scatter.pdf
        else:
            light_pdf = HittablePDF(lights, record.point)
        mixture = MixturePDF(light_pdf, scatter.pdf)

        scattered = Ray(record.point, mixture.generate(), ray.time)
        pdf_value = mixture.value(scattered.direction)
        if pdf_value <= 0:
            # A direction the sampler could not have produced carries no weight.
            return emitted

        scattering_pdf = material.scattering_pdf(ray, record, scattered)
        sample_color = self.ray_color(scattered, depth - 1, world, lights)
        return emitted + (scatter.attenuation * scattering_pdf * sample_color) / pdf_value

    def _prepare_scene(
        self, world: HittableList, lights: HittableList
    ) -> tuple[HittableList, HittableList]:
        """The scene to trace, wrapped in bounding volume hierarchies if enabled."""
        if self.use_bvh:
            if len(world):
                world = HittableList(BVHNode(world))
            if len(lights):
                lights = HittableList(BVHNode(lights))
        return world, lights