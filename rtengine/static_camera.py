"""A camera that renders one image to a plain PPM file."""

from __future__ import annotations

import itertools
import math
import sys
from pathlib import Path
from typing import TextIO

from .camera import Camera
from .color import write_color
from .config import CameraConfig
from .hittable import HittableList
from .thread_pool import ThreadPool
from .vec3 import Color


class StaticCamera(Camera):
    """Renders the scene once and writes it to ``output_dir / output_file_name``.

    GPU rendering is requested through ``use_gpu`` but always runs on the CPU.
    """

    def __init__(
        self,
        config: CameraConfig,
        output_file_name: str = "image.ppm",
        output_dir: str | Path = "output",
    ) -> None:
        super().__init__(config)
        self.output_file = output_file_name
        self.output_dir = Path(output_dir)

    @property
    def output_path(self) -> Path:
        return self.output_dir / self.output_file

    def render(self, world: HittableList, lights: HittableList) -> Path:
        """Render the scene to the output file and return its path."""
        self.initialize()
        world, lights = self._prepare_scene(world, lights)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_path
        with path.open("w", encoding="ascii") as image:
            image.write(f"P3\n{self.image_width} {self.image_height}\n255\n")
            if self.use_parallelism:
                self._render_parallel(image, world, lights)
            else:
                self._render_serial(image, world, lights)

        print("\rDone.                 ", file=sys.stderr)
        return path

    def _pixel_color(self, i: int, j: int, world: HittableList, lights: HittableList) -> Color:
        sqrt_spp = int(math.sqrt(self.samples_per_pixel))
        return sum(
            (
                self.ray_color(self.get_ray(i, j, s_i, s_j), self.max_depth, world, lights)
                for s_j, s_i in itertools.product(range(sqrt_spp), repeat=2)
            ),
            Color(0, 0, 0),
        )

    def _report_progress(self, j: int) -> None:
        print(f"\rScanlines remaining: {self.image_height - j} ", end="", file=sys.stderr, flush=True)

    def _render_serial(self, image: TextIO, world: HittableList, lights: HittableList) -> None:
        for j in range(self.image_height):
            self._report_progress(j)
            for i in range(self.image_width):
                write_color(image, self.pixel_samples_scale * self._pixel_color(i, j, world, lights))

    def _render_parallel(self, image: TextIO, world: HittableList, lights: HittableList) -> None:
        pool = ThreadPool()
        row_colors = [Color(0, 0, 0)] * self.image_width

        def shade(i: int, j: int) -> None:
            row_colors[i] = self._pixel_color(i, j, world, lights)

        for j in range(self.image_height):
            self._report_progress(j)
            with pool:
                for i in range(self.image_width):
                    pool.submit_job(lambda i=i, j=j: shade(i, j))
            for color in row_colors:
                write_color(image, self.pixel_samples_scale * color)