"""An interactive camera that refines the image progressively in a window."""

from __future__ import annotations

import math
from collections.abc import Iterator

import pygame

from .camera import Camera
from .color import to_byte
from .config import CameraConfig
from .hittable import HittableList
from .thread_pool import ThreadPool
from .vec3 import Color, Vec3

_FONT_PATHS = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/freefont/FreeSans.ttf",
    "/Library/Fonts/Arial.ttf",
    "/System/Library/Fonts/Supplemental/Arial.ttf",
    "/System/Library/Fonts/SFNS.ttf",
)
_FONT_SIZE = 14
_MOVE_STEP = 10.0
_FPS_INTERVAL_MS = 1000
_TEXT_PADDING = 10
_WHITE = (255, 255, 255)


class DynamicCamera(Camera):
    """Renders in a window, one stratified sample per pixel per frame.

    W/A/S/D move the camera, + and - change the samples per pixel and
    Escape or closing the window ends the loop. Tiles grow when the frame
    rate is high and shrink when it is low. GPU rendering is requested
    through ``use_gpu`` but always runs on the CPU.
    """

    MIN_TILE_SIZE = 16
    DEFAULT_TILE_SIZE = 32
    MAX_TILE_SIZE = 64

    def __init__(self, config: CameraConfig) -> None:
        super().__init__(config)
        self.samples_taken = 0
        self.frame = 0
        self.last_fps_time = 0
        self.fps = 0.0
        self.tile_size = self.DEFAULT_TILE_SIZE
        self._reset_buffers()

    def _reset_buffers(self) -> None:
        self.accumulation = [Color(0, 0, 0)] * (self.image_width * self.image_height)

    def _tiles(self) -> Iterator[tuple[int, int, int, int]]:
        """Row and column bounds of every tile, row by row."""
        size = self.tile_size
        for start_r in range(0, self.image_height, size):
            for start_c in range(0, self.image_width, size):
                yield (
                    start_r,
                    min(start_r + size, self.image_height),
                    start_c,
                    min(start_c + size, self.image_width),
                )

    def _trace_row(
        self,
        j: int,
        start_c: int,
        end_c: int,
        s_i: int,
        s_j: int,
        world: HittableList,
        lights: HittableList,
    ) -> None:
        row = j * self.image_width
        for i in range(start_c, end_c):
            sample = self.ray_color(self.get_ray(i, j, s_i, s_j), self.max_depth, world, lights)
            self.accumulation[row + i] = self.accumulation[row + i] + sample

    def step(
        self, world: HittableList, lights: HittableList, pool: ThreadPool | None = None
    ) -> bool:
        """Add one sample to every pixel unless already converged.

        Returns True if the image had already converged.
        """
        sqrt_spp = int(math.sqrt(self.samples_per_pixel))
        converged = self.samples_taken >= sqrt_spp * sqrt_spp

        if not converged:
            s_i = self.samples_taken % sqrt_spp
            s_j = self.samples_taken // sqrt_spp
            if self.use_parallelism and pool is None:
                pool = ThreadPool()
            for start_r, end_r, start_c, end_c in self._tiles():
                if self.use_parallelism:
                    with pool:
                        for j in range(start_r, end_r):
                            pool.submit_job(
                                lambda j=j, c0=start_c, c1=end_c: self._trace_row(
                                    j, c0, c1, s_i, s_j, world, lights
                                )
                            )
                else:
                    for j in range(start_r, end_r):
                        self._trace_row(j, start_c, end_c, s_i, s_j, world, lights)
            self.samples_taken += 1

        self.frame += 1
        return converged

    def pixel_bytes(self) -> bytes:
        """The averaged image as packed 8-bit RGB, row by row."""
        scale = 1.0 / max(1, self.samples_taken)
        return bytes(to_byte(c) for color in self.accumulation for c in color * scale)

    def move(self, offset: Vec3) -> None:
        """Move the camera and its target by ``offset`` and restart sampling."""
        self.lookfrom = self.lookfrom + offset
        self.lookat = self.lookat + offset
        self._reset_buffers()
        self.samples_taken = 0
        self.initialize()

    def adjust_samples(self, delta: int) -> None:
        """Change the samples per pixel by ``delta``, never going below 1."""
        if delta > 0:
            self.samples_per_pixel += delta
        elif delta < 0 and self.samples_per_pixel > 1:
            self.samples_per_pixel = max(1, self.samples_per_pixel + delta)

    def update_fps(self, now_ms: int, converged: bool) -> bool:
        """Recompute the frame rate once a second and resize tiles to suit.

        Returns True if the frame rate was recomputed.
        """
        elapsed = now_ms - self.last_fps_time
        if elapsed < _FPS_INTERVAL_MS:
            return False
        self.fps = 1000.0 * self.frame / elapsed
        self.frame = 0
        self.last_fps_time = now_ms

        if not converged and self.fps > 30.0 and self.tile_size < self.MAX_TILE_SIZE:
            self.tile_size = min(self.tile_size * 2, self.MAX_TILE_SIZE)
        elif not converged and self.fps < 15.0 and self.tile_size > self.MIN_TILE_SIZE:
            self.tile_size = max(self.tile_size // 2, self.MIN_TILE_SIZE)
        return True

    def fps_label(self, converged: bool) -> str:
        """The overlay text showing the frame rate."""
        if converged:
            return f"{self.fps:0.1f} fps  ✓ Converged"
        return f"{self.fps:0.1f} fps"

    def _handle_events(self) -> bool:
        """Process window input; returns False when the loop should end."""
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_EQUALS:
                    self.adjust_samples(1)
                elif event.key == pygame.K_MINUS:
                    self.adjust_samples(-1)

        keys = pygame.key.get_pressed()
        moves = {
            pygame.K_w: Vec3(0, 0, _MOVE_STEP),
            pygame.K_s: Vec3(0, 0, -_MOVE_STEP),
            pygame.K_a: Vec3(-_MOVE_STEP, 0, 0),
            pygame.K_d: Vec3(_MOVE_STEP, 0, 0),
        }
        pressed = [offset for key, offset in moves.items() if keys[key]]
        if pressed:
            self.move(sum(pressed, Vec3(0, 0, 0)))
        return running

    @staticmethod
    def _load_font() -> pygame.font.Font | None:
        for path in _FONT_PATHS:
            try:
                return pygame.font.Font(path, _FONT_SIZE)
            except (OSError, pygame.error):
                continue
        return None

    def render(self, world: HittableList, lights: HittableList) -> None:
        """Run the interactive loop until the window is closed."""
        self.initialize()
        world, lights = self._prepare_scene(world, lights)
        self._reset_buffers()
        self.samples_taken = 0
        self.frame = 0

        pygame.init()
        try:
            pygame.font.init()
            screen = pygame.display.set_mode((self.image_width, self.image_height))
            pygame.display.set_caption("Dynamic Camera")
            font = self._load_font()
            pool = ThreadPool()
            self.last_fps_time = pygame.time.get_ticks()

            while self._handle_events():
                converged = self.step(world, lights, pool)
                self.update_fps(pygame.time.get_ticks(), converged)

                image = pygame.image.frombuffer(
                    self.pixel_bytes(), (self.image_width, self.image_height), "RGB"
                )
                screen.fill((0, 0, 0))
                screen.blit(image, (0, 0))
                if font is not None:
                    text = font.render(self.fps_label(converged), True, _WHITE)
                    screen.blit(
                        text,
                        (self.image_width - text.get_width() - _TEXT_PADDING, _TEXT_PADDING),
                    )
                pygame.display.flip()
        finally:
            pygame.quit()