"""The renderer's command-line entry point."""

from __future__ import annotations

from collections.abc import Sequence

from .camera import Camera
from .cli import CLIOptions, parse_cli, print_help
from .config import CameraConfig
from .dynamic_camera import DynamicCamera
from .scenes import cornell_box_scene
from .static_camera import StaticCamera


def _config_from(options: CLIOptions) -> CameraConfig:
    return CameraConfig(
        image_width=options.width,
        samples_per_pixel=options.samples,
        max_depth=options.depth,
        use_parallelism=options.use_parallelism,
        use_bvh=options.use_bvh,
        use_gpu=options.use_gpu,
    )


def _camera_for(options: CLIOptions, config: CameraConfig) -> Camera:
    if not options.use_static:
        return DynamicCamera(config)
    return StaticCamera(config, options.static_output_file)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments and render the Cornell box scene."""
    options = parse_cli(argv)
    if options.help:
        print_help()
    elif not options.any_errors:
        scene = cornell_box_scene(_config_from(options))
        _camera_for(options, scene.config).render(scene.world, scene.lights)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())