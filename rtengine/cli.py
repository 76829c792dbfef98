"""Command-line options for the renderer."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INT_OPTIONS = {"--width": "width", "--samples": "samples", "--depth": "depth"}

_HELP_TEXT = """\
Raytracer: A high-performance real-time ray tracing engine.
Renders scenes using either a static or dynamic camera and supports parallelism and acceleration structures.

Usage: raytracer [options]

Options:
  -h, --help                 Show this help message
  --camera [static|dynamic]  Select camera type (default: static)
  --output <file>            Output file name for static camera (default: image.ppm)
  -p, --parallel             Enable multithreaded rendering
  -b, --bvh                  Use bounding volume hierarchy for scene acceleration
  -g, --gpu                  Render using CUDA GPU kernels
  --width <int>              Image width for scene render (default: 600)
  --samples <int>            Number of samples per pixel for ray tracing- higher number reduces fuzz, but increases rendering time (default: 100)
  --depth <int>              Number of recursive light bounces to track- higher number makes ray tracing better, but increases rendering time (default: 50)

Examples:
  raytracer --camera static --output render.ppm --parallel --bvh
  raytracer --camera dynamic --parallel
  raytracer --camera static -g --parallel
"""


@dataclass
class CLIOptions:
    """Parsed options; ``errors`` lists every problem found while parsing."""

    help: bool = False
    use_static: bool = True
    static_output_file: str = "image.ppm"
    use_parallelism: bool = False
    use_bvh: bool = False
    width: int = 600
    samples: int = 100
    depth: int = 50
    any_errors: bool = False
    use_gpu: bool = False
    errors: list[str] = field(default_factory=list)


def _parse_int(text: str) -> int:
    """Read a leading 32-bit integer, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_cli(argv: Sequence[str] | None = None) -> CLIOptions:
    """Parse the arguments after the program name.

    Problems are reported on standard error and recorded in the result;
    parsing carries on past them.
    """
    if argv is None:
        argv = sys.argv[1:]
    opts = CLIOptions()
    output_selected = False

    def report(message: str) -> None:
        opts.any_errors = True
        opts.errors.append(message)
        print(message, file=sys.stderr)

    args = iter(argv)
    for arg in args:
        if arg in ("-h", "--help"):
            opts.help = True
        elif arg == "--camera":
            camera = next(args, None)
            if camera is None:
                report("--camera requires an argument: static or dynamic")
            elif camera == "static":
                opts.use_static = True
            elif camera == "dynamic":
                opts.use_static = False
            else:
                report(f"Unknown camera type: {camera}")
        elif arg == "--output":
            output = next(args, None)
            if output is None:
                report("--output requires a filename")
            else:
                opts.static_output_file = output
                output_selected = True
        elif arg in ("-p", "--parallel"):
            opts.use_parallelism = True
        elif arg in ("-b", "--bvh"):
            opts.use_bvh = True
        elif arg in ("-g", "--gpu"):
            opts.use_gpu = True
        elif arg in _INT_OPTIONS:
            value = next(args, None)
            if value is None:
                report(f"{arg} requires a number")
                continue
            try:
                setattr(opts, _INT_OPTIONS[arg], _parse_int(value))
            except ValueError:
                report(f"{arg} requires a valid integer")
        else:
            report(f"Unknown option: {arg}")

    if not opts.use_static and output_selected:
        print(
            "You can only set an output file if the static camera is selected, ignoring...",
            file=sys.stderr,
        )
    return opts


def help_text() -> str:
    """The usage text."""
    return _HELP_TEXT


def print_help() -> None:
    """Print the usage text to standard output."""
    sys.stdout.write(_HELP_TEXT)