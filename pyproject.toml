[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtengine"
version = "0.1.0"
description = "A physically based path tracer with PPM image output and an interactive progressive viewer"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["ray tracing", "path tracing", "rendering", "bvh", "monte carlo", "ppm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raytracer = "rtengine.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rtengine"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
