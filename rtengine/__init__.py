"""A physically based path tracer with PPM image output and an interactive progressive viewer."""

__version__ = "0.1.0"