"""Ray tracing framework: colours, vectors, shapes, ray-sphere intersection and PPM output."""

__version__ = "0.1.0"

__all__ = ["color", "geometry", "pixel", "ppm", "shapes", "renderer"]