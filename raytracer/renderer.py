"""Rendering a test image into a colour buffer and a PPM file."""

from __future__ import annotations

import argparse

from raytracer.color import Color
from raytracer.pixel import Pixel
from raytracer.ppm import PpmWriter

_CHECKER_PATTERN_SIZE = 20


class Renderer:
    """Renders a checkerboard into a colour buffer and saves it as PPM."""

    def __init__(self, width: int, height: int, filename: str) -> None:
        self.width = width
        self.height = height
        self.filename = filename
        self._color_buffer = [Color(0.0, 0.0, 0.0)] * (width * height)
        self._ppm = PpmWriter(width, height)

    def render(self) -> None:
        """Render the checkerboard pattern and save it."""
        size = _CHECKER_PATTERN_SIZE
        for y in range(self.height):
            for x in range(self.width):
                if (x // size) % 2 != (y // size) % 2:
                    color = Color(0.0, 1.0, x / self.height)
                else:
                    color = Color(1.0, 0.0, y / self.width)
                self.write(Pixel(x, y, color))
        self._ppm.save(self.filename)

    def write(self, pixel: Pixel) -> None:
        """Store a pixel in the colour buffer and the image."""
        buf_pos = self.width * pixel.y + pixel.x
        if not 0 <= buf_pos < len(self._color_buffer):
            raise IndexError(f"pixel out of image: {pixel.x},{pixel.y}")
        self._color_buffer[buf_pos] = pixel.color
        self._ppm.write(pixel)

    @property
    def color_buffer(self) -> list[Color]:
        """The rendered colours in row-major order."""
        return self._color_buffer


def main(argv: list[str] | None = None) -> int:
    """Render the checkerboard image to a PPM file."""
    parser = argparse.ArgumentParser(description="Render a checkerboard image.")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("--output", default="./checkerboard.ppm")
    args = parser.parse_args(argv)
    Renderer(args.width, args.height, args.output).render()
    return 0