"""A single image pixel with position and colour."""

from __future__ import annotations

from dataclasses import dataclass, field

from raytracer.color import Color


@dataclass
class Pixel:
    """A pixel at integer coordinates carrying a colour."""

    x: int = 0
    y: int = 0
    color: Color = field(default_factory=Color)

    def __str__(self) -> str:
        c = self.color
        return f"Pixel[{self.x},{self.y}]({c.r:g},{c.g:g},{c.b:g})"