"""RGB colour values with component-wise arithmetic."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGB colour with floating point channels."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __str__(self) -> str:
        return f"({self.r:g},{self.g:g},{self.b:g})\n"