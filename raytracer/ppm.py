"""Writing images in the plain-text PPM (P3) format."""

from __future__ import annotations

from raytracer.pixel import Pixel

_CHANNELS = 3
_VALUES_PER_LINE = 19


def _to_byte(channel: float) -> int:
    return int(max(0.0, min(255.0 * channel, 255.0)))


class PpmWriter:
    """Collects pixels into an RGB buffer and saves it as a P3 PPM file."""

    def __init__(self, width: int, height: int, file: str = "untitled.ppm") -> None:
        self.file = file
        self.width = width
        self.height = height
        self._data = [0] * (width * height * _CHANNELS)

    def write(self, pixel: Pixel) -> None:
        """Store a pixel, flipping rows so that y = 0 is the bottom line."""
        buf_pos = self.width * (self.height - 1 - pixel.y) + pixel.x
        if not 0 <= buf_pos < self.width * self.height:
            raise IndexError(
                f"critical write position for pixel ({pixel.x},{pixel.y})"
            )
        pos = _CHANNELS * buf_pos
        c = pixel.color
        self._data[pos : pos + _CHANNELS] = [_to_byte(c.r), _to_byte(c.g), _to_byte(c.b)]

    def _text(self) -> str:
        parts = [f"P3 {self.width} {self.height} 255 \n"]
        for index, value in enumerate(self._data, start=1):
            parts.append(f"{value} ")
            if index % _VALUES_PER_LINE == 0:
                parts.append("\n")
        return "".join(parts)

    def save(self, file: str | None = None) -> None:
        """Write the image, optionally to a new file name."""
        if file is not None:
            self.file = file
        with open(self.file, "w", encoding="ascii") as out:
            out.write(self._text())