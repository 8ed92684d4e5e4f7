"""Geometric shapes: an abstract base, axis-aligned boxes and spheres."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from raytracer.color import Color
from raytracer.geometry import HitPoint, Ray, Vec3, intersect_ray_sphere

_DEFAULT_NAME = "shape"
_DEFAULT_COLOR = Color(1.0, 1.0, 1.0)
_MISS_DISTANCE = 5.0


class Shape(ABC):
    """A named, coloured solid with a surface area and a volume."""

    def __init__(self, name: str = _DEFAULT_NAME, color: Color = _DEFAULT_COLOR) -> None:
        self.name = name
        self.color = color

    @abstractmethod
    def area(self) -> float:
        """Return the surface area."""

    @abstractmethod
    def volume(self) -> float:
        """Return the enclosed volume."""

    def __str__(self) -> str:
        return f"name: {self.name}\ncolor: {self.color}"


class Box(Shape):
    """An axis-aligned box spanned by two corners."""

    def __init__(
        self,
        min_corner: Vec3 | None = None,
        max_corner: Vec3 | None = None,
        name: str = _DEFAULT_NAME,
        color: Color = _DEFAULT_COLOR,
    ) -> None:
        super().__init__(name, color)
        self.min_corner = min_corner if min_corner is not None else Vec3(0.0, 0.0, 0.0)
        self.max_corner = max_corner if max_corner is not None else Vec3(1.0, 1.0, 1.0)

    def _extent(self) -> tuple[float, float, float]:
        lo, hi = self.min_corner, self.max_corner
        return abs(lo.x - hi.x), abs(lo.y - hi.y), abs(lo.z - hi.z)

    def area(self) -> float:
        length, width, height = self._extent()
        return 2 * (width * length + height * length + height * width)

    def volume(self) -> float:
        length, width, height = self._extent()
        return width * height * length

    def __str__(self) -> str:
        length, width, height = self._extent()
        return (
            super().__str__()
            + "objekt-type: Box\n"
            + f"length: {length:g}\n"
            + f"width: {width:g}\n"
            + f"height: {height:g}\n"
            + f"area: {self.area():g}\n"
            + f"volume: {self.volume():g}\n"
        )


class Sphere(Shape):
    """A sphere given by its centre and radius."""

    def __init__(
        self,
        center: Vec3 | None = None,
        radius: float = 1.0,
        name: str = _DEFAULT_NAME,
        color: Color = _DEFAULT_COLOR,
    ) -> None:
        super().__init__(name, color)
        self.center = center if center is not None else Vec3(0.0, 0.0, 0.0)
        self.radius = radius

    def area(self) -> float:
        return abs(4 * math.pi * self.radius**2)

    def volume(self) -> float:
        return abs((4.0 / 3.0) * math.pi * self.radius**3)

    def __str__(self) -> str:
        return (
            super().__str__()
            + "objekt-type: Box\n"
            + f"radius: {self.radius:g}\n"
            + f"area: {self.area():g}\n"
            + f"volume: {self.volume():g}\n"
        )

    def intersect(self, ray: Ray) -> HitPoint:
        """Intersect a ray with this sphere."""
        direction = ray.direction.normalized()
        distance = intersect_ray_sphere(ray.origin, direction, self.center, self.radius**2)
        hit = distance is not None
        if distance is None:
            distance = _MISS_DISTANCE
        return HitPoint(
            is_intersecting=hit,
            distance=distance,
            hit_name=self.name,
            hit_color=self.color,
            hit_point=ray.origin + distance * direction,
            ray_direction=direction,
        )