"""Vectors, rays, hit records and ray/sphere intersection."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from raytracer.color import Color

# Machine epsilon of single precision floats.
_EPSILON = 1.1920928955078125e-07


@dataclass(frozen=True)
class Vec3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.__mul__(scalar)

    def dot(self, other: Vec3) -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Return a unit vector with the same direction."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vec3(self.x / length, self.y / length, self.z / length)


@dataclass
class Ray:
    """A ray with an origin and a direction."""

    origin: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, -1.0))


@dataclass
class HitPoint:
    """The result of intersecting a ray with a shape."""

    is_intersecting: bool = False
    distance: float = 0.0
    hit_name: str = ""
    hit_color: Color = field(default_factory=Color)
    hit_point: Vec3 = field(default_factory=Vec3)
    ray_direction: Vec3 = field(default_factory=Vec3)


def intersect_ray_sphere(
    origin: Vec3, direction: Vec3, center: Vec3, radius_squared: float
) -> float | None:
    """Return the distance along a normalized ray to a sphere, or None on a miss."""
    diff = center - origin
    t0 = diff.dot(direction)
    d_squared = diff.dot(diff) - t0 * t0
    if d_squared > radius_squared:
        return None
    t1 = math.sqrt(radius_squared - d_squared)
    distance = t0 - t1 if t0 > t1 + _EPSILON else t0 + t1
    if distance > _EPSILON:
        return distance
    return None