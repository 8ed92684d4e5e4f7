import math

import pytest

from raytracer.color import Color
from raytracer.geometry import HitPoint, Ray, Vec3, intersect_ray_sphere


def test_vector_addition_and_subtraction_round_trip():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    assert (a + b) - b == a


def test_scalar_multiplication_both_sides():
    v = Vec3(1.0, -2.0, 3.0)
    assert 2 * v == v * 2
    assert v * 2 == Vec3(2.0, -4.0, 6.0)


def test_dot_of_orthogonal_vectors_is_zero():
    assert Vec3(1.0, 0.0, 0.0).dot(Vec3(0.0, 1.0, 0.0)) == 0.0


def test_length_of_axis_vector():
    assert Vec3(0.0, 0.0, -7.0).length() == 7.0


def test_normalized_has_unit_length_and_same_direction():
    v = Vec3(3.0, -4.0, 12.0)
    n = v.normalized()
    assert math.isclose(n.length(), 1.0)
    assert math.isclose(n.dot(v), v.length())


def test_normalizing_zero_vector_raises():
    with pytest.raises(ValueError):
        Vec3().normalized()


def test_ray_defaults():
    ray = Ray()
    assert ray.origin == Vec3(0.0, 0.0, 0.0)
    assert ray.direction == Vec3(0.0, 0.0, -1.0)


def test_hitpoint_defaults():
    hit = HitPoint()
    assert hit.is_intersecting is False
    assert hit.distance == 0.0
    assert hit.hit_name == ""
    assert hit.hit_color == Color(0.0, 0.0, 0.0)


def test_intersect_ray_sphere_distance():
    distance = intersect_ray_sphere(
        Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, 1.0), Vec3(0.0, 0.0, 5.0), 1.0 * 1.0
    )
    assert distance == pytest.approx(4.0)


def test_intersect_ray_sphere_miss():
    assert (
        intersect_ray_sphere(
            Vec3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0), Vec3(0.0, 0.0, 5.0), 1.0
        )
        is None
    )


def test_sphere_behind_ray_is_not_hit():
    assert (
        intersect_ray_sphere(
            Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0), Vec3(0.0, 0.0, 5.0), 1.0
        )
        is None
    )


def test_origin_inside_sphere_hits_far_side():
    distance = intersect_ray_sphere(
        Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0), Vec3(0.0, 0.0, 0.0), 4.0
    )
    assert distance == pytest.approx(2.0)