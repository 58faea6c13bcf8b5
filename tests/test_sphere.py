"""Unit tests for sphere intersection.

Tests cover:
- Ray hitting sphere from outside (front face)
- Ray missing sphere
- Ray starting inside sphere (back face)
- Texture coordinates and bounding boxes
"""

import math

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import Sphere, sphere_uv


class TestSphereIntersection:
    """Tests for Sphere.hit()."""

    def test_hit_from_outside_at_distance_minus_radius(self, gray):
        sphere = Sphere(Vector3(1.0, 2.0, -3.0), 0.75, gray)
        origin = Vector3(1.0, 2.0, 5.0)
        ray = Ray(origin, sphere.center - origin)
        rec = sphere.hit(ray, 0.0, math.inf)
        assert rec is not None
        distance = (sphere.center - origin).length()
        # Direction is unnormalized, so the hit parameter is scaled by 1/|d|
        assert rec.t * ray.direction.length() == pytest.approx(distance - 0.75)

    def test_outward_normal_from_outside(self, gray):
        sphere = Sphere(Vector3(0.0, 0.0, -1.0), 0.5, gray)
        rec = sphere.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert rec.t == pytest.approx(0.5)
        assert rec.p.z == pytest.approx(-0.5)
        assert rec.normal.z == pytest.approx(1.0)
        assert rec.front_face
        assert rec.material is gray

    def test_miss(self, gray):
        sphere = Sphere(Vector3(0.0, 0.0, -1.0), 0.5, gray)
        ray = Ray(Vector3(0.0, 2.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert sphere.hit(ray, 0.001, math.inf) is None

    def test_hit_from_inside_is_back_face(self, gray):
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 2.0, gray)
        rec = sphere.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0)), 0.001, math.inf)
        assert rec.t == pytest.approx(2.0)
        assert not rec.front_face
        # Stored normal opposes the ray, the outward normal would be +x
        assert rec.normal.x == pytest.approx(-1.0)

    def test_t_range_is_respected(self, gray):
        sphere = Sphere(Vector3(0.0, 0.0, -5.0), 1.0, gray)
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert sphere.hit(ray, 0.001, 3.0) is None
        rec = sphere.hit(ray, 4.5, math.inf)
        assert rec.t == pytest.approx(6.0)

    def test_negative_radius_flips_normal(self, gray):
        shell = Sphere(Vector3(0.0, 0.0, -1.0), -0.5, gray)
        rec = shell.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert rec is not None
        assert not rec.front_face


class TestSphereUV:
    """Tests for sphere_uv()."""

    @pytest.mark.parametrize("point, expected", [
        (Vector3(1.0, 0.0, 0.0), (0.50, 0.50)),
        (Vector3(0.0, 1.0, 0.0), (0.50, 1.00)),
        (Vector3(-1.0, 0.0, 0.0), (0.00, 0.50)),
        (Vector3(0.0, 0.0, 1.0), (0.25, 0.50)),
        (Vector3(0.0, -1.0, 0.0), (0.50, 0.00)),
    ])
    def test_known_points(self, point, expected):
        uv = sphere_uv(point)
        assert (uv.u, uv.v) == pytest.approx(expected)


class TestSphereBoundingBox:
    def test_box_encloses_sphere(self, gray):
        box = Sphere(Vector3(1.0, 2.0, 3.0), 0.5, gray).bounding_box()
        assert box.minimum == Vector3(0.5, 1.5, 2.5)
        assert box.maximum == Vector3(1.5, 2.5, 3.5)

    def test_negative_radius_box_uses_magnitude(self, gray):
        box = Sphere(Vector3(0.0, 0.0, 0.0), -1.0, gray).bounding_box()
        assert box.minimum == Vector3(-1.0, -1.0, -1.0)
        assert box.maximum == Vector3(1.0, 1.0, 1.0)
