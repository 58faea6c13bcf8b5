"""Unit tests for the AABB slab test.

Tests cover:
- Rays through the interior hit
- Rays missing every face
- Axis-parallel rays (zero direction components)
- Padding of flat boxes and box union
"""

import math

import pytest

from pathtracer.core.aabb import AABB, PADDING
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


def unit_box():
    return AABB(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 1.0, 1.0))


class TestSlabHit:
    """Tests for AABB.hit()."""

    def test_ray_through_interior_hits(self):
        ray = Ray(Vector3(-1.0, -1.0, -1.0), Vector3(1.0, 1.0, 1.0))
        assert unit_box().hit(ray, 0.0, math.inf)

    def test_ray_missing_every_face(self):
        ray = Ray(Vector3(-1.0, 2.0, 0.5), Vector3(1.0, 0.0, 0.1))
        assert not unit_box().hit(ray, 0.0, math.inf)

    def test_box_behind_ray_is_missed(self):
        ray = Ray(Vector3(0.5, 0.5, 3.0), Vector3(0.0, 0.0, 1.0))
        assert not unit_box().hit(ray, 0.0, math.inf)

    def test_t_range_excludes_box(self):
        ray = Ray(Vector3(0.5, 0.5, 3.0), Vector3(0.0, 0.0, -1.0))
        assert not unit_box().hit(ray, 0.0, 1.0)
        assert unit_box().hit(ray, 0.0, 2.5)

    def test_axis_parallel_ray_inside_slab(self):
        """Zero direction components must not divide by zero."""
        ray = Ray(Vector3(0.5, 0.5, -5.0), Vector3(0.0, 0.0, 1.0))
        assert unit_box().hit(ray, 0.0, math.inf)

    def test_axis_parallel_ray_outside_slab(self):
        ray = Ray(Vector3(1.5, 0.5, -5.0), Vector3(0.0, 0.0, 1.0))
        assert not unit_box().hit(ray, 0.0, math.inf)


class TestBoxHelpers:
    """Tests for padding, containment and union."""

    def test_padded_flat_box_gets_thickness(self):
        flat = AABB(Vector3(0.0, 2.0, 0.0), Vector3(1.0, 2.0, 1.0)).padded()
        assert flat.maximum.y - flat.minimum.y == pytest.approx(PADDING)
        assert flat.minimum.x == 0.0 and flat.maximum.x == 1.0

    def test_padded_flat_box_is_hit_head_on(self):
        flat = AABB(Vector3(0.0, 2.0, 0.0), Vector3(1.0, 2.0, 1.0)).padded()
        ray = Ray(Vector3(0.5, 5.0, 0.5), Vector3(0.0, -1.0, 0.0))
        assert flat.hit(ray, 0.0, math.inf)

    def test_surrounding_box_contains_both(self):
        a = unit_box()
        b = AABB(Vector3(-2.0, 0.5, 0.5), Vector3(-1.0, 3.0, 0.7))
        union = AABB.surrounding_box(a, b)
        assert union.contains(a)
        assert union.contains(b)
        assert union.minimum == Vector3(-2.0, 0.0, 0.0)
        assert union.maximum == Vector3(1.0, 3.0, 1.0)

    def test_centroid(self):
        assert unit_box().centroid() == Vector3(0.5, 0.5, 0.5)
