"""Pytest configuration for path tracer tests.

Shared fixtures: a reseeded global RNG for every test, a few common
materials, and a camera at the origin looking down -z whose viewport spans
[-1, 1] x [-1, 1] on the plane z = -1.
"""

import random

import pytest

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian


@pytest.fixture(autouse=True)
def seeded_random():
    """Reseed the global RNG so sampling-based tests are reproducible."""
    random.seed(1234)
    yield


@pytest.fixture
def gray():
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def white_light():
    return DiffuseLight(Color(1.0, 1.0, 1.0))


@pytest.fixture
def square_camera():
    """90 degree pinhole camera, aspect 1, focused on z = -1."""
    return Camera(
        look_from=Vector3(0.0, 0.0, 0.0),
        look_at=Vector3(0.0, 0.0, -1.0),
        vertical_fov=90.0,
        aspect_ratio=1.0,
        focus_dist=1.0,
    )
