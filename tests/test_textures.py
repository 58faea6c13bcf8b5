"""Unit tests for textures and Perlin noise."""

import numpy as np
import pytest
from PIL import Image

from pathtracer.core.uv import UV
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials.perlin import Perlin
from pathtracer.materials.textures import (
    CheckerTexture,
    ImageTexture,
    MarbleTexture,
    NoiseTexture,
    SolidTexture,
)

ORIGIN_UV = UV(0.0, 0.0)


class TestSolidAndChecker:
    """Tests for constant and checker textures."""

    def test_solid_is_constant(self):
        texture = SolidTexture(Color(0.1, 0.2, 0.3))
        assert texture.value(UV(0.3, 0.9), Vector3(5.0, -2.0, 1.0)) == Color(0.1, 0.2, 0.3)

    def test_checker_sign_selects_texture(self):
        odd, even = Color(0.0, 0.0, 0.0), Color(1.0, 1.0, 1.0)
        checker = CheckerTexture(odd, even, scale=10.0)
        # sin(-1) * sin(1) * sin(1) < 0
        assert checker.value(ORIGIN_UV, Vector3(-0.1, 0.1, 0.1)) == odd
        assert checker.value(ORIGIN_UV, Vector3(0.1, 0.1, 0.1)) == even

    def test_checker_ignores_uv(self):
        checker = CheckerTexture(Color(0.0, 0.0, 0.0), Color(1.0, 1.0, 1.0))
        p = Vector3(0.1, 0.1, 0.1)
        assert checker.value(UV(0.0, 0.0), p) == checker.value(UV(0.9, 0.4), p)

    def test_checker_nests_textures(self):
        inner = CheckerTexture(Color(0.2, 0.2, 0.2), Color(0.4, 0.4, 0.4), scale=100.0)
        outer = CheckerTexture(inner, Color(1.0, 1.0, 1.0))
        assert outer.value(ORIGIN_UV, Vector3(-0.1, 0.1, 0.1)) in (Color(0.2, 0.2, 0.2),
                                                                   Color(0.4, 0.4, 0.4))


class TestPerlin:
    """Tests for the numba Perlin kernel."""

    def test_zero_on_lattice_points(self):
        perlin = Perlin(np.random.default_rng(3))
        for p in (Vector3(0.0, 0.0, 0.0), Vector3(1.0, 2.0, 3.0), Vector3(-4.0, 7.0, -1.0)):
            assert perlin.noise(p) == 0.0

    def test_seeded_generators_agree(self):
        a = Perlin(np.random.default_rng(11))
        b = Perlin(np.random.default_rng(11))
        p = Vector3(0.3, 1.7, -2.2)
        assert a.noise(p) == b.noise(p)
        assert a.turbulence(p) == b.turbulence(p)

    def test_noise_is_bounded(self):
        perlin = Perlin(np.random.default_rng(5))
        rng = np.random.default_rng(6)
        for x, y, z in rng.uniform(-20.0, 20.0, size=(200, 3)):
            assert -1.5 <= perlin.noise(Vector3(x, y, z)) <= 1.5

    def test_turbulence_is_non_negative(self):
        perlin = Perlin(np.random.default_rng(5))
        assert perlin.turbulence(Vector3(0.37, -1.2, 4.4)) >= 0.0


class TestNoiseTextures:
    """Tests for noise and marble textures."""

    def test_noise_texture_gray_in_range(self):
        texture = NoiseTexture(scale=4.0, seed=1)
        c = texture.value(ORIGIN_UV, Vector3(0.13, 0.52, 0.91))
        assert c.x == c.y == c.z
        assert -0.25 <= c.x <= 1.25

    def test_marble_blends_between_colors(self):
        texture = MarbleTexture(seed=2)
        for p in (Vector3(0.1, 0.2, 0.3), Vector3(-3.0, 1.5, 2.25), Vector3(9.0, 0.0, -4.0)):
            c = texture.value(ORIGIN_UV, p)
            assert 0.2 - 1e-12 <= c.x <= 0.8 + 1e-12

    def test_same_seed_same_pattern(self):
        p = Vector3(1.1, 2.2, 3.3)
        assert MarbleTexture(seed=9).value(ORIGIN_UV, p) == MarbleTexture(seed=9).value(ORIGIN_UV, p)


class TestImageTexture:
    """Tests for image-backed textures."""

    @pytest.fixture
    def image_path(self, tmp_path):
        # Top row red, green; bottom row blue, white
        pixels = np.array([[[255, 0, 0], [0, 255, 0]],
                           [[0, 0, 255], [255, 255, 255]]], dtype=np.uint8)
        path = tmp_path / "quad.png"
        Image.fromarray(pixels).save(path)
        return str(path)

    def test_v_axis_is_flipped(self, image_path):
        texture = ImageTexture(image_path)
        assert (texture.width, texture.height) == (2, 2)
        assert texture.value(UV(0.25, 0.75), Vector3()) == Color(1.0, 0.0, 0.0)
        assert texture.value(UV(0.25, 0.25), Vector3()) == Color(0.0, 0.0, 1.0)
        assert texture.value(UV(0.75, 0.25), Vector3()) == Color(1.0, 1.0, 1.0)

    def test_uv_wraps(self, image_path):
        texture = ImageTexture(image_path)
        assert texture.value(UV(1.75, 2.75), Vector3()) == texture.value(UV(0.75, 0.75), Vector3())
