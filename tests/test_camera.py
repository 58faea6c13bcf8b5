"""Unit tests for the look-at camera and animation paths."""

import pytest

from pathtracer.camera.animation import ease_in_out_quint, orbit_camera, sweep_camera
from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3


def assert_vec(actual, expected):
    assert (actual.x, actual.y, actual.z) == pytest.approx(expected)


class TestCamera:
    """Tests for Camera.get_ray()."""

    def test_center_ray_points_at_target(self):
        camera = Camera(Vector3(1.0, 2.0, 3.0), Vector3(1.0, 2.0, -7.0), vertical_fov=40.0,
                        focus_dist=10.0)
        ray = camera.get_ray(0.5, 0.5)
        assert ray.origin == Vector3(1.0, 2.0, 3.0)
        assert_vec(ray.direction.normalize(), (0.0, 0.0, -1.0))

    def test_corners_span_field_of_view(self, square_camera):
        assert_vec(square_camera.get_ray(0.0, 0.0).direction, (-1.0, -1.0, -1.0))
        assert_vec(square_camera.get_ray(1.0, 1.0).direction, (1.0, 1.0, -1.0))
        assert_vec(square_camera.get_ray(1.0, 0.0).direction, (1.0, -1.0, -1.0))

    def test_aspect_ratio_widens_view(self):
        camera = Camera(Vector3(), Vector3(0.0, 0.0, -1.0), vertical_fov=90.0,
                        aspect_ratio=2.0, focus_dist=1.0)
        assert_vec(camera.get_ray(1.0, 0.5).direction, (2.0, 0.0, -1.0))

    def test_aperture_moves_origin_within_lens(self):
        camera = Camera(Vector3(), Vector3(0.0, 0.0, -1.0), aperture=0.5, focus_dist=4.0)
        focus_point = camera.get_ray(0.5, 0.5).at(1.0)
        for _ in range(50):
            ray = camera.get_ray(0.5, 0.5)
            assert ray.origin.length() <= 0.25
            assert ray.origin.z == pytest.approx(0.0)
            # Every lens sample converges on the focus plane
            assert_vec(ray.at(1.0), (focus_point.x, focus_point.y, focus_point.z))


class TestAnimation:
    """Tests for easing and camera paths."""

    @pytest.mark.parametrize("x, expected", [(0.0, 0.0), (0.5, 0.5), (1.0, 1.0), (0.25, 0.015625)])
    def test_ease_in_out_quint(self, x, expected):
        assert ease_in_out_quint(x) == pytest.approx(expected)

    def test_ease_is_monotonic(self):
        values = [ease_in_out_quint(i / 100) for i in range(101)]
        assert values == sorted(values)

    def test_sweep_endpoints(self):
        start = sweep_camera(0.0, 16.0 / 9.0)
        end = sweep_camera(1.0, 16.0 / 9.0)
        assert_vec(start.look_from, (12.0, 2.0, 8.0))
        assert_vec(end.look_from, (-12.0, 3.0, 8.0))
        assert start.vertical_fov == 20.0
        assert start.aperture == 0.1

    def test_orbit_keeps_radius(self):
        center = Vector3(0.0, 1.0, 0.0)
        for t in (0.0, 0.3, 0.7):
            camera = orbit_camera(t, 1.5, center=center, radius=5.0, height=1.0)
            offset = camera.look_from - center
            assert offset.length() == pytest.approx(5.0)
            assert camera.look_at == center
