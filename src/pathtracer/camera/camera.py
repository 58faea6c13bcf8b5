# camera/camera.py
import math
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk


class Camera:
    """
    Thin-lens camera placed by look-from / look-at.

    `vertical_fov` is in degrees. With `aperture` > 0, ray origins are spread
    over a lens disk and only points at `focus_dist` are in sharp focus.
    The derived basis and viewport are fixed at construction.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, up: Vector3 = None,
                 vertical_fov: float = 40.0, aspect_ratio: float = 16.0 / 9.0,
                 aperture: float = 0.0, focus_dist: float = 10.0):
        self.look_from = look_from
        self.look_at = look_at
        self.up = up if up is not None else Vector3(0.0, 1.0, 0.0)
        self.vertical_fov = vertical_fov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.lens_radius = aperture / 2.0

        h = math.tan(math.radians(vertical_fov) / 2.0)
        viewport_height = 2.0 * h
        viewport_width = aspect_ratio * viewport_height

        # Orthonormal basis: w points backwards, u right, v up
        self.w = (look_from - look_at).normalize()
        self.u = self.up.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.horizontal = self.u * (focus_dist * viewport_width)
        self.vertical = self.v * (focus_dist * viewport_height)
        self.lower_left_corner = (look_from
                                  - self.horizontal / 2.0
                                  - self.vertical / 2.0
                                  - self.w * focus_dist)

    def get_ray(self, s: float, t: float) -> Ray:
        """
        Ray through normalized viewport coordinates (s, t), with (0, 0) the
        lower left and (1, 1) the upper right corner.
        """
        target = self.lower_left_corner + self.horizontal * s + self.vertical * t
        if self.lens_radius <= 0:
            return Ray(self.look_from, target - self.look_from)

        rd = random_in_unit_disk() * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y
        origin = self.look_from + offset
        return Ray(origin, target - origin)

    def __repr__(self) -> str:
        return (f"Camera(look_from={self.look_from}, look_at={self.look_at}, "
                f"vertical_fov={self.vertical_fov}, aperture={self.aperture})")
