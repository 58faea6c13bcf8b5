# geometry/rectangle.py
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.aabb import AABB, PADDING
from pathtracer.errors import InvalidOrientationError, NotAxisAlignedError
from pathtracer.geometry.hittable import Hittable, HitRecord

_AXIS_NAMES = "xyz"


def _check_orientation(orientation) -> int:
    if isinstance(orientation, bool) or orientation not in (1, -1):
        raise InvalidOrientationError(orientation)
    return int(orientation)


class AxisAlignedRectangle(Hittable):
    """
    Rectangle lying in a plane perpendicular to one coordinate axis.

    Subclasses fix which axis is perpendicular (`k_axis`) and which two span
    the rectangle (`a_axis`, `b_axis`). `orientation` is +1 when the outward
    normal points along the positive k axis and -1 when it points against it.
    """
    a_axis = 0
    b_axis = 1
    k_axis = 2

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float,
                 material, orientation: int = 1):
        self.a0, self.a1 = min(a0, a1), max(a0, a1)
        self.b0, self.b1 = min(b0, b1), max(b0, b1)
        self.k = k
        self.material = material
        self.orientation = _check_orientation(orientation)

    @classmethod
    def from_corners(cls, p0: Vector3, p1: Vector3, material, orientation: int = 1):
        """
        Builds the rectangle spanned by two opposite corners. Both corners
        must share the coordinate of the fixed axis.
        """
        if p0[cls.k_axis] != p1[cls.k_axis]:
            raise NotAxisAlignedError(cls.__name__, _AXIS_NAMES[cls.k_axis],
                                      p0[cls.k_axis], p1[cls.k_axis])
        return cls(p0[cls.a_axis], p1[cls.a_axis], p0[cls.b_axis], p1[cls.b_axis],
                   p0[cls.k_axis], material, orientation)

    def _point(self, a: float, b: float, k: float) -> Vector3:
        coords = [0.0, 0.0, 0.0]
        coords[self.a_axis] = a
        coords[self.b_axis] = b
        coords[self.k_axis] = k
        return Vector3(*coords)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        dk = ray.direction[self.k_axis]
        if dk == 0.0:
            return None
        t = (self.k - ray.origin[self.k_axis]) / dk
        if t < t_min or t > t_max:
            return None

        a = ray.origin[self.a_axis] + t * ray.direction[self.a_axis]
        b = ray.origin[self.b_axis] + t * ray.direction[self.b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        width = self.a1 - self.a0
        height = self.b1 - self.b0
        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        rec.uv = UV((a - self.a0) / width if width > 0 else 0.0,
                    (b - self.b0) / height if height > 0 else 0.0)
        rec.set_face_normal(ray, self._point(0.0, 0.0, float(self.orientation)))
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        box = AABB(self._point(self.a0, self.b0, self.k),
                   self._point(self.a1, self.b1, self.k))
        return box.padded(PADDING)

    def __repr__(self) -> str:
        a, b, k = (_AXIS_NAMES[i] for i in (self.a_axis, self.b_axis, self.k_axis))
        return (f"{type(self).__name__}({a}=[{self.a0}, {self.a1}], {b}=[{self.b0}, {self.b1}], "
                f"{k}={self.k}, orientation={self.orientation})")


class RectangleXY(AxisAlignedRectangle):
    """Rectangle x0..x1, y0..y1 at z = k."""
    a_axis, b_axis, k_axis = 0, 1, 2


class RectangleXZ(AxisAlignedRectangle):
    """Rectangle x0..x1, z0..z1 at y = k."""
    a_axis, b_axis, k_axis = 0, 2, 1


class RectangleYZ(AxisAlignedRectangle):
    """Rectangle y0..y1, z0..z1 at x = k."""
    a_axis, b_axis, k_axis = 1, 2, 0
