# geometry/box.py
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.rectangle import RectangleXY, RectangleXZ, RectangleYZ
from pathtracer.geometry.world import HittableList


class AxisAlignedBox(Hittable):
    """
    Closed box made of six outward-facing rectangles.
    """
    def __init__(self, p0: Vector3, p1: Vector3, material):
        self.box_min = Vector3(min(p0.x, p1.x), min(p0.y, p1.y), min(p0.z, p1.z))
        self.box_max = Vector3(max(p0.x, p1.x), max(p0.y, p1.y), max(p0.z, p1.z))
        self.material = material

        lo, hi = self.box_min, self.box_max
        self.sides = HittableList([
            RectangleXY(lo.x, hi.x, lo.y, hi.y, hi.z, material, 1),
            RectangleXY(lo.x, hi.x, lo.y, hi.y, lo.z, material, -1),
            RectangleXZ(lo.x, hi.x, lo.z, hi.z, hi.y, material, 1),
            RectangleXZ(lo.x, hi.x, lo.z, hi.z, lo.y, material, -1),
            RectangleYZ(lo.y, hi.y, lo.z, hi.z, hi.x, material, 1),
            RectangleYZ(lo.y, hi.y, lo.z, hi.z, lo.x, material, -1),
        ])

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max)

    def bounding_box(self) -> AABB:
        return AABB(self.box_min, self.box_max)

    def __repr__(self) -> str:
        return f"AxisAlignedBox({self.box_min}, {self.box_max})"
