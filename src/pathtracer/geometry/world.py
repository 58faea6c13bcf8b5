# geometry/world.py
from typing import Iterable, List, Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.errors import EmptyGeometryError
from pathtracer.geometry.bvh import build_bvh
from pathtracer.geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    An unordered list of Hittable objects, intersected by linear scan.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        if not self.objects:
            raise EmptyGeometryError("called bounding_box() on an empty HittableList")
        box = self.objects[0].bounding_box()
        for obj in self.objects[1:]:
            box = AABB.surrounding_box(box, obj.bounding_box())
        return box

    def build_bvh(self) -> Hittable:
        """Builds a BVH over the current objects. The list itself is left untouched."""
        return build_bvh(self.objects)
