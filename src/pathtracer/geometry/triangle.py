# geometry/triangle.py
from typing import Optional, Sequence
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.aabb import AABB, PADDING
from pathtracer.geometry.hittable import Hittable, HitRecord

# Determinants at or below this are culled: the ray is parallel to the
# triangle or approaches it from the back.
DETERMINANT_EPSILON = 1e-8


class Triangle(Hittable):
    """
    One-sided triangle. The front face is the side from which v0, v1, v2
    appear counter-clockwise; rays arriving from behind pass through.

    `normals` are optional per-vertex shading normals and `uvs` optional
    per-vertex texture coordinates. Without uvs, the hit's (u, v) are the
    barycentric weights of v1 and v2.
    """
    def __init__(self, v0: Vector3, v1: Vector3, v2: Vector3, material,
                 normals: Optional[Sequence[Vector3]] = None,
                 uvs: Optional[Sequence[UV]] = None):
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2
        self.material = material
        self.edge1 = v1 - v0
        self.edge2 = v2 - v0
        self.face_normal = self.edge1.cross(self.edge2).normalize()
        self.normals = tuple(normals) if normals is not None else None
        self.uvs = tuple(uvs) if uvs is not None else None

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Möller–Trumbore intersection algorithm
        h = ray.direction.cross(self.edge2)
        a = self.edge1.dot(h)
        if a < DETERMINANT_EPSILON:
            return None

        f = 1.0 / a
        s = ray.origin - self.v0
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None

        q = s.cross(self.edge1)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None

        t = f * self.edge2.dot(q)
        if t < t_min or t > t_max:
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        rec.set_face_normal(ray, self._normal_at(u, v))
        rec.uv = self._uv_at(u, v)
        rec.material = self.material
        return rec

    def _normal_at(self, u: float, v: float) -> Vector3:
        if self.normals is None:
            return self.face_normal
        n0, n1, n2 = self.normals
        w = 1.0 - u - v
        return (n0 * w + n1 * u + n2 * v).normalize()

    def _uv_at(self, u: float, v: float) -> UV:
        if self.uvs is None:
            return UV(u, v)
        uv0, uv1, uv2 = self.uvs
        w = 1.0 - u - v
        return UV(w * uv0.u + u * uv1.u + v * uv2.u,
                  w * uv0.v + u * uv1.v + v * uv2.v)

    def bounding_box(self) -> AABB:
        box = AABB(
            Vector3(min(self.v0.x, self.v1.x, self.v2.x),
                    min(self.v0.y, self.v1.y, self.v2.y),
                    min(self.v0.z, self.v1.z, self.v2.z)),
            Vector3(max(self.v0.x, self.v1.x, self.v2.x),
                    max(self.v0.y, self.v1.y, self.v2.y),
                    max(self.v0.z, self.v1.z, self.v2.z)),
        )
        return box.padded(PADDING)

    def __repr__(self) -> str:
        return f"Triangle({self.v0}, {self.v1}, {self.v2})"
