# core/transform.py
import math
import numpy as np
from pathtracer.core.vector import Vector3


class Matrix4:
    """
    Affine 4x4 transform used to place imported geometry in the scene.
    Compose with `@`; the right-hand matrix is applied first.
    """
    def __init__(self, values=None):
        if values is None:
            self.m = np.identity(4, dtype=np.float64)
        else:
            self.m = np.asarray(values, dtype=np.float64).reshape(4, 4)

    @classmethod
    def identity(cls) -> "Matrix4":
        return cls()

    @classmethod
    def scale(cls, sx: float, sy: float = None, sz: float = None) -> "Matrix4":
        if sy is None:
            sy = sx
        if sz is None:
            sz = sx
        return cls(np.diag([sx, sy, sz, 1.0]))

    @classmethod
    def translation(cls, offset: Vector3) -> "Matrix4":
        m = np.identity(4)
        m[:3, 3] = offset.to_tuple()
        return cls(m)

    @classmethod
    def rotation_x(cls, radians: float) -> "Matrix4":
        c, s = math.cos(radians), math.sin(radians)
        return cls([[1, 0, 0, 0],
                    [0, c, -s, 0],
                    [0, s, c, 0],
                    [0, 0, 0, 1]])

    @classmethod
    def rotation_y(cls, radians: float) -> "Matrix4":
        c, s = math.cos(radians), math.sin(radians)
        return cls([[c, 0, s, 0],
                    [0, 1, 0, 0],
                    [-s, 0, c, 0],
                    [0, 0, 0, 1]])

    @classmethod
    def rotation_z(cls, radians: float) -> "Matrix4":
        c, s = math.cos(radians), math.sin(radians)
        return cls([[c, -s, 0, 0],
                    [s, c, 0, 0],
                    [0, 0, 1, 0],
                    [0, 0, 0, 1]])

    def __matmul__(self, other: "Matrix4") -> "Matrix4":
        return Matrix4(self.m @ other.m)

    def transform_point(self, p: Vector3) -> Vector3:
        x, y, z, _ = self.m @ np.array([p.x, p.y, p.z, 1.0])
        return Vector3(float(x), float(y), float(z))

    def transform_direction(self, d: Vector3) -> Vector3:
        x, y, z = self.m[:3, :3] @ np.array([d.x, d.y, d.z])
        return Vector3(float(x), float(y), float(z))

    def transform_normal(self, n: Vector3) -> Vector3:
        """Normals transform by the inverse transpose of the linear part."""
        x, y, z = np.linalg.inv(self.m[:3, :3]).T @ np.array([n.x, n.y, n.z])
        return Vector3(float(x), float(y), float(z)).normalize()

    def __repr__(self) -> str:
        return f"Matrix4({self.m.tolist()})"
