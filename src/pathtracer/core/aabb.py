# core/aabb.py
from pathtracer.core.vector import Vector3

# Thickness given to degenerate (planar) boxes so the slab test can still hit them.
PADDING = 1e-4


class AABB:
    """Axis-aligned bounding box. minimum <= maximum componentwise."""

    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: clip [t_min, t_max] against each pair of axis planes.
        for a in range(3):
            direction = ray.direction[a]
            origin = ray.origin[a]
            if direction == 0.0:
                # Parallel to the slab: either always inside it or never.
                if origin < self.minimum[a] or origin > self.maximum[a]:
                    return False
                continue
            inv_d = 1.0 / direction
            t0 = (self.minimum[a] - origin) * inv_d
            t1 = (self.maximum[a] - origin) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def padded(self, delta: float = PADDING) -> "AABB":
        """Returns a copy with every zero-thickness axis widened by delta."""
        lo = [self.minimum.x, self.minimum.y, self.minimum.z]
        hi = [self.maximum.x, self.maximum.y, self.maximum.z]
        for a in range(3):
            if hi[a] - lo[a] < delta:
                lo[a] -= delta / 2
                hi[a] += delta / 2
        return AABB(Vector3(*lo), Vector3(*hi))

    def contains(self, other: "AABB") -> bool:
        return all(self.minimum[a] <= other.minimum[a] and other.maximum[a] <= self.maximum[a]
                   for a in range(3))

    def centroid(self) -> Vector3:
        return (self.minimum + self.maximum) * 0.5

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum}, {self.maximum})"
