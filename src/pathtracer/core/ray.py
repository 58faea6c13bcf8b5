# core/ray.py
from typing import NamedTuple
from pathtracer.core.vector import Vector3


class Ray(NamedTuple):
    """
    Half-line origin + t * direction. The direction is not required to be
    unit length, so t is measured in multiples of |direction|.
    """
    origin: Vector3
    direction: Vector3

    def at(self, t: float) -> Vector3:
        return self.origin + self.direction * t
