# materials/material.py
from typing import NamedTuple, Optional, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3, Color
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.textures import Texture, SolidTexture

BLACK = Color(0.0, 0.0, 0.0)


class Scatter(NamedTuple):
    """Outgoing ray and the color it is attenuated by."""
    ray: Ray
    attenuation: Color


def as_texture(value: Union[Vector3, Texture]) -> Texture:
    """Wraps a plain color in a SolidTexture; textures pass through."""
    if isinstance(value, Texture):
        return value
    return SolidTexture(value)


class Material:
    """
    Abstract material class. Subclasses implement scatter() and may override
    emitted(). Materials hold no mutable state, so one instance can be shared
    by any number of primitives and render workers.
    """
    def __init__(self, texture: Optional[Texture] = None):
        self.texture = texture

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        """
        Computes the scattered ray and attenuation.
        Returns None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, rec: HitRecord) -> Color:
        """Radiance emitted at the hit point. Non-emissive materials return black."""
        return BLACK
