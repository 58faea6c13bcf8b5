# materials/diffuse_light.py
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3, Color
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import BLACK, Material, as_texture
from pathtracer.materials.textures import Texture


class DiffuseLight(Material):
    """
    Emissive material. Emits only from the front face, so a rectangle with
    this material is a one-sided area light.

    The texture can be used to create patterns in the emitted light.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        super().__init__(as_texture(emit))

    def scatter(self, ray_in: Ray, rec: HitRecord) -> None:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, rec: HitRecord) -> Color:
        if not rec.front_face:
            return BLACK
        return self.texture.value(rec.uv, rec.p)
