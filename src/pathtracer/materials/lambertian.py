# materials/lambertian.py
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import random_unit_vector
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, Scatter, as_texture
from pathtracer.materials.textures import Texture


class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__(as_texture(albedo))

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Scatter:
        """
        Scatter a ray according to a Lambertian reflection model.
        """
        scatter_direction = rec.normal + random_unit_vector()

        # Catch degenerate scatter direction
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        attenuation = self.texture.value(rec.uv, rec.p)
        return Scatter(Ray(rec.p, scatter_direction), attenuation)
