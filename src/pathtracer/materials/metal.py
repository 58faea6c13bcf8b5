# materials/metal.py
from typing import Optional, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect, random_in_unit_sphere
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, Scatter, as_texture
from pathtracer.materials.textures import Texture


class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    `fuzz` scales a random perturbation of the mirror direction; 0 is a
    perfect mirror. It is not clamped.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        super().__init__(as_texture(albedo))
        self.fuzz = fuzz

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        direction = reflected + random_in_unit_sphere() * self.fuzz

        # Absorb rays perturbed below the surface
        if direction.dot(rec.normal) <= 0:
            return None
        return Scatter(Ray(rec.p, direction), self.texture.value(rec.uv, rec.p))
