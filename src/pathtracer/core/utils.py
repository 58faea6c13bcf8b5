# core/utils.py
import math
import random
from pathtracer.core.vector import Vector3


def random_in_unit_sphere() -> Vector3:
    """
    Returns a random point inside a unit sphere (rejection sampling).
    """
    while True:
        p = Vector3(random.uniform(-1, 1),
                    random.uniform(-1, 1),
                    random.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p


def random_unit_vector() -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere()
        # Points too close to the origin lose precision once normalized.
        if p.dot(p) > 1e-12:
            return p.normalize()


def random_in_unit_disk() -> Vector3:
    """Random point in the unit disk on the xy plane, used for defocus blur."""
    while True:
        p = Vector3(random.uniform(-1, 1), random.uniform(-1, 1), 0.0)
        if p.dot(p) < 1.0:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """Snell refraction of the unit vector uv through a surface with normal n."""
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel


def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of Fresnel reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)
