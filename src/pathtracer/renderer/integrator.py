# renderer/integrator.py
import math
from pathtracer.config import T_MIN
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import Hittable

BLACK = Color(0.0, 0.0, 0.0)


def radiance(ray: Ray, world: Hittable, background: Color, bounces_left: int) -> Color:
    """
    Monte Carlo estimate of the radiance arriving along `ray`.

    Follows one scatter event per bounce until the ray escapes to the
    background, hits a non-scattering surface, or the bounce budget runs
    out. An exhausted budget contributes nothing.
    """
    if bounces_left <= 0:
        return BLACK

    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return background

    emitted = rec.material.emitted(rec)
    scatter = rec.material.scatter(ray, rec)
    if scatter is None:
        return emitted
    return emitted + scatter.attenuation * radiance(scatter.ray, world, background,
                                                    bounces_left - 1)
