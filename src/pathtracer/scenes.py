# scenes.py
"""Ready-made demo scenes.

Each builder returns a Scene whose world is already wrapped in a BVH. The
camera is produced per frame time so the same scene can be rendered as a
still (t = 0) or as an animation.
"""
import functools
import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Optional
from pathtracer.camera.animation import orbit_camera, sweep_camera
from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3, Color
from pathtracer.geometry.box import AxisAlignedBox
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.rectangle import RectangleXY, RectangleXZ, RectangleYZ
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.textures import CheckerTexture, MarbleTexture, NoiseTexture

logger = logging.getLogger(__name__)

SKY = Color(0.70, 0.80, 1.00)


@dataclass
class Scene:
    name: str
    world: Hittable
    camera_path: Callable[[float, float], Camera]
    aspect_ratio: float = 16.0 / 9.0
    background: Color = field(default_factory=lambda: Color(0.0, 0.0, 0.0))

    def camera_at(self, t: float, aspect_ratio: Optional[float] = None) -> Camera:
        return self.camera_path(t, aspect_ratio if aspect_ratio is not None else self.aspect_ratio)


def _random_color(rng: random.Random, lo: float = 0.0, hi: float = 1.0) -> Color:
    return Color(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))


def random_spheres_scene(seed: Optional[int] = None) -> Scene:
    """
    The classic final scene: a field of small random spheres around three
    large ones (glass, matte brown and polished metal) on a huge ground
    sphere. Some small glass spheres are hollow bubbles.
    """
    rng = random.Random(seed)
    objects = [Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, Lambertian(Color(0.5, 0.5, 0.5)))]

    for a in range(-11, 11):
        for b in range(-11, 11):
            # Keep a clear lane in front of the big spheres
            if -1 < b < 1 and -6 < a < 6:
                continue
            center = Vector3(a + 0.5 * rng.random(), 0.2, b + 0.9 * rng.random())
            choose = rng.random()
            if choose < 0.6:
                albedo = _random_color(rng) * _random_color(rng)
                objects.append(Sphere(center, 0.2, Lambertian(albedo)))
            elif choose < 0.8:
                objects.append(Sphere(center, 0.2, Metal(_random_color(rng, 0.5, 1.0),
                                                         rng.random())))
            else:
                glass = Dielectric(1.5)
                objects.append(Sphere(center, 0.2, glass))
                if rng.random() < 0.5:
                    # Negative radius flips the normals, making a thin shell
                    objects.append(Sphere(center, -0.18, glass))

    objects.append(Sphere(Vector3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
    objects.append(Sphere(Vector3(-4.0, 1.0, 0.0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    objects.append(Sphere(Vector3(4.0, 1.0, 0.0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    logger.debug("Random spheres scene with %d objects", len(objects))
    return Scene("spheres", HittableList(objects).build_bvh(), sweep_camera, background=SKY)


def _cornell_camera(t: float, aspect_ratio: float) -> Camera:
    return Camera(look_from=Vector3(278.0, 278.0, -800.0),
                  look_at=Vector3(278.0, 278.0, 0.0),
                  vertical_fov=40.0,
                  aspect_ratio=aspect_ratio,
                  focus_dist=800.0)


def cornell_box_scene() -> Scene:
    """Cornell box: coloured side walls, a ceiling light facing down and two blocks."""
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))
    light = DiffuseLight(Color(15.0, 15.0, 15.0))

    world = HittableList([
        RectangleYZ(0.0, 555.0, 0.0, 555.0, 555.0, green, -1),
        RectangleYZ(0.0, 555.0, 0.0, 555.0, 0.0, red, 1),
        RectangleXZ(213.0, 343.0, 227.0, 332.0, 554.0, light, -1),
        RectangleXZ(0.0, 555.0, 0.0, 555.0, 0.0, white, 1),
        RectangleXZ(0.0, 555.0, 0.0, 555.0, 555.0, white, -1),
        RectangleXY(0.0, 555.0, 0.0, 555.0, 555.0, white, -1),
        AxisAlignedBox(Vector3(130.0, 0.0, 65.0), Vector3(295.0, 165.0, 230.0), white),
        AxisAlignedBox(Vector3(265.0, 0.0, 295.0), Vector3(430.0, 330.0, 460.0), white),
    ])
    return Scene("cornell", world.build_bvh(), _cornell_camera, aspect_ratio=1.0)


def textured_scene(seed: Optional[int] = None) -> Scene:
    """
    Checkered ground with marble, turbulence and glass spheres, lit by an
    overhead area light against a dim background.
    """
    ground = Lambertian(CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9)))
    marble = Lambertian(MarbleTexture(scale=4.0, seed=seed))
    smoke = Lambertian(NoiseTexture(scale=4.0, turbulent=True, seed=seed))

    world = HittableList([
        Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, ground),
        Sphere(Vector3(0.0, 2.0, 0.0), 2.0, marble),
        Sphere(Vector3(-4.0, 1.0, 2.0), 1.0, smoke),
        Sphere(Vector3(4.0, 1.0, 2.0), 1.0, Dielectric(1.5)),
        RectangleXZ(-2.0, 2.0, -2.0, 2.0, 7.0, DiffuseLight(Color(4.0, 4.0, 4.0)), -1),
        RectangleXY(3.0, 5.0, 1.0, 3.0, -2.0, DiffuseLight(Color(4.0, 4.0, 4.0)), 1),
    ])
    camera_path = functools.partial(orbit_camera, center=Vector3(0.0, 1.5, 0.0),
                                    radius=20.0, height=4.0, vertical_fov=25.0)
    return Scene("textured", world.build_bvh(), camera_path,
                 background=Color(0.05, 0.05, 0.08))


SCENES = {
    "spheres": random_spheres_scene,
    "cornell": cornell_box_scene,
    "textured": textured_scene,
}


def build_scene(name: str, seed: Optional[int] = None) -> Scene:
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(f"unknown scene {name!r}, expected one of {sorted(SCENES)}") from None
    if builder is cornell_box_scene:
        return builder()
    return builder(seed=seed)
