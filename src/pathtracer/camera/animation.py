# camera/animation.py
"""Camera paths for animations. Each takes a frame time t in [0, 1)."""
import math
from pathtracer.core.vector import Vector3
from pathtracer.camera.camera import Camera


def ease_in_out_quint(x: float) -> float:
    """Quintic ease: slow start, fast middle, slow end. Maps [0, 1] onto [0, 1]."""
    if x < 0.5:
        return 16.0 * x ** 5
    return 1.0 - (-2.0 * x + 2.0) ** 5 / 2.0


def sweep_camera(t: float, aspect_ratio: float) -> Camera:
    """
    Swings the camera from x = 12 to x = -12 in front of the scene,
    rising slightly on the way, with eased motion.
    """
    eased = ease_in_out_quint(t)
    return Camera(
        look_from=Vector3(12.0 - eased * 24.0, 2.0 + eased, 8.0),
        look_at=Vector3(0.0, 0.5, 0.0),
        up=Vector3(0.0, 1.0, 0.0),
        vertical_fov=20.0,
        aspect_ratio=aspect_ratio,
        aperture=0.1,
        focus_dist=10.0,
    )


def orbit_camera(t: float, aspect_ratio: float, center: Vector3 = None,
                 radius: float = 13.0, height: float = 2.0,
                 vertical_fov: float = 20.0) -> Camera:
    """One full turn around `center` at constant speed."""
    if center is None:
        center = Vector3(0.0, 0.5, 0.0)
    angle = 2.0 * math.pi * t
    look_from = Vector3(center.x + radius * math.cos(angle),
                        height,
                        center.z + radius * math.sin(angle))
    return Camera(
        look_from=look_from,
        look_at=center,
        vertical_fov=vertical_fov,
        aspect_ratio=aspect_ratio,
        focus_dist=(look_from - center).length(),
    )
