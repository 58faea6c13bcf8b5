# materials/textures.py
import math
from typing import Optional, Union
import numpy as np
from PIL import Image
from pathtracer.core.vector import Vector3, Color
from pathtracer.core.uv import UV
from pathtracer.materials.perlin import Perlin


class Texture:
    """Base class for all textures: a color as a function of (u, v) and position."""
    def value(self, uv: UV, p: Vector3) -> Color:
        raise NotImplementedError("value() must be implemented by texture subclasses.")


class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, uv: UV, p: Vector3) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"SolidTexture({self.color})"


class CheckerTexture(Texture):
    """
    Three-dimensional checker pattern. The sign of sin(sx)sin(sy)sin(sz)
    over world coordinates picks between two textures, so the pattern does
    not depend on how the surface is parametrized.
    """
    def __init__(self, odd: Union[Color, Texture], even: Union[Color, Texture],
                 scale: float = 10.0):
        self.odd = odd if isinstance(odd, Texture) else SolidTexture(odd)
        self.even = even if isinstance(even, Texture) else SolidTexture(even)
        self.scale = scale

    def value(self, uv: UV, p: Vector3) -> Color:
        sines = (math.sin(self.scale * p.x)
                 * math.sin(self.scale * p.y)
                 * math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(uv, p)
        return self.even.value(uv, p)


class NoiseTexture(Texture):
    """
    Gray-scale Perlin noise. With `turbulent` set, the summed octaves are
    used instead of a single noise lookup.
    """
    def __init__(self, scale: float = 1.0, turbulent: bool = False,
                 color: Color = None, seed: Optional[int] = None):
        self.noise = Perlin(np.random.default_rng(seed))
        self.scale = scale
        self.turbulent = turbulent
        self.color = color if color is not None else Color(1.0, 1.0, 1.0)

    def value(self, uv: UV, p: Vector3) -> Color:
        scaled = p * self.scale
        if self.turbulent:
            return self.color * self.noise.turbulence(scaled)
        return self.color * (0.5 * (1.0 + self.noise.noise(scaled)))


class MarbleTexture(Texture):
    """
    Marble-like veins: turbulence shifts the phase of a sine ramp along z,
    and the ramp blends between a light and a dark color.
    """
    def __init__(self, scale: float = 4.0, turbulence: float = 10.0, depth: int = 7,
                 light: Color = None, dark: Color = None, seed: Optional[int] = None):
        self.noise = Perlin(np.random.default_rng(seed))
        self.scale = scale
        self.turbulence = turbulence
        self.depth = depth
        self.light = light if light is not None else Color(0.8, 0.8, 0.8)
        self.dark = dark if dark is not None else Color(0.2, 0.2, 0.2)

    def value(self, uv: UV, p: Vector3) -> Color:
        phase = self.scale * p.z + self.turbulence * self.noise.turbulence(p, self.depth)
        t = 0.5 * (1.0 + math.sin(phase))
        return self.light * t + self.dark * (1.0 - t)


class ImageTexture(Texture):
    """A texture from an image file, addressed by wrapped UV coordinates."""
    def __init__(self, image_path: str):
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            self.data = np.asarray(img, dtype=np.float64) / 255.0
        self.height, self.width = self.data.shape[:2]
        self.path = image_path

    def value(self, uv: UV, p: Vector3) -> Color:
        u = uv.u % 1.0
        v = 1.0 - (uv.v % 1.0)  # Image rows run top to bottom

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        r, g, b = self.data[y, x]
        return Color(float(r), float(g), float(b))

    def __repr__(self) -> str:
        return f"ImageTexture({self.path!r}, {self.width}x{self.height})"
