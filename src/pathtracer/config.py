# config.py
"""Render configuration.

All tunable render parameters live here. Geometry and material parameters
belong to the scene being rendered, not to this module.
"""
from dataclasses import dataclass, field
from typing import Optional

from pathtracer.core.vector import Color

# Minimum ray parameter for scene queries; keeps secondary rays from
# re-hitting the surface they start on ("shadow acne").
T_MIN = 0.001

TONE_MAP_NAMES = ("gamma", "reinhard")

# Quality presets, in the spirit of interactive / balanced / high quality.
QUALITY_LEVELS = {
    "preview": {"samples": 4, "bounces": 8},
    "balanced": {"samples": 32, "bounces": 20},
    "final": {"samples": 100, "bounces": 50},
}


@dataclass
class RenderSettings:
    """Output and sampling parameters handed to the Renderer."""

    width: int
    height: int
    samples_per_pixel: int = 16
    max_bounces: int = 20
    background: Color = field(default_factory=lambda: Color(0.0, 0.0, 0.0))
    workers: int = 1
    tile_width: int = 32
    seed: Optional[int] = None
    jitter: bool = True
    tone_map: str = "gamma"

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"image size must be positive, got {self.width}x{self.height}")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_bounces < 0:
            raise ValueError(f"max_bounces must be non-negative, got {self.max_bounces}")
        if self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")
        if self.tile_width <= 0:
            raise ValueError(f"tile_width must be positive, got {self.tile_width}")
        if self.tone_map not in TONE_MAP_NAMES:
            raise ValueError(f"tone_map must be one of {TONE_MAP_NAMES}, got {self.tone_map!r}")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @classmethod
    def from_quality(cls, name: str, width: int, aspect_ratio: float = 16.0 / 9.0,
                     **overrides) -> "RenderSettings":
        """Build settings from one of QUALITY_LEVELS; keyword overrides win."""
        try:
            quality = QUALITY_LEVELS[name]
        except KeyError:
            raise ValueError(
                f"unknown quality {name!r}, expected one of {sorted(QUALITY_LEVELS)}"
            ) from None
        params = {
            "width": width,
            "height": max(1, int(width / aspect_ratio)),
            "samples_per_pixel": quality["samples"],
            "max_bounces": quality["bounces"],
        }
        params.update(overrides)
        return cls(**params)
