# renderer/tone_mapping.py
import numpy as np


def gamma_tone_mapping(linear: np.ndarray) -> np.ndarray:
    """
    Display-encode an averaged linear radiance image.

    Applies a gamma-2 curve (square root) per channel, scales by 255.999 and
    truncates, so 1.0 maps to 255 and anything brighter saturates.
    """
    mapped = np.sqrt(np.clip(linear, 0.0, None))
    return np.clip(mapped * 255.999, 0, 255).astype(np.uint8)


def reinhard_tone_mapping(linear: np.ndarray, exposure: float = 1.0,
                          white_point: float = 1.0) -> np.ndarray:
    """
    Reinhard operator followed by the same gamma-2 encoding; compresses
    highlights instead of clipping them.
    """
    scaled = np.clip(linear, 0.0, None) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    return gamma_tone_mapping(mapped)


TONE_MAPPERS = {
    "gamma": gamma_tone_mapping,
    "reinhard": reinhard_tone_mapping,
}
