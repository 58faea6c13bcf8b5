# renderer/image_io.py
"""Encoders for the packed RGB buffers produced by the Renderer."""
import logging
from typing import Sequence
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def buffer_to_image(buffer: bytes, width: int, height: int) -> Image.Image:
    """Wrap a row-major, top-to-bottom RGB8 buffer in a PIL image."""
    expected = 3 * width * height
    if len(buffer) != expected:
        raise ValueError(
            f"buffer holds {len(buffer)} bytes, expected {expected} for {width}x{height} RGB"
        )
    pixels = np.frombuffer(buffer, dtype=np.uint8).reshape(height, width, 3)
    return Image.fromarray(pixels)


def save_png(buffer: bytes, width: int, height: int, path) -> None:
    buffer_to_image(buffer, width, height).save(path, format="PNG")
    logger.info("Wrote %dx%d PNG to %s", width, height, path)


def save_gif(frames: Sequence[bytes], width: int, height: int, path, fps: float = 30.0) -> None:
    """Write frames as an endlessly looping animated GIF."""
    if not frames:
        raise ValueError("cannot write an animation without frames")
    images = [buffer_to_image(frame, width, height) for frame in frames]
    images[0].save(
        path,
        format="GIF",
        save_all=True,
        append_images=images[1:],
        duration=int(round(1000.0 / fps)),
        loop=0,
    )
    logger.info("Wrote %d-frame %dx%d GIF to %s", len(frames), width, height, path)
