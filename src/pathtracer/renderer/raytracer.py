# renderer/raytracer.py
import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, Iterator, List, Optional, Sequence, Tuple
import numpy as np
from pathtracer.camera.camera import Camera
from pathtracer.config import RenderSettings
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.integrator import radiance
from pathtracer.renderer.progress import ProgressCounter
from pathtracer.renderer.tone_mapping import TONE_MAPPERS

logger = logging.getLogger(__name__)

# Scene and settings installed once per pool worker by _init_worker.
_worker_world: Optional[Hittable] = None
_worker_settings: Optional[RenderSettings] = None

Tile = Tuple[int, int, int]


def _init_worker(world: Hittable, settings: RenderSettings):
    global _worker_world, _worker_settings
    _worker_world = world
    _worker_settings = settings


def _render_tile_in_worker(frame: int, camera: Camera, tile: Tile):
    return frame, tile, render_tile(_worker_world, camera, _worker_settings, tile)


def _seed_tile(seed: Optional[int], tile: Tile):
    # Every tile reseeds: forked workers would otherwise share one RNG state.
    if seed is None:
        random.seed()
    else:
        row, x0, _ = tile
        random.seed(f"{seed}:{row}:{x0}")


def render_tile(world: Hittable, camera: Camera, settings: RenderSettings,
                tile: Tile) -> np.ndarray:
    """
    Averaged linear radiance for the pixels x0..x1-1 of image row `row`
    (row 0 is the top of the image). Returns an (x1 - x0, 3) array.
    """
    row, x0, x1 = tile
    _seed_tile(settings.seed, tile)

    y = settings.height - 1 - row
    spp = settings.samples_per_pixel
    colors = np.empty((x1 - x0, 3), dtype=np.float64)
    for i, x in enumerate(range(x0, x1)):
        total = Color(0.0, 0.0, 0.0)
        for _ in range(spp):
            if settings.jitter:
                dx, dy = random.random(), random.random()
            else:
                dx = dy = 0.5
            s = (x + dx) / settings.width
            t = (y + dy) / settings.height
            ray = camera.get_ray(s, t)
            total = total + radiance(ray, world, settings.background, settings.max_bounces)
        colors[i] = (total.x / spp, total.y / spp, total.z / spp)
    return colors


class Renderer:
    """
    Renders a scene into a packed RGB8 buffer.

    Work is split into tiles of up to `tile_width` pixels along one image
    row, so both image dimensions are spread over the worker processes.
    Results are written back by tile position, never by completion order.
    """
    def __init__(self, settings: RenderSettings, progress: Optional[ProgressCounter] = None):
        self.settings = settings
        self.progress = progress

    @property
    def width(self) -> int:
        return self.settings.width

    @property
    def height(self) -> int:
        return self.settings.height

    def tiles(self) -> Iterator[Tile]:
        tile_width = self.settings.tile_width
        for row in range(self.height):
            for x0 in range(0, self.width, tile_width):
                yield row, x0, min(x0 + tile_width, self.width)

    def render(self, world: Hittable, camera: Camera) -> bytes:
        """Row-major, top-to-bottom RGB triples; 3 * width * height bytes."""
        return self.render_array(world, camera).tobytes()

    def render_array(self, world: Hittable, camera: Camera) -> np.ndarray:
        """Tone-mapped image as a (height, width, 3) uint8 array."""
        return self._tone_map(self.render_radiance(world, camera))

    def render_radiance(self, world: Hittable, camera: Camera) -> np.ndarray:
        """Averaged linear radiance as a (height, width, 3) float array."""
        return self.render_frames_radiance(world, [camera])[0]

    def render_frames(self, world: Hittable, cameras: Sequence[Camera]) -> List[bytes]:
        """Renders the same scene once per camera, sharing one worker pool."""
        return [self._tone_map(frame).tobytes()
                for frame in self.render_frames_radiance(world, cameras)]

    def render_frames_radiance(self, world: Hittable,
                               cameras: Sequence[Camera]) -> List[np.ndarray]:
        settings = self.settings
        tiles = list(self.tiles())
        images = [np.zeros((self.height, self.width, 3), dtype=np.float64) for _ in cameras]
        if self.progress is not None:
            self.progress.reset(self.width * self.height * len(cameras))

        logger.info("Rendering %d frame(s) at %dx%d, %d spp, %d bounces, %d worker(s)",
                    len(cameras), self.width, self.height, settings.samples_per_pixel,
                    settings.max_bounces, settings.workers)
        start = time.perf_counter()

        if settings.workers == 1:
            for frame, camera in enumerate(cameras):
                for tile in tiles:
                    self._store(images[frame], tile, render_tile(world, camera, settings, tile))
        else:
            with ProcessPoolExecutor(max_workers=settings.workers,
                                     initializer=_init_worker,
                                     initargs=(world, settings)) as executor:
                futures = [executor.submit(_render_tile_in_worker, frame, camera, tile)
                           for frame, camera in enumerate(cameras)
                           for tile in tiles]
                for future in as_completed(futures):
                    frame, tile, colors = future.result()
                    self._store(images[frame], tile, colors)

        logger.info("Rendered %d frame(s) in %.2fs", len(cameras), time.perf_counter() - start)
        return images

    def _store(self, image: np.ndarray, tile: Tile, colors: np.ndarray):
        row, x0, x1 = tile
        image[row, x0:x1] = colors
        if self.progress is not None:
            self.progress.increment(x1 - x0)

    def _tone_map(self, linear: np.ndarray) -> np.ndarray:
        return TONE_MAPPERS[self.settings.tone_map](linear)


def render_animation(renderer: Renderer, world: Hittable,
                     camera_at: Callable[[float], Camera], frames: int) -> List[bytes]:
    """
    Renders `frames` frames of a static scene, asking `camera_at` for the
    camera at each frame time t = i / frames.
    """
    if frames <= 0:
        raise ValueError(f"frames must be positive, got {frames}")
    cameras = [camera_at(i / frames) for i in range(frames)]
    return renderer.render_frames(world, cameras)
