# main.py
"""Command line entry point: render a demo scene to a PNG or an animated GIF."""
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional
from pathtracer.config import QUALITY_LEVELS, TONE_MAP_NAMES, RenderSettings
from pathtracer.logging_config import setup_logging
from pathtracer.renderer.image_io import save_gif, save_png
from pathtracer.renderer.progress import ProgressCounter
from pathtracer.renderer.raytracer import Renderer, render_animation
from pathtracer.scenes import SCENES, build_scene

logger = logging.getLogger("pathtracer.main")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render a demo scene with the offline path tracer.",
    )
    parser.add_argument("--scene", choices=sorted(SCENES), default="spheres")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default="preview",
                        help="sample and bounce preset (default: %(default)s)")
    parser.add_argument("--width", type=int, default=400, help="image width in pixels")
    parser.add_argument("--samples", type=int, help="samples per pixel, overrides --quality")
    parser.add_argument("--bounces", type=int, help="maximum bounces, overrides --quality")
    parser.add_argument("--workers", type=int, default=os.cpu_count() or 1,
                        help="worker processes (default: %(default)s)")
    parser.add_argument("--frames", type=int, default=1,
                        help="render an animated GIF with this many frames")
    parser.add_argument("--fps", type=float, default=30.0)
    parser.add_argument("--seed", type=int, help="seed for reproducible output")
    parser.add_argument("--tone-map", choices=TONE_MAP_NAMES, default="gamma")
    parser.add_argument("--output", "-o", type=Path,
                        help="output file (default: <scene>.png or <scene>.gif)")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-file", type=Path)
    return parser.parse_args(argv)


class _ProgressLogger:
    """Logs render progress every `step` percent."""
    def __init__(self, step: int = 10):
        self.step = step
        self._next = step

    def __call__(self, completed: int, total: int):
        if total <= 0:
            return
        percent = 100 * completed // total
        if percent >= self._next:
            logger.info("Progress: %d%% (%d/%d pixels)", percent, completed, total)
            self._next = (percent // self.step + 1) * self.step


def run(args: argparse.Namespace) -> Path:
    if args.frames <= 0:
        raise ValueError(f"--frames must be positive, got {args.frames}")

    scene = build_scene(args.scene, seed=args.seed)
    overrides = {
        "background": scene.background,
        "workers": args.workers,
        "seed": args.seed,
        "tone_map": args.tone_map,
    }
    if args.samples is not None:
        overrides["samples_per_pixel"] = args.samples
    if args.bounces is not None:
        overrides["max_bounces"] = args.bounces
    settings = RenderSettings.from_quality(args.quality, args.width,
                                           aspect_ratio=scene.aspect_ratio, **overrides)

    renderer = Renderer(settings, progress=ProgressCounter(_ProgressLogger()))
    logger.info("Scene %r, quality %r", scene.name, args.quality)

    if args.frames == 1:
        output = args.output or Path(f"{scene.name}.png")
        buffer = renderer.render(scene.world, scene.camera_at(0.0, settings.aspect_ratio))
        save_png(buffer, settings.width, settings.height, output)
    else:
        output = args.output or Path(f"{scene.name}.gif")
        frames = render_animation(renderer, scene.world,
                                  lambda t: scene.camera_at(t, settings.aspect_ratio),
                                  args.frames)
        save_gif(frames, settings.width, settings.height, output, fps=args.fps)
    return output


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    try:
        output = run(args)
    except ValueError as e:
        logger.error("%s", e)
        return 2
    logger.info("Done: %s", output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
