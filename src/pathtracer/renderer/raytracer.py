# renderer/raytracer.py
import logging
import time
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from random import Random
from typing import Dict, List, Optional, Tuple

import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.config import RenderConfig
from pathtracer.core.vector import black
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.integrator import trace_radiance
from pathtracer.renderer.tone_mapping import gamma2_encode

logger = logging.getLogger(__name__)

Pixel = Tuple[int, int]  # (column, row), row 0 at the bottom of the image
Color = Tuple[float, float, float]  # averaged linear (r, g, b)
PixelMap = Dict[Pixel, Color]

EXECUTORS = ("process", "thread")


class RenderError(RuntimeError):
    """Raised when the merged worker output does not cover every pixel exactly once."""


def pixel_at(index: int, height: int) -> Pixel:
    """
    Maps a flat pixel index to (column, row). Pixels are enumerated
    column by column, bottom row first within a column.
    """
    return index // height, index % height


def partition_pixels(pixel_count: int, worker_count: int) -> List[Tuple[int, int]]:
    """
    Splits range(pixel_count) into worker_count contiguous half-open
    (start, end) slices. Every slice has pixel_count // worker_count pixels
    except the last, which also takes the remainder.
    """
    if worker_count < 1:
        raise ValueError(f"worker_count must be positive, got {worker_count}")
    if pixel_count < 0:
        raise ValueError(f"pixel_count must not be negative, got {pixel_count}")

    base, rest = divmod(pixel_count, worker_count)
    slices = [(n * base, (n + 1) * base) for n in range(worker_count)]
    start, end = slices[-1]
    slices[-1] = (start, end + rest)
    return slices


def pixel_rng(seed: int, column: int, row: int) -> Random:
    """
    Random source for one pixel. String seeds are hashed with SHA-512, so
    the stream is the same in every process and for every worker layout.
    """
    return Random(f"{seed}:{column}:{row}")


def render_pixel(column: int, row: int, width: int, height: int, samples: int,
                 camera: Camera, world: Hittable, rng: Random,
                 max_depth: int) -> Color:
    """
    Averages `samples` jittered paths through pixel (column, row) and
    returns the averaged linear color.
    """
    color = black()
    for _ in range(samples):
        u = (column + rng.random()) / width
        v = (row + rng.random()) / height
        ray = camera.get_ray(u, v, rng)
        color = color + trace_radiance(ray, world, rng, 0, max_depth)
    average = color / samples
    return average.x, average.y, average.z


def render_slice(start: int, end: int, config: RenderConfig,
                 camera: Camera, world: Hittable) -> PixelMap:
    """
    Worker body: renders the flat pixel indices in [start, end) and returns
    the worker's own accumulation map. May run in another process, so it
    only touches its arguments.
    """
    pixels: PixelMap = {}
    shared_rng = Random() if config.seed is None else None
    for index in range(start, end):
        column, row = pixel_at(index, config.height)
        rng = shared_rng if shared_rng is not None else pixel_rng(config.seed, column, row)
        pixels[(column, row)] = render_pixel(
            column, row, config.width, config.height, config.samples_per_pixel,
            camera, world, rng, config.max_depth,
        )
    return pixels


class Renderer:
    """
    Renders a scene by splitting the pixel grid into one contiguous slice
    per worker, running the slices in parallel and merging the results.
    """
    def __init__(self, config: RenderConfig, executor: str = "process"):
        if executor not in EXECUTORS:
            raise ValueError(f"executor must be one of {EXECUTORS}, got {executor!r}")
        config.validate()
        self.config = config
        self.executor = executor

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def _make_executor(self) -> Executor:
        if self.executor == "process":
            return ProcessPoolExecutor(max_workers=self.config.worker_count)
        return ThreadPoolExecutor(max_workers=self.config.worker_count)

    def render(self, world: Hittable, camera: Camera) -> np.ndarray:
        """
        Renders the full image. Returns a uint8 array of shape
        (height, width, 3) indexed [row, column] with row 0 at the bottom.
        Any worker failure propagates to the caller.
        """
        config = self.config
        slices = partition_pixels(config.width * config.height, config.worker_count)
        logger.info("Rendering %dx%d, %d samples/pixel, %d %s workers",
                    config.width, config.height, config.samples_per_pixel,
                    config.worker_count, self.executor)
        started = time.perf_counter()

        maps: List[PixelMap] = []
        with self._make_executor() as pool:
            futures = {
                pool.submit(render_slice, start, end, config, camera, world): n
                for n, (start, end) in enumerate(slices)
            }
            for future in as_completed(futures):
                pixels = future.result()
                logger.debug("Worker %d finished %d pixels", futures[future], len(pixels))
                maps.append(pixels)

        image = gamma2_encode(self.merge(maps))
        logger.info("Render finished in %.2fs", time.perf_counter() - started)
        return image

    def merge(self, maps: List[PixelMap]) -> np.ndarray:
        """
        Merges per-worker maps into one linear float image. Raises RenderError if a pixel
        is produced twice or not at all.
        """
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        seen = np.zeros((self.height, self.width), dtype=bool)
        for pixels in maps:
            for (column, row), color in pixels.items():
                if seen[row, column]:
                    raise RenderError(f"Pixel ({column}, {row}) rendered by more than one worker")
                image[row, column] = color
                seen[row, column] = True

        if not seen.all():
            missing = [(int(c), int(r)) for r, c in np.argwhere(~seen)[:10]]
            raise RenderError(f"{int((~seen).sum())} pixels were not rendered, e.g. {missing}")
        return image


def render(world: Hittable, camera: Camera, config: Optional[RenderConfig] = None,
           executor: str = "process") -> np.ndarray:
    """Convenience wrapper around Renderer.render."""
    return Renderer(config or RenderConfig(), executor=executor).render(world, camera)
