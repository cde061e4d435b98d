# renderer/raytracer.py
"""
Render driver: turns camera pixels into rays, averages their radiance and
writes frames.
"""
import logging
import os
import time as _time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Tuple

import numpy as np

from camera.camera import Camera, antialiased_ray, basic_ray, depth_of_field_ray
from core.animation import apply_animations
from core.ray import Ray
from core.vector import Vector3
from geometry.world import Scene
from renderer.config import RenderConfig
from renderer.tone_mapping import gamma_encode, save_image

logger = logging.getLogger(__name__)

# Set once per worker process by the pool initializer.
_worker_renderer: Optional["Renderer"] = None

def _init_worker(renderer: "Renderer"):
    global _worker_renderer
    _worker_renderer = renderer

def _render_row_job(job: Tuple[int, float, np.random.SeedSequence]) -> Tuple[int, np.ndarray]:
    row, frame_time, seed = job
    return row, _worker_renderer.render_row(row, frame_time, np.random.default_rng(seed))

class Renderer:
    """
    Renders frames of a scene seen from a camera.

    Each pixel is the mean radiance of samples_per_pixel independent rays.
    The random stream of every row is derived from the config seed, the
    frame number and the row index only, so results do not depend on the
    number of worker processes.
    """
    def __init__(self, camera: Camera, scene: Scene, config: RenderConfig = None):
        self.camera = camera
        self.scene = scene
        self.config = config if config is not None else RenderConfig()
        if (camera.width, camera.height) != (self.config.width, self.config.height):
            logger.warning("Camera is %dx%d but config asks for %dx%d; using the camera size",
                           camera.width, camera.height, self.config.width, self.config.height)

    def frame_time(self, k: int) -> float:
        cfg = self.config
        if cfg.frame_count == 1:
            return cfg.start_time
        return cfg.start_time + k * (cfg.end_time - cfg.start_time) / (cfg.frame_count - 1)

    def sample_ray(self, row: int, col: int, rng) -> Ray:
        cfg = self.config
        if cfg.samples_per_pixel > 1 and cfg.depth_of_field:
            return depth_of_field_ray(row, col, self.camera, rng)
        if cfg.samples_per_pixel > 1 and cfg.antialiasing:
            return antialiased_ray(row, col, self.camera, rng)
        return basic_ray(row, col, self.camera)

    def render_pixel(self, row: int, col: int, time: float, rng) -> Vector3:
        """
        Mean radiance of the pixel's samples at the given time.
        """
        animations = self.camera.get_animations()
        total = Vector3.zero()
        for _ in range(self.config.samples_per_pixel):
            ray = apply_animations(self.sample_ray(row, col, rng), animations, time)
            total = total + self.scene.trace(ray, self.config.max_bounces, time, rng)
        return total / self.config.samples_per_pixel

    def render_row(self, row: int, time: float, rng) -> np.ndarray:
        values = np.zeros((self.camera.width, 3), dtype=np.float64)
        for col in range(self.camera.width):
            values[col] = tuple(self.render_pixel(row, col, time, rng))
        return values

    def _row_seeds(self, k: int) -> List[np.random.SeedSequence]:
        return np.random.SeedSequence([self.config.seed, k]).spawn(self.camera.height)

    def make_pool(self) -> Optional[ProcessPoolExecutor]:
        """
        Worker pool for row rendering, or None when rendering serially.
        Each worker receives this renderer once, when it starts.
        """
        if self.config.workers == 1:
            return None
        return ProcessPoolExecutor(max_workers=self.config.workers,
                                   initializer=_init_worker, initargs=(self,))

    def render_frame(self, k: int = 0, executor: Optional[ProcessPoolExecutor] = None) -> np.ndarray:
        """
        Linear radiance image of frame k, shape (height, width, 3).

        With workers > 1 the rows go to executor, which must come from
        make_pool(); a pool is created for this frame alone if none is given.
        """
        if executor is None and self.config.workers > 1:
            with self.make_pool() as pool:
                return self.render_frame(k, pool)

        frame_time = self.frame_time(k)
        height = self.camera.height
        image = np.zeros((height, self.camera.width, 3), dtype=np.float64)
        seeds = self._row_seeds(k)
        started = _time.perf_counter()

        if executor is None:
            for row in range(height):
                image[row] = self.render_row(row, frame_time, np.random.default_rng(seeds[row]))
                logger.debug("Frame %d: row %d/%d done", k, row + 1, height)
        else:
            jobs = [(row, frame_time, seeds[row]) for row in range(height)]
            for row, values in executor.map(_render_row_job, jobs):
                image[row] = values
                logger.debug("Frame %d: row %d/%d done", k, row + 1, height)

        logger.info("Frame %d (t=%.3f) rendered in %.2fs", k, frame_time,
                    _time.perf_counter() - started)
        return image

    def render_all_frames(self, output_dir: str = ".") -> List[str]:
        """
        Render, gamma encode and save every frame. Returns the written paths.
        """
        cfg = self.config
        if cfg.frame_count == 1:
            logger.info("Start render %d frame", cfg.frame_count)
        else:
            logger.info("Start render %d frames", cfg.frame_count)

        paths = []
        pool = self.make_pool()
        try:
            for k in range(cfg.frame_count):
                logger.info("Start render frame %d / %d", k + 1, cfg.frame_count)
                pixels = gamma_encode(self.render_frame(k, pool), cfg.gamma)
                path = os.path.join(output_dir, cfg.output_pattern.format(frame=k))
                paths.append(save_image(pixels, path))
                logger.info("Saved %s", path)
        finally:
            if pool is not None:
                pool.shutdown()
        return paths
