# renderer/raytracer.py
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Tuple
import numpy as np
from camera.camera import Camera
from core.color import Color
from core.config import DEFAULT_CONFIG, TracerConfig
from geometry.world import World
from renderer.tracer import trace

DEFAULT_WORKERS = 4

class Renderer:
    """
    Traces one primary ray per pixel into a (width, height, 3) uint8 buffer.

    Rows are handed to a pool of worker threads. Each row job only reads
    the scene and returns its own pixels, so results can be written back
    in whatever order the jobs complete. If a row fails, the rows not yet
    started are cancelled and the error is raised from render().
    """
    def __init__(self, width: int, height: int, workers: int = DEFAULT_WORKERS,
                 config: Optional[TracerConfig] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if workers <= 0:
            raise ValueError(f"Worker count must be positive, got {workers}")
        self.width = width
        self.height = height
        self.workers = workers
        self.config = config if config is not None else DEFAULT_CONFIG
        self.frame_output = np.zeros((width, height, 3), dtype=np.uint8)
        self.last_render_time = 0.0

    def trace_pixel(self, camera: Camera, world: World, x: int, y: int) -> Color:
        # Row 0 is the top of the image
        u = x / self.width
        v = 1.0 - y / self.height
        return trace(camera.get_ray(u, v), world, self.config)

    def _render_row(self, camera: Camera, world: World, y: int) -> List[Tuple[int, int, Color]]:
        return [(x, y, self.trace_pixel(camera, world, x, y)) for x in range(self.width)]

    def render(self, camera: Camera, world: World) -> np.ndarray:
        """
        Renders the world as seen from the camera and returns the frame buffer.
        """
        self.frame_output[:, :] = world.background.color.to_tuple()
        start = time.perf_counter()

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = [executor.submit(self._render_row, camera, world, y)
                       for y in range(self.height)]
            try:
                for future in as_completed(futures):
                    for x, y, color in future.result():
                        self.frame_output[x, y] = color.to_tuple()
            except Exception:
                # Rows still queued are dropped instead of waited on
                executor.shutdown(wait=False, cancel_futures=True)
                raise

        self.last_render_time = time.perf_counter() - start
        print(f"Number of threads: {self.workers}")
        print(f"Time to compute pixels: {self.last_render_time * 1000:.0f} ms")
        return self.frame_output
