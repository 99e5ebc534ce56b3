"""
Raster Scan Driver and Frame Renderer.

Software stand-ins for the pieces around the pixel core, used for previews,
golden images and tests:

- RasterScan: walks the full scan (blanking included) in row-major order,
  reporting the active flag and a single vsync edge per frame.
- render_frame: evaluates the visible area of one frame with numpy, using the
  same integer arithmetic as the scalar model.
- FrameClock: background thread that advances a FrameCounter at a fixed
  frame rate, the software counterpart of the vsync edge.
"""

import threading
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from ..config import DEFAULT_CONFIG, FlowerConfig
from ..geometry import (
    CENTER_COLOR,
    CENTER_R2,
    CENTER_X,
    CENTER_Y,
    PETAL_CENTERS,
    PETAL_COLOR,
    SKY_SHIFT,
)
from .frame_counter import FrameCounter
from .pixel import pixel_color, threshold


@dataclass(frozen=True)
class ScanPosition:
    """One pixel clock worth of raster timing."""

    x: int
    y: int
    active: bool
    vsync_edge: bool


class RasterScan:
    """
    Row-major iterator over every position of one frame.

    The vsync edge is reported on the first pixel of the first vertical
    sync line, which lies in blanking, so every visible pixel of a frame is
    produced between two edges.

    Example:
        >>> scan = RasterScan()
        >>> sum(1 for pos in scan.frame() if pos.active)
        307200
    """

    def __init__(self, config: FlowerConfig = DEFAULT_CONFIG):
        self.config = config

    def is_active(self, x: int, y: int) -> bool:
        return x < self.config.h_active and y < self.config.v_active

    def frame(self) -> Iterator[ScanPosition]:
        cfg = self.config
        for y in range(cfg.v_total):
            for x in range(cfg.h_total):
                yield ScanPosition(
                    x=x,
                    y=y,
                    active=self.is_active(x, y),
                    vsync_edge=(x == 0 and y == cfg.vsync_start),
                )

    def run(self, counter: FrameCounter, frames: int = 1) -> Iterator[tuple]:
        """
        Drive the scalar model over ``frames`` full frames.

        The counter is sampled once at the start of each frame and advanced on
        the vsync edge, so pixels after the edge (blanking only) still report
        the sampled value.

        Yields:
            (ScanPosition, Color) for every pixel clock
        """
        for _ in range(frames):
            value = counter.snapshot()
            for pos in self.frame():
                if pos.vsync_edge:
                    counter.advance()
                yield pos, pixel_color(pos.x, pos.y, value, pos.active)


def render_frame(counter, config: FlowerConfig = DEFAULT_CONFIG) -> np.ndarray:
    """
    Render the visible area for one frame.

    Args:
        counter: FrameCounter (snapshotted once) or a plain counter value
        config: Scan timing, only the active area is rendered

    Returns:
        uint8 array of shape (v_active, h_active, 3) with 2-bit channel values
    """
    value = counter.snapshot() if isinstance(counter, FrameCounter) else counter
    petal_r2 = threshold(value)

    ys, xs = np.mgrid[0 : config.v_active, 0 : config.h_active].astype(np.int64)

    dx = xs - CENTER_X
    dy = ys - CENTER_Y
    center_here = (dx * dx + dy * dy) < CENTER_R2

    petal_here = np.zeros_like(center_here)
    for px, py in PETAL_CENTERS:
        pdx = xs - px
        pdy = ys - py
        petal_here |= (pdx * pdx + pdy * pdy) < petal_r2

    sky = ((ys >> SKY_SHIFT) & 0b11).astype(np.uint8)
    image = np.zeros((config.v_active, config.h_active, 3), dtype=np.uint8)
    image[..., 0] = sky
    image[..., 2] = sky

    petal_only = petal_here & ~center_here
    image[petal_only] = PETAL_COLOR
    image[center_here] = CENTER_COLOR
    return image


class FrameClock:
    """
    Advance a FrameCounter from a background thread at a fixed rate.

    Example:
        >>> counter = FrameCounter()
        >>> with FrameClock(counter, fps=60):
        ...     frame = render_frame(counter)
    """

    def __init__(self, counter: FrameCounter, fps: float = 60.0):
        assert fps > 0, "fps must be positive"
        self.counter = counter
        self.period = 1.0 / fps
        self._stop = threading.Event()
        self._thread = None

    def _run(self):
        while not self._stop.wait(self.period):
            self.counter.advance()

    def start(self) -> "FrameClock":
        if self.running:
            return self
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="frame-clock", daemon=True)
        self._thread.start()
        return self

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def __enter__(self):
        return self.start()

    def __exit__(self, *exc):
        self.stop()
        return False
