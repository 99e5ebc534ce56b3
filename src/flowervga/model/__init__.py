"""
Software reference model of the flower pattern core.

This module mirrors the hardware pipeline in plain Python:
- FrameCounter: Thread-safe 8-bit animation counter
- evaluate / threshold / classify / composite: Per-pixel stages
- pixel_color: Whole pipeline for one pixel
- RasterScan, render_frame, FrameClock: Frame-level drivers
"""

from .frame_counter import FrameCounter
from .pixel import classify, composite, evaluate, pixel_color, sky_blue, threshold
from .raster import FrameClock, RasterScan, ScanPosition, render_frame

__all__ = [
    "FrameCounter",
    "evaluate",
    "threshold",
    "classify",
    "sky_blue",
    "composite",
    "pixel_color",
    "RasterScan",
    "ScanPosition",
    "render_frame",
    "FrameClock",
]
