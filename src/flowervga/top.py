"""
FlowerCore - Top-level integration of the flower pattern core.

This module wires together the per-pixel pipeline and the frame state:
- GeometryEvaluator: Squared distances from (pixel_x, pixel_y)
- FrameCounter: Advanced on each rising edge of vsync
- RadiusModulator: Petal threshold from the counter's low nibble
- ShapeClassifier: Region decision
- ColorCompositor: 2-bit RGB, blanked outside active video

External Interfaces:
- Raster timing inputs (from the display timing generator)
- 2-bit R, G, B outputs (to the pin / DAC packer)

Data Flow, per pixel clock:
    (pixel_x, pixel_y) -> GeometryEvaluator -> ShapeClassifier -> ColorCompositor -> (r, g, b)
                                                     ^                  ^
    vsync edge -> FrameCounter -> RadiusModulator ---+        active, pixel_y

The color path is combinational. The counter is a register that only changes
on a clock edge after a vsync rising edge, and vsync falls in vertical
blanking, so every visible pixel of a frame sees the same counter value.
"""

from amaranth import Module, Signal
from amaranth.lib.wiring import Component, In, Out

from .config import FlowerConfig
from .core.classifier import ShapeClassifier
from .core.compositor import ColorCompositor
from .core.frame_counter import FrameCounter
from .core.geometry import GeometryEvaluator
from .core.radius import RadiusModulator
from .geometry import Region


class FlowerCore(Component):
    """
    Animated six-petal flower generator.

    Ports:
        Raster Inputs:
            pixel_x, pixel_y: Current scan position (blanking included)
            active: Position is inside the visible area
            vsync: Vertical sync level; the counter advances on its rising edge
            reset: Hold the frame counter at zero

        Color Outputs:
            r, g, b: 2-bit channel intensities

        Debug:
            frame: Current frame counter value
            region: Region of the current pixel
    """

    def __init__(self, config: FlowerConfig):
        self.config = config

        super().__init__(
            {
                # Raster inputs
                "pixel_x": In(config.coord_bits),
                "pixel_y": In(config.coord_bits),
                "active": In(1),
                "vsync": In(1),
                "reset": In(1),
                # Color outputs
                "r": Out(2),
                "g": Out(2),
                "b": Out(2),
                # Debug
                "frame": Out(config.counter_bits),
                "region": Out(Region),
            }
        )

    def elaborate(self, _platform):
        m = Module()
        cfg = self.config

        m.submodules.counter = counter = FrameCounter(cfg)
        m.submodules.geometry = geometry = GeometryEvaluator(cfg)
        m.submodules.radius = radius = RadiusModulator(cfg)
        m.submodules.classifier = classifier = ShapeClassifier(cfg)
        m.submodules.compositor = compositor = ColorCompositor(cfg)

        # =================================================================
        # Frame State
        # =================================================================

        # Starts high so a vsync already high at cold start is not an edge
        vsync_prev = Signal(init=1, name="vsync_prev")
        m.d.sync += vsync_prev.eq(self.vsync)

        m.d.comb += [
            counter.advance.eq(self.vsync & ~vsync_prev),
            counter.reset.eq(self.reset),
            radius.scale.eq(counter.scale),
            self.frame.eq(counter.value),
        ]

        # =================================================================
        # Pixel Pipeline
        # =================================================================

        m.d.comb += [
            geometry.x.eq(self.pixel_x),
            geometry.y.eq(self.pixel_y),
            classifier.dist2_center.eq(geometry.dist2_center),
            classifier.petal_r2.eq(radius.petal_r2),
        ]
        for src, dst in zip(geometry.petal_outputs(), classifier.petal_inputs()):
            m.d.comb += dst.eq(src)

        m.d.comb += [
            compositor.region.eq(classifier.region),
            compositor.y.eq(self.pixel_y),
            compositor.active.eq(self.active),
            self.region.eq(classifier.region),
        ]

        # =================================================================
        # Outputs
        # =================================================================

        m.d.comb += [
            self.r.eq(compositor.r),
            self.g.eq(compositor.g),
            self.b.eq(compositor.b),
        ]

        return m
