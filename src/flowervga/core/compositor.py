"""
ColorCompositor - Region to 2-bit RGB.

    region       R    G    B
    CENTER       3    3    0
    PETAL        3    1    2
    BACKGROUND   sky  0    sky      sky = y[7:9]

Outside the active video area every channel is forced to zero, regardless of
region.
"""

from amaranth import Module, Signal
from amaranth.lib.wiring import Component, In, Out

from ..config import FlowerConfig
from ..geometry import CENTER_COLOR, PETAL_COLOR, SKY_SHIFT, Region


class ColorCompositor(Component):
    """
    Ports:
        region: Region from the ShapeClassifier
        y: Pixel row, for the background gradient
        active: Pixel is in the visible area
        r, g, b: 2-bit color channels
    """

    def __init__(self, config: FlowerConfig):
        self.config = config

        super().__init__(
            {
                "region": In(Region),
                "y": In(config.coord_bits),
                "active": In(1),
                "r": Out(2),
                "g": Out(2),
                "b": Out(2),
            }
        )

    def _drive(self, m, color):
        m.d.comb += [
            self.r.eq(color[0]),
            self.g.eq(color[1]),
            self.b.eq(color[2]),
        ]

    def elaborate(self, _platform):
        m = Module()

        sky_blue = Signal(2, name="sky_blue")
        m.d.comb += sky_blue.eq(self.y[SKY_SHIFT : SKY_SHIFT + 2])

        with m.If(~self.active):
            self._drive(m, (0, 0, 0))
        with m.Elif(self.region == Region.CENTER):
            self._drive(m, CENTER_COLOR)
        with m.Elif(self.region == Region.PETAL):
            self._drive(m, PETAL_COLOR)
        with m.Else():
            self._drive(m, (sky_blue, 0, sky_blue))

        return m
