"""
RadiusModulator - Pulsating petal threshold.

    petal_r2 = 784 + (784 * scale) >> 3        scale in 0..15

784 at scale 0 rising to 2254 at scale 15, then dropping straight back as the
frame counter's low nibble wraps.
"""

from amaranth import Module
from amaranth.lib.wiring import Component, In, Out

from ..config import FlowerConfig
from ..geometry import BASE_PETAL_R2


class RadiusModulator(Component):
    """
    Ports:
        scale: Low nibble of the frame counter
        petal_r2: Squared petal radius for this frame
    """

    def __init__(self, config: FlowerConfig):
        self.config = config

        super().__init__(
            {
                "scale": In(config.scale_bits),
                "petal_r2": Out(config.petal_r2_bits),
            }
        )

    def elaborate(self, _platform):
        m = Module()

        m.d.comb += self.petal_r2.eq(BASE_PETAL_R2 + ((BASE_PETAL_R2 * self.scale) >> 3))

        return m
