"""
ShapeClassifier - Region decision from the distance field.

    center_here = dist2_center < CENTER_R2
    petal_here  = any(dist2_petal_i < petal_r2)

    region = CENTER      if center_here
             PETAL       elif petal_here
             BACKGROUND  otherwise

The precedence is fixed. Petals can overlap the center disk as they grow, so
the center test has to win even when both predicates hold.
"""

from amaranth import Cat, Module
from amaranth.lib.wiring import Component, In, Out

from ..config import FlowerConfig
from ..geometry import CENTER_R2, NUM_PETALS, Region


class ShapeClassifier(Component):
    """
    Ports:
        dist2_center: Squared distance to the flower center
        dist2_petal_0..5: Squared distances to the petal centers
        petal_r2: Modulated squared petal radius
        center_here: Pixel is inside the center disk
        petal_here: Pixel is inside at least one petal
        region: Resolved Region
    """

    def __init__(self, config: FlowerConfig):
        self.config = config

        ports = {
            "dist2_center": In(config.dist_bits),
            "petal_r2": In(config.petal_r2_bits),
            "center_here": Out(1),
            "petal_here": Out(1),
            "region": Out(Region),
        }
        for i in range(NUM_PETALS):
            ports[f"dist2_petal_{i}"] = In(config.dist_bits)

        super().__init__(ports)

    def petal_inputs(self) -> list:
        """Petal distance ports in table order."""
        return [getattr(self, f"dist2_petal_{i}") for i in range(NUM_PETALS)]

    def elaborate(self, _platform):
        m = Module()

        petal_hits = Cat(*[d < self.petal_r2 for d in self.petal_inputs()])

        m.d.comb += [
            self.center_here.eq(self.dist2_center < CENTER_R2),
            self.petal_here.eq(petal_hits.any()),
        ]

        with m.If(self.center_here):
            m.d.comb += self.region.eq(Region.CENTER)
        with m.Elif(self.petal_here):
            m.d.comb += self.region.eq(Region.PETAL)
        with m.Else():
            m.d.comb += self.region.eq(Region.BACKGROUND)

        return m
