"""
GeometryEvaluator - Squared distance field for one pixel.

For the incoming pixel (x, y) this computes, in parallel:

    dist2_center  = (x - 320)^2 + (y - 240)^2
    dist2_petal_i = (x - px_i)^2 + (y - py_i)^2     for the six petal centers

All arithmetic is integer. Deltas are held in ``delta_bits`` signed bits and
squared sums in ``dist_bits`` unsigned bits; FlowerConfig guarantees both are
wide enough for the full scan range so nothing wraps.

The petal centers come from the PETAL_CENTERS table, so the six petal
datapaths are generated by one loop.
"""

from amaranth import Module, Signal, signed
from amaranth.lib.wiring import Component, In, Out

from ..config import FlowerConfig
from ..geometry import CENTER_X, CENTER_Y, NUM_PETALS, PETAL_CENTERS


class GeometryEvaluator(Component):
    """
    Combinational squared-distance evaluator.

    Ports:
        x, y: Pixel coordinate (unsigned, blanking included)
        dist2_center: Squared distance to the flower center
        dist2_petal_0..5: Squared distance to each petal center

    Parameters:
        config: FlowerConfig with coordinate, delta and distance widths
    """

    def __init__(self, config: FlowerConfig):
        self.config = config

        ports = {
            "x": In(config.coord_bits),
            "y": In(config.coord_bits),
            "dist2_center": Out(config.dist_bits),
        }
        for i in range(NUM_PETALS):
            ports[f"dist2_petal_{i}"] = Out(config.dist_bits)

        super().__init__(ports)

    def petal_outputs(self) -> list:
        """Petal distance ports in table order."""
        return [getattr(self, f"dist2_petal_{i}") for i in range(NUM_PETALS)]

    def _dist2(self, m, x_s, y_s, cx, cy, name):
        w = self.config.delta_bits

        dx = Signal(signed(w), name=f"{name}_dx")
        dy = Signal(signed(w), name=f"{name}_dy")
        m.d.comb += [
            dx.eq(x_s - cx),
            dy.eq(y_s - cy),
        ]
        return dx * dx + dy * dy

    def elaborate(self, _platform):
        m = Module()
        w = self.config.delta_bits

        # Zero-extend the unsigned coordinates into the signed delta domain
        x_s = Signal(signed(w), name="x_s")
        y_s = Signal(signed(w), name="y_s")
        m.d.comb += [
            x_s.eq(self.x),
            y_s.eq(self.y),
        ]

        m.d.comb += self.dist2_center.eq(self._dist2(m, x_s, y_s, CENTER_X, CENTER_Y, "center"))

        for i, ((px, py), out) in enumerate(zip(PETAL_CENTERS, self.petal_outputs())):
            m.d.comb += out.eq(self._dist2(m, x_s, y_s, px, py, f"petal{i}"))

        return m
