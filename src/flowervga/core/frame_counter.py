"""
FrameCounter - Animation state register.

An 8-bit register that advances by one on each frame strobe and wraps at 256.
The low nibble is exported as ``scale`` for the radius modulator; the upper
nibble has no visible effect but is kept so the register matches the
software model value for value.

Priority:
    reset   -> counter = 0
    advance -> counter = counter + 1 (mod 256)
    else    -> hold
"""

from amaranth import Module, Signal
from amaranth.lib.wiring import Component, In, Out

from ..config import FlowerConfig


class FrameCounter(Component):
    """
    Frame-synchronous animation counter.

    Ports:
        advance: One-cycle strobe, asserted once per frame (vsync edge)
        reset: Clear the counter; holds it at zero while asserted
        value: Current counter value
        scale: value[0:4], the radius modulation step

    Parameters:
        config: FlowerConfig with counter width
    """

    def __init__(self, config: FlowerConfig):
        self.config = config

        super().__init__(
            {
                "advance": In(1),
                "reset": In(1),
                "value": Out(config.counter_bits),
                "scale": Out(config.scale_bits),
            }
        )

    def elaborate(self, _platform):
        m = Module()
        cfg = self.config

        count = Signal(cfg.counter_bits, init=0, name="count")

        with m.If(self.reset):
            m.d.sync += count.eq(0)
        with m.Elif(self.advance):
            # Truncation to counter_bits provides the wrap at 256
            m.d.sync += count.eq(count + 1)

        m.d.comb += [
            self.value.eq(count),
            self.scale.eq(count[: cfg.scale_bits]),
        ]

        return m
