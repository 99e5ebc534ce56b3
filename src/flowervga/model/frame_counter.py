"""
FrameCounter - Software model of the 8-bit animation counter.

The counter is the only state that outlives a single pixel. It advances once
per frame (on the vertical sync edge) and wraps at 256. Only the low nibble
(``scale``) reaches the pixel pipeline; the upper four bits are kept but have
no visible effect.

Access is serialized with a lock so a render loop and a frame timer running
on different threads always see a whole value. Renderers should take one
``snapshot()`` per frame and evaluate every pixel of that frame from it.
"""

import threading

COUNTER_MASK = 0xFF
SCALE_MASK = 0xF


class FrameCounter:
    """
    Frame counter state object.

    Constructing a counter performs a reset, so there is no undefined
    cold-start value.

    Example:
        >>> counter = FrameCounter()
        >>> for _ in range(17):
        ...     counter.advance()
        >>> counter.value, counter.scale
        (17, 1)
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._value = 0

    def reset(self) -> None:
        """Force the counter back to zero."""
        with self._lock:
            self._value = 0

    def advance(self) -> int:
        """Step to the next frame and return the new value."""
        with self._lock:
            self._value = (self._value + 1) & COUNTER_MASK
            return self._value

    def snapshot(self) -> int:
        """Read the current value atomically."""
        with self._lock:
            return self._value

    @property
    def value(self) -> int:
        return self.snapshot()

    @property
    def scale(self) -> int:
        """Low nibble of the counter, fed to the radius modulator."""
        return self.snapshot() & SCALE_MASK

    def __repr__(self) -> str:
        return f"FrameCounter(value={self.snapshot()})"
