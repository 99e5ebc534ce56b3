"""
Scene Geometry - Fixed constants describing the flower.

The flower is a center disk surrounded by six circular petals placed on a
ring of radius PETAL_DISTANCE around the screen center:

                 (-D/2, -7D/8)   (D/2, -7D/8)
                         \\         /
            (-D, 0) ----  [ center ]  ---- (D, 0)
                         /         \\
                 (-D/2, +7D/8)   (D/2, +7D/8)

The 60 degree placement uses the integer approximation sin(60) ~= 7/8, so
every offset is an exact integer and no trigonometry is needed anywhere.
All membership tests compare squared distances against squared radii.

Color table (2 bits per channel):
    CENTER     -> (3, 3, 0)             yellow
    PETAL      -> (3, 1, 2)             pink
    BACKGROUND -> (sky, 0, sky)         violet gradient, sky = (y >> 7) & 3
"""

from typing import NamedTuple

from amaranth.lib import enum

CENTER_X = 320
CENTER_Y = 240

CENTER_R2 = 16 * 16
"""Squared radius of the center disk."""

BASE_PETAL_R2 = 28 * 28
"""Squared petal radius at the bottom of the pulsation cycle."""

PETAL_DISTANCE = 48
"""Distance from the flower center to each petal center."""

NUM_PETALS = 6

PETAL_OFFSETS = (
    (PETAL_DISTANCE, 0),
    (PETAL_DISTANCE // 2, PETAL_DISTANCE * 7 // 8),
    (-(PETAL_DISTANCE // 2), PETAL_DISTANCE * 7 // 8),
    (-PETAL_DISTANCE, 0),
    (-(PETAL_DISTANCE // 2), -(PETAL_DISTANCE * 7 // 8)),
    (PETAL_DISTANCE // 2, -(PETAL_DISTANCE * 7 // 8)),
)
"""(dx, dy) of each petal center relative to (CENTER_X, CENTER_Y)."""

PETAL_CENTERS = tuple((CENTER_X + ox, CENTER_Y + oy) for ox, oy in PETAL_OFFSETS)
"""Absolute petal center coordinates."""

SKY_SHIFT = 7
"""Background gradient bands are 1 << SKY_SHIFT rows tall."""


class Region(enum.IntEnum, shape=2):
    """Pixel classification, highest precedence last."""

    BACKGROUND = 0
    PETAL = 1
    CENTER = 2


class Color(NamedTuple):
    """Three 2-bit channel intensities."""

    r: int
    g: int
    b: int


BLACK = Color(0, 0, 0)
CENTER_COLOR = Color(3, 3, 0)
PETAL_COLOR = Color(3, 1, 2)
