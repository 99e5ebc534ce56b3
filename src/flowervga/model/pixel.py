"""
Pixel Pipeline Reference Model.

Bit-exact software version of the per-pixel datapath in flowervga.core:

    (x, y) -> evaluate -> classify -> composite -> (r, g, b)
                             ^
    counter -> threshold ----+

Every function here is pure. Python integers do not overflow, so the
results match the hardware as long as the hardware widths satisfy
FlowerConfig's sizing checks.
"""

from collections.abc import Sequence

from ..geometry import (
    BASE_PETAL_R2,
    BLACK,
    CENTER_COLOR,
    CENTER_R2,
    CENTER_X,
    CENTER_Y,
    PETAL_CENTERS,
    PETAL_COLOR,
    SKY_SHIFT,
    Color,
    Region,
)
from .frame_counter import SCALE_MASK


def evaluate(x: int, y: int) -> tuple[int, tuple[int, ...]]:
    """
    Squared distances from a pixel to the flower center and each petal center.

    Args:
        x: Pixel column (blanking included)
        y: Pixel row (blanking included)

    Returns:
        (dist2_center, (dist2_petal_0, ..., dist2_petal_5))
    """
    dx = x - CENTER_X
    dy = y - CENTER_Y
    dist2_center = dx * dx + dy * dy

    dist2_petals = []
    for px, py in PETAL_CENTERS:
        pdx = x - px
        pdy = y - py
        dist2_petals.append(pdx * pdx + pdy * pdy)

    return dist2_center, tuple(dist2_petals)


def threshold(scale: int) -> int:
    """
    Squared petal radius for a modulation step.

    Only the low nibble of ``scale`` is used, so a raw frame counter value may
    be passed directly. The result is a 16-step sawtooth from 784 to 2254.
    """
    scale &= SCALE_MASK
    return BASE_PETAL_R2 + (BASE_PETAL_R2 * scale) // 8


def classify(dist2_center: int, dist2_petals: Sequence[int], petal_r2: int) -> Region:
    """Resolve a pixel's region. Center beats petal beats background."""
    if dist2_center < CENTER_R2:
        return Region.CENTER
    if any(d < petal_r2 for d in dist2_petals):
        return Region.PETAL
    return Region.BACKGROUND


def sky_blue(y: int) -> int:
    """Background gradient level: constant over 128-row bands."""
    return (y >> SKY_SHIFT) & 0b11


def composite(region: Region, y: int, active: bool) -> Color:
    """Map a region to its 2-bit color. Outside the active area is black."""
    if not active:
        return BLACK
    if region == Region.CENTER:
        return CENTER_COLOR
    if region == Region.PETAL:
        return PETAL_COLOR
    sky = sky_blue(y)
    return Color(sky, 0, sky)


def pixel_color(x: int, y: int, counter_value: int, active: bool) -> Color:
    """
    Full per-pixel evaluation.

    Args:
        x: Pixel column
        y: Pixel row
        counter_value: Frame counter value for the current frame
        active: True inside the visible area

    Returns:
        Color with 2-bit r, g, b
    """
    dist2_center, dist2_petals = evaluate(x, y)
    region = classify(dist2_center, dist2_petals, threshold(counter_value))
    return composite(region, y, active)
