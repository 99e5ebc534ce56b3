"""
Flowervga - An Amaranth HDL generator for an animated flower VGA pattern.

This package provides a synthesizable per-pixel color core (a pulsating
six-petal flower over a vertical gradient) together with a bit-exact
software reference model for previews and verification.
"""

from .config import DEFAULT_CONFIG, VGA_640X480, FlowerConfig
from .geometry import Color, Region

__version__ = "0.1.0"
__all__ = ["FlowerConfig", "DEFAULT_CONFIG", "VGA_640X480", "Region", "Color", "__version__"]
