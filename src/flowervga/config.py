"""
Flowervga Configuration Module

This module defines the configuration dataclass for the flower pattern core.
Datapath bit widths and the raster scan timing are specified here and
propagate through the design.

Note: The scene itself (flower center, petal placement, radii, colors) is not
configurable. Those constants live in flowervga.geometry and are baked into
every generated core.
"""

from dataclasses import dataclass


@dataclass
class FlowerConfig:
    """
    Configuration for the flower pattern core generator.

    Example:
        >>> config = FlowerConfig()
        >>> print(config.h_total)  # 800
        >>> print(config.v_total)  # 525
    """

    # =========================================================================
    # Datapath Widths (bits)
    # =========================================================================
    coord_bits: int = 10
    """Width of the pixel_x / pixel_y inputs (must cover the blanking area)."""

    delta_bits: int = 12
    """Signed width of coordinate deltas (x - cx, y - cy)."""

    dist_bits: int = 24
    """Unsigned width of squared distances (dx*dx + dy*dy)."""

    counter_bits: int = 8
    """Width of the frame counter register."""

    # =========================================================================
    # Horizontal Timing (pixels)
    # =========================================================================
    h_active: int = 640
    """Visible pixels per line."""

    h_front_porch: int = 16
    h_sync: int = 96
    h_back_porch: int = 48

    # =========================================================================
    # Vertical Timing (lines)
    # =========================================================================
    v_active: int = 480
    """Visible lines per frame."""

    v_front_porch: int = 10
    v_sync: int = 2
    v_back_porch: int = 33

    # =========================================================================
    # Computed Properties
    # =========================================================================
    @property
    def h_total(self) -> int:
        """Pixels per line including blanking."""
        return self.h_active + self.h_front_porch + self.h_sync + self.h_back_porch

    @property
    def v_total(self) -> int:
        """Lines per frame including blanking."""
        return self.v_active + self.v_front_porch + self.v_sync + self.v_back_porch

    @property
    def vsync_start(self) -> int:
        """First line of the vertical sync pulse."""
        return self.v_active + self.v_front_porch

    @property
    def scale_bits(self) -> int:
        """Counter bits that drive the petal radius modulation."""
        return 4

    @property
    def petal_r2_bits(self) -> int:
        """Width of the modulated petal threshold (2254 max)."""
        return 12

    def __post_init__(self):
        """Validate configuration parameters."""
        assert self.delta_bits >= 12, "delta_bits must be >= 12 to hold +-400 deltas"
        assert self.dist_bits >= 24, "dist_bits must be >= 24 to avoid squared-sum overflow"
        assert self.counter_bits == 8, "frame counter is an 8-bit register"
        assert self.h_active > 0, "h_active must be positive"
        assert self.v_active > 0, "v_active must be positive"
        assert min(self.h_front_porch, self.h_sync, self.h_back_porch) >= 0, (
            "horizontal blanking intervals must be non-negative"
        )
        assert min(self.v_front_porch, self.v_back_porch) >= 0, (
            "vertical porches must be non-negative"
        )
        assert self.v_sync > 0, "v_sync must be at least one line"
        assert (1 << self.coord_bits) >= max(self.h_total, self.v_total), (
            "coord_bits too narrow for the scan totals"
        )
        # x - c for unsigned x and positive c fits in coord_bits + 1 signed bits
        assert self.delta_bits > self.coord_bits, "delta_bits must exceed coord_bits"
        assert self.dist_bits >= 2 * self.delta_bits, (
            "dist_bits must be >= 2 * delta_bits to hold dx*dx + dy*dy"
        )


# Pre-defined configurations
DEFAULT_CONFIG = FlowerConfig()
"""Default configuration."""

VGA_640X480 = FlowerConfig(
    h_active=640,
    h_front_porch=16,
    h_sync=96,
    h_back_porch=48,
    v_active=480,
    v_front_porch=10,
    v_sync=2,
    v_back_porch=33,
)
"""Standard 640x480 @ 60 Hz timing (25.175 MHz pixel clock)."""
