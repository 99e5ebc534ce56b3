#!/usr/bin/env python3
"""
Animated Flower Terminal Demo.

This example renders the flower core's output in the terminal, using the
software reference model:

- A FrameClock thread advances the frame counter at the display rate,
  standing in for the vertical sync edge
- The render loop snapshots the counter once per frame and evaluates the
  visible area with render_frame
- The frame is downsampled to fit a terminal and drawn with 24-bit ANSI
  background colors (2-bit channels expanded to 0..255)

The petals pulse over a 16-frame sawtooth; the background shows the four
128-row gradient bands.

Usage:
    python 01_animated_flower.py [--delay MS] [--fast] [--frames N] [--no-color]

    --delay MS   Delay between frames in milliseconds (default: 100)
    --fast       Fast mode (no animation delay, counter advanced per frame)
    --frames N   Number of frames to show (default: 32)
    --no-color   Draw with characters instead of colors
"""

import argparse
import os
import sys
import time

# Add parent directory to path for examples.common import
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from common.cli import add_animation_args, get_effective_delay

from flowervga.config import DEFAULT_CONFIG
from flowervga.geometry import CENTER_COLOR, PETAL_COLOR
from flowervga.model import FrameClock, FrameCounter, render_frame, threshold

# Screen pixels per terminal cell
X_STEP = 8
Y_STEP = 16

# =============================================================================
# ANSI Output
# =============================================================================


class Colors:
    """ANSI codes for terminal output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    @classmethod
    def disable(cls):
        """Disable all colors."""
        for attr in dir(cls):
            if not attr.startswith("_") and attr != "disable":
                setattr(cls, attr, "")


def clear_screen():
    """Clear the terminal screen."""
    os.system("cls" if os.name == "nt" else "clear")


def expand_channel(value: int) -> int:
    """2-bit channel to 8-bit intensity."""
    return value * 85


def format_cell(pixel: np.ndarray, use_color: bool) -> str:
    color = tuple(int(v) for v in pixel)
    if not use_color:
        if color == tuple(CENTER_COLOR):
            return "@"
        if color == tuple(PETAL_COLOR):
            return "*"
        return " .:#"[color[0]]
    r, g, b = (expand_channel(v) for v in color)
    return f"\033[48;2;{r};{g};{b}m \033[0m"


def draw_frame(image: np.ndarray, use_color: bool) -> str:
    """Downsample a rendered frame into terminal lines."""
    lines = []
    for row in image[::Y_STEP]:
        lines.append("".join(format_cell(pixel, use_color) for pixel in row[::X_STEP]))
    return "\n".join(lines)


# =============================================================================
# Main Demo
# =============================================================================


def run_animated_demo(frames: int = 32, delay_ms: int = 100, use_color: bool = True):
    """
    Run the animated flower demonstration.

    Args:
        frames: Number of frames to draw
        delay_ms: Milliseconds between frames (0 = advance per drawn frame)
        use_color: Whether to use 24-bit color output
    """
    if not use_color:
        Colors.disable()

    c = Colors
    counter = FrameCounter()
    clock = FrameClock(counter, fps=1000.0 / delay_ms) if delay_ms > 0 else None

    if clock is not None:
        clock.start()

    try:
        for _ in range(frames):
            value = counter.snapshot()
            image = render_frame(value, DEFAULT_CONFIG)

            clear_screen()
            print(f"{c.BOLD}Flower Core{c.RESET}")
            print(f"frame={value:3d}  scale={value & 0xF:2d}  petal_r2={threshold(value)}")
            print(draw_frame(image, use_color))

            if clock is None:
                counter.advance()
            else:
                time.sleep(delay_ms / 1000.0)

    except KeyboardInterrupt:
        print("\nAnimation interrupted.")
    finally:
        if clock is not None:
            clock.stop()

    print(f"\n{c.DIM}Final counter value: {counter.value}{c.RESET}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Animated flower core terminal demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    add_animation_args(parser)

    args = parser.parse_args()

    run_animated_demo(
        frames=args.frames,
        delay_ms=get_effective_delay(args),
        use_color=not args.no_color,
    )


if __name__ == "__main__":
    main()
