#!/usr/bin/env python3
"""
Flower Animation GIF Generator.

This script renders one full pulsation cycle of the flower core (16 frames,
one per value of the counter's low nibble) into an animated GIF, using the
software reference model. Each 2-bit channel is expanded to 8 bits for
display.

Usage:
    python 02_flower_gif.py [--frames N] [--output FILE] [--fps N]

    --frames N    Number of frames (default: 16)
    --output FILE Output filename (default: flower.gif)
    --fps N       Frames per second (default: 15)
    --dpi N       Image resolution (default: 100)
    --show        Show animation in window instead of saving

Requirements:
    pip install matplotlib pillow

Example:
    python 02_flower_gif.py --frames 32 --output flower.gif --fps 10
"""

import argparse
import os
import sys
from pathlib import Path

# Add parent directory to path for examples.common import
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from common.cli import add_output_args

from flowervga.config import DEFAULT_CONFIG
from flowervga.model import FrameCounter, render_frame, threshold

# Check for matplotlib
try:
    import matplotlib.animation as animation
    import matplotlib.pyplot as plt

    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False


def to_rgb888(image: np.ndarray) -> np.ndarray:
    """Expand 2-bit channels (0..3) to 8-bit (0..255)."""
    return image.astype(np.uint8) * 85


def collect_frames(frames: int) -> list:
    """Render ``frames`` consecutive frames starting from a reset counter."""
    counter = FrameCounter()
    states = []
    for _ in range(frames):
        value = counter.snapshot()
        states.append(
            {
                "frame": value,
                "petal_r2": threshold(value),
                "image": to_rgb888(render_frame(value, DEFAULT_CONFIG)),
            }
        )
        counter.advance()
    return states


def create_animation(frames: int = 16, fps: int = 15, dpi: int = 100) -> tuple:
    """
    Create matplotlib animation of the flower.

    Returns:
        (fig, anim, states) tuple for saving or displaying
    """
    states = collect_frames(frames)

    fig, ax = plt.subplots(figsize=(6.4, 5.2), dpi=dpi)
    ax.axis("off")
    im = ax.imshow(states[0]["image"], interpolation="nearest")
    title = ax.set_title("")

    def animate(frame_idx):
        """Update animation frame."""
        state = states[frame_idx]
        im.set_data(state["image"])
        title.set_text(f"frame {state['frame']}  petal_r2={state['petal_r2']}")
        return [im, title]

    anim = animation.FuncAnimation(
        fig, animate, frames=len(states), interval=1000 // fps, blit=False
    )
    return fig, anim, states


def main():
    """Main entry point."""
    if not HAS_MATPLOTLIB:
        print("Error: matplotlib is required for GIF generation.")
        print("Install with: pip install matplotlib pillow")
        sys.exit(1)

    parser = argparse.ArgumentParser(
        description="Generate flower core animation GIF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--frames", type=int, default=16, help="Number of frames (default: 16)")
    add_output_args(parser)
    args = parser.parse_args()

    print(f"Rendering {args.frames} frames...")
    fig, anim, states = create_animation(frames=args.frames, fps=args.fps, dpi=args.dpi)

    if args.show:
        print("Showing animation (close window to exit)...")
        plt.show()
    else:
        output_path = Path(args.output)
        print(f"Saving to {output_path}...")

        writer = animation.PillowWriter(fps=args.fps)
        anim.save(str(output_path), writer=writer)

        print(f"Saved: {output_path} ({output_path.stat().st_size / 1024:.1f} KB)")


if __name__ == "__main__":
    main()
