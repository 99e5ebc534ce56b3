#!/usr/bin/env python3
"""
RTL vs Model Cross-Check.

Simulates the FlowerCore RTL with amaranth.sim and compares its colors with
the software reference model along the horizontal and vertical lines through
the flower center, over several frames of the pulsation cycle.

Usage:
    python 03_rtl_crosscheck.py [--frames N] [--step PX]

    --frames N   Frames to check, starting at 0 (default: 16)
    --step PX    Pixel spacing along each line (default: 2)
"""

import argparse
import sys

from amaranth.sim import Simulator

from flowervga.config import DEFAULT_CONFIG
from flowervga.geometry import CENTER_X, CENTER_Y
from flowervga.model import pixel_color
from flowervga.top import FlowerCore


def sample_points(step: int) -> list:
    """Pixels on the two lines through the flower center."""
    points = [(x, CENTER_Y) for x in range(CENTER_X - 100, CENTER_X + 101, step)]
    points += [(CENTER_X, y) for y in range(CENTER_Y - 100, CENTER_Y + 101, step)]
    return points


def run_crosscheck(frames: int = 16, step: int = 2) -> bool:
    core = FlowerCore(DEFAULT_CONFIG)
    points = sample_points(step)
    mismatches = []
    checked = 0

    async def testbench(ctx):
        nonlocal checked
        ctx.set(core.active, 1)
        for _ in range(frames):
            frame = ctx.get(core.frame)
            for x, y in points:
                ctx.set(core.pixel_x, x)
                ctx.set(core.pixel_y, y)
                rtl = (ctx.get(core.r), ctx.get(core.g), ctx.get(core.b))
                ref = tuple(pixel_color(x, y, frame, True))
                checked += 1
                if rtl != ref:
                    mismatches.append((frame, x, y, rtl, ref))

            # One vsync pulse per frame
            ctx.set(core.vsync, 0)
            await ctx.tick()
            ctx.set(core.vsync, 1)
            await ctx.tick().repeat(2)
            ctx.set(core.vsync, 0)
            await ctx.tick()

    sim = Simulator(core)
    sim.add_clock(1 / 25.175e6)
    sim.add_testbench(testbench)
    sim.run()

    print(f"Checked {checked} pixels over {frames} frames")
    for frame, x, y, rtl, ref in mismatches[:10]:
        print(f"  frame {frame:3d} ({x:3d}, {y:3d}): rtl={rtl} model={ref}")

    if mismatches:
        print(f"✗ FAIL: {len(mismatches)} mismatches")
        return False
    print("✓ PASS: RTL matches model")
    return True


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Cross-check FlowerCore RTL against the model")
    parser.add_argument("--frames", type=int, default=16, help="Frames to check (default: 16)")
    parser.add_argument("--step", type=int, default=2, help="Pixel spacing (default: 2)")
    args = parser.parse_args()

    sys.exit(0 if run_crosscheck(frames=args.frames, step=args.step) else 1)


if __name__ == "__main__":
    main()
