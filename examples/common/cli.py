"""
Common CLI argument definitions for flower examples.

This module provides shared argument groups that can be added to argparse
parsers in the example scripts, keeping the command lines consistent.

Usage:
    from common.cli import add_animation_args, add_output_args

    parser = argparse.ArgumentParser()
    add_animation_args(parser)  # Adds --delay, --fast, --frames, --no-color
    add_output_args(parser)     # Adds --output, --fps, --dpi, --show
    args = parser.parse_args()

    delay = get_effective_delay(args)  # 0 if --fast, else args.delay
"""

from argparse import ArgumentParser, Namespace


def add_animation_args(
    parser: ArgumentParser,
    *,
    default_delay: int = 100,
    default_frames: int = 32,
) -> None:
    """
    Add common animation control arguments to a parser.

    Args:
        parser: ArgumentParser to add arguments to
        default_delay: Default delay in milliseconds (default: 100)
        default_frames: Default number of frames (default: 32)

    Adds these arguments:
        --delay MS      Delay between frames in milliseconds
        --fast          Fast mode (no animation delay)
        --frames N      Number of frames to render
        --no-color      Disable colored output
    """
    group = parser.add_argument_group("Animation Control")

    group.add_argument(
        "--delay",
        type=int,
        default=default_delay,
        metavar="MS",
        help=f"Delay between frames in milliseconds (default: {default_delay})",
    )

    group.add_argument(
        "--fast",
        action="store_true",
        help="Fast mode (no animation delay)",
    )

    group.add_argument(
        "--frames",
        type=int,
        default=default_frames,
        metavar="N",
        help=f"Number of frames to render (default: {default_frames})",
    )

    group.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )


def add_output_args(
    parser: ArgumentParser,
    *,
    default_output: str = "flower.gif",
    default_fps: int = 15,
) -> None:
    """
    Add image output arguments to a parser.

    Adds these arguments:
        --output FILE   Output filename
        --fps N         Frames per second
        --dpi N         Image resolution
        --show          Show in a window instead of saving
    """
    group = parser.add_argument_group("Output")

    group.add_argument(
        "--output",
        type=str,
        default=default_output,
        metavar="FILE",
        help=f"Output filename (default: {default_output})",
    )

    group.add_argument(
        "--fps",
        type=int,
        default=default_fps,
        help=f"Frames per second (default: {default_fps})",
    )

    group.add_argument(
        "--dpi",
        type=int,
        default=100,
        help="Image resolution (default: 100)",
    )

    group.add_argument(
        "--show",
        action="store_true",
        help="Show animation in window instead of saving",
    )


def get_effective_delay(args: Namespace) -> int:
    """
    Get the effective animation delay from parsed args.

    Returns 0 if --fast is set, otherwise returns args.delay.
    """
    if getattr(args, "fast", False):
        return 0
    return getattr(args, "delay", 100)
