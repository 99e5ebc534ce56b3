"""
Common utilities for flowervga examples.

This module provides the shared CLI argument definitions used by the
demonstration scripts.
"""

from .cli import (
    add_animation_args,
    add_output_args,
    get_effective_delay,
)

__all__ = [
    "add_animation_args",
    "add_output_args",
    "get_effective_delay",
]
