"""
Per-pixel hardware components of the flower core.

- FrameCounter: 8-bit animation register, advanced once per frame
- GeometryEvaluator: Squared distances to the center and six petals
- RadiusModulator: Pulsating squared petal radius
- ShapeClassifier: Center > petal > background decision
- ColorCompositor: Region to 2-bit RGB, blanked outside active video
"""

from .classifier import ShapeClassifier
from .compositor import ColorCompositor
from .frame_counter import FrameCounter
from .geometry import GeometryEvaluator
from .radius import RadiusModulator

__all__ = [
    "FrameCounter",
    "GeometryEvaluator",
    "RadiusModulator",
    "ShapeClassifier",
    "ColorCompositor",
]
