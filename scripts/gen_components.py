#!/usr/bin/env python3
"""Generate Verilog for each flower pipeline component into gen/components/."""

import sys
from pathlib import Path

# Add src to path if running from scripts/
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from amaranth.back import verilog  # noqa: E402

from flowervga.config import FlowerConfig  # noqa: E402
from flowervga.core import (  # noqa: E402
    ColorCompositor,
    FrameCounter,
    GeometryEvaluator,
    RadiusModulator,
    ShapeClassifier,
)

COMPONENTS = {
    "frame_counter": FrameCounter,
    "geometry_evaluator": GeometryEvaluator,
    "radius_modulator": RadiusModulator,
    "shape_classifier": ShapeClassifier,
    "color_compositor": ColorCompositor,
}


def main():
    gen_dir = project_root / "gen" / "components"
    gen_dir.mkdir(parents=True, exist_ok=True)

    config = FlowerConfig()

    for stem, cls in COMPONENTS.items():
        output_path = gen_dir / f"{stem}.v"
        output_path.write_text(verilog.convert(cls(config), name=cls.__name__))
        print(f"Generated {output_path}")


if __name__ == "__main__":
    main()
