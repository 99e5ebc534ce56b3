#!/usr/bin/env python3
"""Generate FlowerCore Verilog from flowervga."""

import sys
from pathlib import Path

# Add src to path if running from scripts/
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from amaranth.back import verilog  # noqa: E402

from flowervga.config import FlowerConfig  # noqa: E402
from flowervga.top import FlowerCore  # noqa: E402


def main():
    gen_dir = project_root / "gen"
    gen_dir.mkdir(exist_ok=True)

    config = FlowerConfig()
    core = FlowerCore(config)

    output_path = gen_dir / "flower_core.v"
    with open(output_path, "w") as f:
        f.write(verilog.convert(core, name="FlowerCore"))

    print(f"Generated {output_path}")


if __name__ == "__main__":
    main()
