"""
Unit tests for the combinational pixel pipeline components.

These tests verify:
1. GeometryEvaluator distances against the reference model
2. RadiusModulator threshold for every scale step
3. ShapeClassifier precedence
4. ColorCompositor color table and blanking
5. Verilog generation for each component
"""

import pytest
from amaranth.sim import Simulator

from flowervga.config import FlowerConfig
from flowervga.core import ColorCompositor, GeometryEvaluator, RadiusModulator, ShapeClassifier
from flowervga.geometry import PETAL_CENTERS, Region
from flowervga.model import composite, evaluate, threshold


@pytest.fixture
def config():
    """Default configuration for testing."""
    return FlowerConfig()


class TestGeometryEvaluator:
    """Test suite for GeometryEvaluator."""

    @pytest.fixture
    def geometry(self, config):
        """Create a GeometryEvaluator instance."""
        return GeometryEvaluator(config)

    def test_has_correct_ports(self, geometry):
        """Test the port list and widths."""
        assert len(geometry.x) == 10
        assert len(geometry.dist2_center) == 24
        assert len(geometry.petal_outputs()) == 6

    def test_matches_model(self, geometry):
        """Test distances at landmarks and scan extremes."""
        points = [
            (320, 240),
            (368, 240),
            (0, 0),
            (639, 479),
            (799, 524),
            (1023, 1023),
            (272, 282),
            (331, 97),
        ] + list(PETAL_CENTERS)
        results = []

        async def testbench(ctx):
            for x, y in points:
                ctx.set(geometry.x, x)
                ctx.set(geometry.y, y)
                petals = tuple(ctx.get(p) for p in geometry.petal_outputs())
                results.append(((x, y), ctx.get(geometry.dist2_center), petals))

        sim = Simulator(geometry)
        sim.add_testbench(testbench)
        sim.run()

        for (x, y), dist2_center, petals in results:
            assert (dist2_center, petals) == evaluate(x, y), f"mismatch at ({x}, {y})"

    def test_widened_uhd_scan(self):
        """Test that a widened config keeps distances exact across a 4400x2250 scan."""
        config = FlowerConfig(
            coord_bits=13,
            delta_bits=14,
            dist_bits=28,
            h_active=3840,
            h_front_porch=176,
            h_sync=88,
            h_back_porch=296,
            v_active=2160,
            v_front_porch=8,
            v_sync=10,
            v_back_porch=72,
        )
        geometry = GeometryEvaluator(config)
        points = [(3000, 240), (4399, 2249), (0, 2249), (320, 240)]
        results = []

        async def testbench(ctx):
            for x, y in points:
                ctx.set(geometry.x, x)
                ctx.set(geometry.y, y)
                petals = tuple(ctx.get(p) for p in geometry.petal_outputs())
                results.append(((x, y), ctx.get(geometry.dist2_center), petals))

        sim = Simulator(geometry)
        sim.add_testbench(testbench)
        sim.run()

        assert results[0][1] == 7182400
        for (x, y), dist2_center, petals in results:
            assert (dist2_center, petals) == evaluate(x, y), f"mismatch at ({x}, {y})"


class TestRadiusModulator:
    """Test suite for RadiusModulator."""

    def test_all_scales(self, config):
        """Test the threshold for the whole 16-step cycle."""
        radius = RadiusModulator(config)
        results = []

        async def testbench(ctx):
            for scale in range(16):
                ctx.set(radius.scale, scale)
                results.append(ctx.get(radius.petal_r2))

        sim = Simulator(radius)
        sim.add_testbench(testbench)
        sim.run()

        assert results == [threshold(s) for s in range(16)]
        assert results[0] == 784
        assert results[15] == 2254


class TestShapeClassifier:
    """Test suite for ShapeClassifier."""

    @pytest.fixture
    def classifier(self, config):
        """Create a ShapeClassifier instance."""
        return ShapeClassifier(config)

    def _classify(self, classifier, cases):
        results = []

        async def testbench(ctx):
            for dist2_center, petals, petal_r2 in cases:
                ctx.set(classifier.dist2_center, dist2_center)
                ctx.set(classifier.petal_r2, petal_r2)
                for port, value in zip(classifier.petal_inputs(), petals):
                    ctx.set(port, value)
                results.append(
                    (
                        Region(ctx.get(classifier.region)),
                        ctx.get(classifier.center_here),
                        ctx.get(classifier.petal_here),
                    )
                )

        sim = Simulator(classifier)
        sim.add_testbench(testbench)
        sim.run()
        return results

    def test_center(self, classifier):
        """Test the strict center disk boundary."""
        results = self._classify(
            classifier,
            [
                (0, [5000] * 6, 784),
                (255, [5000] * 6, 784),
                (256, [5000] * 6, 784),
            ],
        )
        assert results[0] == (Region.CENTER, 1, 0)
        assert results[1] == (Region.CENTER, 1, 0)
        assert results[2] == (Region.BACKGROUND, 0, 0)

    def test_each_petal(self, classifier):
        """Test that any one petal hit yields PETAL."""
        cases = []
        for i in range(6):
            petals = [5000] * 6
            petals[i] = 783
            cases.append((1000, petals, 784))
        cases.append((1000, [784] * 6, 784))

        results = self._classify(classifier, cases)
        assert all(r == (Region.PETAL, 0, 1) for r in results[:6])
        assert results[6] == (Region.BACKGROUND, 0, 0)

    def test_center_precedence(self, classifier):
        """Test that CENTER wins when both predicates hold."""
        results = self._classify(classifier, [(1, [2209] + [5000] * 5, 2254)])
        assert results[0] == (Region.CENTER, 1, 1)


class TestColorCompositor:
    """Test suite for ColorCompositor."""

    def test_matches_model(self, config):
        """Test every region, gradient band and active state."""
        compositor = ColorCompositor(config)
        cases = [
            (region, y, active)
            for region in Region
            for y in (0, 127, 128, 300, 400, 479, 500)
            for active in (0, 1)
        ]
        results = []

        async def testbench(ctx):
            for region, y, active in cases:
                ctx.set(compositor.region, region)
                ctx.set(compositor.y, y)
                ctx.set(compositor.active, active)
                results.append(
                    (ctx.get(compositor.r), ctx.get(compositor.g), ctx.get(compositor.b))
                )

        sim = Simulator(compositor)
        sim.add_testbench(testbench)
        sim.run()

        for (region, y, active), color in zip(cases, results):
            assert color == tuple(composite(region, y, bool(active))), (region, y, active)

    def test_blanking(self, config):
        """Test that inactive pixels are black even in the center."""
        compositor = ColorCompositor(config)
        results = []

        async def testbench(ctx):
            ctx.set(compositor.region, Region.CENTER)
            ctx.set(compositor.y, 240)
            ctx.set(compositor.active, 0)
            results.append((ctx.get(compositor.r), ctx.get(compositor.g), ctx.get(compositor.b)))

        sim = Simulator(compositor)
        sim.add_testbench(testbench)
        sim.run()

        assert results == [(0, 0, 0)]


class TestComponentVerilog:
    """Test Verilog generation for each pipeline component."""

    def test_generate_component_verilog(self, config, tmp_path):
        """Test that every combinational component converts to Verilog."""
        from amaranth._toolchain.yosys import find_yosys
        from amaranth.back import verilog

        try:
            find_yosys(lambda ver: ver >= (0, 40))
        except Exception:
            pytest.skip("Yosys not found")

        components = {
            "GeometryEvaluator": (GeometryEvaluator(config), "dist2_petal_5"),
            "RadiusModulator": (RadiusModulator(config), "petal_r2"),
            "ShapeClassifier": (ShapeClassifier(config), "center_here"),
            "ColorCompositor": (ColorCompositor(config), "active"),
        }

        for name, (component, port) in components.items():
            output = verilog.convert(component, name=name)
            assert f"module {name}" in output
            assert port in output

            verilog_file = tmp_path / f"{name}.v"
            verilog_file.write_text(output)
            assert verilog_file.exists()
