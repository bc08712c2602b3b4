"""
Integration tests for basic PyNoiseGraph workflows.

These tests build the classic texture graphs and verify that the components
work together: determinism, sharing of sub-graphs and grid evaluation.
"""
import concurrent.futures

import pytest
import numpy as np


def plane_grid(n=16, extent=1.0, z=None):
    xs, ys = np.meshgrid(np.linspace(0.0, extent, n), np.linspace(0.0, extent, n))
    columns = [xs.ravel(), ys.ravel()]
    if z is not None:
        columns.append(np.full(xs.size, z))
    return np.column_stack(columns)


class TestTextureWorkflows:
    """Granite, wood and jade graphs."""

    @pytest.mark.integration
    @pytest.mark.parametrize("texture", ["granite", "wood", "jade"])
    def test_texture_is_deterministic(self, texture, texture_factory):
        grid = plane_grid(n=6, z=0.0)
        first = getattr(texture_factory, texture)().get_many(grid)
        second = getattr(texture_factory, texture)().get_many(grid)
        assert np.all(np.isfinite(first))
        assert np.array_equal(first, second)

    @pytest.mark.integration
    @pytest.mark.parametrize("texture", ["granite", "wood", "jade"])
    def test_texture_varies(self, texture, texture_factory):
        values = getattr(texture_factory, texture)().get_many(plane_grid(n=6, z=0.0))
        assert np.std(values) > 0.0

    @pytest.mark.integration
    def test_texture_in_2d(self, texture_factory):
        values = texture_factory.granite().get_many(plane_grid(n=5))
        assert values.shape == (25,)


class TestGraphComposition:
    """Composite behaviour of graphs."""

    @pytest.mark.integration
    def test_shared_subtree(self):
        import pynoisegraph as png

        shared = png.fractals.fbm(png.Perlin(seed=1), layers=3)
        left = png.ScaleBias(shared, scale=2.0)
        right = png.Clamp(shared).with_bounds(-0.25, 0.25)
        graph = png.Add(left, right)
        grid = plane_grid(n=8)
        before = shared.get_many(grid)
        values = graph.get_many(grid)
        assert np.array_equal(shared.get_many(grid), before)
        expected = 2.0 * before + np.clip(before, -0.25, 0.25)
        assert np.allclose(values, expected)

    @pytest.mark.integration
    def test_select_between_generators(self):
        import pynoisegraph as png

        control = png.Perlin(seed=3)
        graph = png.Select(png.Constant(-1.0), png.Constant(1.0), control).with_bounds(0.0, 10.0)
        grid = plane_grid(n=8, extent=3.0, z=0.5)
        values = graph.get_many(grid)
        controls = control.get_many(grid)
        assert np.array_equal(values, np.where(controls >= 0.0, 1.0, -1.0))

    @pytest.mark.integration
    def test_zero_power_turbulence_over_fractal(self):
        import pynoisegraph as png

        source = png.fractals.billow(png.Worley(seed=2).with_return_type("distance"), layers=2)
        grid = plane_grid(n=6, z=0.25)
        assert np.array_equal(png.Turbulence(source).with_power(0.0).get_many(grid), source.get_many(grid))

    @pytest.mark.integration
    def test_concurrent_evaluation(self, texture_factory):
        graph = texture_factory.jade()
        grid = plane_grid(n=6, z=0.0)
        expected = graph.get_many(grid)
        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(graph.get, grid))
        assert np.array_equal(np.array(results), expected)

    @pytest.mark.integration
    def test_reconfiguring_leaves_original_untouched(self):
        import pynoisegraph as png

        fractal = png.fractals.ridged_multi(png.OpenSimplex(seed=4), layers=4)
        grid = plane_grid(n=6)
        before = fractal.get_many(grid)
        fractal.with_layers(8).with_seed(1).with_persistence(0.9)
        assert np.array_equal(fractal.get_many(grid), before)
