"""
Unit tests for modifiers.
"""
import pytest

from pynoisegraph.modifiers import Abs, Clamp, Exponent, Negate, ScaleBias
from pynoisegraph.noise import Constant, Perlin


class TestUnaryModifiers:
    """Abs and Negate."""

    @pytest.mark.unit
    def test_abs(self, all_points):
        source = Perlin(seed=3)
        node = Abs(source)
        assert all(node.get(p) == abs(source.get(p)) for p in all_points)

    @pytest.mark.unit
    def test_negate(self, all_points):
        source = Perlin(seed=3)
        node = Negate(source)
        assert all(node.get(p) == -source.get(p) for p in all_points)

    @pytest.mark.unit
    def test_with_source(self):
        assert Negate(Constant(1.0)).with_source(Constant(2.0)).get((0.0, 0.0)) == -2.0


class TestScaleBias:
    """Affine modifier."""

    @pytest.mark.unit
    def test_affine_law(self, all_points):
        node = ScaleBias(Constant(1.0)).with_scale(2.0).with_bias(0.5)
        assert all(node.get(p) == 2.5 for p in all_points)

    @pytest.mark.unit
    def test_defaults_are_identity(self, all_points):
        source = Perlin(seed=1)
        node = ScaleBias(source)
        assert all(node.get(p) == source.get(p) for p in all_points)


class TestClamp:
    """Clamp modifier."""

    @pytest.mark.unit
    def test_saturation(self, all_points):
        assert all(Clamp(Constant(5.0)).get(p) == 1.0 for p in all_points)
        assert all(Clamp(Constant(-5.0)).get(p) == -1.0 for p in all_points)

    @pytest.mark.unit
    def test_idempotent(self, all_points):
        once = Clamp(ScaleBias(Perlin(seed=2), scale=3.0)).with_bounds(-0.5, 0.25)
        twice = Clamp(once).with_bounds(-0.5, 0.25)
        assert all(once.get(p) == twice.get(p) for p in all_points)

    @pytest.mark.unit
    def test_bound_setters(self):
        node = Clamp(Constant(0.0)).with_lower_bound(0.5)
        assert node.bounds == (0.5, 1.0)
        assert node.get((0.0, 0.0)) == 0.5
        node = Clamp(Constant(0.75)).with_upper_bound(0.5)
        assert node.bounds == (-1.0, 0.5)
        assert node.get((0.0, 0.0)) == 0.5

    @pytest.mark.unit
    def test_inverted_bounds_are_accepted(self):
        low_side = Clamp(Constant(-2.0)).with_bounds(1.0, -1.0)
        middle = Clamp(Constant(0.0)).with_bounds(1.0, -1.0)
        high_side = Clamp(Constant(2.0)).with_bounds(1.0, -1.0)
        assert low_side.get((0.0, 0.0)) == 1.0
        assert middle.get((0.0, 0.0)) == 1.0
        assert high_side.get((0.0, 0.0)) == -1.0


class TestExponent:
    """Exponent modifier."""

    @pytest.mark.unit
    def test_endpoints_fixed(self):
        for exponent in (0.5, 1.0, 2.0, 3.0):
            assert Exponent(Constant(1.0), exponent).get((0.0, 0.0)) == 1.0
            assert Exponent(Constant(-1.0), exponent).get((0.0, 0.0)) == -1.0

    @pytest.mark.unit
    def test_square(self):
        # (0 + 1) / 2 = 0.5, squared 0.25, back to [-1, 1] gives -0.5
        assert Exponent(Constant(0.0)).with_exponent(2.0).get((0.0, 0.0)) == -0.5

    @pytest.mark.unit
    def test_identity_exponent(self, points_2d):
        source = Perlin(seed=7)
        node = Exponent(source)
        for p in points_2d:
            assert node.get(p) == pytest.approx(source.get(p), abs=1e-12)
