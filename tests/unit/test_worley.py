"""
Unit tests for Worley noise.
"""
import itertools
import math

import pytest

from pynoisegraph.noise import DISTANCE_FUNCTIONS, RETURN_TYPES, Worley
from pynoisegraph.noise import worley_noise


def brute_force_distances(noise, point, radius=4):
    """Sorted distances to the feature points of every cell of a wide block."""
    distance = DISTANCE_FUNCTIONS[noise.distance_function][0]
    scaled = tuple(c * noise.frequency for c in point)
    cell = tuple(math.floor(c) for c in scaled)
    dists = []
    for delta in itertools.product(range(-radius, radius + 1), repeat=len(point)):
        feature = noise.feature_point(tuple(c + o for c, o in zip(cell, delta)))
        dists.append(distance([f - p for f, p in zip(feature, scaled)]))
    return sorted(dists)


class TestWorleySearch:
    """The ring search finds the true nearest feature points."""

    @pytest.mark.unit
    @pytest.mark.parametrize("metric", sorted(DISTANCE_FUNCTIONS))
    def test_nearest_matches_brute_force(self, metric, points_2d, points_3d):
        noise = Worley(seed=3, distance_function=metric, return_type="distance")
        for point in points_2d + points_3d[:15]:
            nearest = brute_force_distances(noise, point)[0]
            assert noise.get(point) == pytest.approx(2.0 * nearest - 1.0)

    @pytest.mark.unit
    def test_second_nearest_matches_brute_force(self, points_2d):
        noise = Worley(seed=3, return_type="distance2")
        for point in points_2d:
            second = brute_force_distances(noise, point)[1]
            assert noise.get(point) == pytest.approx(2.0 * second - 1.0)

    @pytest.mark.unit
    def test_combined_returns(self, points_2d):
        base = Worley(seed=9, frequency=1.5)
        for point in points_2d[:10]:
            f1, f2 = brute_force_distances(base, point)[:2]
            expected = {
                "distance2_add": f1 + f2,
                "distance2_sub": f2 - f1,
                "distance2_mul": f1 * f2,
                "distance2_div": f1 / f2,
            }
            for return_type, value in expected.items():
                noise = base.with_return_type(return_type)
                assert noise.get(point) == pytest.approx(2.0 * value - 1.0)


class TestWorleyConfiguration:
    """Configuration and ranges."""

    @pytest.mark.unit
    def test_feature_point_inside_cell(self):
        noise = Worley(seed=4)
        for cell in [(0, 0), (-3, 7), (2, -1, 5), (1, 2, 3, 4)]:
            feature = noise.feature_point(cell)
            assert all(c < f < c + 1 for c, f in zip(cell, feature))

    @pytest.mark.unit
    def test_value_return_in_range(self, all_points):
        noise = Worley(seed=4)
        assert all(-1.0 <= noise.get(p) <= 1.0 for p in all_points)

    @pytest.mark.unit
    def test_value_is_constant_inside_a_region(self):
        noise = Worley(seed=4)
        cell = (5, 5)
        feature = noise.feature_point(cell)
        near = tuple(f + 1e-6 for f in feature)
        assert noise.get(feature) == noise.get(near)

    @pytest.mark.unit
    def test_frequency_scales_the_point(self):
        noise = Worley(seed=2, return_type="distance")
        assert noise.with_frequency(2.0).get((0.25, 0.75)) == noise.get((0.5, 1.5))

    @pytest.mark.unit
    def test_setters_do_not_mutate(self):
        noise = Worley()
        other = noise.with_return_type("distance").with_distance_function("manhattan").with_frequency(3.0)
        assert (noise.return_type, noise.distance_function, noise.frequency) == ("value", "euclidean", 1.0)
        assert (other.return_type, other.distance_function, other.frequency) == ("distance", "manhattan", 3.0)

    @pytest.mark.unit
    def test_unknown_options_raise(self):
        with pytest.raises(ValueError):
            Worley(return_type="distance3")
        with pytest.raises(ValueError):
            Worley().with_distance_function("minkowski")
        assert "value" in RETURN_TYPES


class TestWorleyShells:
    """Cell shell tables are built at import and only read afterwards."""

    @pytest.mark.unit
    def test_evaluation_leaves_tables_untouched(self, all_points):
        before = dict(worley_noise._SHELLS)
        noise = Worley(seed=9, return_type="distance2")
        for point in all_points:
            noise.get(point)
        noise.get((1e6, -1e6, 0.5, 0.25))
        assert worley_noise._SHELLS == before

    @pytest.mark.unit
    @pytest.mark.parametrize("dim", [2, 3, 4])
    def test_shell_sizes(self, dim):
        assert worley_noise._shell(dim, 0) == ((0,) * dim,)
        for radius in range(1, 6):
            expected = (2 * radius + 1) ** dim - (2 * radius - 1) ** dim
            assert len(worley_noise._shell(dim, radius)) == expected
