"""
Pytest configuration and fixtures for PyNoiseGraph test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import os
import sys
import pytest
import numpy as np


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker in ("unit", "integration", "importtest", "slow"):
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers and ordering."""
    for item in items:
        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


def _random_points(dimension, count, seed):
    rng = np.random.default_rng(seed)
    return [tuple(float(c) for c in p) for p in rng.uniform(-8.0, 8.0, size=(count, dimension))]


@pytest.fixture(scope="session")
def points_2d():
    """Reproducible non-lattice 2D sample points."""
    return _random_points(2, 40, 42)


@pytest.fixture(scope="session")
def points_3d():
    """Reproducible non-lattice 3D sample points."""
    return _random_points(3, 40, 43)


@pytest.fixture(scope="session")
def points_4d():
    """Reproducible non-lattice 4D sample points."""
    return _random_points(4, 20, 44)


@pytest.fixture(scope="session")
def all_points(points_2d, points_3d, points_4d):
    """Sample points of every supported arity."""
    return points_2d + points_3d + points_4d


@pytest.fixture(scope="session")
def lattice_points():
    """Integer points of every supported arity, negative coordinates included."""
    return [
        (0.0, 0.0), (3.0, -7.0), (-1.0, 12.0),
        (0.0, 0.0, 0.0), (5.0, -2.0, 9.0), (-300.0, 255.0, 256.0),
        (0.0, 0.0, 0.0, 0.0), (1.0, -1.0, 2.0, -2.0), (17.0, 4.0, -9.0, 100.0),
    ]


class TextureFactory:
    """Helper class building the classic texture graphs."""

    @staticmethod
    def granite():
        import pynoisegraph as png

        primary = png.fractals.billow(
            png.Perlin(), seed=0, layers=6, frequency=8.0, lacunarity=2.18359375, persistence=0.625
        )
        grains = png.Worley(seed=1).with_frequency(16.0).with_return_type("distance")
        scaled_grains = png.ScaleBias(grains, scale=-0.5, bias=0.0)
        combined = png.Add(primary, scaled_grains)
        return png.Turbulence(combined, seed=2, frequency=4.0, power=1.0 / 8.0, roughness=6)

    @staticmethod
    def wood():
        import pynoisegraph as png

        base = png.Cylinders().with_frequency(16.0)
        grain_noise = png.fractals.basic_multi(
            png.Perlin(), seed=0, layers=3, frequency=48.0, lacunarity=2.20703125, persistence=0.5
        )
        grain = png.ScaleBias(png.ScalePoint(grain_noise).with_z_scale(0.25), scale=0.25, bias=0.125)
        perturbed = png.Turbulence(png.Add(base, grain), seed=1, frequency=4.0, power=1.0 / 256.0, roughness=4)
        rotated = png.RotatePoint(png.TranslatePoint(perturbed).with_y_translation(1.48)).with_angles(84.0, 0.0, 0.0)
        return png.Turbulence(rotated, seed=2, frequency=2.0, power=1.0 / 64.0, roughness=4)

    @staticmethod
    def jade():
        import pynoisegraph as png

        primary = png.fractals.ridged_multi(png.Perlin(), seed=0, layers=6, frequency=2.0, lacunarity=2.20703125)
        rings = png.RotatePoint(png.Cylinders().with_frequency(2.0), 90.0, 25.0, 5.0)
        perturbed = png.Turbulence(rings, seed=1, frequency=4.0, power=1.0 / 4.0, roughness=4)
        secondary = png.ScaleBias(perturbed, scale=0.25, bias=0.0)
        return png.Turbulence(png.Add(primary, secondary), seed=2, frequency=4.0, power=1.0 / 16.0, roughness=2)


@pytest.fixture
def texture_factory():
    """Provide access to texture graph builders."""
    return TextureFactory()
