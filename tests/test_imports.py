"""
Import tests for all PyNoiseGraph modules and submodules.

These tests ensure that all modules can be imported without errors,
which is crucial for detecting import-related issues early.

Tests are marked with @pytest.mark.importtest for selective running.
"""
import importlib

import pytest

SUBMODULES = [
    "pynoisegraph.constants",
    "pynoisegraph.general_algorithms",
    "pynoisegraph.general_algorithms.gradients",
    "pynoisegraph.general_algorithms.math_utils",
    "pynoisegraph.general_algorithms.permutation",
    "pynoisegraph.general_algorithms.point",
    "pynoisegraph.general_algorithms.seeding",
    "pynoisegraph.general_algorithms.simplex_lattice",
    "pynoisegraph.base",
    "pynoisegraph.noise",
    "pynoisegraph.combiners",
    "pynoisegraph.modifiers",
    "pynoisegraph.selectors",
    "pynoisegraph.transformers",
    "pynoisegraph.transformers.turbulence",
    "pynoisegraph.fractals",
    "pynoisegraph.fractals.presets",
]


class TestMainPackageImports:
    """Test imports for the main pynoisegraph package."""

    @pytest.mark.importtest
    def test_main_package_import(self):
        """Test that the main pynoisegraph package can be imported."""
        import pynoisegraph
        assert hasattr(pynoisegraph, '__version__')
        assert hasattr(pynoisegraph, '__all__')

    @pytest.mark.importtest
    def test_public_names_resolve(self):
        """Every name listed in __all__ exists on the package."""
        import pynoisegraph
        for name in pynoisegraph.__all__:
            assert hasattr(pynoisegraph, name), name

    @pytest.mark.importtest
    @pytest.mark.parametrize("module", SUBMODULES)
    def test_submodule_import(self, module):
        """Test that each submodule can be imported."""
        assert importlib.import_module(module) is not None

    @pytest.mark.importtest
    def test_fractals_import_first(self):
        """Importing the fractal presets directly resolves the transformer cycle."""
        from pynoisegraph.fractals.presets import fractal_perlin
        from pynoisegraph.transformers.turbulence import Turbulence
        assert callable(fractal_perlin)
        assert Turbulence is not None

    @pytest.mark.importtest
    def test_null_handler_installed(self):
        """The package logger never prints by default."""
        import logging
        import pynoisegraph  # noqa: F401
        handlers = logging.getLogger("pynoisegraph").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)
