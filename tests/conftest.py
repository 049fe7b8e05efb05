"""
Pytest configuration and fixtures for PySineNoise test suite.

Shared fixtures, marker registration and small helpers used across the
test suite.
"""
import os
import sys

import numpy as np
import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker in ("unit", "integration", "slow", "importtest"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        # Taichi kernels compile on first use
        if "taichi" in item.name.lower():
            item.add_marker("slow")

        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture
def rng():
    """Provide a numpy Generator seeded with 1234."""
    return np.random.default_rng(1234)


@pytest.fixture
def small_terrain():
    """Provide a small, cheap fractal terrain field."""
    from pysinenoise.field import fractal_field, scale
    return scale(fractal_field(12, 0.8, seed=42), 0.25)


@pytest.fixture
def skip_if_no_taichi():
    """Skip test if Taichi is not available or fails to initialize."""
    try:
        import taichi as ti
        ti.init(arch=ti.cpu, offline_cache=False)
        return True
    except Exception:
        pytest.skip("Taichi not available or initialization failed")


class GridFactory:
    """Helper class for building test grids."""

    @staticmethod
    def ramp(width=16, height=8):
        """Horizontal ramp from 0 to 1 inclusive."""
        return np.tile(np.linspace(0.0, 1.0, width), (height, 1))

    @staticmethod
    def band_samples():
        """One value inside every terrain band, plus every boundary."""
        return np.array([[0.0, 0.25, 0.5, 0.52, 0.55, 0.58, 0.6, 0.7],
                         [0.8, 0.82, 0.85, 0.88, 0.9, 0.95, 0.999, 1.0]])


@pytest.fixture
def grid_factory():
    """Provide access to test grid creation utilities."""
    return GridFactory()
