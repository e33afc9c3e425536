"""
Pytest configuration and fixtures for PyFlowTex test suite.

This file contains shared fixtures, test configuration, and the small noise
primitives used to check the synthesizer independently of Perlin noise.
"""
import os
import sys

import numpy as np
import pytest
import taichi as ti


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    # Previews must never open a window during tests
    os.environ.setdefault("MPLBACKEND", "Agg")

    for marker in ("importtest", "unit", "integration", "slow"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Mark import tests for easy selection."""
    for item in items:
        if "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture(scope="session", autouse=True)
def taichi_cpu():
    """Initialize Taichi once on CPU for the whole session."""
    ti.init(arch=ti.cpu, offline_cache=False)
    return True


@ti.data_oriented
class ConstantNoise:
    """Noise primitive returning the same value everywhere."""

    def __init__(self, value):
        self.value = value

    @ti.func
    def sample(self, x: ti.f32, y: ti.f32) -> ti.f32:
        return self.value


@ti.data_oriented
class AxisRampNoise:
    """Noise primitive returning its x (axis=0) or y (axis=1) coordinate clamped to [0, 1]."""

    def __init__(self, axis=0):
        self.axis = axis

    @ti.func
    def sample(self, x: ti.f32, y: ti.f32) -> ti.f32:
        v = x
        if ti.static(self.axis == 1):
            v = y
        return ti.min(ti.max(v, 0.0), 1.0)


@pytest.fixture
def constant_noise():
    """Factory for constant noise primitives."""
    return ConstantNoise


@pytest.fixture
def ramp_noise():
    """Factory for axis ramp noise primitives."""
    return AxisRampNoise


@pytest.fixture
def small_params():
    """Small, fast parameter set."""
    from pyflowtex import GenerationParameters

    return GenerationParameters(width=24, height=16, octaves=3, scale_x=4.0, scale_y=2.0,
                                blur_angle_degrees=30.0, blur_strength=2, seed=3)


@pytest.fixture(scope="session")
def random_rgba():
    """Random RGBA buffer of shape (7, 5, 4) in [0, 1]."""
    rng = np.random.default_rng(42)
    return rng.random((7, 5, 4)).astype(np.float32)
