"""
Pytest configuration.

Shared fixtures: small simulation configs, a deterministic Gaussian source and an
upload target that records what the pipeline publishes.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Project root on sys.path so `ocean_fft` imports without an install
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from ocean_fft.ocean.ocean_config import OceanParameters, OceanSimConfig  # noqa: E402


class CyclingGaussianSource:
    """Deterministic stand-in for a normal stream: repeats a fixed sequence."""

    def __init__(self, values=(0.5, -1.25, 0.75, 1.5, -0.3, 0.9, -2.0)) -> None:
        self._values = np.asarray(values, dtype=np.float64)
        self._pos = 0
        self.drawn = 0

    def next_gaussian(self) -> float:
        value = float(self._values[self._pos % len(self._values)])
        self._pos += 1
        self.drawn += 1
        return value

    def next_gaussians(self, count: int) -> np.ndarray:
        return np.array([self.next_gaussian() for _ in range(count)])


class RecordingTarget:
    """Upload target that keeps a copy of every grid it receives."""

    def __init__(self) -> None:
        self.uploads = []

    def upload(self, grid, width, height) -> None:
        self.uploads.append((np.array(grid, copy=True), width, height))

    @property
    def last(self) -> np.ndarray:
        return self.uploads[-1][0]


@pytest.fixture
def small_config():
    return OceanSimConfig(resolution=8, patch_size=10.0, seed=1234)


@pytest.fixture
def scenario_params():
    return OceanParameters(
        wind_speed=30.0, wind_direction=(1.0, 0.0), amplitude=2e-4, choppiness=2.0
    )


@pytest.fixture
def cycling_source():
    return CyclingGaussianSource()


@pytest.fixture
def recording_targets():
    return RecordingTarget(), RecordingTarget()


class DirectDFTBackend:
    """Reference inverse transform: the O(N^4) sum, for tiny grids only."""

    def __init__(self, resolution: int) -> None:
        self.resolution = int(resolution)
        self.closed = False

    def inverse_transform(self, grid):
        n = self.resolution
        freqs = np.arange(n) - n // 2
        out = np.zeros((n, n))
        for zs in range(n):
            for xs in range(n):
                total = 0j
                for zi, fz in enumerate(freqs):
                    for xi, fx in enumerate(freqs):
                        phase = 2.0 * np.pi * (fx * xs + fz * zs) / n
                        total += grid[zi, xi] * np.exp(1j * phase)
                out[zs, xs] = total.real
        return out

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def direct_dft():
    return DirectDFTBackend
