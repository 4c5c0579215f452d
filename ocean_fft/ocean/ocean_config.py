# -*- coding: utf-8 -*-

"""
Filename: ocean_config.py
Author: storro
Date: 2026-02-11
Description: Immutable simulation configuration and the live, caller-tunable ocean parameters
"""

import math

from dataclasses import dataclass, replace


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def normalize_direction(x: float, z: float) -> tuple[float, float]:
    length = math.hypot(x, z)
    if length == 0.0 or not math.isfinite(length):
        raise ValueError("wind direction must be a finite, non-zero vector")
    return (x / length, z / length)


@dataclass(frozen=True)
class OceanSimConfig:
    # Simulation grid resolution (N). Size of every frequency/spatial grid and of
    # the published maps: resolution x resolution. Must be a power of 2 for the FFT
    resolution: int = 256

    # World-space size of the simulated patch in meters ("L" in Tessendorf's paper)
    patch_size: float = 1000.0

    gravity: float = 9.81

    # Wave vectors shorter than this contribute nothing (removes the DC singularity)
    k_epsilon: float = 1e-4

    # Change thresholds that gate spectrum regeneration
    wind_speed_epsilon: float = 0.01
    wind_direction_epsilon: float = 0.01
    amplitude_epsilon: float = 1e-5

    # Raw normals shorter than this are clamped to straight up
    normal_epsilon: float = 1e-6

    # Run the full pipeline every Nth update, re-publish the last grids otherwise
    update_interval: int = 1

    # None = fresh entropy on every run
    seed: int | None = None

    def __post_init__(self) -> None:
        if not is_power_of_two(int(self.resolution)):
            raise ValueError("resolution must be a power of two")
        if not self.patch_size > 0.0:
            raise ValueError("patch_size must be > 0")
        if int(self.update_interval) < 1:
            raise ValueError("update_interval must be >= 1")


@dataclass
class OceanParameters:
    """Externally supplied ocean parameters, mutable at any time."""

    wind_speed: float = 30.0
    wind_direction: tuple[float, float] = (1.0, 0.0)
    amplitude: float = 0.0002

    # Higher = sharper peaks, but more distortion. Not clamped
    choppiness: float = 2.0

    def __post_init__(self) -> None:
        self.wind_direction = normalize_direction(*self.wind_direction)


# Named sea states: wind speed, amplitude and choppiness applied together
OCEAN_PRESETS: dict[str, dict[str, float]] = {
    "calm": {"wind_speed": 15.0, "amplitude": 0.0001, "choppiness": 1.5},
    "stormy": {"wind_speed": 40.0, "amplitude": 0.0005, "choppiness": 3.5},
}


def preset_parameters(name: str, base: OceanParameters) -> OceanParameters:
    """Return `base` with the preset's values swapped in. Wind direction is kept."""
    if name not in OCEAN_PRESETS:
        raise ValueError(f"unknown ocean preset: {name}")
    return replace(base, **OCEAN_PRESETS[name])
