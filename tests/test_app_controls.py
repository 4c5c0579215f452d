"""
Host app control tests.

Scaled/pausable simulation clock, sea-state presets and hotkey names.
"""

import numpy as np
import pytest

from ocean_fft.app.sim_clock import MAX_TIME_SCALE, SimulationClock
from ocean_fft.ocean.gaussian_source import NumpyGaussianSource
from ocean_fft.ocean.ocean_config import (
    OCEAN_PRESETS,
    OceanParameters,
    OceanSimConfig,
    preset_parameters,
)
from ocean_fft.ocean.ocean_simulation import OceanSimulation


def test_clock_scales_frame_time():
    clock = SimulationClock(time_scale=2.0)
    clock.advance(0.5)
    clock.advance(0.25)
    assert clock.time == pytest.approx(1.5)


def test_clock_time_scale_is_clamped():
    """Valid range is [0, 3]."""
    clock = SimulationClock(time_scale=10.0)
    assert clock.time_scale == MAX_TIME_SCALE == 3.0

    clock.set_time_scale(-1.0)
    assert clock.time_scale == 0.0
    assert clock.advance(1.0) == 0.0


def test_paused_clock_does_not_advance():
    clock = SimulationClock()
    clock.advance(1.0)
    clock.toggle_pause()
    assert clock.advance(5.0) == pytest.approx(1.0)

    clock.toggle_pause()
    assert clock.advance(1.0) == pytest.approx(2.0)


def test_preset_values():
    calm = preset_parameters("calm", OceanParameters())
    stormy = preset_parameters("stormy", OceanParameters())

    assert (calm.wind_speed, calm.amplitude, calm.choppiness) == (15.0, 0.0001, 1.5)
    assert (stormy.wind_speed, stormy.amplitude, stormy.choppiness) == (40.0, 0.0005, 3.5)


def test_preset_keeps_wind_direction():
    base = OceanParameters(wind_direction=(0.0, 2.0))
    assert preset_parameters("stormy", base).wind_direction == pytest.approx((0.0, 1.0))


def test_unknown_preset_is_rejected():
    with pytest.raises(ValueError):
        preset_parameters("hurricane", OceanParameters())


@pytest.mark.parametrize("name", sorted(OCEAN_PRESETS))
def test_preset_applies_in_one_regeneration(name):
    """Wind speed, amplitude and choppiness land together in a single regeneration."""
    sim = OceanSimulation(
        OceanSimConfig(resolution=8, patch_size=10.0), OceanParameters(), NumpyGaussianSource(3)
    )
    before = sim.controller.spectrum.h0.copy()

    assert sim.set_parameters(preset_parameters(name, sim.parameters)) is True
    assert sim.regeneration_count == 1

    preset = OCEAN_PRESETS[name]
    assert sim.wind_speed == preset["wind_speed"]
    assert sim.amplitude == preset["amplitude"]
    assert sim.choppiness == preset["choppiness"]
    assert not np.array_equal(before, sim.controller.spectrum.h0)


def test_amplitude_up_bound_to_main_keyboard_plus():
    """Panda3D names the main-keyboard plus key "=", so it must be bound with "+"."""
    pytest.importorskip("direct.showbase.ShowBase")
    from ocean_fft.app import ocean_app

    assert "=" in ocean_app.AMPLITUDE_UP_KEYS
    assert "shift-=" in ocean_app.AMPLITUDE_UP_KEYS
    assert "+" in ocean_app.AMPLITUDE_UP_KEYS
    assert set(ocean_app.PRESET_KEYS.values()) == set(OCEAN_PRESETS)
