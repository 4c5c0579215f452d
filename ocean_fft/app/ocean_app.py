# -*- coding: utf-8 -*-

"""
Filename: ocean_app.py
Author: storro
Date: 2026-02-11
Description: Main application class, owns the ocean textures and drives the FFT simulation every frame
"""

import logging
import math

from direct.showbase.ShowBase import ShowBase
from direct.task.Task import Task
from panda3d.core import ClockObject, load_prc_file_data

from ocean_fft.app.debug_cards import DebugCardController
from ocean_fft.app.sim_clock import SimulationClock
from ocean_fft.ocean.ocean_config import OceanParameters, OceanSimConfig, preset_parameters
from ocean_fft.ocean.ocean_simulation import OceanSimulation
from ocean_fft.ocean.ocean_textures import OceanTexture
from ocean_fft.util.logging_config import setup_logging


# Panda3D reports the main-keyboard plus key as "=" (or "shift-="), the keypad one as "+"
AMPLITUDE_UP_KEYS = ("=", "shift-=", "+")
AMPLITUDE_DOWN_KEYS = ("-",)

PRESET_KEYS = {"1": "calm", "2": "stormy"}


class OceanApp(ShowBase):
    def __init__(self) -> None:
        self.configure_panda()
        super().__init__()

        setup_logging()

        ############################################################################################
        # Simulation parameters

        # Simulation grid resolution. It's the size of the frequency domain grids and
        # the produced displacement/normal maps: resolution x resolution
        # Higher resolution = finer waves, but roughly O(n2 log n) CPU per frame.
        # Must be a power of 2 for the FFT
        self._resolution = 128

        # World-space size of the ocean patch in meters. This is the "L" parameter in
        # Tessendorf's paper. Larger = broader waves, less detail per meter
        self._ocean_size = 1000.0

        # Wind drives the Phillips spectrum; any change past the epsilons regenerates h0
        self._wind_speed = 30.0
        self._wind_angle = 0.0  # degrees, 0 = +X
        self._amplitude = 0.0002

        # Higher = sharper peaks, but more distortion. Applied after the IFFT, free to tweak
        self._choppiness = 2.0

        # 2 = run the FFT pipeline every other frame and re-publish in between
        self._update_interval = 2

        # Multiplier on frame time fed to the ocean. 0 = frozen, clamped to [0, 3]
        self._time_scale = 1.0

        # None = different sea on every run
        self._seed = None
        ############################################################################################

        self.set_frame_rate_meter(True)
        self.disable_mouse()

        # Renderer-owned maps, the simulation only uploads into them
        self.displacement_tex = OceanTexture("ocean_displacement", self._resolution)
        self.normal_tex = OceanTexture("ocean_normal", self._resolution)

        self.ocean = OceanSimulation(
            OceanSimConfig(
                resolution=self._resolution,
                patch_size=self._ocean_size,
                update_interval=self._update_interval,
                seed=self._seed,
            ),
            OceanParameters(
                wind_speed=self._wind_speed,
                wind_direction=self._wind_vector(),
                amplitude=self._amplitude,
                choppiness=self._choppiness,
            ),
            displacement_target=self.displacement_tex,
            normal_target=self.normal_tex,
        )
        logging.info("Ocean simulation initialized")

        self._clock = SimulationClock(time_scale=self._time_scale)
        self.task_mgr.add(self._ocean_step_task, "ocean_step")

        self._debug_cards = DebugCardController(
            self,
            self.displacement_tex.texture,
            self.normal_tex.texture,
        )

        self.accept("arrow_up-repeat", self._nudge_wind_speed, [1.0])
        self.accept("arrow_down-repeat", self._nudge_wind_speed, [-1.0])
        self.accept("arrow_up", self._nudge_wind_speed, [1.0])
        self.accept("arrow_down", self._nudge_wind_speed, [-1.0])
        self.accept("arrow_left", self._nudge_wind_angle, [-5.0])
        self.accept("arrow_right", self._nudge_wind_angle, [5.0])
        for key in AMPLITUDE_UP_KEYS:
            self.accept(key, self._scale_amplitude, [1.25])
        for key in AMPLITUDE_DOWN_KEYS:
            self.accept(key, self._scale_amplitude, [0.8])
        self.accept("]", self._nudge_choppiness, [0.25])
        self.accept("[", self._nudge_choppiness, [-0.25])
        self.accept("space", self._toggle_pause)
        self.accept(".", self._nudge_time_scale, [0.25])
        self.accept(",", self._nudge_time_scale, [-0.25])
        for key, preset in PRESET_KEYS.items():
            self.accept(key, self.apply_preset, [preset])

        self.exitFunc = self._release_ocean

    def _ocean_step_task(self, task: Task) -> int:
        dt = ClockObject.get_global_clock().get_dt()
        self.ocean.update(self._clock.advance(dt))
        return task.cont

    def _release_ocean(self) -> None:
        self.ocean.close()
        self.displacement_tex.release()
        self.normal_tex.release()

    def configure_panda(self) -> None:
        prc_data = f"""
            window-title Tessendorf Ocean (FFT)
            win-size 1280 720
            fullscreen false
            sync-video true
        """
        load_prc_file_data("", prc_data)

    def _wind_vector(self) -> tuple[float, float]:
        angle = math.radians(self._wind_angle)
        return (math.cos(angle), math.sin(angle))

    def set_wind_speed(self, value: float) -> None:
        self._wind_speed = max(0.1, float(value))
        self.ocean.set_wind_speed(self._wind_speed)

    def set_wind_angle(self, degrees: float) -> None:
        self._wind_angle = float(degrees) % 360.0
        self.ocean.set_wind_direction(*self._wind_vector())

    def set_amplitude(self, value: float) -> None:
        self._amplitude = float(value)
        self.ocean.set_amplitude(self._amplitude)

    def set_choppiness(self, value: float) -> None:
        self._choppiness = max(0.0, float(value))
        self.ocean.set_choppiness(self._choppiness)

    def _nudge_wind_speed(self, delta: float) -> None:
        self.set_wind_speed(self._wind_speed + delta)
        logging.info("Wind speed: %.1f m/s", self._wind_speed)

    def _nudge_wind_angle(self, delta: float) -> None:
        self.set_wind_angle(self._wind_angle + delta)
        logging.info("Wind angle: %.0f deg", self._wind_angle)

    def _scale_amplitude(self, factor: float) -> None:
        self.set_amplitude(self._amplitude * factor)
        logging.info("Amplitude: %g", self._amplitude)

    def _nudge_choppiness(self, delta: float) -> None:
        self.set_choppiness(self._choppiness + delta)
        logging.info("Choppiness: %.2f", self._choppiness)

    def set_time_scale(self, value: float) -> None:
        self._clock.set_time_scale(value)
        self._time_scale = self._clock.time_scale

    def _nudge_time_scale(self, delta: float) -> None:
        self.set_time_scale(self._time_scale + delta)
        logging.info("Time scale: %.2f", self._time_scale)

    def _toggle_pause(self) -> None:
        self._clock.toggle_pause()
        logging.info("Simulation %s", "paused" if self._clock.paused else "resumed")

    def apply_preset(self, name: str) -> None:
        # One set_parameters call, so wind, amplitude and choppiness land in a single regeneration
        params = preset_parameters(name, self.ocean.parameters)
        self.ocean.set_parameters(params)
        self._wind_speed = params.wind_speed
        self._amplitude = params.amplitude
        self._choppiness = params.choppiness
        logging.info(
            "Preset '%s': wind %.1f m/s, amplitude %g, choppiness %.2f",
            name, self._wind_speed, self._amplitude, self._choppiness
        )
