# -*- coding: utf-8 -*-

"""
Filename: ocean_parameters.py
Author: storro
Date: 2026-02-12
Description: Holds the live ocean parameters and gates spectrum regeneration behind change epsilons
"""

import logging
import math

from dataclasses import replace
from enum import Enum

from ocean_fft.ocean.ocean_config import OceanParameters, OceanSimConfig, normalize_direction
from ocean_fft.ocean.ocean_spectrum_generator import OceanSpectrum, OceanSpectrumGenerator


class ControllerState(Enum):
    STABLE = "stable"
    DIRTY = "dirty"


class OceanParameterController:
    """
    Keeps the parameters the current spectrum was generated from (the live state)
    and regenerates synchronously when an update moves wind speed, wind direction or
    amplitude past its epsilon. Choppiness is taken as-is and never regenerates.

    regeneration_count excludes the initial spectrum drawn in __init__, so it reads
    zero until the caller changes something; the generator's generation_count
    is the total including that first draw.
    """

    def __init__(
        self,
        config: OceanSimConfig,
        generator: OceanSpectrumGenerator,
        params: OceanParameters | None = None,
    ) -> None:
        self.config = config
        self._generator = generator
        self.state = ControllerState.STABLE
        self.regeneration_count = 0

        self._live = replace(params) if params is not None else OceanParameters()
        self.spectrum: OceanSpectrum = self._generator.generate(self._live)

    @property
    def parameters(self) -> OceanParameters:
        return replace(self._live)

    @property
    def choppiness(self) -> float:
        return self._live.choppiness

    def needs_regeneration(self, params: OceanParameters) -> bool:
        live = self._live
        if abs(live.wind_speed - params.wind_speed) > self.config.wind_speed_epsilon:
            return True
        dx = live.wind_direction[0] - params.wind_direction[0]
        dz = live.wind_direction[1] - params.wind_direction[1]
        if math.hypot(dx, dz) > self.config.wind_direction_epsilon:
            return True
        return abs(live.amplitude - params.amplitude) > self.config.amplitude_epsilon

    def apply(self, params: OceanParameters) -> bool:
        """Returns True when the update regenerated the spectrum."""
        direction = normalize_direction(*params.wind_direction)
        params = replace(params, wind_direction=direction)

        self._live.choppiness = float(params.choppiness)

        if not self.needs_regeneration(params):
            return False

        self.state = ControllerState.DIRTY
        self._live = replace(params)
        self.regenerate()
        return True

    def regenerate(self) -> None:
        self.state = ControllerState.DIRTY
        self.spectrum = self._generator.generate(self._live)
        self.regeneration_count += 1
        self.state = ControllerState.STABLE

    def set_wind_speed(self, speed: float) -> bool:
        return self.apply(replace(self._live, wind_speed=float(speed)))

    def set_wind_direction(self, x: float, z: float) -> bool:
        return self.apply(replace(self._live, wind_direction=(float(x), float(z))))

    def set_amplitude(self, amplitude: float) -> bool:
        return self.apply(replace(self._live, amplitude=float(amplitude)))

    def set_choppiness(self, choppiness: float) -> None:
        self._live.choppiness = float(choppiness)
        logging.debug("Choppiness set to %.3f", self._live.choppiness)
