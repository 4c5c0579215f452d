# -*- coding: utf-8 -*-

"""
Filename: ocean_time_spectrum.py
Author: storro
Date: 2026-02-11
Description: Advances the initial spectrum in time and builds the choppy and normal spectra.
"""

from dataclasses import dataclass

import numpy as np

from ocean_fft.ocean.ocean_config import OceanSimConfig
from ocean_fft.ocean.ocean_spectrum_generator import OceanSpectrum, wave_vectors


def dispersion(k_len, gravity: float = 9.81):
    """Deep water only: w(k) = sqrt(g |k|), no shallow-water correction."""
    return np.sqrt(gravity * np.asarray(k_len, dtype=np.float64))


@dataclass
class EvolvedSpectrum:
    height: np.ndarray
    choppy_x: np.ndarray
    choppy_z: np.ndarray
    normal_x: np.ndarray
    normal_z: np.ndarray


class OceanTimeSpectrum:
    """Advances phases and builds a time-varying frequency spectrum."""

    def __init__(self, config: OceanSimConfig) -> None:
        self.config = config
        self.set_patch_size(config.patch_size)

    def set_patch_size(self, patch_size: float) -> None:
        self.patch_size = float(patch_size)
        self._kx, self._kz = wave_vectors(self.config.resolution, self.patch_size)
        self._k_len = np.hypot(self._kx, self._kz)
        self._omega = dispersion(self._k_len, self.config.gravity)

        # kx/|k| and kz/|k|, zero where |k| is too short to have a direction
        valid = self._k_len > self.config.k_epsilon
        self._kx_unit = np.divide(
            self._kx, self._k_len, out=np.zeros_like(self._kx), where=valid
        )
        self._kz_unit = np.divide(
            self._kz, self._k_len, out=np.zeros_like(self._kz), where=valid
        )

    def evolve(self, spectrum: OceanSpectrum, time: float) -> EvolvedSpectrum:
        """h(k,t) = h0(k) e^(iwt) + conj(h0(-k)) e^(-iwt), recomputed on every call."""
        if spectrum.h0.shape != self._k_len.shape:
            raise ValueError("spectrum resolution does not match the simulation grid")

        exp_iwt = np.exp(1j * self._omega * float(time))
        h = spectrum.h0 * exp_iwt + spectrum.h0_conj * np.conj(exp_iwt)

        # Choppy displacement: D(k) = -i * k/|k| * h(k,t)
        minus_ih = -1j * h

        # Slopes: d/dx <-> i*kx, d/dz <-> i*kz
        ih = 1j * h

        return EvolvedSpectrum(
            height=h,
            choppy_x=minus_ih * self._kx_unit,
            choppy_z=minus_ih * self._kz_unit,
            normal_x=ih * self._kx,
            normal_z=ih * self._kz,
        )
