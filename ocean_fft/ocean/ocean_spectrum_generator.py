# -*- coding: utf-8 -*-

"""
Filename: ocean_spectrum_generator.py
Author: storro
Date: 2026-02-11
Description: Generates the initial ocean spectrum h0(k) and its paired term from the Phillips spectrum
"""

import logging
import math

from dataclasses import dataclass

import numpy as np

from ocean_fft.ocean.gaussian_source import GaussianSource, draw_gaussians
from ocean_fft.ocean.ocean_config import OceanParameters, OceanSimConfig

_INV_SQRT2 = 1.0 / math.sqrt(2.0)


def wave_vectors(resolution: int, patch_size: float) -> tuple[np.ndarray, np.ndarray]:
    """
    k = 2*pi * (n - N/2) / L per axis, returned as (kx, kz) grids indexed [z, x].
    """
    n = np.arange(resolution, dtype=np.float64)
    k_axis = 2.0 * math.pi * (n - resolution / 2.0) / float(patch_size)
    kz, kx = np.meshgrid(k_axis, k_axis, indexing="ij")
    return kx, kz


def phillips_spectrum(
    kx,
    kz,
    wind_speed: float,
    wind_direction: tuple[float, float],
    amplitude: float,
    gravity: float = 9.81,
    k_epsilon: float = 1e-4,
):
    """
    P(k) = A * exp(-1/(|k| Lw)^2) / |k|^4 * (k_hat . w_hat)^2 * exp(-|k|^2 l^2)

    Lw = V^2 / g is the largest wave the wind can raise, l = Lw / 1000 damps the
    smallest ones. Accepts scalars or arrays; P is exactly 0 where |k| < k_epsilon.
    """
    kx = np.asarray(kx, dtype=np.float64)
    kz = np.asarray(kz, dtype=np.float64)

    k_len = np.hypot(kx, kz)
    valid = k_len >= k_epsilon
    k_safe = np.where(valid, k_len, 1.0)

    big_l = (wind_speed * wind_speed) / gravity
    small_l = big_l / 1000.0

    k_dot_w = (kx * wind_direction[0] + kz * wind_direction[1]) / k_safe
    k_len2 = k_safe * k_safe

    with np.errstate(divide="ignore", over="ignore", under="ignore"):
        ph = (
            amplitude
            * np.exp(-1.0 / (k_len2 * big_l * big_l))
            / (k_len2 * k_len2)
            * (k_dot_w * k_dot_w)
            * np.exp(-k_len2 * small_l * small_l)
        )

    ph = np.where(valid, ph, 0.0)
    if ph.ndim == 0:
        return float(ph)
    return ph


@dataclass
class OceanSpectrum:
    h0: np.ndarray
    h0_conj: np.ndarray

    @property
    def resolution(self) -> int:
        return int(self.h0.shape[0])


class OceanSpectrumGenerator:
    """
    Generates the initial ocean spectrum from wind and amplitude parameters.

    generation_count counts every spectrum drawn, the one built at construction
    included. OceanParameterController.regeneration_count only counts redraws
    caused by parameter or patch size changes after that.
    """

    def __init__(self, config: OceanSimConfig, gaussian_source: GaussianSource) -> None:
        self.config = config
        self._gaussian_source = gaussian_source
        self.patch_size = float(config.patch_size)
        self.generation_count = 0

    def generate(self, params: OceanParameters) -> OceanSpectrum:
        n = int(self.config.resolution)
        logging.info(
            "Generating h0 spectrum (N=%d, L=%.1fm, wind: %.2fm/s, amplitude: %g)",
            n, self.patch_size, params.wind_speed, params.amplitude
        )

        kx, kz = wave_vectors(n, self.patch_size)
        spectrum_args = dict(
            wind_speed=float(params.wind_speed),
            wind_direction=params.wind_direction,
            amplitude=float(params.amplitude),
            gravity=self.config.gravity,
            k_epsilon=self.config.k_epsilon,
        )
        sqrt_ph = np.sqrt(phillips_spectrum(kx, kz, **spectrum_args))
        sqrt_ph_neg = np.sqrt(phillips_spectrum(-kx, -kz, **spectrum_args))

        # Per cell, in row-major order: xi_r, xi_i for h0(k), then an independent
        # xi_r', xi_i' for the paired term at -k
        xi = draw_gaussians(self._gaussian_source, 4 * n * n)
        xi = xi.reshape(n, n, 4)

        h0 = (xi[..., 0] + 1j * xi[..., 1]) * sqrt_ph * _INV_SQRT2
        h0_conj = np.conj((xi[..., 2] + 1j * xi[..., 3]) * sqrt_ph_neg * _INV_SQRT2)

        self.generation_count += 1
        return OceanSpectrum(h0=h0, h0_conj=h0_conj)
