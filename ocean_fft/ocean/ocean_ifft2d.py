# -*- coding: utf-8 -*-

"""
Filename: ocean_ifft2d.py
Author: storro
Date: 2026-02-11
Description: Converts the time spectrum to spatial domain using a 2D Inverse Fast Fourier Transform (IFFT)
"""

import logging

from dataclasses import dataclass

import numpy as np

from ocean_fft.ocean.ocean_config import is_power_of_two
from ocean_fft.ocean.ocean_time_spectrum import EvolvedSpectrum

from typing import Protocol


class InverseTransformBackend(Protocol):
    resolution: int

    def inverse_transform(self, grid: np.ndarray) -> np.ndarray:
        """
        N x N complex grid (DC at [N/2, N/2]) -> N x N real grid, unnormalized:
        the result is N^2 times a mathematically normalized inverse.
        """
        ...

    def close(self) -> None:
        ...


class NumpyIFFTBackend:
    def __init__(self, resolution: int) -> None:
        n = int(resolution)
        if n <= 0 or (n & (n - 1)) != 0:
            raise ValueError("resolution must be a power of two")
        self.resolution = n
        self._closed = False

    def inverse_transform(self, grid: np.ndarray) -> np.ndarray:
        if self._closed:
            raise RuntimeError("inverse transform backend has been closed")
        if grid.shape != (self.resolution, self.resolution):
            raise ValueError(
                f"expected a {self.resolution}x{self.resolution} grid, got {grid.shape}"
            )
        # Wave vectors are centred, the FFT expects DC at the origin.
        # norm="forward" leaves the inverse unscaled, like a raw c2r transform
        spatial = np.fft.ifft2(np.fft.ifftshift(grid), norm="forward")
        return np.real(spatial)

    def close(self) -> None:
        self._closed = True


@dataclass
class SpatialFields:
    height: np.ndarray
    choppy_x: np.ndarray
    choppy_z: np.ndarray
    normal_x: np.ndarray
    normal_z: np.ndarray


class OceanIFFT2D:
    def __init__(self, resolution: int, backend: InverseTransformBackend | None = None) -> None:
        if not is_power_of_two(int(resolution)):
            raise ValueError("resolution must be a power of two")

        if backend is None:
            backend = NumpyIFFTBackend(resolution)
        if int(backend.resolution) != int(resolution):
            raise ValueError("transform backend resolution does not match the simulation grid")

        self.resolution = int(resolution)
        self.backend = backend
        logging.info("Ocean IFFT initialized (%s, N=%d)", type(backend).__name__, self.resolution)

    def transform(self, spectrum: EvolvedSpectrum) -> SpatialFields:
        inverse = self.backend.inverse_transform
        return SpatialFields(
            height=inverse(spectrum.height),
            choppy_x=inverse(spectrum.choppy_x),
            choppy_z=inverse(spectrum.choppy_z),
            normal_x=inverse(spectrum.normal_x),
            normal_z=inverse(spectrum.normal_z),
        )

    def close(self) -> None:
        self.backend.close()
