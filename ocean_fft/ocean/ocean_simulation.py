# -*- coding: utf-8 -*-

"""
Filename: ocean_simulation.py
Author: storro
Date: 2026-02-12
Description: Per-frame FFT ocean pipeline: parameters -> spectrum -> evolution -> IFFT -> output grids
"""

import logging

from ocean_fft.ocean.gaussian_source import GaussianSource, NumpyGaussianSource
from ocean_fft.ocean.ocean_config import OceanParameters, OceanSimConfig
from ocean_fft.ocean.ocean_displacement import GridUploadTarget, OceanDisplacement, OceanOutputGrids
from ocean_fft.ocean.ocean_ifft2d import InverseTransformBackend, OceanIFFT2D
from ocean_fft.ocean.ocean_parameters import OceanParameterController
from ocean_fft.ocean.ocean_spectrum_generator import OceanSpectrumGenerator
from ocean_fft.ocean.ocean_time_spectrum import OceanTimeSpectrum


class OceanSimulation:
    """
    Tessendorf FFT ocean:
    1. h0(k) from the Phillips spectrum (regenerated only on real parameter changes)
    2. h(k,t) = h0(k) e^(iwt) + conj(h0(-k)) e^(-iwt), plus choppy and slope spectra
    3. inverse FFT of the five spectra
    4. normalization, choppiness, packing into displacement/normal grids
    5. upload to the renderer

    Use as a context manager (or call close()) to release the transform backend.
    """

    def __init__(
        self,
        config: OceanSimConfig | None = None,
        params: OceanParameters | None = None,
        gaussian_source: GaussianSource | None = None,
        backend: InverseTransformBackend | None = None,
        displacement_target: GridUploadTarget | None = None,
        normal_target: GridUploadTarget | None = None,
    ) -> None:
        self.config = config if config is not None else OceanSimConfig()
        logging.info(
            "Initializing ocean simulation (N=%d, L=%.1fm)",
            self.config.resolution, self.config.patch_size
        )

        # Backend first: a resolution it cannot plan for is fatal
        self._ifft = OceanIFFT2D(self.config.resolution, backend)

        if gaussian_source is None:
            gaussian_source = NumpyGaussianSource(self.config.seed)
        self._spectrum_gen = OceanSpectrumGenerator(self.config, gaussian_source)
        self.controller = OceanParameterController(self.config, self._spectrum_gen, params)
        logging.info("Initial spectrum generated")

        self._time_spectrum = OceanTimeSpectrum(self.config)
        self._maps = OceanDisplacement(self.config, displacement_target, normal_target)

        self.output: OceanOutputGrids | None = None
        self.frame_count = 0
        self.computed_frames = 0
        self._closed = False

    def __enter__(self) -> "OceanSimulation":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._ifft.close()
        self.output = None
        logging.info("Ocean simulation released")

    @property
    def closed(self) -> bool:
        return self._closed

    ############################################################################################
    # Parameters

    @property
    def resolution(self) -> int:
        return int(self.config.resolution)

    @property
    def patch_size(self) -> float:
        return self._spectrum_gen.patch_size

    @property
    def parameters(self) -> OceanParameters:
        return self.controller.parameters

    @property
    def wind_speed(self) -> float:
        return self.controller.parameters.wind_speed

    @property
    def wind_direction(self) -> tuple[float, float]:
        return self.controller.parameters.wind_direction

    @property
    def amplitude(self) -> float:
        return self.controller.parameters.amplitude

    @property
    def choppiness(self) -> float:
        return self.controller.choppiness

    @property
    def regeneration_count(self) -> int:
        return self.controller.regeneration_count

    def set_parameters(self, params: OceanParameters) -> bool:
        return self.controller.apply(params)

    def set_wind_speed(self, speed: float) -> bool:
        return self.controller.set_wind_speed(speed)

    def set_wind_direction(self, x: float, z: float) -> bool:
        return self.controller.set_wind_direction(x, z)

    def set_amplitude(self, amplitude: float) -> bool:
        return self.controller.set_amplitude(amplitude)

    def set_choppiness(self, value: float) -> None:
        self.controller.set_choppiness(value)

    def set_patch_size(self, patch_size: float) -> bool:
        patch_size = float(patch_size)
        if not patch_size > 0.0:
            raise ValueError("patch_size must be > 0")
        if patch_size == self._spectrum_gen.patch_size:
            return False

        self._spectrum_gen.patch_size = patch_size
        self._time_spectrum.set_patch_size(patch_size)
        self.controller.regenerate()
        return True

    def get_ocean_parameters(self) -> dict:
        params = self.controller.parameters
        return {
            "resolution": self.resolution,
            "ocean_size": float(self.patch_size),
            "wind_speed": float(params.wind_speed),
            "wind_direction": tuple(params.wind_direction),
            "amplitude": float(params.amplitude),
            "choppiness": float(params.choppiness),
            "update_interval": int(self.config.update_interval),
        }

    ############################################################################################
    # Per-frame update

    def compute(self, time: float) -> OceanOutputGrids:
        """Run the whole pipeline for `time` without publishing."""
        if self._closed:
            raise RuntimeError("ocean simulation has been closed")

        evolved = self._time_spectrum.evolve(self.controller.spectrum, time)
        fields = self._ifft.transform(evolved)
        return self._maps.build(fields, self.controller.choppiness)

    def update(self, time: float) -> OceanOutputGrids:
        """Call once per frame. On return both grids have been handed to the renderer."""
        if self._closed:
            raise RuntimeError("ocean simulation has been closed")

        interval = int(self.config.update_interval)
        run_pipeline = self.output is None or self.frame_count % interval == 0
        self.frame_count += 1

        if run_pipeline:
            self.output = self.compute(time)
            self.computed_frames += 1
        else:
            logging.debug("Decimated frame %d, re-publishing previous grids", self.frame_count)

        self._maps.publish(self.output)
        return self.output
