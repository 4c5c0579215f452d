from ocean_fft.ocean.gaussian_source import GaussianSource, NumpyGaussianSource
from ocean_fft.ocean.ocean_config import OceanParameters, OceanSimConfig
from ocean_fft.ocean.ocean_displacement import OceanDisplacement, OceanOutputGrids
from ocean_fft.ocean.ocean_ifft2d import NumpyIFFTBackend, OceanIFFT2D
from ocean_fft.ocean.ocean_parameters import ControllerState, OceanParameterController
from ocean_fft.ocean.ocean_simulation import OceanSimulation
from ocean_fft.ocean.ocean_spectrum_generator import OceanSpectrumGenerator, phillips_spectrum
from ocean_fft.ocean.ocean_time_spectrum import OceanTimeSpectrum

"""Ocean package public API. OceanTexture lives in ocean_textures (needs Panda3D)."""

__all__ = [
    "ControllerState",
    "GaussianSource",
    "NumpyGaussianSource",
    "NumpyIFFTBackend",
    "OceanDisplacement",
    "OceanIFFT2D",
    "OceanOutputGrids",
    "OceanParameterController",
    "OceanParameters",
    "OceanSimConfig",
    "OceanSimulation",
    "OceanSpectrumGenerator",
    "OceanTimeSpectrum",
    "phillips_spectrum",
]
