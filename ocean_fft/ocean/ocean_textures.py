# -*- coding: utf-8 -*-

"""
Filename: ocean_textures.py
Author: storro
Date: 2026-02-12
Description: Float RGB textures that receive the displacement and normal grids
"""

import logging

import numpy as np

from panda3d.core import SamplerState, Texture


class OceanTexture:
    """
    N x N RGB32F texture owned by the renderer side. The simulation only writes to
    it through upload(); filtering and wrapping are set here once.
    """

    def __init__(self, name: str, resolution: int) -> None:
        self.resolution = int(resolution)
        self.texture = self._make_rgb32_texture(name)
        self.upload_count = 0

    def _make_rgb32_texture(self, name: str) -> Texture:
        tex = Texture(name)
        tex.setup_2d_texture(self.resolution,
                             self.resolution,
                             Texture.T_float,
                             Texture.F_rgb32)
        tex.set_clear_color((0.0, 0.0, 0.0, 0.0))
        # Bilinear filtering, without this the maps default to nearest-neighbor
        # and look blocky up close
        tex.set_minfilter(SamplerState.FT_linear)
        tex.set_magfilter(SamplerState.FT_linear)
        # The patch tiles, so sampling must wrap
        tex.set_wrap_u(SamplerState.WM_repeat)
        tex.set_wrap_v(SamplerState.WM_repeat)
        return tex

    def upload(self, grid: np.ndarray, width: int, height: int) -> None:
        if (width, height) != (self.resolution, self.resolution):
            raise ValueError(
                f"texture is {self.resolution}x{self.resolution}, got a {width}x{height} upload"
            )
        if grid.shape != (height, width, 3):
            raise ValueError(f"expected a ({height}, {width}, 3) grid, got {grid.shape}")

        # Panda3D keeps RAM images in BGR order
        bgr = np.ascontiguousarray(grid[..., ::-1], dtype=np.float32)
        self.texture.set_ram_image(bgr.tobytes())
        self.upload_count += 1

    def release(self) -> None:
        self.texture.clear_ram_image()
        logging.debug("Released RAM image of %s", self.texture.get_name())
