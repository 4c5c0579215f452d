# -*- coding: utf-8 -*-

"""
Filename: ocean_displacement.py
Author: storro
Date: 2026-02-11
Description: Normalizes the IFFT output and packs it into displacement and normal grids
"""

import logging

from dataclasses import dataclass

import numpy as np

from ocean_fft.ocean.ocean_config import OceanSimConfig
from ocean_fft.ocean.ocean_ifft2d import SpatialFields

from typing import Protocol


class GridUploadTarget(Protocol):
    def upload(self, grid: np.ndarray, width: int, height: int) -> None:
        ...


@dataclass
class OceanOutputGrids:
    # N x N x 3, channels (dx, dy=height, dz)
    displacement: np.ndarray
    # N x N x 3 unit vectors
    normal: np.ndarray


def normalize_fields(fields: SpatialFields, resolution: int, choppiness: float) -> SpatialFields:
    """
    Undo the N^2 scale of the unnormalized inverse transform. Choppiness is applied
    here, after the transform, so changing it needs no regeneration or re-evolution.
    """
    norm = 1.0 / float(resolution * resolution)
    choppy_norm = norm * float(choppiness)
    return SpatialFields(
        height=fields.height * norm,
        choppy_x=fields.choppy_x * choppy_norm,
        choppy_z=fields.choppy_z * choppy_norm,
        normal_x=fields.normal_x * norm,
        normal_z=fields.normal_z * norm,
    )


def pack_displacement(fields: SpatialFields) -> np.ndarray:
    return np.stack(
        (fields.choppy_x, fields.height, fields.choppy_z), axis=-1
    ).astype(np.float32)


def pack_normals(fields: SpatialFields, epsilon: float = 1e-6) -> np.ndarray:
    # Normal (-dh/dx, 1, -dh/dz), normalized
    raw = np.stack(
        (-fields.normal_x, np.ones_like(fields.height), -fields.normal_z), axis=-1
    )
    with np.errstate(invalid="ignore", over="ignore"):
        length = np.linalg.norm(raw, axis=-1, keepdims=True)
    degenerate = ~np.isfinite(length) | (length < epsilon)

    normal = np.divide(raw, length, out=np.zeros_like(raw), where=~degenerate)
    normal[degenerate[..., 0]] = (0.0, 1.0, 0.0)
    return normal.astype(np.float32)


class OceanDisplacement:
    """Builds the displacement and normal grids and hands them to the renderer."""

    def __init__(
        self,
        config: OceanSimConfig,
        displacement_target: GridUploadTarget | None = None,
        normal_target: GridUploadTarget | None = None,
    ) -> None:
        self.config = config
        self.displacement_target = displacement_target
        self.normal_target = normal_target

    def build(self, fields: SpatialFields, choppiness: float) -> OceanOutputGrids:
        normalized = normalize_fields(fields, self.config.resolution, choppiness)
        return OceanOutputGrids(
            displacement=pack_displacement(normalized),
            normal=pack_normals(normalized, self.config.normal_epsilon),
        )

    def publish(self, grids: OceanOutputGrids) -> None:
        n = int(self.config.resolution)
        if self.displacement_target is not None:
            self.displacement_target.upload(grids.displacement, n, n)
        if self.normal_target is not None:
            self.normal_target.upload(grids.normal, n, n)
        logging.debug("Published %dx%d ocean grids", n, n)
