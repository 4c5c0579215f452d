"""
Normalization and output packing tests.
"""

import numpy as np

from ocean_fft.ocean.ocean_config import OceanSimConfig
from ocean_fft.ocean.ocean_displacement import (
    OceanDisplacement,
    normalize_fields,
    pack_displacement,
    pack_normals,
)
from ocean_fft.ocean.ocean_ifft2d import SpatialFields


def make_fields(n=4, seed=0):
    rng = np.random.default_rng(seed)
    return SpatialFields(*(rng.standard_normal((n, n)) for _ in range(5)))


def test_normalize_divides_by_n_squared():
    """The unnormalized transform is scaled back by 1/N^2."""
    fields = make_fields()
    normalized = normalize_fields(fields, 4, choppiness=1.0)

    assert np.allclose(normalized.height, fields.height / 16.0)
    assert np.allclose(normalized.normal_x, fields.normal_x / 16.0)
    assert np.allclose(normalized.normal_z, fields.normal_z / 16.0)
    assert np.allclose(normalized.choppy_x, fields.choppy_x / 16.0)


def test_choppiness_scales_only_horizontal_displacement():
    fields = make_fields()
    once = normalize_fields(fields, 4, choppiness=1.5)
    twice = normalize_fields(fields, 4, choppiness=3.0)

    assert np.allclose(twice.choppy_x, 2.0 * once.choppy_x)
    assert np.allclose(twice.choppy_z, 2.0 * once.choppy_z)
    assert np.array_equal(twice.height, once.height)


def test_zero_choppiness_flattens_horizontal_displacement():
    normalized = normalize_fields(make_fields(), 4, choppiness=0.0)

    assert np.all(normalized.choppy_x == 0.0)
    assert np.all(normalized.choppy_z == 0.0)


def test_displacement_channel_order():
    """Channels are (choppy_x, height, choppy_z), float32."""
    fields = make_fields()
    grid = pack_displacement(fields)

    assert grid.shape == (4, 4, 3)
    assert grid.dtype == np.float32
    assert np.allclose(grid[..., 0], fields.choppy_x)
    assert np.allclose(grid[..., 1], fields.height)
    assert np.allclose(grid[..., 2], fields.choppy_z)


def test_normals_are_unit_vectors():
    fields = make_fields(n=8, seed=4)
    normals = pack_normals(fields)

    assert normals.shape == (8, 8, 3)
    assert normals.dtype == np.float32
    assert np.allclose(np.linalg.norm(normals, axis=-1), 1.0, atol=1e-4)
    # y is always the positive component of (-dh/dx, 1, -dh/dz)
    assert np.all(normals[..., 1] > 0.0)


def test_normal_direction():
    """Normal is (-nx, 1, -nz) normalized."""
    zeros = np.zeros((2, 2))
    slope = np.full((2, 2), 0.75)
    fields = SpatialFields(zeros, zeros, zeros, slope, zeros)

    normals = pack_normals(fields)

    assert np.allclose(normals[0, 0], [-0.6, 0.8, 0.0], atol=1e-6)


def test_flat_sea_points_up():
    zeros = np.zeros((4, 4))
    normals = pack_normals(SpatialFields(zeros, zeros, zeros, zeros, zeros))

    assert np.all(normals == np.array([0.0, 1.0, 0.0], dtype=np.float32))


def test_degenerate_normals_are_clamped():
    """Non-finite slopes fall back to straight up instead of leaking NaN."""
    zeros = np.zeros((2, 2))
    slope_x = np.array([[np.nan, 0.0], [np.inf, 0.0]])
    fields = SpatialFields(zeros, zeros, zeros, slope_x, zeros)

    normals = pack_normals(fields)

    assert np.all(np.isfinite(normals))
    assert np.allclose(normals[0, 0], [0.0, 1.0, 0.0], atol=1e-6)
    assert np.allclose(normals[1, 0], [0.0, 1.0, 0.0], atol=1e-6)
    assert np.allclose(np.linalg.norm(normals, axis=-1), 1.0, atol=1e-4)


def test_publish_uploads_both_grids(recording_targets):
    displacement_target, normal_target = recording_targets
    config = OceanSimConfig(resolution=4, patch_size=10.0)
    maps = OceanDisplacement(config, displacement_target, normal_target)

    grids = maps.build(make_fields(), choppiness=2.0)
    maps.publish(grids)

    grid, width, height = displacement_target.uploads[0]
    assert (width, height) == (4, 4)
    assert np.array_equal(grid, grids.displacement)
    assert np.array_equal(normal_target.last, grids.normal)


def test_publish_without_targets():
    """Headless use: nothing to upload to is fine."""
    maps = OceanDisplacement(OceanSimConfig(resolution=4, patch_size=10.0))
    maps.publish(maps.build(make_fields(), choppiness=1.0))
