# -*- coding: utf-8 -*-

"""
Filename: gaussian_source.py
Author: storro
Date: 2026-02-12
Description: Injectable standard-normal random source used to draw the initial spectrum
"""

import numpy as np

from typing import Protocol


class GaussianSource(Protocol):
    """
    Anything with next_gaussian() works. A source may also offer
    next_gaussians(count), returning the next `count` draws of the same stream in
    order; the spectrum generator uses it when present to avoid a Python loop.
    """

    def next_gaussian(self) -> float:
        ...


def draw_gaussians(source: GaussianSource, count: int) -> np.ndarray:
    batch = getattr(source, "next_gaussians", None)
    if batch is not None:
        return np.asarray(batch(int(count)), dtype=np.float64)
    return np.fromiter(
        (source.next_gaussian() for _ in range(int(count))), dtype=np.float64, count=int(count)
    )


class NumpyGaussianSource:
    """Single seedable stream of N(0, 1) samples backed by numpy's Generator."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next_gaussian(self) -> float:
        return float(self._rng.standard_normal())

    def next_gaussians(self, count: int) -> np.ndarray:
        return self._rng.standard_normal(int(count))
