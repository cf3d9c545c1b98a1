"""Random sample generation for the synthesizers.

All draws go through an explicit :class:`numpy.random.Generator` so a seeded
generator reproduces a whole synthesis call.
"""

from __future__ import annotations

import numpy as np

from src.auscultation.filters import simple_bandpass


def _open_unit_interval(rng: np.random.Generator, size: int | None = None):
    """Uniform draw(s) on (0, 1); exact zeros are redrawn."""
    if size is None:
        u = rng.random()
        while u == 0.0:
            u = rng.random()
        return u
    u = rng.random(size)
    zeros = u == 0.0
    while zeros.any():
        u[zeros] = rng.random(int(zeros.sum()))
        zeros = u == 0.0
    return u


def gaussian(rng: np.random.Generator, size: int | None = None):
    """Standard-normal value(s) via the Box-Muller transform.

    Only the cosine branch is used, so every Gaussian value costs two uniform
    draws and the paired sine value is discarded.

    Args:
        rng: numpy random generator.
        size: number of values, or ``None`` for a single float.
    """
    u = _open_unit_interval(rng, size)
    v = _open_unit_interval(rng, size)
    z = np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v)
    return float(z) if size is None else z


def uniform_noise(rng: np.random.Generator, n: float, size: int | None = None):
    """Uniform value(s) on ``[-n, n]``."""
    if size is None:
        return (rng.random() * 2.0 - 1.0) * n
    return (rng.random(size) * 2.0 - 1.0) * n


def band_limited_noise(
    rng: np.random.Generator,
    n_samples: int,
    f_lo: float,
    f_hi: float,
    fs: float,
) -> np.ndarray:
    """Gaussian noise passed through :func:`simple_bandpass`."""
    return simple_bandpass(gaussian(rng, n_samples), f_lo, f_hi, fs)
