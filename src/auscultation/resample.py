"""Length normalisation of synthesizer output."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from src.auscult_system.exceptions import InvalidParameterError
from src.auscult_system.schemas import Waveform


def resample(
    t: Sequence[float] | np.ndarray,
    y: Sequence[float] | np.ndarray,
    target_count: int,
) -> np.ndarray:
    """Piecewise-linear resampling of *y* to exactly *target_count* samples.

    Interpolation runs over the index domain ``[0, len(y) - 1]`` at
    *target_count* evenly spaced positions, both endpoints included. No
    anti-alias filtering is applied when downsampling. *t* only has to match
    *y* in length.

    Raises:
        InvalidParameterError: if *target_count* < 1, *y* is empty, or the
            two sequences differ in length.
    """
    y = np.asarray(y, dtype=np.float64)
    if target_count < 1:
        raise InvalidParameterError("target_count", target_count, "must be >= 1")
    if len(y) == 0:
        raise InvalidParameterError("y", len(y), "cannot resample an empty waveform")
    if len(t) != len(y):
        raise InvalidParameterError(
            "t", len(t), f"length must match y (len {len(y)})"
        )

    if target_count == 1:
        return y[:1].copy()

    positions = np.linspace(0.0, len(y) - 1, target_count)
    return np.interp(positions, np.arange(len(y)), y)


def resample_waveform(waveform: Waveform, target_count: int) -> np.ndarray:
    """Convenience wrapper around :func:`resample` for a :class:`Waveform`."""
    return resample(waveform.t, waveform.y, target_count)
