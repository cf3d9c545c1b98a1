"""One-pole IIR filters used to shape murmur and artifact noise."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
from scipy.signal import lfilter


def onepole_lowpass(x: np.ndarray, fc: float, fs: float) -> np.ndarray:
    """First-order low-pass ``y[i] = a*y[i-1] + (1-a)*x[i]`` with ``y[0] = 0``.

    The coefficient is ``a = exp(-2*pi*fc/fs)``. A non-positive cutoff returns
    a copy of the input.
    """
    x = np.asarray(x, dtype=np.float64)
    if fc <= 0 or len(x) == 0:
        return x.copy()
    a = math.exp(-2.0 * math.pi * fc / fs)
    # Zeroing the first input sample pins y[0] to 0.
    seeded = x.copy()
    seeded[0] = 0.0
    return lfilter([1.0 - a], [1.0, -a], seeded)


def onepole_highpass(x: np.ndarray, fc: float, fs: float) -> np.ndarray:
    """Complement of :func:`onepole_lowpass` (``x - lowpass(x)``)."""
    x = np.asarray(x, dtype=np.float64)
    if fc <= 0:
        return x.copy()
    return x - onepole_lowpass(x, fc, fs)


def simple_bandpass(
    x: np.ndarray,
    f_lo: Optional[float],
    f_hi: Optional[float],
    fs: float,
) -> np.ndarray:
    """Crude band-pass: low-pass at *f_hi*, then high-pass at *f_lo*.

    The low-pass stage is skipped when *f_hi* is ``None`` or at/above Nyquist,
    the high-pass stage when *f_lo* is ``None`` or non-positive.

    Args:
        x: 1-D input signal.
        f_lo: lower band edge in Hz.
        f_hi: upper band edge in Hz.
        fs: sampling frequency in Hz.

    Returns:
        Filtered float64 array of the same length.
    """
    y = np.asarray(x, dtype=np.float64).copy()
    if f_hi is not None and f_hi < fs / 2.0:
        y = onepole_lowpass(y, f_hi, fs)
    if f_lo is not None and f_lo > 0:
        y = onepole_highpass(y, f_lo, fs)
    return y
