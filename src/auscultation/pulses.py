"""Sinc pulse shaper for discrete heart-sound components (S1-S4)."""

from __future__ import annotations

import math

import numpy as np


def generate_pulse(
    center_freq: float,
    duration: float,
    fs: float,
    amplitude: float,
) -> np.ndarray:
    """Sample ``amplitude * sinc(2 * center_freq * t)`` over ``[-duration/2, duration/2]``.

    ``np.sinc`` is the normalised ``sin(pi*x)/(pi*x)`` with ``sinc(0) = 1``.
    At least one sample is always returned.
    """
    n = max(1, int(math.floor(fs * duration)))
    t = np.linspace(-duration / 2.0, duration / 2.0, n)
    return amplitude * np.sinc(2.0 * center_freq * t)


def overlay(buffer: np.ndarray, segment: np.ndarray, start: int) -> None:
    """Add *segment* into *buffer* at *start* in place, clipped to the buffer."""
    if start >= len(buffer) or len(segment) == 0:
        return
    if start < 0:
        segment = segment[-start:]
        start = 0
    end = min(start + len(segment), len(buffer))
    buffer[start:end] += segment[: end - start]


def half_sine_window(length: int) -> np.ndarray:
    """``sin(pi * i / length)`` for ``i`` in ``0..length-1``."""
    i = np.arange(length)
    return np.sin(np.pi * i / max(1, length))


def reversed_half_sine_window(length: int) -> np.ndarray:
    """``sin(pi * (length - i) / length)``, the time-reversed counterpart."""
    i = np.arange(length)
    return np.sin(np.pi * (length - i) / max(1, length))
