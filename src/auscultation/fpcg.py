"""Fetal phonocardiogram synthesis.

The recording is the sum of independent components rendered over one
call-owned buffer: the fetal S1/S2 beat train, an attenuated maternal heart
sound, fetal movement bursts and uterine contraction envelopes, followed by
global white noise.
"""

from __future__ import annotations

import math

import numpy as np

from src.auscult_system.schemas import Waveform
from src.auscultation.conditions import FetalSoundConfig
from src.auscultation.filters import simple_bandpass
from src.auscultation.noise import gaussian
from src.auscultation.pcg import (
    MIN_RR,
    MIN_SYSTOLE,
    Beat,
    add_noise_segment,
    allocate_buffer,
    draw_rr_intervals,
    render_s1_s2,
    systole_interval,
)
from src.auscultation.pulses import half_sine_window

MIN_FETAL_SOUND_DURATION = 0.015
MIN_MOVEMENT_SECONDS = 0.05
MIN_CONTRACTION_SECONDS = 1.0

MOVEMENT_BAND = (10.0, 80.0)
MATERNAL_BAND = (20.0, 150.0)
CONTRACTION_GAIN = 0.15


def _fetal_systole(hr: float, rng: np.random.Generator) -> float:
    return max(MIN_SYSTOLE, (170.0 - 0.4 * hr) / 1000.0 + 0.005 * gaussian(rng))


def _draw_fetal_beat(
    rr: float,
    start: int,
    fs: float,
    hr: float,
    rng: np.random.Generator,
) -> Beat:
    return Beat(
        rr=rr,
        start=start,
        length=int(math.floor(rr * fs)),
        s1_amp=0.7 + 0.07 * gaussian(rng),
        s2_amp=0.5 + 0.05 * gaussian(rng),
        s1_freq=65.0 + 3.0 * gaussian(rng),
        s2_freq=75.0 + 3.0 * gaussian(rng),
        s1_dur=max(MIN_FETAL_SOUND_DURATION, 0.04 + 0.005 * gaussian(rng)),
        s2_dur=max(MIN_FETAL_SOUND_DURATION, 0.03 + 0.005 * gaussian(rng)),
        systole=_fetal_systole(hr, rng),
    )


def _draw_maternal_beat(
    rr: float,
    start: int,
    fs: float,
    hr: float,
    rng: np.random.Generator,
) -> Beat:
    return Beat(
        rr=rr,
        start=start,
        length=int(math.floor(rr * fs)),
        s1_amp=1.0 + 0.08 * gaussian(rng),
        s2_amp=0.7 + 0.08 * gaussian(rng),
        s1_freq=35.0 + 2.0 * gaussian(rng),
        s2_freq=45.0 + 2.0 * gaussian(rng),
        s1_dur=max(0.02, 0.10 + 0.01 * gaussian(rng)),
        s2_dur=max(0.02, 0.07 + 0.01 * gaussian(rng)),
        systole=systole_interval(hr, rng),
    )


def add_fetal_beats(
    y: np.ndarray,
    rr_intervals: np.ndarray,
    config: FetalSoundConfig,
    rng: np.random.Generator,
) -> None:
    """Overlay the fetal S1/S2 beat train."""
    offset = 0
    for rr in rr_intervals:
        beat = _draw_fetal_beat(float(rr), offset, config.fs, config.hr, rng)
        render_s1_s2(y, beat, config.fs)
        offset += beat.length


def add_maternal_component(
    y: np.ndarray,
    config: FetalSoundConfig,
    rng: np.random.Generator,
) -> None:
    """Overlay a band-passed maternal heart sound across the whole buffer."""
    fs = config.fs
    mean_rr = 60.0 / config.maternal_hr
    maternal = np.zeros_like(y)
    offset = 0
    while offset < len(y):
        rr = max(MIN_RR, mean_rr + 0.03 * mean_rr * rng.random())
        beat = _draw_maternal_beat(rr, offset, fs, config.maternal_hr, rng)
        render_s1_s2(maternal, beat, fs)
        offset += max(1, beat.length)
    y += config.maternal_amplitude * simple_bandpass(maternal, *MATERNAL_BAND, fs)


def add_movement_artifacts(
    y: np.ndarray,
    config: FetalSoundConfig,
    duration: float,
    rng: np.random.Generator,
) -> int:
    """Inject band-limited movement bursts.

    The burst count is Poisson with mean
    ``movement_rate_per_min * movement_intensity * duration / 60``.

    Returns:
        Number of bursts injected.
    """
    fs = config.fs
    lam = max(0.0, config.movement_rate_per_min * config.movement_intensity * duration / 60.0)
    n_bursts = int(rng.poisson(lam))
    gain = 0.3 * config.movement_intensity
    for _ in range(n_bursts):
        burst_sec = max(MIN_MOVEMENT_SECONDS, rng.uniform(0.2, 1.0))
        start = int(rng.integers(0, len(y)))
        end = start + int(math.floor(burst_sec * fs))
        add_noise_segment(y, start, end, *MOVEMENT_BAND, fs, gain, rng, half_sine_window)
    return n_bursts


def add_contraction_artifacts(
    y: np.ndarray,
    config: FetalSoundConfig,
    duration: float,
    rng: np.random.Generator,
) -> int:
    """Inject slow broadband uterine contraction envelopes.

    The count is Poisson with mean ``uc_rate_per_10min * duration / 600``,
    raised to one: a single contraction usually outlasts the recording.
    Each envelope is a half-sine over the drawn duration, truncated at the
    end of the buffer.

    Returns:
        Number of contractions injected.
    """
    fs = config.fs
    lam = max(0.0, config.uc_rate_per_10min * duration / 600.0)
    n_contractions = max(1, int(rng.poisson(lam)))
    lo, hi = config.uc_duration_range
    for _ in range(n_contractions):
        uc_sec = max(MIN_CONTRACTION_SECONDS, rng.uniform(lo, hi))
        length = int(math.floor(uc_sec * fs))
        start = int(rng.integers(0, len(y)))
        end = min(len(y), start + length)
        envelope = half_sine_window(length)[: end - start]
        y[start:end] += CONTRACTION_GAIN * envelope * gaussian(rng, end - start)
    return n_contractions


def simulate_fetal_heart_sound(
    config: FetalSoundConfig,
    cycles: int,
    rng: np.random.Generator,
) -> Waveform:
    """Synthesize a fetal heart sound recording of *cycles* fetal beats.

    Args:
        config: condition parameters.
        cycles: number of fetal cardiac cycles.
        rng: numpy random generator.

    Returns:
        :class:`Waveform` sampled at ``config.fs``.
    """
    rr_intervals = draw_rr_intervals(cycles, config.hr, config.rr_std_frac, rng)
    t, y = allocate_buffer(rr_intervals, config.fs)
    duration = float(t[-1])

    add_fetal_beats(y, rr_intervals, config, rng)
    if config.maternal_enabled:
        add_maternal_component(y, config, rng)
    if config.movement_enabled:
        add_movement_artifacts(y, config, duration, rng)
    if config.uc_enabled:
        add_contraction_artifacts(y, config, duration, rng)

    y += config.awgn_amplitude * gaussian(rng, len(y))
    return Waveform(t=t, y=y, fs=config.fs)
