"""Adult phonocardiogram synthesis: sinc S1/S2 pulses, murmurs, friction, gallop."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from src.auscult_system.schemas import Waveform
from src.auscultation.conditions import HeartSoundConfig
from src.auscultation.noise import band_limited_noise, gaussian
from src.auscultation.pulses import (
    generate_pulse,
    half_sine_window,
    overlay,
    reversed_half_sine_window,
)

MIN_RR = 0.2            # seconds
MIN_SYSTOLE = 0.02      # seconds
MIN_SOUND_DURATION = 0.02
TAIL_SECONDS = 0.5
MIN_FRICTION_SAMPLES = 8


@dataclass
class Beat:
    """One cardiac cycle with its jittered S1/S2 parameters.

    Only lives for the duration of one synthesis call.
    """

    rr: float
    start: int
    length: int
    systole: float
    s1_amp: float
    s1_freq: float
    s1_dur: float
    s2_amp: float
    s2_freq: float
    s2_dur: float

    def s2_start(self, fs: float) -> int:
        return self.start + int(math.floor(self.systole * fs))


def draw_rr_intervals(
    cycles: int,
    hr: float,
    rr_std_frac: float,
    rng: np.random.Generator,
) -> np.ndarray:
    """Draw one RR interval per beat.

    ``RR = max(0.2, mean_rr + rr_std_frac * mean_rr * U)`` with ``U`` uniform
    on [0, 1), so the jitter only ever lengthens the interval.
    """
    mean_rr = 60.0 / hr
    n = max(0, int(math.ceil(cycles)))
    u = rng.random(n)
    return np.maximum(MIN_RR, mean_rr + rr_std_frac * mean_rr * u)


def allocate_buffer(rr_intervals: np.ndarray, fs: float) -> tuple[np.ndarray, np.ndarray]:
    """Zeroed buffer covering every RR interval plus the fixed tail.

    Returns:
        ``(t, y)`` with ``t`` evenly spaced over ``[0, total_duration]``.
    """
    total_duration = math.fsum(rr_intervals) + TAIL_SECONDS
    n_samples = max(1, int(math.floor(fs * total_duration)))
    t = np.linspace(0.0, total_duration, n_samples)
    return t, np.zeros(n_samples)


def systole_interval(hr: float, rng: np.random.Generator) -> float:
    """S1-to-S2 gap in seconds; shortens as heart rate rises."""
    return max(MIN_SYSTOLE, (210.0 - 0.5 * hr) / 1000.0 + 0.01 * gaussian(rng))


def _draw_beat(
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
        s1_amp=0.8 + 0.08 * gaussian(rng),
        s2_amp=0.5 + 0.08 * gaussian(rng),
        s1_freq=50.0 + 2.0 * gaussian(rng),
        s2_freq=60.0 + 2.0 * gaussian(rng),
        s1_dur=max(MIN_SOUND_DURATION, 0.08 + 0.01 * gaussian(rng)),
        s2_dur=max(MIN_SOUND_DURATION, 0.05 + 0.01 * gaussian(rng)),
        systole=systole_interval(hr, rng),
    )


def render_s1_s2(y: np.ndarray, beat: Beat, fs: float) -> None:
    """Overlay the beat's S1 and S2 pulses into *y*."""
    s1 = generate_pulse(beat.s1_freq, beat.s1_dur, fs, beat.s1_amp)
    s2 = generate_pulse(beat.s2_freq, beat.s2_dur, fs, beat.s2_amp)
    overlay(y, s1, beat.start)
    overlay(y, s2, beat.s2_start(fs))


def add_noise_segment(
    y: np.ndarray,
    start: int,
    end: int,
    f_lo: Optional[float],
    f_hi: Optional[float],
    fs: float,
    gain: float,
    rng: np.random.Generator,
    window: Optional[Callable[[int], np.ndarray]] = None,
) -> None:
    """Add band-passed Gaussian noise to ``y[start:end]`` in place.

    *end* is clipped to the buffer; an empty or inverted range is a no-op.
    """
    end = min(len(y), end)
    start = max(0, start)
    length = end - start
    if length <= 0:
        return
    segment = band_limited_noise(rng, length, f_lo, f_hi, fs)
    if window is not None:
        segment = segment * window(length)
    y[start:end] += gain * segment


def _add_systolic_murmur(y: np.ndarray, beat: Beat, fs: float, rng: np.random.Generator) -> None:
    start = beat.start + int(math.floor(0.02 * fs))
    end = beat.s2_start(fs) - int(math.floor(0.01 * fs))
    add_noise_segment(y, start, end, 100.0, 400.0, fs, 0.2, rng, half_sine_window)


def _add_diastolic_murmur(y: np.ndarray, beat: Beat, fs: float, rng: np.random.Generator) -> None:
    start = beat.s2_start(fs) + int(math.floor(0.01 * fs))
    end = beat.start + beat.length - int(math.floor(0.02 * fs))
    add_noise_segment(y, start, end, 80.0, 300.0, fs, 0.18, rng, reversed_half_sine_window)


def _add_continuous_murmur(y: np.ndarray, beat: Beat, fs: float, rng: np.random.Generator) -> None:
    add_noise_segment(y, beat.start, beat.start + beat.length, 60.0, 250.0, fs, 0.08, rng)


def _add_friction(y: np.ndarray, beat: Beat, fs: float) -> None:
    """Two exponentially decaying bursts at 5% and 60% of the beat."""
    dur = max(MIN_FRICTION_SAMPLES, int(math.floor(0.02 * fs)))
    burst = 0.25 * np.exp(-4.0 * np.arange(dur) / dur)
    for offset in (0.05, 0.6):
        overlay(y, burst, beat.start + int(math.floor(offset * beat.length)))


def _add_gallop(y: np.ndarray, beat: Beat, fs: float) -> None:
    """S3 at 70% and S4 at 90% of the beat."""
    s3 = generate_pulse(40.0, 0.04, fs, 0.25)
    s4 = generate_pulse(45.0, 0.04, fs, 0.22)
    overlay(y, s3, beat.start + int(math.floor(0.7 * beat.length)))
    overlay(y, s4, beat.start + int(math.floor(0.9 * beat.length)))


def simulate_heart_sound(
    config: HeartSoundConfig,
    cycles: int,
    rng: np.random.Generator,
) -> Waveform:
    """Synthesize an adult heart sound recording of *cycles* beats.

    Murmur, friction and gallop flags are independent and may be combined.
    Non-positive *cycles* produce only the 0.5 s tail plus noise.

    Args:
        config: condition parameters.
        cycles: number of cardiac cycles.
        rng: numpy random generator.

    Returns:
        :class:`Waveform` sampled at ``config.fs``.
    """
    fs = config.fs
    rr_intervals = draw_rr_intervals(cycles, config.hr, config.rr_std_frac, rng)
    t, y = allocate_buffer(rr_intervals, fs)

    offset = 0
    for rr in rr_intervals:
        beat = _draw_beat(float(rr), offset, fs, config.hr, rng)
        render_s1_s2(y, beat, fs)

        if config.systolic_murmur:
            _add_systolic_murmur(y, beat, fs, rng)
        if config.diastolic_murmur:
            _add_diastolic_murmur(y, beat, fs, rng)
        if config.continuous_murmur:
            _add_continuous_murmur(y, beat, fs, rng)
        if config.friction:
            _add_friction(y, beat, fs)
        if config.gallop:
            _add_gallop(y, beat, fs)

        offset += beat.length

    y += config.awgn_amplitude * gaussian(rng, len(y))
    return Waveform(t=t, y=y, fs=fs)
