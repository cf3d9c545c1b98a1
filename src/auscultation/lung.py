"""Additive-synthesis respiratory sounds: normal breath, crackles, wheeze."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from src.auscult_system.schemas import Waveform
from src.auscultation.conditions import (
    COARSE_CRACKLES_LUNG,
    FINE_CRACKLES_LUNG,
    NORMAL_LUNG,
    WHEEZE_LUNG,
    CrackleConfig,
    LungSoundConfig,
    WheezeConfig,
)
from src.auscultation.noise import uniform_noise
from src.auscultation.pulses import overlay


def synth_base(
    count: int,
    base_freq: float,
    rng: np.random.Generator,
    jitter: float = 0.0,
    overtones: Sequence[int] = (),
    envelope: Optional[np.ndarray] = None,
    noise_amplitude: float = 0.05,
) -> np.ndarray:
    """Base oscillation plus half-gain overtones, enveloped, plus background noise.

    The phase runs over ``i / count``, so *base_freq* is the number of
    oscillation periods across the whole output.
    """
    phase = np.arange(count) / max(1, count)
    out = np.sin(2 * np.pi * (base_freq * phase + uniform_noise(rng, jitter, count)))
    for k in overtones:
        out += 0.5 * np.sin(2 * np.pi * (k * base_freq * phase))
    if envelope is not None:
        out *= envelope
    out += uniform_noise(rng, noise_amplitude, count)
    return out


def cycle_phase(count: int, cycles: int) -> np.ndarray:
    """Position of every sample inside its respiratory cycle, on [0, 1)."""
    period = count / max(1, cycles)
    return (np.arange(count) % period) / period


def breath_envelope(
    count: int,
    cycles: int,
    inspiration_fraction: float = 0.4,
    expiration_gain: float = 0.6,
) -> np.ndarray:
    """Per-sample amplitude: half-sine inspiration then a softer expiration."""
    p = cycle_phase(count, cycles)
    insp = np.sin(np.pi * p / inspiration_fraction)
    exp = expiration_gain * np.sin(
        np.pi * (p - inspiration_fraction) / (1.0 - inspiration_fraction)
    )
    return np.where(p < inspiration_fraction, insp, exp)


def crackle_burst(length: int, crackle: CrackleConfig, amplitude: float) -> np.ndarray:
    """Exponentially damped sinusoid spanning *length* samples."""
    k = np.arange(length)
    return (
        amplitude
        * np.sin(2 * np.pi * crackle.oscillations * k / length)
        * np.exp(-crackle.decay * k / length)
    )


def add_crackles(
    y: np.ndarray,
    cycles: int,
    crackle: CrackleConfig,
    rng: np.random.Generator,
) -> None:
    """Place ``crackle.per_cycle`` bursts inside every respiratory cycle."""
    count = len(y)
    n_cycles = max(1, cycles)
    period = count / n_cycles
    length = max(crackle.min_burst_samples, int(crackle.burst_fraction * period))
    lo, hi = crackle.phase_range
    for c in range(n_cycles):
        cycle_start = c * period
        for _ in range(crackle.per_cycle):
            pos = int(cycle_start + rng.uniform(lo, hi) * period)
            amp = crackle.amplitude * rng.uniform(0.7, 1.0) * rng.choice([-1.0, 1.0])
            overlay(y, crackle_burst(length, crackle, amp), pos)


def add_wheeze(
    y: np.ndarray,
    cycles: int,
    base_freq: float,
    config: LungSoundConfig,
    wheeze: WheezeConfig,
    rng: np.random.Generator,
) -> None:
    """Superimpose a sustained tone at ``wheeze.harmonic * base_freq``."""
    count = len(y)
    phase = np.arange(count) / max(1, count)
    p = cycle_phase(count, cycles)
    envelope = np.abs(
        breath_envelope(count, cycles, config.inspiration_fraction, config.expiration_gain)
    )
    weight = np.where(p < config.inspiration_fraction, wheeze.inspiration_weight, 1.0)
    offset = rng.uniform(0, 2 * np.pi)
    tone = np.sin(2 * np.pi * wheeze.harmonic * base_freq * phase + offset)
    y += wheeze.amplitude * weight * envelope * tone


def synthesize_lung(
    count: int,
    cycles: int,
    rng: np.random.Generator,
    config: LungSoundConfig = NORMAL_LUNG,
) -> np.ndarray:
    """Render exactly *count* samples spanning *cycles* respiratory cycles.

    Args:
        count: number of output samples.
        cycles: number of breaths; zero is treated as a single envelope period.
        rng: numpy random generator.
        config: breath, crackle and wheeze parameters.

    Returns:
        1-D float64 array of length *count*.
    """
    base_freq = max(1, cycles) * config.oscillations_per_cycle
    envelope = breath_envelope(
        count, cycles, config.inspiration_fraction, config.expiration_gain,
    )
    y = synth_base(
        count,
        base_freq,
        rng,
        jitter=config.jitter,
        overtones=config.overtones,
        envelope=envelope,
        noise_amplitude=config.noise_amplitude,
    )
    if config.crackles is not None:
        add_crackles(y, cycles, config.crackles, rng)
    if config.wheeze is not None:
        add_wheeze(y, cycles, base_freq, config, config.wheeze, rng)
    return y


def lung_waveform(
    count: int,
    cycles: int,
    rng: np.random.Generator,
    config: LungSoundConfig = NORMAL_LUNG,
) -> Waveform:
    """:func:`synthesize_lung` with a time axis derived from the breathing rate."""
    y = synthesize_lung(count, cycles, rng, config)
    duration = max(1, cycles) * 60.0 / config.breath_rate
    t = np.linspace(0.0, duration, count)
    return Waveform(t=t, y=y, fs=count / duration)


def generate_normal_lung(count: int, cycles: int, rng: np.random.Generator) -> np.ndarray:
    return synthesize_lung(count, cycles, rng, NORMAL_LUNG)


def generate_coarse_crackles(count: int, cycles: int, rng: np.random.Generator) -> np.ndarray:
    return synthesize_lung(count, cycles, rng, COARSE_CRACKLES_LUNG)


def generate_fine_crackles(count: int, cycles: int, rng: np.random.Generator) -> np.ndarray:
    return synthesize_lung(count, cycles, rng, FINE_CRACKLES_LUNG)


def generate_wheeze(count: int, cycles: int, rng: np.random.Generator) -> np.ndarray:
    return synthesize_lung(count, cycles, rng, WHEEZE_LUNG)
