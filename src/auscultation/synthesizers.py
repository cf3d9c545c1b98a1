"""One synthesis interface per sound category.

Each implementation turns fixed condition parameters plus the caller's
cycle count into a raw :class:`Waveform`; the simulator facade then resamples
it to the requested length.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from src.auscult_system.schemas import Waveform
from src.auscultation.conditions import (
    FetalSoundConfig,
    HeartSoundConfig,
    LungSoundConfig,
    SimulationParameters,
    SoundCategory,
)
from src.auscultation.fpcg import simulate_fetal_heart_sound
from src.auscultation.lung import lung_waveform
from src.auscultation.pcg import simulate_heart_sound


class Synthesizer(ABC):
    """Renders one category of auscultation sound."""

    category: SoundCategory

    @abstractmethod
    def synthesize(
        self,
        params: SimulationParameters,
        sample_count: int,
        cycles: int,
        rng: np.random.Generator,
    ) -> Waveform:
        """Produce a raw waveform for *cycles* cycles.

        *sample_count* is a hint; only synthesizers that render directly at
        the output length use it.
        """


class HeartSoundSynthesizer(Synthesizer):
    category = SoundCategory.HEART

    def synthesize(self, params, sample_count, cycles, rng):
        if not isinstance(params, HeartSoundConfig):
            raise TypeError(f"Expected HeartSoundConfig, got {type(params).__name__}")
        return simulate_heart_sound(params, cycles, rng)


class FetalSoundSynthesizer(Synthesizer):
    category = SoundCategory.FETAL

    def synthesize(self, params, sample_count, cycles, rng):
        if not isinstance(params, FetalSoundConfig):
            raise TypeError(f"Expected FetalSoundConfig, got {type(params).__name__}")
        # A fetal recording always holds at least one beat.
        return simulate_fetal_heart_sound(params, max(1, int(cycles)), rng)


class LungSoundSynthesizer(Synthesizer):
    category = SoundCategory.LUNG

    def synthesize(self, params, sample_count, cycles, rng):
        if not isinstance(params, LungSoundConfig):
            raise TypeError(f"Expected LungSoundConfig, got {type(params).__name__}")
        return lung_waveform(sample_count, int(cycles), rng, params)


SYNTHESIZERS: dict[SoundCategory, Synthesizer] = {
    SoundCategory.HEART: HeartSoundSynthesizer(),
    SoundCategory.FETAL: FetalSoundSynthesizer(),
    SoundCategory.LUNG: LungSoundSynthesizer(),
}
