"""Auscultation simulator facade: single entry point for generating sound data."""

from __future__ import annotations

import logging

import numpy as np

from src.auscult_system.exceptions import InvalidParameterError
from src.auscult_system.schemas import Waveform
from src.auscultation.conditions import CONDITION_REGISTRY, Condition, ConditionProfile
from src.auscultation.resample import resample_waveform
from src.auscultation.synthesizers import SYNTHESIZERS

logger = logging.getLogger(__name__)

DEFAULT_CONDITION = Condition.NORMAL_HEART


def resolve_condition(condition: str | Condition) -> Condition:
    """Map an identifier to a :class:`Condition`, falling back to normal heart."""
    if isinstance(condition, Condition):
        return condition
    try:
        return Condition(condition)
    except ValueError:
        logger.debug("Unknown condition id %r; using %s", condition, DEFAULT_CONDITION.value)
        return DEFAULT_CONDITION


class AuscultationSimulator:
    """Facade dispatching condition ids to their synthesizer.

    Args:
        seed: random seed for reproducibility. ``None`` for non-deterministic.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def profile(self, condition: str | Condition) -> ConditionProfile:
        return CONDITION_REGISTRY[resolve_condition(condition)]

    def synthesize(
        self,
        condition: str | Condition,
        cycles: int,
        sample_count: int = 1,
    ) -> Waveform:
        """Raw waveform for *condition* at the synthesizer's own rate."""
        profile = self.profile(condition)
        synthesizer = SYNTHESIZERS[profile.category]
        return synthesizer.synthesize(profile.params, sample_count, cycles, self._rng)

    def generate(
        self,
        condition: str | Condition,
        sample_count: int,
        cycles: int,
    ) -> np.ndarray:
        """Generate exactly *sample_count* samples of *condition*.

        Unknown identifiers fall back to ``normal_heart``.

        Raises:
            InvalidParameterError: if *sample_count* < 1 or *cycles* < 0.
        """
        if sample_count < 1:
            raise InvalidParameterError("sample_count", sample_count, "must be >= 1")
        if cycles < 0:
            raise InvalidParameterError("cycles", cycles, "must be >= 0")

        resolved = resolve_condition(condition)
        waveform = self.synthesize(resolved, cycles, sample_count)
        logger.debug(
            "Generated %s: %d raw samples at %.1f Hz -> %d samples (%s cycles)",
            resolved.value, len(waveform), waveform.fs, sample_count, cycles,
        )
        return resample_waveform(waveform, sample_count)


def generate(
    condition: str | Condition,
    sample_count: int,
    cycles: int,
    seed: int | None = None,
) -> np.ndarray:
    """One-shot :meth:`AuscultationSimulator.generate` with a fresh generator."""
    return AuscultationSimulator(seed=seed).generate(condition, sample_count, cycles)
