"""Auscultation sound simulator: synthetic heart, fetal heart and lung sounds."""

from src.auscultation.conditions import (
    Condition,
    ConditionProfile,
    CONDITION_REGISTRY,
    FetalSoundConfig,
    HeartSoundConfig,
    LungSoundConfig,
    SoundCategory,
)
from src.auscultation.resample import resample
from src.auscultation.simulator import AuscultationSimulator, generate

__all__ = [
    "Condition",
    "ConditionProfile",
    "CONDITION_REGISTRY",
    "FetalSoundConfig",
    "HeartSoundConfig",
    "LungSoundConfig",
    "SoundCategory",
    "resample",
    "AuscultationSimulator",
    "generate",
]
