"""Data classes shared between the synthesis core and its callers."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class Waveform:
    """Raw synthesizer output at the synthesizer's own sampling rate.

    ``t`` holds non-decreasing time stamps in seconds and ``y`` the matching
    amplitudes. Both arrays always have the same length.
    """

    t: np.ndarray
    y: np.ndarray
    fs: float

    def __post_init__(self) -> None:
        if len(self.t) != len(self.y):
            raise ValueError(
                f"Waveform arrays differ in length: t={len(self.t)}, y={len(self.y)}"
            )

    @property
    def duration(self) -> float:
        return float(self.t[-1]) if len(self.t) else 0.0

    def __len__(self) -> int:
        return len(self.y)


@dataclass
class DataPoint:
    """One row of a generated dataset (``timestamp,value,type,series``)."""

    timestamp: int
    value: float
    type: str
    series: int
