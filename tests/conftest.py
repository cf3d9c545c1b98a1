"""Shared pytest fixtures for the auscultation simulator tests."""

from __future__ import annotations

import numpy as np
import pytest

from src.auscultation.simulator import AuscultationSimulator


@pytest.fixture
def seeded_rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def simulator() -> AuscultationSimulator:
    return AuscultationSimulator(seed=42)
