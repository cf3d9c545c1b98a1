"""Configuration management for the auscultation sound simulator."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class SimulatorConfig:
    """Configuration for the random source behind every synthesis call."""

    seed: Optional[int] = None
    """Seed for ``numpy.random.default_rng``. ``None`` gives a fresh,
    non-reproducible stream on every run."""


@dataclass
class DatasetConfig:
    """Defaults for dataset generation and preview."""

    sample_count: int = 1000
    cycles: int = 100
    dataset_count: int = 3
    amplitude_step: float = 0.05
    noise_step: float = 0.02
    preview_points: int = 1000


@dataclass
class Settings:
    """Top-level application settings."""

    simulator: SimulatorConfig = field(default_factory=SimulatorConfig)
    dataset: DatasetConfig = field(default_factory=DatasetConfig)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        seed = os.getenv("AUSCULTSIM_SEED")
        return cls(
            simulator=SimulatorConfig(seed=int(seed) if seed else None),
            log_level=os.getenv("AUSCULTSIM_LOG_LEVEL", "INFO"),
        )

    @classmethod
    def from_yaml(cls, path: str) -> Settings:
        """Load settings from YAML config file."""
        config_path = Path(path)
        if not config_path.exists():
            return cls()
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        settings = cls()
        if "simulator" in data:
            settings.simulator = SimulatorConfig(**data["simulator"])
        if "dataset" in data:
            settings.dataset = DatasetConfig(**data["dataset"])
        if "log_level" in data:
            settings.log_level = data["log_level"]
        return settings
