"""Dataset repetitions, tabular text output and polyline preview."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from src.auscult_system.exceptions import InvalidParameterError
from src.auscult_system.schemas import DataPoint
from src.auscultation.conditions import Condition
from src.auscultation.noise import uniform_noise
from src.auscultation.simulator import AuscultationSimulator, resolve_condition

CSV_HEADER = "timestamp,value,type,series"


def build_dataset(
    simulator: AuscultationSimulator,
    condition: str | Condition,
    sample_count: int,
    cycles: int,
    dataset_count: int = 3,
    amplitude_step: float = 0.05,
    noise_step: float = 0.02,
) -> list[DataPoint]:
    """Generate *dataset_count* distinguishable series of one condition.

    Series ``s`` is scaled by ``1 + s * amplitude_step`` and gets fresh
    uniform noise of amplitude ``s * noise_step`` per sample, so series 0 is
    the unmodified generator output.
    """
    if dataset_count < 1:
        raise InvalidParameterError("dataset_count", dataset_count, "must be >= 1")

    label = resolve_condition(condition).value
    points: list[DataPoint] = []
    for s in range(dataset_count):
        values = simulator.generate(condition, sample_count, cycles)
        values = values * (1 + s * amplitude_step) + uniform_noise(
            simulator.rng, noise_step * s, len(values),
        )
        points.extend(
            DataPoint(timestamp=i, value=float(v), type=label, series=s)
            for i, v in enumerate(values)
        )
    return points


def format_csv(points: Sequence[DataPoint]) -> str:
    """Render points as ``timestamp,value,type,series`` lines with a header."""
    lines = [CSV_HEADER]
    lines.extend(f"{p.timestamp},{p.value},{p.type},{p.series}" for p in points)
    return "\n".join(lines)


def series_values(points: Sequence[DataPoint], series: int) -> np.ndarray:
    """Values of one series in timestamp order."""
    rows = sorted((p for p in points if p.series == series), key=lambda p: p.timestamp)
    return np.asarray([p.value for p in rows], dtype=np.float64)


def preview_polyline(values: Sequence[float] | np.ndarray, max_points: int = 1000) -> str:
    """SVG polyline ``points`` attribute for the leading *max_points* values.

    Values are scaled by their largest magnitude into a 100 x 100 viewbox:
    ``x`` spans 0..100 and ``y = 50 - 40 * v / max|v|``.
    """
    head = np.asarray(values, dtype=np.float64)[:max_points]
    n = len(head)
    if n == 0:
        return ""
    max_abs = max(1e-6, float(np.max(np.abs(head))))
    xs = np.arange(n) / max(1, n - 1) * 100.0
    ys = 50.0 - (head / max_abs) * 40.0
    return " ".join(f"{x:g},{y:g}" for x, y in zip(xs, ys))
