#!/usr/bin/env python3
"""CLI for the auscultation simulator: print synthetic sound datasets as CSV.

Usage examples:
    python scripts/auscultsim_cli.py --list
    python scripts/auscultsim_cli.py normal_heart --samples 2000 --cycles 10 --seed 42
    python scripts/auscultsim_cli.py wheezes --datasets 5 > wheezes.csv
    python scripts/auscultsim_cli.py fhs_uc_fast --preview
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

# Ensure project root on sys.path
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from config.settings import Settings
from src.auscult_system.exceptions import AuscultSimError
from src.auscultation.conditions import CONDITION_REGISTRY, conditions_by_category
from src.auscultation.dataset import (
    build_dataset,
    format_csv,
    preview_polyline,
    series_values,
)
from src.auscultation.simulator import AuscultationSimulator, resolve_condition

logger = logging.getLogger("auscultsim")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate synthetic auscultation sound data as CSV on stdout.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "condition", type=str, nargs="?", default="normal_heart",
        help="Condition id (e.g. valve_disease). Unknown ids fall back to normal_heart.",
    )
    parser.add_argument("--samples", type=int, default=None, help="Samples per series.")
    parser.add_argument("--cycles", type=int, default=None, help="Cardiac/respiratory cycles.")
    parser.add_argument("--datasets", type=int, default=None, help="Number of series.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    parser.add_argument("--config", type=str, default=None, help="YAML settings file.")
    parser.add_argument("--list", action="store_true", help="List condition ids and exit.")
    parser.add_argument(
        "--preview", action="store_true",
        help="Print the first series as SVG polyline points instead of CSV.",
    )
    return parser


def list_conditions() -> str:
    lines: list[str] = []
    for category, conditions in conditions_by_category().items():
        lines.append(f"{category.value}:")
        for cond in conditions:
            profile = CONDITION_REGISTRY[cond]
            lines.append(f"  {cond.value:<22} {profile.name} - {profile.description}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = Settings.from_yaml(args.config) if args.config else Settings.from_env()
    logging.basicConfig(
        level=getattr(logging, str(settings.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.list:
        print(list_conditions())
        return

    ds = settings.dataset
    seed = args.seed if args.seed is not None else settings.simulator.seed
    sample_count = args.samples if args.samples is not None else ds.sample_count
    cycles = args.cycles if args.cycles is not None else ds.cycles
    dataset_count = args.datasets if args.datasets is not None else ds.dataset_count

    sim = AuscultationSimulator(seed=seed)
    try:
        points = build_dataset(
            sim,
            args.condition,
            sample_count,
            cycles,
            dataset_count=dataset_count,
            amplitude_step=ds.amplitude_step,
            noise_step=ds.noise_step,
        )
    except AuscultSimError as exc:
        parser.error(str(exc))

    condition = resolve_condition(args.condition)
    logger.info(
        "Generated %d points for %s (%d series x %d samples, %d cycles)",
        len(points), condition.value, dataset_count, sample_count, cycles,
    )

    if args.preview:
        print(preview_polyline(series_values(points, 0), ds.preview_points))
    else:
        print(format_csv(points))


if __name__ == "__main__":
    main()
