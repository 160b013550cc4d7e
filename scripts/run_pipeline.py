#!/usr/bin/env python3
"""
run_pipeline.py
~~~~~~~~~~~~~~~
Runs the staged walkthrough in order:

01_scan          → inspection tables
02_repair        → error injection, three repairs, consistency checks
03_plots         → exploratory charts
04_render_report → outputs/report.md
"""

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path
from typing import Iterable, Sequence


def _run(step: Sequence[str]) -> None:
    print(f"\nRunning: {' '.join(step)}")
    subprocess.run(step, check=True)


def _ensure_config(config_path: str) -> Path:
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Expected configuration at '{path}'.")
    return path


def build_steps(config_path: str, skip_report: bool = False) -> Iterable[list[str]]:
    exe = [sys.executable]
    steps = [
        exe + ["scripts/01_scan.py", "--config", config_path],
        exe + ["scripts/02_repair.py", "--config", config_path],
        exe + ["scripts/03_plots.py", "--config", config_path],
    ]
    if not skip_report:
        steps.append(exe + ["scripts/04_render_report.py", "--config", config_path])
    return steps


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the full Gapminder walkthrough.")
    parser.add_argument("--config", default="config.yaml", help="Path to config file.")
    parser.add_argument("--skip-report", action="store_true", help="Stop after the figures.")
    args = parser.parse_args()

    _ensure_config(args.config)
    for step in build_steps(args.config, args.skip_report):
        _run(step)

    print("\nPipeline complete. See outputs/ for artefacts.")


if __name__ == "__main__":
    main()
