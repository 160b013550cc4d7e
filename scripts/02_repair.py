"""
02_repair.py
~~~~~~~~~~~~
Plants a decimal-comma entry into a copy of the dataset, applies the three
repair strategies and reports the column kind before and after each one.
Exits non-zero when any consistency check fails.
"""

import argparse
import sys
from pathlib import Path

import pandas as pd

from gapminder_eda.checks import all_passed, error_settings, run_consistency_checks, run_repairs
from gapminder_eda.config import DEFAULT_CONFIG_PATH, load_config, output_dirs
from gapminder_eda.data import load_gapminder, plant_decimal_comma, value_kind


def main():
    ap = argparse.ArgumentParser(
        description="Stage 02 – plant a data-entry error and repair it three ways."
    )
    ap.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    args = ap.parse_args()

    cfg = load_config(Path(args.config))
    clean = load_gapminder(cfg)
    column, row, bad, intended = error_settings(clean, cfg)

    broken = plant_decimal_comma(clean, column, row, bad)
    print(f"Planted {bad!r} in '{column}' at row {row!r}: {value_kind(clean[column])} → {value_kind(broken[column])}")

    rows = []
    for result in run_repairs(broken, column, row, bad, intended):
        print(
            f"  {result.strategy:<15} rows={result.rows} "
            f"{result.before_kind} → {result.after_kind} value={result.frame.at[row, column]!r}"
        )
        rows.append(
            {
                "strategy": result.strategy,
                "rows": result.rows,
                "before_kind": result.before_kind,
                "after_kind": result.after_kind,
                "value": result.frame.at[row, column],
            }
        )

    out_tabs = output_dirs(cfg)["tables"]
    out_tabs.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(rows).to_csv(out_tabs / "repairs.csv", index=False)

    checks = run_consistency_checks(clean, cfg)
    for check in checks:
        print(f"{'✓' if check.passed else '✗'} {check.name}: {check.detail}")
    if not all_passed(checks):
        sys.exit(1)


if __name__ == "__main__":
    main()
