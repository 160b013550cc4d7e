"""
01_scan.py
~~~~~~~~~~
First stage of the walkthrough: load the Gapminder panel and write the
inspection tables (preview, structure, summary, missing values, column
kinds) under outputs/tables.
"""

import argparse
from pathlib import Path

from gapminder_eda.config import DEFAULT_CONFIG_PATH
from gapminder_eda.data import scan_dataset


def main():
    ap = argparse.ArgumentParser(
        description="Stage 01 – inspect the dataset and write preview/structure/summary tables."
    )
    ap.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    args = ap.parse_args()
    scan_dataset(Path(args.config))


if __name__ == "__main__":
    main()
