"""
04_render_report.py
~~~~~~~~~~~~~~~~~~~
Renders the full walkthrough (narrative, code listings, printed outputs and
charts) to outputs/report.md.
"""

import argparse
from pathlib import Path

from gapminder_eda.config import DEFAULT_CONFIG_PATH
from gapminder_eda.report import render_report


def main():
    ap = argparse.ArgumentParser(description="Stage 04 – render the tutorial document.")
    ap.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    args = ap.parse_args()
    render_report(Path(args.config))


if __name__ == "__main__":
    main()
