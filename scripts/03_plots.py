"""
03_plots.py
~~~~~~~~~~~
Draws the exploratory charts (log-scale scatter, box plot with jitter,
dual-axis trend) into outputs/figs.
"""

import argparse
from pathlib import Path

from gapminder_eda.config import DEFAULT_CONFIG_PATH, load_config, output_dirs
from gapminder_eda.data import load_gapminder
from gapminder_eda.viz import make_tutorial_figures


def main():
    ap = argparse.ArgumentParser(description="Stage 03 – render the exploratory charts.")
    ap.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    ap.add_argument("--country", default=None, help="Country for the dual-axis chart.")
    args = ap.parse_args()

    cfg = load_config(Path(args.config))
    if args.country:
        cfg["plots"]["country"] = args.country
    df = load_gapminder(cfg)
    figs = make_tutorial_figures(df, cfg, output_dirs(cfg)["figs"])
    for name, path in figs.items():
        print(f"  {name:<10} → {path}")
    print("✓ Figures complete.")


if __name__ == "__main__":
    main()
