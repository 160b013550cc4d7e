from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st
import sys
import os

# Add the src directory to Python path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))

from gapminder_eda.checks import error_settings, run_consistency_checks
from gapminder_eda.config import DEFAULT_CONFIG_PATH, load_config
from gapminder_eda.data.errors import plant_decimal_comma
from gapminder_eda.data.inspect import column_types, dimensions, preview, structure, summarize
from gapminder_eda.data.load import load_gapminder, value_kind
from gapminder_eda.data.repair import (
    locate_coercion_failures,
    repair_known_content,
    repair_known_location,
    repair_unknown,
)
from gapminder_eda.viz.plots import apply_theme, box_plot, dual_axis_plot, scatter_plot

STRATEGIES = {
    "Location and content known": "known_location",
    "Content known, location unknown": "known_content",
    "Neither known": "unknown",
}


def load_resources(config_path: Path = DEFAULT_CONFIG_PATH):
    cfg = load_config(config_path)
    clean = load_gapminder(cfg)
    column, row, bad, _ = error_settings(clean, cfg)
    broken = plant_decimal_comma(clean, column, row, bad)
    return cfg, clean, broken


def render_repair(strategy: str, broken: pd.DataFrame, cfg: Dict[str, Any], clean: pd.DataFrame) -> None:
    column, row, bad, intended = error_settings(clean, cfg)
    if strategy == "known_location":
        st.code(f"repair_known_location(broken, {column!r}, {row!r}, {intended!r})", language="python")
        result = repair_known_location(broken, column, row, intended)
    elif strategy == "known_content":
        good = bad.replace(",", ".")
        st.code(f"repair_known_content(broken, {column!r}, {bad!r}, {good!r})", language="python")
        result = repair_known_content(broken, column, bad, good)
    else:
        st.code(f"repair_unknown(broken, {column!r})", language="python")
        suspects = locate_coercion_failures(broken[column])
        st.write("Rows that fail numeric conversion:")
        st.dataframe(broken.loc[suspects], use_container_width=True)
        result = repair_unknown(broken, column)

    c1, c2, c3 = st.columns(3)
    c1.metric("Kind before", result.before_kind)
    c2.metric("Kind after", result.after_kind)
    c3.metric(f"{column} at row {row}", f"{result.frame.at[row, column]:.7f}")


def main() -> None:
    st.set_page_config(page_title="Gapminder data check", layout="wide")

    cfg, clean, broken = load_resources()
    plot_cfg = cfg.get("plots", {})
    apply_theme(plot_cfg)
    column, row, bad, _ = error_settings(clean, cfg)

    st.title(cfg["report"].get("title", "Gapminder walkthrough"))

    sidebar = st.sidebar
    sidebar.header("Options")
    countries = sorted(clean["country"].unique())
    default_country = plot_cfg.get("country", "Norway")
    country = sidebar.selectbox(
        "Country for dual-axis chart",
        countries,
        index=countries.index(default_country) if default_country in countries else 0,
    )
    mode = sidebar.radio("Secondary axis", ("scaled", "twin"), index=0)
    strategy_label = sidebar.radio("Repair strategy", list(STRATEGIES.keys()), index=0)
    preview_rows = sidebar.slider("Preview rows", 3, 20, int(cfg["report"].get("preview_rows", 6)))

    st.header("1. Inspect")
    rows, cols = dimensions(clean)
    c1, c2 = st.columns(2)
    c1.metric("Rows", rows)
    c2.metric("Columns", cols)
    st.dataframe(preview(clean, preview_rows), use_container_width=True)
    with st.expander("Structure", expanded=True):
        st.dataframe(structure(clean), use_container_width=True)
    with st.expander("Summary", expanded=False):
        st.dataframe(summarize(clean).astype(str), use_container_width=True)

    st.header("2. Plant an error")
    st.code(f"broken = plant_decimal_comma(df, {column!r}, {row!r}, {bad!r})", language="python")
    st.write(f"`{column}`: **{value_kind(clean[column])}** → **{value_kind(broken[column])}**")
    st.json(column_types(broken))

    st.header("3. Repair")
    render_repair(STRATEGIES[strategy_label], broken, cfg, clean)

    st.header("4. Explore")
    palette = plot_cfg.get("palette")
    fig = scatter_plot(clean, log_x=bool(plot_cfg.get("log_x", True)), palette=palette)
    st.pyplot(fig)
    plt.close(fig)
    fig = box_plot(clean, jitter=bool(plot_cfg.get("jitter", True)), palette=palette)
    st.pyplot(fig)
    plt.close(fig)
    colors = plot_cfg.get("line_colors") or ("#0072B2", "#D55E00")
    fig = dual_axis_plot(clean, country, mode=mode, colors=colors)
    st.pyplot(fig)
    plt.close(fig)

    st.header("5. Consistency checks")
    for check in run_consistency_checks(clean, cfg):
        if check.passed:
            st.success(f"{check.name}: {check.detail}")
        else:
            st.error(f"{check.name}: {check.detail}")


if __name__ == "__main__":
    main()
