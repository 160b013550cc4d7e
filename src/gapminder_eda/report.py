"""
Tutorial document: narrative, code listings, printed outputs and charts.

The walkthrough is an ordered list of ``Section`` records. ``render_markdown``
turns them into a static Markdown page; the Streamlit page renders the same
records interactively.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from .checks import error_settings, run_consistency_checks
from .config import load_config, output_dirs
from .data.errors import plant_decimal_comma
from .data.inspect import column_names, dimensions, preview, structure, summarize
from .data.load import load_gapminder, value_kind
from .data.repair import locate_coercion_failures, repair_known_content, repair_known_location, repair_unknown
from .viz.plots import make_tutorial_figures


@dataclass
class Section:
    title: str
    text: str
    code: Optional[str] = None
    output: Optional[str] = None
    figure: Optional[Path] = None


def _frame_text(df: pd.DataFrame | pd.Series) -> str:
    with pd.option_context("display.width", 120, "display.max_columns", 20):
        return df.to_string()


def build_sections(
    clean: pd.DataFrame,
    cfg: Dict[str, Any],
    figures: Optional[Dict[str, Path]] = None,
) -> List[Section]:
    figures = figures or {}
    n_preview = int(cfg.get("report", {}).get("preview_rows", 6))
    column, row, bad, intended = error_settings(clean, cfg)
    broken = plant_decimal_comma(clean, column, row, bad)
    country = cfg.get("plots", {}).get("country", "Norway")

    sections = [
        Section(
            "The dataset",
            "The Gapminder panel records life expectancy, population and GDP per capita "
            "for 142 countries every five years from 1952 to 2007.",
            "df = load_gapminder(cfg)\npreview(df)",
            _frame_text(preview(clean, n_preview)),
        ),
        Section(
            "Rows and columns",
            "Before anything else, confirm the size of the table and the names of its columns.",
            "dimensions(df)\ncolumn_names(df)",
            f"{dimensions(clean)}\n{column_names(clean)}",
        ),
        Section(
            "Column types",
            "Every column should hold a single kind of value: text, categorical, integer or float.",
            "structure(df)",
            _frame_text(structure(clean)),
        ),
        Section(
            "Summary statistics",
            "Numeric columns are summarised by their quartiles, mean and range; "
            "categorical columns by their counts.",
            "summarize(df)",
            _frame_text(summarize(clean)),
        ),
        Section(
            "A data-entry error",
            f"Suppose one value of `{column}` was typed with a decimal comma. A single text "
            f"entry is enough to turn the whole column into text.",
            f"broken = plant_decimal_comma(df, {column!r}, {row!r}, {bad!r})\n"
            f"value_kind(broken[{column!r}])",
            f"{value_kind(clean[column])} → {value_kind(broken[column])}\n"
            + _frame_text(broken[column].head(n_preview)),
        ),
        Section(
            "How the error shows up",
            f"The summary no longer reports a mean or quartiles for `{column}`; "
            "it treats the column like labels.",
            f"summarize(broken).loc[{column!r}]",
            _frame_text(summarize(broken).loc[column]),
        ),
    ]

    known = repair_known_location(broken, column, row, intended)
    sections.append(
        Section(
            "Repair 1: location and content known",
            "When we know both which cell is wrong and what it should say, overwrite it and "
            "convert the column back to numbers.",
            f"repair_known_location(broken, {column!r}, {row!r}, {intended!r})",
            f"{known.before_kind} → {known.after_kind}; row {row!r} = {known.frame.at[row, column]!r}",
        )
    )

    by_content = repair_known_content(broken, column, bad, bad.replace(",", "."))
    sections.append(
        Section(
            "Repair 2: content known, location unknown",
            "When we know the malformed text but not where it sits, search for it first.",
            f"repair_known_content(broken, {column!r}, {bad!r}, {bad.replace(',', '.')!r})",
            f"found at rows {by_content.rows}; {by_content.before_kind} → {by_content.after_kind}",
        )
    )

    failures = locate_coercion_failures(broken[column])
    swept = repair_unknown(broken, column)
    sections.append(
        Section(
            "Repair 3: neither known",
            "Converting to numbers turns every value that cannot be parsed into a missing value. "
            "Those are the suspicious entries. Replacing the comma with a dot across the whole "
            "column fixes every such entry at once.",
            f"locate_coercion_failures(broken[{column!r}])\nrepair_unknown(broken, {column!r})",
            _frame_text(broken.loc[failures])
            + f"\n{swept.before_kind} → {swept.after_kind}; row {row!r} = {swept.frame.at[row, column]!r}",
        )
    )

    sections.extend(
        [
            Section(
                "Life expectancy against wealth",
                "A log scale on the x axis spreads out the poorer countries.",
                "scatter_plot(df, log_x=True, palette=palette)",
                figure=figures.get("scatter"),
            ),
            Section(
                "Life expectancy by continent",
                "Box plots with jittered points show both the summary and the raw observations.",
                "box_plot(df, jitter=True, palette=palette)",
                figure=figures.get("box"),
            ),
            Section(
                f"Two scales for {country}",
                "Life expectancy and GDP per capita differ by orders of magnitude, so each gets "
                "its own axis.",
                f"dual_axis_plot(df, {country!r})",
                figure=figures.get("dual_axis"),
            ),
        ]
    )

    checks = run_consistency_checks(clean, cfg)
    sections.append(
        Section(
            "Consistency checks",
            "A final pass confirms the walkthrough behaves as described.",
            "run_consistency_checks(df, cfg)",
            "\n".join(f"{'✓' if c.passed else '✗'} {c.name}: {c.detail}" for c in checks),
        )
    )
    return sections


def render_markdown(
    sections: List[Section],
    options: Optional[Dict[str, Any]] = None,
    base_dir: Optional[Path] = None,
) -> str:
    options = options or {}
    echo = bool(options.get("echo", True))
    show_output = bool(options.get("show_output", True))
    show_figures = bool(options.get("show_figures", True))
    title = options.get("title", "Gapminder walkthrough")

    lines = [f"# {title}", ""]
    for section in sections:
        lines += [f"## {section.title}", "", section.text, ""]
        if echo and section.code:
            lines += ["```python", section.code, "```", ""]
        if show_output and section.output:
            lines += ["```", section.output, "```", ""]
        if show_figures and section.figure is not None:
            target = Path(section.figure)
            if base_dir is not None:
                target = Path(os.path.relpath(target, base_dir))
            lines += [f"![{section.title}]({target.as_posix()})", ""]
    return "\n".join(lines)


def render_report(config_path: str | os.PathLike | None = None) -> Path:
    cfg = load_config(config_path)
    report_cfg = cfg["report"]
    dirs = output_dirs(cfg)
    dirs["root"].mkdir(parents=True, exist_ok=True)

    clean = load_gapminder(cfg)
    figures: Dict[str, Path] = {}
    if report_cfg.get("show_figures", True):
        figures = make_tutorial_figures(clean, cfg, dirs["figs"])

    sections = build_sections(clean, cfg, figures)
    out_path = dirs["root"] / "report.md"
    out_path.write_text(render_markdown(sections, report_cfg, base_dir=dirs["root"]), encoding="utf-8")
    print(f"✓ Report rendered → {out_path}")
    return out_path


__all__ = ["Section", "build_sections", "render_markdown", "render_report"]
