from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Sequence

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

DEFAULT_LINE_COLORS = ("#0072B2", "#D55E00")

AXIS_LABELS: Dict[str, str] = {
    "country": "Country",
    "continent": "Continent",
    "year": "Year",
    "lifeExp": "Life expectancy (years)",
    "pop": "Population",
    "gdpPercap": "GDP per capita (USD)",
}


def _label(col: str) -> str:
    return AXIS_LABELS.get(col, col)


def apply_theme(plot_cfg: Optional[Dict[str, Any]] = None) -> None:
    plot_cfg = plot_cfg or {}
    sns.set_theme(
        style=plot_cfg.get("style", "whitegrid"),
        context=plot_cfg.get("context", "notebook"),
    )


def continent_palette(
    levels: Iterable[str],
    overrides: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Manual colour per level; levels without an override take the next default colour."""
    levels = [str(v) for v in levels]
    overrides = {str(k): v for k, v in (overrides or {}).items()}
    fill = iter(sns.color_palette("deep", n_colors=max(len(levels), 1)))
    return {lvl: overrides[lvl] if lvl in overrides else next(fill) for lvl in levels}


def _levels(series: pd.Series) -> Sequence[str]:
    if isinstance(series.dtype, pd.CategoricalDtype):
        return [str(c) for c in series.cat.categories]
    return sorted(series.astype(str).unique())


def scatter_plot(
    df: pd.DataFrame,
    x: str = "gdpPercap",
    y: str = "lifeExp",
    hue: Optional[str] = "continent",
    log_x: bool = True,
    palette: Optional[Dict[str, str]] = None,
    alpha: float = 0.6,
) -> plt.Figure:
    fig, ax = plt.subplots(figsize=(8, 5))
    data = df.copy()
    kwargs: Dict[str, Any] = {}
    if hue:
        data[hue] = data[hue].astype(str)
        kwargs["hue"] = hue
        kwargs["palette"] = continent_palette(_levels(df[hue]), palette)
        kwargs["hue_order"] = list(kwargs["palette"].keys())
    sns.scatterplot(data=data, x=x, y=y, alpha=alpha, ax=ax, **kwargs)
    if log_x:
        ax.set_xscale("log")
    ax.set_xlabel(_label(x) + (" (log scale)" if log_x else ""))
    ax.set_ylabel(_label(y))
    ax.set_title(f"{_label(y)} vs {_label(x)}")
    return fig


def box_plot(
    df: pd.DataFrame,
    x: str = "continent",
    y: str = "lifeExp",
    jitter: bool = True,
    palette: Optional[Dict[str, str]] = None,
) -> plt.Figure:
    fig, ax = plt.subplots(figsize=(8, 5))
    data = df.copy()
    data[x] = data[x].astype(str)
    colors = continent_palette(_levels(df[x]), palette)
    order = list(colors.keys())
    sns.boxplot(
        data=data,
        x=x,
        y=y,
        hue=x,
        order=order,
        hue_order=order,
        palette=colors,
        legend=False,
        showfliers=not jitter,
        ax=ax,
    )
    if jitter:
        sns.stripplot(data=data, x=x, y=y, order=order, color="black", size=2, alpha=0.35, jitter=0.25, ax=ax)
    ax.set_xlabel(_label(x))
    ax.set_ylabel(_label(y))
    ax.set_title(f"{_label(y)} by {_label(x).lower()}")
    return fig


def secondary_axis_scale(primary: pd.Series, secondary: pd.Series) -> float:
    """Factor that maps the secondary series onto the range of the primary axis."""
    p = pd.to_numeric(primary, errors="coerce").dropna()
    s = pd.to_numeric(secondary, errors="coerce").dropna()
    if p.empty or s.empty:
        raise ValueError("Both series need at least one numeric value to share an axis.")
    p_max, s_max = float(p.max()), float(s.max())
    if p_max <= 0 or s_max <= 0:
        raise ValueError(f"Cannot scale axes with non-positive maxima ({p_max}, {s_max}).")
    return p_max / s_max


def dual_axis_plot(
    df: pd.DataFrame,
    country: str,
    x: str = "year",
    primary: str = "lifeExp",
    secondary: str = "gdpPercap",
    mode: str = "scaled",
    colors: Sequence[str] = DEFAULT_LINE_COLORS,
) -> plt.Figure:
    """
    Line chart of two differently-scaled quantities for one country.

    ``scaled`` draws the secondary series rescaled onto the primary axes and
    labels a right-hand axis through the inverse transform. ``twin`` gives the
    secondary series its own independent y axis.
    """
    if mode not in {"scaled", "twin"}:
        raise ValueError(f"Unknown dual-axis mode '{mode}'; expected 'scaled' or 'twin'.")
    sub = df[df["country"].astype(str) == str(country)].sort_values(x)
    if sub.empty:
        raise ValueError(f"Country '{country}' not found in dataframe.")

    c1, c2 = colors[0], colors[1]
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(sub[x], sub[primary], color=c1, marker="o", label=_label(primary))
    ax.set_xlabel(_label(x))
    ax.set_ylabel(_label(primary), color=c1)
    ax.tick_params(axis="y", colors=c1)

    if mode == "scaled":
        scale = secondary_axis_scale(sub[primary], sub[secondary])
        ax.plot(sub[x], sub[secondary] * scale, color=c2, marker="s", label=_label(secondary))
        right = ax.secondary_yaxis("right", functions=(lambda v: v / scale, lambda v: v * scale))
    else:
        right = ax.twinx()
        right.plot(sub[x], sub[secondary], color=c2, marker="s", label=_label(secondary))
        right.grid(False)
    right.set_ylabel(_label(secondary), color=c2)
    right.tick_params(axis="y", colors=c2)

    lines = list(ax.get_lines()) + (list(right.get_lines()) if mode == "twin" else [])
    ax.legend(handles=lines, labels=[line.get_label() for line in lines], loc="upper left")

    ax.set_title(f"{country}: {_label(primary)} and {_label(secondary)}")
    return fig


def save_figure(fig: plt.Figure, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
    return path


def make_tutorial_figures(df: pd.DataFrame, cfg: Dict[str, Any], out_dir: Path) -> Dict[str, Path]:
    plot_cfg = cfg.get("plots", {})
    apply_theme(plot_cfg)
    palette = plot_cfg.get("palette")
    country = plot_cfg.get("country", "Norway")
    colors = plot_cfg.get("line_colors") or DEFAULT_LINE_COLORS
    out_dir = Path(out_dir)

    figures = {
        "scatter": save_figure(
            scatter_plot(df, log_x=bool(plot_cfg.get("log_x", True)), palette=palette),
            out_dir / "scatter_gdp_life.png",
        ),
        "box": save_figure(
            box_plot(df, jitter=bool(plot_cfg.get("jitter", True)), palette=palette),
            out_dir / "box_life_continent.png",
        ),
        "dual_axis": save_figure(
            dual_axis_plot(df, country, mode=plot_cfg.get("dual_axis_mode", "scaled"), colors=colors),
            out_dir / f"dual_axis_{str(country).replace(' ', '_')}.png",
        ),
    }
    return figures


__all__ = [
    "apply_theme",
    "continent_palette",
    "scatter_plot",
    "box_plot",
    "secondary_axis_scale",
    "dual_axis_plot",
    "save_figure",
    "make_tutorial_figures",
]
