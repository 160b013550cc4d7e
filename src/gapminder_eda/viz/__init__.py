"""Exploratory charts: scatter, box with jitter, dual-axis lines."""

from .plots import (
    box_plot,
    dual_axis_plot,
    make_tutorial_figures,
    scatter_plot,
    secondary_axis_scale,
)

__all__ = [
    "scatter_plot",
    "box_plot",
    "dual_axis_plot",
    "secondary_axis_scale",
    "make_tutorial_figures",
]
