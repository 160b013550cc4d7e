"""Synthetic data-entry errors planted into a copy of the clean dataset."""

from __future__ import annotations

from typing import Any, Hashable, Optional

import numpy as np
import pandas as pd

from .load import value_kind


def to_decimal_comma(value: Any) -> str:
    """Format a number the way a continental-European keyboard would enter it."""
    if isinstance(value, str):
        text = value.strip()
    elif isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        text = f"{value}.0"
    else:
        text = np.format_float_positional(float(value), unique=True, trim="0")
    if "." not in text:
        text = f"{text}.0"
    return text.replace(".", ",")


def plant_decimal_comma(
    df: pd.DataFrame,
    column: str,
    row: Hashable,
    value: Optional[str] = None,
) -> pd.DataFrame:
    """
    Return a copy of ``df`` where one cell of ``column`` holds a decimal-comma string.

    A single text entry forces the whole column to text, so every value in
    ``column`` is rendered as a string in the copy, not just the planted one.

    Args:
        df: Clean dataset; left untouched.
        column: Float column to corrupt (or one already turned into text).
        row: Index label of the cell to corrupt.
        value: Malformed entry to plant. Defaults to the clean cell rendered
            with a comma as the decimal separator.
    """
    if column not in df.columns:
        raise KeyError(f"Column '{column}' not found in dataframe.")
    if row not in df.index:
        raise KeyError(f"Row label {row!r} not found in dataframe.")
    kind = value_kind(df[column])
    if kind not in {"float", "text"}:
        raise ValueError(
            f"Column '{column}' holds {kind} values; a decimal-comma entry needs a float column."
        )

    out = df.copy()
    bad = value if value is not None else to_decimal_comma(out.at[row, column])
    text = out[column].astype(str)
    text.loc[row] = bad
    out[column] = text
    return out


__all__ = ["to_decimal_comma", "plant_decimal_comma"]
