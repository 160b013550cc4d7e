"""
Manual recovery from a malformed numeric entry.

Three strategies, ordered by how much is known about the error:

* ``repair_known_location`` – both the offending cell and its correct value are known;
* ``repair_known_content`` – the malformed text is known but not where it sits;
* ``repair_unknown`` – neither is known, so failures are located through
  numeric coercion and the separator is fixed across the whole column.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, List

import pandas as pd
from pandas.api import types as ptypes

from .load import value_kind

_MISSING_TOKENS = {"", "nan", "na", "none", "<na>"}


@dataclass
class RepairResult:
    strategy: str
    column: str
    rows: List[Hashable]
    before_kind: str
    after_kind: str
    frame: pd.DataFrame = field(repr=False)


def _present(series: pd.Series) -> pd.Series:
    tokens = series.astype(str).str.strip().str.lower()
    return series.notna() & ~tokens.isin(_MISSING_TOKENS)


def locate_coercion_failures(series: pd.Series) -> List[Hashable]:
    """Index labels holding a value that turns into a missing value under numeric coercion."""
    converted = pd.to_numeric(series, errors="coerce")
    mask = converted.isna() & _present(series)
    return series.index[mask].tolist()


def coerce_numeric(series: pd.Series) -> pd.Series:
    failures = locate_coercion_failures(series)
    if failures:
        shown = failures[:10]
        raise ValueError(
            f"Column '{series.name}' has {len(failures)} non-numeric value(s) at rows {shown}: "
            f"{series.loc[shown].tolist()}"
        )
    return pd.to_numeric(series, errors="coerce")


def _check_column(df: pd.DataFrame, column: str) -> None:
    if column not in df.columns:
        raise KeyError(f"Column '{column}' not found in dataframe.")


def repair_known_location(df: pd.DataFrame, column: str, row: Hashable, value: Any) -> RepairResult:
    _check_column(df, column)
    if row not in df.index:
        raise KeyError(f"Row label {row!r} not found in dataframe.")
    out = df.copy()
    before = value_kind(out[column])
    col = out[column].copy()
    if before == "text":
        rest = pd.to_numeric(col.drop(index=row), errors="coerce")
        if isinstance(value, float) and value.is_integer() and ptypes.is_integer_dtype(rest):
            value = int(value)
        col.loc[row] = str(value)
    else:
        col.loc[row] = value
    out[column] = coerce_numeric(col)
    return RepairResult("known_location", column, [row], before, value_kind(out[column]), out)


def repair_known_content(df: pd.DataFrame, column: str, bad: str, good: Any) -> RepairResult:
    _check_column(df, column)
    out = df.copy()
    before = value_kind(out[column])
    mask = out[column].astype(str) == bad
    rows = out.index[mask].tolist()
    if not rows:
        raise ValueError(f"Value {bad!r} does not occur in column '{column}'.")
    col = out[column].mask(mask, str(good))
    out[column] = coerce_numeric(col)
    return RepairResult("known_content", column, rows, before, value_kind(out[column]), out)


def repair_unknown(
    df: pd.DataFrame,
    column: str,
    bad_sep: str = ",",
    good_sep: str = ".",
) -> RepairResult:
    _check_column(df, column)
    out = df.copy()
    before = value_kind(out[column])
    rows = locate_coercion_failures(out[column])
    # literal replacement, every occurrence in every cell
    text = out[column].astype(str).str.replace(bad_sep, good_sep, regex=False)
    out[column] = coerce_numeric(text)
    return RepairResult("unknown", column, rows, before, value_kind(out[column]), out)


__all__ = [
    "RepairResult",
    "locate_coercion_failures",
    "coerce_numeric",
    "repair_known_location",
    "repair_known_content",
    "repair_unknown",
]
