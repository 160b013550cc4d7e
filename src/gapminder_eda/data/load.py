from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import pandas as pd
from pandas.api import types as ptypes

EXPECTED_COLUMNS = ["country", "continent", "year", "lifeExp", "pop", "gdpPercap"]

TEXT_COLUMNS = ["country"]
CATEGORICAL_COLUMNS = ["continent"]
INTEGER_COLUMNS = ["year", "pop"]
FLOAT_COLUMNS = ["lifeExp", "gdpPercap"]

NUMERIC_KINDS = {"integer", "float"}


def value_kind(series: pd.Series) -> str:
    """Single-word description of the value type a column holds."""
    dtype = series.dtype
    if isinstance(dtype, pd.CategoricalDtype):
        return "categorical"
    if ptypes.is_bool_dtype(dtype):
        return "logical"
    if ptypes.is_integer_dtype(dtype):
        return "integer"
    if ptypes.is_float_dtype(dtype):
        return "float"
    if ptypes.is_string_dtype(dtype) or ptypes.is_object_dtype(dtype):
        return "text"
    return str(dtype)


def is_numeric_kind(kind: str) -> bool:
    return kind in NUMERIC_KINDS


def _read_bundled() -> pd.DataFrame:
    from gapminder import gapminder

    return gapminder.copy()


def _read_file(cfg: Dict[str, Any]) -> pd.DataFrame:
    raw_dir = Path(cfg["paths"].get("raw", "data/raw"))
    data_cfg = cfg["data"]
    path = raw_dir / data_cfg["file"]
    df = pd.read_csv(path, sep=data_cfg.get("sep", ","))
    df.columns = [str(c).strip() for c in df.columns]
    return df


def standardise_types(df: pd.DataFrame) -> pd.DataFrame:
    missing = [c for c in EXPECTED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Dataset is missing expected columns: {missing}")
    df = df[EXPECTED_COLUMNS].copy()
    for col in TEXT_COLUMNS:
        df[col] = df[col].astype(str).str.strip()
    for col in CATEGORICAL_COLUMNS:
        df[col] = df[col].astype(str).str.strip().astype("category")
    for col in INTEGER_COLUMNS:
        df[col] = pd.to_numeric(df[col]).astype("int64")
    for col in FLOAT_COLUMNS:
        df[col] = pd.to_numeric(df[col]).astype("float64")
    return df.reset_index(drop=True)


def load_gapminder(cfg: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
    cfg = cfg or {"paths": {}, "data": {}}
    if cfg.get("data", {}).get("file"):
        df = _read_file(cfg)
    else:
        df = _read_bundled()
    return standardise_types(df)


__all__ = [
    "EXPECTED_COLUMNS",
    "load_gapminder",
    "standardise_types",
    "value_kind",
    "is_numeric_kind",
]
