from __future__ import annotations

import os
from typing import Dict, List, Tuple

import pandas as pd

from ..config import load_config, output_dirs
from .load import load_gapminder, value_kind


def preview(df: pd.DataFrame, n: int = 6) -> pd.DataFrame:
    return df.head(n)


def dimensions(df: pd.DataFrame) -> Tuple[int, int]:
    return df.shape


def column_names(df: pd.DataFrame) -> List[str]:
    return [str(c) for c in df.columns]


def column_types(df: pd.DataFrame) -> Dict[str, str]:
    return {str(col): value_kind(df[col]) for col in df.columns}


def structure(df: pd.DataFrame, n_values: int = 4) -> pd.DataFrame:
    """One row per column: dtype, value kind, cardinality and a few leading values."""
    rows = []
    for col in df.columns:
        series = df[col]
        head = ", ".join(str(v) for v in series.head(n_values).tolist())
        rows.append(
            {
                "column": str(col),
                "dtype": str(series.dtype),
                "kind": value_kind(series),
                "n_unique": int(series.nunique(dropna=True)),
                "n_missing": int(series.isna().sum()),
                "first_values": head,
            }
        )
    return pd.DataFrame(rows).set_index("column")


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    return df.describe(include="all").T


def missing_values(df: pd.DataFrame) -> pd.Series:
    return df.isna().sum().sort_values(ascending=False)


def scan_dataset(config_path: str | os.PathLike | None = None) -> pd.DataFrame:
    cfg = load_config(config_path)
    df = load_gapminder(cfg)

    dirs = output_dirs(cfg)
    out_tabs = dirs["tables"]
    out_tabs.mkdir(parents=True, exist_ok=True)

    print("Shape:", dimensions(df))
    print("Columns:", ", ".join(column_names(df)))
    with open(out_tabs / "info.txt", "w") as f:
        df.info(buf=f)
    preview(df, int(cfg["report"].get("preview_rows", 6))).to_csv(out_tabs / "preview.csv", index=False)
    structure(df).to_csv(out_tabs / "structure.csv")
    summarize(df).to_csv(out_tabs / "summary.csv")
    missing_values(df).to_csv(out_tabs / "missing_values.csv")
    pd.Series(column_types(df), name="kind").to_csv(out_tabs / "column_types.csv")

    expected = cfg["data"].get("expected_shape")
    if expected and tuple(expected) != dimensions(df):
        print(f"⚠ Expected shape {tuple(expected)} but loaded {dimensions(df)}.")

    print(f"✓ Scan complete.\nTables → {out_tabs}")
    return df


__all__ = [
    "preview",
    "dimensions",
    "column_names",
    "column_types",
    "structure",
    "summarize",
    "missing_values",
    "scan_dataset",
]
