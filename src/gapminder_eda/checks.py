"""Internal-consistency checks for the tutorial's error and repair walkthrough."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Tuple

import numpy as np
import pandas as pd

from .data.errors import plant_decimal_comma, to_decimal_comma
from .data.load import is_numeric_kind, value_kind
from .data.repair import RepairResult, repair_known_content, repair_known_location, repair_unknown


@dataclass
class CheckResult:
    name: str
    passed: bool
    detail: str


def error_settings(clean: pd.DataFrame, cfg: Dict[str, Any]) -> Tuple[str, Hashable, str, float]:
    """Column, row label, malformed entry and the value that entry was meant to be."""
    err = cfg.get("error", {})
    column = err.get("column") or "gdpPercap"
    row = err.get("row", 0)
    if column not in clean.columns:
        raise KeyError(f"Column '{column}' not found in dataframe.")
    if row not in clean.index:
        raise KeyError(f"Row label {row!r} not found in dataframe.")
    kind = value_kind(clean[column])
    if kind != "float":
        raise ValueError(f"Error column '{column}' holds {kind} values; choose a float column.")
    bad = err.get("value") or to_decimal_comma(clean.at[row, column])
    intended = float(str(bad).replace(",", "."))
    return column, row, str(bad), intended


def run_repairs(broken: pd.DataFrame, column: str, row: Hashable, bad: str, intended: float) -> List[RepairResult]:
    return [
        repair_known_location(broken, column, row, intended),
        repair_known_content(broken, column, bad, bad.replace(",", ".")),
        repair_unknown(broken, column),
    ]


def _second_row(clean: pd.DataFrame, cfg: Dict[str, Any], row: Hashable) -> Hashable:
    candidate = cfg.get("error", {}).get("second_row")
    if candidate is not None and candidate in clean.index and candidate != row:
        return candidate
    return next(label for label in reversed(clean.index.tolist()) if label != row)


def run_consistency_checks(clean: pd.DataFrame, cfg: Dict[str, Any]) -> List[CheckResult]:
    column, row, bad, intended = error_settings(clean, cfg)
    results: List[CheckResult] = []

    expected = cfg.get("data", {}).get("expected_shape")
    if expected:
        expected = tuple(int(v) for v in expected)
        results.append(
            CheckResult("shape", clean.shape == expected, f"expected {expected}, got {clean.shape}")
        )

    broken = plant_decimal_comma(clean, column, row, bad)
    before, after = value_kind(clean[column]), value_kind(broken[column])
    results.append(
        CheckResult(
            "injection_coerces_column",
            is_numeric_kind(before) and after == "text",
            f"{column}: {before} → {after}",
        )
    )

    for result in run_repairs(broken, column, row, bad, intended):
        fixed = float(result.frame.at[row, column])
        ok = is_numeric_kind(result.after_kind) and bool(np.isclose(fixed, intended, rtol=1e-12, atol=0.0))
        results.append(
            CheckResult(
                f"repair_{result.strategy}",
                ok,
                f"{result.before_kind} → {result.after_kind}; row {row!r} = {fixed!r} (intended {intended!r})",
            )
        )

    other = _second_row(clean, cfg, row)
    doubly_broken = plant_decimal_comma(broken, column, other)
    swept = repair_unknown(doubly_broken, column)
    fixed_col = swept.frame[column]
    ok = (
        set(swept.rows) == {row, other}
        and is_numeric_kind(swept.after_kind)
        and bool(np.allclose(fixed_col.to_numpy(dtype=float), clean[column].to_numpy(dtype=float)))
    )
    results.append(
        CheckResult(
            "replacement_covers_whole_column",
            ok,
            f"located rows {swept.rows}; every separator in '{column}' replaced",
        )
    )
    return results


def all_passed(results: List[CheckResult]) -> bool:
    return all(r.passed for r in results)


__all__ = ["CheckResult", "error_settings", "run_repairs", "run_consistency_checks", "all_passed"]
