from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

import yaml


DEFAULT_CONFIG_PATH = Path("config.yaml")


def load_config(path: str | os.PathLike | None = None) -> Dict[str, Any]:
    cfg_path = Path(path) if path else DEFAULT_CONFIG_PATH
    with open(cfg_path, "r") as f:
        cfg = yaml.safe_load(f) or {}
    for section in ("paths", "data", "error", "plots", "report"):
        cfg.setdefault(section, {})
    return cfg


def output_dirs(cfg: Dict[str, Any]) -> Dict[str, Path]:
    root = Path(cfg["paths"].get("outputs", "outputs"))
    return {"root": root, "tables": root / "tables", "figs": root / "figs"}


__all__ = ["load_config", "output_dirs", "DEFAULT_CONFIG_PATH"]
