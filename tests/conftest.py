import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from gapminder_eda.config import load_config
from gapminder_eda.data.load import load_gapminder, standardise_types


@pytest.fixture(scope="session")
def config_path() -> Path:
    return ROOT / "config.yaml"


@pytest.fixture(scope="session")
def cfg(config_path):
    return load_config(config_path)


@pytest.fixture
def sample_df() -> pd.DataFrame:
    """Two countries, three survey years, Gapminder-shaped."""
    raw = pd.DataFrame(
        {
            "country": ["Afghanistan"] * 3 + ["Norway"] * 3,
            "continent": ["Asia"] * 3 + ["Europe"] * 3,
            "year": [1952, 1957, 1962] * 2,
            "lifeExp": [28.801, 30.332, 31.997, 72.67, 73.44, 73.47],
            "pop": [8425333, 9240934, 10267083, 3327728, 3491938, 3638919],
            "gdpPercap": [779.4453145, 820.8530296, 853.10071, 10095.42172, 11653.97304, 13450.40151],
        }
    )
    return standardise_types(raw)


@pytest.fixture
def sample_cfg(tmp_path) -> dict:
    return {
        "paths": {"raw": str(tmp_path / "raw"), "outputs": str(tmp_path / "outputs")},
        "data": {"file": None, "expected_shape": [6, 6]},
        "error": {"column": "gdpPercap", "row": 0, "value": None, "second_row": 4},
        "plots": {"country": "Norway", "dual_axis_mode": "scaled", "palette": {"Asia": "#009E73"}},
        "report": {"title": "Sample walkthrough", "echo": True, "show_output": True, "show_figures": True},
    }


@pytest.fixture(scope="session")
def gapminder_df(cfg):
    pytest.importorskip("gapminder")
    return load_gapminder(cfg)


@pytest.fixture(scope="session")
def load_script():
    import importlib.util

    def _load(filename: str):
        script_path = ROOT / "scripts" / filename
        module_name = "script_" + script_path.stem.lstrip("0123456789_")
        spec = importlib.util.spec_from_file_location(module_name, script_path)
        module = importlib.util.module_from_spec(spec)
        assert spec.loader is not None
        spec.loader.exec_module(module)
        return module

    return _load
