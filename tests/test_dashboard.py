from __future__ import annotations

import pytest

pytest.importorskip("streamlit")

from gapminder_eda.dashboard import app as dashboard_app
from gapminder_eda.data.load import value_kind


def test_dashboard_resources_load(config_path):
    pytest.importorskip("gapminder")
    cfg, clean, broken = dashboard_app.load_resources(config_path=config_path)
    column = cfg["error"]["column"]
    assert clean.shape == broken.shape
    assert value_kind(clean[column]) == "float"
    assert value_kind(broken[column]) == "text"


def test_dashboard_lists_all_strategies():
    assert set(dashboard_app.STRATEGIES.values()) == {"known_location", "known_content", "unknown"}
