from __future__ import annotations

import pandas as pd
import pytest

from gapminder_eda.data.errors import plant_decimal_comma
from gapminder_eda.data.repair import (
    coerce_numeric,
    locate_coercion_failures,
    repair_known_content,
    repair_known_location,
    repair_unknown,
)

INTENDED = 779.4453145


@pytest.fixture
def broken(sample_df: pd.DataFrame) -> pd.DataFrame:
    return plant_decimal_comma(sample_df, "gdpPercap", 0)


def test_locate_finds_only_the_planted_cell(broken: pd.DataFrame):
    assert locate_coercion_failures(broken["gdpPercap"]) == [0]


def test_locate_ignores_missing_tokens():
    series = pd.Series(["1.5", "nan", "", None, "2,5"])
    assert locate_coercion_failures(series) == [4]


def test_coerce_numeric_lists_offending_rows(broken: pd.DataFrame):
    with pytest.raises(ValueError, match=r"rows \[0\]"):
        coerce_numeric(broken["gdpPercap"])


def test_repair_known_location(broken: pd.DataFrame, sample_df: pd.DataFrame):
    result = repair_known_location(broken, "gdpPercap", 0, INTENDED)
    assert (result.before_kind, result.after_kind) == ("text", "float")
    assert result.rows == [0]
    assert result.frame.at[0, "gdpPercap"] == INTENDED
    pd.testing.assert_series_equal(result.frame["gdpPercap"], sample_df["gdpPercap"])


def test_repair_known_content(broken: pd.DataFrame):
    result = repair_known_content(broken, "gdpPercap", "779,4453145", "779.4453145")
    assert result.rows == [0]
    assert result.after_kind == "float"
    assert result.frame.at[0, "gdpPercap"] == INTENDED


def test_repair_known_content_missing_value(broken: pd.DataFrame):
    with pytest.raises(ValueError, match="does not occur"):
        repair_known_content(broken, "gdpPercap", "1,23", "1.23")


def test_repair_unknown(broken: pd.DataFrame):
    result = repair_unknown(broken, "gdpPercap")
    assert result.rows == [0]
    assert result.after_kind == "float"
    assert result.frame.at[0, "gdpPercap"] == INTENDED


def test_repair_unknown_replaces_every_separator(broken: pd.DataFrame, sample_df: pd.DataFrame):
    twice = plant_decimal_comma(broken, "gdpPercap", 4)
    assert locate_coercion_failures(twice["gdpPercap"]) == [0, 4]

    # fixing only the known entry leaves the second one behind
    with pytest.raises(ValueError, match=r"rows \[4\]"):
        repair_known_content(twice, "gdpPercap", "779,4453145", "779.4453145")

    result = repair_unknown(twice, "gdpPercap")
    assert result.rows == [0, 4]
    pd.testing.assert_series_equal(result.frame["gdpPercap"], sample_df["gdpPercap"])


def test_repair_unknown_leaves_input_untouched(broken: pd.DataFrame):
    before = broken.copy()
    repair_unknown(broken, "gdpPercap")
    pd.testing.assert_frame_equal(broken, before)


def test_unrepairable_value_still_raises(sample_df: pd.DataFrame):
    broken = plant_decimal_comma(sample_df, "gdpPercap", 1, "1,234.5")
    with pytest.raises(ValueError, match="non-numeric"):
        repair_unknown(broken, "gdpPercap")


@pytest.fixture
def broken_pop(sample_df: pd.DataFrame) -> pd.DataFrame:
    df = sample_df.copy()
    text = df["pop"].astype(str)
    text.loc[0] = "8,425,333"
    df["pop"] = text
    return df


def test_integer_column_stays_integer_after_every_repair(broken_pop: pd.DataFrame, sample_df: pd.DataFrame):
    by_location = repair_known_location(broken_pop, "pop", 0, 8425333.0)
    by_content = repair_known_content(broken_pop, "pop", "8,425,333", "8425333")
    for result in (by_location, by_content):
        assert result.after_kind == "integer"
        pd.testing.assert_series_equal(result.frame["pop"], sample_df["pop"])
