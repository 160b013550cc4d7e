from __future__ import annotations

import pandas as pd
import pytest

from gapminder_eda.data.errors import plant_decimal_comma, to_decimal_comma
from gapminder_eda.data.load import value_kind


def test_decimal_comma_format():
    assert to_decimal_comma(779.4453145) == "779,4453145"
    assert to_decimal_comma("12.5") == "12,5"


def test_planted_error_coerces_whole_column(sample_df: pd.DataFrame):
    broken = plant_decimal_comma(sample_df, "gdpPercap", 0)
    assert value_kind(sample_df["gdpPercap"]) == "float"
    assert value_kind(broken["gdpPercap"]) == "text"
    assert broken.at[0, "gdpPercap"] == "779,4453145"
    assert broken.at[1, "gdpPercap"] == "820.8530296"


def test_other_columns_keep_their_kind(sample_df: pd.DataFrame):
    broken = plant_decimal_comma(sample_df, "gdpPercap", 0)
    for col in ("year", "lifeExp", "pop"):
        assert broken[col].dtype == sample_df[col].dtype


def test_source_frame_is_not_mutated(sample_df: pd.DataFrame):
    before = sample_df.copy()
    plant_decimal_comma(sample_df, "gdpPercap", 2, "853,1")
    pd.testing.assert_frame_equal(sample_df, before)


def test_explicit_value_is_planted(sample_df: pd.DataFrame):
    broken = plant_decimal_comma(sample_df, "lifeExp", 3, "72,67")
    assert broken.at[3, "lifeExp"] == "72,67"


@pytest.mark.parametrize("column,row", [("gdp", 0), ("gdpPercap", 99)])
def test_unknown_labels_raise(sample_df: pd.DataFrame, column, row):
    with pytest.raises(KeyError):
        plant_decimal_comma(sample_df, column, row)


def test_planting_into_real_dataset(gapminder_df: pd.DataFrame):
    broken = plant_decimal_comma(gapminder_df, "gdpPercap", 0)
    assert value_kind(broken["gdpPercap"]) == "text"
    assert broken.shape == gapminder_df.shape


@pytest.mark.parametrize(
    "value,expected",
    [(1e-05, "0,00001"), (8425333, "8425333,0"), (2.0, "2,0"), ("12", "12,0")],
)
def test_decimal_comma_always_has_a_separator(value, expected):
    assert to_decimal_comma(value) == expected


def test_tiny_float_is_planted_as_unparsable_text():
    df = pd.DataFrame({"rate": [1e-05, 0.5]})
    broken = plant_decimal_comma(df, "rate", 0)
    assert broken.at[0, "rate"] == "0,00001"
    assert pd.isna(pd.to_numeric(broken["rate"], errors="coerce")[0])


@pytest.mark.parametrize("column", ["pop", "year", "continent"])
def test_non_float_columns_are_rejected(sample_df: pd.DataFrame, column):
    with pytest.raises(ValueError, match="float column"):
        plant_decimal_comma(sample_df, column, 0)
