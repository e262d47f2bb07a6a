"""
Tests for wide-table column filtering and reshaping.
"""

import pandas as pd
import pytest

from poverty_inflation.errors import MissingColumnError, ParseError
from poverty_inflation.parsing.wide_table import (
    parse_year_label,
    shared_year_columns,
    filter_year_columns,
    melt_year_table,
)


def make_wide_table(countries, first_year, last_year, fill="1") -> pd.DataFrame:
    """Wide table with one string column per year."""
    data = {"country": countries}
    for year in range(first_year, last_year + 1):
        data[str(year)] = [fill] * len(countries)
    return pd.DataFrame(data)


class TestParseYearLabel:

    def test_text_label(self):
        assert parse_year_label("1961") == 1961

    def test_whitespace(self):
        assert parse_year_label(" 2023 ") == 2023

    def test_int_label(self):
        assert parse_year_label(1999) == 1999

    @pytest.mark.parametrize("label", ["19x1", "1961.5", "", "year", True])
    def test_invalid_label(self, label):
        with pytest.raises(ParseError):
            parse_year_label(label)


class TestSharedYearColumns:

    def test_reference_coverage_windows(self):
        """Poverty 1800-2100 and inflation 1961-2023 share exactly 1961-2023."""
        poverty = make_wide_table(["A"], 1800, 2100)
        inflation = make_wide_table(["A"], 1961, 2023)

        labels = shared_year_columns(poverty, inflation)

        assert labels == [str(y) for y in range(1961, 2024)]

    def test_sorted_numerically(self):
        left = pd.DataFrame({"country": ["A"], "2000": ["1"], "999": ["1"], "1990": ["1"]})
        right = pd.DataFrame({"country": ["A"], "1990": ["1"], "2000": ["1"], "999": ["1"]})

        assert shared_year_columns(left, right) == ["999", "1990", "2000"]

    def test_missing_country_column(self):
        left = make_wide_table(["A"], 2000, 2001).rename(columns={"country": "name"})
        right = make_wide_table(["A"], 2000, 2001)

        with pytest.raises(MissingColumnError):
            shared_year_columns(left, right)

    def test_no_overlap(self):
        left = make_wide_table(["A"], 1900, 1910)
        right = make_wide_table(["A"], 2000, 2010)

        with pytest.raises(MissingColumnError):
            shared_year_columns(left, right)

    def test_shared_non_integer_label(self):
        left = pd.DataFrame({"country": ["A"], "2000": ["1"], "notes": ["x"]})
        right = pd.DataFrame({"country": ["A"], "2000": ["1"], "notes": ["y"]})

        with pytest.raises(ParseError):
            shared_year_columns(left, right)

    def test_unshared_non_integer_label_ignored(self):
        left = pd.DataFrame({"country": ["A"], "2000": ["1"], "notes": ["x"]})
        right = pd.DataFrame({"country": ["A"], "2000": ["1"]})

        assert shared_year_columns(left, right) == ["2000"]


class TestFilterAndMelt:

    def test_filter_keeps_country_and_labels(self):
        df = make_wide_table(["A", "B"], 1990, 2000)
        out = filter_year_columns(df, ["1995", "1996"])

        assert list(out.columns) == ["country", "1995", "1996"]
        assert list(df.columns)[0] == "country" and len(df.columns) == 12

    def test_filter_strips_labels(self):
        df = pd.DataFrame({"country": ["A"], " 1995 ": ["1"]})
        out = filter_year_columns(df, ["1995"])
        assert list(out.columns) == ["country", "1995"]

    def test_filter_missing_label(self):
        df = make_wide_table(["A"], 1990, 1991)
        with pytest.raises(MissingColumnError):
            filter_year_columns(df, ["1992"])

    def test_melt_shape_and_types(self):
        df = make_wide_table(["A", "B"], 2000, 2002, fill="5")
        long_df = melt_year_table(df, "poverty_rate")

        assert list(long_df.columns) == ["country", "year", "poverty_rate"]
        assert len(long_df) == 6
        assert long_df["year"].dtype == "int64"
        assert set(long_df["year"]) == {2000, 2001, 2002}
        assert (long_df["poverty_rate"] == "5").all()

    def test_melt_keeps_missing_values(self):
        df = pd.DataFrame({"country": ["A"], "2000": [None], "2001": ["2"]})
        long_df = melt_year_table(df, "inflation_rate")

        assert len(long_df) == 2
        assert long_df["inflation_rate"].isna().sum() == 1

    def test_melt_drops_duplicate_countries(self):
        df = pd.DataFrame({"country": ["A", "A"], "2000": ["1", "2"]})
        long_df = melt_year_table(df, "inflation_rate")

        assert len(long_df) == 1
        assert long_df["inflation_rate"].iloc[0] == "1"

    def test_melt_bad_label(self):
        df = pd.DataFrame({"country": ["A"], "20x0": ["1"]})
        with pytest.raises(ParseError):
            melt_year_table(df, "inflation_rate")

    def test_melt_missing_country(self):
        df = pd.DataFrame({"name": ["A"], "2000": ["1"]})
        with pytest.raises(MissingColumnError):
            melt_year_table(df, "inflation_rate")
