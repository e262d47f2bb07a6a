"""
Tests for numeric string normalization of rate cells.
"""

import math

import numpy as np
import pandas as pd
import pytest

from poverty_inflation.errors import ParseError
from poverty_inflation.parsing.numeric_normalizer import (
    is_missing,
    normalize_minus,
    parse_rate,
    coerce_rate,
    normalize_rate_series,
)


class TestParseRate:
    """Parsing of single cells."""

    def test_plain_number(self):
        assert parse_rate("3.5") == 3.5
        assert parse_rate(" 12 ") == 12.0

    def test_unicode_minus(self):
        assert parse_rate("−3.2") == pytest.approx(-3.2)

    def test_ascii_minus(self):
        assert parse_rate("-0.75") == -0.75

    def test_thousands_suffix_lowercase(self):
        assert parse_rate("2k") == 2000.0

    def test_thousands_suffix_uppercase(self):
        assert parse_rate("2K") == 2000.0

    def test_thousands_suffix_with_decimal(self):
        assert parse_rate("1.25k") == pytest.approx(1250.0)

    def test_unicode_minus_with_suffix(self):
        assert parse_rate("−1.5k") == pytest.approx(-1500.0)

    def test_numeric_input(self):
        assert parse_rate(4) == 4.0
        assert parse_rate(np.float64(2.5)) == 2.5

    @pytest.mark.parametrize("value", ["abc", "1.2.3", "k", "7−5", "12%", "1_000", "１２", "0x1A"])
    def test_malformed_raises(self, value):
        with pytest.raises(ParseError):
            parse_rate(value)

    @pytest.mark.parametrize("value", [None, np.nan, "", "   "])
    def test_missing_raises(self, value):
        with pytest.raises(ParseError):
            parse_rate(value)

    @pytest.mark.parametrize("value", ["nan", "inf", "-inf", float("inf")])
    def test_non_finite_raises(self, value):
        with pytest.raises(ParseError):
            parse_rate(value)


class TestHelpers:

    def test_is_missing(self):
        assert is_missing(None)
        assert is_missing(float("nan"))
        assert is_missing(pd.NA)
        assert is_missing("  ")
        assert not is_missing("0")
        assert not is_missing(0.0)

    def test_normalize_minus(self):
        assert normalize_minus("−1−2") == "-1-2"

    def test_coerce_rate_returns_nan(self):
        assert math.isnan(coerce_rate("bad"))
        assert coerce_rate("1k") == 1000.0


class TestNormalizeRateSeries:

    def test_mixed_series(self):
        s = pd.Series(["1.5", "−2", "3k", "bad", None], name="inflation_rate")
        out = normalize_rate_series(s)

        assert out.dtype == np.float64
        assert out.iloc[0] == 1.5
        assert out.iloc[1] == -2.0
        assert out.iloc[2] == 3000.0
        assert out.iloc[3:].isna().all()

    def test_preserves_index(self):
        s = pd.Series(["1", "2"], index=[10, 20])
        out = normalize_rate_series(s)
        assert list(out.index) == [10, 20]

    def test_empty_series(self):
        out = normalize_rate_series(pd.Series([], dtype=object))
        assert len(out) == 0

    def test_empty_text_series(self):
        out = normalize_rate_series(pd.Series([], dtype="str", name="poverty_rate"))
        assert len(out) == 0
        assert out.dtype == np.float64

    def test_text_series_with_missing(self):
        s = pd.Series(["2", None, "x"], dtype="str")
        out = normalize_rate_series(s)
        assert out.iloc[0] == 2.0
        assert out.iloc[1:].isna().all()

    def test_exponent_notation(self):
        assert parse_rate("1e3") == 1000.0
        assert parse_rate(".5") == 0.5
