"""Parsing utilities for wide tables and numeric-like strings."""

from .numeric_normalizer import (
    is_missing,
    normalize_minus,
    parse_rate,
    coerce_rate,
    normalize_rate_series,
)
from .wide_table import (
    parse_year_label,
    require_country_column,
    shared_year_columns,
    filter_year_columns,
    melt_year_table,
)

__all__ = [
    "is_missing",
    "normalize_minus",
    "parse_rate",
    "coerce_rate",
    "normalize_rate_series",
    "parse_year_label",
    "require_country_column",
    "shared_year_columns",
    "filter_year_columns",
    "melt_year_table",
]
