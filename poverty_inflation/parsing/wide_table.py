"""
Wide-format table utilities.

Raw tables carry one row per country and one column per year label.
This module selects the year columns two tables have in common and
reshapes a table into one row per (country, year).
"""

import logging
import re
from typing import List, Optional

import pandas as pd

from ..config import CLEANING_CONFIG, CleaningConfig
from ..errors import MissingColumnError, ParseError

logger = logging.getLogger(__name__)

YEAR_LABEL_PATTERN = re.compile(r"^[+-]?\d+$")


def parse_year_label(label) -> int:
    """
    Parse a year column label to an integer.

    Args:
        label: Column label, usually text such as "1961"

    Returns:
        Year as int

    Raises:
        ParseError: If the label is not an integer
    """
    if isinstance(label, bool):
        raise ParseError(f"Year label {label!r} is not an integer")
    if isinstance(label, int):
        return label

    text = str(label).strip()
    if not YEAR_LABEL_PATTERN.match(text):
        raise ParseError(f"Year label {label!r} is not an integer")
    return int(text)


def require_country_column(
    df: pd.DataFrame,
    table_name: str = "table",
    config: Optional[CleaningConfig] = None,
) -> None:
    """Raise MissingColumnError if the country key column is absent."""
    config = config or CLEANING_CONFIG
    if config.country_col not in df.columns:
        raise MissingColumnError(
            f"{table_name} is missing required column {config.country_col!r}"
        )


def year_columns(
    df: pd.DataFrame,
    config: Optional[CleaningConfig] = None,
) -> List[str]:
    """Return every column label except the country key."""
    config = config or CLEANING_CONFIG
    return [c for c in df.columns if c != config.country_col]


def shared_year_columns(
    left: pd.DataFrame,
    right: pd.DataFrame,
    config: Optional[CleaningConfig] = None,
) -> List[str]:
    """
    Compute the year labels present in both tables.

    Labels are compared after stripping whitespace and returned in
    ascending year order.

    Raises:
        MissingColumnError: If either table lacks the country column or
            the tables share no year column
        ParseError: If a shared label is not an integer
    """
    config = config or CLEANING_CONFIG
    require_country_column(left, "left table", config)
    require_country_column(right, "right table", config)

    left_labels = {str(c).strip() for c in year_columns(left, config)}
    right_labels = {str(c).strip() for c in year_columns(right, config)}
    shared = left_labels & right_labels

    if not shared:
        raise MissingColumnError("Tables share no year columns")

    return sorted(shared, key=parse_year_label)


def filter_year_columns(
    df: pd.DataFrame,
    labels: List[str],
    config: Optional[CleaningConfig] = None,
) -> pd.DataFrame:
    """
    Restrict a wide table to the country column plus the given year labels.

    Column labels are whitespace-stripped in the returned copy.
    """
    config = config or CLEANING_CONFIG
    require_country_column(df, config=config)

    out = df.copy()
    out.columns = [str(c).strip() for c in out.columns]

    missing = [label for label in labels if label not in out.columns]
    if missing:
        raise MissingColumnError(f"Year columns not found: {missing[:5]}")

    return out[[config.country_col] + list(labels)]


def melt_year_table(
    df: pd.DataFrame,
    value_name: str,
    config: Optional[CleaningConfig] = None,
) -> pd.DataFrame:
    """
    Reshape a wide table into long format.

    Args:
        df: Wide table with the country column and year columns
        value_name: Name of the value column in the result
        config: Cleaning configuration

    Returns:
        DataFrame with columns country, year (int64), value_name
    """
    config = config or CLEANING_CONFIG
    require_country_column(df, config=config)

    value_vars = year_columns(df, config)
    year_map = {label: parse_year_label(label) for label in value_vars}

    long_df = df.melt(
        id_vars=config.country_col,
        value_vars=value_vars,
        var_name=config.year_col,
        value_name=value_name,
    )
    long_df[config.year_col] = long_df[config.year_col].map(year_map).astype("int64")
    long_df = long_df[long_df[config.country_col].notna()]

    # Keys must stay unique for the join
    n_before = len(long_df)
    long_df = long_df.drop_duplicates(subset=[config.country_col, config.year_col], keep="first")
    n_dupes = n_before - len(long_df)
    if n_dupes > 0:
        logger.warning(f"Dropped {n_dupes:,} duplicate (country, year) rows from {value_name}")

    return long_df.reset_index(drop=True)
