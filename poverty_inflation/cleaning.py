"""
Cleaning & merge pipeline.

Turns the raw wide poverty and inflation tables into one tidy table with
one row per (country, year):

    column-range filter -> reshape (wide -> long) -> inner join
    -> null drop -> numeric normalization

Column-structure problems raise; bad or missing cells are dropped and
counted in the CleaningReport.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, Optional, Tuple

import pandas as pd

from .config import CLEANING_CONFIG, CleaningConfig
from .parsing.numeric_normalizer import is_missing, normalize_rate_series
from .parsing.wide_table import (
    filter_year_columns,
    melt_year_table,
    parse_year_label,
    require_country_column,
    shared_year_columns,
)

logger = logging.getLogger(__name__)


@dataclass
class CleaningReport:
    """Row counts after each cleaning step."""
    first_year: int = 0
    last_year: int = 0
    n_year_columns: int = 0
    poverty_long_rows: int = 0
    inflation_long_rows: int = 0
    joined_rows: int = 0
    dropped_missing: int = 0
    dropped_unparseable: int = 0
    final_rows: int = 0
    n_countries: int = 0

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    def row_counts(self) -> Dict[str, int]:
        """Counts per cleaning step, without the shared year range."""
        year_fields = {"first_year", "last_year", "n_year_columns"}
        return {k: v for k, v in asdict(self).items() if k not in year_fields}


def join_long_tables(
    inflation_long: pd.DataFrame,
    poverty_long: pd.DataFrame,
    config: Optional[CleaningConfig] = None,
) -> pd.DataFrame:
    """
    Inner-join the two long tables on (country, year).

    Pairs present in only one source are dropped.
    """
    config = config or CLEANING_CONFIG
    keys = [config.country_col, config.year_col]

    joined = inflation_long[keys + [config.inflation_col]].merge(
        poverty_long[keys + [config.poverty_col]],
        on=keys,
        how="inner",
        validate="one_to_one",
    )
    return joined


def drop_missing(
    df: pd.DataFrame,
    config: Optional[CleaningConfig] = None,
) -> pd.DataFrame:
    """Drop rows whose inflation or poverty value is null or blank."""
    config = config or CLEANING_CONFIG

    mask = pd.Series(True, index=df.index)
    for col in [config.inflation_col, config.poverty_col]:
        mask &= ~df[col].map(lambda v: is_missing(v, config)).astype(bool)

    return df[mask]


def normalize_rates(
    df: pd.DataFrame,
    config: Optional[CleaningConfig] = None,
) -> pd.DataFrame:
    """
    Parse both rate columns to floats and drop rows that fail.

    Returns a copy with float64 rate columns.
    """
    config = config or CLEANING_CONFIG

    out = df.copy()
    for col in [config.inflation_col, config.poverty_col]:
        out[col] = normalize_rate_series(out[col], config)

    return out.dropna(subset=[config.inflation_col, config.poverty_col])


def clean_and_merge(
    poverty_raw: pd.DataFrame,
    inflation_raw: pd.DataFrame,
    config: Optional[CleaningConfig] = None,
) -> Tuple[pd.DataFrame, CleaningReport]:
    """
    Run the full cleaning & merge pipeline.

    Args:
        poverty_raw: Wide poverty table (country + year columns)
        inflation_raw: Wide inflation table (country + year columns)
        config: Cleaning configuration

    Returns:
        (clean_df, report) where clean_df has columns
        country, year, inflation_rate, poverty_rate sorted by
        (country, year)

    Raises:
        MissingColumnError: If a table lacks the country column or the
            tables share no year column
        ParseError: If a shared year label is not an integer
    """
    config = config or CLEANING_CONFIG
    report = CleaningReport()

    require_country_column(poverty_raw, "poverty table", config)
    require_country_column(inflation_raw, "inflation table", config)

    # 1. Column-range filter
    labels = shared_year_columns(poverty_raw, inflation_raw, config)
    report.n_year_columns = len(labels)
    report.first_year = parse_year_label(labels[0])
    report.last_year = parse_year_label(labels[-1])
    logger.info(
        f"Shared year columns: {report.first_year}-{report.last_year} "
        f"({report.n_year_columns} columns)"
    )

    poverty_wide = filter_year_columns(poverty_raw, labels, config)
    inflation_wide = filter_year_columns(inflation_raw, labels, config)

    # 2. Reshape
    poverty_long = melt_year_table(poverty_wide, config.poverty_col, config)
    inflation_long = melt_year_table(inflation_wide, config.inflation_col, config)
    report.poverty_long_rows = len(poverty_long)
    report.inflation_long_rows = len(inflation_long)

    # 3. Inner join
    joined = join_long_tables(inflation_long, poverty_long, config)
    report.joined_rows = len(joined)
    logger.info(f"Joined {len(joined):,} country-years")

    # 4. Null drop
    present = drop_missing(joined, config)
    report.dropped_missing = len(joined) - len(present)

    # 5. Numeric normalization
    clean = normalize_rates(present, config)
    report.dropped_unparseable = len(present) - len(clean)
    if report.dropped_unparseable > 0:
        logger.warning(f"Dropped {report.dropped_unparseable:,} rows with unparseable rates")

    clean = (
        clean[config.output_columns]
        .sort_values([config.country_col, config.year_col])
        .reset_index(drop=True)
    )
    clean[config.year_col] = clean[config.year_col].astype("int64")

    report.final_rows = len(clean)
    report.n_countries = int(clean[config.country_col].nunique())
    logger.info(
        f"Clean table: {report.final_rows:,} rows, {report.n_countries:,} countries "
        f"({report.dropped_missing:,} missing dropped)"
    )

    return clean, report
