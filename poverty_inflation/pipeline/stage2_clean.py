"""
Stage 2: Data Cleaning & Merge

Turns the raw wide tables into the clean country-year table and persists it.

Operations:
    - Restrict both tables to their shared year columns
    - Reshape wide -> long, parsing year labels
    - Inner join on (country, year)
    - Drop rows with missing rates
    - Normalize numeric strings (Unicode minus, "k" thousands suffix)

Missing or malformed cells are dropped, never imputed.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import pandas as pd

logger = logging.getLogger(__name__)


def save_clean_table(
    df: pd.DataFrame,
    parquet_path: Optional[Path] = None,
    csv_path: Optional[Path] = None,
) -> Dict[str, Path]:
    """Persist the clean table as parquet plus a CSV copy."""
    from ..config import CLEAN_PARQUET, CLEAN_CSV
    from ..utils.io import save_parquet, save_csv

    parquet_path = Path(parquet_path) if parquet_path else CLEAN_PARQUET
    csv_path = Path(csv_path) if csv_path else CLEAN_CSV

    return {
        'parquet': save_parquet(df, parquet_path),
        'csv': save_csv(df, csv_path),
    }


def run_clean(
    raw_tables: Optional[Dict[str, pd.DataFrame]] = None,
    parquet_path: Optional[Path] = None,
    csv_path: Optional[Path] = None,
    save: bool = True,
) -> dict:
    """
    Run the cleaning & merge stage.

    Args:
        raw_tables: Output of Stage 1; loaded from the default paths if None
        parquet_path: Where to write the clean parquet file
        csv_path: Where to write the clean CSV copy
        save: Persist the clean table

    Returns:
        dict: {'clean': DataFrame, 'report': CleaningReport, 'paths': dict}
    """
    from ..cleaning import clean_and_merge

    logger.info("=" * 60)
    logger.info("STAGE 2: DATA CLEANING & MERGE")
    logger.info("=" * 60)

    if raw_tables is None:
        from .stage1_load import run_load
        raw_tables = run_load()

    clean, report = clean_and_merge(raw_tables['poverty'], raw_tables['inflation'])

    paths = save_clean_table(clean, parquet_path, csv_path) if save else {}

    logger.info(
        f"Stage 2 complete: {report.final_rows:,} country-years "
        f"({report.first_year}-{report.last_year})"
    )
    return {'clean': clean, 'report': report, 'paths': paths}


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_clean()
