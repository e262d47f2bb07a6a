"""
File I/O utilities.

Helper functions for loading raw tables and persisting outputs with
consistent error handling and logging.
"""

from pathlib import Path
from typing import Optional
import logging
import pandas as pd

from ..config import CLEANING_CONFIG
from ..errors import MissingColumnError

logger = logging.getLogger(__name__)


def ensure_dir(path: Path) -> Path:
    """
    Ensure directory exists, creating if necessary.

    Parameters
    ----------
    path : Path
        Directory path to ensure exists.

    Returns
    -------
    Path
        The input path (for chaining).
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def load_raw_table(
    path: Path,
    country_col: Optional[str] = None,
) -> pd.DataFrame:
    """
    Load a wide-format raw table with every cell kept as text.

    Parameters
    ----------
    path : Path
        Path to CSV file.
    country_col : str, optional
        Name of the required key column.

    Returns
    -------
    pd.DataFrame
        Raw table; empty cells are NaN, everything else is str.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    MissingColumnError
        If the country column is absent.
    """
    country_col = country_col or CLEANING_CONFIG.country_col

    if not path.exists():
        raise FileNotFoundError(f"Raw table not found: {path}")

    df = pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""])
    df.columns = [str(c).strip() for c in df.columns]

    if country_col not in df.columns:
        raise MissingColumnError(f"{path.name} is missing required column {country_col!r}")

    logger.info(f"Loaded {len(df):,} rows x {len(df.columns) - 1} year columns from {path.name}")
    return df


def save_parquet(
    df: pd.DataFrame,
    path: Path,
    compression: str = "snappy",
) -> Path:
    """
    Save DataFrame to parquet with logging.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame to save.
    path : Path
        Output path.
    compression : str
        Compression algorithm.

    Returns
    -------
    Path
        The output path.
    """
    ensure_dir(path.parent)
    df.to_parquet(path, compression=compression, index=False)
    logger.info(f"Saved {len(df):,} rows to {path.name}")
    return path


def save_csv(df: pd.DataFrame, path: Path) -> Path:
    """Save DataFrame to CSV with logging."""
    ensure_dir(path.parent)
    df.to_csv(path, index=False)
    logger.info(f"Saved {len(df):,} rows to {path.name}")
    return path


def load_parquet(
    path: Path,
    columns: Optional[list] = None,
) -> pd.DataFrame:
    """
    Load parquet file with optional column selection.

    Parameters
    ----------
    path : Path
        Path to parquet file.
    columns : list, optional
        Columns to load (loads all if None).

    Returns
    -------
    pd.DataFrame
        Loaded DataFrame.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    df = pd.read_parquet(path, columns=columns)
    logger.debug(f"Loaded {len(df):,} rows from {path.name}")
    return df
