"""Shared utilities for the Poverty & Inflation pipeline."""

from .io import ensure_dir, load_raw_table, save_parquet, save_csv, load_parquet

__all__ = [
    "ensure_dir",
    "load_raw_table",
    "save_parquet",
    "save_csv",
    "load_parquet",
]
