"""
Data validation functions for the clean poverty/inflation table.

Implements plausibility and consistency checks.
"""

import pandas as pd
import numpy as np
from pathlib import Path
from typing import Optional, Dict, List, Any, Tuple
from dataclasses import dataclass
import logging

from ..config import CLEANING_CONFIG, CLEAN_PARQUET, VALIDATION_CONFIG

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of a validation check."""
    check_name: str
    passed: bool
    message: str
    affected_count: int = 0
    affected_fraction: float = 0.0
    details: Dict[str, Any] = None


def validate_clean_table(
    df: pd.DataFrame,
    year_range: Optional[Tuple[int, int]] = None,
) -> List[ValidationResult]:
    """
    Validate the clean country-year table.

    Checks:
    - required columns present
    - (country, year) uniqueness
    - year within the shared coverage window
    - finite inflation and poverty rates
    - poverty rate bounds

    Returns:
        List of ValidationResult objects
    """
    cfg = CLEANING_CONFIG
    results = []
    n = len(df)

    missing_cols = [c for c in cfg.output_columns if c not in df.columns]
    results.append(ValidationResult(
        check_name="required_columns",
        passed=(not missing_cols),
        message=f"missing columns: {missing_cols}" if missing_cols else "all columns present",
        affected_count=len(missing_cols),
    ))
    if missing_cols:
        return results

    # Check key uniqueness
    duplicates = int(df.duplicated(subset=[cfg.country_col, cfg.year_col]).sum())
    results.append(ValidationResult(
        check_name="country_year_uniqueness",
        passed=(duplicates == 0),
        message=f"{duplicates} duplicate (country, year) pairs",
        affected_count=duplicates,
        affected_fraction=duplicates / n if n > 0 else 0,
    ))

    # Check year range
    if year_range is not None:
        lo, hi = year_range
        y = df[cfg.year_col]
        out_of_range = int(((y < lo) | (y > hi)).sum())
        results.append(ValidationResult(
            check_name="year_range",
            passed=(out_of_range == 0),
            message=f"{out_of_range} years outside {lo}-{hi}",
            affected_count=out_of_range,
            affected_fraction=out_of_range / n if n > 0 else 0,
            details={"min_year": lo, "max_year": hi},
        ))

    # Check finiteness of both rates
    for col in [cfg.inflation_col, cfg.poverty_col]:
        values = pd.to_numeric(df[col], errors="coerce").to_numpy(dtype=float)
        non_finite = int((~np.isfinite(values)).sum())
        results.append(ValidationResult(
            check_name=f"{col}_finite",
            passed=(non_finite == 0),
            message=f"{non_finite} null or non-finite {col} values",
            affected_count=non_finite,
            affected_fraction=non_finite / n if n > 0 else 0,
        ))

    # Check poverty bounds
    p = df[cfg.poverty_col]
    lo, hi = VALIDATION_CONFIG.min_poverty_rate, VALIDATION_CONFIG.max_poverty_rate
    out_of_bounds = int(((p < lo) | (p > hi)).sum())
    results.append(ValidationResult(
        check_name="poverty_rate_bounds",
        passed=(out_of_bounds == 0),
        message=f"{out_of_bounds} values outside [{lo:g},{hi:g}]",
        affected_count=out_of_bounds,
        affected_fraction=out_of_bounds / n if n > 0 else 0,
    ))

    return results


def run_all_validations(
    clean_path: Optional[Path] = None,
    year_range: Optional[Tuple[int, int]] = None,
) -> Dict[str, List[ValidationResult]]:
    """
    Run all validations on the persisted clean table.

    Returns:
        Dict mapping file type to list of validation results
    """
    results = {}

    clean_path = clean_path or CLEAN_PARQUET
    if clean_path.exists():
        df = pd.read_parquet(clean_path)
        results["poverty_inflation_clean"] = validate_clean_table(df, year_range)
    else:
        logger.warning(f"Clean table not found: {clean_path}")

    return results
