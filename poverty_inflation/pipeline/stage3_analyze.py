"""
Stage 3: Regression Analysis

Fits poverty rate on log-transformed inflation rate:
    - Simple linear regression (degree 1)
    - Polynomial regressions (degrees 2, 3 by default)
    - Model comparison by R², AIC and BIC
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

logger = logging.getLogger(__name__)


def load_clean_table(path: Optional[Path] = None) -> pd.DataFrame:
    """Load the persisted clean table written by Stage 2."""
    from ..config import CLEAN_PARQUET
    from ..utils.io import load_parquet

    return load_parquet(Path(path) if path else CLEAN_PARQUET)


def run_analyze(
    clean_df: Optional[pd.DataFrame] = None,
    degrees: Optional[Iterable[int]] = None,
) -> dict:
    """
    Run the regression stage.

    Args:
        clean_df: Clean table; loaded from disk if None
        degrees: Polynomial degrees to fit (default from REGRESSION_CONFIG)

    Returns:
        dict: {'models': {degree: RegressionResult},
               'comparison': DataFrame, 'coefficients': DataFrame}
    """
    from ..analyses.regression import (
        fit_polynomial_models, compare_models, coefficient_table,
    )

    logger.info("=" * 60)
    logger.info("STAGE 3: REGRESSION ANALYSIS")
    logger.info("=" * 60)

    if clean_df is None:
        clean_df = load_clean_table()

    models = fit_polynomial_models(clean_df, degrees)
    comparison = compare_models(models)

    best = comparison.loc[comparison["bic"].idxmin(), "degree"]
    logger.info(f"Stage 3 complete: {len(models)} models fitted, lowest BIC at degree {best}")

    return {
        'models': models,
        'comparison': comparison,
        'coefficients': coefficient_table(models),
    }


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_analyze()
