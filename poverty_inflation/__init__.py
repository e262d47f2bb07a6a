"""
Poverty & Inflation Pipeline.

Cleans and joins cross-country extreme poverty and inflation tables,
regresses poverty rate on log-transformed inflation and checks model fit
with posterior-predictive simulations.

Public API
----------
Core configuration:
    PROJECT_ROOT, RAW_DIR, FINAL_DIR, CLEANING_CONFIG

Cleaning:
    clean_and_merge, CleaningReport, parse_rate

Errors:
    MissingColumnError, ParseError

Analysis:
    fit_poverty_regression, posterior_predictive_check, run_full_pipeline
"""

__version__ = "0.3"


# Re-export core configuration
from .config import (
    PROJECT_ROOT,
    RAW_DIR,
    FINAL_DIR,
    CLEANING_CONFIG,
)

from .errors import PipelineError, MissingColumnError, ParseError

# Re-export cleaning
from .parsing import parse_rate
from .cleaning import clean_and_merge, CleaningReport


# Analysis imports are lazy (statsmodels is slow to import)
def fit_poverty_regression(*args, **kwargs):
    """Fit poverty ~ log(inflation). See analyses.regression for details."""
    from .analyses.regression import fit_poverty_regression as _fit
    return _fit(*args, **kwargs)


def posterior_predictive_check(*args, **kwargs):
    """Run posterior-predictive checks. See analyses.simulation for details."""
    from .analyses.simulation import posterior_predictive_check as _check
    return _check(*args, **kwargs)


def run_full_pipeline(*args, **kwargs):
    """Run all pipeline stages. See pipeline.runner for details."""
    from .pipeline.runner import run_full_pipeline as _run
    return _run(*args, **kwargs)


__all__ = [
    # Version
    "__version__",
    # Configuration
    "PROJECT_ROOT",
    "RAW_DIR",
    "FINAL_DIR",
    "CLEANING_CONFIG",
    # Errors
    "PipelineError",
    "MissingColumnError",
    "ParseError",
    # Cleaning
    "parse_rate",
    "clean_and_merge",
    "CleaningReport",
    # Analysis
    "fit_poverty_regression",
    "posterior_predictive_check",
    "run_full_pipeline",
]
