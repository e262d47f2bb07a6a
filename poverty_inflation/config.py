"""
Global configuration for the Poverty & Inflation pipeline.

Implements project conventions for:
- File paths and source file names
- Cleaning rules for numeric-like strings
- Regression and simulation parameters
- Validation bounds
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Tuple

# =============================================================================
# PATH CONFIGURATION
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
RAW_DIR = DATA_DIR / "raw"
FINAL_DIR = DATA_DIR / "final"
OUTPUT_DIR = PROJECT_ROOT / "output"
TABLES_DIR = OUTPUT_DIR / "tables"
DOCS_DIR = PROJECT_ROOT / "docs"

# Raw source files (wide format: country + one column per year)
POVERTY_RAW = RAW_DIR / "poverty.csv"
INFLATION_RAW = RAW_DIR / "inflation.csv"

# Terminal artifact of the cleaning stage
CLEAN_PARQUET = FINAL_DIR / "poverty_inflation_clean.parquet"
CLEAN_CSV = FINAL_DIR / "poverty_inflation_clean.csv"

# =============================================================================
# CLEANING CONFIGURATION
# =============================================================================

@dataclass
class CleaningConfig:
    """Configuration for the cleaning & merge pipeline."""

    # Key column shared by both raw tables
    country_col: str = "country"
    year_col: str = "year"

    # Value column names after reshaping
    inflation_col: str = "inflation_rate"
    poverty_col: str = "poverty_rate"

    # Some source values use U+2212 instead of a hyphen-minus
    unicode_minus: str = "\u2212"

    # Thousands marker ("2k" -> 2000)
    thousands_suffix: str = "k"
    thousands_multiplier: float = 1000.0

    # Text treated as an empty cell
    missing_tokens: Tuple[str, ...] = ("",)

    @property
    def output_columns(self) -> List[str]:
        return [self.country_col, self.year_col, self.inflation_col, self.poverty_col]


CLEANING_CONFIG = CleaningConfig()

# =============================================================================
# REGRESSION CONFIGURATION
# =============================================================================

@dataclass
class RegressionConfig:
    """Configuration for poverty ~ log(inflation) regressions."""

    # Polynomial degrees fitted in the analysis stage (1 = simple regression)
    degrees: List[int] = field(default_factory=lambda: [1, 2, 3])

    # Robust covariance used for reported standard errors
    cov_type: str = "HC1"

    # Name of the transformed regressor
    regressor: str = "log_inflation"


REGRESSION_CONFIG = RegressionConfig()

# =============================================================================
# SIMULATION CONFIGURATION
# =============================================================================

@dataclass
class SimulationConfig:
    """Configuration for posterior-predictive checks."""

    n_sims: int = 1000
    seed: int = 20240501

    # Degree of the model that is checked
    degree: int = 1


SIMULATION_CONFIG = SimulationConfig()

# =============================================================================
# VALIDATION CONFIGURATION
# =============================================================================

@dataclass
class ValidationConfig:
    """Configuration for clean table validation checks."""

    # Poverty rate is a share of population in percent
    min_poverty_rate: float = 0.0
    max_poverty_rate: float = 100.0


VALIDATION_CONFIG = ValidationConfig()
