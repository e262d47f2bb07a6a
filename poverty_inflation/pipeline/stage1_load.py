"""
Stage 1: Data Load

Reads the two raw wide-format source tables.

Data Sources:
    - Extreme poverty rate by country and year (1800-2100)
    - Annual inflation rate by country and year (1961-2023)

Every cell is kept as text; parsing happens in Stage 2.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import pandas as pd

logger = logging.getLogger(__name__)


def load_poverty_table(path: Optional[Path] = None) -> pd.DataFrame:
    """Load the raw poverty table."""
    from ..config import POVERTY_RAW
    from ..utils.io import load_raw_table

    logger.info("Loading poverty table...")
    return load_raw_table(Path(path) if path else POVERTY_RAW)


def load_inflation_table(path: Optional[Path] = None) -> pd.DataFrame:
    """Load the raw inflation table."""
    from ..config import INFLATION_RAW
    from ..utils.io import load_raw_table

    logger.info("Loading inflation table...")
    return load_raw_table(Path(path) if path else INFLATION_RAW)


def run_load(
    poverty_path: Optional[Path] = None,
    inflation_path: Optional[Path] = None,
) -> Dict[str, pd.DataFrame]:
    """
    Run the data load stage.

    Args:
        poverty_path: Raw poverty CSV (defaults to config.POVERTY_RAW)
        inflation_path: Raw inflation CSV (defaults to config.INFLATION_RAW)

    Returns:
        dict: {'poverty': DataFrame, 'inflation': DataFrame}
    """
    logger.info("=" * 60)
    logger.info("STAGE 1: DATA LOAD")
    logger.info("=" * 60)

    results = {
        'poverty': load_poverty_table(poverty_path),
        'inflation': load_inflation_table(inflation_path),
    }

    logger.info(
        f"Stage 1 complete: {len(results['poverty']):,} poverty rows, "
        f"{len(results['inflation']):,} inflation rows"
    )
    return results


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_load()
