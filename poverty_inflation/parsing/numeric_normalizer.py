"""
Numeric string normalization for rate columns.

Implements project conventions:
- Replace the Unicode minus sign (U+2212) with an ASCII hyphen-minus
- Expand a trailing thousands marker ("2k", "2K" -> 2000.0)
- Parse everything else as a plain ASCII decimal float
- Reject values that are empty or not finite
"""

import logging
import math
import re
from typing import Any, Optional

import numpy as np
import pandas as pd

from ..config import CLEANING_CONFIG, CleaningConfig
from ..errors import ParseError

logger = logging.getLogger(__name__)

# Plain ASCII decimal, optional exponent
DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def is_missing(value: Any, config: Optional[CleaningConfig] = None) -> bool:
    """
    Check whether a raw cell counts as missing.

    None, NaN/NA and blank text are all missing.
    """
    config = config or CLEANING_CONFIG

    if value is None or value is pd.NA:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, str) and value.strip() in config.missing_tokens:
        return True
    return False


def normalize_minus(text: str, config: Optional[CleaningConfig] = None) -> str:
    """Replace the Unicode minus sign with an ASCII hyphen-minus."""
    config = config or CLEANING_CONFIG
    return text.replace(config.unicode_minus, "-")


def parse_rate(value: Any, config: Optional[CleaningConfig] = None) -> float:
    """
    Parse a numeric-like cell into a finite float.

    Args:
        value: Raw cell (string, number, or missing)
        config: Cleaning configuration

    Returns:
        Parsed float

    Raises:
        ParseError: If the value is missing, malformed, or not finite
    """
    config = config or CLEANING_CONFIG

    if is_missing(value, config):
        raise ParseError("Missing value")

    if isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool):
        number = float(value)
    else:
        text = normalize_minus(str(value), config).strip()
        suffix = config.thousands_suffix.lower()

        if text.lower().endswith(suffix):
            multiplier = config.thousands_multiplier
            text = text[: -len(suffix)].strip()
        else:
            multiplier = 1.0

        if not DECIMAL_PATTERN.fullmatch(text):
            raise ParseError(f"Cannot parse {value!r} as a number")
        number = float(text) * multiplier

    if not math.isfinite(number):
        raise ParseError(f"Non-finite value {value!r}")

    return number


def coerce_rate(value: Any, config: Optional[CleaningConfig] = None) -> float:
    """Parse a cell, returning NaN instead of raising ParseError."""
    try:
        return parse_rate(value, config)
    except ParseError:
        return np.nan


def normalize_rate_series(
    series: pd.Series,
    config: Optional[CleaningConfig] = None,
) -> pd.Series:
    """
    Normalize a column of numeric-like strings to floats.

    Unparseable cells become NaN so the caller can drop them.

    Args:
        series: Raw values
        config: Cleaning configuration

    Returns:
        float64 Series aligned with the input index
    """
    config = config or CLEANING_CONFIG

    parsed = series.map(lambda v: coerce_rate(v, config)).astype("float64")

    n_missing = int(series.map(lambda v: is_missing(v, config)).astype(bool).sum())
    n_failed = int(parsed.isna().sum()) - n_missing
    if n_failed > 0:
        logger.debug(f"{n_failed:,} unparseable values in {series.name!r}")

    return parsed
