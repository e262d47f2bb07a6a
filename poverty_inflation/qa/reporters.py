"""
QA report generation for the cleaning pipeline.

Produces qa_report.md with row counts per cleaning step, validation
results and missingness of the raw tables.
"""

import pandas as pd
from pathlib import Path
from typing import Optional, Dict
from datetime import datetime
import logging

from ..config import CLEANING_CONFIG, DOCS_DIR
from .validators import validate_clean_table

logger = logging.getLogger(__name__)


def compute_cell_missingness(raw: pd.DataFrame) -> float:
    """Share of empty year cells in a wide raw table."""
    year_cols = [c for c in raw.columns if c != CLEANING_CONFIG.country_col]
    if not year_cols or raw.empty:
        return 0.0
    return float(raw[year_cols].isna().to_numpy().mean())


def generate_qa_report(
    clean_df: pd.DataFrame,
    cleaning_report=None,
    raw_tables: Optional[Dict[str, pd.DataFrame]] = None,
    output_path: Optional[Path] = None,
) -> str:
    """
    Generate QA report for the clean table.

    Args:
        clean_df: Clean country-year table
        cleaning_report: CleaningReport from clean_and_merge, if available
        raw_tables: Mapping of source name to raw wide table
        output_path: Where to write the markdown file

    Returns:
        Markdown report string
    """
    if output_path is None:
        output_path = DOCS_DIR / "qa_report.md"

    cfg = CLEANING_CONFIG
    sections = []

    # Header
    sections.append(f"""# Data Quality Assurance Report

Generated: {datetime.now().strftime("%Y-%m-%d %H:%M:%S")}

This report summarizes data quality metrics for the clean poverty/inflation table.
""")

    year_range = None
    if len(clean_df) > 0:
        year_range = (int(clean_df[cfg.year_col].min()), int(clean_df[cfg.year_col].max()))

    sections.append(f"""
## Clean Table Summary

- **Country-years**: {len(clean_df):,}
- **Countries**: {clean_df[cfg.country_col].nunique():,}
- **Year range**: {f"{year_range[0]} - {year_range[1]}" if year_range else "N/A"}
""")

    # Step counts
    if cleaning_report is not None:
        if cleaning_report.n_year_columns > 0:
            year_range = (cleaning_report.first_year, cleaning_report.last_year)

        sections.append(f"""
## Cleaning Steps

Shared year columns: {cleaning_report.first_year} - {cleaning_report.last_year} ({cleaning_report.n_year_columns} columns)

| Step | Count |
|------|-------|""")
        for step, count in cleaning_report.row_counts().items():
            sections.append(f"| {step} | {count:,} |")

    # Raw missingness
    if raw_tables:
        sections.append("""
## Raw Table Missingness

| Source | Rows | Empty cells |
|--------|------|-------------|""")
        for name, raw in raw_tables.items():
            sections.append(f"| {name} | {len(raw):,} | {compute_cell_missingness(raw):.1%} |")

    # Validation results
    sections.append("""
## Validation Checks

| Check | Status | Details |
|-------|--------|---------|""")

    for v in validate_clean_table(clean_df, year_range):
        status = "✅ Pass" if v.passed else "❌ Fail"
        sections.append(f"| {v.check_name} | {status} | {v.message} |")

    # Key distributions
    if len(clean_df) > 0:
        sections.append("""
## Key Variable Distributions

| Variable | Mean | Median | Min | Max |
|----------|------|--------|-----|-----|""")
        for col in [cfg.inflation_col, cfg.poverty_col]:
            s = clean_df[col]
            sections.append(
                f"| {col} | {s.mean():,.2f} | {s.median():,.2f} | {s.min():,.2f} | {s.max():,.2f} |"
            )

    # Compile report
    report = "\n".join(sections) + "\n"

    # Save
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(report)

    logger.info(f"Generated QA report: {output_path}")

    return report
