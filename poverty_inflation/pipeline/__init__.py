"""
Poverty & Inflation Pipeline - 5-Stage Architecture

The pipeline is organized into 5 sequential stages:
    1. LOAD     - Read raw wide-format source tables
    2. CLEAN    - Filter, reshape, join and normalize into a tidy table
    3. ANALYZE  - Simple and polynomial regressions
    4. SIMULATE - Posterior-predictive checks
    5. OUTPUT   - Result tables and QA report

Usage:
    from poverty_inflation.pipeline import run_full_pipeline
    run_full_pipeline()

Or run individual stages:
    from poverty_inflation.pipeline import run_load, run_clean, run_analyze
    raw = run_load()
    cleaned = run_clean(raw)
    run_analyze(cleaned['clean'])
"""

from .stage1_load import run_load
from .stage2_clean import run_clean
from .stage3_analyze import run_analyze
from .stage4_simulate import run_simulate
from .stage5_output import run_output
from .runner import run_full_pipeline

__all__ = [
    'run_load',
    'run_clean',
    'run_analyze',
    'run_simulate',
    'run_output',
    'run_full_pipeline',
]
