"""
Pipeline Runner

Orchestrates the complete 5-stage analysis pipeline.

Stages:
    1. LOAD     - Read raw poverty and inflation tables
    2. CLEAN    - Filter, reshape, join, drop and normalize
    3. ANALYZE  - Simple and polynomial regressions
    4. SIMULATE - Posterior-predictive checks
    5. OUTPUT   - Result tables and QA report
"""

import logging
import time
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def run_full_pipeline(
    poverty_path: Optional[Path] = None,
    inflation_path: Optional[Path] = None,
    skip_analyze: bool = False,
    skip_simulate: bool = False,
    skip_output: bool = False,
    n_sims: Optional[int] = None,
    seed: Optional[int] = None,
    output_root: Optional[Path] = None,
) -> dict:
    """
    Run the complete 5-stage pipeline.

    Args:
        poverty_path: Raw poverty CSV
        inflation_path: Raw inflation CSV
        skip_analyze: Skip Stage 3 (regressions); also skips Stage 4
        skip_simulate: Skip Stage 4 (simulation)
        skip_output: Skip Stage 5 (output files)
        n_sims: Number of posterior-predictive replications
        seed: RNG seed for the simulation
        output_root: Write every artifact under this directory instead of
            the project data/output folders

    Returns:
        dict: Results from all stages
    """
    from .stage1_load import run_load
    from .stage2_clean import run_clean

    start_time = time.time()

    logger.info("=" * 70)
    logger.info("POVERTY & INFLATION PIPELINE")
    logger.info("=" * 70)

    results = {
        'stage1_load': None,
        'stage2_clean': None,
        'stage3_analyze': None,
        'stage4_simulate': None,
        'stage5_output': None,
    }

    # Stage 1: Load
    results['stage1_load'] = run_load(poverty_path, inflation_path)

    # Stage 2: Clean & merge
    logger.info("\n" + "=" * 70)
    clean_paths = {}
    if output_root is not None:
        output_root = Path(output_root)
        clean_paths = {
            'parquet_path': output_root / 'poverty_inflation_clean.parquet',
            'csv_path': output_root / 'poverty_inflation_clean.csv',
        }
    results['stage2_clean'] = run_clean(results['stage1_load'], **clean_paths)

    # Stage 3: Regressions
    if not skip_analyze:
        from .stage3_analyze import run_analyze
        logger.info("\n" + "=" * 70)
        results['stage3_analyze'] = run_analyze(results['stage2_clean']['clean'])
    else:
        logger.info("Skipping Stage 3: Regression Analysis")

    # Stage 4: Simulation
    if not skip_analyze and not skip_simulate:
        from .stage4_simulate import run_simulate
        logger.info("\n" + "=" * 70)
        results['stage4_simulate'] = run_simulate(
            results['stage3_analyze']['models'], n_sims=n_sims, seed=seed
        )
    else:
        logger.info("Skipping Stage 4: Simulation")

    # Stage 5: Output
    if not skip_output:
        from .stage5_output import run_output
        logger.info("\n" + "=" * 70)
        output_paths = {}
        if output_root is not None:
            output_paths = {
                'tables_dir': output_root / 'tables',
                'qa_report_path': output_root / 'qa_report.md',
            }
        results['stage5_output'] = run_output(results, **output_paths)
    else:
        logger.info("Skipping Stage 5: Write Output")

    elapsed = time.time() - start_time

    logger.info("\n" + "=" * 70)
    logger.info("PIPELINE COMPLETE")
    logger.info("=" * 70)
    logger.info(f"Total time: {elapsed:.1f} seconds")

    stages_run = sum(1 for v in results.values() if v is not None)
    logger.info(f"Stages completed: {stages_run}/5")

    return results


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    run_full_pipeline()
