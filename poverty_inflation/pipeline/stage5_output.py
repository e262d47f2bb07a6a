"""
Stage 5: Write Output

Writes result tables and the QA report.

Outputs:
    - model_comparison.csv      (fit statistics per polynomial degree)
    - coefficients.csv          (coefficients, robust SEs, p-values)
    - simulation_summary.csv    (observed vs replicated statistics)
    - qa_report.md              (cleaning counts and validation checks)
"""

import logging
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


def write_result_tables(results: dict, tables_dir: Optional[Path] = None) -> Dict[str, Path]:
    """Write the regression and simulation tables that are present in results."""
    from ..config import TABLES_DIR
    from ..utils.io import save_csv

    tables_dir = Path(tables_dir) if tables_dir else TABLES_DIR
    written = {}

    analyze = results.get('stage3_analyze') or {}
    simulate = results.get('stage4_simulate') or {}

    if 'comparison' in analyze:
        written['model_comparison'] = save_csv(
            analyze['comparison'], tables_dir / 'model_comparison.csv'
        )
    if 'coefficients' in analyze:
        written['coefficients'] = save_csv(
            analyze['coefficients'], tables_dir / 'coefficients.csv'
        )
    if 'summary' in simulate:
        summary = simulate['summary'].rename_axis('statistic').reset_index()
        written['simulation_summary'] = save_csv(
            summary, tables_dir / 'simulation_summary.csv'
        )

    return written


def run_output(
    results: dict,
    tables_dir: Optional[Path] = None,
    qa_report_path: Optional[Path] = None,
) -> dict:
    """
    Run the output stage.

    Args:
        results: Stage results keyed as in run_full_pipeline
        tables_dir: Directory for CSV tables (defaults to config.TABLES_DIR)
        qa_report_path: QA report path (defaults to docs/qa_report.md)

    Returns:
        dict: {'tables': {name: path}, 'qa_report': path or None}
    """
    from ..qa.reporters import generate_qa_report

    logger.info("=" * 60)
    logger.info("STAGE 5: WRITE OUTPUT")
    logger.info("=" * 60)

    output = {'tables': write_result_tables(results, tables_dir), 'qa_report': None}

    clean_stage = results.get('stage2_clean')
    if clean_stage:
        from ..config import DOCS_DIR
        qa_report_path = Path(qa_report_path) if qa_report_path else DOCS_DIR / 'qa_report.md'
        generate_qa_report(
            clean_stage['clean'],
            cleaning_report=clean_stage['report'],
            raw_tables=results.get('stage1_load'),
            output_path=qa_report_path,
        )
        output['qa_report'] = qa_report_path

    logger.info(f"Stage 5 complete: {len(output['tables'])} tables written")
    return output
