"""Quality assurance utilities."""

from .validators import ValidationResult, validate_clean_table, run_all_validations
from .reporters import generate_qa_report

__all__ = ["ValidationResult", "validate_clean_table", "run_all_validations", "generate_qa_report"]
