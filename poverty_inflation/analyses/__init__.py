"""Regression and simulation analyses on the clean poverty/inflation table."""

from .regression import (
    RegressionResult,
    log1p_transform,
    build_design_matrix,
    fit_poverty_regression,
    fit_polynomial_models,
    compare_models,
    coefficient_table,
    predict_poverty,
)
from .simulation import (
    SimulationResult,
    compute_test_statistics,
    draw_parameters,
    simulate_replications,
    posterior_predictive_check,
)

__all__ = [
    "RegressionResult",
    "log1p_transform",
    "build_design_matrix",
    "fit_poverty_regression",
    "fit_polynomial_models",
    "compare_models",
    "coefficient_table",
    "predict_poverty",
    "SimulationResult",
    "compute_test_statistics",
    "draw_parameters",
    "simulate_replications",
    "posterior_predictive_check",
]
