"""
Poverty-rate regressions on log-transformed inflation.

Fits simple (degree 1) and polynomial OLS models

    poverty_rate = β₀ + β₁ x + β₂ x² + ... + ε,   x = slog1p(inflation_rate)

where slog1p(x) = sign(x) · log(1 + |x|) compresses the right-skewed
inflation rate and stays defined for deflation years.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

import numpy as np
import pandas as pd
import statsmodels.api as sm

from ..config import CLEANING_CONFIG, REGRESSION_CONFIG

logger = logging.getLogger(__name__)


@dataclass
class RegressionResult:
    """Summary of a fitted poverty ~ log(inflation) model."""
    degree: int
    coef_names: List[str]
    params: pd.Series
    bse: pd.Series
    pvalues: pd.Series
    rsquared: float
    rsquared_adj: float
    aic: float
    bic: float
    nobs: int
    resid_std: float
    df_resid: float
    cov_params: pd.DataFrame
    model: object = field(default=None, repr=False)

    def to_dict(self) -> Dict:
        """Fit statistics as a flat dictionary."""
        return {
            "degree": self.degree,
            "nobs": self.nobs,
            "r2": self.rsquared,
            "r2_adj": self.rsquared_adj,
            "aic": self.aic,
            "bic": self.bic,
            "resid_std": self.resid_std,
        }


def log1p_transform(values) -> np.ndarray:
    """Signed log1p: sign(x) * log(1 + |x|)."""
    x = np.asarray(values, dtype=float)
    return np.sign(x) * np.log1p(np.abs(x))


def build_design_matrix(log_inflation, degree: int = 1) -> pd.DataFrame:
    """
    Build the polynomial design matrix with a constant.

    Columns: const, log_inflation, log_inflation_pow2, ...
    """
    if degree < 1:
        raise ValueError(f"degree must be >= 1, got {degree}")

    x = np.asarray(log_inflation, dtype=float)
    name = REGRESSION_CONFIG.regressor

    columns = {"const": np.ones(len(x))}
    for p in range(1, degree + 1):
        columns[name if p == 1 else f"{name}_pow{p}"] = x ** p

    index = log_inflation.index if isinstance(log_inflation, pd.Series) else None
    return pd.DataFrame(columns, index=index)


def fit_poverty_regression(
    df: pd.DataFrame,
    degree: int = 1,
    cov_type: Optional[str] = None,
) -> RegressionResult:
    """
    Fit OLS of poverty rate on polynomial terms of log inflation.

    Parameters
    ----------
    df : pd.DataFrame
        Clean table with inflation_rate and poverty_rate columns.
    degree : int
        Polynomial degree (1 = simple linear regression).
    cov_type : str, optional
        statsmodels covariance type for reported standard errors.

    Returns
    -------
    RegressionResult
    """
    cov_type = cov_type or REGRESSION_CONFIG.cov_type

    x = log1p_transform(df[CLEANING_CONFIG.inflation_col])
    X = build_design_matrix(pd.Series(x, index=df.index), degree)
    y = df[CLEANING_CONFIG.poverty_col].astype(float)

    if len(y) <= X.shape[1]:
        raise ValueError(
            f"Need more than {X.shape[1]} observations for degree {degree}, got {len(y)}"
        )

    ols = sm.OLS(y, X)
    fitted = ols.fit()
    robust = ols.fit(cov_type=cov_type) if cov_type != "nonrobust" else fitted

    result = RegressionResult(
        degree=degree,
        coef_names=list(X.columns),
        params=fitted.params,
        bse=robust.bse,
        pvalues=robust.pvalues,
        rsquared=float(fitted.rsquared),
        rsquared_adj=float(fitted.rsquared_adj),
        aic=float(fitted.aic),
        bic=float(fitted.bic),
        nobs=int(fitted.nobs),
        resid_std=float(np.sqrt(fitted.scale)),
        df_resid=float(fitted.df_resid),
        cov_params=fitted.cov_params(),
        model=fitted,
    )

    logger.info(
        f"Degree {degree}: N = {result.nobs:,}, R² = {result.rsquared:.4f}, "
        f"β₁ = {result.params.iloc[1]:.4f} (SE = {result.bse.iloc[1]:.4f})"
    )
    return result


def fit_polynomial_models(
    df: pd.DataFrame,
    degrees: Optional[Iterable[int]] = None,
) -> Dict[int, RegressionResult]:
    """Fit one model per polynomial degree."""
    degrees = degrees or REGRESSION_CONFIG.degrees
    return {d: fit_poverty_regression(df, degree=d) for d in degrees}


def compare_models(results: Dict[int, RegressionResult]) -> pd.DataFrame:
    """Tabulate fit statistics for each fitted degree."""
    rows = [r.to_dict() for r in results.values()]
    return pd.DataFrame(rows).sort_values("degree").reset_index(drop=True)


def coefficient_table(results: Dict[int, RegressionResult]) -> pd.DataFrame:
    """Long table of coefficients, robust SEs and p-values per model."""
    rows = []
    for degree, r in sorted(results.items()):
        for name in r.coef_names:
            rows.append({
                "degree": degree,
                "term": name,
                "coef": float(r.params[name]),
                "se": float(r.bse[name]),
                "pvalue": float(r.pvalues[name]),
            })
    return pd.DataFrame(rows)


def predict_poverty(result: RegressionResult, inflation_rates) -> np.ndarray:
    """Predict poverty rates for raw inflation rates."""
    x = log1p_transform(inflation_rates)
    X = build_design_matrix(x, result.degree)
    return X.values @ result.params.values
