"""
Posterior-predictive checks for the poverty regressions.

Uses the classical-regression posterior under a flat prior:

    σ² | y ~ RSS / χ²(n - k)
    β | σ², y ~ N(β̂, σ² (XᵀX)⁻¹)

For each draw a replicated poverty vector y_rep = Xβ + ε is simulated and
summary statistics T(y_rep) are compared with T(y). The p-value
P(T(y_rep) >= T(y)) near 0 or 1 flags a feature of the data the model
does not reproduce (e.g. negative predicted poverty).
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np
import pandas as pd
from scipy import stats

from ..config import SIMULATION_CONFIG
from .regression import RegressionResult

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Observed vs replicated test statistics."""
    observed: pd.Series
    replicated: pd.DataFrame
    p_values: pd.Series
    n_sims: int
    seed: Optional[int]

    def summary(self) -> pd.DataFrame:
        """One row per statistic: observed, replicated mean/quantiles, p-value."""
        return pd.DataFrame({
            "observed": self.observed,
            "rep_mean": self.replicated.mean(),
            "rep_q025": self.replicated.quantile(0.025),
            "rep_q975": self.replicated.quantile(0.975),
            "p_value": self.p_values,
        })


def compute_test_statistics(y) -> Dict[str, float]:
    """Summary statistics compared between observed and replicated data."""
    y = np.asarray(y, dtype=float)
    return {
        "mean": float(np.mean(y)),
        "std": float(np.std(y, ddof=1)),
        "min": float(np.min(y)),
        "max": float(np.max(y)),
        "median": float(np.median(y)),
        "share_negative": float(np.mean(y < 0)),
    }


def draw_parameters(
    result: RegressionResult,
    n_sims: int,
    rng: np.random.Generator,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Draw (β, σ) pairs from the regression posterior.

    Returns
    -------
    betas : np.ndarray
        (n_sims, k) coefficient draws.
    sigmas : np.ndarray
        (n_sims,) residual SD draws.
    """
    df_resid = result.df_resid
    s2 = result.resid_std ** 2

    chi2_draws = stats.chi2.rvs(df_resid, size=n_sims, random_state=rng)
    sigma2 = s2 * df_resid / chi2_draws

    # Unscaled (XᵀX)⁻¹ from the non-robust covariance s² (XᵀX)⁻¹
    v_beta = result.cov_params.values / s2
    chol = np.linalg.cholesky(v_beta)
    z = rng.standard_normal((n_sims, len(result.coef_names)))

    sigmas = np.sqrt(sigma2)
    betas = result.params.values + sigmas[:, None] * (z @ chol.T)
    return betas, sigmas


def simulate_replications(
    result: RegressionResult,
    n_sims: int,
    seed: Optional[int] = None,
) -> np.ndarray:
    """
    Simulate replicated poverty vectors from the fitted model.

    Returns
    -------
    np.ndarray
        (n_sims, nobs) array of replicated outcomes.
    """
    if n_sims < 1:
        raise ValueError(f"n_sims must be >= 1, got {n_sims}")

    rng = np.random.default_rng(seed)
    X = np.asarray(result.model.model.exog, dtype=float)

    betas, sigmas = draw_parameters(result, n_sims, rng)
    noise = rng.standard_normal((n_sims, X.shape[0])) * sigmas[:, None]
    return betas @ X.T + noise


def posterior_predictive_check(
    result: RegressionResult,
    n_sims: Optional[int] = None,
    seed: Optional[int] = None,
) -> SimulationResult:
    """
    Compare observed test statistics with their replicated distribution.

    Parameters
    ----------
    result : RegressionResult
        Fitted model (must carry the statsmodels results object).
    n_sims : int, optional
        Number of replications (default from SIMULATION_CONFIG).
    seed : int, optional
        RNG seed (default from SIMULATION_CONFIG).

    Returns
    -------
    SimulationResult
    """
    n_sims = n_sims if n_sims is not None else SIMULATION_CONFIG.n_sims
    seed = seed if seed is not None else SIMULATION_CONFIG.seed

    y = np.asarray(result.model.model.endog, dtype=float)
    y_rep = simulate_replications(result, n_sims, seed)

    observed = pd.Series(compute_test_statistics(y))
    replicated = pd.DataFrame([compute_test_statistics(row) for row in y_rep])
    p_values = (replicated >= observed).mean()

    logger.info(f"Posterior-predictive check: degree {result.degree}, {n_sims:,} replications")
    for name, p in p_values.items():
        logger.info(f"  {name:<15} T(y) = {observed[name]:>10.4f}   p = {p:.3f}")

    return SimulationResult(
        observed=observed,
        replicated=replicated,
        p_values=p_values,
        n_sims=n_sims,
        seed=seed,
    )
