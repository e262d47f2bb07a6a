"""
Tests for posterior-predictive simulation.
"""

import numpy as np
import pandas as pd
import pytest

from poverty_inflation.analyses.regression import fit_poverty_regression
from poverty_inflation.analyses.simulation import (
    SimulationResult,
    compute_test_statistics,
    draw_parameters,
    simulate_replications,
    posterior_predictive_check,
)


@pytest.fixture
def fitted_model():
    """Degree-1 model fitted on synthetic data generated from that model."""
    rng = np.random.default_rng(7)
    n = 300
    inflation = rng.uniform(-5, 200, n)
    x = np.sign(inflation) * np.log1p(np.abs(inflation))
    df = pd.DataFrame({
        "country": [f"C{i}" for i in range(n)],
        "year": 2000,
        "inflation_rate": inflation,
        "poverty_rate": 20.0 + 3.0 * x + rng.normal(0, 1.5, n),
    })
    return fit_poverty_regression(df, degree=1)


class TestTestStatistics:

    def test_values(self):
        stats = compute_test_statistics([-1.0, 0.0, 1.0, 4.0])

        assert stats["mean"] == 1.0
        assert stats["min"] == -1.0
        assert stats["max"] == 4.0
        assert stats["median"] == 0.5
        assert stats["share_negative"] == 0.25
        assert stats["std"] == pytest.approx(np.std([-1.0, 0.0, 1.0, 4.0], ddof=1))


class TestDrawParameters:

    def test_shapes(self, fitted_model):
        rng = np.random.default_rng(0)
        betas, sigmas = draw_parameters(fitted_model, 50, rng)

        assert betas.shape == (50, 2)
        assert sigmas.shape == (50,)
        assert (sigmas > 0).all()

    def test_centered_on_estimates(self, fitted_model):
        rng = np.random.default_rng(0)
        betas, sigmas = draw_parameters(fitted_model, 4000, rng)

        np.testing.assert_allclose(betas.mean(axis=0), fitted_model.params.values, atol=0.05)
        assert sigmas.mean() == pytest.approx(fitted_model.resid_std, rel=0.05)


class TestSimulateReplications:

    def test_shape(self, fitted_model):
        y_rep = simulate_replications(fitted_model, n_sims=20, seed=1)
        assert y_rep.shape == (20, fitted_model.nobs)

    def test_reproducible(self, fitted_model):
        first = simulate_replications(fitted_model, n_sims=10, seed=123)
        second = simulate_replications(fitted_model, n_sims=10, seed=123)
        np.testing.assert_array_equal(first, second)

    def test_seed_changes_draws(self, fitted_model):
        first = simulate_replications(fitted_model, n_sims=10, seed=1)
        second = simulate_replications(fitted_model, n_sims=10, seed=2)
        assert not np.array_equal(first, second)

    def test_invalid_n_sims(self, fitted_model):
        with pytest.raises(ValueError):
            simulate_replications(fitted_model, n_sims=0)


class TestPosteriorPredictiveCheck:

    def test_result_structure(self, fitted_model):
        result = posterior_predictive_check(fitted_model, n_sims=200, seed=5)

        assert isinstance(result, SimulationResult)
        assert result.replicated.shape == (200, 6)
        assert set(result.p_values.index) == set(result.observed.index)
        assert ((result.p_values >= 0) & (result.p_values <= 1)).all()

    def test_well_specified_mean_not_extreme(self, fitted_model):
        """Data generated from the fitted model should not look extreme on the mean."""
        result = posterior_predictive_check(fitted_model, n_sims=500, seed=5)
        assert 0.05 < result.p_values["mean"] < 0.95

    def test_reproducible(self, fitted_model):
        a = posterior_predictive_check(fitted_model, n_sims=50, seed=9)
        b = posterior_predictive_check(fitted_model, n_sims=50, seed=9)
        pd.testing.assert_series_equal(a.p_values, b.p_values)

    def test_summary(self, fitted_model):
        summary = posterior_predictive_check(fitted_model, n_sims=100, seed=3).summary()

        assert list(summary.columns) == ["observed", "rep_mean", "rep_q025", "rep_q975", "p_value"]
        assert "share_negative" in summary.index
