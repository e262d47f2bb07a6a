"""
Stage 4: Posterior-Predictive Simulation

Simulates replicated poverty data from a fitted regression and compares
test statistics (mean, spread, extremes, share of negative values) with
the observed data.
"""

import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)


def run_simulate(
    models: Optional[Dict] = None,
    degree: Optional[int] = None,
    n_sims: Optional[int] = None,
    seed: Optional[int] = None,
) -> dict:
    """
    Run the simulation stage.

    Args:
        models: {degree: RegressionResult} from Stage 3; fitted if None
        degree: Which model to check (default from SIMULATION_CONFIG)
        n_sims: Number of replications
        seed: RNG seed

    Returns:
        dict: {'simulation': SimulationResult, 'summary': DataFrame}
    """
    from ..config import SIMULATION_CONFIG
    from ..analyses.simulation import posterior_predictive_check

    logger.info("=" * 60)
    logger.info("STAGE 4: POSTERIOR-PREDICTIVE SIMULATION")
    logger.info("=" * 60)

    degree = degree or SIMULATION_CONFIG.degree

    if models is None or degree not in models:
        from .stage3_analyze import run_analyze
        models = run_analyze(degrees=[degree])['models']

    simulation = posterior_predictive_check(models[degree], n_sims=n_sims, seed=seed)
    summary = simulation.summary()

    extreme = summary[(summary["p_value"] < 0.025) | (summary["p_value"] > 0.975)]
    if len(extreme) > 0:
        logger.warning(f"Model misses observed statistics: {', '.join(extreme.index)}")

    logger.info(f"Stage 4 complete: {simulation.n_sims:,} replications of degree {degree}")
    return {'simulation': simulation, 'summary': summary}


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_simulate()
