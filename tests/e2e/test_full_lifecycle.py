"""
E2E Test: Full Lifecycle (Configure -> Optimize -> Save weights -> Rerun)
"""

import json

import numpy as np
import pytest

from moeadpy import MOEADConfig, FonsecaFlemingProblem, SchafferN1Problem, optimize
from moeadpy.foundation.metrics import pareto_filter


@pytest.mark.e2e
@pytest.mark.slow
def test_fonseca_fleming_front(e2e_workspace):
    """
    Gauntlet Test:
    1. Define Problem (Fonseca-Fleming, 3 variables)
    2. Optimize with a config loaded from JSON
    3. Check the front lies near the analytic Pareto set
    4. Rerun from the saved weight file
    """
    problem = FonsecaFlemingProblem(n_var=3)
    config_path = e2e_workspace / "moead.json"
    config_path.write_text(
        json.dumps(
            {
                "pop_size": 50,
                "neighbourhood_size": 10,
                "max_generations": 50,
                "mutation_strength": 0.05,
                "weight_path": str(e2e_workspace / "weights.csv"),
                "seed": 2024,
            }
        ),
        encoding="utf-8",
    )
    cfg = MOEADConfig.from_json(config_path.read_text(encoding="utf-8"))

    result = optimize(problem, cfg)

    assert len(result) > 0
    assert result.evaluations == 50 * 51
    assert np.all(result.F >= 0.0) and np.all(result.F <= 1.0)
    assert result.F[:, 0].min() < 0.9
    assert result.F[:, 1].min() < 0.9
    assert pareto_filter(result.F).shape[0] == result.F.shape[0]
    lo, hi = problem.pareto_set_bounds()
    assert np.all(result.X >= lo - 0.2)
    assert np.all(result.X <= hi + 0.2)
    assert (e2e_workspace / "weights.csv").exists()

    rerun = optimize(problem, cfg)
    np.testing.assert_array_equal(rerun.weights, result.weights)
    np.testing.assert_array_equal(rerun.F, result.F)


@pytest.mark.e2e
@pytest.mark.slow
def test_schaffer_front_inside_pareto_set():
    problem = SchafferN1Problem(bound=10.0)
    result = optimize(
        problem,
        pop_size=30,
        neighbourhood_size=6,
        max_generations=60,
        mutation_strength=0.5,
        mutation_prob=0.5,
        seed=5,
    )
    lo, hi = problem.pareto_set_bounds()
    assert len(result) >= 5
    assert np.all(result.X[:, 0] >= lo - 0.25)
    assert np.all(result.X[:, 0] <= hi + 0.25)
