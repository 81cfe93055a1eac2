from __future__ import annotations

from typing import Any, Iterable

import numpy as np

from moeadpy.engine.algorithm.config import MOEADConfig
from moeadpy.engine.algorithm.moead import MOEAD
from moeadpy.foundation.core.result import OptimizationResult
from moeadpy.foundation.problem.types import ProblemProtocol


def optimize(
    problem: ProblemProtocol,
    config: MOEADConfig | None = None,
    *,
    callbacks: Iterable[Any] = (),
    **overrides: Any,
) -> OptimizationResult:
    """
    Run MOEA/D on a problem object and return its result.

    The bounds are taken from ``problem.xl`` / ``problem.xu`` unless they are
    given explicitly in ``overrides``.

    Example::

        from moeadpy import FonsecaFlemingProblem, optimize

        result = optimize(FonsecaFlemingProblem(), pop_size=60, max_generations=80, seed=7)
        print(result.F)
    """
    cfg = config if config is not None else MOEADConfig()
    overrides.setdefault("lower_bound", np.atleast_1d(np.asarray(problem.xl, dtype=float)).tolist())
    overrides.setdefault("upper_bound", np.atleast_1d(np.asarray(problem.xu, dtype=float)).tolist())

    algorithm = MOEAD(cfg, **overrides)
    algorithm.optimize(problem.objectives, np.zeros(int(problem.n_var)), *callbacks)
    result = algorithm.result()
    assert result is not None, "MOEAD did not produce a result"
    return result


__all__ = ["optimize"]
