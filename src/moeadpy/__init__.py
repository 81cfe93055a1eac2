"""
moeadpy: decomposition-based multi-objective evolutionary optimization.

Public API:
    MOEAD, MOEADConfig, optimize, OptimizationResult, dominates,
    ObjectiveSet, Problem and the bundled benchmark problems.
"""

from .engine.algorithm.config import MOEADConfig
from .engine.algorithm.moead import MOEAD, RunStatus, tchebycheff
from .engine.algorithm.components import ParetoArchive, load_or_generate_weight_vectors
from .foundation.core.optimize import optimize
from .foundation.core.result import OptimizationResult
from .foundation.exceptions import (
    BoundsError,
    ConfigurationError,
    EvaluationError,
    MOEADError,
    ProblemDimensionError,
    StopOptimization,
)
from .foundation.logging import configure_moeadpy_logging
from .foundation.metrics import dominates, pareto_filter
from .foundation.observer import NoOpObserver, Observer, RunContext
from .foundation.problem import FonsecaFlemingProblem, ObjectiveSet, Problem, SchafferN1Problem

__version__ = "0.1.0"

__all__ = [
    "MOEAD",
    "MOEADConfig",
    "RunStatus",
    "optimize",
    "OptimizationResult",
    "tchebycheff",
    "dominates",
    "pareto_filter",
    "ParetoArchive",
    "load_or_generate_weight_vectors",
    "ObjectiveSet",
    "Problem",
    "FonsecaFlemingProblem",
    "SchafferN1Problem",
    "Observer",
    "NoOpObserver",
    "RunContext",
    "configure_moeadpy_logging",
    "MOEADError",
    "ConfigurationError",
    "BoundsError",
    "ProblemDimensionError",
    "EvaluationError",
    "StopOptimization",
]
