# algorithm/moead/initialization.py
"""
Setup and initialization helpers for MOEA/D.

This module validates the configuration and builds the weight vectors,
neighbourhoods, operators and initial population of a run.
"""
from __future__ import annotations

import logging

import numpy as np

from moeadpy.engine.algorithm.components.archive import ParetoArchive
from moeadpy.engine.algorithm.components.weight_vectors import load_or_generate_weight_vectors
from moeadpy.engine.algorithm.config import MOEADConfig
from moeadpy.foundation.exceptions import ProblemDimensionError
from moeadpy.foundation.problem.types import ObjectiveSet
from moeadpy.operators.real import GaussianMutation, UniformCrossover

from .helpers import compute_neighbors
from .state import MOEADState, initial_ideal_point


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def initialize_moead_run(
    cfg: MOEADConfig,
    objectives: ObjectiveSet,
    n_var: int,
) -> MOEADState:
    """Initialize all components for a MOEA/D run.

    Parameters
    ----------
    cfg : MOEADConfig
        Algorithm configuration, validated here.
    objectives : ObjectiveSet
        The k objective functions.
    n_var : int
        Number of decision variables.

    Returns
    -------
    MOEADState
        State holding the evaluated initial population.

    Raises
    ------
    ConfigurationError
        If a parameter is out of range.
    BoundsError
        If the bounds do not match the decision space.
    ProblemDimensionError
        If there are no variables or no objectives.
    """
    if n_var < 1:
        raise ProblemDimensionError("The decision space must have at least one variable.", n_var=n_var)
    if objectives.n_obj < 1:
        raise ProblemDimensionError("At least one objective function is required.", n_obj=objectives.n_obj)
    xl, xu = cfg.validate(n_var)

    pop_size = int(cfg.pop_size)
    n_obj = objectives.n_obj
    rng = np.random.default_rng(cfg.seed)

    # Setup weight vectors and neighborhoods
    weights = load_or_generate_weight_vectors(
        pop_size,
        n_obj,
        method=cfg.weights,
        divisions=cfg.weight_divisions,
        path=cfg.weight_path,
        rng=rng,
    )
    neighbors = compute_neighbors(weights, int(cfg.neighbourhood_size))

    crossover = UniformCrossover(cfg.crossover_prob, lower=xl, upper=xu)
    mutation = GaussianMutation(cfg.mutation_prob, cfg.mutation_strength, lower=xl, upper=xu)

    X, F = initialize_population(pop_size, xl, xu, rng, objectives)

    archive = ParetoArchive(n_var, n_obj, X.dtype, initial_capacity=pop_size)
    archive.update(X, F)

    ideal = initial_ideal_point(F)
    if not np.all(np.isfinite(ideal)):
        _logger().warning(
            "Objectives %s have no finite value in the initial population; "
            "their ideal component stays +inf until one is found.",
            np.flatnonzero(~np.isfinite(ideal)).tolist(),
        )

    _logger().info(
        "MOEA/D initialized: pop_size=%d, n_var=%d, n_obj=%d, neighbourhood=%d, generations=%d",
        pop_size,
        n_var,
        n_obj,
        neighbors.shape[1],
        int(cfg.max_generations),
    )

    return MOEADState(
        X=X,
        F=F,
        rng=rng,
        objectives=objectives,
        weights=weights,
        neighbors=neighbors,
        ideal=ideal,
        crossover=crossover,
        mutation=mutation,
        xl=xl,
        xu=xu,
        archive=archive,
        max_generations=int(cfg.max_generations),
        n_eval=pop_size,
        all_indices=np.arange(pop_size),
    )


def initialize_population(
    pop_size: int,
    xl: np.ndarray,
    xu: np.ndarray,
    rng: np.random.Generator,
    objectives: ObjectiveSet,
) -> tuple[np.ndarray, np.ndarray]:
    """Sample ``pop_size`` points uniformly inside the bounds and evaluate them.

    Returns
    -------
    tuple[np.ndarray, np.ndarray]
        (X, F) population arrays.
    """
    X = rng.uniform(xl, xu, size=(pop_size, xl.shape[0]))
    F = objectives.evaluate_population(X)
    return X, F


__all__ = [
    "initialize_moead_run",
    "initialize_population",
]
