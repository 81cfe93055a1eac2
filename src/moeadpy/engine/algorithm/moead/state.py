"""
MOEA/D State container and result building.

This module provides the MOEADState dataclass that holds all mutable state
of one MOEA/D run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from moeadpy.engine.algorithm.components.archive import ParetoArchive
from moeadpy.foundation.problem.types import ObjectiveSet
from moeadpy.operators.real import Crossover, Mutation

from .helpers import tchebycheff


@dataclass
class MOEADState:
    """
    Mutable state container for the MOEA/D algorithm.

    Attributes
    ----------
    X : np.ndarray
        Decision vectors, shape (pop_size, n_var), row i belongs to subproblem i.
    F : np.ndarray
        Objective vectors, shape (pop_size, n_obj), index-aligned with X.
    rng : np.random.Generator
        The single random stream of the run.
    weights : np.ndarray
        Read-only weight vectors, shape (pop_size, n_obj).
    neighbors : np.ndarray
        Read-only neighbourhood indices, shape (pop_size, T).
    ideal : np.ndarray
        Ideal point (minimum finite objectives seen), shape (n_obj,).
    archive : ParetoArchive
        Non-dominated solutions found so far.
    """

    X: np.ndarray
    F: np.ndarray
    rng: np.random.Generator
    objectives: ObjectiveSet
    weights: np.ndarray
    neighbors: np.ndarray
    ideal: np.ndarray
    crossover: Crossover
    mutation: Mutation
    xl: np.ndarray
    xu: np.ndarray
    archive: ParetoArchive
    max_generations: int = 0
    n_eval: int = 0
    generation: int = 0
    replacements: int = 0
    all_indices: np.ndarray = field(default_factory=lambda: np.array([], dtype=int))

    @property
    def pop_size(self) -> int:
        return int(self.X.shape[0])

    @property
    def neighbor_size(self) -> int:
        return int(self.neighbors.shape[1])

    def update_ideal(self, f: np.ndarray) -> None:
        """Componentwise minimum with the finite entries of ``f``."""
        self.ideal = np.minimum(self.ideal, np.where(np.isfinite(f), f, np.inf))

    def decomposed_values(self) -> np.ndarray:
        """Tchebycheff value of every member under its own weight vector."""
        return tchebycheff(self.F, self.weights, self.ideal)


def initial_ideal_point(F: np.ndarray) -> np.ndarray:
    """Per-objective minimum over the finite entries of ``F``."""
    return np.where(np.isfinite(F), F, np.inf).min(axis=0)


def build_moead_result(state: MOEADState, value: float, stopped_early: bool = False) -> dict[str, Any]:
    """
    Build the result dictionary from MOEA/D state.

    Parameters
    ----------
    state : MOEADState
        Final algorithm state.
    value : float
        Scalar summary of the run.
    stopped_early : bool
        Whether a callback ended the run before ``max_generations``.

    Returns
    -------
    dict[str, Any]
        Result dictionary with the front, the final population and run counters.
    """
    front_X, front_F = state.archive.contents()
    return {
        "X": front_X,
        "F": front_F,
        "value": float(value),
        "population": {"X": state.X.copy(), "F": state.F.copy()},
        "weights": state.weights,
        "ideal": state.ideal.copy(),
        "generations": state.generation,
        "evaluations": state.n_eval,
        "stopped_early": stopped_early,
    }


__all__ = [
    "MOEADState",
    "build_moead_result",
    "initial_ideal_point",
]
