# algorithm/moead/helpers.py
"""
Support functions for MOEA/D.

This module contains the Tchebycheff scalarization, the neighbourhood
construction and the neighbourhood replacement step.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from moeadpy.foundation.exceptions import ConfigurationError

if TYPE_CHECKING:
    from .state import MOEADState

ZERO_WEIGHT_EPSILON = 1e-4


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


# =============================================================================
# Scalarization
# =============================================================================

def tchebycheff(fvals: np.ndarray, weights: np.ndarray, ideal: np.ndarray) -> np.ndarray:
    """Tchebycheff aggregation: max(w * |f - z*|).

    Zero weight components are replaced by ``ZERO_WEIGHT_EPSILON`` so that an
    objective is never ignored entirely.

    Parameters
    ----------
    fvals : np.ndarray
        Objective values, shape (N, n_obj) or (n_obj,).
    weights : np.ndarray
        Weight vectors, shape (N, n_obj) or (n_obj,).
    ideal : np.ndarray
        Ideal point (minimum objectives seen), shape (n_obj,).

    Returns
    -------
    np.ndarray
        Aggregated scalar values, shape (N,) or scalar. Smaller is better.
    """
    w = np.asarray(weights, dtype=float)
    w = np.where(w == 0.0, ZERO_WEIGHT_EPSILON, w)
    diff = np.abs(np.asarray(fvals, dtype=float) - np.asarray(ideal, dtype=float))
    return np.max(w * diff, axis=-1)


# =============================================================================
# Neighbourhood Management
# =============================================================================

def resolve_neighbor_size(neighbor_size: int, pop_size: int) -> int:
    """Clamp the neighbourhood size to the population size."""
    neighbor_size = int(neighbor_size)
    if neighbor_size < 1:
        raise ConfigurationError(
            f"neighbourhood_size must be >= 1, got {neighbor_size}.",
            suggestion="Use a neighbourhood of 10-20% of the population size",
        )
    if neighbor_size > pop_size:
        _logger().warning(
            "neighbourhood_size=%d exceeds pop_size=%d; clamping to %d.",
            neighbor_size,
            pop_size,
            pop_size,
        )
        return pop_size
    return neighbor_size


def compute_neighbors(weights: np.ndarray, neighbor_size: int) -> np.ndarray:
    """Compute neighbourhood indices based on weight vector distances.

    Parameters
    ----------
    weights : np.ndarray
        Weight vectors, shape (pop_size, n_obj).
    neighbor_size : int
        Neighbourhood size (T parameter), clamped to pop_size.

    Returns
    -------
    np.ndarray
        Neighbourhood indices, shape (pop_size, T). Row i is sorted by
        ascending distance (ties by index) and starts with i itself.
    """
    pop_size = weights.shape[0]
    neighbor_size = resolve_neighbor_size(neighbor_size, pop_size)
    dist = np.linalg.norm(weights[:, None, :] - weights[None, :, :], axis=2)
    np.fill_diagonal(dist, -1.0)
    order = np.argsort(dist, axis=1, kind="stable")
    neighbors = np.ascontiguousarray(order[:, :neighbor_size])
    neighbors.setflags(write=False)
    return neighbors


def update_neighborhood(
    st: "MOEADState",
    idx: int,
    child: np.ndarray,
    child_f: np.ndarray,
) -> int:
    """Replace neighbours of subproblem ``idx`` that the child does not worsen.

    Every neighbour j (in neighbourhood order) whose Tchebycheff value is
    greater than or equal to the child's under weight j is overwritten in
    place. Non-finite values of current members count as +inf.

    Returns
    -------
    int
        Number of replaced members.
    """
    neighbor_idx = st.neighbors[idx]
    replaced = 0
    for j in neighbor_idx:
        w = st.weights[j]
        child_val = tchebycheff(child_f, w, st.ideal)
        current_val = tchebycheff(st.F[j], w, st.ideal)
        if not np.isfinite(current_val):
            current_val = np.inf
        if child_val <= current_val:
            st.X[j] = child
            st.F[j] = child_f
            replaced += 1
    return replaced


__all__ = [
    "ZERO_WEIGHT_EPSILON",
    "tchebycheff",
    "resolve_neighbor_size",
    "compute_neighbors",
    "update_neighborhood",
]
