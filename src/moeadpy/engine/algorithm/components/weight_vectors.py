import logging
import os
from math import comb
from typing import Optional

import numpy as np

from moeadpy.foundation.exceptions import ConfigurationError, InvalidWeightsError

WEIGHT_METHODS = ("lattice", "random")


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def load_or_generate_weight_vectors(
    pop_size: int,
    n_obj: int,
    *,
    method: str = "lattice",
    divisions: Optional[int] = None,
    path: Optional[str] = None,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """
    Load weight vectors from CSV if available, otherwise generate ``pop_size``
    vectors on the unit simplex and persist them when a path is provided.

    The returned array is read-only with shape (pop_size, n_obj); every row is
    non-negative and sums to 1.
    """
    if pop_size < 1:
        raise ConfigurationError(f"pop_size must be >= 1 to generate weights, got {pop_size}.")
    if n_obj < 1:
        raise ConfigurationError(f"n_obj must be >= 1 to generate weights, got {n_obj}.")

    if path and os.path.exists(path):
        weights = _load_weights(path)
        _assert_valid_weights(weights, n_obj, path)
        if weights.shape[0] < pop_size:
            raise InvalidWeightsError(
                f"Weight file '{path}' contains {weights.shape[0]} vectors "
                f"but pop_size={pop_size} requires at least that many.",
                path=path,
            )
        _logger().debug("Loaded %d weight vectors from %s", pop_size, path)
        weights = weights[:pop_size].copy()
    else:
        weights = _generate_weights(pop_size, n_obj, method, divisions, rng)
        if path:
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            np.savetxt(path, weights, delimiter=",")

    weights.setflags(write=False)
    return weights


def _load_weights(path: str) -> np.ndarray:
    arr = np.loadtxt(path, delimiter=",")
    arr = np.atleast_2d(arr).astype(float, copy=False)
    return arr


def _assert_valid_weights(weights: np.ndarray, n_obj: int, path: str) -> None:
    if weights.ndim != 2:
        raise InvalidWeightsError("Weight matrix must be 2D.", path=path)
    if weights.shape[1] != n_obj:
        raise InvalidWeightsError(
            f"Expected weight vectors with {n_obj} columns, got {weights.shape[1]}.",
            path=path,
        )
    if np.any(weights < 0.0):
        raise InvalidWeightsError("Weight vectors must be non-negative.", path=path)
    rows_sum = weights.sum(axis=1)
    # Allow very small numerical drift
    if np.any(np.abs(rows_sum - 1.0) > 1e-6):
        raise InvalidWeightsError("Each weight vector must sum to 1.", path=path)


def _generate_weights(
    pop_size: int,
    n_obj: int,
    method: str,
    divisions: Optional[int],
    rng: Optional[np.random.Generator],
) -> np.ndarray:
    if n_obj < 2:
        # Degenerate single-objective: return uniform weights.
        return np.ones((pop_size, 1), dtype=float)
    name = (method or "lattice").lower()
    if name == "lattice":
        return _lattice_weights(pop_size, n_obj, divisions)
    if name == "random":
        return _random_weights(pop_size, n_obj, rng if rng is not None else np.random.default_rng())
    raise ConfigurationError(
        f"Unknown weight generation method '{method}'.",
        suggestion=f"Available methods: {', '.join(WEIGHT_METHODS)}",
    )


def _lattice_weights(pop_size: int, n_obj: int, divisions: Optional[int]) -> np.ndarray:
    if divisions is None:
        divisions = _choose_min_divisions(pop_size, n_obj)
    elif _count_lattice_points(n_obj, divisions) < pop_size:
        # Automatically increase divisions until we have enough directions.
        divisions = max(divisions, _choose_min_divisions(pop_size, n_obj))

    lattice = _simplex_lattice(n_obj, divisions)
    if lattice.shape[0] > pop_size:
        # Evenly spaced subset in lattice order; keeps both corners of the lattice.
        keep = np.round(np.linspace(0, lattice.shape[0] - 1, pop_size)).astype(int)
        lattice = lattice[keep]
    return lattice


def _random_weights(pop_size: int, n_obj: int, rng: np.random.Generator) -> np.ndarray:
    # Normalized exponential draws are uniform on the simplex.
    draws = rng.exponential(1.0, size=(pop_size, n_obj))
    return draws / draws.sum(axis=1, keepdims=True)


def _choose_min_divisions(pop_size: int, n_obj: int) -> int:
    divisions = 1
    while _count_lattice_points(n_obj, divisions) < pop_size:
        divisions += 1
    return divisions


def _count_lattice_points(n_obj: int, divisions: int) -> int:
    if divisions < 1:
        raise ConfigurationError("divisions must be >= 1")
    return comb(divisions + n_obj - 1, n_obj - 1)


def _simplex_lattice(n_obj: int, divisions: int) -> np.ndarray:
    coords = []

    def rec(remaining: int, depth: int, current: list[int]) -> None:
        if depth == n_obj - 1:
            current.append(remaining)
            coords.append(tuple(current))
            current.pop()
            return
        for value in range(remaining + 1):
            current.append(value)
            rec(remaining - value, depth + 1, current)
            current.pop()

    rec(divisions, 0, [])
    arr = np.asarray(coords, dtype=float)
    arr /= divisions
    # Numerical guard to keep rows summing to exactly 1
    arr = np.clip(arr, 0.0, 1.0)
    arr /= arr.sum(axis=1, keepdims=True)
    return arr


__all__ = ["WEIGHT_METHODS", "load_or_generate_weight_vectors"]
