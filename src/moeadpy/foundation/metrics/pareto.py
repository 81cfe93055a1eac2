from __future__ import annotations

from typing import Literal, overload

import numpy as np


def dominates(a: np.ndarray, b: np.ndarray) -> bool:
    """
    Pareto dominance under minimization.

    Returns True iff ``a`` is no worse than ``b`` in every objective and
    strictly better in at least one. A vector holding any non-finite value
    never dominates.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        raise ValueError(f"Cannot compare objective vectors of shapes {a.shape} and {b.shape}.")
    if not np.all(np.isfinite(a)):
        return False
    return bool(np.all(a <= b) and np.any(a < b))


def dominated_mask(F: np.ndarray, f: np.ndarray) -> np.ndarray:
    """Boolean mask over the rows of ``F`` that ``f`` dominates."""
    F = np.atleast_2d(np.asarray(F, dtype=float))
    f = np.asarray(f, dtype=float)
    if F.shape[0] == 0 or not np.all(np.isfinite(f)):
        return np.zeros(F.shape[0], dtype=bool)
    return np.all(f <= F, axis=1) & np.any(f < F, axis=1)


def dominators_mask(F: np.ndarray, f: np.ndarray) -> np.ndarray:
    """Boolean mask over the rows of ``F`` that dominate ``f``."""
    F = np.atleast_2d(np.asarray(F, dtype=float))
    f = np.asarray(f, dtype=float)
    if F.shape[0] == 0:
        return np.zeros(0, dtype=bool)
    finite_rows = np.all(np.isfinite(F), axis=1)
    return finite_rows & np.all(F <= f, axis=1) & np.any(F < f, axis=1)


@overload
def pareto_filter(F: np.ndarray | None, *, return_indices: Literal[False] = False) -> np.ndarray | None: ...


@overload
def pareto_filter(F: np.ndarray | None, *, return_indices: Literal[True]) -> tuple[np.ndarray, np.ndarray]: ...


def pareto_filter(F: np.ndarray | None, *, return_indices: bool = False) -> np.ndarray | tuple[np.ndarray, np.ndarray] | None:
    """
    Return the non-dominated subset of points (first Pareto front).

    Args:
        F: Objective values array (n_solutions, n_objectives) or None.
        return_indices: When True, also return indices of the front in F.

    Returns:
        Front array, or (front, indices) when return_indices is True.
    """
    if F is None:
        if return_indices:
            return np.empty((0, 0)), np.array([], dtype=int)
        return None
    F = np.asarray(F, dtype=float)
    if F.size == 0 or F.ndim < 2:
        if return_indices:
            n = int(F.shape[0]) if F.ndim > 0 else 0
            return F, np.arange(n, dtype=int)
        return F

    keep = np.array([not np.any(dominators_mask(F, row)) for row in F], dtype=bool)
    idx = np.flatnonzero(keep)
    front = F[idx]
    return (front, idx) if return_indices else front


__all__ = ["dominates", "dominated_mask", "dominators_mask", "pareto_filter"]
