from __future__ import annotations

import logging
from typing import Any

import numpy as np

from moeadpy.foundation.metrics.pareto import dominated_mask, dominators_mask


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class ParetoArchive:
    """
    Unbounded external archive of mutually non-dominated solutions.

    Candidates are folded in one at a time: members dominated by the candidate
    are dropped, and the candidate is kept unless an existing member dominates
    it or already holds the same decision vector. Candidates with non-finite
    objective values are never stored.
    """

    def __init__(self, n_var: int, n_obj: int, dtype: Any = float, *, initial_capacity: int = 64) -> None:
        self.n_var = int(n_var)
        self.n_obj = int(n_obj)
        self.dtype = np.dtype(dtype)
        cap = max(1, int(initial_capacity))
        self._X = np.empty((cap, self.n_var), dtype=self.dtype)
        self._F = np.empty((cap, self.n_obj), dtype=float)
        self._size = 0
        self.rejected_non_finite = 0

    def __len__(self) -> int:
        return self._size

    def _grow(self) -> None:
        cap = self._X.shape[0] * 2
        X = np.empty((cap, self.n_var), dtype=self.dtype)
        F = np.empty((cap, self.n_obj), dtype=float)
        X[: self._size] = self._X[: self._size]
        F[: self._size] = self._F[: self._size]
        self._X, self._F = X, F

    def add(self, x: np.ndarray, f: np.ndarray) -> bool:
        """Fold one candidate into the archive. Returns True when it was inserted."""
        x = np.asarray(x, dtype=self.dtype).reshape(self.n_var)
        f = np.asarray(f, dtype=float).reshape(self.n_obj)
        if not np.all(np.isfinite(f)):
            self.rejected_non_finite += 1
            _logger().debug("Rejected candidate with non-finite objectives %s", f)
            return False

        n = self._size
        F = self._F[:n]
        if np.any(dominators_mask(F, f)):
            return False
        if n and np.any(np.all(self._X[:n] == x, axis=1)):
            return False

        keep = ~dominated_mask(F, f)
        if not np.all(keep):
            kept = int(np.count_nonzero(keep))
            self._X[:kept] = self._X[:n][keep]
            self._F[:kept] = F[keep]
            n = kept

        if n == self._X.shape[0]:
            self._size = n
            self._grow()
        self._X[n] = x
        self._F[n] = f
        self._size = n + 1
        return True

    def update(self, X: np.ndarray, F: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        """Fold a batch of candidates in row order and return the archive contents."""
        X = np.atleast_2d(X)
        F = np.atleast_2d(F)
        if X.shape[0] != F.shape[0]:
            raise ValueError("X and F must have the same number of rows.")
        for x, f in zip(X, F):
            self.add(x, f)
        return self.contents()

    def contents(self) -> tuple[np.ndarray, np.ndarray]:
        """Return copies of the archived decision and objective vectors."""
        return self._X[: self._size].copy(), self._F[: self._size].copy()

    def clear(self) -> None:
        self._size = 0
        self.rejected_non_finite = 0


__all__ = ["ParetoArchive"]
