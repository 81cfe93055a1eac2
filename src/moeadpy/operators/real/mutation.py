"""Real-valued mutation operators."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from .utils import ArrayLike, RealOperator, _check_probability, _ensure_bounds


class Mutation(RealOperator, ABC):
    """Base class for real-coded mutation operators."""

    @abstractmethod
    def __call__(self, offspring: ArrayLike, rng: np.random.Generator) -> ArrayLike:
        raise NotImplementedError


class GaussianMutation(Mutation):
    """Gaussian mutation followed by componentwise clamping into the bounds.

    Each gene is perturbed independently with probability ``prob_mutation`` by
    ``sigma * N(0, 1)``. ``offspring`` is modified in place and returned.
    """

    def __init__(
        self,
        prob_mutation: float,
        sigma: float | ArrayLike,
        *,
        lower: ArrayLike,
        upper: ArrayLike,
    ) -> None:
        self.prob = _check_probability(prob_mutation, "prob_mutation")
        sigma_arr = np.asarray(sigma, dtype=float)
        if sigma_arr.ndim > 1:
            raise ValueError("sigma must be scalar or 1-D array.")
        if np.any(sigma_arr < 0.0):
            raise ValueError("sigma must be non-negative.")
        self.sigma = sigma_arr
        self.lower, self.upper = _ensure_bounds(lower, upper)

    def __call__(self, offspring: ArrayLike, rng: np.random.Generator) -> ArrayLike:
        X = self._as_population(offspring, name="offspring")
        n_ind, n_var = X.shape
        if n_ind == 0:
            return X
        self._check_bounds_match(X, self.lower)
        mask = rng.random((n_ind, n_var)) < self.prob
        if np.any(mask):
            sigma = np.broadcast_to(self.sigma, (n_ind, n_var))
            noise = rng.standard_normal((n_ind, n_var)) * sigma
            X[mask] += noise[mask]
        np.clip(X, self.lower, self.upper, out=X)
        return X


__all__ = ["Mutation", "GaussianMutation"]
