"""Real-valued crossover operators."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from .utils import ArrayLike, RealOperator, _check_probability, _ensure_bounds


class Crossover(RealOperator, ABC):
    """Base class for real-coded crossover operators producing one child per mating."""

    @abstractmethod
    def __call__(self, parents: ArrayLike, rng: np.random.Generator) -> ArrayLike:
        raise NotImplementedError


class UniformCrossover(Crossover):
    """
    Uniform crossover returning a single child per parent pair.

    With probability ``prob_crossover`` each gene of the child is copied from
    the first or the second parent with equal chance; otherwise the child is a
    copy of the first parent.
    """

    def __init__(
        self,
        prob_crossover: float = 0.6,
        *,
        lower: ArrayLike,
        upper: ArrayLike,
    ) -> None:
        self.prob = _check_probability(prob_crossover, "prob_crossover")
        self.lower, self.upper = _ensure_bounds(lower, upper)

    def __call__(self, parents: ArrayLike, rng: np.random.Generator) -> ArrayLike:
        parents_arr = self._as_matings(parents, name="parents")
        children = parents_arr[:, 0, :].copy()
        n_pairs, _, n_var = parents_arr.shape
        if n_pairs == 0:
            return children
        self._check_bounds_match(children, self.lower)

        apply_mask = rng.random(n_pairs) < self.prob
        if not np.any(apply_mask):
            return children

        take_second = rng.random((n_pairs, n_var)) <= 0.5
        take_second &= apply_mask[:, None]
        children[take_second] = parents_arr[:, 1, :][take_second]
        return children


__all__ = ["Crossover", "UniformCrossover"]
