"""Real-valued evolutionary operators."""

from .crossover import Crossover, UniformCrossover
from .mutation import GaussianMutation, Mutation
from .utils import ArrayLike, RealOperator, _check_nvars, _ensure_bounds

__all__ = [
    "ArrayLike",
    "Crossover",
    "GaussianMutation",
    "Mutation",
    "RealOperator",
    "UniformCrossover",
    "_check_nvars",
    "_ensure_bounds",
]
