"""
Base class for class-based benchmark and custom problems.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .types import ObjectiveFunction, ObjectiveSet


class Problem:
    """Base class for class-based optimization problems.

    Subclass this when the objectives share state set up in ``__init__``.

    **Required:** set ``n_var``, ``n_obj``, ``xl``, ``xu`` in ``__init__`` and
    implement :meth:`objective_functions`.

    Example::

        import numpy as np
        from moeadpy import Problem, optimize

        class MyProblem(Problem):
            def __init__(self):
                self.n_var = 3
                self.n_obj = 2
                self.xl = np.zeros(3)
                self.xu = np.ones(3)

            def objective_functions(self):
                return [
                    lambda x: float(np.sum(x ** 2)),
                    lambda x: float(np.sum((x - 1) ** 2)),
                ]

        result = optimize(MyProblem(), max_generations=50)
    """

    n_var: int
    n_obj: int
    xl: float | np.ndarray
    xu: float | np.ndarray

    def objective_functions(self) -> Sequence[ObjectiveFunction]:
        """Return the ``n_obj`` scalar objective callables, each mapping x -> float."""
        raise NotImplementedError(
            f"{type(self).__name__} must implement objective_functions(self)."
        )

    @property
    def objectives(self) -> ObjectiveSet:
        return ObjectiveSet(self.objective_functions())

    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        """Return (lower, upper) broadcast to ``n_var``."""
        lower = np.broadcast_to(np.asarray(self.xl, dtype=float), (self.n_var,)).copy()
        upper = np.broadcast_to(np.asarray(self.xu, dtype=float), (self.n_var,)).copy()
        return lower, upper

    def evaluate(self, X: np.ndarray, out: dict[str, np.ndarray]) -> None:
        """Batch evaluation entry point; fills ``out["F"]`` with shape (N, n_obj)."""
        F_computed = self.objectives.evaluate_population(np.asarray(X, dtype=float))
        F_buf = out.get("F")
        if F_buf is not None and F_buf.shape == F_computed.shape:
            F_buf[:] = F_computed
        else:
            out["F"] = F_computed


__all__ = ["Problem"]
