# problem/fonseca_fleming.py
import numpy as np

from moeadpy.foundation.problem.base import Problem


class FonsecaFlemingProblem(Problem):
    """
    Fonseca-Fleming two-objective benchmark.

    f1(x) = 1 - exp(-sum((x_i - 1/sqrt(n))^2))
    f2(x) = 1 - exp(-sum((x_i + 1/sqrt(n))^2))

    The Pareto set is x_1 = ... = x_n in [-1/sqrt(n), 1/sqrt(n)], and both
    objectives lie in [0, 1).
    """

    def __init__(self, n_var: int = 3) -> None:
        if n_var < 1:
            raise ValueError("FonsecaFlemingProblem requires n_var >= 1.")
        self.n_var = n_var
        self.n_obj = 2
        self.xl = -4.0
        self.xu = 4.0
        self._shift = 1.0 / np.sqrt(n_var)

    def f1(self, x: np.ndarray) -> float:
        return float(1.0 - np.exp(-np.sum((np.asarray(x) - self._shift) ** 2)))

    def f2(self, x: np.ndarray) -> float:
        return float(1.0 - np.exp(-np.sum((np.asarray(x) + self._shift) ** 2)))

    def objective_functions(self):
        return [self.f1, self.f2]

    def pareto_set_bounds(self) -> tuple[float, float]:
        return -self._shift, self._shift
