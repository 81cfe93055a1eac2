# problem/schaffer.py
import numpy as np

from moeadpy.foundation.problem.base import Problem


class SchafferN1Problem(Problem):
    """Schaffer function N.1: f1 = x^2, f2 = (x - 2)^2, Pareto set x in [0, 2]."""

    def __init__(self, bound: float = 1000.0) -> None:
        self.n_var = 1
        self.n_obj = 2
        self.xl = -float(bound)
        self.xu = float(bound)

    @staticmethod
    def f1(x: np.ndarray) -> float:
        return float(np.asarray(x).reshape(-1)[0] ** 2)

    @staticmethod
    def f2(x: np.ndarray) -> float:
        return float((np.asarray(x).reshape(-1)[0] - 2.0) ** 2)

    def objective_functions(self):
        return [self.f1, self.f2]

    def pareto_set_bounds(self) -> tuple[float, float]:
        return 0.0, 2.0
