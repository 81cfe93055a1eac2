import numpy as np
import pytest

from moeadpy import FonsecaFlemingProblem, Problem, SchafferN1Problem
from moeadpy.foundation.problem.types import ObjectiveSet


@pytest.mark.parametrize("n_var", [1, 3, 10])
def test_fonseca_fleming_pareto_set_is_optimal(n_var):
    problem = FonsecaFlemingProblem(n_var=n_var)
    lo, hi = problem.pareto_set_bounds()
    assert problem.f1(np.full(n_var, hi)) == pytest.approx(0.0)
    assert problem.f2(np.full(n_var, lo)) == pytest.approx(0.0)
    values = problem.objectives.evaluate(np.zeros(n_var))
    assert values.shape == (2,)
    assert values[0] == pytest.approx(values[1])
    assert 0.0 <= values[0] < 1.0


def test_fonseca_fleming_rejects_empty_decision_space():
    with pytest.raises(ValueError):
        FonsecaFlemingProblem(n_var=0)


def test_schaffer_objectives():
    problem = SchafferN1Problem()
    assert problem.n_var == 1
    np.testing.assert_allclose(problem.objectives.evaluate(np.array([1.0])), [1.0, 1.0])
    np.testing.assert_allclose(problem.objectives.evaluate(np.array([0.0])), [0.0, 4.0])
    lower, upper = problem.bounds()
    assert lower.tolist() == [-1000.0]
    assert upper.tolist() == [1000.0]


def test_batch_evaluate_fills_output_buffer():
    problem = FonsecaFlemingProblem(n_var=2)
    X = np.array([[0.0, 0.0], [1.0, 1.0], [-1.0, 0.5]])
    out = {"F": np.empty((3, 2))}
    buf = out["F"]
    problem.evaluate(X, out)
    assert out["F"] is buf
    for row, x in zip(out["F"], X):
        np.testing.assert_allclose(row, [problem.f1(x), problem.f2(x)])


def test_custom_problem_must_define_objectives():
    class Incomplete(Problem):
        n_var = 2
        n_obj = 2
        xl = 0.0
        xu = 1.0

    with pytest.raises(NotImplementedError):
        Incomplete().objectives


def test_custom_problem_objectives():
    class Sphere(Problem):
        def __init__(self):
            self.n_var = 2
            self.n_obj = 2
            self.xl = np.zeros(2)
            self.xu = np.ones(2)

        def objective_functions(self):
            return [lambda x: float(np.sum(x**2)), lambda x: float(np.sum((x - 1.0) ** 2))]

    objectives = Sphere().objectives
    assert isinstance(objectives, ObjectiveSet)
    np.testing.assert_allclose(objectives.evaluate(np.array([1.0, 1.0])), [2.0, 0.0])
