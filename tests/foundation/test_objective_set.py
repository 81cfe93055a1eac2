from __future__ import annotations

import numpy as np
import pytest

from moeadpy.foundation.exceptions import EvaluationError, ProblemDimensionError
from moeadpy.foundation.problem import (
    FonsecaFlemingProblem,
    ObjectiveSet,
    SchafferN1Problem,
)


def test_objective_set_evaluates_in_order() -> None:
    objectives = ObjectiveSet([lambda x: float(np.sum(x)), lambda x: float(np.prod(x)), np.max])
    f = objectives.evaluate(np.array([1.0, 2.0, 3.0]))
    assert f.tolist() == [6.0, 6.0, 3.0]
    assert objectives.n_obj == 3
    assert len(objectives) == 3


def test_objective_set_population() -> None:
    objectives = ObjectiveSet([lambda x: x[0], lambda x: -x[0]])
    F = objectives.evaluate_population(np.array([[1.0], [2.0], [3.0]]))
    assert F.shape == (3, 2)
    assert F[:, 1].tolist() == [-1.0, -2.0, -3.0]


def test_objective_set_accepts_objective_set() -> None:
    base = ObjectiveSet([lambda x: 1.0, lambda x: 2.0])
    assert ObjectiveSet(base).functions == base.functions


def test_empty_objectives_rejected() -> None:
    with pytest.raises(ProblemDimensionError):
        ObjectiveSet([])


def test_non_callable_rejected() -> None:
    with pytest.raises(ProblemDimensionError):
        ObjectiveSet([lambda x: 1.0, "not callable"])


def test_objective_errors_are_wrapped() -> None:
    def broken(x):
        raise ZeroDivisionError("boom")

    objectives = ObjectiveSet([lambda x: 0.0, broken])
    with pytest.raises(EvaluationError) as info:
        objectives.evaluate(np.zeros(2))
    assert isinstance(info.value.__cause__, ZeroDivisionError)
    assert "Objective #1" in str(info.value)


def test_non_scalar_results_rejected() -> None:
    objectives = ObjectiveSet([lambda x: x])
    with pytest.raises(EvaluationError):
        objectives.evaluate(np.zeros(3))


def test_numpy_scalars_and_single_element_arrays_accepted() -> None:
    objectives = ObjectiveSet([lambda x: np.float32(1.5), lambda x: np.array([2.0])])
    assert objectives.evaluate(np.zeros(1)).tolist() == [1.5, 2.0]


def test_non_finite_values_propagate() -> None:
    objectives = ObjectiveSet([lambda x: np.nan, lambda x: np.inf])
    f = objectives.evaluate(np.zeros(1))
    assert np.isnan(f[0]) and np.isinf(f[1])


def test_fonseca_fleming_known_values() -> None:
    problem = FonsecaFlemingProblem(n_var=3)
    shift = 1.0 / np.sqrt(3.0)
    x = np.full(3, shift)
    f = problem.objectives.evaluate(x)
    assert f[0] == pytest.approx(0.0)
    assert f[1] == pytest.approx(1.0 - np.exp(-4.0))
    assert problem.pareto_set_bounds() == pytest.approx((-shift, shift))


def test_problem_batch_evaluate_fills_buffer() -> None:
    problem = SchafferN1Problem()
    X = np.array([[0.0], [2.0], [1.0]])
    out = {"F": np.empty((3, 2))}
    problem.evaluate(X, out)
    assert out["F"].tolist() == [[0.0, 4.0], [4.0, 0.0], [1.0, 1.0]]


def test_problem_bounds_broadcast() -> None:
    lower, upper = FonsecaFlemingProblem(n_var=4).bounds()
    assert lower.tolist() == [-4.0] * 4
    assert upper.tolist() == [4.0] * 4
