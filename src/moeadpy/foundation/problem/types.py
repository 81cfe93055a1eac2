from __future__ import annotations

import numbers
from typing import Callable, Iterable, Iterator, Protocol, Sequence

import numpy as np

from moeadpy.foundation.exceptions import EvaluationError, ProblemDimensionError

ObjectiveFunction = Callable[[np.ndarray], float]


class ProblemProtocol(Protocol):
    n_var: int
    n_obj: int
    xl: float | np.ndarray
    xu: float | np.ndarray
    objectives: ObjectiveSet | Sequence[ObjectiveFunction]

    def evaluate(self, X: np.ndarray, out: dict[str, np.ndarray]) -> None: ...


class ObjectiveSet:
    """
    Ordered collection of scalar objective functions sharing one signature.

    Each callable is invoked once per candidate; the results are collected into
    an objective vector in the order the callables were given.
    """

    def __init__(self, objectives: Iterable[ObjectiveFunction]) -> None:
        if isinstance(objectives, ObjectiveSet):
            funcs = list(objectives.functions)
        elif callable(objectives):
            funcs = [objectives]
        else:
            funcs = list(objectives)
        if not funcs:
            raise ProblemDimensionError("At least one objective function is required.", n_obj=0)
        for pos, fn in enumerate(funcs):
            if not callable(fn):
                raise ProblemDimensionError(f"Objective #{pos} is not callable: {fn!r}.", n_obj=len(funcs))
        self.functions: tuple[ObjectiveFunction, ...] = tuple(funcs)

    @property
    def n_obj(self) -> int:
        return len(self.functions)

    def __len__(self) -> int:
        return len(self.functions)

    def __iter__(self) -> Iterator[ObjectiveFunction]:
        return iter(self.functions)

    def evaluate(self, x: np.ndarray) -> np.ndarray:
        """Evaluate every objective on one decision vector, returning shape (n_obj,)."""
        f = np.empty(self.n_obj, dtype=float)
        for j, fn in enumerate(self.functions):
            try:
                value = fn(x)
            except Exception as exc:
                raise EvaluationError(
                    f"Objective #{j} raised {type(exc).__name__}: {exc}",
                    solution=np.array(x, copy=True),
                ) from exc
            f[j] = _as_scalar(value, j, x)
        return f

    def evaluate_population(self, X: np.ndarray) -> np.ndarray:
        """Evaluate a population of shape (N, n_var), returning shape (N, n_obj)."""
        X = np.atleast_2d(X)
        F = np.empty((X.shape[0], self.n_obj), dtype=float)
        for i in range(X.shape[0]):
            F[i] = self.evaluate(X[i])
        return F


def _as_scalar(value: object, index: int, x: np.ndarray) -> float:
    if isinstance(value, numbers.Real):
        return float(value)
    arr = np.asarray(value)
    if arr.size == 1 and np.issubdtype(arr.dtype, np.number) and not np.iscomplexobj(arr):
        return float(arr.reshape(()))
    raise EvaluationError(
        f"Objective #{index} must return a real scalar, got {type(value).__name__} with shape {arr.shape}.",
        solution=np.array(x, copy=True),
    )


__all__ = ["ObjectiveFunction", "ObjectiveSet", "ProblemProtocol"]
