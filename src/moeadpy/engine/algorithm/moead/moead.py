# algorithm/moead/moead.py
"""
MOEA/D evolutionary algorithm core.

This module contains the main MOEAD class with the generational loop.
- Setup logic: initialization.py
- State and results: state.py
- Helper functions: helpers.py

References:
    Q. Zhang and H. Li, "MOEA/D: A Multiobjective Evolutionary Algorithm Based on
    Decomposition," IEEE Trans. Evolutionary Computation, vol. 11, no. 6, 2007.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterable

import numpy as np

from moeadpy.engine.algorithm.components.hooks import CallbackList
from moeadpy.engine.algorithm.config import MOEADConfig
from moeadpy.foundation.core.result import OptimizationResult
from moeadpy.foundation.observer import RunContext
from moeadpy.foundation.problem.types import ObjectiveFunction, ObjectiveSet

from .helpers import update_neighborhood
from .initialization import initialize_moead_run
from .state import MOEADState, build_moead_result


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class RunStatus(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    RUNNING = "running"
    TERMINATED = "terminated"


def _read_only(arr: np.ndarray) -> np.ndarray:
    arr = np.array(arr, copy=True)
    arr.setflags(write=False)
    return arr


class MOEAD:
    """
    Multi-Objective Evolutionary Algorithm based on Decomposition.

    MOEA/D decomposes a multi-objective problem into Tchebycheff subproblems
    using weight vectors and optimizes them collaboratively via
    neighbourhood-based mating and replacement. Subproblems are visited in
    index order and replacements are visible to later subproblems of the same
    generation.

    Parameters
    ----------
    config : MOEADConfig | None
        Algorithm configuration; defaults to ``MOEADConfig()``.
    **overrides
        Field overrides applied on top of ``config``.

    Examples
    --------
    >>> import numpy as np
    >>> from moeadpy import MOEAD, FonsecaFlemingProblem
    >>> problem = FonsecaFlemingProblem()
    >>> moead = MOEAD(pop_size=50, neighbourhood_size=10, lower_bound=[-4], upper_bound=[4], seed=1)
    >>> value = moead.optimize(problem.objectives, np.zeros(3))
    >>> front = moead.front
    """

    def __init__(self, config: MOEADConfig | None = None, **overrides: Any) -> None:
        cfg = config if config is not None else MOEADConfig()
        self.cfg = cfg.replace(**overrides) if overrides else cfg
        self.status = RunStatus.UNINITIALIZED
        self._st: MOEADState | None = None
        self._callbacks = CallbackList()
        self._front_X = _read_only(np.empty((0, 0)))
        self._front_F = _read_only(np.empty((0, 0)))
        self._result: OptimizationResult | None = None

    # ------------------------------------------------------------------
    # Result surface
    # ------------------------------------------------------------------

    @property
    def front(self) -> np.ndarray:
        """Decision vectors of the best front, shape (n_front, n_var). Empty before the first run."""
        return self._front_X

    @property
    def front_objectives(self) -> np.ndarray:
        """Objective vectors of the best front, index-aligned with :attr:`front`."""
        return self._front_F

    @property
    def state(self) -> MOEADState | None:
        return self._st

    def result(self) -> OptimizationResult | None:
        """Result of the last completed run, or None."""
        return self._result

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------

    def optimize(
        self,
        objectives: ObjectiveSet | Iterable[ObjectiveFunction],
        iterate: np.ndarray,
        *callbacks: Any,
    ) -> float:
        """
        Run MOEA/D on a set of objectives.

        Parameters
        ----------
        objectives : ObjectiveSet | Iterable[ObjectiveFunction]
            The k scalar objective callables.
        iterate : np.ndarray
            Reference point whose size defines the number of decision variables.
        *callbacks
            Objects implementing any subset of the ``Observer`` hooks.

        Returns
        -------
        float
            Mean Tchebycheff value of the final population, each member
            measured against its own weight vector and the final ideal point.
        """
        try:
            objective_set = ObjectiveSet(objectives)
            self._initialize_run(objective_set, int(np.asarray(iterate).size), callbacks)
            st = self._st
            assert st is not None, "State not initialized"

            stop_requested = self._callbacks.on_start(self._run_context())
            self.status = RunStatus.RUNNING

            while st.generation < st.max_generations and not stop_requested:
                self.step()
                stop_requested = self._callbacks.on_generation(
                    st.generation,
                    F=st.F,
                    X=st.X,
                    stats=self._stats(st),
                )
                _logger().debug(
                    "generation=%d evaluations=%d front=%d ideal=%s",
                    st.generation,
                    st.n_eval,
                    len(st.archive),
                    st.ideal,
                )

            return self._terminate(stopped_early=st.generation < st.max_generations)
        except Exception:
            self.status = RunStatus.UNINITIALIZED
            self._st = None
            raise

    def _initialize_run(self, objectives: ObjectiveSet, n_var: int, callbacks: Iterable[Any]) -> None:
        """Initialize algorithm state for a run."""
        self._callbacks = CallbackList(callbacks)
        self._st = initialize_moead_run(self.cfg, objectives, n_var)
        self.status = RunStatus.INITIALIZED

    def step(self) -> None:
        """
        Run one generation: one offspring per subproblem, in index order.

        Raises
        ------
        RuntimeError
            If called before initialization.
        """
        st = self._st
        if st is None or self.status not in {RunStatus.INITIALIZED, RunStatus.RUNNING}:
            raise RuntimeError("step() called before initialization.")

        n_var = st.X.shape[1]
        for i in range(st.pop_size):
            # Mating selection
            mating_pool = st.neighbors[i]
            if mating_pool.size < 2:
                mating_pool = st.all_indices
            k, l = st.rng.choice(mating_pool, size=2, replace=False)

            # Reproduction
            parents = st.X[[k, l]].reshape(1, 2, n_var)
            child = st.crossover(parents, st.rng)
            child = st.mutation(child, st.rng)[0]

            # Evaluation
            child_f = st.objectives.evaluate(child)
            st.n_eval += 1
            self._callbacks.on_evaluation(child, child_f)
            st.update_ideal(child_f)

            # Replacement and archive
            st.replacements += update_neighborhood(st, i, child, child_f)
            st.archive.add(child, child_f)

        st.generation += 1

    def _terminate(self, stopped_early: bool) -> float:
        st = self._st
        assert st is not None, "State not initialized"
        value = float(np.mean(st.decomposed_values()))
        payload = build_moead_result(st, value, stopped_early=stopped_early)
        self._front_X = _read_only(payload["X"])
        self._front_F = _read_only(payload["F"])
        self._result = OptimizationResult(payload)
        self.status = RunStatus.TERMINATED

        self._callbacks.on_end(final_F=self._front_F, final_stats=self._stats(st))
        _logger().info(
            "MOEA/D finished after %d generations (%d evaluations%s): front=%d, value=%.6g",
            st.generation,
            st.n_eval,
            ", stopped early" if stopped_early else "",
            self._front_X.shape[0],
            value,
        )
        return value

    def _run_context(self) -> RunContext:
        st = self._st
        assert st is not None, "State not initialized"
        return RunContext(
            algorithm=self,
            config=self.cfg,
            n_var=st.X.shape[1],
            n_obj=st.F.shape[1],
            weights=st.weights,
            neighbors=st.neighbors,
            ideal=st.ideal.copy(),
        )

    @staticmethod
    def _stats(st: MOEADState) -> dict[str, Any]:
        return {
            "evaluations": st.n_eval,
            "front_size": len(st.archive),
            "replacements": st.replacements,
            "ideal": st.ideal.copy(),
        }


__all__ = ["MOEAD", "RunStatus"]
