from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import numpy as np


@dataclass
class RunContext:
    """
    Encapsulates the static context of an optimization run.
    Passed to on_start events.
    """

    algorithm: Any  # MOEAD instance
    config: Any  # MOEADConfig used for the run
    n_var: int
    n_obj: int
    weights: np.ndarray
    neighbors: np.ndarray
    ideal: np.ndarray
    algorithm_name: str = "moead"


@runtime_checkable
class Observer(Protocol):
    """
    Callback interface for the optimization loop.

    Every method is optional. A truthy return value from ``on_start``,
    ``on_evaluation``, ``on_generation`` or ``should_stop`` requests that the
    run stops before the next generation begins.
    """

    def on_start(self, ctx: RunContext) -> bool | None:
        """Called once after the initial population has been evaluated."""
        ...

    def on_evaluation(self, x: np.ndarray, f: np.ndarray) -> bool | None:
        """Called after each offspring evaluation."""
        ...

    def on_generation(
        self,
        generation: int,
        F: np.ndarray | None = None,
        X: np.ndarray | None = None,
        stats: dict[str, Any] | None = None,
    ) -> bool | None:
        """Called at every generation boundary."""
        ...

    def on_end(
        self,
        final_F: np.ndarray | None = None,
        final_stats: dict[str, Any] | None = None,
    ) -> None:
        """Called once at the end of the run."""
        ...


class NoOpObserver:
    """Default no-op implementation."""

    def on_start(self, ctx: RunContext) -> None:
        return None

    def on_evaluation(self, x: np.ndarray, f: np.ndarray) -> None:
        return None

    def on_generation(
        self,
        generation: int,
        F: np.ndarray | None = None,
        X: np.ndarray | None = None,
        stats: dict[str, Any] | None = None,
    ) -> None:
        return None

    def on_end(
        self,
        final_F: np.ndarray | None = None,
        final_stats: dict[str, Any] | None = None,
    ) -> None:
        return None

    def should_stop(self) -> bool:
        return False


__all__ = ["RunContext", "Observer", "NoOpObserver"]
