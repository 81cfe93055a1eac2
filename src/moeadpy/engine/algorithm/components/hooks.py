"""
Callback dispatch for the optimization loop.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

import numpy as np

from moeadpy.foundation.exceptions import StopOptimization
from moeadpy.foundation.observer import RunContext


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class CallbackList:
    """
    Fan out loop events to user callbacks and collect stop requests.

    Callbacks may implement any subset of the ``Observer`` methods. A stop is
    requested when a hook returns a truthy value, when ``should_stop()``
    returns True, or when a hook raises ``StopOptimization``. The request is
    only recorded here; the driver honours it at the next generation boundary.
    """

    def __init__(self, callbacks: Iterable[Any] = ()) -> None:
        self.callbacks = [cb for cb in callbacks if cb is not None]
        self.stop_requested = False

    def __len__(self) -> int:
        return len(self.callbacks)

    def _dispatch(self, method: str, *args: Any, **kwargs: Any) -> bool:
        for cb in self.callbacks:
            hook = getattr(cb, method, None)
            if not callable(hook):
                continue
            try:
                result = hook(*args, **kwargs)
            except StopOptimization as exc:
                _logger().info("Callback %s requested stop from %s: %s", type(cb).__name__, method, exc)
                self.stop_requested = True
                continue
            if result:
                _logger().debug("Callback %s requested stop from %s", type(cb).__name__, method)
                self.stop_requested = True
        return self.stop_requested

    def on_start(self, ctx: RunContext) -> bool:
        self._dispatch("on_start", ctx)
        return self.should_stop()

    def on_evaluation(self, x: np.ndarray, f: np.ndarray) -> bool:
        if not self.callbacks:
            return self.stop_requested
        return self._dispatch("on_evaluation", x, f)

    def on_generation(
        self,
        generation: int,
        F: np.ndarray | None = None,
        X: np.ndarray | None = None,
        stats: dict[str, Any] | None = None,
    ) -> bool:
        self._dispatch("on_generation", generation, F=F, X=X, stats=stats)
        return self.should_stop()

    def on_end(
        self,
        final_F: np.ndarray | None = None,
        final_stats: dict[str, Any] | None = None,
    ) -> None:
        for cb in self.callbacks:
            hook = getattr(cb, "on_end", None)
            if callable(hook):
                hook(final_F=final_F, final_stats=final_stats)

    def should_stop(self) -> bool:
        if self.stop_requested:
            return True
        return self._dispatch("should_stop")


__all__ = ["CallbackList"]
