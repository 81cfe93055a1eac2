from __future__ import annotations

from typing import Any, Mapping

import numpy as np


class OptimizationResult:
    """Simple container returned by optimize() and MOEAD.result()."""

    def __init__(self, payload: Mapping[str, Any]):
        self.X: np.ndarray = payload["X"]
        self.F: np.ndarray = payload["F"]
        self.value: float = float(payload["value"])
        self.generations: int = int(payload.get("generations", 0))
        self.evaluations: int = int(payload.get("evaluations", 0))
        self.ideal: np.ndarray | None = payload.get("ideal")
        self.weights: np.ndarray | None = payload.get("weights")
        self.stopped_early: bool = bool(payload.get("stopped_early", False))
        self.data = dict(payload)

    def __len__(self) -> int:
        return int(self.X.shape[0])

    def __repr__(self) -> str:
        return (
            f"OptimizationResult(front_size={len(self)}, value={self.value:.6g}, "
            f"generations={self.generations}, evaluations={self.evaluations})"
        )


__all__ = ["OptimizationResult"]
