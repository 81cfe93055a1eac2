from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Optional

import numpy as np

from moeadpy.foundation.exceptions import BoundsError, ConfigurationError, InvalidParameterError

from .components.weight_vectors import WEIGHT_METHODS


class _SerializableConfig:
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


@dataclass
class MOEADConfig(_SerializableConfig):
    """
    Tunable parameters of a MOEA/D run.

    Fields are plain attributes and may be changed between runs; they are
    checked by :meth:`validate` at the start of every ``optimize`` call.
    """

    pop_size: int = 100
    crossover_prob: float = 0.6
    mutation_prob: float = 0.3
    mutation_strength: float = 1e-3
    neighbourhood_size: int = 50
    lower_bound: List[float] = field(default_factory=lambda: [0.0])
    upper_bound: List[float] = field(default_factory=lambda: [1.0])
    max_generations: int = 100
    weights: str = "lattice"
    weight_divisions: Optional[int] = None
    weight_path: Optional[str] = None
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MOEADConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown MOEA/D configuration keys: {', '.join(unknown)}",
                suggestion=f"Valid keys: {', '.join(sorted(known))}",
            )
        return cls(**data)

    @classmethod
    def from_json(cls, text: str) -> "MOEADConfig":
        return cls.from_dict(json.loads(text))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["lower_bound"] = np.asarray(self.lower_bound, dtype=float).reshape(-1).tolist()
        data["upper_bound"] = np.asarray(self.upper_bound, dtype=float).reshape(-1).tolist()
        return data

    def replace(self, **changes: Any) -> "MOEADConfig":
        data = self.to_dict()
        data.update(changes)
        return MOEADConfig.from_dict(data)

    def validate(self, n_var: int) -> tuple[np.ndarray, np.ndarray]:
        """Check every parameter and return the bounds broadcast to ``n_var``."""
        if int(self.pop_size) != self.pop_size or self.pop_size < 2:
            raise InvalidParameterError("pop_size", self.pop_size, "an integer >= 2")
        for name in ("crossover_prob", "mutation_prob"):
            value = getattr(self, name)
            if not 0.0 <= float(value) <= 1.0:
                raise InvalidParameterError(name, value, "a probability in [0, 1]")
        if not np.isfinite(self.mutation_strength) or self.mutation_strength < 0.0:
            raise InvalidParameterError("mutation_strength", self.mutation_strength, "a finite value >= 0")
        if int(self.neighbourhood_size) != self.neighbourhood_size or self.neighbourhood_size < 1:
            raise InvalidParameterError("neighbourhood_size", self.neighbourhood_size, "an integer >= 1")
        if int(self.max_generations) != self.max_generations or self.max_generations < 0:
            raise InvalidParameterError("max_generations", self.max_generations, "an integer >= 0")
        if str(self.weights).lower() not in WEIGHT_METHODS:
            raise InvalidParameterError("weights", self.weights, f"one of {', '.join(WEIGHT_METHODS)}")
        if self.weight_divisions is not None and self.weight_divisions < 1:
            raise InvalidParameterError("weight_divisions", self.weight_divisions, "None or an integer >= 1")
        return resolve_bounds(self.lower_bound, self.upper_bound, n_var)


def resolve_bounds(lower: Any, upper: Any, n_var: int) -> tuple[np.ndarray, np.ndarray]:
    """Broadcast length-1 bounds to ``n_var`` and check their consistency."""
    xl = np.asarray(lower, dtype=float).reshape(-1)
    xu = np.asarray(upper, dtype=float).reshape(-1)
    for name, arr in (("lower_bound", xl), ("upper_bound", xu)):
        if arr.size not in (1, n_var):
            raise BoundsError(f"{name} has {arr.size} entries but the decision space has {n_var} variables.")
        if not np.all(np.isfinite(arr)):
            raise BoundsError(f"{name} must be finite.")
    xl = np.broadcast_to(xl, (n_var,)).copy()
    xu = np.broadcast_to(xu, (n_var,)).copy()
    if np.any(xl > xu):
        bad = np.flatnonzero(xl > xu).tolist()
        raise BoundsError(f"lower_bound exceeds upper_bound for variables {bad}.")
    return xl, xu


__all__ = ["MOEADConfig", "resolve_bounds"]
