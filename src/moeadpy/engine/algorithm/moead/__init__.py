"""
MOEA/D algorithm module.

This package provides the MOEA/D (Multi-Objective Evolutionary Algorithm based on
Decomposition) implementation with modular components:
- `moead.py`: main MOEAD class (optimize/step loop)
- `initialization.py`: validation and run setup
- `state.py`: MOEADState + result building
- `helpers.py`: Tchebycheff scalarization + neighbourhood update

References:
    Q. Zhang and H. Li, "MOEA/D: A Multiobjective Evolutionary Algorithm Based on
    Decomposition," IEEE Trans. Evolutionary Computation, vol. 11, no. 6, 2007.
"""

from .moead import MOEAD, RunStatus
from .helpers import (
    ZERO_WEIGHT_EPSILON,
    compute_neighbors,
    resolve_neighbor_size,
    tchebycheff,
    update_neighborhood,
)
from .initialization import initialize_moead_run, initialize_population
from .state import MOEADState, build_moead_result, initial_ideal_point

__all__ = [
    "MOEAD",
    "RunStatus",
    # Helpers
    "ZERO_WEIGHT_EPSILON",
    "compute_neighbors",
    "resolve_neighbor_size",
    "tchebycheff",
    "update_neighborhood",
    # Setup
    "initialize_moead_run",
    "initialize_population",
    # State
    "MOEADState",
    "build_moead_result",
    "initial_ideal_point",
]
