"""
moeadpy exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All moeadpy-specific exceptions inherit from MOEADError for easy catching.

Example:
    try:
        value = MOEAD(config).optimize(objectives, np.zeros(3))
    except MOEADError as e:
        print(f"Optimization failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class MOEADError(Exception):
    """
    Base exception for all moeadpy errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(MOEADError):
    """Raised when configuration is invalid or incomplete."""

    pass


class InvalidParameterError(ConfigurationError):
    """Raised when a tunable parameter is outside its admissible range."""

    def __init__(self, name: str, value: Any, expected: str) -> None:
        message = f"Invalid value for '{name}': {value!r}."
        suggestion = f"'{name}' must be {expected}"
        super().__init__(message, suggestion, {"parameter": name, "value": value})


class InvalidWeightsError(ConfigurationError):
    """Raised when a weight-vector file is malformed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        suggestion = "Weight files are CSV matrices with one non-negative row per subproblem, each summing to 1"
        super().__init__(message, suggestion, {"path": path})


# =============================================================================
# Problem Errors
# =============================================================================


class ProblemError(MOEADError):
    """Base class for problem-related errors."""

    pass


class ProblemDimensionError(ProblemError):
    """Raised when problem dimensions are invalid."""

    def __init__(
        self,
        message: str,
        n_var: int | None = None,
        n_obj: int | None = None,
    ) -> None:
        suggestion = "Check problem dimensions: n_var (variables), n_obj (objectives)"
        super().__init__(message, suggestion, {"n_var": n_var, "n_obj": n_obj})


class BoundsError(ProblemError):
    """Raised when bounds are invalid or inconsistent."""

    def __init__(self, message: str) -> None:
        suggestion = "Bounds must have length 1 or n_var, and lower_bound <= upper_bound for all variables"
        super().__init__(message, suggestion)


# =============================================================================
# Runtime Errors
# =============================================================================


class OptimizationError(MOEADError):
    """Raised when optimization fails during execution."""

    pass


class EvaluationError(OptimizationError):
    """Raised when objective evaluation fails."""

    def __init__(self, message: str, solution: Any = None) -> None:
        suggestion = "Check your objective functions for errors"
        super().__init__(message, suggestion, {"solution": solution})


class StopOptimization(Exception):
    """Raised by a callback to request that the run stops after the current generation."""

    pass


__all__ = [
    # Base
    "MOEADError",
    # Configuration
    "ConfigurationError",
    "InvalidParameterError",
    "InvalidWeightsError",
    # Problem
    "ProblemError",
    "ProblemDimensionError",
    "BoundsError",
    # Runtime
    "OptimizationError",
    "EvaluationError",
    # Control flow
    "StopOptimization",
]
