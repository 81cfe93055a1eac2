"""Pareto dominance utilities."""

from .pareto import dominated_mask, dominates, dominators_mask, pareto_filter

__all__ = ["dominates", "dominated_mask", "dominators_mask", "pareto_filter"]
