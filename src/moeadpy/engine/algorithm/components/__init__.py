"""Reusable building blocks of the MOEA/D engine."""

from .archive import ParetoArchive
from .hooks import CallbackList
from .weight_vectors import WEIGHT_METHODS, load_or_generate_weight_vectors

__all__ = [
    "CallbackList",
    "ParetoArchive",
    "WEIGHT_METHODS",
    "load_or_generate_weight_vectors",
]
