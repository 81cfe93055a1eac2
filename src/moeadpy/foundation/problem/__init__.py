"""Objective composition and benchmark problems."""

from .base import Problem
from .fonseca_fleming import FonsecaFlemingProblem
from .schaffer import SchafferN1Problem
from .types import ObjectiveFunction, ObjectiveSet, ProblemProtocol

__all__ = [
    "FonsecaFlemingProblem",
    "ObjectiveFunction",
    "ObjectiveSet",
    "Problem",
    "ProblemProtocol",
    "SchafferN1Problem",
]
