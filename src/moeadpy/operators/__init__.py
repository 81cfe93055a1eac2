"""Variation operators."""

from .real import Crossover, GaussianMutation, Mutation, UniformCrossover

__all__ = ["Crossover", "GaussianMutation", "Mutation", "UniformCrossover"]
