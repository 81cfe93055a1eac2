"""Optimization engine."""
